from __future__ import annotations

import logging
from typing import Dict, Iterable

from cargo_tariff.models.exceptions import DuplicateDutyCode, InvalidDuty
from .duty import Duty

logger = logging.getLogger(__name__)


class Border:
    """Registry of duties applied when a leg crosses this border."""

    def __init__(self, name: str | None = None, duties: Iterable[Duty] = ()):
        self.name = name
        self._duties: Dict[str, Duty] = {}
        for duty in duties:
            self.add_duty(duty)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._duties)

    def add_duty(self, duty: Duty) -> None:
        if not isinstance(duty, Duty):
            raise InvalidDuty(f"Invalid duty: {duty!r}")
        if duty.code in self._duties:
            raise DuplicateDutyCode(duty.code)
        self._duties[duty.code] = duty

    def has_duty(self, code: str) -> bool:
        return code in self._duties

    def get_cross_price(self, code: str, value: float) -> float:
        """Return the duty for ``code`` assessed on ``value``.

        Codes with no registered duty cost nothing.
        """
        duty = self._duties.get(code)
        if duty is None:
            logger.debug("No duty '%s' at border %s; treated as free", code, self.name or "<unnamed>")
            return 0
        return duty.calculate(value)

    def __contains__(self, code: object) -> bool:
        return code in self._duties

    def __len__(self) -> int:
        return len(self._duties)

    def __repr__(self) -> str:
        return f"Border({self.name!r}, codes={list(self._duties)!r})"


__all__ = ["Border"]
