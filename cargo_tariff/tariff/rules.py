from __future__ import annotations

from cargo_tariff.models.enums import Factor
from cargo_tariff.models.exceptions import InvalidValue
from cargo_tariff.utils.validation import is_number


class Rule:
    """Single arithmetic step of a duty: multiply by or add ``value``."""

    __slots__ = ("_factor", "_value")

    def __init__(self, factor: Factor | str, value: float):
        self._factor = Factor.from_str(factor)
        if not is_number(value):
            raise InvalidValue(f"Invalid rule value: {value!r}")
        self._value = value

    @property
    def factor(self) -> Factor:
        return self._factor

    @property
    def value(self) -> float:
        return self._value

    def calculate(self, value: float) -> float:
        if self._factor is Factor.MULTIPLY:
            return value * self._value
        return value + self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented
        return self._factor is other._factor and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._factor, self._value))

    def __repr__(self) -> str:
        return f"Rule({self._factor.value!r}, {self._value!r})"


__all__ = ["Rule"]
