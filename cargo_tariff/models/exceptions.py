"""Exceptions raised by the pricing engine.

Every error is a configuration or precondition violation detected
synchronously; nothing here is retryable.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class TariffError(Exception):
    """Base class for all tariff engine errors."""

    def __init__(self, message: str):
        super().__init__(message)
        logger.error(message)


class InvalidFactor(TariffError):
    """Rule factor is neither multiply nor add."""


class InvalidValue(TariffError):
    """A numeric argument is missing, non-numeric or out of range."""


class InvalidRule(TariffError):
    """Object passed to a duty is not a :class:`Rule`."""


class InvalidDuty(TariffError):
    """Object passed to a border is not a :class:`Duty`."""


class DuplicateDutyCode(TariffError):
    """Duty code is already registered on the border."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"A duty with code '{code}' is already set in the border")


class InvalidBorder(TariffError):
    """Object passed to a leg as its border is not a :class:`Border`."""


class InvalidFraction(TariffError):
    """Border crossing fraction is not a number from 0 to 1."""


class InvalidCargo(TariffError):
    """Object is not a :class:`Cargo`, or a cargo attribute is invalid."""


class TariffConfigError(TariffError):
    """Tariff configuration file is missing, unreadable or malformed."""


__all__ = [
    "TariffError",
    "InvalidFactor",
    "InvalidValue",
    "InvalidRule",
    "InvalidDuty",
    "DuplicateDutyCode",
    "InvalidBorder",
    "InvalidFraction",
    "InvalidCargo",
    "TariffConfigError",
]
