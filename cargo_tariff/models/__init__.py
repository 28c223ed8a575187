"""Model helpers, enumerations and exceptions."""

from .exceptions import (
    TariffError,
    InvalidFactor,
    InvalidValue,
    InvalidRule,
    InvalidDuty,
    DuplicateDutyCode,
    InvalidBorder,
    InvalidFraction,
    InvalidCargo,
    TariffConfigError,
)
from .enums import Factor
from .cargo import Cargo, Warehouse

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
    "Factor",
    "Cargo",
    "Warehouse",
]
