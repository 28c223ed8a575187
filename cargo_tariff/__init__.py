"""Freight leg pricing with cross-border duty assessment."""

from .models import (
    Cargo,
    DuplicateDutyCode,
    Factor,
    InvalidBorder,
    InvalidCargo,
    InvalidDuty,
    InvalidFactor,
    InvalidFraction,
    InvalidRule,
    InvalidValue,
    TariffConfigError,
    TariffError,
    Warehouse,
)
from .tariff import Border, Duty, Leg, Rule, TripPrice

__all__ = [
    "Cargo",
    "Warehouse",
    "Factor",
    "Rule",
    "Duty",
    "Border",
    "Leg",
    "TripPrice",
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
