"""Tariff rules, borders and the leg pricing engine."""

from .rules import Rule
from .duty import Duty
from .border import Border
from .engine import Leg, TripPrice
from .loader import build_borders, load_borders, load_tariff_config

__all__ = [
    "Rule",
    "Duty",
    "Border",
    "Leg",
    "TripPrice",
    "build_borders",
    "load_borders",
    "load_tariff_config",
]
