"""Shipment and location value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from cargo_tariff.utils.validation import (
    require_non_negative,
    require_optional_non_negative,
)
from .exceptions import InvalidCargo


@dataclass(frozen=True)
class Cargo:
    """Physical and fiscal attributes of one shipment.

    ``weight`` may be ``None``, in which case legs price the cargo by volume
    only. ``clearance_cost`` is a fixed amount added to the duty basis when
    the cargo crosses a border. Attributes are fixed after construction;
    only duty codes can be appended.
    """

    volume: float
    weight: Optional[float] = None
    clearance_cost: Optional[float] = None
    duty_codes: List[str] = field(default_factory=list)

    __hash__ = None  # duty_codes is a mutable list

    def __post_init__(self) -> None:
        require_non_negative(self.volume, "Cargo volume", InvalidCargo)
        require_optional_non_negative(self.weight, "Cargo weight", InvalidCargo)
        require_optional_non_negative(self.clearance_cost, "Clearance cost", InvalidCargo)
        object.__setattr__(self, "duty_codes", list(self.duty_codes))

    def add_duty_code(self, code: str) -> None:
        """Append a duty code; it is resolved against a border only at crossing time."""
        self.duty_codes.append(code)


@dataclass(frozen=True)
class Warehouse:
    longitude: float
    latitude: float


__all__ = ["Cargo", "Warehouse"]
