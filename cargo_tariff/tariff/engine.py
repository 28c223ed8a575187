"""Leg pricing engine.

A leg charges the greater of its volume and weight prices. When the leg
crosses a border, the cargo's duties are assessed on a declared value made
of the far-side share of the leg price, the cargo's clearance cost and the
value accumulated on previous legs. The far-side share of the resulting
price becomes the accumulated value for the next leg.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from cargo_tariff.models.cargo import Cargo, Warehouse
from cargo_tariff.models.exceptions import (
    InvalidBorder,
    InvalidCargo,
    InvalidFraction,
    InvalidValue,
)
from cargo_tariff.utils.validation import is_number, require_non_negative
from .border import Border

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TripPrice:
    price: float
    accumulated: float


class Leg:
    """Priced segment between two warehouses, optionally crossing a border."""

    def __init__(
        self,
        from_warehouse: Warehouse,
        to_warehouse: Warehouse,
        *,
        price_per_volume_unit: float = 0,
        price_per_weight_unit: float = 0,
    ):
        self.from_warehouse = from_warehouse
        self.to_warehouse = to_warehouse
        self.price_per_volume_unit = 0
        self.price_per_weight_unit = 0
        self.border: Optional[Border] = None
        self.border_crossing_fraction = 0
        self.set_price_per_volume_unit(price_per_volume_unit)
        self.set_price_per_weight_unit(price_per_weight_unit)

    def set_price_per_volume_unit(self, price: float) -> None:
        self.price_per_volume_unit = require_non_negative(price, "Price per volume unit", InvalidValue)

    def set_price_per_weight_unit(self, price: float) -> None:
        self.price_per_weight_unit = require_non_negative(price, "Price per weight unit", InvalidValue)

    def set_border(self, border: Border, fraction: float) -> None:
        """Attach a border crossing.

        ``fraction`` runs from 0 (the border sits at the origin warehouse) to
        1 (at the destination warehouse).
        """
        if not is_number(fraction) or not 0 <= fraction <= 1:
            raise InvalidFraction(f"Border crossing fraction must be from 0 to 1, got {fraction!r}")
        if not isinstance(border, Border):
            raise InvalidBorder(f"Invalid border: {border!r}")
        if not len(border):
            logger.warning("Border %s has no duties registered", border.name or "<unnamed>")
        self.border = border
        self.border_crossing_fraction = fraction

    @property
    def crosses_border(self) -> bool:
        return self.border is not None

    def base_price(self, cargo: Cargo) -> float:
        price_by_volume = self.price_per_volume_unit * cargo.volume
        if cargo.weight is None:
            return price_by_volume
        price_by_weight = self.price_per_weight_unit * cargo.weight
        return max(price_by_volume, price_by_weight)

    def get_trip_price(self, cargo: Cargo, accumulated: float = 0) -> TripPrice:
        """Price ``cargo`` over this leg.

        ``accumulated`` is the fiscal basis carried over from previous legs of
        the same shipment. The returned ``accumulated`` must be passed to the
        next leg.
        """
        if not isinstance(cargo, Cargo):
            raise InvalidCargo(f"Invalid cargo: {cargo!r}")

        price = self.base_price(cargo)

        if self.border is None:
            logger.debug("Domestic leg: base price %s", price)
            return TripPrice(price=price, accumulated=accumulated + price)

        fraction = self.border_crossing_fraction
        duty_basis = fraction * price + (cargo.clearance_cost or 0) + accumulated
        base = price
        for code in cargo.duty_codes:
            price += self.border.get_cross_price(code, duty_basis)
        logger.debug(
            "Border leg %s: basis %s, duties %s, price %s",
            self.border.name or "<unnamed>",
            duty_basis,
            price - base,
            price,
        )
        return TripPrice(price=price, accumulated=(1 - fraction) * price)

    def __repr__(self) -> str:
        return (
            f"Leg({self.from_warehouse!r} -> {self.to_warehouse!r}, "
            f"per_volume={self.price_per_volume_unit}, per_weight={self.price_per_weight_unit}, "
            f"border={self.border!r}, fraction={self.border_crossing_fraction})"
        )


__all__ = ["Leg", "TripPrice"]
