from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]

TWOPL = Decimal("0.01")


def round_money(value: Number) -> float:
    """Round a monetary value half-up to two decimals using ``Decimal``."""
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    return float(d.quantize(TWOPL, rounding=ROUND_HALF_UP))


def format_money(value: Number, code: str | None = None) -> str:
    """Format with comma thousands separators and an optional currency code."""
    s = f"{round_money(value):,.2f}"
    return f"{s} {code}" if code else s


__all__ = ["round_money", "format_money"]
