from __future__ import annotations

from enum import Enum

from .exceptions import InvalidFactor


class Factor(Enum):
    MULTIPLY = "*"
    ADD = "+"

    @classmethod
    def from_str(cls, raw: "Factor | str") -> "Factor":
        """Parse a factor token as written in tariff configs.

        Accepts a ``Factor`` member, the operator symbols ``"*"`` / ``"+"``
        or the words ``"multiply"`` / ``"add"`` (case-insensitive).
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            token = raw.strip().lower()
            if token in {"*", "multiply", "mul"}:
                return cls.MULTIPLY
            if token in {"+", "add"}:
                return cls.ADD
        raise InvalidFactor(f"Invalid factor: {raw!r}")


__all__ = ["Factor"]
