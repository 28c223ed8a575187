from __future__ import annotations

from typing import Any, Type


def is_number(value: Any) -> bool:
    """Return ``True`` for ints and floats, excluding ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_non_negative(value: Any, name: str, error: Type[Exception]) -> float:
    if not is_number(value) or value < 0:
        raise error(f"{name} must be a non-negative number, got {value!r}")
    return value


def require_optional_non_negative(value: Any, name: str, error: Type[Exception]) -> float | None:
    if value is None:
        return None
    return require_non_negative(value, name, error)


__all__ = ["is_number", "require_non_negative", "require_optional_non_negative"]
