"""Conversions from raw driver values to record field types."""
from decimal import Decimal
from typing import Any

_TRUE_STRINGS = {"true"}
_FALSE_STRINGS = {"false"}

def to_int(value: Any) -> int:
    """
    Numbers are rounded half-to-even (4.5 -> 4, 5.5 -> 6); sign is kept.
    """
    if value is None:
        raise TypeError("cannot convert NULL to int")
    if isinstance(value, (bytes, bytearray)):
        # MySQL BIT(n) columns arrive as big-endian bytes
        return int.from_bytes(value, "big")
    if isinstance(value, (float, Decimal)):
        return int(round(value))
    return int(value)

def to_bool(value: Any) -> bool:
    """
    Accepts booleans, numbers (non-zero is true), BIT bytes and the strings
    "true"/"false" in any case.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        raise TypeError("cannot convert NULL to bool")
    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big") != 0
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"{value!r} is not a recognised boolean value")
