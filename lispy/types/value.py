"""Variant-level helpers shared by every Lispy value.

Numbers and strings are plain Python ``float``/``str`` and are immutable, so
copying them is the identity. Every other value class carries a ``type_name``
class attribute and a ``copy()`` method.
"""

from __future__ import annotations

from lispy import LispValue


def is_number(value: LispValue) -> bool:
    """True for Lispy Numbers; bools are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: LispValue) -> str:
    """Name of the variant, as used in error messages."""
    if is_number(value):
        return "Number"
    if isinstance(value, str):
        return "String"
    return getattr(type(value), "type_name", "Unknown")


def copy_value(value: LispValue) -> LispValue:
    """Deep copy a value before it is stored or duplicated."""
    if is_number(value) or isinstance(value, str):
        return value
    return value.copy()


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; values of different variants are never equal."""
    if type_name(a) != type_name(b):
        return False
    return a == b
