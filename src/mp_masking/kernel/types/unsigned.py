"""Unsigned integer value type."""

from __future__ import annotations

from typing import Any


class UInt(int):
    """Non-negative ``int``.

    Python has a single integer type; wrapping a value in ``UInt`` routes it
    to the unsigned handler table of a :class:`~mp_masking.application.masking.Masker`
    and keeps the masked result unsigned.
    """

    __slots__ = ()

    def __new__(cls, value: Any = 0) -> "UInt":
        instance = super().__new__(cls, value)
        if instance < 0:
            raise ValueError(f"UInt cannot be negative: {int(instance)}")
        return instance

    def __repr__(self) -> str:
        return f"UInt({int(self)})"


__all__ = ["UInt"]
