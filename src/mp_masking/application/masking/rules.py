from __future__ import annotations

from enum import Enum
from typing import Any, Callable, TypeVar

from mp_masking.kernel.types import UInt

__all__ = [
    "MASK_FILLED",
    "MASK_FIXED",
    "MASK_HASH",
    "MASK_RANDOM",
    "MASK_ZERO",
    "MaskHandler",
    "TargetKind",
]

MASK_ZERO = "zero"
MASK_FILLED = "filled"
MASK_FIXED = "fixed"
MASK_HASH = "hash"
MASK_RANDOM = "random"

T = TypeVar("T")

# (argument, value) -> masked value; raises InvalidArgumentError on a bad argument.
MaskHandler = Callable[[str, T], T]


class TargetKind(str, Enum):
    """Category of value a handler is registered against."""

    TEXT = "text"
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    ANY = "any"

    @classmethod
    def of(cls, value: Any) -> "TargetKind":
        """Scalar kind of *value*; :attr:`ANY` for everything else."""
        if isinstance(value, (bool, Enum)):
            return cls.ANY
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, UInt):
            return cls.UNSIGNED
        if isinstance(value, int):
            return cls.SIGNED
        if isinstance(value, float):
            return cls.FLOAT
        return cls.ANY
