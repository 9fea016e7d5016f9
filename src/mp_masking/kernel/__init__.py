"""Kernel – errors and value types shared by every layer."""

from mp_masking.kernel.errors import (
    BaseError,
    CyclicValueError,
    InvalidArgumentError,
    MaskingError,
)
from mp_masking.kernel.types import UInt

__all__ = [
    "BaseError",
    "CyclicValueError",
    "InvalidArgumentError",
    "MaskingError",
    "UInt",
]
