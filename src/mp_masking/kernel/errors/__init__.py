"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── MaskingError           (masking.py)
    │   ├── InvalidArgumentError
    │   └── CyclicValueError
    └── ConfigError            (mp_masking.config.validation)
"""

from mp_masking.kernel.errors.base import BaseError
from mp_masking.kernel.errors.masking import (
    CyclicValueError,
    InvalidArgumentError,
    MaskingError,
)

__all__ = [
    "BaseError",
    "CyclicValueError",
    "InvalidArgumentError",
    "MaskingError",
]
