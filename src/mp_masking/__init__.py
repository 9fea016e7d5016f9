"""
mp_masking – masked deep copies of in-memory data.

Import path convention::

    from mp_masking import Masker, mask, register_field_rule
    from mp_masking.kernel.errors import InvalidArgumentError
    from mp_masking.observability.logging import PiiLogFilter

Quick start::

    from dataclasses import dataclass, field
    import mp_masking

    @dataclass
    class User:
        id: str
        name: str = field(metadata={"mask": "filled"})

    mp_masking.mask(User("123456", "Usagi"))   # User(id='123456', name='*****')
"""

from mp_masking.application.masking import (
    MASK_FILLED,
    MASK_FIXED,
    MASK_HASH,
    MASK_RANDOM,
    MASK_ZERO,
    Masker,
    TargetKind,
    clear_cache,
    default_masker,
    mask,
    mask_float,
    mask_signed_int,
    mask_text,
    mask_unsigned_int,
    register_field_rule,
    register_handler,
    set_cache_enabled,
    set_mask_char,
    set_tag_name,
)
from mp_masking.kernel.errors import CyclicValueError, InvalidArgumentError, MaskingError
from mp_masking.kernel.types import UInt

__version__ = "0.1.0"
__all__ = [
    "CyclicValueError",
    "InvalidArgumentError",
    "MASK_FILLED",
    "MASK_FIXED",
    "MASK_HASH",
    "MASK_RANDOM",
    "MASK_ZERO",
    "Masker",
    "MaskingError",
    "TargetKind",
    "UInt",
    "__version__",
    "clear_cache",
    "default_masker",
    "mask",
    "mask_float",
    "mask_signed_int",
    "mask_text",
    "mask_unsigned_int",
    "register_field_rule",
    "register_handler",
    "set_cache_enabled",
    "set_mask_char",
    "set_tag_name",
]
