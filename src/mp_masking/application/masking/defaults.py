"""Process-wide default :class:`Masker` and free functions delegating to it.

The default masker is created on first use.  Code that needs its own
configuration should create a :class:`Masker` instead of reconfiguring the
shared one.
"""
from __future__ import annotations

import threading
from typing import Any, TypeVar

from mp_masking.kernel.types import UInt

from mp_masking.application.masking.masker import Masker
from mp_masking.application.masking.rules import MaskHandler, TargetKind

__all__ = [
    "clear_cache",
    "default_masker",
    "mask",
    "mask_float",
    "mask_signed_int",
    "mask_text",
    "mask_unsigned_int",
    "register_field_rule",
    "register_handler",
    "reset_default_masker",
    "set_cache_enabled",
    "set_mask_char",
    "set_tag_name",
]

T = TypeVar("T")

_default: Masker | None = None
_default_lock = threading.Lock()


def default_masker() -> Masker:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Masker()
    return _default


def reset_default_masker() -> None:
    """Discard the default masker; the next call creates a fresh one."""
    global _default
    with _default_lock:
        _default = None


def mask(value: T) -> T:
    return default_masker().mask(value)


def mask_text(rule: str, value: str) -> str:
    return default_masker().mask_text(rule, value)


def mask_signed_int(rule: str, value: int) -> int:
    return default_masker().mask_signed_int(rule, value)


def mask_unsigned_int(rule: str, value: int) -> UInt:
    return default_masker().mask_unsigned_int(rule, value)


def mask_float(rule: str, value: float) -> float:
    return default_masker().mask_float(rule, value)


def register_field_rule(name: str, rule: str) -> None:
    default_masker().register_field_rule(name, rule)


def register_handler(kind: TargetKind, name: str, handler: MaskHandler[Any]) -> None:
    default_masker().register_handler(kind, name, handler)


def set_tag_name(name: str) -> None:
    default_masker().set_tag_name(name)


def set_mask_char(char: str) -> None:
    default_masker().set_mask_char(char)


def set_cache_enabled(enabled: bool) -> None:
    default_masker().set_cache_enabled(enabled)


def clear_cache() -> None:
    default_masker().clear_cache()
