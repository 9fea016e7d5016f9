"""Built-in masking transformations.

Pure functions; the :class:`~mp_masking.application.masking.masker.Masker`
binds its configuration (mask character, fixed length, RNG) and registers
them as handlers.  Text lengths are counted in code points.
"""
from __future__ import annotations

import collections
import hashlib
import math
import random
from enum import Enum
from typing import Any, Callable

from mp_masking.kernel.errors import InvalidArgumentError
from mp_masking.kernel.types import UInt

from mp_masking.application.masking.rules import MASK_FILLED, MASK_RANDOM

__all__ = [
    "filled",
    "fixed",
    "hash_text",
    "random_float",
    "random_int",
    "zero_value",
]


def _parse_count(rule: str, arg: str) -> int:
    try:
        count = int(arg)
    except ValueError as exc:
        raise InvalidArgumentError(rule, arg, "expected an integer", cause=exc) from exc
    if count < 0:
        raise InvalidArgumentError(rule, arg, "must not be negative")
    return count


def _parse_bound(rule: str, arg: str) -> int:
    bound = _parse_count(rule, arg)
    if bound == 0:
        raise InvalidArgumentError(rule, arg, "must be positive")
    return bound


def filled(arg: str, value: str, mask_char: str) -> str:
    """Replace *value* with mask characters.

    Without *arg* the result is as long as *value*; with ``arg = "N"`` it is
    exactly N characters.  Empty input stays empty.
    """
    if arg:
        count = _parse_count(MASK_FILLED, arg)
        if value == "":
            return ""
        return mask_char * count
    return mask_char * len(value)


def fixed(value: str, mask_char: str, length: int) -> str:
    """Replace non-empty *value* with *length* mask characters."""
    if value == "":
        return ""
    return mask_char * length


def hash_text(value: str) -> str:
    """Lower-case hex SHA-1 digest of the UTF-8 bytes of *value*."""
    if value == "":
        return ""
    return hashlib.sha1(value.encode("utf-8")).hexdigest()


def random_int(arg: str, rng: random.Random) -> int:
    """Uniform integer in ``[0, N)`` for ``arg = "N"``."""
    return rng.randrange(_parse_bound(MASK_RANDOM, arg))


def random_float(arg: str, rng: random.Random) -> float:
    """Uniform float in ``[0, N)`` truncated to M digits for ``arg = "N.M"``.

    ``"N"`` alone yields a whole number.
    """
    bound_text, _, digits_text = arg.partition(".")
    bound = _parse_bound(MASK_RANDOM, bound_text)
    digits = _parse_count(MASK_RANDOM, digits_text) if digits_text else 0
    scale = 10 ** digits
    # Truncate instead of round so the result never reaches the bound.
    return math.floor(rng.random() * bound * scale) / scale


def zero_value(value: Any, rebuild: Callable[[Any], Any] | None = None) -> Any:
    """Zero of *value*'s runtime type.

    Dicts, lists, sets and deques become ``None``; plain tuples keep their
    length with zeroed elements.  *rebuild* produces the zeroed form of a
    record (dataclass or named tuple) and is supplied by the masker, which
    knows the registered type descriptor providers.
    """
    if value is None:
        return None
    if rebuild is not None:
        zeroed = rebuild(value)
        if zeroed is not NotImplemented:
            return zeroed
    if isinstance(value, Enum):
        return None
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return ""
    if isinstance(value, UInt):
        return UInt(0)
    if isinstance(value, int):
        return 0
    if isinstance(value, float):
        return 0.0
    if isinstance(value, bytes):
        return b""
    if isinstance(value, bytearray):
        return bytearray()
    if type(value) is tuple:
        return tuple(zero_value(item, rebuild) for item in value)
    if isinstance(value, (dict, list, set, frozenset, collections.deque)):
        return None
    return None
