"""Masking errors — raised while a value is being masked.

The offending field is reported through :attr:`BaseError.field`
(``address.post_code``, ``items[2]``, ``extra['token']``), relative to the
value handed to ``mask``.  The traversal adds one segment per level while
the error propagates.
"""

from __future__ import annotations

from typing import Any

from mp_masking.kernel.errors.base import BaseError


class MaskingError(BaseError):
    """Base for every error raised by the masking engine."""

    default_code = "masking_error"


class InvalidArgumentError(MaskingError):
    """A rule's argument could not be parsed into the form the rule requires.

    Example: ``random`` with a non-numeric bound, or ``random100.x``.
    """

    default_code = "invalid_argument"

    def __init__(self, rule: str, argument: str, reason: str = "", **kwargs: Any) -> None:
        message = f"invalid argument {argument!r} for mask rule {rule!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, detail={"rule": rule, "argument": argument}, **kwargs)
        self.rule = rule
        self.argument = argument


class CyclicValueError(MaskingError):
    """A container or record was reached again while it was still being masked."""

    default_code = "cyclic_value"

    def __init__(self, type_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"cyclic reference to {type_name} instance; cannot mask self-referential values",
            detail={"type": type_name},
            **kwargs,
        )
        self.type_name = type_name


__all__ = ["CyclicValueError", "InvalidArgumentError", "MaskingError"]
