"""Root error class for the mp-masking error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error can point at the field it concerns: a record field or dict
    key while masking, an environment variable while loading settings.
    Masking builds that path from the innermost segment outwards with
    :meth:`add_path_segment`.

    Args:
        message: Human-readable description; never contains masked values.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context for logs.
        cause: Original exception that triggered this error.
        field: Initial path segment, when already known.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
        self._segments: list[str] = [field] if field else []

    @property
    def field(self) -> str | None:
        """``accounts[0].balance``-style path, or ``None``."""
        if not self._segments:
            return None
        path = ""
        for segment in self._segments:
            if path and not segment.startswith("["):
                path += "."
            path += segment
        return path

    def add_path_segment(self, segment: str) -> None:
        """Prepend *segment*: a field name or an index such as ``"[0]"``."""
        self._segments.insert(0, segment)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        if self.field is None:
            return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"field={self.field!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for structured logs; ``field`` only when known."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.field is not None:
            payload["field"] = self.field
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
