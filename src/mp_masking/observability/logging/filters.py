"""Observability – PiiLogFilter for stdlib logging."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mp_masking.application.masking import Masker

__all__ = ["PiiLogFilter"]


class PiiLogFilter(logging.Filter):
    """Masks ``record.msg`` (when it is a dict) and ``record.args`` before emission.

    Positional args are masked one by one, so a dataclass passed to
    ``logger.info("user %s", user)`` is rendered from its masked copy.
    Uses the default masker when *masker* is ``None``.
    """

    def __init__(self, masker: Masker | None = None, name: str = "") -> None:
        super().__init__(name)
        self._masker = masker

    @property
    def masker(self) -> Masker:
        if self._masker is None:
            from mp_masking.application.masking import default_masker

            return default_masker()
        return self._masker

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        masker = self.masker
        if isinstance(record.msg, dict):
            record.msg = masker.mask(record.msg)
        if isinstance(record.args, dict):
            record.args = masker.mask(record.args)
        elif isinstance(record.args, tuple):
            masked: list[Any] = [masker.mask(arg) for arg in record.args]
            record.args = tuple(masked)
        return True
