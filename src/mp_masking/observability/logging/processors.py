"""Observability – structlog processors and get_logger helper.

MaskingProcessor — masks every structlog event dict with a Masker.
get_logger(name) — returns a bound structlog logger.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mp_masking.application.masking import Masker


class MaskingProcessor:
    """structlog processor that masks the event dict.

    Keys of the event dict are matched against the masker's registered
    field rules, and dataclass values are masked by their annotations::

        import structlog
        from mp_masking.observability.logging import MaskingProcessor

        masker = Masker()
        masker.register_field_rule("password", "fixed")
        structlog.configure(processors=[MaskingProcessor(masker), ...])

    Uses the default masker when *masker* is ``None``.
    """

    def __init__(self, masker: Masker | None = None) -> None:
        self._masker = masker

    @property
    def masker(self) -> Masker:
        if self._masker is None:
            from mp_masking.application.masking import default_masker

            return default_masker()
        return self._masker

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self.masker.mask(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MaskingProcessor", "get_logger"]
