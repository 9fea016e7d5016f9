"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are filled from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which
    runs after construction and raises
    :class:`~mp_masking.config.validation.InvalidSettingValueError`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to check field values together."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``MASK_TAG_NAME``."""
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()


__all__ = ["Settings"]
