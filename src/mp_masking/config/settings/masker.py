"""Config settings – MaskerSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_masking.config.settings.base import Settings
from mp_masking.config.validation import InvalidSettingValueError

DEFAULT_TAG_NAME = "mask"
DEFAULT_MASK_CHAR = "*"
DEFAULT_FIXED_LENGTH = 8


@dataclasses.dataclass
class MaskerSettings(Settings):
    """Configuration of one :class:`~mp_masking.application.masking.Masker`.

    Loaded from ``MASK_TAG_NAME``, ``MASK_MASK_CHAR``, ``MASK_CACHE_ENABLED``
    and ``MASK_FIXED_LENGTH`` by :class:`EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "MASK"

    tag_name: str = DEFAULT_TAG_NAME
    mask_char: str = DEFAULT_MASK_CHAR
    cache_enabled: bool = True
    fixed_length: int = DEFAULT_FIXED_LENGTH

    def _validate(self) -> None:
        if self.fixed_length < 0:
            raise InvalidSettingValueError(
                "fixed_length", self.fixed_length, "must be zero or positive"
            )


__all__ = [
    "DEFAULT_FIXED_LENGTH",
    "DEFAULT_MASK_CHAR",
    "DEFAULT_TAG_NAME",
    "MaskerSettings",
]
