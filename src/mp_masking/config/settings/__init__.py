"""Config settings – environment-based masker configuration."""
from mp_masking.config.settings.base import Settings
from mp_masking.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_masking.config.settings.masker import (
    DEFAULT_FIXED_LENGTH,
    DEFAULT_MASK_CHAR,
    DEFAULT_TAG_NAME,
    MaskerSettings,
)

__all__ = [
    "DEFAULT_FIXED_LENGTH",
    "DEFAULT_MASK_CHAR",
    "DEFAULT_TAG_NAME",
    "EnvSettingsLoader",
    "MaskerSettings",
    "Settings",
    "SettingsLoader",
]
