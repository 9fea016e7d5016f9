"""Config – settings, loaders and validation errors."""

from mp_masking.config.settings import EnvSettingsLoader, MaskerSettings, Settings, SettingsLoader
from mp_masking.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MaskerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
