"""Errors raised while loading or validating masker settings.

:attr:`~mp_masking.kernel.errors.BaseError.field` names the environment
variable (or settings attribute) at fault.
"""
from __future__ import annotations

from mp_masking.kernel.errors import BaseError


class ConfigError(BaseError):
    """Masker configuration could not be loaded or is inconsistent."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is not set and has no default",
            detail={"setting": setting_name},
            field=setting_name,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used (bad number, negative length, ...)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
            field=setting_name,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
