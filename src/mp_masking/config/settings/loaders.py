"""Config settings – loaders turning an environment into Settings instances."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from mp_masking.config.settings.base import Settings
from mp_masking.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_masking.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}")


_COERCERS: dict[Any, Callable[[str], Any]] = {
    bool: _to_bool,
    int: int,
    float: float,
    str: str,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Parameters
    ----------
    environ:
        Mapping to read from; defaults to :data:`os.environ` at load time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = environ.get(key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ):
                    raise MissingRequiredSettingError(key)
                continue
            coerce = _COERCERS.get(hints.get(field.name), str)
            try:
                kwargs[field.name] = coerce(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            settings = settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"cannot build {settings_class.__name__}: {exc}", cause=exc
            ) from exc
        logger.debug(
            "config.settings_loaded", settings=settings_class.__name__, overridden=sorted(kwargs)
        )
        return settings


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
