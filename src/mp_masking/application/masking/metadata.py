"""Per-type field metadata for record-like values.

Python already knows how to enumerate the fields of a dataclass or a named
tuple; a :class:`TypeDescriptorProvider` turns that knowledge into an
ordered tuple of :class:`FieldDescriptor` and knows how to build a new
instance from masked field values.  :class:`TypeMetadataCache` remembers
the result per class.

Field visibility follows the leading-underscore convention: ``_token`` is
not exported and never appears populated in masked output.
"""
from __future__ import annotations

import dataclasses
import threading
import typing
import weakref
from collections.abc import Mapping
from typing import Any, Callable, Protocol, runtime_checkable

from mp_masking.observability.logging import get_logger

__all__ = [
    "DataclassProvider",
    "FieldDescriptor",
    "NamedTupleProvider",
    "TypeDescriptorProvider",
    "TypeMetadata",
    "TypeMetadataCache",
]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Cached description of one field of a record type."""

    name: str
    exported: bool
    rule: str = ""
    # Produces the output value of an unexported field; None means "zero of the current value".
    default: Callable[[], Any] | None = None


@runtime_checkable
class TypeDescriptorProvider(Protocol):
    """Port: describe and rebuild one family of record types."""

    def supports(self, cls: type) -> bool: ...

    def describe(self, cls: type, tag_name: str) -> tuple[FieldDescriptor, ...]: ...

    def rebuild(self, cls: type, values: dict[str, Any]) -> Any: ...


@dataclasses.dataclass(frozen=True, slots=True)
class TypeMetadata:
    cls: type
    provider: TypeDescriptorProvider
    fields: tuple[FieldDescriptor, ...]

    def rebuild(self, values: dict[str, Any]) -> Any:
        return self.provider.rebuild(self.cls, values)


def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.debug("masking.type_hints_unresolved", type=cls.__qualname__, error=str(exc))
        return {}


def _annotated_rule(hint: Any, tag_name: str) -> str:
    """Rule carried by ``Annotated[T, {tag_name: rule}]``, or ``""``."""
    if not tag_name or typing.get_origin(hint) is not typing.Annotated:
        return ""
    for extra in hint.__metadata__:
        if isinstance(extra, Mapping) and tag_name in extra:
            return str(extra[tag_name])
    return ""


class DataclassProvider:
    """Describes ``@dataclass`` types.

    Rules are read from ``field(metadata={"mask": "filled"})`` or, failing
    that, from an ``Annotated[str, {"mask": "filled"}]`` hint.
    """

    def supports(self, cls: type) -> bool:
        return dataclasses.is_dataclass(cls)

    def describe(self, cls: type, tag_name: str) -> tuple[FieldDescriptor, ...]:
        hints = _type_hints(cls)
        descriptors: list[FieldDescriptor] = []
        for field in dataclasses.fields(cls):
            rule = ""
            if tag_name:
                rule = str(field.metadata.get(tag_name, "")) or _annotated_rule(
                    hints.get(field.name), tag_name
                )
            descriptors.append(
                FieldDescriptor(
                    name=field.name,
                    exported=not field.name.startswith("_"),
                    rule=rule,
                    default=self._default_of(field),
                )
            )
        return tuple(descriptors)

    def rebuild(self, cls: type, values: dict[str, Any]) -> Any:
        # Bypasses __init__/__post_init__ and frozen=True, like copy.copy does.
        instance = cls.__new__(cls)
        for name, value in values.items():
            object.__setattr__(instance, name, value)
        return instance

    @staticmethod
    def _default_of(field: dataclasses.Field[Any]) -> Callable[[], Any] | None:
        if field.default is not dataclasses.MISSING:
            default = field.default
            return lambda: default
        if field.default_factory is not dataclasses.MISSING:
            return field.default_factory
        return None


class NamedTupleProvider:
    """Describes ``collections.namedtuple`` / ``typing.NamedTuple`` types.

    Rules can only come from ``Annotated`` hints on ``typing.NamedTuple``.
    """

    def supports(self, cls: type) -> bool:
        return issubclass(cls, tuple) and hasattr(cls, "_fields") and hasattr(cls, "_make")

    def describe(self, cls: type, tag_name: str) -> tuple[FieldDescriptor, ...]:
        hints = _type_hints(cls) if tag_name else {}
        defaults: dict[str, Any] = getattr(cls, "_field_defaults", {})
        descriptors: list[FieldDescriptor] = []
        for name in cls._fields:  # type: ignore[attr-defined]
            default = None
            if name in defaults:
                value = defaults[name]
                default = lambda value=value: value  # noqa: E731
            descriptors.append(
                FieldDescriptor(
                    name=name,
                    exported=not name.startswith("_"),
                    rule=_annotated_rule(hints.get(name), tag_name),
                    default=default,
                )
            )
        return tuple(descriptors)

    def rebuild(self, cls: type, values: dict[str, Any]) -> Any:
        return cls._make(values[name] for name in cls._fields)  # type: ignore[attr-defined]


class TypeMetadataCache:
    """Thread-safe class → :class:`TypeMetadata` cache.

    Keyed by the class object itself, so two distinct classes that share a
    name never see each other's metadata.  Keys are held weakly; classes
    created at runtime can still be garbage collected.

    Parameters
    ----------
    providers:
        Ordered providers; the first one that supports a class describes it.
        Defaults to dataclasses then named tuples.
    enabled:
        When ``False`` metadata is recomputed on every :meth:`resolve`.
    """

    def __init__(
        self,
        providers: typing.Iterable[TypeDescriptorProvider] | None = None,
        enabled: bool = True,
    ) -> None:
        if providers is None:
            providers = (DataclassProvider(), NamedTupleProvider())
        self._providers: list[TypeDescriptorProvider] = list(providers)
        self._entries: weakref.WeakKeyDictionary[type, TypeMetadata | None] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()
        self.enabled = enabled

    def add_provider(self, provider: TypeDescriptorProvider) -> None:
        """Give *provider* precedence over the existing ones and drop cached entries."""
        with self._lock:
            self._providers.insert(0, provider)
            self._entries.clear()

    def resolve(self, cls: type, tag_name: str) -> TypeMetadata | None:
        """Metadata for *cls*, or ``None`` when no provider treats it as a record."""
        if not self.enabled:
            return self._compute(cls, tag_name)
        with self._lock:
            try:
                return self._entries[cls]
            except KeyError:
                pass
        metadata = self._compute(cls, tag_name)
        with self._lock:
            self._entries[cls] = metadata
        return metadata

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _compute(self, cls: type, tag_name: str) -> TypeMetadata | None:
        for provider in tuple(self._providers):
            if provider.supports(cls):
                fields = provider.describe(cls, tag_name)
                logger.debug(
                    "masking.metadata_resolved",
                    type=cls.__qualname__,
                    fields=len(fields),
                    provider=type(provider).__name__,
                )
                return TypeMetadata(cls=cls, provider=provider, fields=fields)
        return None
