"""Recursive masking engine.

:class:`Masker` walks an arbitrary value and returns a masked deep copy:

* ``str`` / ``int`` / :class:`~mp_masking.kernel.types.UInt` / ``float``
  leaves are handed to the handler registered for the effective rule;
* records (dataclasses, named tuples, or anything a registered
  :class:`~mp_masking.application.masking.metadata.TypeDescriptorProvider`
  understands) are rebuilt field by field;
* dicts, lists, tuples, sets and deques are rebuilt element by element.

The effective rule of a record field is its annotation under the active tag
name, else the rule registered for the field name.  Dict values take the
rule registered for their ``str`` key, else the dict's own rule.  The
input is never mutated; ``None`` stays ``None`` and empty containers stay
empty.

Example::

    @dataclass
    class User:
        id: str
        name: str = field(metadata={"mask": "filled"})
        age: int = field(default=0, metadata={"mask": "random100"})

    Masker().mask(User("123456", "Usagi", 3))
    # User(id='123456', name='*****', age=<0..99>)
"""
from __future__ import annotations

import collections
import copy
import functools
import random
from enum import Enum
from typing import Any, Callable, TypeVar

from mp_masking.config.settings import (
    DEFAULT_FIXED_LENGTH,
    DEFAULT_MASK_CHAR,
    DEFAULT_TAG_NAME,
    MaskerSettings,
)
from mp_masking.kernel.errors import CyclicValueError, MaskingError
from mp_masking.kernel.types import UInt
from mp_masking.observability.logging import get_logger

from mp_masking.application.masking.metadata import (
    TypeDescriptorProvider,
    TypeMetadata,
    TypeMetadataCache,
)
from mp_masking.application.masking.registry import FieldRuleRegistry, HandlerRegistry
from mp_masking.application.masking.rules import (
    MASK_FILLED,
    MASK_FIXED,
    MASK_HASH,
    MASK_RANDOM,
    MASK_ZERO,
    MaskHandler,
    TargetKind,
)
from mp_masking.application.masking.transforms import (
    filled,
    fixed,
    hash_text,
    random_float,
    random_int,
    zero_value,
)

__all__ = ["Masker"]

logger = get_logger(__name__)

T = TypeVar("T")

# Only handlers of the ANY table apply to these; they are never traversed.
_OPAQUE = (bool, Enum, bytes, bytearray)
_COLLECTIONS = (list, tuple, set, frozenset, collections.deque)
_PLAIN_CONTAINERS = frozenset({dict, list, tuple, set, frozenset, collections.deque})


class Masker:
    """Masks values according to per-field rules.

    Parameters
    ----------
    tag_name:
        Metadata key holding a field's rule (``field(metadata={"mask": ...})``).
        ``""`` disables annotations; only registered field names apply.
    mask_char:
        Substitution string used by ``filled`` and ``fixed``.
    cache_enabled:
        Cache per-class field metadata.
    fixed_length:
        Number of mask characters produced by ``fixed``.
    seed:
        Seed for the masker's own random generator (``random`` rules).
    providers:
        Type descriptor providers; defaults to dataclasses and named tuples.
    """

    def __init__(
        self,
        *,
        tag_name: str = DEFAULT_TAG_NAME,
        mask_char: str = DEFAULT_MASK_CHAR,
        cache_enabled: bool = True,
        fixed_length: int = DEFAULT_FIXED_LENGTH,
        seed: int | None = None,
        providers: list[TypeDescriptorProvider] | None = None,
    ) -> None:
        if fixed_length < 0:
            raise ValueError(f"fixed_length must not be negative: {fixed_length}")
        self._tag_name = tag_name
        self._mask_char = mask_char
        self._fixed_length = fixed_length
        self._random = random.Random(seed)
        self._handlers = HandlerRegistry()
        self._field_rules = FieldRuleRegistry()
        self._cache = TypeMetadataCache(providers, enabled=cache_enabled)
        self._register_builtins()

    @classmethod
    def from_settings(cls, settings: MaskerSettings, **kwargs: Any) -> "Masker":
        """Build a masker from :class:`~mp_masking.config.settings.MaskerSettings`."""
        return cls(
            tag_name=settings.tag_name,
            mask_char=settings.mask_char,
            cache_enabled=settings.cache_enabled,
            fixed_length=settings.fixed_length,
            **kwargs,
        )

    def _register_builtins(self) -> None:
        self._handlers.register(TargetKind.TEXT, MASK_FILLED, self.mask_filled_string)
        self._handlers.register(TargetKind.TEXT, MASK_FIXED, self.mask_fixed_string)
        self._handlers.register(TargetKind.TEXT, MASK_HASH, self.mask_hash_string)
        self._handlers.register(TargetKind.SIGNED, MASK_RANDOM, self.mask_random_int)
        self._handlers.register(TargetKind.UNSIGNED, MASK_RANDOM, self.mask_random_uint)
        self._handlers.register(TargetKind.FLOAT, MASK_RANDOM, self.mask_random_float)
        self._handlers.register(TargetKind.ANY, MASK_ZERO, self.mask_zero)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def mask_char(self) -> str:
        return self._mask_char

    @property
    def cache_enabled(self) -> bool:
        return self._cache.enabled

    @property
    def fixed_length(self) -> int:
        return self._fixed_length

    def set_tag_name(self, name: str) -> None:
        """Read rules from metadata key *name*; ``""`` disables annotations."""
        self._tag_name = name
        # Cached descriptors hold rules resolved under the previous tag name.
        self._cache.clear()
        logger.debug("masking.tag_name_changed", tag_name=name)

    def set_mask_char(self, char: str) -> None:
        self._mask_char = char
        logger.debug("masking.mask_char_changed", mask_char=char)

    def set_cache_enabled(self, enabled: bool) -> None:
        self._cache.enabled = enabled
        if not enabled:
            self._cache.clear()
        logger.debug("masking.cache_toggled", enabled=enabled)

    def set_fixed_length(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"fixed_length must not be negative: {length}")
        self._fixed_length = length

    def clear_cache(self) -> None:
        self._cache.clear()

    def register_field_rule(self, name: str, rule: str) -> None:
        """Mask every field or ``str`` dict key called *name* with *rule*.

        Explicit field annotations take precedence.
        """
        self._field_rules.register(name, rule)
        logger.debug("masking.field_rule_registered", field=name, rule=rule)

    def register_handler(self, kind: TargetKind, name: str, handler: MaskHandler[Any]) -> None:
        """Register *handler* for rules starting with *name* on values of *kind*.

        A handler receives ``(argument, value)`` where *argument* is the
        part of the rule after *name*; it replaces any handler of the same
        name, built-ins included.
        """
        self._handlers.register(kind, name, handler)
        logger.debug("masking.handler_registered", kind=TargetKind(kind).value, rule=name)

    def register_provider(self, provider: TypeDescriptorProvider) -> None:
        """Teach the masker a new family of record types."""
        self._cache.add_provider(provider)

    # ------------------------------------------------------------------
    # Built-in handlers
    # ------------------------------------------------------------------

    def mask_filled_string(self, arg: str, value: str) -> str:
        return filled(arg, value, self._mask_char)

    def mask_fixed_string(self, arg: str, value: str) -> str:  # noqa: ARG002
        return fixed(value, self._mask_char, self._fixed_length)

    def mask_hash_string(self, arg: str, value: str) -> str:  # noqa: ARG002
        return hash_text(value)

    def mask_random_int(self, arg: str, value: int) -> int:  # noqa: ARG002
        return random_int(arg, self._random)

    def mask_random_uint(self, arg: str, value: int) -> UInt:  # noqa: ARG002
        return UInt(random_int(arg, self._random))

    def mask_random_float(self, arg: str, value: float) -> float:  # noqa: ARG002
        return random_float(arg, self._random)

    def mask_zero(self, arg: str, value: Any) -> Any:  # noqa: ARG002
        return zero_value(value, functools.partial(self._zero_record, active=set()))

    def _zero_record(self, value: Any, *, active: set[int]) -> Any:
        metadata = self._metadata_of(value)
        if metadata is None:
            return NotImplemented
        marker = id(value)
        if marker in active:
            raise CyclicValueError(type(value).__qualname__)
        active.add(marker)
        try:
            rebuild = functools.partial(self._zero_record, active=active)
            values: dict[str, Any] = {}
            for field in metadata.fields:
                if not field.exported and field.default is not None:
                    values[field.name] = field.default()
                else:
                    values[field.name] = zero_value(getattr(value, field.name), rebuild)
        finally:
            active.discard(marker)
        return metadata.rebuild(values)

    # ------------------------------------------------------------------
    # Single-value helpers
    # ------------------------------------------------------------------

    def mask_text(self, rule: str, value: str) -> str:
        return self._apply(TargetKind.TEXT, rule, value)

    def mask_signed_int(self, rule: str, value: int) -> int:
        return self._apply(TargetKind.SIGNED, rule, value)

    def mask_unsigned_int(self, rule: str, value: int) -> UInt:
        return self._apply(TargetKind.UNSIGNED, rule, UInt(value))

    def mask_float(self, rule: str, value: float) -> float:
        return self._apply(TargetKind.FLOAT, rule, float(value))

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def mask(self, value: T) -> T:
        """Return a masked copy of *value*.

        Raises
        ------
        InvalidArgumentError
            A rule argument could not be parsed; no partial result is returned.
        CyclicValueError
            *value* contains itself.
        """
        return self._mask(value, "", set())

    def _apply(self, kind: TargetKind, rule: str, value: Any) -> Any:
        if not rule:
            return value
        match = None
        if kind is not TargetKind.ANY:
            match = self._handlers.lookup(kind, rule)
        if match is None:
            match = self._handlers.lookup(TargetKind.ANY, rule)
        if match is None:
            return value
        handler, arg = match
        return handler(arg, value)

    def _mask(self, value: Any, rule: str, active: set[int]) -> Any:
        if value is None:
            return None
        kind = TargetKind.of(value)
        if kind is not TargetKind.ANY or isinstance(value, _OPAQUE):
            return self._apply(kind, rule, value)
        if rule:
            match = self._handlers.lookup(TargetKind.ANY, rule)
            if match is not None:
                handler, arg = match
                return handler(arg, value)
        metadata = self._metadata_of(value)
        if metadata is not None:
            return self._descend(value, active, self._mask_record, metadata)
        if isinstance(value, dict):
            return self._descend(value, active, self._mask_mapping, rule)
        if isinstance(value, _COLLECTIONS):
            return self._descend(value, active, self._mask_collection, rule)
        return value

    def _metadata_of(self, value: Any) -> TypeMetadata | None:
        cls = type(value)
        if cls in _PLAIN_CONTAINERS:
            return None
        return self._cache.resolve(cls, self._tag_name)

    @staticmethod
    def _descend(value: Any, active: set[int], walk: Callable[..., Any], arg: Any) -> Any:
        marker = id(value)
        if marker in active:
            raise CyclicValueError(type(value).__qualname__)
        active.add(marker)
        try:
            return walk(value, arg, active)
        finally:
            active.discard(marker)

    def _mask_record(self, value: Any, metadata: TypeMetadata, active: set[int]) -> Any:
        values: dict[str, Any] = {}
        for field in metadata.fields:
            current = getattr(value, field.name)
            if not field.exported:
                if field.default is not None:
                    values[field.name] = field.default()
                else:
                    values[field.name] = self.mask_zero("", current)
                continue
            rule = field.rule or self._field_rules.lookup(field.name) or ""
            try:
                values[field.name] = self._mask(current, rule, active)
            except MaskingError as exc:
                exc.add_path_segment(field.name)
                raise
        return metadata.rebuild(values)

    def _mask_mapping(self, value: dict[Any, Any], rule: str, active: set[int]) -> dict[Any, Any]:
        # copy.copy keeps the dict subclass (OrderedDict, defaultdict factory, ...).
        masked = copy.copy(value)
        for key, item in value.items():
            item_rule = rule
            if isinstance(key, str):
                registered = self._field_rules.lookup(key)
                if registered is not None:
                    item_rule = registered
            try:
                masked[key] = self._mask(item, item_rule, active)
            except MaskingError as exc:
                exc.add_path_segment(f"[{key!r}]")
                raise
        return masked

    def _mask_collection(self, value: Any, rule: str, active: set[int]) -> Any:
        items: list[Any] = []
        unordered = isinstance(value, (set, frozenset))
        for index, item in enumerate(value):
            try:
                items.append(self._mask(item, rule, active))
            except MaskingError as exc:
                exc.add_path_segment("[*]" if unordered else f"[{index}]")
                raise
        cls = type(value)
        if cls is list:
            return items
        if cls is tuple:
            return tuple(items)
        if isinstance(value, collections.deque):
            return cls(items, maxlen=value.maxlen)
        return cls(items)
