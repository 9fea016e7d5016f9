from __future__ import annotations

import threading
from typing import Any

from mp_masking.application.masking.rules import MaskHandler, TargetKind

__all__ = ["FieldRuleRegistry", "HandlerRegistry"]


class HandlerRegistry:
    """Rule-name → handler tables, one per :class:`TargetKind`.

    A rule such as ``"random100.4"`` is matched against the registered
    names by prefix; the longest matching name wins and the remainder
    (``"100.4"``) is handed to the handler as its argument.
    """

    def __init__(self) -> None:
        self._tables: dict[TargetKind, dict[str, MaskHandler[Any]]] = {
            kind: {} for kind in TargetKind
        }
        self._lock = threading.Lock()

    def register(self, kind: TargetKind, name: str, handler: MaskHandler[Any]) -> None:
        """Register *handler* for rules starting with *name*, replacing any previous one."""
        if not name:
            raise ValueError("Mask rule name must not be empty")
        with self._lock:
            self._tables[TargetKind(kind)][name] = handler

    def lookup(self, kind: TargetKind, rule: str) -> tuple[MaskHandler[Any], str] | None:
        """Return ``(handler, argument)`` for *rule*, or ``None`` when nothing matches."""
        if not rule:
            return None
        best: str | None = None
        table = self._tables[kind]
        for name in tuple(table):
            if rule.startswith(name) and (best is None or len(name) > len(best)):
                best = name
        if best is None:
            return None
        handler = table.get(best)
        if handler is None:
            return None
        return handler, rule[len(best):]

    def names(self, kind: TargetKind) -> frozenset[str]:
        return frozenset(self._tables[kind])


class FieldRuleRegistry:
    """Exact field / key name → rule, used when a field carries no annotation."""

    def __init__(self) -> None:
        self._rules: dict[str, str] = {}
        self._lock = threading.Lock()

    def register(self, name: str, rule: str) -> None:
        with self._lock:
            self._rules[name] = rule

    def lookup(self, name: str) -> str | None:
        return self._rules.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)
