"""Render-time variable scopes.

A :class:`Scope` is a read-only mapping with a parent pointer. Loop
iterations bind their alias in a fresh child scope, so the parent (and the
caller's data context at the bottom of the chain) is never mutated and a
binding cannot leak from one iteration into the next.

Example:
    >>> outer = Scope({"item": "outer", "title": "T"})
    >>> inner = outer.child("item", "inner")
    >>> inner["item"], inner["title"], outer["item"]
    ('inner', 'T', 'outer')

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class Scope(Mapping[str, Any]):
    """Immutable name -> value mapping whose lookups fall through to a parent."""

    __slots__ = ("_bindings", "_parent")

    def __init__(self, bindings: Mapping[str, Any], parent: Scope | None = None):
        self._bindings = bindings
        self._parent = parent

    @property
    def parent(self) -> Scope | None:
        return self._parent

    def child(self, name: str, value: Any) -> Scope:
        """Return a new scope with ``name`` bound to ``value``, shadowing any parent entry."""
        return Scope({name: value}, self)

    def __getitem__(self, key: str) -> Any:
        scope: Scope | None = self
        while scope is not None:
            if key in scope._bindings:
                return scope._bindings[key]
            scope = scope._parent
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        scope: Scope | None = self
        while scope is not None:
            if key in scope._bindings:
                return True
            scope = scope._parent
        return False

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        scope: Scope | None = self
        while scope is not None:
            for key in scope._bindings:
                if key not in seen:
                    seen.add(key)
                    yield key
            scope = scope._parent

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Scope({dict(self)!r})"
