# src/i18ntree/translations.py
"""
The translation store.

:class:`Translations` wraps the flat key/value mapping produced by the
flattener.  It can only be built from a tree (decoded or constructed in
code), so every value is a string that came from a validated leaf.
Instances are immutable; swap in a new one when content changes.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Optional, Set, Union

from .decoder import decode_json, decode_translations
from .flattener import flatten
from .models import Tree


class Translations:
    """
    Immutable store of flattened translations for one locale.

    Example::

        store = Translations.from_json('{"greetings": {"hello": "Hello"}}')
        store.get("greetings.hello")   # -> "Hello"
    """

    __slots__ = ("_entries",)

    def __init__(self, tree: Optional[Tree] = None):
        """
        Build a store by flattening *tree*.

        Args:
            tree: Root node; ``None`` gives an empty store.
        """
        entries = flatten(tree) if tree is not None else {}
        object.__setattr__(self, "_entries", MappingProxyType(entries))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Translations are immutable")

    # ── constructors ───────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> "Translations":
        return cls()

    @classmethod
    def from_tree(cls, tree: Tree) -> "Translations":
        return cls(tree)

    @classmethod
    def from_value(cls, value: Any, *, expand_lists: Optional[bool] = None) -> "Translations":
        """Decode an already-parsed JSON document. Raises ``DecodeError``."""
        return cls(decode_translations(value, expand_lists=expand_lists))

    @classmethod
    def from_json(cls, text: Union[str, bytes], *, expand_lists: Optional[bool] = None) -> "Translations":
        """Parse and decode JSON text. Raises ``DecodeError``."""
        return cls(decode_json(text, expand_lists=expand_lists))

    # ── inspection ─────────────────────────────────────────────────────────

    def get(self, key: str) -> Optional[str]:
        """Return the raw translation for *key*, or ``None`` if absent."""
        return self._entries.get(key)

    def keys(self) -> Set[str]:
        return set(self._entries)

    def has_key(self, key: str) -> bool:
        return key in self._entries

    def as_dict(self) -> dict:
        """Return a mutable copy of the flat mapping."""
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Translations):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Translations({len(self._entries)} keys)"

