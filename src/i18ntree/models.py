# src/i18ntree/models.py
"""
Data models for i18ntree.

This module defines the translation tree that JSON documents decode into,
the placeholder delimiter pair, and the pieces the typed placeholder engine
works on.

Classes:
    Leaf: A single translation string
    Branch: Named child nodes, one path segment each
    ListNode: A list of strings, expanded into indexed keys when flattened
    Delimiters: Start/end marker pair that brackets a placeholder name
    Text: Literal run of template text
    Placeholder: A matched placeholder name inside a template

Functions:
    leaf, branch, string_list: Build trees in code without going through JSON
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Leaf:
    """A translation string at the end of a path."""
    value: str


@dataclass(frozen=True)
class Branch:
    """
    An object node of the translation tree.

    Attributes:
        children (Dict[str, Tree]): Child nodes keyed by path segment
    """
    children: Dict[str, "Tree"] = field(default_factory=dict)


@dataclass(frozen=True)
class ListNode:
    """A homogeneous list of strings, flattened to ``key.0``, ``key.1``, ..."""
    items: Tuple[str, ...] = ()


Tree = Union[Leaf, Branch, ListNode]


# ── Programmatic construction ──────────────────────────────────────────────

def leaf(value: str) -> Leaf:
    """Build a :class:`Leaf`, rejecting non-string values."""
    if not isinstance(value, str):
        raise TypeError(f"Leaf value must be a string, got {type(value).__name__}")
    return Leaf(value)


def string_list(*items: str) -> ListNode:
    """Build a :class:`ListNode` from string items."""
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"List items must be strings, got {type(item).__name__}")
    return ListNode(tuple(items))


def branch(
    mapping: Optional[Mapping[str, Union[Tree, str]]] = None,
    **children: Union[Tree, str],
) -> Branch:
    """
    Build a :class:`Branch` from child nodes.

    Plain strings are wrapped as leaves, so defaults can be written inline::

        branch(greetings=branch(hello="Hello", goodDay="Good Day {{name}}"))

    Keys that are not valid Python identifiers go through *mapping*.

    Args:
        mapping: Children keyed by path segment.
        **children: More children; merged after *mapping*.

    Returns:
        A new Branch.

    Raises:
        TypeError: If a child is neither a string nor a tree node.
    """
    merged: Dict[str, Tree] = {}
    for source in (mapping or {}), children:
        for key, child in source.items():
            if isinstance(child, str):
                merged[key] = Leaf(child)
            elif isinstance(child, (Leaf, Branch, ListNode)):
                merged[key] = child
            else:
                raise TypeError(
                    f"Child '{key}' must be a string or tree node, got {type(child).__name__}"
                )
    return Branch(merged)


# ── Delimiters ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Delimiters:
    """
    The marker pair bracketing a placeholder name in a template.

    Use the :data:`CURLY` or :data:`UNDERSCORE` presets, or
    :meth:`custom` for anything else.
    """
    start: str
    end: str

    def __post_init__(self):
        for label, marker in (("start", self.start), ("end", self.end)):
            if not isinstance(marker, str) or not marker:
                raise ValueError(f"Delimiter {label} marker must be a non-empty string")

    @classmethod
    def custom(cls, start: str, end: str) -> "Delimiters":
        return cls(start, end)

    @classmethod
    def from_name(cls, name: str) -> "Delimiters":
        """Resolve a preset by name (``'curly'`` or ``'underscore'``)."""
        preset = _PRESETS.get(name.strip().lower())
        if preset is None:
            raise ValueError(
                f"Unknown delimiter preset '{name}'. Supported presets: curly, underscore"
            )
        return preset

    def wrap(self, name: str) -> str:
        """Return the delimited token for *name*."""
        return f"{self.start}{name}{self.end}"


CURLY = Delimiters("{{", "}}")
UNDERSCORE = Delimiters("__", "__")

_PRESETS: Dict[str, Delimiters] = {
    "curly": CURLY,
    "underscore": UNDERSCORE,
}


# ── Template pieces ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Placeholder:
    name: str


Piece = Union[Text, Placeholder]
