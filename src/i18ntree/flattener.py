# src/i18ntree/flattener.py
"""Flattening of translation trees into dot-path keyed mappings."""
from typing import Dict

from .models import Branch, ListNode, Tree


def _join(prefix: str, segment: str) -> str:
    return f"{prefix}.{segment}" if prefix else segment


def _fold(node: Tree, namespace: str, into: Dict[str, str]) -> None:
    if isinstance(node, Branch):
        for key, child in node.children.items():
            child_ns = _join(namespace, key)
            if isinstance(child, (Branch, ListNode)):
                _fold(child, child_ns, into)
            else:
                into[child_ns] = child.value
    elif isinstance(node, ListNode):
        for index, item in enumerate(node.items):
            into[_join(namespace, str(index))] = item
    # A bare leaf has no path of its own, so nothing is recorded for it.


def flatten(tree: Tree) -> Dict[str, str]:
    """
    Flatten *tree* into ``{"a.b.c": value}`` form.

    Args:
        tree: Root node. Only a :class:`Branch` root produces keys; a bare
              :class:`Leaf` or :class:`ListNode` yields ``{}``.

    Returns:
        A new dict mapping dot-joined paths to translation strings.
    """
    result: Dict[str, str] = {}
    if isinstance(tree, Branch):
        _fold(tree, "", result)
    return result
