# src/i18ntree/placeholders.py
"""
Placeholder substitution for translation templates.

Two renderers share the same matching rule: a placeholder is the literal
text ``start + name + end`` for a name listed in the replacements.  No
delimiter balancing is attempted; whatever sequential literal matching
produces is the result.

- :func:`render` returns a string.
- :func:`render_typed` returns a list mixing lifted literal runs with
  caller-supplied values (e.g. markup nodes), for UIs that need more than
  plain text.

Replacements are ``(name, value)`` pairs applied in order; a mapping is
accepted too and read in insertion order.
"""
from __future__ import annotations

import logging
from typing import (
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from .models import Delimiters, Piece, Placeholder, Text

__all__ = [
    "render",
    "render_typed",
    "split_pieces",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")

Replacements = Union[Sequence[Tuple[str, V]], Mapping[str, V]]


def _as_pairs(replacements: Replacements) -> List[Tuple[str, V]]:
    if isinstance(replacements, Mapping):
        return list(replacements.items())
    return list(replacements)


def render(template: str, delimiters: Delimiters, replacements: Replacements) -> str:
    """
    Substitute placeholders in *template* with string values.

    Each ``(name, value)`` pair replaces every ``start + name + end`` in the
    text accumulated so far.  Tokens with no matching name stay as-is.

    Example::

        render("Hi {{name}}", CURLY, [("name", "Peter")])   # -> "Hi Peter"
    """
    result = template
    for name, value in _as_pairs(replacements):
        result = result.replace(delimiters.wrap(name), value)
    return result


def split_pieces(template: str, delimiters: Delimiters, names: Iterable[str]) -> List[Piece]:
    """
    Split *template* into literal and placeholder pieces.

    Names are scanned in order.  Only :class:`Text` pieces are split, so a
    region claimed by an earlier name is never matched by a later one.
    Empty literal runs (template starting or ending with a token, adjacent
    tokens) are kept.
    """
    pieces: List[Piece] = [Text(template)]
    for name in names:
        token = delimiters.wrap(name)
        split: List[Piece] = []
        for piece in pieces:
            if isinstance(piece, Placeholder) or token not in piece.value:
                split.append(piece)
                continue
            parts = piece.value.split(token)
            split.append(Text(parts[0]))
            for part in parts[1:]:
                split.append(Placeholder(name))
                split.append(Text(part))
        pieces = split
    return pieces


def render_typed(
    template: str,
    delimiters: Delimiters,
    lift_literal: Callable[[str], T],
    replacements: Replacements,
) -> List[T]:
    """
    Substitute placeholders with typed values.

    Args:
        template: Raw translation string.
        delimiters: Marker pair around placeholder names.
        lift_literal: Converts a literal text run into the output type.
        replacements: ``(name, value)`` pairs whose values are already of
                      the output type.  The first pair wins for a repeated name.

    Returns:
        Output segments in template order.  A placeholder whose name has no
        value degrades to ``lift_literal(name)``.

    Example::

        render_typed("pre __weird __stuff__ __ suff", UNDERSCORE, str,
                     [("stuff", "<a>Max</a>")])
        # -> ["pre __weird ", "<a>Max</a>", " __ suff"]
    """
    pairs = _as_pairs(replacements)
    values: Dict[str, T] = {}
    for name, value in pairs:
        values.setdefault(name, value)

    output: List[T] = []
    for piece in split_pieces(template, delimiters, (name for name, _ in pairs)):
        if isinstance(piece, Text):
            output.append(lift_literal(piece.value))
        elif piece.name in values:
            output.append(values[piece.name])
        else:
            logger.debug("No value for placeholder '%s'", piece.name)
            output.append(lift_literal(piece.name))
    return output
