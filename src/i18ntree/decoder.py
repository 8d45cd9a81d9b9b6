# src/i18ntree/decoder.py
"""
Decoding of JSON translation documents into translation trees.

A valid document is a JSON object whose values are strings or nested
objects.  Arrays of strings are accepted as list nodes when list
expansion is enabled (``[loading] expand_lists``).  Anything else is
rejected with :class:`DecodeError` naming the offending path.

Functions:
    decode_value: Decode any parsed JSON value into a tree node
    decode_translations: Decode a parsed document; the root must be an object
    decode_json: Parse JSON text and decode it as a document
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Union, cast

from .config import config
from .models import Branch, Leaf, ListNode, Tree

__all__ = [
    "DecodeError",
    "decode_value",
    "decode_translations",
    "decode_json",
]

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """
    Raised when a JSON document is not a valid translation tree.

    Attributes:
        path (str): Dot path of the offending value (empty at the root)
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(f"{message}{where}")


def _json_type(value: Any) -> str:
    """Name *value* the way a JSON document would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _join(prefix: str, segment: str) -> str:
    return f"{prefix}.{segment}" if prefix else segment


def _resolve_expand(expand_lists: Optional[bool]) -> bool:
    if expand_lists is None:
        return bool(config.get("loading", "expand_lists", True))
    return expand_lists


def _decode(value: Any, path: str, expand_lists: bool) -> Tree:
    if isinstance(value, str):
        return Leaf(value)

    if isinstance(value, dict):
        children: Dict[str, Tree] = {}
        for key, child in value.items():
            if not isinstance(key, str):
                raise DecodeError(f"Expecting string keys, got {_json_type(key)}", path)
            children[key] = _decode(child, _join(path, key), expand_lists)
        return Branch(children)

    if isinstance(value, list) and expand_lists:
        for index, item in enumerate(value):
            if not isinstance(item, str):
                raise DecodeError(
                    f"Expecting a list of strings, found {_json_type(item)}",
                    _join(path, str(index)),
                )
        logger.debug("Expanding %d list item(s) at '%s'", len(value), path)
        return ListNode(tuple(value))

    expected = "a string, a list of strings or an object" if expand_lists else "a string or an object"
    raise DecodeError(f"Expecting {expected}, got {_json_type(value)}", path)


def _decode_root(value: Any, expand_lists: bool) -> Tree:
    try:
        return _decode(value, "", expand_lists)
    except RecursionError as exc:
        raise DecodeError("Document nested too deeply") from exc


def decode_value(value: Any, *, expand_lists: Optional[bool] = None) -> Tree:
    """
    Decode an already-parsed JSON value into a tree node.

    Args:
        value: Result of ``json.load``/``json.loads`` (or an equivalent literal).
        expand_lists: Accept arrays of strings as :class:`ListNode`.
                      ``None`` reads ``[loading] expand_lists``.

    Returns:
        The decoded tree.

    Raises:
        DecodeError: If a value is neither a string nor an object (nor,
                     with expansion, a list of strings).
    """
    return _decode_root(value, _resolve_expand(expand_lists))


def decode_translations(value: Any, *, expand_lists: Optional[bool] = None) -> Branch:
    """
    Decode a parsed translation document.

    Unlike :func:`decode_value`, the root must be a JSON object; a bare
    string or array is not a translation set.

    Raises:
        DecodeError: If the root is not an object or any leaf is invalid.
    """
    if not isinstance(value, dict):
        raise DecodeError(f"Expecting an object at the document root, got {_json_type(value)}")
    return cast(Branch, _decode_root(value, _resolve_expand(expand_lists)))


def decode_json(text: Union[str, bytes], *, expand_lists: Optional[bool] = None) -> Branch:
    """
    Parse JSON *text* and decode it as a translation document.

    Raises:
        DecodeError: On malformed JSON or an invalid document.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Malformed JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Malformed JSON: invalid {exc.encoding} byte at position {exc.start}") from exc
    except RecursionError as exc:
        raise DecodeError("Document nested too deeply") from exc
    return decode_translations(value, expand_lists=expand_lists)
