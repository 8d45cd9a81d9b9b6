# src/i18ntree/resolver.py
"""
Public lookup functions.

Every lookup degrades to the key itself when it is missing, so an
incomplete translation shows up in the UI instead of raising.

Functions:
    t: Plain lookup
    tf: Lookup through a fallback chain
    tr: Lookup with placeholder substitution
    trf: Fallback-chain lookup with substitution
    custom_tr: Lookup with typed substitution
    custom_trf: Fallback-chain lookup with typed substitution
    keys: All keys defined in a store
    has_key: Key existence check
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set, TypeVar

from .config import config
from .models import Delimiters
from .placeholders import Replacements, render, render_typed
from .translations import Translations

__all__ = [
    "t",
    "tf",
    "tr",
    "trf",
    "custom_tr",
    "custom_trf",
    "keys",
    "has_key",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _missing(key: str) -> str:
    if config.get("logging", "log_missing_keys", False):
        logger.debug("Missing translation for key '%s'", key)
    return key


def _first_hit(chain: Iterable[Translations], key: str) -> Optional[str]:
    for store in chain:
        value = store.get(key)
        if value is not None:
            return value
    return None


def keys(translations: Translations) -> Set[str]:
    """Return every key defined in *translations* (unordered)."""
    return translations.keys()


def has_key(translations: Translations, key: str) -> bool:
    return translations.has_key(key)


def t(translations: Translations, key: str) -> str:
    """
    Look up *key*.

    Returns:
        The translation, or *key* itself if absent.
    """
    value = translations.get(key)
    if value is None:
        return _missing(key)
    return value


def tf(chain: Iterable[Translations], key: str) -> str:
    """Look up *key* in each store of *chain* in order; *key* if none has it."""
    value = _first_hit(chain, key)
    if value is None:
        return _missing(key)
    return value


def tr(
    translations: Translations,
    delimiters: Delimiters,
    key: str,
    replacements: Replacements,
) -> str:
    """
    Look up *key* and substitute placeholders.

    A missing key is returned verbatim; no substitution is run on it.
    """
    value = translations.get(key)
    if value is None:
        return _missing(key)
    return render(value, delimiters, replacements)


def trf(
    chain: Iterable[Translations],
    delimiters: Delimiters,
    key: str,
    replacements: Replacements,
) -> str:
    """Fallback-chain variant of :func:`tr`."""
    value = _first_hit(chain, key)
    if value is None:
        return _missing(key)
    return render(value, delimiters, replacements)


def custom_tr(
    translations: Translations,
    delimiters: Delimiters,
    lift_literal: Callable[[str], T],
    key: str,
    replacements: Replacements,
) -> List[T]:
    """
    Look up *key* and substitute placeholders with typed values.

    Returns:
        Segments from :func:`~i18ntree.placeholders.render_typed`, or
        ``[lift_literal(key)]`` when the key is missing.
    """
    value = translations.get(key)
    if value is None:
        return [lift_literal(_missing(key))]
    return render_typed(value, delimiters, lift_literal, replacements)


def custom_trf(
    chain: Iterable[Translations],
    delimiters: Delimiters,
    lift_literal: Callable[[str], T],
    key: str,
    replacements: Replacements,
) -> List[T]:
    """Fallback-chain variant of :func:`custom_tr`."""
    value = _first_hit(chain, key)
    if value is None:
        return [lift_literal(_missing(key))]
    return render_typed(value, delimiters, lift_literal, replacements)
