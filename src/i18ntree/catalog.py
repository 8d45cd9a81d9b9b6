# src/i18ntree/catalog.py
"""
Application-level registry of translation stores.

Holds one :class:`~i18ntree.translations.Translations` per locale, an
active locale and an ordered list of fallback locales.  Lookups walk the
chain *active locale → fallbacks* through :mod:`i18ntree.resolver`.

Usage::

    from i18ntree.catalog import Catalog
    from i18ntree.loader import load_or_empty

    catalog = Catalog(default_locale="en")
    catalog.add("en", load_or_empty("locales/en.json"))
    catalog.add("de", load_or_empty("locales/de.json"))
    catalog.set_fallbacks(["en"])

    catalog.set_locale("de")
    print(catalog.t("greetings.goodDay", firstName="Peter"))
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar

from .config import config
from .models import Delimiters
from .placeholders import Replacements
from .resolver import custom_trf, tf, trf
from .translations import Translations

T = TypeVar("T")


class Catalog:
    """Per-locale translation stores with a thread-safe active locale."""

    def __init__(self, default_locale: str = "en", delimiters: Optional[Delimiters] = None):
        self._lock = threading.Lock()
        self._stores: Dict[str, Translations] = {}
        self._fallbacks: List[str] = []
        self.default_locale = default_locale
        self._locale = default_locale
        self.delimiters = delimiters or Delimiters.from_name(
            config.get("placeholders", "delimiters", "curly")
        )

    # ── stores ─────────────────────────────────────────────────────────────

    def add(self, locale: str, translations: Translations) -> None:
        """Register (or replace) the store for *locale*."""
        with self._lock:
            self._stores[locale] = translations

    def locales(self) -> List[str]:
        with self._lock:
            return list(self._stores)

    # ── locale state ───────────────────────────────────────────────────────

    def set_locale(self, locale: str) -> None:
        """Set the active locale; unknown locales fall back to the default."""
        with self._lock:
            self._locale = locale if locale in self._stores else self.default_locale

    def get_locale(self) -> str:
        with self._lock:
            return self._locale

    def set_fallbacks(self, locales: Iterable[str]) -> None:
        with self._lock:
            self._fallbacks = list(locales)

    def chain(self, locale: Optional[str] = None) -> List[Translations]:
        """
        Return the stores to consult, most specific first.

        Duplicate and unregistered locales are skipped.
        """
        with self._lock:
            order = [locale or self._locale] + self._fallbacks
            seen = set()
            stores: List[Translations] = []
            for name in order:
                if name in seen or name not in self._stores:
                    continue
                seen.add(name)
                stores.append(self._stores[name])
            return stores

    # ── lookups ────────────────────────────────────────────────────────────

    def t(
        self,
        key: str,
        lang: Optional[str] = None,
        *,
        replacements: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """
        Look up *key* through the fallback chain.

        Args:
            key: Dotted translation key.
            lang: Override the active locale for this call only.
            replacements: Placeholder values as a mapping. Use this for
                          placeholders named ``key``, ``lang`` or ``replacements``.
            **kwargs: More placeholder values, applied after *replacements*
                      in keyword order.

        Returns:
            The translated string, or the key itself if not found.
        """
        chain = self.chain(lang)
        pairs = list((replacements or {}).items()) + list(kwargs.items())
        if not pairs:
            return tf(chain, key)
        return trf(chain, self.delimiters, key, [(name, str(value)) for name, value in pairs])

    def custom(
        self,
        key: str,
        lift_literal: Callable[[str], T],
        replacements: Replacements,
        lang: Optional[str] = None,
    ) -> List[T]:
        """Typed lookup through the fallback chain (see :func:`~i18ntree.resolver.custom_trf`)."""
        return custom_trf(self.chain(lang), self.delimiters, lift_literal, key, replacements)
