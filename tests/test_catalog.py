# tests/test_catalog.py
"""
Tests for the per-locale Catalog.

Covers locale switching, fallback chains, placeholder lookups and
thread safety of the active locale.
"""
import threading
from dataclasses import dataclass

import pytest

from i18ntree.catalog import Catalog
from i18ntree.models import UNDERSCORE
from i18ntree.translations import Translations


@dataclass(frozen=True)
class Link:
    label: str


@pytest.fixture
def catalog(english, german):
    cat = Catalog(default_locale="en")
    cat.add("en", english)
    cat.add("de", german)
    cat.set_fallbacks(["en"])
    return cat


class TestLocale:
    """Test locale getter / setter."""

    def test_default_locale(self, catalog):
        assert catalog.get_locale() == "en"

    def test_set_locale(self, catalog):
        catalog.set_locale("de")
        assert catalog.get_locale() == "de"

    def test_unknown_locale_falls_back_to_default(self, catalog):
        catalog.set_locale("zz")
        assert catalog.get_locale() == "en"

    def test_locales(self, catalog):
        assert catalog.locales() == ["en", "de"]

    def test_thread_safety(self, catalog):
        """Concurrent set_locale calls must not crash."""
        errors = []

        def toggle(lang, n=50):
            try:
                for _ in range(n):
                    catalog.set_locale(lang)
                    catalog.t("greetings.hello")
            except Exception as exc:
                errors.append(exc)

        threads = [
            threading.Thread(target=toggle, args=("en",)),
            threading.Thread(target=toggle, args=("de",)),
        ]
        for th in threads:
            th.start()
        for th in threads:
            th.join()
        assert errors == []


class TestChain:
    """Test fallback chain assembly."""

    def test_active_then_fallbacks(self, catalog, english, german):
        catalog.set_locale("de")
        assert catalog.chain() == [german, english]

    def test_duplicates_skipped(self, catalog, english):
        assert catalog.chain() == [english]

    def test_unknown_locales_skipped(self, catalog, english):
        catalog.set_fallbacks(["fr", "en"])
        assert catalog.chain("fr") == [english]


class TestLookup:
    """Test catalog lookups."""

    def test_active_locale(self, catalog):
        catalog.set_locale("de")
        assert catalog.t("greetings.hello") == "Hallo"

    def test_falls_back(self, catalog):
        catalog.set_locale("de")
        assert catalog.t("englishOnly") == "This key only exists in english"

    def test_explicit_lang(self, catalog):
        assert catalog.t("greetings.hello", lang="de") == "Hallo"

    def test_missing_key_returns_key(self, catalog):
        assert catalog.t("nonexistent.key") == "nonexistent.key"

    def test_replacements(self, catalog):
        result = catalog.t("greetings.goodDay", firstName="Peter", lastName="Griffin")
        assert result == "Good Day Peter Griffin"

    def test_replacement_values_converted_to_str(self):
        cat = Catalog()
        cat.add("en", Translations.from_value({"count": "{{n}} files"}))
        assert cat.t("count", n=3) == "3 files"

    def test_custom_delimiters(self):
        cat = Catalog(delimiters=UNDERSCORE)
        cat.add("en", Translations.from_value({"hi": "Hi __name__"}))
        assert cat.t("hi", name="Meg") == "Hi Meg"

    def test_custom_typed(self, catalog):
        catalog.set_locale("de")
        result = catalog.custom(
            "greetings.goodDay", str,
            [("firstName", Link("Peter")), ("lastName", Link("Griffin"))],
        )
        assert result == ["Guten Tag ", Link("Peter"), " ", Link("Griffin"), ""]

    def test_replacing_a_store(self, catalog):
        catalog.add("en", Translations.from_value({"greetings": {"hello": "Hi"}}))
        assert catalog.t("greetings.hello") == "Hi"

    def test_reserved_placeholder_names_via_mapping(self):
        cat = Catalog()
        cat.add("en", Translations.from_value({"pair": "{{key}}={{lang}}"}))
        assert cat.t("pair", replacements={"key": "k", "lang": "de"}) == "k=de"

    def test_mapping_applied_before_keywords(self):
        cat = Catalog()
        cat.add("en", Translations.from_value({"pair": "{{a}} {{b}}"}))
        assert cat.t("pair", replacements={"a": "1"}, b=2) == "1 2"
