"""Pytest configuration and shared fixtures."""
import pytest

from i18ntree.config import config
from i18ntree.translations import Translations


@pytest.fixture
def override_config():
    """Set config values for one test and restore them afterwards."""
    saved = []

    def _set(section, key, value):
        previous = config.config.get(section, key, fallback=None)
        saved.append((section, key, previous))
        config.set_value(section, key, value)

    yield _set

    for section, key, previous in reversed(saved):
        if previous is None:
            config.config.remove_option(section, key)
        else:
            config.config.set(section, key, previous)


@pytest.fixture
def english():
    return Translations.from_value({
        "greetings": {
            "hello": "Hello",
            "goodDay": "Good Day {{firstName}} {{lastName}}",
        },
        "englishOnly": "This key only exists in english",
    })


@pytest.fixture
def german():
    return Translations.from_value({
        "greetings": {
            "hello": "Hallo",
            "goodDay": "Guten Tag {{firstName}} {{lastName}}",
        },
    })
