# src/i18ntree/config.py
import configparser
import logging
from pathlib import Path
from typing import Any

_BOOL_KEYS = {
    ('loading', 'expand_lists'),
    ('logging', 'log_missing_keys'),
}


class Config:
    """Configuration manager for i18ntree"""

    def __init__(self):
        self.config = configparser.ConfigParser()
        self.config_path = Path(__file__).parent.parent / "config.ini"

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path)

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('placeholders')
        self.config.set('placeholders', 'delimiters', 'curly')

        self.config.add_section('loading')
        self.config.set('loading', 'expand_lists', 'true')
        self.config.set('loading', 'encoding', 'utf-8')

        self.config.add_section('fetch')
        self.config.set('fetch', 'timeout_seconds', '30')
        self.config.set('fetch', 'connect_timeout_seconds', '10')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'WARNING')
        self.config.set('logging', 'log_missing_keys', 'false')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            value = self.config.get(section, key)
            if (section, key) in _BOOL_KEYS:
                return value.strip().lower() in ('true', '1', 'yes', 'on')
            if section == 'fetch' and key.endswith('_seconds'):
                return float(value)
            return value
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def set_value(self, section: str, key: str, value: Any) -> None:
        """Override a configuration value in memory."""
        if not self.config.has_section(section):
            self.config.add_section(section)
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        self.config.set(section, key, str(value))


def configure_logging(level: Any = None) -> None:
    """Apply ``[logging] log_level`` to the package logger."""
    level = level or config.get('logging', 'log_level', 'WARNING')
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.getLogger('i18ntree').setLevel(level)


# Global config instance
config = Config()
