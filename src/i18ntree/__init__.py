# src/i18ntree/__init__.py
"""
i18ntree - runtime translations from nested JSON.

This package loads nested JSON translation documents, flattens them into
dot-addressed keys, and resolves keys to localized strings with optional
placeholder substitution, locale fallback chains, and typed output.

Main Components:
- models: Translation tree, delimiters, and template pieces
- decoder: JSON document decoding with path-aware errors
- flattener: Tree to dot-path mapping
- translations: Immutable per-locale translation store
- placeholders: String and typed placeholder substitution
- resolver: Lookup functions (t, tf, tr, trf, custom_tr, custom_trf)
- loader: File and HTTP loading
- catalog: Per-locale registry with an active locale and fallbacks
- config: Configuration management
"""

__version__ = "1.0.0"
__author__ = "i18ntree Team"
__description__ = "Runtime i18n from nested JSON translation trees"
