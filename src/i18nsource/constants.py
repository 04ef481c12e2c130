"""Shared constants for i18nsource.

Centralizes defaults used by the message source, the formatter and the
translator. Placing them here avoids circular imports between the
``source`` and ``formatting`` packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Configuration defaults
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_BASE_PATH",
    # Category and cache key layout
    "CATEGORY_SEPARATOR",
    "CACHE_KEY_SEPARATOR",
    # Locale codes
    "FALLBACK_LANGUAGE_LENGTH",
    # Placeholder syntax
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "PLACEHOLDER_ARG_SEPARATOR",
]

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================

# Language the message keys themselves are written in.
DEFAULT_SOURCE_LANGUAGE: str = "en-US"

# Root directory holding one sub-directory per language.
DEFAULT_BASE_PATH: str = "messages"

# ============================================================================
# CATEGORY AND CACHE KEY LAYOUT
# ============================================================================

# "app.errors" -> namespace "app", suffix "errors"
CATEGORY_SEPARATOR: str = "."

# "app/de-AT/errors"
CACHE_KEY_SEPARATOR: str = "/"

# ============================================================================
# LOCALE CODES
# ============================================================================

# Generic language codes are the first two characters of a locale ("en-US" -> "en").
FALLBACK_LANGUAGE_LENGTH: int = 2

# ============================================================================
# PLACEHOLDER SYNTAX
# ============================================================================

PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# "{count, number}" -> parameter name "count"
PLACEHOLDER_ARG_SEPARATOR: str = ","
