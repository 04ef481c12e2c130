"""i18nsource - message lookup with locale fallback and placeholder formatting.

Resolves a message within a category and language to its translation,
falling back from specific locales ("de-AT") to generic ones ("de") and to
the source language, and formats "{name}" placeholders, which may nest.

Public API:
    MessageSource - Per-category lookup with fallback merge and caching
    MessageSourceConfig - Immutable resolver configuration
    Translator - Category routing plus formatting in one call
    MessageFormatter - Named parameter substitution
    tokenize_pattern - Split a pattern into literal and placeholder segments
    JsonMessageLoader, PoMessageLoader, MemoryMessageLoader - Bundled loaders

Exceptions:
    I18nError - Base exception class
    InvalidPatternError - Unbalanced placeholder braces
    MessageFileNotFoundError - No message file in the fallback chain
    MessageLoadError - Malformed message file
    MissingMessageSourceError - No source registered for a category

Submodules:
    i18nsource.source - Loaders, resolver, load tracking and type aliases
    i18nsource.formatting - Tokenizer and formatter
    i18nsource.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    I18nError,
    InvalidPatternError,
    MessageFileNotFoundError,
    MessageLoadError,
    MissingMessageSourceError,
)
from .formatting import MessageFormatter, tokenize_pattern
from .source import (
    JsonMessageLoader,
    MemoryMessageLoader,
    MessageLoader,
    MessageSource,
    MessageSourceConfig,
    PoMessageLoader,
)
from .translator import Translator

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nsource")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "I18nError",
    "InvalidPatternError",
    "JsonMessageLoader",
    "MemoryMessageLoader",
    "MessageFileNotFoundError",
    "MessageFormatter",
    "MessageLoadError",
    "MessageLoader",
    "MessageSource",
    "MessageSourceConfig",
    "MissingMessageSourceError",
    "PoMessageLoader",
    "Translator",
    "__version__",
    "tokenize_pattern",
]
