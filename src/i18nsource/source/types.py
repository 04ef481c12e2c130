"""Type aliases for the message source domain.

Provides semantic type aliases used throughout the source package and by
user code when annotating MessageSource call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CacheKey",
    "Category",
    "LanguageCode",
    "MessageKey",
    "MessageTable",
]

type MessageKey = str
"""Source-language message used as lookup key (e.g., 'Save changes')."""

type LanguageCode = str
"""Locale code of a translation (e.g., 'de', 'de-AT')."""

type Category = str
"""Compound '<namespace>.<suffix>' identifier (e.g., 'app.errors')."""

type CacheKey = str
"""Composite '<namespace>/<lang>/<suffix>' cache key (e.g., 'app/de-AT/errors')."""

type MessageTable = dict[MessageKey, str]
"""Translations keyed by message; an empty value means 'known untranslated'."""
