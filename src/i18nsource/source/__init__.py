"""Message source package: loading, fallback resolution and caching.

Submodules:
    types    - PEP 695 type aliases (MessageTable, Category, LanguageCode, ...)
    config   - MessageSourceConfig
    loading  - MessageLoader protocol, JSON/PO/in-memory loaders,
               LoadResult, LoadSummary
    resolver - MessageSource (fallback merge and cache)
    rwlock   - RWLock guarding the cache

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nsource.enums import LoadStatus
from i18nsource.source.config import MessageSourceConfig
from i18nsource.source.loading import (
    JsonMessageLoader,
    LoadResult,
    LoadSummary,
    MemoryMessageLoader,
    MessageLoader,
    PoMessageLoader,
)
from i18nsource.source.resolver import MessageSource, split_category
from i18nsource.source.types import CacheKey, Category, LanguageCode, MessageKey, MessageTable

__all__ = [
    # Resolver
    "MessageSource",
    "MessageSourceConfig",
    "split_category",
    # Loader protocol and implementations
    "MessageLoader",
    "JsonMessageLoader",
    "PoMessageLoader",
    "MemoryMessageLoader",
    # Load tracking
    "LoadStatus",
    "LoadResult",
    "LoadSummary",
    # Type aliases for user code type annotations
    "CacheKey",
    "Category",
    "LanguageCode",
    "MessageKey",
    "MessageTable",
]
