"""Message source: per-category translation lookup with locale fallback.

Resolves a ``(category, language)`` pair to a message table, falling back
from specific locales to generic ones and from generic ones to the source
language, and caches the merged table for the lifetime of the instance.

Fallback policy:
    - A specific locale ("en-US") is merged over its generic code ("en").
    - A generic code equal to the source language's generic code ("en" with
      source "en-GB") is merged over the full source language.
    - A generic, unrelated code without a message file is an error.

In every merge the more specific table wins; fallback values only fill
keys that are absent or hold the empty "untranslated" sentinel.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from i18nsource.constants import CACHE_KEY_SEPARATOR, CATEGORY_SEPARATOR
from i18nsource.diagnostics import MessageFileNotFoundError
from i18nsource.enums import LoadStatus
from i18nsource.locale_utils import fallback_language, validate_locale
from i18nsource.source.config import MessageSourceConfig
from i18nsource.source.loading import LoadResult, LoadSummary
from i18nsource.source.rwlock import RWLock

if TYPE_CHECKING:
    from i18nsource.source.loading import MessageLoader
    from i18nsource.source.types import (
        CacheKey,
        Category,
        LanguageCode,
        MessageKey,
        MessageTable,
    )

__all__ = ["MessageSource", "split_category"]

logger = logging.getLogger(__name__)


def split_category(category: Category) -> tuple[str, str]:
    """Split a category into its namespace and file suffix.

    Splits on the first ".", so "app.admin.users" has namespace "app"
    and suffix "admin.users".

    Args:
        category: Category such as "app.errors"

    Returns:
        (namespace, suffix) tuple

    Raises:
        ValueError: If the category has no "." or an empty component
    """
    namespace, sep, suffix = category.partition(CATEGORY_SEPARATOR)
    if not sep or not namespace or not suffix:
        msg = f"Category must have the form '<namespace>.<suffix>', got: {category!r}"
        raise ValueError(msg)
    return namespace, suffix


class MessageSource:
    """Translation lookup for one set of message files.

    Tables are loaded lazily through the injected loader, merged with their
    fallback languages and cached per ``<namespace>/<lang>/<suffix>``.
    Failed loads are never cached. Looking up a key that has no translation
    records an empty sentinel in the cached table, so repeated misses are
    answered from the cache.

    Thread-safe: the cache is guarded by a readers-writer lock. Loader calls
    run outside the lock; if two threads miss the same key concurrently the
    first stored table is kept.

    Example:
        >>> loader = JsonMessageLoader()
        >>> source = MessageSource(loader, MessageSourceConfig(file_suffix="json"))
        >>> source.translate("app.menu", "Save", "de-AT")
        'Speichern'
        # Reads messages/de-AT/menu.json, then messages/de/menu.json for gaps

    Attributes:
        config: Immutable resolver configuration
    """

    __slots__ = ("_config", "_load_results", "_loader", "_lock", "_messages")

    def __init__(
        self,
        loader: MessageLoader,
        config: MessageSourceConfig | None = None,
    ) -> None:
        """Initialize message source.

        Args:
            loader: Loader returning the message table stored at a path
            config: Resolver configuration (defaults to MessageSourceConfig())
        """
        self._loader = loader
        self._config = config if config is not None else MessageSourceConfig()
        self._messages: dict[CacheKey, MessageTable] = {}
        self._load_results: list[LoadResult] = []
        self._lock = RWLock()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"MessageSource(source_language={self._config.source_language!r}, "
            f"base_path={self._config.base_path!r}, cached={len(self._messages)})"
        )

    @property
    def config(self) -> MessageSourceConfig:
        """Get resolver configuration (read-only)."""
        return self._config

    @property
    def source_language(self) -> LanguageCode:
        """Get the language the message keys are written in."""
        return self._config.source_language

    @property
    def force_translation(self) -> bool:
        """Get whether source-language requests are translated too."""
        return self._config.force_translation

    def translate(self, category: Category, message: MessageKey, language: LanguageCode) -> str:
        """Translate a message, skipping lookup for the source language.

        Args:
            category: Category such as "app.errors"
            message: Message key in the source language
            language: Requested language

        Returns:
            Translation, or "" if none exists or the language is the source
            language and force_translation is off

        Raises:
            MessageFileNotFoundError: If no message file exists for the
                category in the language or its fallbacks
            ValueError: If category or language is malformed
        """
        if language == self._config.source_language and not self._config.force_translation:
            return ""
        return self.translate_message(category, message, language)

    def translate_message(
        self, category: Category, message: MessageKey, language: LanguageCode
    ) -> str:
        """Translate a message, loading and caching the table on first use.

        Args:
            category: Category such as "app.errors"
            message: Message key in the source language
            language: Requested language

        Returns:
            Translation, or "" if the key has no translation

        Raises:
            MessageFileNotFoundError: If no message file exists for the
                category in the language or its fallbacks
            ValueError: If category or language is malformed
        """
        key = self._cache_key(category, language)

        with self._lock.read():
            messages = self._messages.get(key)
            if messages is not None:
                translation = messages.get(message)
                if translation:
                    return translation
                if translation is not None:
                    logger.debug("Cached miss for '%s' in %s", message, key)
                    return ""

        loaded: MessageTable | None = None
        if messages is None:
            logger.debug("Cache miss for %s", key)
            loaded = self.load_messages(category, language)

        with self._lock.write():
            if loaded is not None:
                messages = self._messages.setdefault(key, loaded)
            else:
                messages = self._messages[key]
            translation = messages.get(message)
            if translation:
                return translation
            messages[message] = ""
            return ""

    def is_cached(self, category: Category, language: LanguageCode) -> bool:
        """Check whether the table for a category and language is cached."""
        key = self._cache_key(category, language)
        with self._lock.read():
            return key in self._messages

    def get_message_file_path(self, category: Category, language: LanguageCode) -> str:
        """Build the message file path for a category and language.

        The path is ``<base_path>/<language>/`` followed by the file_map
        entry for the category suffix if there is one, otherwise the suffix
        with backslashes turned into slashes and ``.<file_suffix>`` appended
        when a file suffix is configured.

        Args:
            category: Category such as "app.errors"
            language: Language code

        Returns:
            File path string (no I/O is performed)

        Raises:
            ValueError: If the category is malformed
        """
        _, suffix = split_category(category)
        path = f"{self._config.base_path}/{language}/"
        file_name = self._config.file_map.get(suffix)
        if file_name is not None:
            return path + file_name
        path += suffix.replace("\\", "/")
        if self._config.file_suffix:
            path += "." + self._config.file_suffix
        return path

    def load_messages(self, category: Category, language: LanguageCode) -> MessageTable:
        """Load the messages for a category and language, merged with fallbacks.

        If the language is a specific locale such as "en-US", the generic
        "en" messages are merged under it. If the language is the generic
        code of the source language (e.g. "en" when the source language is
        "en-GB"), the source language messages are merged under it.

        Args:
            category: Category such as "app.errors"
            language: Requested language

        Returns:
            Merged message table (empty if no file exists but the fallback
            chain ends at the source language)

        Raises:
            MessageFileNotFoundError: If the file is missing and there is no
                applicable fallback
            ValueError: If category or language is malformed
        """
        validate_locale(language)
        message_file = self.get_message_file_path(category, language)
        messages = self._load_file(category, language, message_file)

        generic = fallback_language(language)
        source_generic = fallback_language(self._config.source_language)

        if language != generic:
            return self.load_fallback_messages(category, generic, messages, message_file)
        if language == source_generic:
            return self.load_fallback_messages(
                category, self._config.source_language, messages, message_file
            )
        if messages is None:
            raise MessageFileNotFoundError(category, [message_file])
        return messages

    def load_fallback_messages(
        self,
        category: Category,
        fallback: LanguageCode,
        messages: MessageTable | None,
        original_file: str,
    ) -> MessageTable:
        """Merge the messages of a fallback language under a loaded table.

        Fallback values only fill keys that are absent from ``messages`` or
        hold "". A missing fallback file is not an error on its own. Loader
        errors on the fallback file are logged and skipped unless the
        source is configured strict.

        Args:
            category: Category such as "app.errors"
            fallback: Fallback language code
            messages: Table loaded for the requested language, or None if
                its file does not exist
            original_file: Path of the requested language's file

        Returns:
            Merged message table

        Raises:
            MessageFileNotFoundError: If neither file exists and the fallback
                is not the source language or its generic code
        """
        fallback_file = self.get_message_file_path(category, fallback)
        try:
            fallback_messages = self._load_file(category, fallback, fallback_file, fallback=True)
        except Exception:
            if self._config.strict:
                raise
            logger.warning("Ignoring unreadable fallback file %s", fallback_file, exc_info=True)
            fallback_messages = None

        source_language = self._config.source_language
        if (
            messages is None
            and fallback_messages is None
            and fallback not in (source_language, fallback_language(source_language))
        ):
            raise MessageFileNotFoundError(category, [original_file, fallback_file])
        if messages is None:
            return fallback_messages if fallback_messages is not None else {}
        if fallback_messages:
            filled = 0
            for key, value in fallback_messages.items():
                if value and not messages.get(key):
                    messages[key] = value
                    filled += 1
            logger.debug("Filled %d messages from %s into %s", filled, fallback_file, original_file)
        return messages

    def get_load_summary(self) -> LoadSummary:
        """Get summary of every loader call made so far.

        Returns:
            LoadSummary with one result per loader call, in call order

        Example:
            >>> summary = source.get_load_summary()
            >>> print(f"Loaded: {summary.successful}/{summary.total_attempted}")
        """
        with self._lock.read():
            return LoadSummary(results=tuple(self._load_results))

    def _cache_key(self, category: Category, language: LanguageCode) -> CacheKey:
        namespace, suffix = split_category(category)
        return CACHE_KEY_SEPARATOR.join((namespace, language, suffix))

    def _load_file(
        self,
        category: Category,
        language: LanguageCode,
        path: str,
        *,
        fallback: bool = False,
    ) -> MessageTable | None:
        """Call the loader and record the outcome.

        Returns:
            A private copy of the loaded table, or None if the file is absent
        """
        try:
            table = self._loader.load(path)
        except FileNotFoundError:
            table = None
        except Exception as e:
            self._record(LoadResult(category, language, path, LoadStatus.ERROR, e, fallback))
            raise

        if table is None:
            logger.debug("Message file not found: %s", path)
            self._record(LoadResult(category, language, path, LoadStatus.NOT_FOUND, None, fallback))
            return None

        logger.info("Loaded %d messages from %s", len(table), path)
        self._record(LoadResult(category, language, path, LoadStatus.SUCCESS, None, fallback))
        return dict(table)

    def _record(self, result: LoadResult) -> None:
        with self._lock.write():
            self._load_results.append(result)
