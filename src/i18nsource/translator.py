"""Category routing and one-call translation.

Translator maps categories to MessageSource instances and combines lookup
with parameter formatting: when no translation exists the original message
is formatted in the source language instead.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from i18nsource.constants import DEFAULT_SOURCE_LANGUAGE
from i18nsource.diagnostics import MissingMessageSourceError
from i18nsource.formatting import MessageFormatter
from i18nsource.locale_utils import validate_locale

if TYPE_CHECKING:
    from i18nsource.source import Category, LanguageCode, MessageKey, MessageSource

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

_WILDCARD = "*"


class Translator:
    """Routes categories to message sources and formats the result.

    Source keys are either exact categories ("app.errors") or prefix
    patterns ending in "*" ("app.*", or "*" for everything). Exact keys
    win; patterns are tried in the order they were given.

    Example:
        >>> translator = Translator({
        ...     "app.*": MessageSource(JsonMessageLoader(), app_config),
        ...     "*": MessageSource(PoMessageLoader(), vendor_config),
        ... }, language="de-AT")
        >>> translator.translate("app.menu", "Hello, {name}!", {"name": "Anna"})
        'Hallo, Anna!'
    """

    __slots__ = ("_formatter", "_language", "_patterns", "_sources")

    def __init__(
        self,
        sources: Mapping[str, MessageSource],
        *,
        formatter: MessageFormatter | None = None,
        language: LanguageCode = DEFAULT_SOURCE_LANGUAGE,
    ) -> None:
        """Initialize translator.

        Args:
            sources: Message sources keyed by category or "prefix*" pattern
            formatter: Formatter for parameter substitution
                (defaults to MessageFormatter())
            language: Language used when translate() gets none

        Raises:
            ValueError: If language is malformed
        """
        self._sources: dict[str, MessageSource] = dict(sources)
        self._patterns: tuple[tuple[str, MessageSource], ...] = tuple(
            (key[: -len(_WILDCARD)], source)
            for key, source in self._sources.items()
            if key.endswith(_WILDCARD)
        )
        self._formatter = formatter if formatter is not None else MessageFormatter()
        self._language = validate_locale(language)

    @property
    def language(self) -> LanguageCode:
        """Get the default target language."""
        return self._language

    def get_message_source(self, category: Category) -> MessageSource:
        """Return the message source responsible for a category.

        Raises:
            MissingMessageSourceError: If no key or pattern matches
        """
        source = self._sources.get(category)
        if source is not None:
            return source
        for prefix, candidate in self._patterns:
            if category.startswith(prefix):
                return candidate
        raise MissingMessageSourceError(category)

    def translate(
        self,
        category: Category,
        message: MessageKey,
        params: Mapping[str, Any] | None = None,
        language: LanguageCode | None = None,
    ) -> str:
        """Translate and format a message.

        Args:
            category: Category such as "app.errors"
            message: Message key in the source language, possibly with
                "{name}" placeholders
            params: Placeholder values
            language: Target language (defaults to the translator language)

        Returns:
            Formatted translation, or the formatted original message when
            no translation exists

        Raises:
            MissingMessageSourceError: If no source handles the category
            MessageFileNotFoundError: If the source has no file for the
                category in the language or its fallbacks
            InvalidPatternError: If the chosen pattern has unbalanced braces
        """
        language = language if language is not None else self._language
        source = self.get_message_source(category)
        translation = source.translate(category, message, language)
        if not translation:
            logger.debug("No translation for '%s' in %s/%s", message, category, language)
            return self._formatter.format(message, params, source.source_language)
        return self._formatter.format(translation, params, language)
