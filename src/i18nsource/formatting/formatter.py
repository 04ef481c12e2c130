"""Message formatter: substitutes named parameters into patterns.

Placeholders are matched to parameters by name, the part of the
placeholder body before the first comma. Numbers are rendered with
Babel's locale-aware decimal formatting; placeholders without a matching
parameter are kept verbatim.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

from i18nsource.constants import (
    PLACEHOLDER_ARG_SEPARATOR,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
)
from i18nsource.formatting.tokenizer import tokenize_pattern
from i18nsource.locale_utils import get_babel_locale

__all__ = ["MessageFormatter"]

logger = logging.getLogger(__name__)


class MessageFormatter:
    """Formats message patterns with named parameters.

    Stateless apart from logging; one instance may be shared between
    threads and translators.

    Example:
        >>> formatter = MessageFormatter()
        >>> formatter.format("Hello, {name}!", {"name": "Anna"}, "en-US")
        'Hello, Anna!'
        >>> formatter.format("{count} files", {"count": 1234}, "de")
        '1.234 files'
    """

    __slots__ = ()

    def format(
        self,
        pattern: str,
        params: Mapping[str, Any] | None,
        language: str,
    ) -> str:
        """Format a pattern by substituting parameters into placeholders.

        Args:
            pattern: Message pattern with "{name}" placeholders
            params: Parameter values keyed by placeholder name
            language: Locale used to render numeric values

        Returns:
            The formatted message

        Raises:
            InvalidPatternError: If the pattern's braces are unbalanced
        """
        tokens = tokenize_pattern(pattern)
        if len(tokens) == 1:
            return pattern

        params = params or {}
        parts: list[str] = []
        for index, token in enumerate(tokens):
            if index % 2 == 0:
                parts.append(token)
                continue
            name = token.split(PLACEHOLDER_ARG_SEPARATOR, 1)[0].strip()
            if name in params:
                parts.append(self._format_value(params[name], language))
            else:
                parts.append(f"{PLACEHOLDER_OPEN}{token}{PLACEHOLDER_CLOSE}")
        return "".join(parts)

    @staticmethod
    def _format_value(value: Any, language: str) -> str:
        """Render a single parameter value for the given language."""
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            return str(value)
        try:
            return format_decimal(value, locale=get_babel_locale(language))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s' for number formatting: %s. Using str()", language, e
            )
            return str(value)
