"""Locale utilities for message lookup and number formatting.

Centralizes locale code handling used throughout the codebase:
syntax validation, the two-letter generic fallback code used by the
message source, and BCP-47 to POSIX conversion for Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from babel.core import parse_locale

from i18nsource.constants import FALLBACK_LANGUAGE_LENGTH

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "fallback_language",
    "get_babel_locale",
    "normalize_locale",
    "validate_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=256)
def validate_locale(locale_code: str) -> str:
    """Check that a locale code is syntactically well formed.

    Only the structure is checked (language, script, territory, variant);
    the locale does not need CLDR data, so private codes such as "xx" pass.
    Codes shorter than two characters are rejected because the generic
    fallback code is taken from the first two characters.

    Args:
        locale_code: Locale code in BCP-47 or POSIX form

    Returns:
        The locale code, unchanged

    Raises:
        ValueError: If the code is malformed or shorter than two characters
    """
    if not isinstance(locale_code, str):
        msg = f"Locale code must be a string, got {type(locale_code).__name__}"
        raise ValueError(msg)
    if len(locale_code) < FALLBACK_LANGUAGE_LENGTH:
        msg = (
            f"Locale code must be at least {FALLBACK_LANGUAGE_LENGTH} characters, "
            f"got: {locale_code!r}"
        )
        raise ValueError(msg)
    try:
        parse_locale(normalize_locale(locale_code))
    except ValueError as e:
        msg = f"Invalid locale code {locale_code!r}: {e}"
        raise ValueError(msg) from e
    return locale_code


def fallback_language(locale_code: str) -> str:
    """Return the generic two-letter code of a locale.

    Args:
        locale_code: Locale code such as "en-US" or "en"

    Returns:
        First two characters of the code ("en-US" -> "en")

    Raises:
        ValueError: If the code is shorter than two characters

    Example:
        >>> fallback_language("de-AT")
        'de'
        >>> fallback_language("de")
        'de'
    """
    if len(locale_code) < FALLBACK_LANGUAGE_LENGTH:
        msg = (
            f"Locale code must be at least {FALLBACK_LANGUAGE_LENGTH} characters, "
            f"got: {locale_code!r}"
        )
        raise ValueError(msg)
    return locale_code[:FALLBACK_LANGUAGE_LENGTH]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data on first Locale use
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
