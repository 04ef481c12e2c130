"""Tests for locale_utils: validation, fallback codes and Babel lookup.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from i18nsource.locale_utils import (
    fallback_language,
    get_babel_locale,
    normalize_locale,
    validate_locale,
)


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_posix(self) -> None:
        """POSIX codes are unchanged."""
        assert normalize_locale("pt_BR") == "pt_BR"

    def test_multiple_hyphens(self) -> None:
        """Script and territory."""
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"


class TestValidateLocale:
    """Syntax-only validation through Babel's parser."""

    @pytest.mark.parametrize("code", ["en", "en-US", "en_US", "zh-Hans-CN", "xx", "de-AT"])
    def test_valid_codes(self, code: str) -> None:
        """Well-formed codes are returned unchanged."""
        assert validate_locale(code) == code

    @pytest.mark.parametrize("code", ["", "e", "en US", "1x", "en-US-x-y-z!"])
    def test_invalid_codes(self, code: str) -> None:
        """Short or malformed codes raise ValueError."""
        with pytest.raises(ValueError):
            validate_locale(code)

    def test_non_string(self) -> None:
        """Non-string input raises ValueError rather than TypeError."""
        with pytest.raises(ValueError, match="string"):
            validate_locale(42)  # type: ignore[arg-type]


class TestFallbackLanguage:
    """Two-letter generic codes."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en"), ("en", "en"), ("de_AT", "de"), ("pt-BR", "pt")],
    )
    def test_prefix(self, code: str, expected: str) -> None:
        """First two characters."""
        assert fallback_language(code) == expected

    @pytest.mark.parametrize("code", ["", "e"])
    def test_too_short(self, code: str) -> None:
        """Codes shorter than two characters are rejected."""
        with pytest.raises(ValueError, match="at least 2"):
            fallback_language(code)

    @given(code=st.text(min_size=2))
    def test_idempotent(self, code: str) -> None:
        """The generic code of a generic code is itself."""
        generic = fallback_language(code)
        assert fallback_language(generic) == generic


class TestGetBabelLocale:
    """Cached Babel Locale lookup."""

    def test_bcp47_format(self) -> None:
        """BCP-47 codes are accepted."""
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_caching(self) -> None:
        """Repeated calls return the same object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")

    def test_unknown_locale(self) -> None:
        """Codes without CLDR data raise UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx")
