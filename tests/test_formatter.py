"""Tests for MessageFormatter parameter substitution.

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from i18nsource.diagnostics import InvalidPatternError
from i18nsource.formatting import MessageFormatter


@pytest.fixture
def formatter() -> MessageFormatter:
    """Shared formatter instance."""
    return MessageFormatter()


class TestSubstitution:
    """Named placeholders are replaced by parameter values."""

    def test_string_parameter(self, formatter: MessageFormatter) -> None:
        """Simple greeting."""
        assert formatter.format("Hello, {name}!", {"name": "Anna"}, "en-US") == "Hello, Anna!"

    def test_multiple_parameters(self, formatter: MessageFormatter) -> None:
        """Every placeholder is substituted."""
        result = formatter.format("{user} moved {file}", {"user": "Ann", "file": "a.txt"}, "en")
        assert result == "Ann moved a.txt"

    def test_repeated_parameter(self, formatter: MessageFormatter) -> None:
        """The same name may appear more than once."""
        assert formatter.format("{x}-{x}", {"x": "y"}, "en") == "y-y"

    def test_name_before_comma(self, formatter: MessageFormatter) -> None:
        """Only the text before the first comma names the parameter."""
        assert formatter.format("{ total , number}", {"total": "7"}, "en") == "7"

    def test_non_string_values_use_str(self, formatter: MessageFormatter) -> None:
        """Booleans and other objects are rendered with str()."""
        assert formatter.format("{flag}/{none}", {"flag": True, "none": None}, "en") == "True/None"


class TestNumberRendering:
    """Numeric parameters use Babel decimal formatting."""

    def test_grouping_english(self, formatter: MessageFormatter) -> None:
        """English thousands separator."""
        assert formatter.format("{n} items", {"n": 1234}, "en-US") == "1,234 items"

    def test_grouping_german(self, formatter: MessageFormatter) -> None:
        """German thousands separator."""
        assert formatter.format("{n} Dateien", {"n": 1234}, "de") == "1.234 Dateien"

    def test_decimal(self, formatter: MessageFormatter) -> None:
        """Decimal values keep their fraction."""
        assert formatter.format("{n}", {"n": Decimal("1234.5")}, "en") == "1,234.5"

    def test_unknown_locale_falls_back_to_str(
        self, formatter: MessageFormatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Locales without CLDR data render numbers with str() and warn."""
        with caplog.at_level(logging.WARNING, logger="i18nsource.formatting.formatter"):
            assert formatter.format("{n}", {"n": 1234}, "xx") == "1234"
        assert "Unknown locale 'xx'" in caplog.text


class TestUnresolvedPlaceholders:
    """Placeholders without parameters are kept verbatim."""

    def test_missing_parameter(self, formatter: MessageFormatter) -> None:
        """Braces are preserved."""
        assert formatter.format("Hi {name}", {}, "en") == "Hi {name}"

    def test_no_params(self, formatter: MessageFormatter) -> None:
        """None behaves like an empty mapping."""
        assert formatter.format("Hi {name}, {a{b}c}", None, "en") == "Hi {name}, {a{b}c}"

    def test_plain_pattern_unchanged(self, formatter: MessageFormatter) -> None:
        """Patterns without placeholders are returned as-is."""
        assert formatter.format("Nothing to do}", {"x": 1}, "en") == "Nothing to do}"


class TestInvalidPattern:
    """Formatting validates the pattern even without parameters."""

    @pytest.mark.parametrize("params", [None, {"name": "x"}])
    def test_unbalanced_raises(self, formatter: MessageFormatter, params: dict | None) -> None:
        """InvalidPatternError reaches the caller."""
        with pytest.raises(InvalidPatternError):
            formatter.format("Hello, {name", params, "en")
