"""Placeholder pattern tokenizer.

Splits a message pattern into alternating literal and placeholder
segments. Placeholders are delimited by braces and may nest, e.g.
"{count, plural, other{# items}}" is one placeholder whose body keeps the
inner braces verbatim.

The result always alternates literal, body, literal, ... so the original
pattern is recovered by wrapping every odd-indexed segment in braces and
concatenating.

Python 3.13+. Zero external dependencies.
"""

from i18nsource.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from i18nsource.diagnostics import DiagnosticCode, InvalidPatternError

__all__ = ["join_tokens", "tokenize_pattern"]


def tokenize_pattern(pattern: str) -> list[str]:
    """Tokenize a pattern by separating literal text from placeholders.

    Args:
        pattern: Message pattern such as "Hello, {name}!"

    Returns:
        Segments alternating literal text and placeholder bodies. A pattern
        without "{" is returned as a single segment.

    Raises:
        InvalidPatternError: If a placeholder is never closed, or a "}"
            follows a closed placeholder without a matching "{"

    Example:
        >>> tokenize_pattern("Hello, {name}!")
        ['Hello, ', 'name', '!']
        >>> tokenize_pattern("{a{b}c}")
        ['', 'a{b}c', '']
    """
    pos = pattern.find(PLACEHOLDER_OPEN)
    if pos == -1:
        return [pattern]

    tokens = [pattern[:pos]]
    while pos != -1:
        end = _find_placeholder_end(pattern, pos)
        tokens.append(pattern[pos + 1 : end])

        pos = pattern.find(PLACEHOLDER_OPEN, end + 1)
        literal_end = pos if pos != -1 else len(pattern)
        stray = pattern.find(PLACEHOLDER_CLOSE, end + 1, literal_end)
        if stray != -1:
            raise InvalidPatternError(
                pattern,
                stray,
                code=DiagnosticCode.PATTERN_UNMATCHED_CLOSE,
                reason="unmatched closing brace",
            )
        tokens.append(pattern[end + 1 : literal_end])

    return tokens


def _find_placeholder_end(pattern: str, start: int) -> int:
    """Return the offset of the brace closing the placeholder opened at start.

    Walks brace events left to right with a depth counter. When the next
    "}" is not after the next "{" it is taken first.
    """
    depth = 1
    pos = start
    while True:
        next_open = pattern.find(PLACEHOLDER_OPEN, pos + 1)
        next_close = pattern.find(PLACEHOLDER_CLOSE, pos + 1)
        if next_close == -1:
            raise InvalidPatternError(
                pattern,
                start,
                code=DiagnosticCode.PATTERN_UNTERMINATED,
                reason="unterminated placeholder",
            )
        if next_open != -1 and next_open < next_close:
            depth += 1
            pos = next_open
        else:
            depth -= 1
            pos = next_close
            if depth == 0:
                return pos


def join_tokens(tokens: list[str]) -> str:
    """Rebuild a pattern from tokenize_pattern() output."""
    return "".join(
        f"{PLACEHOLDER_OPEN}{token}{PLACEHOLDER_CLOSE}" if index % 2 else token
        for index, token in enumerate(tokens)
    )
