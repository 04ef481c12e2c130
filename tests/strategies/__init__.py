"""Hypothesis strategies for i18nsource property-based testing.

Strategies are organized by domain:

- patterns: message patterns with (nested) placeholders and their
  expected token sequences
- messages: message tables and locale codes for resolver tests

Usage:
    from tests.strategies import balanced_patterns, message_tables
    from tests.strategies.patterns import unterminated_patterns

Event-Emitting Strategies (HypoFuzz-Optimized):
    - balanced_patterns: placeholder_count=N, max_nesting=N
    - message_tables: table_size=empty|small|large
"""

from .messages import language_codes, message_keys, message_tables
from .patterns import balanced_patterns, literal_text, unterminated_patterns

__all__ = [
    "balanced_patterns",
    "language_codes",
    "literal_text",
    "message_keys",
    "message_tables",
    "unterminated_patterns",
]
