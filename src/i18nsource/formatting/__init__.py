"""Pattern tokenizing and parameter formatting.

Submodules:
    tokenizer - tokenize_pattern, join_tokens
    formatter - MessageFormatter

Python 3.13+.
"""

from .formatter import MessageFormatter
from .tokenizer import join_tokens, tokenize_pattern

__all__ = [
    "MessageFormatter",
    "join_tokens",
    "tokenize_pattern",
]
