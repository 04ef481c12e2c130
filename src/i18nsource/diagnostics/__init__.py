"""Diagnostic system for i18nsource errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    I18nError,
    InvalidPatternError,
    MessageFileNotFoundError,
    MessageLoadError,
    MissingMessageSourceError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "I18nError",
    "InvalidPatternError",
    "MessageFileNotFoundError",
    "MessageLoadError",
    "MissingMessageSourceError",
]
