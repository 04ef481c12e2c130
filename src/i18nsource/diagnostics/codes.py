"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages attached to
i18nsource exceptions.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Message file errors (missing primary or fallback files)
        2000-2999: Pattern errors (placeholder syntax)
        3000-3999: Loader errors (malformed message files)
        4000-4999: Routing errors (no message source for a category)
    """

    # Message file errors (1000-1999)
    MESSAGE_FILE_NOT_FOUND = 1001
    FALLBACK_FILE_NOT_FOUND = 1002

    # Pattern errors (2000-2999)
    PATTERN_INVALID = 2001
    PATTERN_UNTERMINATED = 2002
    PATTERN_UNMATCHED_CLOSE = 2003

    # Loader errors (3000-3999)
    LOAD_FAILED = 3001
    LOAD_INVALID_TABLE = 3002

    # Routing errors (4000-4999)
    SOURCE_NOT_FOUND = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: File path or pattern offset the error refers to
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[MESSAGE_FILE_NOT_FOUND]: The message file for category 'app.menu' ...
              --> messages/fr/menu.json
              = help: Create the file or add a fallback language

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.location is not None:
            lines.append(f"  --> {self.location}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
