"""i18nsource exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Input validation (malformed categories, locale codes and
configuration values) raises ValueError instead.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "I18nError",
    "InvalidPatternError",
    "MessageFileNotFoundError",
    "MessageLoadError",
    "MissingMessageSourceError",
]


class I18nError(Exception):
    """Base exception for all i18nsource errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidPatternError(I18nError):
    """Message pattern has unbalanced placeholder braces.

    Raised by the tokenizer and never recovered internally.

    Attributes:
        pattern: The offending message pattern
        position: Character offset where the imbalance was detected
    """

    def __init__(
        self,
        pattern: str,
        position: int,
        *,
        code: DiagnosticCode = DiagnosticCode.PATTERN_INVALID,
        reason: str = "unbalanced braces",
    ) -> None:
        """Initialize InvalidPatternError.

        Args:
            pattern: The offending message pattern
            position: Character offset where the imbalance was detected
            code: Diagnostic code describing the kind of imbalance
            reason: Short description used in the error message
        """
        diagnostic = Diagnostic(
            code=code,
            message=f"Message pattern is invalid ({reason}): {pattern!r}",
            hint="Every '{' must be closed by a matching '}'",
            location=f"offset {position}",
        )
        super().__init__(diagnostic)
        self.pattern = pattern
        self.position = position


class MessageFileNotFoundError(I18nError):
    """Neither the message file nor any applicable fallback file exists.

    Distinct from a missing translation key, which is not an error.

    Attributes:
        category: Category whose messages were requested
        paths: Every file path that was tried, primary first
    """

    def __init__(self, category: str, paths: Iterable[str]) -> None:
        """Initialize MessageFileNotFoundError.

        Args:
            category: Category whose messages were requested
            paths: Every file path that was tried, primary first
        """
        self.category = category
        self.paths: tuple[str, ...] = tuple(paths)
        primary, *fallbacks = self.paths
        if fallbacks:
            diagnostic = Diagnostic(
                code=DiagnosticCode.FALLBACK_FILE_NOT_FOUND,
                message=(
                    f"The message file for category '{category}' does not exist: "
                    f"{primary}. Fallback file does not exist as well: {fallbacks[0]}"
                ),
                hint="Create one of the files or change the source language",
                location=primary,
            )
        else:
            diagnostic = Diagnostic(
                code=DiagnosticCode.MESSAGE_FILE_NOT_FOUND,
                message=(
                    f"The message file for category '{category}' does not exist: {primary}"
                ),
                hint="Create the file or request a language with a fallback",
                location=primary,
            )
        super().__init__(diagnostic)


class MessageLoadError(I18nError):
    """Message file exists but could not be read into a message table.

    Raised by the bundled loaders for malformed files. Propagates through
    the message source untouched by fallback logic.

    Attributes:
        path: Path of the malformed file
    """

    def __init__(
        self,
        path: str,
        reason: str,
        *,
        code: DiagnosticCode = DiagnosticCode.LOAD_FAILED,
    ) -> None:
        """Initialize MessageLoadError.

        Args:
            path: Path of the malformed file
            reason: What went wrong while reading it
            code: Diagnostic code
        """
        diagnostic = Diagnostic(
            code=code,
            message=f"Failed to load message file {path}: {reason}",
            location=path,
        )
        super().__init__(diagnostic)
        self.path = path


class MissingMessageSourceError(I18nError):
    """No message source is registered for a category.

    Attributes:
        category: Category that could not be routed
    """

    def __init__(self, category: str) -> None:
        """Initialize MissingMessageSourceError.

        Args:
            category: Category that could not be routed
        """
        diagnostic = Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_FOUND,
            message=f"Unable to locate message source for category '{category}'",
            hint="Register a source for the category or a matching 'prefix*' pattern",
        )
        super().__init__(diagnostic)
        self.category = category
