"""Message file loading infrastructure for MessageSource.

Provides the protocol for message loaders, bundled JSON, gettext PO and
in-memory implementations, and result/summary data structures for
tracking load attempts.

Components:
    MessageLoader - Protocol for loading message tables (structural typing)
    JsonMessageLoader - Reads a JSON object of message -> translation
    PoMessageLoader - Reads gettext .po catalogs through Babel
    MemoryMessageLoader - Serves tables from a mapping of path -> table
    LoadResult - Immutable result of a single load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+.
"""

from __future__ import annotations

import json
import threading
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from babel.messages.pofile import PoFileError, read_po

from i18nsource.diagnostics import DiagnosticCode, MessageLoadError
from i18nsource.enums import LoadStatus
from i18nsource.source.types import Category, LanguageCode, MessageTable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "MessageLoader",
    # Concrete loaders
    "JsonMessageLoader",
    "PoMessageLoader",
    "MemoryMessageLoader",
    # Load result types
    "LoadResult",
    "LoadSummary",
]


class MessageLoader(Protocol):
    """Protocol for loading the message table stored at a file path.

    Absence is not an error: return None (or raise FileNotFoundError) when
    the file does not exist, so the message source can try fallback
    languages. Any other exception means the file exists but is unusable
    and propagates to the caller.

    Example:
        >>> class YamlLoader:
        ...     def load(self, path: str) -> MessageTable | None:
        ...         try:
        ...             with open(path, encoding="utf-8") as f:
        ...                 return yaml.safe_load(f)
        ...         except FileNotFoundError:
        ...             return None
        ...
        >>> source = MessageSource(YamlLoader(), MessageSourceConfig(file_suffix="yaml"))
    """

    def load(self, path: str) -> MessageTable | None:
        """Load the message table stored at path.

        Args:
            path: File path built by MessageSource.get_message_file_path()

        Returns:
            Message table, or None if the file does not exist

        Raises:
            FileNotFoundError: Alternative way to signal absence
            MessageLoadError: If the file exists but is malformed
            OSError: If the file cannot be read
        """


def _check_table(path: str, data: object) -> MessageTable:
    """Validate that decoded data is a flat str -> str mapping."""
    if not isinstance(data, dict):
        raise MessageLoadError(
            path,
            f"expected an object of messages, got {type(data).__name__}",
            code=DiagnosticCode.LOAD_INVALID_TABLE,
        )
    for key, value in data.items():
        if not isinstance(value, str):
            raise MessageLoadError(
                path,
                f"translation for {key!r} must be a string, got {type(value).__name__}",
                code=DiagnosticCode.LOAD_INVALID_TABLE,
            )
    return data


@dataclass(frozen=True, slots=True)
class JsonMessageLoader:
    """Loads message tables from JSON files.

    Each file holds one JSON object mapping source messages to translations:

        {"Save": "Speichern", "Cancel": ""}

    Attributes:
        encoding: Text encoding of the files (default: "utf-8")
    """

    encoding: str = "utf-8"

    def load(self, path: str) -> MessageTable | None:
        """Load a JSON message file.

        Returns:
            Message table, or None if the file does not exist

        Raises:
            MessageLoadError: If the file is not valid JSON or not a flat
                object of strings
            OSError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding=self.encoding)
        except FileNotFoundError:
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MessageLoadError(path, f"invalid JSON: {e}") from e
        return _check_table(path, data)


@dataclass(frozen=True, slots=True)
class PoMessageLoader:
    """Loads message tables from gettext .po catalogs via Babel.

    Untranslated entries map to "" so they fall back like missing keys.
    Fuzzy entries are skipped; plural entries are skipped because
    pluralization is not supported.

    Attributes:
        skip_fuzzy: Ignore entries flagged as fuzzy (default: True)
    """

    skip_fuzzy: bool = True

    def load(self, path: str) -> MessageTable | None:
        """Load a gettext PO catalog.

        Returns:
            Message table, or None if the file does not exist

        Raises:
            MessageLoadError: If the catalog cannot be parsed
            OSError: If the file cannot be read
        """
        try:
            with open(path, "rb") as f:
                catalog = read_po(f, abort_invalid=True)
        except FileNotFoundError:
            return None
        except PoFileError as e:
            raise MessageLoadError(path, f"invalid PO catalog: {e}") from e

        messages: MessageTable = {}
        for message in catalog:
            # Header entry has an empty id; plural entries have tuple ids
            if not message.id or message.pluralizable:
                continue
            if self.skip_fuzzy and message.fuzzy:
                continue
            messages[message.id] = message.string or ""
        return messages


@dataclass(slots=True)
class MemoryMessageLoader:
    """Serves message tables from an in-memory mapping.

    Paths missing from ``tables`` are reported as absent; paths in
    ``errors`` raise the stored exception. Every call is counted, which
    makes the loader convenient for embedding and for tests.

    Example:
        >>> loader = MemoryMessageLoader({"messages/de/app": {"Save": "Speichern"}})
        >>> loader.load("messages/de/app")
        {'Save': 'Speichern'}
        >>> loader.load("messages/fr/app") is None
        True
        >>> loader.calls["messages/fr/app"]
        1
    """

    tables: Mapping[str, MessageTable] = field(default_factory=dict)
    errors: Mapping[str, Exception] = field(default_factory=dict)
    calls: Counter[str] = field(default_factory=Counter, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def load(self, path: str) -> MessageTable | None:
        """Return a copy of the table stored for path, or None."""
        with self._lock:
            self.calls[path] += 1
        if path in self.errors:
            raise self.errors[path]
        table = self.tables.get(path)
        return dict(table) if table is not None else None

    @property
    def total_calls(self) -> int:
        """Number of load() calls across all paths."""
        with self._lock:
            return self.calls.total()


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of a single message file load.

    Attributes:
        category: Category the file belongs to
        language: Language the file was loaded for
        path: File path handed to the loader
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        fallback: True if the load was a fallback lookup
    """

    category: Category
    language: LanguageCode
    path: str
    status: LoadStatus
    error: Exception | None = None
    fallback: bool = False

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of the loads a MessageSource has performed.

    Attributes:
        results: All individual load results in call order

    Example:
        >>> summary = source.get_load_summary()
        >>> for result in summary.get_not_found():
        ...     print(f"Missing: {result.path}")
    """

    results: tuple[LoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of files not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any load failed with an error."""
        return self.errors > 0

    def get_errors(self) -> tuple[LoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[LoadResult, ...]:
        """Get all results where the file was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_by_language(self, language: LanguageCode) -> tuple[LoadResult, ...]:
        """Get all results for a specific language."""
        return tuple(r for r in self.results if r.language == language)
