"""Configuration for MessageSource.

Provides a single frozen dataclass that holds every resolver-level
setting. Values are validated once at construction and never change.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from i18nsource.constants import DEFAULT_BASE_PATH, DEFAULT_SOURCE_LANGUAGE
from i18nsource.locale_utils import validate_locale

__all__ = ["MessageSourceConfig"]


@dataclass(frozen=True, slots=True)
class MessageSourceConfig:
    """Immutable configuration for a MessageSource.

    Constructing ``MessageSourceConfig()`` with no arguments produces a
    usable configuration reading "messages/<lang>/<suffix>".

    Attributes:
        source_language: Language the message keys are written in
            (default: "en-US"). Requests for it skip lookup entirely.
        force_translation: Look up translations even when the requested
            language is the source language (default: False).
        base_path: Directory containing one sub-directory per language
            (default: "messages"). Trailing slashes are removed.
        file_map: Per-suffix file name overrides, e.g.
            ``{"errors": "error-messages.po"}`` (default: empty).
            Stored as a read-only mapping.
        file_suffix: Extension appended to suffix-derived file names,
            without the leading dot (default: "", no extension).
        strict: Propagate loader errors from fallback files instead of
            logging and skipping them (default: False).

    Example:
        >>> config = MessageSourceConfig(
        ...     source_language="en-GB",
        ...     base_path="locale",
        ...     file_suffix="json",
        ... )
        >>> config.file_suffix
        'json'
    """

    source_language: str = DEFAULT_SOURCE_LANGUAGE
    force_translation: bool = False
    base_path: str = DEFAULT_BASE_PATH
    file_map: Mapping[str, str] = field(default_factory=dict)
    file_suffix: str = ""
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize configuration values.

        Raises:
            ValueError: If source_language is malformed, base_path is empty,
                or file_map contains non-string entries.
        """
        validate_locale(self.source_language)

        if not self.base_path:
            msg = "base_path must not be empty"
            raise ValueError(msg)
        # "/" becomes "" so paths render as "/<lang>/..."
        object.__setattr__(self, "base_path", self.base_path.rstrip("/"))

        for suffix, file_name in self.file_map.items():
            if not isinstance(suffix, str) or not isinstance(file_name, str) or not file_name:
                msg = f"file_map entries must map str to non-empty str, got {suffix!r}: {file_name!r}"
                raise ValueError(msg)
        object.__setattr__(self, "file_map", MappingProxyType(dict(self.file_map)))

        object.__setattr__(self, "file_suffix", self.file_suffix.lstrip("."))

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> MessageSourceConfig:
        """Build a configuration from a plain settings mapping.

        Useful when settings come from a parsed TOML/JSON document.

        Args:
            settings: Keys matching the dataclass field names

        Returns:
            Validated configuration

        Raises:
            ValueError: If settings contains unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(settings) - known)
        if unknown:
            msg = f"Unknown message source settings: {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**settings)
