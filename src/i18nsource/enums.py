"""Enumerations for i18nsource type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of a single message file load.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File found and parsed into a message table"""

    NOT_FOUND = "not_found"
    """File does not exist (triggers fallback logic)"""

    ERROR = "error"
    """Loader raised an error other than absence"""


__all__ = [
    "LoadStatus",
]
