from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

"""Exceptions surfaced by the conversion functions.

Workbook decode and encode failures raised by pandas / openpyxl are wrapped
in SpreadsheetFormatError with the original exception chained. Filesystem
errors other than a missing input propagate unchanged.
"""

__all__ = [
    "ConversionError",
    "InputNotFoundError",
    "DuplicateKeysError",
    "JsonParseError",
    "SpreadsheetFormatError",
]


class ConversionError(Exception):
    """Base exception for parse / generate / validate failures."""


class InputNotFoundError(ConversionError, FileNotFoundError):
    """Raised when a source file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"input file not found: {path}")


class DuplicateKeysError(ConversionError):
    """Raised when two or more rows share the same key."""

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys = list(keys)
        super().__init__(f"duplicate i18n keys: {', '.join(self.keys)}")


class JsonParseError(ConversionError, ValueError):
    """Raised when a JSON source cannot be parsed into a mapping."""


class SpreadsheetFormatError(ConversionError):
    """Raised when a workbook cannot be read, or rows cannot be encoded as one."""
