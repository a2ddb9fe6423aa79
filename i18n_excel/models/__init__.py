"""Domain models for the i18n spreadsheet converter.

This package contains the value types passed between the extraction,
validation and projection services.
"""

from .conversion_result import GenerateReport, ParseReport
from .entry import HEADER, Entry, I18nMap, SpreadsheetRow
from .skipped_row import SkippedRow

__all__ = [
    # Row / mapping models
    "Entry",
    "HEADER",
    "I18nMap",
    "SpreadsheetRow",
    "SkippedRow",
    # Result models
    "ParseReport",
    "GenerateReport",
]
