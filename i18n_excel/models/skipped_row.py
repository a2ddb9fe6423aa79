from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime

"""SkippedRow model for discarded spreadsheet rows.

Rows without a key or without content are not fatal: they are dropped and
reported. This record is what gets handed to an observer and what the
skip log writes as JSON Lines (fixed key set, no extras).
"""

__all__ = [
    "SkippedRow",
    "MISSING_KEY",
    "MISSING_CONTENT",
]

MISSING_KEY = "MISSING_KEY"
MISSING_CONTENT = "MISSING_CONTENT"


@dataclass(frozen=True)
class SkippedRow:
    """Structured record of a row discarded during extraction.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Spreadsheet filename (empty when rows came from memory)
        sheet: Sheet name or index as text
        row: Spreadsheet row number (1-based, header is row 1). -1 if unknown
        reason: MISSING_KEY or MISSING_CONTENT
        values: Raw cell values of the row
    """
    timestamp: str  # ISO8601 UTC
    file: str
    sheet: str
    row: int
    reason: str  # UPPER_SNAKE
    values: list[str] = field(default_factory=list)

    @staticmethod
    def create(file: str, sheet: str, row: int, reason: str, values: list[str]) -> SkippedRow:
        """Create a new SkippedRow stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return SkippedRow(
            timestamp=ts,
            file=file,
            sheet=sheet,
            row=row,
            reason=reason,
            values=list(values),
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
