from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.skipped_row import SkippedRow

"""Skipped-row log buffering.

Discarded rows are collected in memory and written as JSON Lines, one
SkippedRow per line, to ``<dir>/skipped-YYYYMMDD-HHMMSS.log`` (UTC). The file
is only created on the first flush that has records to write.
"""

__all__ = [
    "SkippedRow",
    "SkipLogBuffer",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class SkipLogBuffer:
    """In-memory buffer of SkippedRow records. Usable directly as an observer."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self._records: list[SkippedRow] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self.directory / f"skipped-{stamp}.log"
        return self._file_path

    def __call__(self, record: SkippedRow) -> None:
        self.append(record)

    def append(self, record: SkippedRow) -> None:
        self._records.append(record)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file; None if nothing was buffered."""
        if not self._records:
            return None
        self.directory.mkdir(parents=True, exist_ok=True)
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
