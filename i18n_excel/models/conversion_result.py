from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .entry import I18nMap
from .skipped_row import SkippedRow

"""Result models for parse / generate runs.

The facade functions return plain values (a mapping, or nothing). The report
objects below carry the extra bookkeeping the CLI needs for its SUMMARY line.
"""


@dataclass(frozen=True)
class ParseReport:
    """Outcome of a spreadsheet -> mapping conversion."""
    mapping: I18nMap
    source: Path
    destination: Path | None  # None なら JSON 出力なし
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    skipped_rows: list[SkippedRow] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.mapping)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_rows)


@dataclass(frozen=True)
class GenerateReport:
    """Outcome of a mapping -> spreadsheet conversion."""
    destination: Path
    row_count: int  # データ行数 (ヘッダ除く)
    duplicate_keys: list[str] = field(default_factory=list)
