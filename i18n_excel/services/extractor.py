from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from ..models.entry import CONTENT_INDEX, KEY_INDEX, REMARK_INDEX, UPDATE_DATE_INDEX, Entry
from ..models.skipped_row import MISSING_CONTENT, MISSING_KEY, SkippedRow

logger = logging.getLogger(__name__)

"""Row extraction: spreadsheet data rows -> Entry candidates.

A row without key or without content is dropped with a WARN line; this is a
local recovery, never a failure of the whole conversion.
"""

__all__ = [
    "SkipObserver",
    "extract_entries",
]

SkipObserver = Callable[[SkippedRow], None]


def _cell(row: Sequence[object], index: int) -> str:
    if index >= len(row):
        return ""
    val = row[index]
    if val is None:
        return ""
    return str(val)


def extract_entries(
    rows: Iterable[Sequence[object]],
    *,
    observer: SkipObserver | None = None,
    file: str = "",
    sheet: str = "",
    first_row_number: int = 2,
) -> list[Entry]:
    """Build Entries from data rows (header already removed).

    Args:
        rows: Data rows, each ``[key, content, remark, last update date]``
            (shorter rows are padded with blanks)
        observer: Called with a SkippedRow for every discarded row
        file: Source file name, used only for reporting
        sheet: Sheet name, used only for reporting
        first_row_number: Spreadsheet row number of ``rows[0]`` (row 1 is
            the header, so data starts at 2)

    Returns:
        Entries in input order, discarded rows excluded
    """
    entries: list[Entry] = []
    for offset, row in enumerate(rows):
        key = _cell(row, KEY_INDEX)
        content = _cell(row, CONTENT_INDEX)
        if not key or not content:
            reason = MISSING_KEY if not key else MISSING_CONTENT
            values = [_cell(row, i) for i in range(len(row))]
            row_number = first_row_number + offset
            logger.warning(f"incomplete row skipped: row={row_number} reason={reason} values={values}")
            if observer is not None:
                observer(SkippedRow.create(file, sheet, row_number, reason, values))
            continue
        entries.append(
            Entry(
                key=key,
                content=content,
                remark=_cell(row, REMARK_INDEX) or None,
                last_update_date=_cell(row, UPDATE_DATE_INDEX) or None,
            )
        )
    return entries
