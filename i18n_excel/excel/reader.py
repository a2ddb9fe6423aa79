from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ..models.entry import HEADER

"""Spreadsheet reader.

The first row of an i18n sheet is the header ``key | IContent | Remark |
Last Update Date``; everything after it is data. Cells are returned as the text
the spreadsheet displays. Strings such as "NA" or "null" are legitimate
translations and never become NaN. Booleans read as "TRUE" / "FALSE".
"""

__all__ = [
    "SheetNotFoundError",
    "read_sheet_rows",
    "header_matches",
]


class SheetNotFoundError(Exception):
    """Raised when the requested worksheet does not exist in the workbook."""


def _cell_text(val: Any) -> str:
    if val is None:
        return ""
    if isinstance(val, bool):
        return "TRUE" if val else "FALSE"
    try:
        if pd.isna(val):
            return ""
    except (TypeError, ValueError):  # pragma: no cover (list-like cell)
        pass
    return str(val)


def read_sheet_rows(path: Path, sheet: str | int = 0) -> list[list[str]]:
    """Read one worksheet as a 2-D list of cell strings (header included).

    Parameters
    ----------
    path: Excel ファイルパス
    sheet: シート名、または 0 始まりのシート番号 (既定: 先頭シート)

    Trailing blank cells are dropped from each row, and fully blank rows are
    kept as empty lists so row numbers stay aligned with the sheet.
    """
    xls = pd.ExcelFile(path)
    try:
        if isinstance(sheet, int):
            names = xls.sheet_names
            if sheet < 0 or sheet >= len(names):
                raise SheetNotFoundError(f"sheet index {sheet} out of range in {path}")
            sheet_name = names[sheet]
        else:
            if sheet not in xls.sheet_names:
                raise SheetNotFoundError(f"sheet '{sheet}' not found in {path}")
            sheet_name = sheet
        # ヘッダなしで読む (型変換・NA 変換なし、文字列化は _cell_text)
        df = xls.parse(sheet_name, header=None, dtype=object, keep_default_na=False, na_values=[])
    finally:
        xls.close()

    rows: list[list[str]] = []
    for raw in df.itertuples(index=False, name=None):
        cells = [_cell_text(v) for v in raw]
        while cells and cells[-1] == "":
            cells.pop()
        rows.append(cells)
    return rows


def header_matches(row: list[str]) -> bool:
    """True when ``row`` is the expected i18n header (extra blank cells allowed)."""
    return tuple(c.strip() for c in row[: len(HEADER)]) == HEADER
