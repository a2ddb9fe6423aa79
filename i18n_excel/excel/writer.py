from __future__ import annotations

from io import BytesIO

import pandas as pd

"""Spreadsheet writer.

Rows are encoded to an in-memory workbook; the caller writes the bytes to
disk in one step, so an encoding failure never leaves a half-written file.
Every cell is stored as a literal value: text beginning with ``=`` stays
text and is never saved as a formula.
"""

__all__ = [
    "DEFAULT_SHEET_NAME",
    "encode_rows",
]

DEFAULT_SHEET_NAME = "i18n"

FORMULA_PREFIX = "="


def _force_text_cells(ws) -> None:
    # openpyxl は "=" 始まりの文字列を数式 (data_type "f") として保存する
    for row in ws.iter_rows():
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith(FORMULA_PREFIX):
                cell.data_type = "s"


def encode_rows(rows: list[list[str]], sheet_name: str = DEFAULT_SHEET_NAME) -> bytes:
    """Encode a 2-D list of cells (header included) as .xlsx bytes."""
    df = pd.DataFrame(rows)
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        # 先頭行もデータとして書く (列名ヘッダは出力しない)
        df.to_excel(writer, sheet_name=sheet_name, header=False, index=False)
        _force_text_cells(writer.sheets[sheet_name])
    return buf.getvalue()
