from __future__ import annotations

from dataclasses import dataclass

"""Entry model and sheet layout constants.

An Entry is one key/content record taken from a spreadsheet row. The sheet
layout is fixed: ``[key, content, remark, last update date]`` with a header
row in front that is never treated as data.
"""

__all__ = [
    "Entry",
    "HEADER",
    "I18nMap",
    "SpreadsheetRow",
    "KEY_INDEX",
    "CONTENT_INDEX",
    "REMARK_INDEX",
    "UPDATE_DATE_INDEX",
]

I18nMap = dict[str, str]
SpreadsheetRow = list[str]

HEADER: tuple[str, str, str, str] = ("key", "IContent", "Remark", "Last Update Date")

# 列インデックス
KEY_INDEX = 0
CONTENT_INDEX = 1
REMARK_INDEX = 2
UPDATE_DATE_INDEX = 3


@dataclass(frozen=True)
class Entry:
    """A single localized string record.

    ``key`` and ``content`` are required (the extractor discards rows where
    either is empty). ``remark`` and ``last_update_date`` are free-form and
    kept as ``None`` when the cell is blank.
    """
    key: str
    content: str
    remark: str | None = None
    last_update_date: str | None = None

    def to_row(self) -> SpreadsheetRow:
        return [self.key, self.content, self.remark or "", self.last_update_date or ""]
