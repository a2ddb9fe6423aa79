from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date

from ..models.entry import HEADER, Entry, I18nMap, SpreadsheetRow

"""Projection between Entry sequences, key->content maps and sheet rows.

Update dates use the local system clock (``date.today()``) unless a fixed
``today`` is passed in.
"""

__all__ = [
    "format_update_date",
    "to_map",
    "to_rows",
    "to_entries",
]


def format_update_date(today: date | None = None) -> str:
    """Render ``today`` (default: local current date) as ``YYYY-MM-DD``."""
    # 年は 4 桁ゼロ埋め
    return (today or date.today()).isoformat()


def to_map(entries: Iterable[Entry]) -> I18nMap:
    """Build ``key -> content`` in order.

    A repeated key overwrites the earlier content, so callers run
    ``find_duplicate_keys`` first.
    """
    mapping: I18nMap = {}
    for entry in entries:
        mapping[entry.key] = entry.content
    return mapping


def to_rows(mapping: Mapping[str, str], *, today: date | None = None) -> list[SpreadsheetRow]:
    """Header row followed by ``[key, content, "", date]`` per mapping item."""
    rows: list[SpreadsheetRow] = [list(HEADER)]
    rows.extend(entry.to_row() for entry in to_entries(mapping, today=today))
    return rows


def to_entries(mapping: Mapping[str, str], *, today: date | None = None) -> list[Entry]:
    stamp = format_update_date(today)
    return [Entry(key=k, content=v, last_update_date=stamp) for k, v in mapping.items()]
