from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from ..errors import DuplicateKeysError, InputNotFoundError, SpreadsheetFormatError
from ..excel.reader import header_matches, read_sheet_rows
from ..excel.writer import DEFAULT_SHEET_NAME, encode_rows
from ..models.conversion_result import GenerateReport, ParseReport
from ..models.entry import I18nMap
from ..models.skipped_row import SkippedRow
from .duplicates import find_duplicate_keys
from .extractor import SkipObserver, extract_entries
from .projection import to_map, to_rows
from .validation import load_json_pairs

logger = logging.getLogger(__name__)

"""Conversion orchestration: spreadsheet <-> i18n JSON mapping.

parse:    read sheet -> extract entries -> duplicate check -> map -> (write JSON)
generate: resolve mapping (object or JSON file) -> rows -> encode -> write xlsx

Both run single-pass with no retry. Nothing is written until every check
has passed; only directory creation may remain after a failed write.
"""

__all__ = [
    "parse",
    "parse_report",
    "generate",
    "generate_report",
    "write_json",
]

PathLike = str | os.PathLike[str]


def _ensure_parent(path: Path) -> None:
    # 既存ディレクトリは許容 (並行作成時も冪等)
    path.parent.mkdir(parents=True, exist_ok=True)


def write_json(mapping: Mapping[str, Any], destination: Path) -> Path:
    """Write ``mapping`` as 2-space indented UTF-8 JSON (no trailing newline)."""
    _ensure_parent(destination)
    destination.write_text(json.dumps(mapping, indent=2, ensure_ascii=False), encoding="utf-8")
    return destination


def parse_report(
    source: PathLike,
    destination: PathLike | None = None,
    *,
    sheet: str | int = 0,
    observer: SkipObserver | None = None,
) -> ParseReport:
    """Convert a spreadsheet into an i18n mapping and report what happened.

    Args:
        source: Spreadsheet path
        destination: Optional JSON output path
        sheet: Sheet name or 0-based index (default: first sheet)
        observer: Receives a SkippedRow for each discarded row

    Returns:
        ParseReport with the mapping, skipped rows and timing

    Raises:
        InputNotFoundError: source does not exist
        DuplicateKeysError: two or more rows share a key
        SpreadsheetFormatError: source is not a readable workbook
    """
    start_time = datetime.now(UTC)
    src = Path(source)
    if not src.exists():
        raise InputNotFoundError(src)

    try:
        rows = read_sheet_rows(src, sheet)
    except (BadZipFile, ValueError) as e:
        raise SpreadsheetFormatError(f"cannot read workbook {src}: {e}") from e
    if rows and not header_matches(rows[0]):
        logger.warning(f"unexpected header row in {src.name}: {rows[0]}")

    skipped: list[SkippedRow] = []

    def _collect(record: SkippedRow) -> None:
        skipped.append(record)
        if observer is not None:
            observer(record)

    entries = extract_entries(rows[1:], observer=_collect, file=src.name, sheet=str(sheet))

    duplicates = find_duplicate_keys(entries)
    if duplicates:
        logger.error(f"duplicate i18n keys found: {duplicates}")
        raise DuplicateKeysError(duplicates)

    mapping = to_map(entries)

    dest: Path | None = None
    if destination is not None:
        dest = write_json(mapping, Path(destination))
        logger.info(f"i18n json written: {dest}")

    end_time = datetime.now(UTC)
    return ParseReport(
        mapping=mapping,
        source=src,
        destination=dest,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        skipped_rows=skipped,
    )


def parse(
    source: PathLike,
    destination: PathLike | None = None,
    *,
    sheet: str | int = 0,
    observer: SkipObserver | None = None,
) -> I18nMap:
    """Convert a spreadsheet into an i18n mapping, optionally saving it as JSON."""
    return parse_report(source, destination, sheet=sheet, observer=observer).mapping


def _resolve_mapping(source: Mapping[str, Any] | PathLike) -> tuple[dict[str, Any], list[str]]:
    if isinstance(source, Mapping):
        return dict(source), []
    path = Path(source)
    if not path.exists():
        raise InputNotFoundError(path)
    pairs = load_json_pairs(path.read_text(encoding="utf-8"))
    duplicates = find_duplicate_keys(pairs)
    if duplicates:
        # 標準 JSON デコーダと同じく後勝ち。エラーにはしない
        logger.warning(f"repeated keys in {path.name}, last value wins: {', '.join(duplicates)}")
    return dict(pairs), duplicates


def generate_report(
    source: Mapping[str, Any] | PathLike,
    destination: PathLike,
    *,
    today: date | None = None,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> GenerateReport:
    """Convert a mapping (or a JSON file holding one) into a spreadsheet.

    Raises:
        InputNotFoundError: source path does not exist
        JsonParseError: source file is not a JSON object
        SpreadsheetFormatError: a value cannot be stored in a cell
    """
    mapping, duplicates = _resolve_mapping(source)
    rows = to_rows(mapping, today=today)
    try:
        data = encode_rows(rows, sheet_name=sheet_name)
    except (TypeError, ValueError) as e:
        # JSON のネスト値 (object / array) はセルにできない
        raise SpreadsheetFormatError(f"cannot encode rows for {destination}: {e}") from e

    dest = Path(destination)
    _ensure_parent(dest)
    dest.write_bytes(data)
    logger.info(f"i18n spreadsheet written: {dest}")
    return GenerateReport(destination=dest, row_count=len(rows) - 1, duplicate_keys=duplicates)


def generate(
    source: Mapping[str, Any] | PathLike,
    destination: PathLike,
    *,
    today: date | None = None,
) -> None:
    generate_report(source, destination, today=today)
