from __future__ import annotations

import json
from pathlib import Path

import pytest

from i18n_excel import DuplicateKeysError, InputNotFoundError, SpreadsheetFormatError, parse
from i18n_excel.models.skipped_row import SkippedRow
from i18n_excel.services.conversion import parse_report


def test_parse_complete_rows(make_sheet):
    excel = make_sheet("i18n.xlsx", [
        ["k1", "v1", "r", "2024-01-01"],
        ["k2", "v2", "r", "2024-01-01"],
    ])
    assert parse(excel) == {"k1": "v1", "k2": "v2"}


def test_parse_duplicate_keys_writes_nothing(make_sheet, temp_workdir: Path):
    excel = make_sheet("i18n.xlsx", [["k1", "v1"], ["k1", "v2"]])
    destination = temp_workdir / "output" / "i18n.json"
    with pytest.raises(DuplicateKeysError) as e:
        parse(excel, destination)
    assert e.value.keys == ["k1"]
    assert "k1" in str(e.value)
    assert not destination.exists()


def test_parse_duplicate_keys_all_listed(make_sheet):
    excel = make_sheet("i18n.xlsx", [
        ["a", "1"], ["b", "2"], ["a", "3"], ["c", "4"], ["b", "5"], ["a", "6"],
    ])
    with pytest.raises(DuplicateKeysError) as e:
        parse(excel)
    assert str(e.value) == "duplicate i18n keys: a, b"


def test_parse_incomplete_rows_yield_empty_mapping(make_sheet):
    excel = make_sheet("i18n.xlsx", [["", "v1"], ["k2", ""]])
    assert parse(excel) == {}


def test_parse_header_only(make_sheet):
    assert parse(make_sheet("i18n.xlsx", [])) == {}


def test_parse_empty_workbook(make_sheet):
    assert parse(make_sheet("empty.xlsx", [], header=False)) == {}


def test_parse_header_row_never_data(make_sheet):
    excel = make_sheet("i18n.xlsx", [["k1", "v1"]])
    result = parse(excel)
    assert "key" not in result


def test_parse_missing_source(temp_workdir: Path):
    missing = temp_workdir / "input" / "nope.xlsx"
    with pytest.raises(InputNotFoundError) as e:
        parse(missing)
    assert str(missing) in str(e.value)
    assert isinstance(e.value, FileNotFoundError)


def test_parse_unreadable_workbook(temp_workdir: Path):
    broken = temp_workdir / "input" / "broken.xlsx"
    broken.write_text("not a workbook", encoding="utf-8")
    with pytest.raises(SpreadsheetFormatError) as e:
        parse(broken, temp_workdir / "out.json")
    assert "broken.xlsx" in str(e.value)
    assert e.value.__cause__ is not None
    assert not (temp_workdir / "out.json").exists()


def test_parse_writes_pretty_json_creating_directories(make_sheet, temp_workdir: Path):
    excel = make_sheet("i18n.xlsx", [["hello", "Hello World", "Admin", "2024-01-01"], ["welcome", "欢迎"]])
    destination = temp_workdir / "deep" / "nested" / "i18n.json"
    result = parse(excel, destination)
    text = destination.read_text(encoding="utf-8")
    assert text == json.dumps(result, indent=2, ensure_ascii=False)
    assert text == '{\n  "hello": "Hello World",\n  "welcome": "欢迎"\n}'


def test_parse_existing_output_directory_is_fine(make_sheet, temp_workdir: Path):
    excel = make_sheet("i18n.xlsx", [["k", "v"]])
    (temp_workdir / "output").mkdir()
    parse(excel, temp_workdir / "output" / "i18n.json")
    parse(excel, temp_workdir / "output" / "i18n.json")
    assert json.loads((temp_workdir / "output" / "i18n.json").read_text(encoding="utf-8")) == {"k": "v"}


def test_parse_named_sheet(make_sheet):
    excel = make_sheet("named.xlsx", [["k", "v"]], sheet_name="strings")
    assert parse(excel, sheet="strings") == {"k": "v"}


def test_parse_report_collects_skipped_rows(make_sheet):
    seen: list[SkippedRow] = []
    excel = make_sheet("i18n.xlsx", [["k1", "v1"], ["", "v2"], ["k3", ""]])
    report = parse_report(excel, observer=seen.append)
    assert report.mapping == {"k1": "v1"}
    assert report.entry_count == 1
    assert report.skipped_count == 2
    assert [r.row for r in report.skipped_rows] == [3, 4]
    assert seen == report.skipped_rows
    assert report.destination is None
    assert report.elapsed_seconds >= 0


def test_parse_skipped_rows_are_warned(make_sheet, capsys):
    from i18n_excel.logging.init import setup_logging
    setup_logging()
    parse(make_sheet("i18n.xlsx", [["", "v1"]]))
    assert "WARN incomplete row skipped: row=2 reason=MISSING_KEY" in capsys.readouterr().out
