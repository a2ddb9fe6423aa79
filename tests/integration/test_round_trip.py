from __future__ import annotations

import json
from pathlib import Path

from openpyxl import load_workbook

from i18n_excel import generate, parse, validate_json_file


def test_mapping_survives_generate_then_parse(temp_workdir: Path):
    mapping = {"hello": "Hello World", "welcome": "Welcome", "count": "001", "na": "NA"}
    sheet = temp_workdir / "output" / "i18n.xlsx"
    generate(mapping, sheet)
    assert parse(sheet) == mapping


def test_json_file_round_trip(make_sheet, temp_workdir: Path):
    excel = make_sheet("input/i18n.xlsx", [["k1", "v1", "Admin", "2024-01-01"], ["k2", "v2"]])
    json_path = temp_workdir / "output" / "i18n.json"
    first = parse(excel, json_path)
    assert validate_json_file(json_path) is True

    regenerated = temp_workdir / "output" / "i18n.xlsx"
    generate(json_path, regenerated)
    second_json = temp_workdir / "output" / "again.json"
    assert parse(regenerated, second_json) == first
    assert json.loads(second_json.read_text(encoding="utf-8")) == first


def test_text_starting_with_equals_survives_generate_then_parse(temp_workdir: Path):
    mapping = {"calc.hint": "=SUM(A1)", "eq": "=", "plain": "ok"}
    sheet = temp_workdir / "output" / "i18n.xlsx"
    generate(mapping, sheet)
    assert load_workbook(sheet)["i18n"]["B2"].data_type == "s"
    assert parse(sheet) == mapping
