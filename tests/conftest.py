# Shared pytest fixtures
from __future__ import annotations
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import pytest

from i18n_excel.logging.init import LOGGER_NAME, reset_logging

HEADER_ROW = ["key", "IContent", "Remark", "Last Update Date"]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "input").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    # ロガーは stdout を掴むので capsys と合わせてテスト毎に作り直す
    reset_logging()
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """excel_input: input/strings.xlsx
json_output: build/strings.json
excel_output: build/strings.xlsx
sheet: 0
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "i18n.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def write_sheet(path: Path, rows: list[list[object]], sheet_name: str = "Sheet1", *, header: bool = True) -> Path:
    """Write ``rows`` (header prepended unless header=False) into a new workbook."""
    data = [HEADER_ROW, *rows] if header else rows
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path) as writer:
        pd.DataFrame(data).to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return path


@pytest.fixture()
def make_sheet(temp_workdir: Path) -> Callable[..., Path]:
    def _make(name: str, rows: list[list[object]], sheet_name: str = "Sheet1", header: bool = True) -> Path:
        return write_sheet(temp_workdir / name, rows, sheet_name, header=header)
    return _make
