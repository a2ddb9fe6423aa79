from __future__ import annotations

import dataclasses

import pytest

from i18n_excel.models import HEADER, Entry


def test_header_layout():
    assert HEADER == ("key", "IContent", "Remark", "Last Update Date")


def test_entry_to_row_fills_optional_cells():
    assert Entry("k", "v").to_row() == ["k", "v", "", ""]
    assert Entry("k", "v", "Admin", "2024-01-01").to_row() == ["k", "v", "Admin", "2024-01-01"]


def test_entry_is_immutable():
    e = Entry("k", "v")
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.key = "other"  # type: ignore[misc]
