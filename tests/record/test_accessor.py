"""Tests for display text and the openpyxl cell accessor."""

import datetime as dt

import pytest
from openpyxl import Workbook

from excel_records.record import CellAccessor, WorksheetCellAccessor, display_text


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (True, "TRUE"),
        (False, "FALSE"),
        (42.0, "42"),
        (2.5, "2.5"),
        (7, "7"),
        (dt.datetime(2024, 3, 15), "2024-03-15"),
        (dt.datetime(2024, 3, 15, 9, 30), "2024-03-15 09:30:00"),
        (dt.date(2024, 3, 15), "2024-03-15"),
        (dt.time(8, 5), "08:05:00"),
        ("  padded ", "  padded "),
    ],
)
def test_display_text(value, expected):
    assert display_text(value) == expected


class TestWorksheetCellAccessor:
    @pytest.fixture
    def accessor(self):
        wb = Workbook()
        ws = wb.active
        ws.title = "Data 2024"
        ws["B4"] = 12.0
        return WorksheetCellAccessor(ws)

    def test_satisfies_protocol(self, accessor):
        assert isinstance(accessor, CellAccessor)

    def test_plain_worksheet_is_not_an_accessor(self):
        assert not isinstance(Workbook().active, CellAccessor)

    def test_values_and_text(self, accessor):
        assert accessor.get_value(4, 2) == 12.0
        assert accessor.get_text(4, 2) == "12"
        assert accessor.get_text(1, 1) == ""

    def test_addresses(self, accessor):
        assert accessor.get_address(4, 2) == "B4"
        assert accessor.get_address(1, 28) == "AB1"
        assert accessor.get_full_address(4, 2) == "'Data 2024'!B4"

    def test_address_does_not_create_cells(self, accessor):
        accessor.get_address(50, 10)
        assert accessor.worksheet.max_row == 4

    def test_set_value_and_format(self, accessor):
        accessor.set_value(5, 1, dt.date(2024, 1, 2))
        accessor.set_format(5, 1, number_format="dd/mm/yyyy")

        cell = accessor.worksheet["A5"]
        assert cell.value == dt.date(2024, 1, 2)
        assert cell.number_format == "dd/mm/yyyy"
        assert not cell.alignment.wrap_text

    def test_blank_number_format_ignored(self, accessor):
        accessor.set_format(4, 2, number_format="  ")
        assert accessor.worksheet["B4"].number_format == "General"

    def test_title(self, accessor):
        assert accessor.title == "Data 2024"
