"""Tests for worksheet lookup, header validation and styling through Worksheet."""

import pytest
from openpyxl import Workbook

from excel_records import (
    HeaderMismatchError,
    MissingArgumentError,
    RangeStyle,
    Worksheet,
    WorksheetNotFoundError,
)


class TestWorksheetLookup:
    def test_from_name(self, products_workbook):
        sheet = Worksheet.from_name(products_workbook, "Notes")

        assert sheet.name == "Notes"
        assert sheet.workbook is products_workbook
        assert sheet.worksheet is products_workbook["Notes"]

    def test_from_name_is_exact(self, products_workbook):
        with pytest.raises(WorksheetNotFoundError, match="Worksheet 'notes' not found."):
            Worksheet.from_name(products_workbook, "notes")

    def test_from_index_is_one_based(self, products_workbook):
        assert Worksheet.from_index(products_workbook).name == "Products"
        assert Worksheet.from_index(products_workbook, 2).name == "Notes"

    @pytest.mark.parametrize("number", [0, 3, -1])
    def test_from_index_out_of_range(self, products_workbook, number):
        with pytest.raises(WorksheetNotFoundError):
            Worksheet.from_index(products_workbook, number)

    def test_not_found_is_a_lookup_error(self, products_workbook):
        with pytest.raises(LookupError):
            Worksheet.from_name(products_workbook, "Missing")

    def test_missing_arguments(self, products_workbook):
        with pytest.raises(MissingArgumentError, match="Argument 'workbook' is required."):
            Worksheet.from_name(None, "Products")
        with pytest.raises(MissingArgumentError, match="Argument 'name' is required."):
            Worksheet.from_name(products_workbook, None)
        with pytest.raises(MissingArgumentError, match="Argument 'worksheet' is required."):
            Worksheet(None)

    def test_repr(self, products_sheet):
        assert repr(Worksheet(products_sheet)) == "<Worksheet 'Products'>"


class TestValidateHeaders:
    def test_matching_headers(self, products_sheet):
        Worksheet(products_sheet).validate_headers(["Code", "Name", "Price"])

    def test_prefix_is_enough(self, products_sheet):
        Worksheet(products_sheet).validate_headers(["code", "name"])

    def test_all_mismatches_reported(self, products_sheet):
        with pytest.raises(HeaderMismatchError) as exc_info:
            Worksheet(products_sheet).validate_headers(["Code", "Title", "Cost", "Stock"])

        assert exc_info.value.sheet_name == "Products"
        assert exc_info.value.missing == ["Title (B1)", "Cost (C1)", "Stock (D1)"]

    def test_offset_start(self):
        ws = Workbook().active
        ws.title = "Report"
        ws["C3"] = "Month"
        ws["D3"] = "Total"

        sheet = Worksheet(ws)
        sheet.validate_headers(["Month", "Total"], column=3, row=3)

        with pytest.raises(HeaderMismatchError, match=r"\[Report\] Headers not found: Month \(A1\)"):
            sheet.validate_headers(["Month"])


class TestWorksheetStyling:
    def test_apply_style(self, products_sheet):
        Worksheet(products_sheet).apply_style("A1:C1", RangeStyle(bold=True))
        assert all(cell.font.bold for cell in products_sheet[1])

    def test_apply_cell_style(self, products_sheet):
        Worksheet(products_sheet).apply_cell_style(3, 1, RangeStyle(background_color="FFC7CE"))

        assert products_sheet["A3"].fill.fgColor.rgb.endswith("FFC7CE")
        assert products_sheet["B3"].fill.fill_type is None
