"""Tests for RangeStyle and apply_style."""

import pytest
from openpyxl import Workbook

from excel_records import MissingArgumentError
from excel_records.styling import (
    MIN_AUTO_FIT_WIDTH,
    HorizontalAlignment,
    RangeStyle,
    VerticalAlignment,
    apply_style,
    range_bounds,
)


@pytest.fixture
def worksheet():
    ws = Workbook().active
    ws.append(["Code", "Description"])
    ws.append(["A0001", "A rather long product description"])
    ws.append(["A0002", "Short"])
    return ws


class TestRangeStyle:
    def test_defaults_leave_everything_untouched(self):
        style = RangeStyle()
        assert style.bold is None
        assert style.background_color is None

    @pytest.mark.parametrize("value, expected", [("#ffc7ce", "FFC7CE"), ("9c0006", "9C0006"), ("80FF0000", "80FF0000")])
    def test_colors_normalized(self, value, expected):
        assert RangeStyle(text_color=value).text_color == expected

    @pytest.mark.parametrize("value", ["red", "#FFF", "GGGGGG"])
    def test_invalid_color(self, value):
        with pytest.raises(ValueError, match="border_color must be a 6 or 8 digit hex colour"):
            RangeStyle(border_color=value)

    def test_alignment_strings_coerced(self):
        style = RangeStyle(horizontal_align="center", vertical_align="top")
        assert style.horizontal_align is HorizontalAlignment.center
        assert style.vertical_align is VerticalAlignment.top

    def test_unknown_alignment(self):
        with pytest.raises(ValueError):
            RangeStyle(horizontal_align="middle")


class TestRangeBounds:
    def test_a1_range(self):
        assert range_bounds("B2:D5") == (2, 2, 5, 4)

    def test_single_cell(self):
        assert range_bounds("C3") == (3, 3, 3, 3)

    def test_tuple(self):
        assert range_bounds((1, 1, 2, 3)) == (1, 1, 2, 3)

    @pytest.mark.parametrize("bounds", [(0, 1, 1, 1), (3, 1, 2, 1), (1, 4, 1, 2)])
    def test_invalid_tuple(self, bounds):
        with pytest.raises(ValueError, match="Invalid range bounds"):
            range_bounds(bounds)

    def test_whole_column_rejected(self):
        with pytest.raises(ValueError, match="explicit rows and columns"):
            range_bounds("A:A")


class TestApplyStyle:
    def test_background_and_border(self, worksheet):
        apply_style(worksheet, "A1:B1", RangeStyle(background_color="DDEBF7", border_color="000000"))

        for cell in worksheet[1]:
            assert cell.fill.fill_type == "solid"
            assert cell.fill.fgColor.rgb.endswith("DDEBF7")
            assert cell.border.left.style == "thin"
            assert cell.border.bottom.color.rgb.endswith("000000")
        assert worksheet["A2"].fill.fill_type is None

    def test_font_keeps_existing_attributes(self, worksheet):
        apply_style(worksheet, "A1", RangeStyle(bold=True))
        apply_style(worksheet, "A1", RangeStyle(text_color="9C0006"))

        font = worksheet["A1"].font
        assert font.bold is True
        assert font.color.rgb.endswith("9C0006")
        assert font.name == "Calibri"

    def test_alignment(self, worksheet):
        apply_style(
            worksheet,
            (1, 1, 3, 1),
            RangeStyle(horizontal_align=HorizontalAlignment.right, vertical_align="center"),
        )

        for (cell,) in worksheet.iter_rows(min_col=1, max_col=1):
            assert cell.alignment.horizontal == "right"
            assert cell.alignment.vertical == "center"
            assert not cell.alignment.wrap_text
        assert worksheet["B1"].alignment.horizontal is None

    def test_auto_fit(self, worksheet):
        apply_style(worksheet, "A1:B3", RangeStyle(auto_fit=True))

        assert worksheet.column_dimensions["B"].width == len("A rather long product description") + 2
        assert worksheet.column_dimensions["A"].width == MIN_AUTO_FIT_WIDTH
        assert worksheet["B2"].alignment.wrap_text is True

    def test_auto_fit_considers_only_the_range(self, worksheet):
        apply_style(worksheet, "B3", RangeStyle(auto_fit=True))
        assert worksheet.column_dimensions["B"].width == MIN_AUTO_FIT_WIDTH

    def test_requires_worksheet_and_style(self, worksheet):
        with pytest.raises(MissingArgumentError, match="Argument 'worksheet' is required."):
            apply_style(None, "A1", RangeStyle())
        with pytest.raises(MissingArgumentError, match="Argument 'style' is required."):
            apply_style(worksheet, "A1", None)
