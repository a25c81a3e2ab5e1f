"""Presentation styling for rectangular cell ranges."""

from __future__ import annotations

import logging
import re
from copy import copy
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from openpyxl.styles import Border, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.utils.cell import range_boundaries
from openpyxl.worksheet.worksheet import Worksheet as OpenpyxlWorksheet

from .exceptions import require

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

MIN_AUTO_FIT_WIDTH = 8

# (min_row, min_col, max_row, max_col), all 1-based and inclusive
Bounds = Tuple[int, int, int, int]
CellRange = Union[str, Bounds]


class HorizontalAlignment(str, Enum):
    general = "general"
    left = "left"
    center = "center"
    right = "right"
    fill = "fill"
    justify = "justify"
    center_continuous = "centerContinuous"
    distributed = "distributed"


class VerticalAlignment(str, Enum):
    top = "top"
    center = "center"
    bottom = "bottom"
    justify = "justify"
    distributed = "distributed"


def _normalize_color(value: str | None, name: str) -> str | None:
    if value is None:
        return None
    color = value.lstrip("#")
    if not _HEX_COLOR.match(color):
        raise ValueError(f"{name} must be a 6 or 8 digit hex colour, got {value!r}")
    return color.upper()


@dataclass(frozen=True)
class RangeStyle:
    """Styling options for a range. ``None`` leaves that aspect untouched.

    Colours are RGB (or ARGB) hex strings, with or without a leading ``#``.
    ``auto_fit=True`` widens the columns to their content and turns on wrap text.
    """

    horizontal_align: HorizontalAlignment | None = None
    vertical_align: VerticalAlignment | None = None
    bold: bool | None = None
    auto_fit: bool | None = None
    text_color: str | None = None
    background_color: str | None = None
    border_color: str | None = None

    def __post_init__(self):
        for name in ("text_color", "background_color", "border_color"):
            object.__setattr__(self, name, _normalize_color(getattr(self, name), name))
        if self.horizontal_align is not None:
            object.__setattr__(self, "horizontal_align", HorizontalAlignment(self.horizontal_align))
        if self.vertical_align is not None:
            object.__setattr__(self, "vertical_align", VerticalAlignment(self.vertical_align))


def range_bounds(cell_range: CellRange) -> Bounds:
    """Return ``(min_row, min_col, max_row, max_col)`` for an A1 range or a bounds tuple."""
    if isinstance(cell_range, str):
        min_col, min_row, max_col, max_row = range_boundaries(cell_range)
        if None in (min_col, min_row, max_col, max_row):
            raise ValueError(f"Range {cell_range!r} must have explicit rows and columns")
        return min_row, min_col, max_row, max_col

    min_row, min_col, max_row, max_col = cell_range
    if min(min_row, min_col) < 1 or max_row < min_row or max_col < min_col:
        raise ValueError(f"Invalid range bounds {cell_range!r}")
    return min_row, min_col, max_row, max_col


def apply_style(worksheet: OpenpyxlWorksheet, cell_range: CellRange, style: RangeStyle) -> None:
    """Apply *style* to every cell of *cell_range* on *worksheet*."""
    require(worksheet, "worksheet")
    require(style, "style")
    min_row, min_col, max_row, max_col = range_bounds(cell_range)

    fill = None
    if style.background_color is not None:
        fill = PatternFill(fill_type="solid", fgColor=style.background_color)

    border = None
    if style.border_color is not None:
        side = Side(style="thin", color=style.border_color)
        border = Border(left=side, right=side, top=side, bottom=side)

    wrap_text = True if style.auto_fit else None
    touches_font = style.text_color is not None or style.bold is not None
    touches_alignment = (
        style.horizontal_align is not None
        or style.vertical_align is not None
        or wrap_text is not None
    )

    for row in worksheet.iter_rows(
        min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col
    ):
        for cell in row:
            if touches_font:
                font = copy(cell.font)
                if style.text_color is not None:
                    font.color = style.text_color
                if style.bold is not None:
                    font.bold = style.bold
                cell.font = font
            if fill is not None:
                cell.fill = fill
            if border is not None:
                cell.border = border
            if touches_alignment:
                alignment = copy(cell.alignment)
                if style.horizontal_align is not None:
                    alignment.horizontal = style.horizontal_align.value
                if style.vertical_align is not None:
                    alignment.vertical = style.vertical_align.value
                if wrap_text is not None:
                    alignment.wrap_text = wrap_text
                cell.alignment = alignment

    if style.auto_fit:
        _auto_fit_columns(worksheet, min_row, min_col, max_row, max_col)

    logger.debug(
        "Styled %s!%s%d:%s%d",
        worksheet.title,
        get_column_letter(min_col),
        min_row,
        get_column_letter(max_col),
        max_row,
    )


def _auto_fit_columns(
    worksheet: OpenpyxlWorksheet, min_row: int, min_col: int, max_row: int, max_col: int
) -> None:
    for col_idx in range(min_col, max_col + 1):
        max_len = 0
        for (value,) in worksheet.iter_rows(
            min_row=min_row, max_row=max_row, min_col=col_idx, max_col=col_idx, values_only=True
        ):
            if value is not None:
                max_len = max(max_len, len(str(value)))
        letter = get_column_letter(col_idx)
        worksheet.column_dimensions[letter].width = max(max_len + 2, MIN_AUTO_FIT_WIDTH)
