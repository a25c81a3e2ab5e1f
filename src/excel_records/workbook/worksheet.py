"""Worksheet lookup, header checks and named ranges."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence, TypeVar

from openpyxl.utils import get_column_letter
from openpyxl.utils.cell import absolute_coordinate
from openpyxl.workbook.defined_name import DefinedName
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet as OpenpyxlWorksheet

from ..exceptions import HeaderMismatchError, WorksheetNotFoundError, require
from ..record import display_text
from ..record._accessor import quote_sheet_title
from ..styling import CellRange, RangeStyle, apply_style

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_NAMED_RANGE_LAST_ROW = 9999


class Worksheet:
    """An openpyxl worksheet together with its workbook and name."""

    def __init__(self, worksheet: OpenpyxlWorksheet) -> None:
        self.worksheet = require(worksheet, "worksheet")
        self.workbook: Workbook = worksheet.parent
        self.name: str = worksheet.title

    @classmethod
    def from_name(cls, workbook: Workbook, name: str) -> Worksheet:
        require(workbook, "workbook")
        require(name, "name")
        if name not in workbook.sheetnames:
            raise WorksheetNotFoundError(name)
        return cls(workbook[name])

    @classmethod
    def from_index(cls, workbook: Workbook, number: int = 1) -> Worksheet:
        """Look a worksheet up by its 1-based position."""
        require(workbook, "workbook")
        if not 1 <= number <= len(workbook.worksheets):
            raise WorksheetNotFoundError(number)
        return cls(workbook.worksheets[number - 1])

    def validate_headers(self, headers: Sequence[str], column: int = 1, row: int = 1) -> None:
        """Check that *headers* appear left to right starting at (*row*, *column*).

        Comparison ignores case and surrounding whitespace. Every mismatch is
        collected before raising :class:`HeaderMismatchError`.
        """
        missing = []
        for offset, header in enumerate(headers):
            cell = self.worksheet.cell(row=row, column=column + offset)
            if display_text(cell.value).strip().casefold() != header.strip().casefold():
                missing.append(f"{header} ({cell.coordinate})")

        if missing:
            raise HeaderMismatchError(self.name, missing)

    def apply_style(self, cell_range: CellRange, style: RangeStyle) -> None:
        """Style an A1 range (``"A1:C3"``) or a ``(min_row, min_col, max_row, max_col)`` tuple."""
        apply_style(self.worksheet, cell_range, style)

    def apply_cell_style(self, row: int, column: int, style: RangeStyle) -> None:
        apply_style(self.worksheet, (row, column, row, column), style)

    def __repr__(self) -> str:
        return f"<Worksheet {self.name!r}>"


def set_named_range(
    workbook: Workbook,
    worksheet_name: str,
    range_name: str,
    column: int,
    values: Iterable[T],
    value_mapper: Callable[[T], Any] | None = None,
    row_from: int = 1,
    row_to: int = DEFAULT_NAMED_RANGE_LAST_ROW,
) -> str:
    """Write *values* down *column* and point the workbook name *range_name* at them.

    Existing cells of the column between *row_from* and *row_to* are cleared
    first. Returns the reference the name now points to. With no values the
    name covers the single cell at *row_from*.
    """
    sheet = Worksheet.from_name(workbook, worksheet_name).worksheet

    last_existing = min(row_to, sheet.max_row)
    if last_existing >= row_from:
        for (cell,) in sheet.iter_rows(
            min_row=row_from, max_row=last_existing, min_col=column, max_col=column
        ):
            cell.value = None

    row = row_from - 1
    for value in values:
        row += 1
        sheet.cell(row=row, column=column).value = (
            value_mapper(value) if value_mapper is not None else value
        )

    letter = get_column_letter(column)
    last_row = max(row, row_from)
    reference = "{}!{}".format(
        quote_sheet_title(sheet.title),
        absolute_coordinate(f"{letter}{row_from}:{letter}{last_row}"),
    )

    if range_name in workbook.defined_names:
        del workbook.defined_names[range_name]
    workbook.defined_names[range_name] = DefinedName(range_name, attr_text=reference)

    logger.debug("Named range %s -> %s", range_name, reference)
    return reference
