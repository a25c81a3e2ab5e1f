"""Cell access seam between records and the openpyxl worksheet."""

from __future__ import annotations

import datetime as dt
from copy import copy
from typing import Any, Protocol, runtime_checkable

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet as OpenpyxlWorksheet

from ..exceptions import require
from ..styling import RangeStyle, apply_style


@runtime_checkable
class CellAccessor(Protocol):
    """The operations a record needs from a worksheet. Rows and columns are 1-based."""

    @property
    def title(self) -> str:
        ...

    def get_value(self, row: int, column: int) -> Any:
        ...

    def get_text(self, row: int, column: int) -> str:
        ...

    def set_value(self, row: int, column: int, value: Any) -> None:
        ...

    def set_format(
        self,
        row: int,
        column: int,
        *,
        wrap_text: bool | None = None,
        number_format: str | None = None,
    ) -> None:
        ...

    def get_address(self, row: int, column: int) -> str:
        ...

    def get_full_address(self, row: int, column: int) -> str:
        ...

    def apply_style(
        self, min_row: int, min_col: int, max_row: int, max_col: int, style: RangeStyle
    ) -> None:
        ...


def display_text(value: Any) -> str:
    """Render a cell value roughly the way a spreadsheet shows it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, dt.datetime):
        if value.time() == dt.time():
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    return str(value)


def quote_sheet_title(title: str) -> str:
    return "'{}'".format(title.replace("'", "''"))


class WorksheetCellAccessor:
    """:class:`CellAccessor` over an openpyxl worksheet."""

    def __init__(self, worksheet: OpenpyxlWorksheet) -> None:
        self.worksheet = require(worksheet, "worksheet")

    @property
    def title(self) -> str:
        return self.worksheet.title

    def get_value(self, row: int, column: int) -> Any:
        return self.worksheet.cell(row=row, column=column).value

    def get_text(self, row: int, column: int) -> str:
        return display_text(self.get_value(row, column))

    def set_value(self, row: int, column: int, value: Any) -> None:
        self.worksheet.cell(row=row, column=column).value = value

    def set_format(
        self,
        row: int,
        column: int,
        *,
        wrap_text: bool | None = None,
        number_format: str | None = None,
    ) -> None:
        cell = self.worksheet.cell(row=row, column=column)
        if wrap_text is not None:
            alignment = copy(cell.alignment)
            alignment.wrap_text = wrap_text
            cell.alignment = alignment
        if number_format is not None and number_format.strip():
            cell.number_format = number_format

    def get_address(self, row: int, column: int) -> str:
        return f"{get_column_letter(column)}{row}"

    def get_full_address(self, row: int, column: int) -> str:
        return f"{quote_sheet_title(self.title)}!{self.get_address(row, column)}"

    def apply_style(
        self, min_row: int, min_col: int, max_row: int, max_col: int, style: RangeStyle
    ) -> None:
        apply_style(self.worksheet, (min_row, min_col, max_row, max_col), style)
