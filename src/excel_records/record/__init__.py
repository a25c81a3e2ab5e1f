"""Record sessions: one row of a worksheet read into typed fields."""

from __future__ import annotations

from ._accessor import CellAccessor, WorksheetCellAccessor, display_text
from ._errors import CellError, ErrorLog
from ._record import ExcelRecord

__all__ = [
    "CellAccessor",
    "CellError",
    "ErrorLog",
    "ExcelRecord",
    "WorksheetCellAccessor",
    "display_text",
]
