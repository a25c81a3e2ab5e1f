from ._version import __version__
from .exceptions import (
    ExcelRecordsError,
    HeaderMismatchError,
    MissingArgumentError,
    WorksheetNotFoundError,
)
from .fields import FieldCoercionEngine, FieldDescriptor, MonthNameTable
from .record import CellAccessor, CellError, ExcelRecord, WorksheetCellAccessor
from .styling import HorizontalAlignment, RangeStyle, VerticalAlignment, apply_style
from .workbook import ReaderConfig, Worksheet, iter_records, read_records, set_named_range

__all__ = [
    "__version__",
    "CellAccessor",
    "CellError",
    "ExcelRecord",
    "ExcelRecordsError",
    "FieldCoercionEngine",
    "FieldDescriptor",
    "HeaderMismatchError",
    "HorizontalAlignment",
    "MissingArgumentError",
    "MonthNameTable",
    "RangeStyle",
    "ReaderConfig",
    "VerticalAlignment",
    "Worksheet",
    "WorksheetCellAccessor",
    "WorksheetNotFoundError",
    "apply_style",
    "iter_records",
    "read_records",
    "set_named_range",
]
