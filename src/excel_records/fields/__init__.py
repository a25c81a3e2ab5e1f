"""Coercion of raw cell values into typed field values.

Pure logic: nothing in this package touches a workbook.
"""

from __future__ import annotations

from ._descriptors import FieldDescriptor
from ._engine import FieldCoercionEngine
from ._months import MonthNameTable
from ._raw import BLANK, Blank, Boolean, Number, RawCellValue, Temporal, Text, is_blank, raw_value
from ._result import Coerced, CoercionFailure, CoercionResult

__all__ = [
    "BLANK",
    "Blank",
    "Boolean",
    "Coerced",
    "CoercionFailure",
    "CoercionResult",
    "FieldCoercionEngine",
    "FieldDescriptor",
    "MonthNameTable",
    "Number",
    "RawCellValue",
    "Temporal",
    "Text",
    "is_blank",
    "raw_value",
]
