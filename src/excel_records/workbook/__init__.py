"""Workbook-level helpers: reading records, worksheet lookup, named ranges."""

from __future__ import annotations

from .core import (
    ReaderConfig,
    RecordReadResult,
    RecordResult,
    RecordSummary,
    iter_records,
    open_worksheet,
    read_records,
)
from .worksheet import Worksheet, set_named_range

__all__ = [
    "ReaderConfig",
    "RecordReadResult",
    "RecordResult",
    "RecordSummary",
    "Worksheet",
    "iter_records",
    "open_worksheet",
    "read_records",
    "set_named_range",
]
