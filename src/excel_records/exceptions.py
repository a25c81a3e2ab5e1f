"""Exceptions raised for structural problems.

Data-quality problems found while reading a row are never raised; they are
collected on the record as :class:`~excel_records.record.CellError` entries.
"""

from __future__ import annotations

from typing import Sequence


class ExcelRecordsError(Exception):
    """Base exception for excel_records."""


class MissingArgumentError(ExcelRecordsError, ValueError):
    """Raised when a required collaborator is ``None``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Argument '{name}' is required.")


class WorksheetNotFoundError(ExcelRecordsError, LookupError):
    """Raised when a worksheet cannot be found by name or position."""

    def __init__(self, key: str | int) -> None:
        self.key = key
        super().__init__(f"Worksheet '{key}' not found.")


class HeaderMismatchError(ExcelRecordsError):
    """Raised when the header row does not carry the expected headers."""

    def __init__(self, sheet_name: str, missing: Sequence[str]) -> None:
        self.sheet_name = sheet_name
        self.missing = list(missing)
        super().__init__(f"[{sheet_name}] Headers not found: {', '.join(self.missing)}.")


def require(value, name: str):
    """Return *value*, raising :class:`MissingArgumentError` when it is ``None``."""
    if value is None:
        raise MissingArgumentError(name)
    return value
