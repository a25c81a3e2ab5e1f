"""Reading every data row of a worksheet into record sessions."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Generic, Type, TypeVar, Union

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet as OpenpyxlWorksheet

from ..config import RecordSettings
from ..fields import FieldCoercionEngine
from ..record import ExcelRecord
from .worksheet import Worksheet

logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord", bound=ExcelRecord)

WorkbookSource = Union[str, os.PathLike, BinaryIO, Workbook, OpenpyxlWorksheet, Worksheet]


@dataclass
class ReaderConfig:
    """Configuration for reading records from a worksheet."""

    sheet: str | int | None = None  # name or 1-based position; default: active sheet
    header_row: int = 1  # 1-based row index for headers
    data_row_start: int | None = None  # default: header_row + 1 if None
    headers: Sequence[str] | None = None  # expected headers, checked before reading
    skip_empty: bool = True
    stop_on_first_error: bool = False
    max_rows: int | None = None  # None means no explicit limit
    include_worksheet_name_in_error: bool | None = None  # default: from RecordSettings

    def __post_init__(self):
        if self.data_row_start is None:
            self.data_row_start = self.header_row + 1

        if self.header_row < 1:
            raise ValueError("header_row must be >= 1")
        if self.data_row_start < self.header_row:
            raise ValueError("data_row_start must be >= header_row")
        if self.max_rows is not None and self.max_rows < 1:
            raise ValueError("max_rows must be >= 1")


@dataclass
class RecordResult(Generic[TRecord]):
    """A record read from one worksheet row."""

    row_index: int  # 1-based sheet row
    record: TRecord

    @property
    def is_valid(self) -> bool:
        return self.record.is_valid

    @property
    def errors(self) -> tuple[str, ...]:
        return self.record.errors


@dataclass
class RecordSummary:
    """Summary statistics for a read."""

    total_rows: int
    valid_rows: int
    invalid_rows: int
    empty_rows: int = 0

    @property
    def error_rate(self) -> float:
        """Percentage of non-empty rows that failed validation."""
        if self.total_rows == 0:
            return 0.0
        return (self.invalid_rows / self.total_rows) * 100


@dataclass
class RecordReadResult(Generic[TRecord]):
    summary: RecordSummary
    rows: list[RecordResult[TRecord]]

    @property
    def valid_records(self) -> list[TRecord]:
        return [row.record for row in self.rows if row.is_valid]

    @property
    def errors(self) -> list[tuple[int, str]]:
        """Every error message paired with its row index, in reading order."""
        return [(row.row_index, message) for row in self.rows for message in row.errors]


@contextmanager
def open_worksheet(
    source: WorkbookSource, sheet: str | int | None = None
) -> Iterator[OpenpyxlWorksheet]:
    """Yield the worksheet to read from *source*.

    Paths and binary streams are loaded (cached formula results, not formulas)
    and closed on exit. Workbooks and worksheets passed in are left open.
    """
    if isinstance(source, Worksheet):
        yield source.worksheet
        return
    if isinstance(source, OpenpyxlWorksheet):
        yield source
        return

    if isinstance(source, Workbook):
        yield _select_sheet(source, sheet)
        return

    workbook = load_workbook(source, data_only=True)
    try:
        yield _select_sheet(workbook, sheet)
    finally:
        workbook.close()


def _select_sheet(workbook: Workbook, sheet: str | int | None) -> OpenpyxlWorksheet:
    if isinstance(sheet, str):
        return Worksheet.from_name(workbook, sheet).worksheet
    if isinstance(sheet, int):
        return Worksheet.from_index(workbook, sheet).worksheet
    return workbook.active


def iter_records(
    worksheet: OpenpyxlWorksheet | Worksheet,
    record_cls: Type[TRecord],
    *,
    config: ReaderConfig | None = None,
    engine: FieldCoercionEngine | None = None,
) -> Iterator[RecordResult[TRecord]]:
    """Build one *record_cls* per data row and yield a :class:`RecordResult` for each.

    Notes:
        - Expected headers, when configured, are checked first and raise
          :class:`~excel_records.exceptions.HeaderMismatchError`
        - Rows whose record reports ``is_empty`` are skipped when ``skip_empty``
        - Obeys stop_on_first_error and max_rows
    """
    if config is None:
        config = ReaderConfig()
    if isinstance(worksheet, Worksheet):
        worksheet = worksheet.worksheet

    if config.headers:
        Worksheet(worksheet).validate_headers(config.headers, row=config.header_row)

    settings = None
    if engine is None or config.include_worksheet_name_in_error is None:
        settings = RecordSettings.load()
    if engine is None:
        engine = FieldCoercionEngine.from_settings(settings)
    include_worksheet_name = config.include_worksheet_name_in_error
    if include_worksheet_name is None:
        include_worksheet_name = settings.include_worksheet_name_in_error

    rows_processed = 0
    for row_index in range(config.data_row_start, worksheet.max_row + 1):
        record = record_cls(
            worksheet,
            row_index,
            include_worksheet_name_in_error=include_worksheet_name,
            engine=engine,
        )
        if config.skip_empty and record.is_empty:
            logger.debug("Skipping empty row %d", row_index)
            continue

        result = RecordResult(row_index=row_index, record=record)
        yield result

        rows_processed += 1

        if config.stop_on_first_error and not result.is_valid:
            break

        if config.max_rows is not None and rows_processed >= config.max_rows:
            break


def read_records(
    source: WorkbookSource,
    record_cls: Type[TRecord],
    *,
    config: ReaderConfig | None = None,
    engine: FieldCoercionEngine | None = None,
) -> RecordReadResult[TRecord]:
    """Collect :func:`iter_records` over *source* into a :class:`RecordReadResult`.

    Args:
        source: Path, binary stream, openpyxl workbook or worksheet
        record_cls: :class:`ExcelRecord` subclass built for every row
        config: Reading options
        engine: Coercion engine shared by all records
    """
    if config is None:
        config = ReaderConfig()

    with open_worksheet(source, config.sheet) as worksheet:
        rows = []
        empty_rows = 0
        last_row = config.data_row_start - 1
        for result in iter_records(worksheet, record_cls, config=config, engine=engine):
            # rows skipped as empty sit between consecutive results
            empty_rows += result.row_index - last_row - 1
            last_row = result.row_index
            rows.append(result)
        stopped_early = (config.max_rows is not None and len(rows) >= config.max_rows) or (
            config.stop_on_first_error and bool(rows) and not rows[-1].is_valid
        )
        if not stopped_early:
            empty_rows += max(worksheet.max_row - last_row, 0)

    valid_rows = sum(1 for row in rows if row.is_valid)
    summary = RecordSummary(
        total_rows=len(rows),
        valid_rows=valid_rows,
        invalid_rows=len(rows) - valid_rows,
        empty_rows=empty_rows,
    )

    logger.info(
        "Read %d records from %s: %d valid, %d invalid, %d empty rows skipped",
        summary.total_rows,
        worksheet.title,
        summary.valid_rows,
        summary.invalid_rows,
        summary.empty_rows,
    )
    return RecordReadResult(summary=summary, rows=rows)
