"""Per-row record session.

Subclass :class:`ExcelRecord`, read each column with one of the ``get_*``
methods in ``__init__``, and define :attr:`ExcelRecord.is_empty`::

    class CustomerRecord(ExcelRecord):
        def __init__(self, worksheet, row, **kwargs):
            super().__init__(worksheet, row, **kwargs)
            self.code = self.get_string(1, "Code", exact_length=5)
            self.name = self.get_string(2, "Name", max_length=80, trim=True)
            self.since = self.get_datetime(3, "Customer since", required=False)

        @property
        def is_empty(self):
            return self.code is None and self.name is None

    record = CustomerRecord(worksheet, 2)
    if not record.is_valid:
        print("\\n".join(record.errors))
"""

from __future__ import annotations

import abc
import datetime as dt
import logging
from decimal import Decimal
from typing import Any, Callable

from ..config import RecordSettings
from ..exceptions import require
from ..fields import CoercionFailure, CoercionResult, FieldCoercionEngine, FieldDescriptor
from ..styling import RangeStyle
from ._accessor import CellAccessor, WorksheetCellAccessor
from ._errors import CellError, ErrorLog

logger = logging.getLogger(__name__)

Coercer = Callable[[Any, FieldDescriptor], CoercionResult[Any]]


class ExcelRecord(abc.ABC):
    """Validation context for one worksheet row.

    Every ``get_*`` call returns the typed value, or ``None`` when the cell is
    blank or invalid. Problems are appended to :attr:`errors` in call order and
    never raised; only a missing worksheet raises, at construction.

    Args:
        worksheet: openpyxl worksheet or any :class:`CellAccessor`
        row: 1-based row number this record reads
        include_worksheet_name_in_error: Qualify error addresses with the sheet name
            (from :class:`RecordSettings` when omitted)
        engine: Coercion engine; built from :class:`RecordSettings` when omitted
    """

    def __init__(
        self,
        worksheet: Any,
        row: int,
        *,
        include_worksheet_name_in_error: bool | None = None,
        engine: FieldCoercionEngine | None = None,
    ) -> None:
        require(worksheet, "worksheet")
        if row < 1:
            raise ValueError("row must be >= 1")

        settings = None
        if include_worksheet_name_in_error is None or engine is None:
            settings = RecordSettings.load()
        if include_worksheet_name_in_error is None:
            include_worksheet_name_in_error = settings.include_worksheet_name_in_error

        if isinstance(worksheet, CellAccessor):
            self.accessor: CellAccessor = worksheet
        else:
            self.accessor = WorksheetCellAccessor(worksheet)

        self.row = row
        self.include_worksheet_name_in_error = include_worksheet_name_in_error
        self.engine = engine or FieldCoercionEngine.from_settings(settings)
        self._errors = ErrorLog()

    @property
    @abc.abstractmethod
    def is_empty(self) -> bool:
        """Whether the row holds no record at all (e.g. every key column blank)."""

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> tuple[str, ...]:
        """Formatted messages, ``[address] message``, in the order they were found."""
        return self._errors.messages()

    @property
    def cell_errors(self) -> tuple[CellError, ...]:
        return self._errors.entries()

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def get_string(
        self,
        column: int,
        description: str,
        *,
        required: bool = True,
        max_length: int | None = None,
        exact_length: int | None = None,
        trim: bool = False,
    ) -> str | None:
        """Read the cell's display text.

        A value failing a length check is still returned, untrimmed.
        """
        field = FieldDescriptor(
            column,
            description,
            required=required,
            max_length=max_length,
            exact_length=exact_length,
            trim=trim,
        )
        return self._extract(field, self.engine.coerce_string, text=True)

    def get_email(
        self,
        column: int,
        description: str,
        *,
        required: bool = True,
        max_length: int | None = None,
        trim: bool = False,
    ) -> str | None:
        field = FieldDescriptor(
            column, description, required=required, max_length=max_length, trim=trim
        )
        return self._extract(field, self.engine.coerce_email, text=True)

    def get_int(self, column: int, description: str, *, required: bool = True) -> int | None:
        return self._extract(FieldDescriptor(column, description, required), self.engine.coerce_int)

    def get_short(self, column: int, description: str, *, required: bool = True) -> int | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_short
        )

    def get_long(self, column: int, description: str, *, required: bool = True) -> int | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_long
        )

    def get_decimal(
        self, column: int, description: str, *, required: bool = True
    ) -> Decimal | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_decimal
        )

    def get_double(self, column: int, description: str, *, required: bool = True) -> float | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_double
        )

    def get_datetime(
        self, column: int, description: str, *, required: bool = True
    ) -> dt.datetime | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_datetime
        )

    def get_time(self, column: int, description: str, *, required: bool = True) -> dt.time | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_time
        )

    def get_boolean(self, column: int, description: str, *, required: bool = True) -> bool | None:
        return self._extract(
            FieldDescriptor(column, description, required), self.engine.coerce_boolean
        )

    def get_month_number(
        self, column: int, description: str, *, required: bool = True
    ) -> int | None:
        """Read a month as a number (``3``) or a name (``"March"``, ``"mar"``)."""
        return self._extract(
            FieldDescriptor(column, description, required),
            self.engine.coerce_month,
            text=True,
        )

    def _extract(self, field: FieldDescriptor, coerce: Coercer, *, text: bool = False) -> Any:
        if text:
            raw = self.accessor.get_text(self.row, field.column)
        else:
            raw = self.accessor.get_value(self.row, field.column)

        result = coerce(raw, field)
        if isinstance(result, CoercionFailure):
            self.add_error(field.column, result.message)
        return result.value

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def cell_address(self, column: int) -> str:
        if self.include_worksheet_name_in_error:
            return self.accessor.get_full_address(self.row, column)
        return self.accessor.get_address(self.row, column)

    def add_error(self, column: int | None, message: str) -> None:
        """Record a problem for *column* of this row, or for the row as a whole when ``None``."""
        address = None if column is None else self.cell_address(column)
        error = CellError(message=message, address=address)
        self._errors.append(error)
        logger.debug("Row %d: %s", self.row, error)

    # ------------------------------------------------------------------
    # Writing and styling
    # ------------------------------------------------------------------

    def set_cell_value(
        self,
        column: int,
        value: Any,
        *,
        wrap_text: bool | None = None,
        number_format: str | None = None,
    ) -> None:
        self.accessor.set_value(self.row, column, value)
        if wrap_text is not None or number_format is not None:
            self.accessor.set_format(
                self.row, column, wrap_text=wrap_text, number_format=number_format
            )

    def apply_style(self, column: int, style: RangeStyle) -> None:
        self.accessor.apply_style(self.row, column, self.row, column, style)

    def apply_style_range(self, column_from: int, column_to: int, style: RangeStyle) -> None:
        self.accessor.apply_style(self.row, column_from, self.row, column_to, style)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} row={self.row} errors={len(self._errors)}>"
