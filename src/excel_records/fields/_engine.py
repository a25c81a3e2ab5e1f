"""Cell-to-type coercion, independent of any worksheet.

Each ``coerce_*`` method takes a raw cell value and a :class:`FieldDescriptor`
and returns a :data:`CoercionResult`. Data problems never raise: a blank
optional cell yields ``Coerced(None)`` and every other problem yields exactly
one :class:`CoercionFailure`.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
from decimal import Decimal
from typing import Any, Callable

from dateutil import parser as date_parser
from openpyxl.utils.datetime import WINDOWS_EPOCH, from_excel
from pydantic import EmailStr, TypeAdapter, ValidationError

from ..config import DEFAULT_TIME_FORMATS, RecordSettings
from . import _messages as messages
from ._descriptors import FieldDescriptor
from ._months import MonthNameTable
from ._raw import Blank, Boolean, Number, RawCellValue, Temporal, Text, is_blank, raw_value
from ._result import Coerced, CoercionFailure, CoercionResult

logger = logging.getLogger(__name__)

INT_RANGE = (-(2**31), 2**31 - 1)
SHORT_RANGE = (-(2**15), 2**15 - 1)
LONG_RANGE = (-(2**63), 2**63 - 1)

# Cells holding only these characters count as empty dates/times.
DATE_PLACEHOLDER = "-"

_EMAIL_ADAPTER = TypeAdapter(EmailStr)

# Two defaults differing in year and month: a free-form parse that lands on
# different dates under each one took those parts from the default.
_PARSE_DEFAULTS = (dt.datetime(2000, 1, 1), dt.datetime(2004, 2, 1))


def _looks_numeric(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _to_int(raw: RawCellValue) -> int:
    match raw:
        case Boolean(value=flag):
            return int(flag)
        case Number(value=number):
            # round() is half-to-even and raises on NaN/infinity.
            return int(round(number))
        case Text(value=text):
            if "_" in text:
                raise ValueError(f"Invalid integer literal {text!r}")
            return int(text.strip())
        case _:
            raise TypeError(f"Cannot convert {type(raw).__name__} to int")


def _to_decimal(raw: RawCellValue) -> Decimal:
    match raw:
        case Boolean(value=flag):
            value = Decimal(int(flag))
        case Number(value=number):
            value = Decimal(str(number)) if isinstance(number, float) else Decimal(number)
        case Text(value=text):
            if "_" in text:
                raise ValueError(f"Invalid number literal {text!r}")
            value = Decimal(text.strip())
        case _:
            raise TypeError(f"Cannot convert {type(raw).__name__} to Decimal")
    if not value.is_finite():
        raise ValueError("Number must be finite")
    return value


def _to_float(raw: RawCellValue) -> float:
    match raw:
        case Boolean(value=flag):
            value = float(flag)
        case Number(value=number):
            value = float(number)
        case Text(value=text):
            if "_" in text:
                raise ValueError(f"Invalid number literal {text!r}")
            value = float(text.strip())
        case _:
            raise TypeError(f"Cannot convert {type(raw).__name__} to float")
    if not math.isfinite(value):
        raise ValueError("Number must be finite")
    return value


class FieldCoercionEngine:
    """Convert raw cell values into typed values.

    Args:
        affirmative: Token read as ``True`` by :meth:`coerce_boolean`
        months: Month-name table used by :meth:`coerce_month`
        date_formats: ``strptime`` formats tried before free-form parsing
        time_formats: ``strptime`` formats tried for time-of-day text
        dayfirst: Prefer day-first order for ambiguous free-form dates
        epoch: Day zero of the spreadsheet serial-date system
    """

    def __init__(
        self,
        *,
        affirmative: str = "Yes",
        months: MonthNameTable | None = None,
        date_formats: tuple[str, ...] = (),
        time_formats: tuple[str, ...] = DEFAULT_TIME_FORMATS,
        dayfirst: bool = False,
        epoch: dt.datetime = WINDOWS_EPOCH,
    ) -> None:
        self.affirmative = affirmative
        self.months = months or MonthNameTable.english()
        self.date_formats = tuple(date_formats)
        self.time_formats = tuple(time_formats)
        self.dayfirst = dayfirst
        self.epoch = epoch

    @classmethod
    def from_settings(cls, settings: RecordSettings | None = None) -> FieldCoercionEngine:
        """Build an engine from :class:`RecordSettings` (loaded when not given)."""
        if settings is None:
            settings = RecordSettings.load()
        months = (
            MonthNameTable.from_calendar()
            if settings.month_names == "locale"
            else MonthNameTable.english()
        )
        return cls(
            affirmative=settings.affirmative_token,
            months=months,
            date_formats=settings.date_formats,
            time_formats=settings.time_formats,
            dayfirst=settings.dayfirst,
        )

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def coerce_string(self, raw: Any, field: FieldDescriptor) -> CoercionResult[str]:
        """Lengths are checked on the untrimmed text; trimming applies only to valid values.

        A length violation still carries the text on the failure so callers
        can hand it back unmodified.
        """
        raw = raw_value(raw)
        if is_blank(raw):
            return self._blank(field)

        text = raw.as_text()
        if field.max_length is not None and len(text) > field.max_length:
            return CoercionFailure(messages.max_length(field.description, field.max_length), text)
        if field.exact_length is not None and len(text) != field.exact_length:
            return CoercionFailure(
                messages.exact_length(field.description, field.exact_length), text
            )

        return Coerced(text.strip() if field.trim else text)

    def coerce_email(self, raw: Any, field: FieldDescriptor) -> CoercionResult[str]:
        result = self.coerce_string(raw, field)
        if not isinstance(result, Coerced) or result.value is None:
            return result

        try:
            _EMAIL_ADAPTER.validate_python(result.value.strip())
        except ValidationError:
            return CoercionFailure(messages.email_invalid(field.description), result.value)
        return result

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def coerce_int(self, raw: Any, field: FieldDescriptor) -> CoercionResult[int]:
        return self._coerce_integral(raw, field, INT_RANGE, messages.integer_invalid)

    def coerce_short(self, raw: Any, field: FieldDescriptor) -> CoercionResult[int]:
        return self._coerce_integral(raw, field, SHORT_RANGE, messages.short_invalid)

    def coerce_long(self, raw: Any, field: FieldDescriptor) -> CoercionResult[int]:
        return self._coerce_integral(raw, field, LONG_RANGE, messages.long_invalid)

    def coerce_decimal(self, raw: Any, field: FieldDescriptor) -> CoercionResult[Decimal]:
        return self._coerce_number(raw, field, _to_decimal)

    def coerce_double(self, raw: Any, field: FieldDescriptor) -> CoercionResult[float]:
        return self._coerce_number(raw, field, _to_float)

    def _coerce_integral(
        self,
        raw: Any,
        field: FieldDescriptor,
        bounds: tuple[int, int],
        message: Callable[[str], str],
    ) -> CoercionResult[int]:
        raw = raw_value(raw)
        if is_blank(raw):
            return self._blank(field)

        try:
            value = _to_int(raw)
        except (ValueError, TypeError, ArithmeticError):
            return CoercionFailure(message(field.description))

        low, high = bounds
        if not low <= value <= high:
            return CoercionFailure(message(field.description))
        return Coerced(value)

    def _coerce_number(
        self,
        raw: Any,
        field: FieldDescriptor,
        convert: Callable[[RawCellValue], Any],
    ) -> CoercionResult[Any]:
        raw = raw_value(raw)
        if is_blank(raw):
            return self._blank(field)

        try:
            return Coerced(convert(raw))
        except (ValueError, TypeError, ArithmeticError):
            # decimal.InvalidOperation is an ArithmeticError
            return CoercionFailure(messages.number_invalid(field.description))

    # ------------------------------------------------------------------
    # Dates and times
    # ------------------------------------------------------------------

    def coerce_datetime(self, raw: Any, field: FieldDescriptor) -> CoercionResult[dt.datetime]:
        """Parse the value directly, falling back to a serial day number."""
        raw = raw_value(raw)
        if is_blank(raw, ignore=DATE_PLACEHOLDER):
            return self._blank(field)

        value = self._parse_datetime(raw)
        if value is None:
            value = self._from_serial(raw)
        if value is None:
            return CoercionFailure(messages.datetime_invalid(field.description))
        return Coerced(value)

    def coerce_time(self, raw: Any, field: FieldDescriptor) -> CoercionResult[dt.time]:
        """Parse a time of day, falling back to the time part of a full date."""
        raw = raw_value(raw)
        if is_blank(raw, ignore=DATE_PLACEHOLDER):
            return self._blank(field)

        value = self._parse_time(raw)
        if value is None:
            moment = self._parse_datetime(raw)
            if moment is not None:
                value = moment.time()
        if value is None:
            return CoercionFailure(messages.time_invalid(field.description))
        return Coerced(value)

    def _parse_datetime(self, raw: RawCellValue) -> dt.datetime | None:
        match raw:
            case Temporal(value=dt.datetime() as value):
                return value
            case Temporal(value=dt.date() as value):
                return dt.datetime.combine(value, dt.time())
            case Text(value=text):
                return self._parse_datetime_text(text.strip())
            case _:
                return None

    def _parse_datetime_text(self, text: str) -> dt.datetime | None:
        # Bare numbers are serial days, not dates like "the 3rd of this month".
        if _looks_numeric(text):
            return None

        for fmt in self.date_formats:
            try:
                return dt.datetime.strptime(text, fmt).replace(tzinfo=None)
            except ValueError:
                continue

        try:
            first, second = (
                date_parser.parse(text, default=default, dayfirst=self.dayfirst, ignoretz=True)
                for default in _PARSE_DEFAULTS
            )
        except (ValueError, OverflowError) as e:
            logger.debug("Could not parse %r as a date: %s", text, e)
            return None

        if first != second:
            logger.debug("Could not parse %r as a date: no explicit year and month", text)
            return None
        return first

    def _from_serial(self, raw: RawCellValue) -> dt.datetime | None:
        match raw:
            case Number(value=number):
                serial = float(number)
            case Text(value=text) if _looks_numeric(text.strip()):
                serial = float(text.strip())
            case _:
                return None

        if not math.isfinite(serial) or serial < 0:
            return None

        try:
            value = from_excel(serial, epoch=self.epoch)
        except (ValueError, OverflowError) as e:
            logger.debug("Serial date %r out of range: %s", serial, e)
            return None

        if isinstance(value, dt.time):
            # from_excel returns a bare time for serials in [0, 1).
            return dt.datetime.combine(self.epoch.date(), value) + dt.timedelta(days=int(serial))
        return value

    def _parse_time(self, raw: RawCellValue) -> dt.time | None:
        match raw:
            case Temporal(value=dt.datetime()):
                return None
            case Temporal(value=dt.time() as value):
                return value
            case Temporal(value=dt.timedelta() as value):
                if dt.timedelta(0) <= value < dt.timedelta(days=1):
                    return (dt.datetime.min + value).time()
                return None
            case Text(value=text):
                return self._parse_time_text(text.strip())
            case _:
                return None

    def _parse_time_text(self, text: str) -> dt.time | None:
        for fmt in self.time_formats:
            try:
                return dt.datetime.strptime(text, fmt).time()
            except ValueError:
                continue
        try:
            return dt.time.fromisoformat(text)
        except ValueError:
            return None

    # ------------------------------------------------------------------
    # Booleans and months
    # ------------------------------------------------------------------

    def coerce_boolean(self, raw: Any, field: FieldDescriptor) -> CoercionResult[bool]:
        """Native booleans pass through; anything else is ``True`` only when it
        matches the affirmative token, ignoring case."""
        raw = raw_value(raw)
        if is_blank(raw):
            return self._blank(field)

        match raw:
            case Boolean(value=flag):
                return Coerced(flag)
            case _:
                return Coerced(raw.as_text().strip().casefold() == self.affirmative.casefold())

    def coerce_month(self, raw: Any, field: FieldDescriptor) -> CoercionResult[int]:
        """Accept a literal month number or a month name from the engine's table."""
        raw = raw_value(raw)
        if is_blank(raw):
            return self._blank(field)

        text = raw.as_text().strip()
        try:
            month = int(text)
        except ValueError:
            month = self.months.resolve(text)

        if month is None or not 1 <= month <= 12:
            return CoercionFailure(messages.type_invalid(field.description, "month"))
        return Coerced(month)

    def _blank(self, field: FieldDescriptor) -> CoercionResult[Any]:
        if field.required:
            return CoercionFailure(messages.required(field.description))
        return Coerced(None)
