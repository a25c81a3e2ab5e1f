"""Raw cell values as a closed set of variants.

A cell arrives as an untyped scalar; :func:`raw_value` wraps it in exactly one
of the variants below so the coercion engine can ``match`` on it.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union


@dataclass(frozen=True)
class Blank:
    """An empty cell."""

    def as_text(self) -> str:
        return ""


@dataclass(frozen=True)
class Text:
    value: str

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    value: int | float | Decimal

    def as_text(self) -> str:
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def as_text(self) -> str:
        return "TRUE" if self.value else "FALSE"


@dataclass(frozen=True)
class Temporal:
    """A date, datetime, time or timedelta value."""

    value: dt.datetime | dt.date | dt.time | dt.timedelta

    def as_text(self) -> str:
        if isinstance(self.value, dt.timedelta):
            return str(self.value)
        return self.value.isoformat()


RawCellValue = Union[Blank, Text, Number, Boolean, Temporal]

BLANK = Blank()


def raw_value(value: Any) -> RawCellValue:
    """Wrap a cell's Python value in its :data:`RawCellValue` variant.

    ``None`` and ``""`` are blank. Whitespace-only text stays :class:`Text`;
    callers decide whether that counts as blank. Booleans are checked before
    numbers because ``bool`` is an ``int`` subclass.
    """
    if isinstance(value, (Blank, Text, Number, Boolean, Temporal)):
        return value
    if value is None or value == "":
        return BLANK
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float, Decimal)):
        return Number(value)
    if isinstance(value, (dt.datetime, dt.date, dt.time, dt.timedelta)):
        return Temporal(value)
    return Text(str(value))


def is_blank(raw: RawCellValue, *, ignore: str = "") -> bool:
    """True for blank cells and text made only of whitespace and *ignore* characters."""
    match raw:
        case Blank():
            return True
        case Text(value=text):
            for char in ignore:
                text = text.replace(char, "")
            return not text.strip()
        case _:
            return False
