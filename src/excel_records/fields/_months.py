"""Month-name tables used to resolve month columns."""

from __future__ import annotations

import calendar
from dataclasses import dataclass

_ENGLISH = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class MonthNameTable:
    """Twelve month names, plus optional abbreviations, for one locale.

    Lookups are case-insensitive. The table is a plain value so engines built
    with it behave the same regardless of the process locale.
    """

    names: tuple[str, ...]
    abbreviations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.names) != 12:
            raise ValueError("names must contain exactly 12 entries")
        if self.abbreviations and len(self.abbreviations) != 12:
            raise ValueError("abbreviations must be empty or contain exactly 12 entries")

    @classmethod
    def english(cls) -> MonthNameTable:
        return cls(_ENGLISH, tuple(name[:3] for name in _ENGLISH))

    @classmethod
    def from_calendar(cls) -> MonthNameTable:
        """Snapshot the month names of the current ``LC_TIME`` locale."""
        return cls(tuple(calendar.month_name[1:]), tuple(calendar.month_abbr[1:]))

    def resolve(self, name: str) -> int | None:
        """Return the 1-based month for *name*, or ``None`` when unknown."""
        needle = name.strip().casefold()
        if not needle:
            return None
        for table in (self.names, self.abbreviations):
            for index, candidate in enumerate(table, start=1):
                if candidate.casefold() == needle:
                    return index
        return None
