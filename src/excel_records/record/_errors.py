from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class CellError:
    """A data-quality problem, optionally tied to a cell address."""

    message: str
    address: str | None = None

    def __str__(self) -> str:
        if self.address is None:
            return self.message
        return f"[{self.address}] {self.message}"


class ErrorLog:
    """Append-only, insertion-ordered collection of :class:`CellError`.

    Entries cannot be removed or replaced.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[CellError] = []

    def append(self, error: CellError) -> None:
        self._entries.append(error)

    def __iter__(self) -> Iterator[CellError]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def entries(self) -> tuple[CellError, ...]:
        return tuple(self._entries)

    def messages(self) -> tuple[str, ...]:
        return tuple(str(entry) for entry in self._entries)

    def __repr__(self) -> str:
        return f"ErrorLog({len(self._entries)} errors)"
