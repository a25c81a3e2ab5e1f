"""Outcome of a single coercion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Coerced(Generic[T]):
    """Successful coercion. ``value`` is ``None`` for an optional blank cell."""

    value: Optional[T]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class CoercionFailure:
    """Failed coercion carrying the message to report for the cell."""

    message: str
    # Value to hand back to the caller anyway (strings failing a length check).
    value: object = None

    @property
    def ok(self) -> bool:
        return False


CoercionResult = Union[Coerced[T], CoercionFailure]
