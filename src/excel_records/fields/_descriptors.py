from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDescriptor:
    """How one column of a row is extracted.

    Attributes:
        column: 1-based column index
        description: Human-readable name used in error messages
        required: Whether a blank cell is an error
        max_length: Longest accepted string (strings only)
        exact_length: Exact accepted string length (strings only)
        trim: Strip surrounding whitespace from valid strings
    """

    column: int
    description: str
    required: bool = True
    max_length: int | None = None
    exact_length: int | None = None
    trim: bool = False

    def __post_init__(self):
        if self.column < 1:
            raise ValueError("column must be >= 1")
        if self.max_length is not None and self.max_length < 1:
            raise ValueError("max_length must be >= 1")
        if self.exact_length is not None and self.exact_length < 1:
            raise ValueError("exact_length must be >= 1")
