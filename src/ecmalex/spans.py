from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """A concrete source location.

    Offsets are 0-based; line/column are 1-based. Within one source the
    offset order agrees with (line, column) order.
    """

    offset: int
    line: int
    column: int

    def format(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file."""

    file: str
    start: Location
    end: Location

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"
