from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import Buffer


@dataclass(frozen=True, slots=True)
class Position:
    """An offset in a buffer resolved for display.

    `line` counts from the buffer's first line; `column` is 1-based, unlike
    the 0-based columns Buffer.decompose_position returns.
    """

    offset: int
    line: int
    column: int

    @classmethod
    def locate(cls, buffer: Buffer, offset: int) -> Position:
        line, column = buffer.decompose_position(offset)
        return cls(offset=offset, line=line, column=column + 1)


@dataclass(frozen=True, slots=True)
class Span:
    """Display form of a Range: half-open [start, end) in a named buffer."""

    file: str
    start: Position
    end: Position

    @property
    def is_multiline(self) -> bool:
        return self.end.line != self.start.line

    def format(self, *, with_end: bool = False) -> str:
        """`file:line:column`, or `file:line:column-line:column` with the end."""
        head = f"{self.file}:{self.start.line}:{self.start.column}"
        if not with_end:
            return head
        return f"{head}-{self.end.line}:{self.end.column}"
