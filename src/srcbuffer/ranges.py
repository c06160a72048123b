from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .errors import PositionOutOfRangeError
from .spans import Position, Span

if TYPE_CHECKING:
    from .buffer import Buffer


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open interval [begin_pos, end_pos) of offsets in a Buffer.

    Ranges compare equal only when they point into the same Buffer object.
    """

    buffer: Buffer
    begin_pos: int
    end_pos: int

    def __post_init__(self) -> None:
        size = len(self.buffer.source)
        if not 0 <= self.begin_pos <= size:
            raise PositionOutOfRangeError(
                name=self.buffer.name, what="offset", value=self.begin_pos, low=0, high=size
            )
        if not self.begin_pos <= self.end_pos <= size:
            raise PositionOutOfRangeError(
                name=self.buffer.name, what="offset", value=self.end_pos, low=self.begin_pos, high=size
            )

    def __str__(self) -> str:
        start = Position.locate(self.buffer, self.begin_pos)
        return f"{self.buffer.name}:{start.line}:{start.column}"

    @property
    def size(self) -> int:
        return self.end_pos - self.begin_pos

    @property
    def is_empty(self) -> bool:
        return self.begin_pos == self.end_pos

    @property
    def line(self) -> int:
        return self.buffer.line_for_position(self.begin_pos)

    @property
    def column(self) -> int:
        return self.buffer.column_for_position(self.begin_pos)

    @property
    def last_line(self) -> int:
        return self.buffer.line_for_position(self.end_pos)

    @property
    def last_column(self) -> int:
        return self.buffer.column_for_position(self.end_pos)

    @property
    def source(self) -> str:
        return self.buffer.slice(self.begin_pos, self.end_pos)

    @property
    def source_line(self) -> str:
        return self.buffer.source_line(self.line)

    def begin(self) -> Range:
        return self.with_(end_pos=self.begin_pos)

    def end(self) -> Range:
        return self.with_(begin_pos=self.end_pos)

    def with_(self, *, begin_pos: int | None = None, end_pos: int | None = None) -> Range:
        return replace(
            self,
            begin_pos=self.begin_pos if begin_pos is None else begin_pos,
            end_pos=self.end_pos if end_pos is None else end_pos,
        )

    def adjust(self, *, begin_pos: int = 0, end_pos: int = 0) -> Range:
        """Shift each end by the given deltas."""
        return replace(self, begin_pos=self.begin_pos + begin_pos, end_pos=self.end_pos + end_pos)

    def resize(self, new_size: int) -> Range:
        return self.with_(end_pos=self.begin_pos + new_size)

    def join(self, other: Range) -> Range:
        """Smallest range covering both."""
        self._check_same_buffer(other)
        return replace(
            self,
            begin_pos=min(self.begin_pos, other.begin_pos),
            end_pos=max(self.end_pos, other.end_pos),
        )

    def intersect(self, other: Range) -> Range | None:
        self._check_same_buffer(other)
        begin = max(self.begin_pos, other.begin_pos)
        end = min(self.end_pos, other.end_pos)
        if begin > end:
            return None
        return replace(self, begin_pos=begin, end_pos=end)

    def overlaps(self, other: Range) -> bool:
        self._check_same_buffer(other)
        return self.begin_pos < other.end_pos and other.begin_pos < self.end_pos

    def contains(self, other: Range) -> bool:
        self._check_same_buffer(other)
        return self.begin_pos <= other.begin_pos and other.end_pos <= self.end_pos

    def to_span(self) -> Span:
        return Span(
            file=self.buffer.name,
            start=Position.locate(self.buffer, self.begin_pos),
            end=Position.locate(self.buffer, self.end_pos),
        )

    def _check_same_buffer(self, other: Range) -> None:
        if other.buffer is not self.buffer:
            raise ValueError(f"cannot combine ranges from {self.buffer.name!r} and {other.buffer.name!r}")
