from __future__ import annotations

import logging
import threading
from bisect import bisect_right
from pathlib import Path

from .encoding import recognize_encoding, reencode
from .errors import ImmutableBufferError, PositionOutOfRangeError, UninitializedSourceError
from .ranges import Range


logger = logging.getLogger(__name__)


class Buffer:
    """The text of a single document plus what is needed to locate offsets in it.

    The source is written exactly once, either as raw bytes (decoded according
    to the document's magic comment) or as text. Line tables are derived from
    it on first use and cached for the lifetime of the buffer.

    Offsets are 0-based indices into the decoded text. Lines start at
    `first_line`, columns are 0-based.
    """

    __slots__ = ("_name", "_first_line", "_encoding", "_source", "_lines", "_line_begins", "_lock")

    recognize_encoding = staticmethod(recognize_encoding)
    reencode = staticmethod(reencode)

    def __init__(
        self,
        name: str,
        first_line: int = 1,
        *,
        encoding: str = "utf-8",
        source: bytes | str | None = None,
    ) -> None:
        self._name = name
        self._first_line = first_line
        self._encoding = encoding
        self._source: str | None = None
        self._lines: tuple[str, ...] | None = None
        self._line_begins: tuple[int, ...] | None = None
        self._lock = threading.Lock()

        if source is not None:
            self.source = source

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "empty"
        return f"Buffer({self._name!r}, first_line={self._first_line}, {state})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def first_line(self) -> int:
        return self._first_line

    @property
    def encoding(self) -> str:
        """Encoding assumed for raw bytes that carry no magic comment."""
        return self._encoding

    @property
    def is_loaded(self) -> bool:
        return self._source is not None

    def read(self, path: str | Path | None = None) -> Buffer:
        """Load the source from `path` (defaults to the buffer name)."""
        p = Path(self._name if path is None else path)
        logger.debug("reading %s into buffer %r", p, self._name)
        self.source = p.read_bytes()
        return self

    @property
    def source(self) -> str:
        if self._source is None:
            raise UninitializedSourceError(name=self._name)
        return self._source

    @source.setter
    def source(self, source: bytes | str) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = reencode(bytes(source), self._encoding)
        self.raw_source = source

    @property
    def raw_source(self) -> str:
        return self.source

    @raw_source.setter
    def raw_source(self, source: str) -> None:
        with self._lock:
            if self._source is not None:
                raise ImmutableBufferError(name=self._name)
            self._source = source.replace("\r\n", "\n")

    def slice(self, begin: int, end: int) -> str:
        return self.source[begin:end]

    def decompose_position(self, position: int) -> tuple[int, int]:
        """Return (line, column) for an offset."""
        index, line_begin = self._line_for(position)
        return self._first_line + index, position - line_begin

    def line_for_position(self, position: int) -> int:
        index, _ = self._line_for(position)
        return self._first_line + index

    def column_for_position(self, position: int) -> int:
        _, line_begin = self._line_for(position)
        return position - line_begin

    def compose_position(self, line: int, column: int) -> int:
        """Return the offset of (line, column); the inverse of decompose_position."""
        begins, lines = self._index()
        index = self._line_index(line, len(begins))
        if not 0 <= column <= len(lines[index]):
            raise PositionOutOfRangeError(
                name=self._name, what="column", value=column, low=0, high=len(lines[index])
            )
        return begins[index] + column

    def source_line(self, line: int) -> str:
        """Text of `line` without its terminator.

        The line just past the last one is always available and empty.
        """
        _, lines = self._index()
        return lines[self._line_index(line, len(lines))]

    @property
    def source_lines(self) -> tuple[str, ...]:
        _, lines = self._index()
        return lines

    @property
    def last_line(self) -> int:
        _, lines = self._index()
        return self._first_line + len(lines) - 1

    def line_range(self, line: int) -> Range:
        """Range covering the text of `line`, terminator excluded."""
        begins, lines = self._index()
        index = self._line_index(line, len(lines))
        begin = begins[index] if index < len(begins) else len(self.source)
        return Range(self, begin, begin + len(lines[index]))

    @property
    def source_range(self) -> Range:
        return Range(self, 0, len(self.source))

    def _line_index(self, line: int, count: int) -> int:
        index = line - self._first_line
        if not 0 <= index < count:
            raise PositionOutOfRangeError(
                name=self._name,
                what="line",
                value=line,
                low=self._first_line,
                high=self._first_line + count - 1,
            )
        return index

    def _line_for(self, position: int) -> tuple[int, int]:
        begins, _ = self._index()
        size = len(self.source)
        if not 0 <= position <= size:
            raise PositionOutOfRangeError(name=self._name, what="offset", value=position, low=0, high=size)
        index = bisect_right(begins, position) - 1
        return index, begins[index]

    def _index(self) -> tuple[tuple[int, ...], tuple[str, ...]]:
        if self._line_begins is None:
            source = self.source
            with self._lock:
                if self._line_begins is None:
                    lines = source.split("\n")
                    # Lexers may emit an EOF token one line past the end.
                    if lines[-1]:
                        lines.append("")
                    self._lines = tuple(lines)
                    self._line_begins = _scan_line_begins(source)
                    logger.debug("indexed %r: %d lines", self._name, len(self._line_begins))
        return self._line_begins, self._lines


def _scan_line_begins(source: str) -> tuple[int, ...]:
    begins = [0]
    i = source.find("\n")
    while i != -1:
        begins.append(i + 1)
        i = source.find("\n", i + 1)
    return tuple(begins)
