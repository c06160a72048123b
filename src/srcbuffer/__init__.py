from __future__ import annotations

from .buffer import Buffer
from .encoding import BINARY, recognize_encoding, reencode, resolve_encoding
from .errors import (
    ImmutableBufferError,
    InvalidByteSequenceError,
    PositionOutOfRangeError,
    SourceError,
    UninitializedSourceError,
    UnresolvableEncodingError,
)
from .maps import Argument, Map
from .ranges import Range
from .spans import Position, Span

__all__ = [
    "Argument",
    "BINARY",
    "Buffer",
    "ImmutableBufferError",
    "InvalidByteSequenceError",
    "Map",
    "Position",
    "PositionOutOfRangeError",
    "Range",
    "SourceError",
    "Span",
    "UninitializedSourceError",
    "UnresolvableEncodingError",
    "recognize_encoding",
    "reencode",
    "resolve_encoding",
]
