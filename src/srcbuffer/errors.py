from __future__ import annotations

from dataclasses import dataclass


class SourceError(Exception):
    """Base class for every error raised by srcbuffer."""


@dataclass(slots=True)
class UninitializedSourceError(SourceError):
    name: str

    def __str__(self) -> str:
        return f"{self.name}: cannot extract source from an uninitialized buffer"


@dataclass(slots=True)
class ImmutableBufferError(SourceError):
    name: str

    def __str__(self) -> str:
        return f"{self.name}: buffer is immutable, source is already set"


@dataclass(slots=True)
class UnresolvableEncodingError(SourceError):
    encoding: str

    def __str__(self) -> str:
        return f"unknown encoding name: {self.encoding!r}"


@dataclass(slots=True)
class InvalidByteSequenceError(SourceError):
    encoding: str
    reason: str

    def __str__(self) -> str:
        return f"invalid byte sequence for {self.encoding}: {self.reason}"


@dataclass(slots=True)
class PositionOutOfRangeError(SourceError):
    name: str
    what: str
    value: int
    low: int
    high: int

    def __str__(self) -> str:
        return f"{self.name}: {self.what} {self.value} is outside {self.low}..{self.high}"
