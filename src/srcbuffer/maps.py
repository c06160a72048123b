from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import TypeVar

from .ranges import Range


M = TypeVar("M", bound="Map")


class Map:
    """Source map of a syntax node: where it is, and where its parts are.

    Subclasses are frozen dataclasses with an `expression` field covering
    the whole node plus one optional Range per token of interest.
    """

    __slots__ = ()

    expression: Range

    @property
    def line(self) -> int:
        return self.expression.line

    @property
    def column(self) -> int:
        return self.expression.column

    @property
    def last_line(self) -> int:
        return self.expression.last_line

    @property
    def last_column(self) -> int:
        return self.expression.last_column

    def with_expression(self: M, expression: Range) -> M:
        return replace(self, expression=expression)

    def to_dict(self) -> dict[str, Range]:
        """Attached ranges by name; parts that are absent are left out."""
        out: dict[str, Range] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = value
        return out


@dataclass(frozen=True, slots=True)
class Argument(Map):
    """Map of a formal argument: its name and, for `a = 1`, the `=`."""

    name: Range
    expression: Range = None  # type: ignore[assignment]
    operator: Range | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if self.expression is None:
            object.__setattr__(self, "expression", self.name)

    def with_operator(self, operator: Range) -> Argument:
        return replace(self, operator=operator)
