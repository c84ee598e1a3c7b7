"""Recognize one ``<number><unit>`` measurement at a cursor position."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..quantities.magnitude import SingleMagnitude
from ..quantities.measure import SingleMeasure
from .cursor import Cursor, char_slice
from .numbers import NumberGrammar, parse_decimal, parse_integer, parse_rational, skip_whitespace
from .units import parse_unit

__all__ = ["MeasureToken", "TOKEN_GRAMMARS", "parse_token"]

# Integer first: "3/4 tsp" falls through to the rational grammar because the
# integer "3" is not followed by a unit word.
TOKEN_GRAMMARS: Tuple[NumberGrammar, ...] = (parse_integer, parse_decimal, parse_rational)


@dataclass(frozen=True)
class MeasureToken:
    """A measurement found in a document, with document-relative spans."""

    measure: SingleMeasure
    number_range: Tuple[int, int]
    unit_range: Tuple[int, int]
    raw: str

    @property
    def full_range(self) -> Tuple[int, int]:
        return (self.number_range[0], self.unit_range[1])

    @property
    def magnitude(self) -> SingleMagnitude:
        return self.measure.magnitude()

    @property
    def number_text(self) -> str:
        start = self.number_range[0]
        text = char_slice(self.raw, 0, self.number_range[1] - start)
        if text is None:
            raise ValueError(f"number_range {self.number_range} is outside of {self.raw!r}")
        return text

    @property
    def unit_text(self) -> str:
        start = self.number_range[0]
        text = char_slice(self.raw, self.unit_range[0] - start, self.unit_range[1] - start)
        if text is None:
            raise ValueError(f"unit_range {self.unit_range} is outside of {self.raw!r}")
        return text

    def __repr__(self) -> str:
        return f"[{self.number_range}-{self.unit_range}): {self.measure.format(description=True)} @ {self.raw!r}"


def parse_token(cursor: Cursor | str) -> Optional[MeasureToken]:
    """Parse a measurement at the start of ``cursor``.

    Returns ``None`` when no grammar yields a number followed by a unit word.
    :class:`~mensura.errors.InfiniteNumberError` propagates to the caller.
    """

    cursor = Cursor.of(cursor)
    for grammar in TOKEN_GRAMMARS:
        number = grammar(cursor)
        if number is None:
            continue
        unit = parse_unit(skip_whitespace(number.rest))
        if unit is None:
            continue
        return MeasureToken(
            measure=SingleMeasure(number.value, unit.unit),
            number_range=number.consumed.range(),
            unit_range=unit.consumed.range(),
            raw=cursor.until(unit.rest).text,
        )
    return None
