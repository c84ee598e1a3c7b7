"""Fold a whole document into measurement tokens and plain-text runs."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterator, List, Optional, Tuple, Union

from ..errors import ParseError
from ..quantities.best import best_rendering
from ..quantities.magnitude import SingleMagnitude
from ..quantities.measure import Measure
from ..quantities.rational import RationalLike, as_fraction
from .cursor import Cursor
from .tokens import MeasureToken, parse_token

__all__ = ["Document", "TextSegment", "iter_tokens", "parse_document"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextSegment:
    """Run of text that holds no measurement."""

    text: str
    range: Tuple[int, int]


Segment = Union[TextSegment, MeasureToken]


@dataclass(frozen=True)
class Document:
    """Measurements of ``raw`` in reading order."""

    raw: str
    tokens: Tuple[MeasureToken, ...] = field(default_factory=tuple)
    char_index: int = 0

    def segments(self) -> List[Segment]:
        """Tokens interleaved with the text between them; joins back to ``raw``."""

        segments: List[Segment] = []
        position = self.char_index
        for token in self.tokens:
            start, end = token.full_range
            if start > position:
                segments.append(self._text(position, start))
            segments.append(token)
            position = end
        document_end = self.char_index + len(self.raw)
        if position < document_end:
            segments.append(self._text(position, document_end))
        return segments

    def _text(self, start: int, end: int) -> TextSegment:
        offset = self.char_index
        return TextSegment(self.raw[start - offset : end - offset], (start, end))

    def scale(self, factor: RationalLike) -> List[SingleMagnitude]:
        """Magnitudes of the tokens multiplied by ``factor``.

        Readings such as oven temperatures are returned unscaled.
        """

        factor = as_fraction(factor)
        return [_scaled(token, factor) for token in self.tokens]

    def render(self, scale: RationalLike = 1, *, best: bool = False, description: bool = False) -> str:
        """Rebuild the text with every measurement scaled by ``scale``.

        With ``best`` each measurement is rewritten in its most natural unit,
        keeping the original unit when no better rendering exists. Readings
        such as ``350 degrees`` are copied as written.
        """

        factor = as_fraction(scale)
        parts: List[str] = []
        for segment in self.segments():
            if isinstance(segment, TextSegment):
                parts.append(segment.text)
            elif segment.measure.dimension.is_reading:
                parts.append(segment.raw)
            else:
                parts.append(_render_token(segment, factor, best=best).format(description))
        return "".join(parts)


def _scaled(token: MeasureToken, factor: Fraction) -> SingleMagnitude:
    if token.measure.dimension.is_reading:
        return token.magnitude
    return token.magnitude.scale(factor)


def _render_token(token: MeasureToken, factor: Fraction, *, best: bool) -> Measure:
    measure = _scaled(token, factor).measure(token.measure.unit)
    if best:
        chosen: Optional[Measure] = best_rendering(measure)
        if chosen is not None:
            return chosen
    return measure


def iter_tokens(text: Union[Cursor, str]) -> Iterator[MeasureToken]:
    """Yield every measurement in ``text``.

    Positions where no token parses, or where a token fails with a
    :class:`~mensura.errors.ParseError`, are skipped one character at a time.
    """

    cursor = Cursor.of(text)
    while cursor.text:
        try:
            token = parse_token(cursor)
        except ParseError as exc:
            LOGGER.debug("Skipping malformed measurement at %d: %s", cursor.char_index, exc)
            token = None
        if token is None:
            cursor = cursor.advance(1)
            continue
        yield token
        cursor = cursor.advance(len(token.raw))


def parse_document(text: Union[Cursor, str]) -> Document:
    """Parse every measurement of ``text`` into a :class:`Document`."""

    cursor = Cursor.of(text)
    tokens = tuple(iter_tokens(cursor))
    LOGGER.debug("Parsed %d measurements from %d characters", len(tokens), len(cursor))
    return Document(raw=cursor.text, tokens=tokens, char_index=cursor.char_index)
