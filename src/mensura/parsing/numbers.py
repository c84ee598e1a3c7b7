"""Exact numeric literals found in recipe text.

Each recognizer inspects the start of a :class:`~mensura.parsing.cursor.Cursor`
and either returns a :class:`NumberMatch` or ``None``; the cursor itself is
never modified, so alternatives can be tried one after another.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from ..errors import InfiniteNumberError
from .cursor import Cursor

__all__ = [
    "NUMBER_GRAMMARS",
    "NumberMatch",
    "VULGAR_FRACTIONS",
    "parse_decimal",
    "parse_integer",
    "parse_number",
    "parse_rational",
    "skip_whitespace",
]

_WS = r"[ \t\r\n]*"
_WHITESPACE_RE = re.compile(_WS)
_INTEGER_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(rf"(?P<integer>[0-9]+){_WS}\.{_WS}(?P<fraction>[0-9]+)")
_ASCII_RATIONAL_RE = re.compile(rf"(?P<numerator>[0-9]+){_WS}[/⁄]{_WS}(?P<denominator>[0-9]+)")

VULGAR_FRACTIONS: Mapping[str, Fraction] = MappingProxyType(
    {
        # Latin-1 Supplement
        "¼": Fraction(1, 4),
        "½": Fraction(1, 2),
        "¾": Fraction(3, 4),
        # Number Forms
        "⅐": Fraction(1, 7),
        "⅑": Fraction(1, 9),
        "⅒": Fraction(1, 10),
        "⅓": Fraction(1, 3),
        "⅔": Fraction(2, 3),
        "⅕": Fraction(1, 5),
        "⅖": Fraction(2, 5),
        "⅗": Fraction(3, 5),
        "⅘": Fraction(4, 5),
        "⅙": Fraction(1, 6),
        "⅚": Fraction(5, 6),
        "⅛": Fraction(1, 8),
        "⅜": Fraction(3, 8),
        "⅝": Fraction(5, 8),
        "⅞": Fraction(7, 8),
    }
)

# Characters that extend a numeric literal; a grammar stopping right before
# one of them has only matched part of the number.
_CONTINUATIONS = frozenset("0123456789./⁄") | frozenset(VULGAR_FRACTIONS)


@dataclass(frozen=True)
class NumberMatch:
    """Value of a numeric literal plus the consumed and remaining text."""

    value: Fraction
    consumed: Cursor
    rest: Cursor

    @property
    def raw(self) -> str:
        return self.consumed.text

    @property
    def span(self) -> Tuple[int, int]:
        return self.consumed.range()


NumberGrammar = Callable[[Cursor], Optional[NumberMatch]]


def _matched(cursor: Cursor, length: int, value: Fraction) -> NumberMatch:
    return NumberMatch(value=value, consumed=cursor.take(length), rest=cursor.advance(length))


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Cursor positioned after any leading spaces, tabs or line breaks."""

    match = _WHITESPACE_RE.match(cursor.text)
    return cursor.advance(match.end()) if match else cursor


def parse_integer(cursor: Cursor) -> Optional[NumberMatch]:
    """``12`` → 12."""

    match = _INTEGER_RE.match(cursor.text)
    if match is None:
        return None
    return _matched(cursor, match.end(), Fraction(int(match.group(0))))


def parse_decimal(cursor: Cursor) -> Optional[NumberMatch]:
    """``1.25`` (spaces allowed around the point) → 5/4."""

    match = _DECIMAL_RE.match(cursor.text)
    if match is None:
        return None
    digits = match.group("fraction")
    value = int(match.group("integer")) + Fraction(int(digits), 10 ** len(digits))
    return _matched(cursor, match.end(), value)


def _ascii_rational(cursor: Cursor) -> Optional[NumberMatch]:
    match = _ASCII_RATIONAL_RE.match(cursor.text)
    if match is None:
        return None
    denominator = int(match.group("denominator"))
    if denominator == 0:
        raise InfiniteNumberError(match.group(0))
    return _matched(cursor, match.end(), Fraction(int(match.group("numerator")), denominator))


def _glyph_rational(cursor: Cursor) -> Optional[NumberMatch]:
    value = VULGAR_FRACTIONS.get(cursor.text[:1])
    if value is None:
        return None
    return _matched(cursor, 1, value)


def _simple_rational(cursor: Cursor) -> Optional[NumberMatch]:
    return _ascii_rational(cursor) or _glyph_rational(cursor)


def _mixed_rational(cursor: Cursor) -> Optional[NumberMatch]:
    whole = parse_integer(cursor)
    if whole is None:
        return None
    fraction = _simple_rational(skip_whitespace(whole.rest))
    if fraction is None:
        return None
    length = fraction.rest.char_index - cursor.char_index
    return _matched(cursor, length, whole.value + fraction.value)


def parse_rational(cursor: Cursor) -> Optional[NumberMatch]:
    """``3/4``, ``3⁄4``, ``¾``, or a mixed number such as ``1 3/4`` or ``1¾``.

    Raises :class:`~mensura.errors.InfiniteNumberError` for a zero denominator.
    """

    return _mixed_rational(cursor) or _simple_rational(cursor)


NUMBER_GRAMMARS: Tuple[NumberGrammar, ...] = (parse_integer, parse_decimal, parse_rational)


def _is_complete(match: NumberMatch) -> bool:
    following = skip_whitespace(match.rest).text[:1]
    return following not in _CONTINUATIONS


def parse_number(cursor: Cursor | str) -> Optional[NumberMatch]:
    """Parse the numeric literal at the start of ``cursor``.

    Grammars are tried as integer, decimal, rational; the first one that
    consumes the whole literal wins. ``"3."`` yields ``None`` rather than
    falling back to ``3``.
    """

    cursor = Cursor.of(cursor)
    for grammar in NUMBER_GRAMMARS:
        match = grammar(cursor)
        if match is not None and _is_complete(match):
            return match
    return None
