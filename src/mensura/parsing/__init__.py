"""Parser primitives for measurements embedded in text."""

from .cursor import Cursor, char_index_for_byte, char_slice
from .document import Document, TextSegment, iter_tokens, parse_document
from .numbers import (
    VULGAR_FRACTIONS,
    NumberMatch,
    parse_decimal,
    parse_integer,
    parse_number,
    parse_rational,
)
from .tokens import MeasureToken, parse_token
from .units import UnitMatch, parse_unit, resolve_unit

__all__ = [
    "Cursor",
    "Document",
    "MeasureToken",
    "NumberMatch",
    "TextSegment",
    "UnitMatch",
    "VULGAR_FRACTIONS",
    "char_index_for_byte",
    "char_slice",
    "iter_tokens",
    "parse_decimal",
    "parse_document",
    "parse_integer",
    "parse_number",
    "parse_rational",
    "parse_token",
    "parse_unit",
    "resolve_unit",
]
