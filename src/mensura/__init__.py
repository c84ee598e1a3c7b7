"""mensura: exact measurement extraction and conversion for recipe text."""

from ._version import __version__
from .errors import InfiniteNumberError, ParseError, UnknownUnitError
from .parsing import Cursor, Document, MeasureToken, parse_document, parse_token
from .quantities import (
    Dimension,
    Magnitude,
    Measure,
    MultiMeasure,
    RangeMagnitude,
    RangeMeasure,
    SingleMagnitude,
    SingleMeasure,
    Unit,
    UnitlessUnit,
)

__all__ = [
    "__version__",
    "Cursor",
    "Dimension",
    "Document",
    "InfiniteNumberError",
    "Magnitude",
    "Measure",
    "MeasureToken",
    "MultiMeasure",
    "ParseError",
    "RangeMagnitude",
    "RangeMeasure",
    "SingleMagnitude",
    "SingleMeasure",
    "Unit",
    "UnitlessUnit",
    "UnknownUnitError",
    "parse_document",
    "parse_token",
]
