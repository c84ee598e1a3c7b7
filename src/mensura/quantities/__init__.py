"""Dimension, unit, magnitude and measure model built on exact rationals."""

from .best import best_measure, best_measures, best_rendering
from .dimension import Dimension
from .magnitude import Magnitude, RangeMagnitude, SingleMagnitude
from .measure import COMMON_FRACTIONS, Measure, MultiMeasure, RangeMeasure, SingleMeasure, is_good_value
from .rational import as_fraction, format_fraction
from .units import (
    COMMON_UNITS,
    DIMENSION_UNITS,
    UNITFUL_UNITS,
    AnyUnit,
    Unit,
    UnitlessUnit,
    lookup_unit,
)

__all__ = [
    "AnyUnit",
    "COMMON_FRACTIONS",
    "COMMON_UNITS",
    "DIMENSION_UNITS",
    "Dimension",
    "Magnitude",
    "Measure",
    "MultiMeasure",
    "RangeMagnitude",
    "RangeMeasure",
    "SingleMagnitude",
    "SingleMeasure",
    "UNITFUL_UNITS",
    "Unit",
    "UnitlessUnit",
    "as_fraction",
    "best_measure",
    "best_measures",
    "best_rendering",
    "format_fraction",
    "is_good_value",
    "lookup_unit",
]
