"""Static unit tables.

Every unit carries an exact multiple expressing how many base units of its
dimension equal one of it. Volume is based on the drop (96 per teaspoon),
time on the second. Temperature units share a multiple of one: scales with an
offset are not modelled, so Fahrenheit and Celsius readings are recorded as
written and never converted into each other. The Celsius abbreviation ``C``
reads back as a cup, so documents copy temperature readings verbatim instead
of re-rendering them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple, Union

from .dimension import Dimension
from .rational import RationalLike, as_fraction

__all__ = [
    "AnyUnit",
    "COMMON_UNITS",
    "DIMENSION_UNITS",
    "TEMPERATURE_UNITS",
    "TIME_UNITS",
    "UNITFUL_UNITS",
    "Unit",
    "UnitlessUnit",
    "VOLUME_UNITS",
    "lookup_unit",
]


class Unit(Enum):
    """Known units: (singular, plural, extra aliases, abbreviation, multiple, dimension)."""

    # Volume
    DROP = ("drop", "drops", ("gt", "gtt"), "dr", 1, Dimension.VOLUME)
    SMIDGEN = ("smidgen", "smidgens", ("smi",), "smdg", 3, Dimension.VOLUME)
    PINCH = ("pinch", "pinches", (), "pn", 6, Dimension.VOLUME)
    DASH = ("dash", "dashes", (), "ds", 12, Dimension.VOLUME)
    TEASPOON = ("teaspoon", "teaspoons", ("t",), "tsp", 96, Dimension.VOLUME)
    TABLESPOON = ("tablespoon", "tablespoons", ("Tb", "T"), "tbsp", 288, Dimension.VOLUME)
    CUP = ("cup", "cups", ("c",), "C", 4_608, Dimension.VOLUME)
    PINT = ("pint", "pints", (), "pt", 9_216, Dimension.VOLUME)
    QUART = ("quart", "quarts", (), "qt", 18_432, Dimension.VOLUME)
    GALLON = ("gallon", "gallons", (), "gal", 73_728, Dimension.VOLUME)
    # Temperature; we target US recipes so "degrees" means Fahrenheit
    FAHRENHEIT = ("fahrenheit", "fahrenheit", ("degrees", "°F"), "F", 1, Dimension.TEMPERATURE)
    CELSIUS = ("celsius", "celsius", ("°C",), "C", 1, Dimension.TEMPERATURE)
    # Time
    SECOND = ("second", "seconds", (), "sec", 1, Dimension.TIME)
    MINUTE = ("minute", "minutes", (), "min", 60, Dimension.TIME)
    HOUR = ("hour", "hours", (), "hr", 3_600, Dimension.TIME)

    def __init__(
        self,
        singular: str,
        plural: str,
        extra_aliases: Tuple[str, ...],
        abbreviation: str,
        multiple: int,
        dimension: Dimension,
    ) -> None:
        self.singular = singular
        self.plural = plural
        self.abbreviation = abbreviation
        self.multiple = Fraction(multiple)
        self.dimension = dimension
        self.aliases: Tuple[str, ...] = (singular, plural, *extra_aliases, abbreviation)

    def __str__(self) -> str:
        return self.abbreviation

    def description(self, plural: bool = False) -> str:
        return self.plural if plural else self.singular

    @property
    def is_common(self) -> bool:
        return self in COMMON_UNITS

    def to_base(self, value: RationalLike) -> Fraction:
        return as_fraction(value) * self.multiple

    def from_base(self, base_value: RationalLike) -> Fraction:
        return as_fraction(base_value) / self.multiple


@dataclass(frozen=True)
class UnitlessUnit:
    """Bespoke counting unit such as ``cloves`` or ``times``."""

    name: str

    aliases = ()
    multiple = Fraction(1)
    dimension = Dimension.UNITLESS
    is_common = False

    def __str__(self) -> str:
        return self.name

    @property
    def abbreviation(self) -> str:
        return self.name

    def description(self, plural: bool = False) -> str:
        return self.name

    def to_base(self, value: RationalLike) -> Fraction:
        return as_fraction(value)

    def from_base(self, base_value: RationalLike) -> Fraction:
        return as_fraction(base_value)


AnyUnit = Union[Unit, UnitlessUnit]

VOLUME_UNITS: Tuple[Unit, ...] = (
    Unit.DROP,
    Unit.SMIDGEN,
    Unit.PINCH,
    Unit.DASH,
    Unit.TEASPOON,
    Unit.TABLESPOON,
    Unit.CUP,
    Unit.PINT,
    Unit.QUART,
    Unit.GALLON,
)
TEMPERATURE_UNITS: Tuple[Unit, ...] = (Unit.FAHRENHEIT, Unit.CELSIUS)
TIME_UNITS: Tuple[Unit, ...] = (Unit.SECOND, Unit.MINUTE, Unit.HOUR)

# Scan order of the alias resolver.
UNITFUL_UNITS: Tuple[Unit, ...] = VOLUME_UNITS + TEMPERATURE_UNITS + TIME_UNITS

DIMENSION_UNITS: Mapping[Dimension, Tuple[Unit, ...]] = MappingProxyType(
    {
        Dimension.VOLUME: VOLUME_UNITS,
        Dimension.TEMPERATURE: TEMPERATURE_UNITS,
        Dimension.TIME: TIME_UNITS,
        Dimension.UNITLESS: (),
    }
)

COMMON_UNITS: FrozenSet[Unit] = frozenset(
    {Unit.TEASPOON, Unit.TABLESPOON, Unit.CUP, Unit.MINUTE, Unit.HOUR}
)

_UNITS_BY_NAME: Mapping[str, Unit] = MappingProxyType({unit.name.lower(): unit for unit in Unit})


def lookup_unit(name: str, dimension: Dimension | str | None = None) -> AnyUnit:
    """Return the unit registered as ``name`` (e.g. ``"teaspoon"``).

    Any name paired with the ``unitless`` dimension produces a
    :class:`UnitlessUnit` carrying that name.
    """

    if dimension is not None and Dimension(dimension) is Dimension.UNITLESS:
        return UnitlessUnit(name)
    try:
        return _UNITS_BY_NAME[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown unit name: {name!r}") from exc
