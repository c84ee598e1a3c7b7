"""Resolve unit words such as ``tsp`` or ``Cups`` against the unit table."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..errors import UnknownUnitError
from ..quantities.units import UNITFUL_UNITS, AnyUnit, Unit, UnitlessUnit
from .cursor import Cursor

__all__ = ["UnitMatch", "parse_unit", "resolve_unit"]

_WORD_PATTERN = re.compile(r"[A-Za-z]+")


def resolve_unit(word: str, units: Optional[Iterable[Unit]] = None, *, strict: bool = False) -> AnyUnit:
    """Return the unit ``word`` refers to.

    An exact, case-sensitive alias match wins immediately, which keeps ``t``
    (teaspoon) and ``T`` (tablespoon) apart. Otherwise the *last*
    case-insensitive match in table order is used. A word matching nothing
    becomes a :class:`UnitlessUnit` named after it, unless ``strict`` is set,
    in which case :class:`~mensura.errors.UnknownUnitError` is raised.
    """

    table = UNITFUL_UNITS if units is None else units
    folded = word.lower()
    secondary: Optional[Unit] = None
    for unit in table:
        for alias in unit.aliases:
            if word == alias:
                return unit
            if folded == alias.lower():
                secondary = unit

    if secondary is not None:
        return secondary
    if strict:
        raise UnknownUnitError(word)
    return UnitlessUnit(word)


@dataclass(frozen=True)
class UnitMatch:
    """Unit word located at the start of a cursor."""

    unit: AnyUnit
    consumed: Cursor
    rest: Cursor

    @property
    def raw(self) -> str:
        return self.consumed.text

    @property
    def span(self) -> Tuple[int, int]:
        return self.consumed.range()


def parse_unit(cursor: Cursor | str, *, strict: bool = False) -> Optional[UnitMatch]:
    """Resolve the run of ASCII letters at the start of ``cursor``."""

    cursor = Cursor.of(cursor)
    match = _WORD_PATTERN.match(cursor.text)
    if match is None:
        return None
    length = match.end()
    unit = resolve_unit(match.group(0), strict=strict)
    return UnitMatch(unit=unit, consumed=cursor.take(length), rest=cursor.advance(length))
