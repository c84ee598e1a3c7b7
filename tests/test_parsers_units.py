from dataclasses import dataclass
from typing import Tuple

import pytest

from mensura.errors import UnknownUnitError
from mensura.parsing.cursor import Cursor
from mensura.parsing.units import UnitMatch, parse_unit, resolve_unit
from mensura.quantities import Dimension, Unit, UnitlessUnit


@pytest.mark.parametrize(
    "word, expected",
    [
        ("drop", Unit.DROP),
        ("gtt", Unit.DROP),
        ("t", Unit.TEASPOON),
        ("T", Unit.TABLESPOON),
        ("Tb", Unit.TABLESPOON),
        ("tb", Unit.TABLESPOON),
        ("TSP", Unit.TEASPOON),
        ("Tbsp", Unit.TABLESPOON),
        ("c", Unit.CUP),
        ("C", Unit.CUP),
        ("Cups", Unit.CUP),
        ("F", Unit.FAHRENHEIT),
        ("degrees", Unit.FAHRENHEIT),
        ("Celsius", Unit.CELSIUS),
        ("min", Unit.MINUTE),
        ("hours", Unit.HOUR),
    ],
)
def test_resolve_unit(word: str, expected: Unit) -> None:
    assert resolve_unit(word) is expected


def test_unmatched_word_becomes_unitless() -> None:
    unit = resolve_unit("cloves")
    assert unit == UnitlessUnit("cloves")
    assert unit.name == "cloves"
    assert unit.dimension is Dimension.UNITLESS


def test_strict_resolution_raises_unknown_unit() -> None:
    with pytest.raises(UnknownUnitError, match="cloves"):
        resolve_unit("cloves", strict=True)


@dataclass(frozen=True)
class _Spelling:
    label: str
    aliases: Tuple[str, ...]


def test_last_case_insensitive_match_wins() -> None:
    first = _Spelling("first", ("Oz",))
    second = _Spelling("second", ("OZ",))

    assert resolve_unit("oz", [first, second]) is second
    assert resolve_unit("oz", [second, first]) is first
    assert resolve_unit("Oz", [first, second]) is first


def test_exact_match_beats_earlier_case_insensitive_match() -> None:
    assert resolve_unit("c", (Unit.CELSIUS, Unit.CUP)) is Unit.CUP
    assert resolve_unit("c", (Unit.CELSIUS, Unit.FAHRENHEIT)) is Unit.CELSIUS


def test_parse_unit_stops_at_non_letters() -> None:
    match = parse_unit(Cursor("C other", 4))
    assert isinstance(match, UnitMatch)
    assert match.unit is Unit.CUP
    assert match.rest == Cursor(" other", 5)
    assert match.span == (4, 5)


def test_parse_unit_requires_a_letter() -> None:
    assert parse_unit("/4 cup") is None
    assert parse_unit("") is None
    assert parse_unit("°F") is None
