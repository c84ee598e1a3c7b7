from fractions import Fraction

from mensura.quantities import (
    Dimension,
    Magnitude,
    MultiMeasure,
    SingleMeasure,
    Unit,
    UnitlessUnit,
    best_measure,
    best_measures,
    best_rendering,
)


def _single(value, unit):
    return SingleMeasure(Fraction(value), unit)


def test_best_measures_for_400_teaspoons() -> None:
    magnitude = Magnitude.single(400, Unit.TEASPOON)

    assert best_measures(magnitude) == [
        _single(400, Unit.TEASPOON),
        _single(Fraction(400, 3), Unit.TABLESPOON),
        _single(Fraction(25, 3), Unit.CUP),
        MultiMeasure((_single(4, Unit.PINT), _single(Fraction(1, 3), Unit.CUP))),
        MultiMeasure((_single(2, Unit.QUART), _single(Fraction(1, 3), Unit.CUP))),
    ]
    assert best_measure(magnitude) == _single(Fraction(25, 3), Unit.CUP)
    assert str(magnitude.best_measure()) == "8 1/3 C"


def test_candidates_start_at_the_last_whole_common_unit() -> None:
    magnitude = Magnitude.single(2, Unit.CUP)

    assert best_measures(magnitude) == [
        _single(2, Unit.CUP),
        _single(1, Unit.PINT),
        _single(Fraction(1, 2), Unit.QUART),
        _single(Fraction(1, 8), Unit.GALLON),
    ]
    assert best_measure(magnitude) == _single(2, Unit.CUP)


def test_best_time_measure() -> None:
    magnitude = Magnitude.single(90, Unit.MINUTE)

    assert best_measures(magnitude) == [_single(90, Unit.MINUTE), _single(Fraction(3, 2), Unit.HOUR)]
    assert str(best_measure(magnitude)) == "1 1/2 hr"


def test_every_candidate_keeps_the_magnitude() -> None:
    magnitude = Magnitude.single(Fraction(7, 3), Unit.CUP)
    candidates = best_measures(magnitude)

    assert candidates
    assert all(candidate.magnitude() == magnitude for candidate in candidates)


def test_no_good_rendering() -> None:
    magnitude = Magnitude.single(Fraction(1, 5), Unit.TEASPOON)
    assert best_measures(magnitude) == []
    assert best_measure(magnitude) is None


def test_unitless_and_range_magnitudes_have_no_candidates() -> None:
    assert best_measures(Magnitude.single(3, UnitlessUnit("cloves"))) == []
    assert best_measure(Magnitude.single(3, UnitlessUnit("cloves"))) is None
    assert best_measures(Magnitude.range(1, Unit.CUP, 2)) == []


def test_accumulated_teaspoons_drop_smaller_units() -> None:
    total = sum((Magnitude.single(1, Unit.TEASPOON) for _ in range(400)), Magnitude.single(0, Unit.TEASPOON))
    units = [candidate.main_unit for candidate in total.best_measures()]

    assert total == Magnitude.single(400, Unit.TEASPOON)
    assert Unit.DROP not in units
    assert Unit.PINCH not in units
    assert units[0] is Unit.TEASPOON


def test_best_rendering_keeps_temperature_scales() -> None:
    assert Dimension.TEMPERATURE.is_reading
    assert not Dimension.VOLUME.is_reading
    assert best_rendering(_single(180, Unit.CELSIUS)) is None
    assert best_rendering(_single(350, Unit.FAHRENHEIT)) is None
    assert best_rendering(_single(2, Unit.CUP)) == _single(2, Unit.CUP)
