from fractions import Fraction

import pytest

from mensura.quantities import (
    Dimension,
    Magnitude,
    RangeMagnitude,
    RangeMeasure,
    SingleMagnitude,
    SingleMeasure,
    Unit,
    UnitlessUnit,
)


def test_single_magnitude_is_stored_in_base_units() -> None:
    magnitude = Magnitude.single(Fraction(3, 4), Unit.TEASPOON)

    assert magnitude == SingleMagnitude(72, Dimension.VOLUME)
    assert magnitude.measure(Unit.DROP) == SingleMeasure(72, Unit.DROP)
    assert magnitude.measure(Unit.TABLESPOON) == SingleMeasure(Fraction(1, 4), Unit.TABLESPOON)


def test_measure_rejects_other_dimensions() -> None:
    with pytest.raises(ValueError, match="volume"):
        Magnitude.single(1, Unit.CUP).measure(Unit.MINUTE)
    with pytest.raises(ValueError):
        Magnitude.single(3, UnitlessUnit("cloves")).measure(Unit.CUP)


def test_scaling_is_exact() -> None:
    magnitude = Magnitude.single(1, Unit.CUP)

    assert magnitude * 3 == Magnitude.single(3, Unit.CUP)
    assert Fraction(1, 3) * magnitude == Magnitude.single(Fraction(16, 3), Unit.TABLESPOON)
    assert magnitude.scale("1.5").measure(Unit.CUP) == SingleMeasure(Fraction(3, 2), Unit.CUP)
    with pytest.raises(TypeError):
        magnitude * 0.5


def test_adding_magnitudes() -> None:
    total = Magnitude.single(1, Unit.CUP) + Magnitude.single(2, Unit.TABLESPOON)
    assert total.measure(Unit.TABLESPOON) == SingleMeasure(18, Unit.TABLESPOON)
    with pytest.raises(ValueError):
        Magnitude.single(1, Unit.CUP) + Magnitude.single(1, Unit.HOUR)


def test_range_magnitude() -> None:
    magnitude = Magnitude.range(10, Unit.MINUTE, 1, Unit.HOUR)

    assert magnitude == RangeMagnitude(600, 3600, Dimension.TIME)
    assert magnitude.measure(Unit.MINUTE) == RangeMeasure(SingleMeasure(10, Unit.MINUTE), SingleMeasure(60, Unit.MINUTE))
    assert magnitude * 2 == Magnitude.range(20, Unit.MINUTE, 120, Unit.MINUTE)
    assert Magnitude.range(1, Unit.CUP, 2) == RangeMagnitude(4608, 9216, Dimension.VOLUME)
    with pytest.raises(ValueError):
        Magnitude.range(1, Unit.CUP, 2, Unit.HOUR)


def test_unitless_magnitude_counts() -> None:
    cloves = UnitlessUnit("cloves")
    magnitude = Magnitude.single(2, cloves) * 3
    assert magnitude.dimension is Dimension.UNITLESS
    assert magnitude.measure(cloves) == SingleMeasure(6, cloves)


def test_magnitude_base_class_is_abstract() -> None:
    with pytest.raises(TypeError):
        Magnitude()
