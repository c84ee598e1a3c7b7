"""Human-facing renderings of magnitudes."""
from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Tuple, Union

from .dimension import Dimension
from .magnitude import RangeMagnitude, SingleMagnitude
from .rational import RationalLike, as_fraction, format_fraction
from .units import AnyUnit

__all__ = ["COMMON_FRACTIONS", "Measure", "MultiMeasure", "RangeMeasure", "SingleMeasure", "is_good_value"]

# Values that are whole multiples of these read naturally in a recipe.
COMMON_FRACTIONS: Tuple[Fraction, ...] = (Fraction(1, 8), Fraction(1, 3))


def is_good_value(value: Fraction) -> bool:
    """Non-zero and a whole number or a whole multiple of a common fraction."""

    if value == 0:
        return False
    if value.denominator == 1:
        return True
    return any((value / fraction).denominator == 1 for fraction in COMMON_FRACTIONS)


@dataclass(frozen=True)
class SingleMeasure:
    """One value expressed in one unit."""

    value: Fraction
    unit: AnyUnit

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_fraction(self.value))

    @classmethod
    def from_base(cls, base_value: RationalLike, unit: AnyUnit) -> "SingleMeasure":
        return cls(unit.from_base(base_value), unit)

    @property
    def base_value(self) -> Fraction:
        return self.unit.to_base(self.value)

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    @property
    def main_unit(self) -> AnyUnit:
        return self.unit

    def magnitude(self) -> SingleMagnitude:
        return SingleMagnitude(self.base_value, self.dimension)

    def is_integer(self) -> bool:
        return self.value.denominator == 1

    def is_good(self) -> bool:
        return is_good_value(self.value)

    def format(self, description: bool = False) -> str:
        """Render the value with the unit abbreviation, or its description."""

        if description:
            unit_text = self.unit.description(plural=self.value > 1)
        else:
            unit_text = self.unit.abbreviation
        return f"{format_fraction(self.value)} {unit_text}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class MultiMeasure:
    """Composite rendering such as ``1 C 2 tbsp``; parts sum to one magnitude."""

    measures: Tuple[SingleMeasure, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        measures = tuple(self.measures)
        if not measures:
            raise ValueError("MultiMeasure requires at least one measure")
        dimensions = {measure.dimension for measure in measures}
        if len(dimensions) > 1:
            raise ValueError(f"MultiMeasure parts must share a dimension, got {sorted(d.value for d in dimensions)}")
        object.__setattr__(self, "measures", measures)

    @classmethod
    def of(cls, measures: Iterable[SingleMeasure]) -> "MultiMeasure":
        return cls(tuple(measures))

    @property
    def base_value(self) -> Fraction:
        return sum((measure.base_value for measure in self.measures), Fraction(0))

    @property
    def dimension(self) -> Dimension:
        return self.measures[0].dimension

    @property
    def main_unit(self) -> AnyUnit:
        return self.measures[0].unit

    def magnitude(self) -> SingleMagnitude:
        return SingleMagnitude(self.base_value, self.dimension)

    def is_integer(self) -> bool:
        return False

    def format(self, description: bool = False) -> str:
        return " ".join(measure.format(description) for measure in self.measures)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class RangeMeasure:
    """Two endpoints, e.g. ``10 - 12 min``."""

    from_: SingleMeasure
    to: SingleMeasure

    def __post_init__(self) -> None:
        if self.from_.dimension is not self.to.dimension:
            raise ValueError(
                f"Range endpoints must share a dimension: {self.from_.dimension.value} != {self.to.dimension.value}"
            )

    @classmethod
    def from_base(
        cls,
        from_base_value: RationalLike,
        from_unit: AnyUnit,
        to_base_value: RationalLike,
        to_unit: AnyUnit,
    ) -> "RangeMeasure":
        return cls(SingleMeasure.from_base(from_base_value, from_unit), SingleMeasure.from_base(to_base_value, to_unit))

    @property
    def dimension(self) -> Dimension:
        return self.from_.dimension

    @property
    def main_unit(self) -> AnyUnit:
        return self.from_.unit

    def magnitude(self) -> RangeMagnitude:
        return RangeMagnitude(self.from_.base_value, self.to.base_value, self.dimension)

    def is_integer(self) -> bool:
        return self.from_.is_integer() and self.to.is_integer()

    def format(self, description: bool = False) -> str:
        return f"{self.from_.format(description)} - {self.to.format(description)}"

    def __str__(self) -> str:
        return self.format()


Measure = Union[SingleMeasure, MultiMeasure, RangeMeasure]
