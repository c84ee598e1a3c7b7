"""Exact quantities expressed in the base unit of their dimension.

Two magnitudes are equal when their base values and dimension match, no
matter which unit they were written in; this is what makes ``1 C`` and
``16 tbsp`` the same amount.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import TYPE_CHECKING, List, Optional

from .dimension import Dimension
from .rational import RationalLike, as_fraction
from .units import AnyUnit

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .measure import Measure

__all__ = ["Magnitude", "RangeMagnitude", "SingleMagnitude"]


def _check_dimension(dimension: Dimension, unit: AnyUnit) -> None:
    if unit.dimension is not dimension:
        raise ValueError(f"Cannot express a {dimension.value} magnitude in {unit.dimension.value} unit '{unit}'")


class Magnitude(ABC):
    """Common entry points for single and range magnitudes."""

    dimension: Dimension

    @staticmethod
    def single(value: RationalLike, unit: AnyUnit) -> "SingleMagnitude":
        """Magnitude of ``value`` written in ``unit``."""

        return SingleMagnitude(unit.to_base(value), unit.dimension)

    @staticmethod
    def range(
        from_value: RationalLike,
        from_unit: AnyUnit,
        to_value: RationalLike,
        to_unit: Optional[AnyUnit] = None,
    ) -> "RangeMagnitude":
        """Magnitude spanning two endpoints, each converted independently."""

        to_unit = from_unit if to_unit is None else to_unit
        _check_dimension(from_unit.dimension, to_unit)
        return RangeMagnitude(from_unit.to_base(from_value), to_unit.to_base(to_value), from_unit.dimension)

    @abstractmethod
    def measure(self, unit: AnyUnit) -> "Measure":
        """Render the magnitude in ``unit`` of the same dimension."""

    @abstractmethod
    def scale(self, factor: RationalLike) -> "Magnitude":
        """New magnitude multiplied by an exact ``factor``."""

    def __mul__(self, factor: RationalLike) -> "Magnitude":
        try:
            return self.scale(factor)
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def best_measures(self) -> List["Measure"]:
        from .best import best_measures

        return best_measures(self)

    def best_measure(self) -> Optional["Measure"]:
        from .best import best_measure

        return best_measure(self)


@dataclass(frozen=True)
class SingleMagnitude(Magnitude):
    base_value: Fraction
    dimension: Dimension

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_value", as_fraction(self.base_value))
        object.__setattr__(self, "dimension", Dimension(self.dimension))

    def measure(self, unit: AnyUnit) -> "Measure":
        from .measure import SingleMeasure

        _check_dimension(self.dimension, unit)
        return SingleMeasure.from_base(self.base_value, unit)

    def scale(self, factor: RationalLike) -> "SingleMagnitude":
        return SingleMagnitude(self.base_value * as_fraction(factor), self.dimension)

    def __add__(self, other: object) -> "SingleMagnitude":
        if not isinstance(other, SingleMagnitude):
            return NotImplemented
        if other.dimension is not self.dimension:
            raise ValueError(f"Cannot add {other.dimension.value} to {self.dimension.value}")
        return SingleMagnitude(self.base_value + other.base_value, self.dimension)


@dataclass(frozen=True)
class RangeMagnitude(Magnitude):
    from_base_value: Fraction
    to_base_value: Fraction
    dimension: Dimension

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_base_value", as_fraction(self.from_base_value))
        object.__setattr__(self, "to_base_value", as_fraction(self.to_base_value))
        object.__setattr__(self, "dimension", Dimension(self.dimension))

    def measure(self, unit: AnyUnit) -> "Measure":
        from .measure import RangeMeasure

        _check_dimension(self.dimension, unit)
        return RangeMeasure.from_base(self.from_base_value, unit, self.to_base_value, unit)

    def scale(self, factor: RationalLike) -> "RangeMagnitude":
        factor = as_fraction(factor)
        return RangeMagnitude(self.from_base_value * factor, self.to_base_value * factor, self.dimension)
