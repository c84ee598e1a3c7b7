"""Families of mutually convertible units."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .units import Unit

__all__ = ["Dimension"]


class Dimension(str, Enum):
    """Physical dimension shared by a group of units."""

    VOLUME = "volume"
    TEMPERATURE = "temperature"
    TIME = "time"
    UNITLESS = "unitless"

    @property
    def is_reading(self) -> bool:
        """Values are readings on a scale: never multiplied or re-expressed."""

        return self is Dimension.TEMPERATURE

    @property
    def units(self) -> Tuple["Unit", ...]:
        """Units of the dimension, smallest multiple first."""

        from .units import DIMENSION_UNITS

        return DIMENSION_UNITS[self]

    @property
    def common_units(self) -> FrozenSet["Unit"]:
        """Units preferred for human-facing display."""

        from .units import COMMON_UNITS

        return frozenset(unit for unit in self.units if unit in COMMON_UNITS)
