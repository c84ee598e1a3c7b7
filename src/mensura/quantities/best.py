"""Pick the most natural way to write a magnitude.

Candidates are built per unit of the magnitude's dimension, smallest unit
first. A unit yields a candidate when the magnitude reads as a "good" value in
it (see :func:`~mensura.quantities.measure.is_good_value`), or when it splits
into a whole number of that unit plus a good remainder in one smaller unit
(``4 pt 1/3 C``). Once a whole number of a common unit exists, the smaller
renderings before it are discarded.
"""
from __future__ import annotations

import logging
from fractions import Fraction
from typing import List, Optional, Sequence

from .magnitude import Magnitude, SingleMagnitude
from .measure import Measure, MultiMeasure, SingleMeasure, is_good_value
from .rational import mixed_parts
from .units import Unit

__all__ = ["best_measure", "best_measures", "best_rendering"]

LOGGER = logging.getLogger(__name__)


def _split(base_value: Fraction, unit: Unit, smaller_units: Sequence[Unit]) -> Optional[MultiMeasure]:
    whole, _ = mixed_parts(unit.from_base(base_value))
    main = SingleMeasure(Fraction(whole), unit)
    if not main.is_good():
        return None
    remainder = base_value - main.base_value
    for sub_unit in reversed(smaller_units):
        sub = SingleMeasure.from_base(remainder, sub_unit)
        if sub.is_good():
            return MultiMeasure((main, sub))
    return None


def best_measures(magnitude: Magnitude) -> List[Measure]:
    """Candidate renderings of ``magnitude``, smallest unit first.

    Range magnitudes and dimensions without units (bespoke unitless counts)
    have no candidates.
    """

    if not isinstance(magnitude, SingleMagnitude):
        return []

    units = magnitude.dimension.units
    candidates: List[Measure] = []
    for index, unit in enumerate(units):
        measure = SingleMeasure.from_base(magnitude.base_value, unit)
        if measure.is_good():
            candidates.append(measure)
            continue
        composite = _split(magnitude.base_value, unit, units[:index])
        if composite is not None:
            candidates.append(composite)

    for index in range(len(candidates) - 1, -1, -1):
        candidate = candidates[index]
        if candidate.is_integer() and candidate.main_unit.is_common:
            if index:
                LOGGER.debug("Dropping %d renderings smaller than %s", index, candidate)
            candidates = candidates[index:]
            break

    return candidates


def best_rendering(measure: SingleMeasure) -> Optional[Measure]:
    """Best measure for a value written in a known unit.

    Readings such as oven temperatures keep the unit they were written in,
    so ``None`` is returned for them.
    """

    if measure.dimension.is_reading:
        return None
    return best_measure(measure.magnitude())


def best_measure(magnitude: Magnitude) -> Optional[Measure]:
    """The largest candidate in a common unit, else the smallest candidate."""

    candidates = best_measures(magnitude)
    for candidate in reversed(candidates):
        if candidate.main_unit.is_common:
            return candidate
    return candidates[0] if candidates else None
