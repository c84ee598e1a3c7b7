"""Exact rational helpers shared by the quantity model."""
from __future__ import annotations

from fractions import Fraction
from numbers import Rational
from typing import Tuple, Union

__all__ = ["RationalLike", "as_fraction", "format_fraction", "mixed_parts"]

RationalLike = Union[Fraction, int, str, Tuple[int, int]]


def as_fraction(value: RationalLike) -> Fraction:
    """Coerce ``value`` into a :class:`~fractions.Fraction`.

    Floats are rejected: their binary representation would leak rounding
    error into every conversion derived from them.
    """

    if isinstance(value, bool):
        raise TypeError("Booleans are not valid quantities")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, float):
        raise TypeError(f"Refusing to build an exact quantity from float {value!r}; pass a str or Fraction")
    if isinstance(value, (int, Rational)):
        return Fraction(value)
    if isinstance(value, tuple):
        if len(value) != 2:
            raise ValueError(f"Rational tuples need exactly two items, got {value!r}")
        numerator, denominator = value
        return Fraction(numerator, denominator)
    if isinstance(value, str):
        return Fraction(value.strip())
    raise TypeError(f"Unsupported rational value: {value!r}")


def mixed_parts(value: Fraction) -> Tuple[int, Fraction]:
    """Split ``value`` into a whole part (truncated toward zero) and a remainder."""

    whole = int(value)
    return whole, value - whole


def format_fraction(value: Fraction) -> str:
    """Render ``value`` as ``n``, ``w n/d`` or ``n/d``."""

    if value.denominator == 1:
        return str(value.numerator)
    if value > 1:
        whole, remainder = mixed_parts(value)
        return f"{whole} {remainder.numerator}/{remainder.denominator}"
    return f"{value.numerator}/{value.denominator}"
