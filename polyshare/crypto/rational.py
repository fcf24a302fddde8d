"""Exact rational numbers.

Values are ``fractions.Fraction`` instances, which are reduced on every
construction: gcd(|num|, den) == 1 and the sign lives on the numerator.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Union

from polyshare.errors import FieldMismatch

RationalLike = Union[int, Fraction]


def to_rational(value: RationalLike) -> Fraction:
    """Convert an integer to a rational; rationals are returned unchanged."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldMismatch(f"Cannot build a rational from {type(value).__name__}")
    return Fraction(value)


def to_simple_string(value: Fraction) -> str:
    """Render ``n/d``, or just ``n`` when the denominator is one."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def is_integral(value: Fraction) -> bool:
    return value.denominator == 1
