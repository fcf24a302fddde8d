"""Lagrange interpolation over an arbitrary ``Field``.

``interpolate`` rebuilds the unique polynomial of degree <= n-1 through
n points.  ``lagrange_at`` evaluates that polynomial at a single
abscissa without building it, which is all secret reconstruction needs:

    f(t) = sum_i y_i * prod_{j != i} (t - x_j) / (x_i - x_j)
"""

from __future__ import annotations

from typing import List, Sequence

from polyshare.crypto.field import RATIONALS, Field
from polyshare.crypto.point import Point
from polyshare.crypto.polynomial import Polynomial
from polyshare.errors import DuplicateAbscissa, EmptyShareSet


def _validate(points: Sequence, field: Field) -> List[Point]:
    """Coerce to field-checked ``Point``s; reject empty sets and repeated x."""
    if not points:
        raise EmptyShareSet("Need at least one point")
    checked: List[Point] = []
    seen = set()
    for x, y in points:
        x, y = field.element(x), field.element(y)
        if x in seen:
            raise DuplicateAbscissa(f"Duplicate x in points: {field.render(x)}")
        seen.add(x)
        checked.append(Point(x, y))
    return checked


def interpolate(points: Sequence, field: Field = RATIONALS) -> Polynomial:
    """Return the minimal-degree polynomial through *points*."""
    pts = _validate(points, field)
    f = field
    result = Polynomial.zero(f)
    for i, (xi, yi) in enumerate(pts):
        basis = Polynomial.one(f)
        for j, (xj, _) in enumerate(pts):
            if j == i:
                continue
            # (x - x_j) / (x_i - x_j) = -x_j/(x_i - x_j) + x/(x_i - x_j)
            scale = f.inv(f.sub(xi, xj))
            factor = Polynomial({0: f.mul(f.negate(xj), scale), 1: scale}, f)
            basis = basis.multiply(factor)
        result = result.add(basis.scale(yi))
    return result


def lagrange_at(points: Sequence, target, field: Field = RATIONALS):
    """Evaluate the interpolating polynomial of *points* at *target*."""
    pts = _validate(points, field)
    f = field
    target = f.element(target)
    result = f.zero()
    for i, (xi, yi) in enumerate(pts):
        num = f.one()
        den = f.one()
        for j, (xj, _) in enumerate(pts):
            if j == i:
                continue
            num = f.mul(num, f.sub(target, xj))
            den = f.mul(den, f.sub(xi, xj))
        result = f.add(result, f.mul(yi, f.div(num, den)))
    return result


def lagrange_at_zero(points: Sequence, field: Field = RATIONALS):
    """Constant term of the interpolating polynomial, i.e. f(0)."""
    return lagrange_at(points, field.zero(), field)
