"""Illustrative text-secret scheme over the rationals.

``encode`` turns each character's code point into one coefficient of a
polynomial (first character = constant term) and samples it at as many
distinct random integer abscissas as there are characters.  ``decode``
interpolates the points back into the polynomial and reads the
coefficients as characters.

Every share is needed: degree + 1 == share count, so this is not a
(t < n) threshold scheme.  The default randomness is the ``secrets``
CSPRNG, but nothing here depends on it for security.
"""

from __future__ import annotations

import logging
import secrets
from fractions import Fraction
from typing import List, Sequence

from polyshare import config
from polyshare.crypto.field import RATIONALS
from polyshare.crypto.interpolate import interpolate
from polyshare.crypto.point import Point
from polyshare.crypto.polynomial import Polynomial
from polyshare.crypto.rational import is_integral
from polyshare.errors import InvalidCharacterCode, InvalidInput, SecretTooLong

logger = logging.getLogger(__name__)

_system_rng = secrets.SystemRandom()


def _sample_abscissas(count: int, rng=None) -> List[Fraction]:
    """Draw *count* distinct x-values from [1, SAMPLE_X_BOUND)."""
    population = range(1, config.SAMPLE_X_BOUND)
    if count > len(population):
        raise InvalidInput(
            f"Cannot draw {count} distinct abscissas below {config.SAMPLE_X_BOUND}"
        )
    picked = (rng or _system_rng).sample(population, count)
    return [Fraction(x) for x in picked]


def encode(secret: str, rng=None) -> List[Point]:
    """Encode *secret* as ``len(secret)`` points on its polynomial."""
    if len(secret) > config.MAX_SECRET_LENGTH:
        raise SecretTooLong(
            f"Secret must be at most {config.MAX_SECRET_LENGTH} characters long, "
            f"got {len(secret)}"
        )

    polynomial = Polynomial.from_pairs(
        ((ord(char), index) for index, char in enumerate(secret)), RATIONALS
    )
    xs = _sample_abscissas(len(secret), rng)
    points = [Point(x, polynomial.evaluate(x)) for x in xs]
    logger.debug("encoded %d-character secret into %d points", len(secret), len(points))
    return points


def _to_char(coefficient: Fraction, degree: int) -> str:
    if not is_integral(coefficient) or not 0 <= coefficient.numerator <= config.MAX_CODE_POINT:
        raise InvalidCharacterCode(
            f"Coefficient {RATIONALS.render(coefficient)} at degree {degree} "
            "is not a character code"
        )
    return chr(coefficient.numerator)


def decode(points: Sequence[Point]) -> str:
    """Recover the secret from all of its points.

    The secret has one character per point, so zero coefficients inside
    or at the end of the range decode to NUL characters rather than
    being skipped.
    """
    if not points:
        return ""
    polynomial = interpolate(points, RATIONALS)
    secret = "".join(
        _to_char(polynomial.coefficient_at(degree), degree)
        for degree in range(len(points))
    )
    logger.debug("decoded %d points into a %d-character secret", len(points), len(secret))
    return secret
