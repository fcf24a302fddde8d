"""Shamir (t-of-n) secret sharing over F_p, p = 2^32 - 5.

API
---
split(secret, n, t)      -> list of Share  with x = 1..n
reconstruct(shares)      -> secret   (needs >= t shares)
reconstruct_at(shares, x) -> f(x)     (e.g. to re-issue a lost share)

Fewer than t shares still reconstruct *a* value, but it is unrelated to
the secret; that is the scheme's security property, not an error.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from polyshare.config import PRIME
from polyshare.crypto.field import GF
from polyshare.crypto.interpolate import lagrange_at, lagrange_at_zero
from polyshare.crypto.point import Point, Share
from polyshare.crypto.polynomial import Polynomial
from polyshare.errors import EmptyShareSet, InvalidThreshold, SecretOutOfRange

logger = logging.getLogger(__name__)


def random_polynomial(secret: int, t: int, rng=None) -> Polynomial:
    """Random polynomial of degree t-1 over F_p with f(0) = *secret*."""
    coeffs = [secret] + [GF.random(rng) for _ in range(t - 1)]
    return Polynomial.from_coefficients(coeffs, GF)


def split(secret: int, n: int, t: int, rng=None) -> List[Share]:
    """Split *secret* into *n* shares with threshold *t*.

    A random polynomial f of degree t-1 is chosen such that f(0) = secret.
    Shares are (i, f(i)) for i = 1 … n.  *rng* (anything with
    ``getrandbits``) replaces the CSPRNG, for reproducible tests.
    """
    if isinstance(secret, bool) or not isinstance(secret, int):
        raise SecretOutOfRange(f"Secret must be an int, got {type(secret).__name__}")
    if not 0 <= secret < PRIME:
        raise SecretOutOfRange(f"Secret must be in [0, {PRIME}), got {secret}")
    if not 2 <= t <= n:
        raise InvalidThreshold(f"Need 2 <= t <= n, got t={t}, n={n}")
    if n >= PRIME:
        raise InvalidThreshold(f"Cannot issue {n} distinct non-zero x values mod {PRIME}")

    f = random_polynomial(secret, t, rng)
    shares = [Share(x=x, y=f.evaluate_horner(x)) for x in range(1, n + 1)]
    logger.debug("split secret into %d shares (threshold %d)", n, t)
    return shares


def _as_points(shares: Sequence) -> List[Point]:
    if not shares:
        raise EmptyShareSet("No shares provided")
    return [Share.from_point(s).as_point() for s in shares]


def reconstruct(shares: Sequence) -> int:
    """Reconstruct the secret f(0) from *shares* via Lagrange at x=0.

    Accepts ``Share`` objects or plain ``(x, y)`` tuples.
    """
    points = _as_points(shares)
    secret = lagrange_at_zero(points, GF)
    logger.debug("reconstructed secret from %d shares", len(points))
    return secret


def reconstruct_at(shares: Sequence, x: int) -> int:
    """Value of the shared polynomial at *x*."""
    return lagrange_at(_as_points(shares), x, GF)
