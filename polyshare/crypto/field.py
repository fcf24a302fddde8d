"""Field arithmetic.

Two layers live here:

* plain prime-field primitives over Python ints (``add``, ``mul``,
  ``inv``, ...), reducing into ``[0, p)`` with ``p`` defaulting to
  ``config.PRIME``;
* the generic ``Field`` contract that ``Polynomial`` and the Lagrange
  routines are written against, with two implementations:
  ``RationalField`` (exact ``Fraction`` elements) and ``PrimeField``
  (``int`` elements reduced mod a prime).

Elements never carry their field.  Instead each ``Field`` checks that
its operands are of its own element type and range, and raises
``FieldMismatch`` otherwise, so a ``Fraction`` cannot leak into modular
arithmetic (or an ``int`` into rational arithmetic) unnoticed.
"""

from __future__ import annotations

import secrets
from fractions import Fraction
from typing import Generic, Tuple, TypeVar

from polyshare.config import PRIME, RANDOM_BITS
from polyshare.crypto.rational import to_rational, to_simple_string
from polyshare.errors import DivisionByZero, FieldMismatch, NoInverse

E = TypeVar("E")


# -----------------------------------------------------------------------
# Prime-field primitives
# -----------------------------------------------------------------------

def reduce(a: int, p: int = PRIME) -> int:
    """Reduce an integer into [0, p)."""
    return a % p


def add(a: int, b: int, p: int = PRIME) -> int:
    """Field addition."""
    return (a + b) % p


def sub(a: int, b: int, p: int = PRIME) -> int:
    """Field subtraction."""
    return (a - b) % p


def mul(a: int, b: int, p: int = PRIME) -> int:
    """Field multiplication."""
    return (a * b) % p


def neg(a: int, p: int = PRIME) -> int:
    """Additive inverse."""
    return (-a) % p


def inv(a: int, p: int = PRIME) -> int:
    """Multiplicative inverse via the extended Euclidean algorithm.

    Raises ``NoInverse`` when gcd(a, p) != 1, which for prime *p* only
    happens for a ≡ 0.
    """
    t, new_t = 0, 1
    r, new_r = p, a % p
    while new_r != 0:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise NoInverse(f"{a} has no inverse mod {p}")
    return t % p


def random_element(rng=None, p: int = PRIME, bits: int = RANDOM_BITS) -> int:
    """Return a uniform random element in [0, p) via rejection sampling.

    Draws *bits*-bit integers and discards any at or above the largest
    multiple of *p* that fits, so reducing the survivor mod *p* has no
    bias.  *rng* is any object with ``getrandbits`` (e.g. a seeded
    ``random.Random``); the default is the ``secrets`` CSPRNG.
    """
    space = 1 << bits
    if p > space:
        raise ValueError(f"Modulus {p} does not fit in {bits} random bits")
    limit = space - space % p
    while True:
        if rng is not None:
            draw = rng.getrandbits(bits)
        else:
            draw = secrets.randbits(bits)
        if draw < limit:
            return draw % p


# -----------------------------------------------------------------------
# Field contract
# -----------------------------------------------------------------------

class Field(Generic[E]):
    """Operations shared by every coefficient field.

    Subclasses supply ``zero``, ``one``, ``element``, ``check``, ``add``,
    ``negate``, ``mul``, ``inv``, ``render`` and ``split_sign``; the rest
    is derived.
    """

    def zero(self) -> E:
        raise NotImplementedError

    def one(self) -> E:
        raise NotImplementedError

    def element(self, value) -> E:
        """Build an element from a compatible value (idempotent)."""
        raise NotImplementedError

    def check(self, value) -> E:
        """Return *value* if it is an element of this field, else raise."""
        raise NotImplementedError

    def add(self, a: E, b: E) -> E:
        raise NotImplementedError

    def negate(self, a: E) -> E:
        raise NotImplementedError

    def mul(self, a: E, b: E) -> E:
        raise NotImplementedError

    def inv(self, a: E) -> E:
        raise NotImplementedError

    def render(self, a: E) -> str:
        raise NotImplementedError

    def split_sign(self, a: E) -> Tuple[bool, E]:
        """Return ``(negative, magnitude)`` for display purposes."""
        raise NotImplementedError

    # ---- derived operations ----

    def sub(self, a: E, b: E) -> E:
        return self.add(a, self.negate(b))

    def div(self, a: E, b: E) -> E:
        if self.is_zero(b):
            raise DivisionByZero("Division by the additive identity")
        return self.mul(a, self.inv(b))

    def equals(self, a: E, b: E) -> bool:
        return self.check(a) == self.check(b)

    def is_zero(self, a: E) -> bool:
        return self.check(a) == self.zero()

    def is_one(self, a: E) -> bool:
        return self.check(a) == self.one()

    def pow(self, a: E, e: int) -> E:
        """Square-and-multiply exponentiation; negative *e* inverts first."""
        if e < 0:
            a, e = self.inv(a), -e
        result = self.one()
        base = self.check(a)
        while e:
            if e & 1:
                result = self.mul(result, base)
            base = self.mul(base, base)
            e >>= 1
        return result

    def __contains__(self, value) -> bool:
        try:
            self.check(value)
        except FieldMismatch:
            return False
        return True


class RationalField(Field[Fraction]):
    """The rationals Q with exact ``Fraction`` elements."""

    def zero(self) -> Fraction:
        return Fraction(0)

    def one(self) -> Fraction:
        return Fraction(1)

    def element(self, value) -> Fraction:
        return to_rational(value)

    def check(self, value) -> Fraction:
        if not isinstance(value, Fraction):
            raise FieldMismatch(
                f"Expected a rational, got {type(value).__name__} {value!r}"
            )
        return value

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return self.check(a) + self.check(b)

    def negate(self, a: Fraction) -> Fraction:
        return -self.check(a)

    def mul(self, a: Fraction, b: Fraction) -> Fraction:
        return self.check(a) * self.check(b)

    def inv(self, a: Fraction) -> Fraction:
        if self.check(a) == 0:
            raise DivisionByZero("Cannot invert zero in Q")
        return 1 / a

    def render(self, a: Fraction) -> str:
        return to_simple_string(self.check(a))

    def split_sign(self, a: Fraction) -> Tuple[bool, Fraction]:
        a = self.check(a)
        return a < 0, abs(a)

    def __eq__(self, other) -> bool:
        return isinstance(other, RationalField)

    def __hash__(self) -> int:
        return hash(RationalField)

    def __repr__(self) -> str:
        return "RationalField()"


class PrimeField(Field[int]):
    """The prime field F_p with ``int`` elements in [0, p)."""

    def __init__(self, modulus: int = PRIME) -> None:
        if modulus < 2:
            raise ValueError(f"Invalid modulus: {modulus}")
        self.modulus = modulus

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def element(self, value) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldMismatch(
                f"Cannot build an F_{self.modulus} element from {type(value).__name__}"
            )
        return reduce(value, self.modulus)

    def check(self, value) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldMismatch(
                f"Expected an F_{self.modulus} element, got {type(value).__name__} {value!r}"
            )
        if not 0 <= value < self.modulus:
            raise FieldMismatch(f"{value} is not reduced mod {self.modulus}")
        return value

    def add(self, a: int, b: int) -> int:
        return add(self.check(a), self.check(b), self.modulus)

    def sub(self, a: int, b: int) -> int:
        return sub(self.check(a), self.check(b), self.modulus)

    def negate(self, a: int) -> int:
        return neg(self.check(a), self.modulus)

    def mul(self, a: int, b: int) -> int:
        return mul(self.check(a), self.check(b), self.modulus)

    def inv(self, a: int) -> int:
        if self.check(a) == 0:
            raise DivisionByZero(f"Cannot invert zero in F_{self.modulus}")
        return inv(a, self.modulus)

    def pow(self, a: int, e: int) -> int:
        if e < 0:
            a, e = self.inv(a), -e
        return pow(self.check(a), e, self.modulus)

    def random(self, rng=None) -> int:
        """Uniform random element, see ``random_element``."""
        bits = max(RANDOM_BITS, self.modulus.bit_length())
        return random_element(rng, self.modulus, bits)

    def render(self, a: int) -> str:
        return str(self.check(a))

    def split_sign(self, a: int) -> Tuple[bool, int]:
        return False, self.check(a)

    def __eq__(self, other) -> bool:
        return isinstance(other, PrimeField) and other.modulus == self.modulus

    def __hash__(self) -> int:
        return hash((PrimeField, self.modulus))

    def __repr__(self) -> str:
        return f"PrimeField({self.modulus})"


RATIONALS = RationalField()
GF = PrimeField(PRIME)
