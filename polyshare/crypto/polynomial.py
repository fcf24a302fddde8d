"""Univariate polynomials over a ``Field``.

Storage is sparse: a mapping ``degree -> coefficient`` that never holds
the field's zero.  The zero polynomial is the empty mapping.  Every
operation returns a new ``Polynomial``; instances are never mutated.

Dense coefficient lists (index = degree) are only materialised inside
``evaluate_horner`` and accepted on input via ``from_coefficients``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from polyshare.crypto.field import RATIONALS, Field
from polyshare.errors import DivisionByZero, FieldMismatch


class Polynomial:
    """Immutable sparse polynomial."""

    __slots__ = ("field", "_terms")

    def __init__(self, terms: Mapping[int, object], field: Field = RATIONALS) -> None:
        canonical: Dict[int, object] = {}
        for degree, coefficient in terms.items():
            if isinstance(degree, bool) or not isinstance(degree, int) or degree < 0:
                raise ValueError(f"Invalid degree: {degree!r}")
            coefficient = field.element(coefficient)
            if not field.is_zero(coefficient):
                canonical[degree] = coefficient
        self.field = field
        self._terms = canonical

    # ---- construction ----

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[object, int]], field: Field = RATIONALS
    ) -> "Polynomial":
        """Build from ``(coefficient, degree)`` pairs; zeros are dropped.

        Repeated degrees are summed.
        """
        terms: Dict[int, object] = {}
        for coefficient, degree in pairs:
            coefficient = field.element(coefficient)
            if degree in terms:
                coefficient = field.add(terms[degree], coefficient)
            terms[degree] = coefficient
        return cls(terms, field)

    @classmethod
    def from_coefficients(
        cls, coefficients: Sequence[object], field: Field = RATIONALS
    ) -> "Polynomial":
        """Build from a dense list where index ``i`` holds the x^i coefficient."""
        return cls(dict(enumerate(coefficients)), field)

    @classmethod
    def zero(cls, field: Field = RATIONALS) -> "Polynomial":
        return cls({}, field)

    @classmethod
    def one(cls, field: Field = RATIONALS) -> "Polynomial":
        return cls({0: field.one()}, field)

    @classmethod
    def constant(cls, value, field: Field = RATIONALS) -> "Polynomial":
        return cls({0: value}, field)

    # ---- inspection ----

    @property
    def terms(self) -> Mapping[int, object]:
        return MappingProxyType(self._terms)

    @property
    def degree(self) -> int:
        """Highest stored degree; 0 for the zero polynomial."""
        return max(self._terms, default=0)

    def is_zero(self) -> bool:
        return not self._terms

    def coefficient_at(self, degree: int):
        return self._terms.get(degree, self.field.zero())

    def dense(self) -> List[object]:
        """Coefficients for degrees ``0..degree`` with gaps filled by zero."""
        return [self.coefficient_at(d) for d in range(self.degree + 1)]

    # ---- arithmetic ----

    def _same_field(self, other: "Polynomial") -> None:
        if not isinstance(other, Polynomial):
            raise FieldMismatch(f"Expected a Polynomial, got {type(other).__name__}")
        if other.field != self.field:
            raise FieldMismatch(f"Field mismatch: {self.field!r} vs {other.field!r}")

    def add(self, other: "Polynomial") -> "Polynomial":
        self._same_field(other)
        f = self.field
        terms = dict(self._terms)
        for degree, coefficient in other._terms.items():
            if degree in terms:
                terms[degree] = f.add(terms[degree], coefficient)
            else:
                terms[degree] = coefficient
        return Polynomial(terms, f)

    def multiply(self, other: "Polynomial") -> "Polynomial":
        """Convolution of the two coefficient sequences."""
        self._same_field(other)
        f = self.field
        terms: Dict[int, object] = {}
        for i, a in self._terms.items():
            for j, b in other._terms.items():
                product = f.mul(a, b)
                k = i + j
                terms[k] = f.add(terms[k], product) if k in terms else product
        return Polynomial(terms, f)

    def scale(self, c) -> "Polynomial":
        f = self.field
        c = f.element(c)
        return Polynomial({d: f.mul(a, c) for d, a in self._terms.items()}, f)

    def scale_down(self, c) -> "Polynomial":
        f = self.field
        c = f.element(c)
        if f.is_zero(c):
            raise DivisionByZero("Cannot divide a polynomial by zero")
        return Polynomial({d: f.div(a, c) for d, a in self._terms.items()}, f)

    # ---- evaluation ----

    def evaluate(self, x):
        """Sum of ``c * x^d`` over the stored terms."""
        f = self.field
        x = f.element(x)
        result = f.zero()
        for degree, coefficient in self._terms.items():
            result = f.add(result, f.mul(coefficient, f.pow(x, degree)))
        return result

    def evaluate_horner(self, x):
        """Horner's method over the dense coefficients, highest degree first."""
        f = self.field
        x = f.element(x)
        result = f.zero()
        for coefficient in reversed(self.dense()):
            result = f.add(f.mul(result, x), coefficient)
        return result

    __call__ = evaluate_horner

    # ---- display ----

    def render(self) -> str:
        """Human-readable form, highest degree first, e.g. ``3x^2 - x + 1/2``."""
        f = self.field
        parts: List[str] = []
        for degree in sorted(self._terms, reverse=True):
            negative, magnitude = f.split_sign(self._terms[degree])
            if degree == 0:
                body = f.render(magnitude)
            else:
                var = "x" if degree == 1 else f"x^{degree}"
                body = var if f.is_one(magnitude) else f"{f.render(magnitude)}{var}"
            if not parts:
                parts.append(f"-{body}" if negative else body)
            else:
                parts.append(f"- {body}" if negative else f"+ {body}")
        return " ".join(parts) if parts else "0"

    # ---- dunder ----

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.field == other.field and self._terms == other._terms

    def __hash__(self) -> int:
        return hash((self.field, frozenset(self._terms.items())))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Polynomial({self.render()!r}, field={self.field!r})"
