"""Exception taxonomy.

Every category also derives from the builtin exception raised for the
same condition by plain modular arithmetic, so ``except ValueError`` and
``except ZeroDivisionError`` keep working for callers.
"""

from __future__ import annotations


class PolyshareError(Exception):
    """Root of all polyshare errors."""


# ---------- Invalid input ----------

class InvalidInput(PolyshareError, ValueError):
    """A secret or a sharing parameter is out of bounds."""


class SecretTooLong(InvalidInput):
    pass


class InvalidThreshold(InvalidInput):
    pass


class SecretOutOfRange(InvalidInput):
    pass


# ---------- Malformed share sets ----------

class MalformedShareSet(PolyshareError, ValueError):
    """A point or share set cannot be interpolated."""


class EmptyShareSet(MalformedShareSet):
    pass


class DuplicateAbscissa(MalformedShareSet):
    pass


# ---------- Arithmetic ----------

class ArithmeticFailure(PolyshareError, ArithmeticError):
    """A field operation has no defined result."""


class DivisionByZero(ArithmeticFailure, ZeroDivisionError):
    pass


class NoInverse(ArithmeticFailure):
    pass


# ---------- Decoding ----------

class DecodeMismatch(PolyshareError, ValueError):
    """Interpolation succeeded but the result is not a valid encoding."""


class InvalidCharacterCode(DecodeMismatch):
    pass


# ---------- Typing ----------

class FieldMismatch(PolyshareError, TypeError):
    """A value does not belong to the field it was handed to."""
