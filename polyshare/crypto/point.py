"""Points and shares.

A ``Point`` is a bare ``(x, y)`` pair of field elements; plain tuples are
accepted anywhere a ``Point`` is.  A ``Share`` is the validated output
unit of the threshold scheme.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator

from polyshare.config import PRIME
from polyshare.crypto.field import RATIONALS, Field


class Point(NamedTuple):
    x: Any
    y: Any

    def render(self, field: Field = RATIONALS) -> str:
        """Describe the point as ``(x, y)``."""
        return f"({field.render(self.x)}, {field.render(self.y)})"


class Share(BaseModel):
    """One share ``(x, f(x))`` of a threshold split over F_PRIME."""

    model_config = ConfigDict(frozen=True, strict=True)

    x: int
    y: int

    @field_validator("x")
    @classmethod
    def _x_in_range(cls, v: int) -> int:
        # x = 0 would be the secret itself
        if not 1 <= v < PRIME:
            raise ValueError(f"Share x must be in [1, {PRIME}), got {v}")
        return v

    @field_validator("y")
    @classmethod
    def _y_in_range(cls, v: int) -> int:
        if not 0 <= v < PRIME:
            raise ValueError(f"Share y must be in [0, {PRIME}), got {v}")
        return v

    @classmethod
    def from_point(cls, point) -> "Share":
        if isinstance(point, Share):
            return point
        x, y = point
        return cls(x=x, y=y)

    def as_point(self) -> Point:
        return Point(self.x, self.y)
