"""Small 2D vector and axis-aligned rectangle types used by the store model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Union[float, Vec2]) -> Vec2:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(scalar, Vec2):
            return Vec2(self.x * scalar.x, self.y * scalar.y)
        if isinstance(scalar, (int, float)):
            return Vec2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation: ``self`` at ``t == 0``, ``other`` at ``t == 1``."""
        return self + (other - self) * t

    def normalize(self) -> Vec2:
        """Return a unit vector in the same direction.

        Raises ValueError for a zero-length vector.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with ``min`` <= ``max`` on both axes."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_corners(cls, a: Vec2, b: Vec2) -> Rect:
        """Build a rectangle from any two opposite corners."""
        return cls(
            Vec2(min(a.x, b.x), min(a.y, b.y)),
            Vec2(max(a.x, b.x), max(a.y, b.y)),
        )

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside or on the edge of the rectangle."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def contains_rect(self, inner: Rect) -> bool:
        """True if ``inner`` lies entirely within this rectangle."""
        return (
            inner.min.x >= self.min.x
            and inner.max.x <= self.max.x
            and inner.min.y >= self.min.y
            and inner.max.y <= self.max.y
        )