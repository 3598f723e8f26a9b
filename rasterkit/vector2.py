"""Two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from .mathutil import SMALL_NUMBER, get_sin_cos_rad, inv_sqrt, rad2deg


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    UNIT_X: ClassVar[Vector2]
    UNIT_Y: ClassVar[Vector2]
    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    DIMENSION: ClassVar[int] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return self.DIMENSION

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < self.DIMENSION:
            raise IndexError(f"Vector2 index out of range: {index}")
        return (self.x, self.y)[index]

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"

    def size(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.size_squared())

    def size_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        square_sum = self.size_squared()
        if square_sum == 1.0:
            return self
        if square_sum == 0.0:
            return Vector2.ZERO
        return self * inv_sqrt(square_sum)

    def equals_in_tolerance(self, other: Vector2, tolerance: float = SMALL_NUMBER) -> bool:
        """Componentwise closeness test."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) < tolerance

    def max(self) -> float:
        """Largest component."""
        return self.x if self.x >= self.y else self.y

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def angle(self) -> float:
        """Angle from the X axis in radians."""
        return math.atan2(self.y, self.x)

    def angle_in_degree(self) -> float:
        """Angle from the X axis in degrees."""
        return rad2deg(math.atan2(self.y, self.x))

    def to_polar_coordinate(self) -> Vector2:
        """Polar form as (radius, angle in radians)."""
        return Vector2(self.size(), self.angle())

    def to_cartesian_coordinate(self) -> Vector2:
        """Treat this as (radius, angle in radians) and return the Cartesian point."""
        sin, cos = get_sin_cos_rad(self.y)
        return Vector2(self.x * cos, self.x * sin)


Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)
Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)