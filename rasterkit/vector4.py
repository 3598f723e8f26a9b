"""Four-dimensional (homogeneous) vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from .mathutil import SMALL_NUMBER, inv_sqrt
from .vector2 import Vector2
from .vector3 import Vector3


@dataclass(frozen=True, slots=True)
class Vector4:
    """An immutable 4D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    UNIT_X: ClassVar[Vector4]
    UNIT_Y: ClassVar[Vector4]
    UNIT_Z: ClassVar[Vector4]
    UNIT_W: ClassVar[Vector4]
    ZERO: ClassVar[Vector4]
    ONE: ClassVar[Vector4]
    DIMENSION: ClassVar[int] = 4

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "w", float(self.w))

    @classmethod
    def from_vector2(cls, vector: Vector2, is_point: bool = True) -> Vector4:
        """Homogeneous 2D vector: z is 0, w is 1 for a point and 0 for a direction."""
        return cls(vector.x, vector.y, 0.0, 1.0 if is_point else 0.0)

    @classmethod
    def from_vector3(cls, vector: Vector3, is_point: bool = True) -> Vector4:
        """Homogeneous 3D vector: w is 1 for a point and 0 for a direction."""
        return cls(vector.x, vector.y, vector.z, 1.0 if is_point else 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self) -> int:
        return self.DIMENSION

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < self.DIMENSION:
            raise IndexError(f"Vector4 index out of range: {index}")
        return (self.x, self.y, self.z, self.w)[index]

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Vector4 | float) -> Vector4:
        if isinstance(other, Vector4):
            return Vector4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        if isinstance(other, (int, float)):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector4:
        if isinstance(other, (int, float)):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def to_vector2(self) -> Vector2:
        """Keep only x and y."""
        return Vector2(self.x, self.y)

    def to_vector3(self) -> Vector3:
        """Drop the w component."""
        return Vector3(self.x, self.y, self.z)

    def size(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.size_squared())

    def size_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalized(self) -> Vector4:
        """Unit vector in the same direction; the zero vector stays zero."""
        square_sum = self.size_squared()
        if square_sum == 1.0:
            return self
        if square_sum == 0.0:
            return Vector4.ZERO
        return self * inv_sqrt(square_sum)

    def equals_in_tolerance(self, other: Vector4, tolerance: float = SMALL_NUMBER) -> bool:
        """Componentwise closeness test."""
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
            and abs(self.w - other.w) < tolerance
        )

    def max(self) -> float:
        """Largest component."""
        largest = self.x if self.x >= self.y else self.y
        largest = largest if largest >= self.z else self.z
        return largest if largest >= self.w else self.w

    def dot(self, other: Vector4) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w


Vector4.UNIT_X = Vector4(1.0, 0.0, 0.0, 0.0)
Vector4.UNIT_Y = Vector4(0.0, 1.0, 0.0, 0.0)
Vector4.UNIT_Z = Vector4(0.0, 0.0, 1.0, 0.0)
Vector4.UNIT_W = Vector4(0.0, 0.0, 0.0, 1.0)
Vector4.ZERO = Vector4(0.0, 0.0, 0.0, 0.0)
Vector4.ONE = Vector4(1.0, 1.0, 1.0, 1.0)