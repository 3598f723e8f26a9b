"""Column-major square matrices of rank 2, 3 and 4."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator

from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4


@dataclass(frozen=True, slots=True)
class Matrix2x2:
    """A 2x2 matrix stored as two column vectors."""

    col0: Vector2 = Vector2.UNIT_X
    col1: Vector2 = Vector2.UNIT_Y

    IDENTITY: ClassVar[Matrix2x2]
    RANK: ClassVar[int] = 2

    @property
    def cols(self) -> tuple[Vector2, Vector2]:
        return (self.col0, self.col1)

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.cols)

    def __getitem__(self, index: int) -> Vector2:
        if not 0 <= index < self.RANK:
            raise IndexError(f"Matrix2x2 column index out of range: {index}")
        return self.cols[index]

    def __mul__(self, other):
        if isinstance(other, Matrix2x2):
            rows = self.transpose().cols
            return Matrix2x2(*(Vector2(*(r.dot(c) for r in rows)) for c in other.cols))
        if isinstance(other, Vector2):
            return Vector2(*(r.dot(other) for r in self.transpose().cols))
        if isinstance(other, (int, float)):
            return Matrix2x2(*(c * other for c in self.cols))
        return NotImplemented

    def transpose(self) -> Matrix2x2:
        """Swap rows and columns."""
        c0, c1 = self.cols
        return Matrix2x2(Vector2(c0.x, c1.x), Vector2(c0.y, c1.y))

    def to_strings(self) -> list[str]:
        """One formatted line per row."""
        return [f"| {r.x:.3f} , {r.y:.3f} |" for r in self.transpose().cols]


@dataclass(frozen=True, slots=True)
class Matrix3x3:
    """A 3x3 matrix stored as three column vectors."""

    col0: Vector3 = Vector3.UNIT_X
    col1: Vector3 = Vector3.UNIT_Y
    col2: Vector3 = Vector3.UNIT_Z

    IDENTITY: ClassVar[Matrix3x3]
    RANK: ClassVar[int] = 3

    @property
    def cols(self) -> tuple[Vector3, Vector3, Vector3]:
        return (self.col0, self.col1, self.col2)

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self.cols)

    def __getitem__(self, index: int) -> Vector3:
        if not 0 <= index < self.RANK:
            raise IndexError(f"Matrix3x3 column index out of range: {index}")
        return self.cols[index]

    def __mul__(self, other):
        if isinstance(other, Matrix3x3):
            rows = self.transpose().cols
            return Matrix3x3(*(Vector3(*(r.dot(c) for r in rows)) for c in other.cols))
        if isinstance(other, Vector3):
            return Vector3(*(r.dot(other) for r in self.transpose().cols))
        if isinstance(other, Vector2):
            return (self * Vector3.from_vector2(other)).to_vector2()
        if isinstance(other, (int, float)):
            return Matrix3x3(*(c * other for c in self.cols))
        return NotImplemented

    def transpose(self) -> Matrix3x3:
        """Swap rows and columns."""
        c0, c1, c2 = self.cols
        return Matrix3x3(
            Vector3(c0.x, c1.x, c2.x),
            Vector3(c0.y, c1.y, c2.y),
            Vector3(c0.z, c1.z, c2.z),
        )

    def to_strings(self) -> list[str]:
        """One formatted line per row."""
        return [f"| {r.x:.3f} , {r.y:.3f} , {r.z:.3f} |" for r in self.transpose().cols]

    def to_matrix2x2(self) -> Matrix2x2:
        """Upper-left 2x2 block."""
        return Matrix2x2(self.col0.to_vector2(), self.col1.to_vector2())


@dataclass(frozen=True, slots=True)
class Matrix4x4:
    """A 4x4 matrix stored as four column vectors."""

    col0: Vector4 = Vector4.UNIT_X
    col1: Vector4 = Vector4.UNIT_Y
    col2: Vector4 = Vector4.UNIT_Z
    col3: Vector4 = Vector4.UNIT_W

    IDENTITY: ClassVar[Matrix4x4]
    RANK: ClassVar[int] = 4

    @property
    def cols(self) -> tuple[Vector4, Vector4, Vector4, Vector4]:
        return (self.col0, self.col1, self.col2, self.col3)

    def __iter__(self) -> Iterator[Vector4]:
        return iter(self.cols)

    def __getitem__(self, index: int) -> Vector4:
        if not 0 <= index < self.RANK:
            raise IndexError(f"Matrix4x4 column index out of range: {index}")
        return self.cols[index]

    def __mul__(self, other):
        if isinstance(other, Matrix4x4):
            rows = self.transpose().cols
            return Matrix4x4(*(Vector4(*(r.dot(c) for r in rows)) for c in other.cols))
        if isinstance(other, Vector4):
            return Vector4(*(r.dot(other) for r in self.transpose().cols))
        if isinstance(other, Vector3):
            return (self * Vector4.from_vector3(other)).to_vector3()
        if isinstance(other, (int, float)):
            return Matrix4x4(*(c * other for c in self.cols))
        return NotImplemented

    def transpose(self) -> Matrix4x4:
        """Swap rows and columns."""
        c0, c1, c2, c3 = self.cols
        return Matrix4x4(
            Vector4(c0.x, c1.x, c2.x, c3.x),
            Vector4(c0.y, c1.y, c2.y, c3.y),
            Vector4(c0.z, c1.z, c2.z, c3.z),
            Vector4(c0.w, c1.w, c2.w, c3.w),
        )

    def to_strings(self) -> list[str]:
        """One formatted line per row."""
        return [
            f"| {r.x:.3f} , {r.y:.3f} , {r.z:.3f}, {r.w:.3f} |" for r in self.transpose().cols
        ]

    def to_matrix3x3(self) -> Matrix3x3:
        """Upper-left 3x3 block."""
        return Matrix3x3(self.col0.to_vector3(), self.col1.to_vector3(), self.col2.to_vector3())


Matrix2x2.IDENTITY = Matrix2x2(Vector2(1.0, 0.0), Vector2(0.0, 1.0))
Matrix3x3.IDENTITY = Matrix3x3(
    Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)
)
Matrix4x4.IDENTITY = Matrix4x4(
    Vector4(1.0, 0.0, 0.0, 0.0),
    Vector4(0.0, 1.0, 0.0, 0.0),
    Vector4(0.0, 0.0, 1.0, 0.0),
    Vector4(0.0, 0.0, 0.0, 1.0),
)