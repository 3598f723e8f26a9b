"""Unit quaternion rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from .mathutil import SMALL_NUMBER, equals_in_tolerance, get_sin_cos, rad2deg
from .matrix import Matrix3x3
from .rotator import Rotator
from .vector3 import Vector3

_NEXT_AXIS = (1, 2, 0)
_PITCH_THRESHOLD = 0.4999995


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A quaternion with imaginary part (x, y, z) and real part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quaternion]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "w", float(self.w))

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle_degree: float) -> Quaternion:
        """Rotation of ``angle_degree`` degrees about ``axis``."""
        sin, cos = get_sin_cos(angle_degree * 0.5)
        return cls(sin * axis.x, sin * axis.y, sin * axis.z, cos)

    @classmethod
    def from_rotator(cls, rotator: Rotator) -> Quaternion:
        """Rotation equal to yaw, then pitch, then roll applied in local order."""
        sp, cp = get_sin_cos(rotator.pitch * 0.5)
        sy, cy = get_sin_cos(rotator.yaw * 0.5)
        sr, cr = get_sin_cos(rotator.roll * 0.5)
        return cls(
            sy * sr * cp + sp * cy * cr,
            sy * cp * cr - sp * sr * cy,
            -sy * sp * cr + sr * cy * cp,
            sy * sp * sr + cy * cp * cr,
        )

    @classmethod
    def from_vector(cls, vector: Vector3, up: Vector3 = Vector3.UNIT_Y) -> Quaternion:
        """Rotation that turns the local Z axis toward ``vector``."""
        local_z = vector.normalized()
        if abs(local_z.y) >= 1.0 - SMALL_NUMBER:
            local_x = Vector3.UNIT_X
        else:
            local_x = up.cross(local_z).normalized()
        local_y = local_z.cross(local_x).normalized()
        return cls.from_matrix(Matrix3x3(local_x, local_y, local_z))

    @classmethod
    def from_matrix(cls, matrix: Matrix3x3) -> Quaternion:
        """Quaternion of an orthonormal rotation matrix."""
        trace = matrix[0][0] + matrix[1][1] + matrix[2][2]
        if trace > 0.0:
            root = math.sqrt(trace + 1.0)
            w = 0.5 * root
            root = 0.5 / root
            return cls(
                (matrix[1][2] - matrix[2][1]) * root,
                (matrix[2][0] - matrix[0][2]) * root,
                (matrix[0][1] - matrix[1][0]) * root,
                w,
            )

        i = 0
        if matrix[1][1] > matrix[0][0]:
            i = 1
        if matrix[2][2] > matrix[i][i]:
            i = 2
        j = _NEXT_AXIS[i]
        k = _NEXT_AXIS[j]

        root = math.sqrt(matrix[i][i] - matrix[j][j] - matrix[k][k] + 1.0)
        components = [0.0, 0.0, 0.0]
        components[i] = 0.5 * root
        root = 0.5 / root
        components[j] = (matrix[i][j] + matrix[j][i]) * root
        components[k] = (matrix[i][k] + matrix[k][i]) * root
        w = (matrix[j][k] - matrix[k][j]) * root
        return cls(*components, w)

    @staticmethod
    def slerp(first: Quaternion, second: Quaternion, ratio: float) -> Quaternion:
        """Spherical interpolation along the shorter arc."""
        dot = first.x * second.x + first.y * second.y + first.z * second.z + first.w * second.w
        if dot < 0.0:
            first = -first
            dot = -dot

        if dot > 0.9995:
            alpha = 1.0 - ratio
            beta = ratio
        else:
            theta = math.acos(dot)
            inv_sin = 1.0 / math.sin(theta)
            alpha = math.sin((1.0 - ratio) * theta) * inv_sin
            beta = math.sin(ratio * theta) * inv_sin

        return Quaternion(
            alpha * first.x + beta * second.x,
            alpha * first.y + beta * second.y,
            alpha * first.z + beta * second.z,
            alpha * first.w + beta * second.w,
        )

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            v1 = self.imaginary_part()
            v2 = other.imaginary_part()
            w = self.w * other.w - v1.dot(v2)
            v = v2 * self.w + v1 * other.w + v1.cross(v2)
            return Quaternion(v.x, v.y, v.z, w)
        if isinstance(other, Vector3):
            return self.rotate_vector(other)
        return NotImplemented

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Apply this rotation to ``vector``."""
        q = self.imaginary_part()
        t = q.cross(vector) * 2.0
        return vector + t * self.w + q.cross(t)

    def inverse(self) -> Quaternion:
        """Conjugate, the inverse of a unit quaternion."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def normalized(self) -> Quaternion:
        """Unit-length copy; a nearly zero quaternion becomes the identity."""
        square_sum = self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        if square_sum < SMALL_NUMBER:
            return Quaternion.IDENTITY
        scale = 1.0 / math.sqrt(square_sum)
        return Quaternion(self.x * scale, self.y * scale, self.z * scale, self.w * scale)

    def to_rotator(self) -> Rotator:
        """Equivalent Euler angles in degrees."""
        x, y, z, w = self.x, self.y, self.z, self.w
        roll = rad2deg(math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (z * z + x * x)))

        pitch_test = w * x - y * z
        if pitch_test < -_PITCH_THRESHOLD:
            pitch = -90.0
        elif pitch_test > _PITCH_THRESHOLD:
            pitch = 90.0
        else:
            pitch = rad2deg(math.asin(2.0 * pitch_test))

        yaw = rad2deg(math.atan2(2.0 * (w * y + x * z), 1.0 - 2.0 * (x * x + y * y)))
        return Rotator(yaw, roll, pitch)

    def is_unit_quaternion(self) -> bool:
        """True when the length is one within tolerance."""
        size = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)
        return equals_in_tolerance(size, 1.0)

    def real_part(self) -> float:
        """The scalar component w."""
        return self.w

    def imaginary_part(self) -> Vector3:
        """The vector component (x, y, z)."""
        return Vector3(self.x, self.y, self.z)

    def __str__(self) -> str:
        return str(self.to_rotator())


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)