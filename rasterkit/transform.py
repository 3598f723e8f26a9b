"""Position, rotation and scale of an object."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .mathutil import SMALL_NUMBER, equals_in_tolerance
from .matrix import Matrix3x3, Matrix4x4
from .quaternion import Quaternion
from .rotator import Rotator
from .vector3 import Vector3
from .vector4 import Vector4


@dataclass(slots=True)
class Transform:
    """A scale, then rotation, then translation."""

    position: Vector3 = Vector3.ZERO
    rotation: Quaternion = Quaternion.IDENTITY
    scale: Vector3 = Vector3.ONE

    @classmethod
    def from_matrix(cls, matrix: Matrix4x4) -> Transform:
        """Split an affine matrix into position, rotation and scale."""
        columns = matrix.to_matrix3x3().cols
        position = matrix[3].to_vector3()

        square_sums = [column.size_squared() for column in columns]
        scale = Vector3(*(math.sqrt(s) if s > SMALL_NUMBER else 0.0 for s in square_sums))
        orthogonal = Matrix3x3(
            *(column / s if s != 0.0 else column for column, s in zip(columns, square_sums))
        )
        return cls(position, Quaternion.from_matrix(orthogonal), scale)

    def add_position(self, delta: Vector3) -> None:
        """Move by ``delta``."""
        self.position = self.position + delta

    def _add_euler(self, **deltas: float) -> None:
        rotator = self.rotation.to_rotator()
        changed = replace(
            rotator, **{name: getattr(rotator, name) + value for name, value in deltas.items()}
        )
        self.rotation = Quaternion.from_rotator(changed.clamped())

    def add_yaw_rotation(self, degree: float) -> None:
        """Turn about the Y axis by ``degree`` degrees."""
        self._add_euler(yaw=degree)

    def add_roll_rotation(self, degree: float) -> None:
        """Turn about the Z axis by ``degree`` degrees."""
        self._add_euler(roll=degree)

    def add_pitch_rotation(self, degree: float) -> None:
        """Turn about the X axis by ``degree`` degrees."""
        self._add_euler(pitch=degree)

    def set_rotation(self, rotation: Quaternion | Rotator | Matrix3x3) -> None:
        """Replace the rotation with a quaternion, Euler angles or a rotation matrix."""
        if isinstance(rotation, Quaternion):
            self.rotation = rotation
        elif isinstance(rotation, Rotator):
            self.rotation = Quaternion.from_rotator(rotation)
        elif isinstance(rotation, Matrix3x3):
            self.rotation = Quaternion.from_matrix(rotation)
        else:
            raise TypeError(f"cannot use {type(rotation).__name__} as a rotation")

    def x_axis(self) -> Vector3:
        """Local X axis in world space."""
        return self.rotation * Vector3.UNIT_X

    def y_axis(self) -> Vector3:
        """Local Y axis in world space."""
        return self.rotation * Vector3.UNIT_Y

    def z_axis(self) -> Vector3:
        """Local Z axis in world space."""
        return self.rotation * Vector3.UNIT_Z

    def get_matrix(self) -> Matrix4x4:
        """Affine matrix of this transform."""
        return Matrix4x4(
            Vector4.from_vector3(self.x_axis() * self.scale.x, False),
            Vector4.from_vector3(self.y_axis() * self.scale.y, False),
            Vector4.from_vector3(self.z_axis() * self.scale.z, False),
            Vector4.from_vector3(self.position, True),
        )

    def inverse(self) -> Transform:
        """Transform that undoes this one; zero scale components stay zero."""
        reciprocal = Vector3(
            *(0.0 if equals_in_tolerance(s, 0.0) else 1.0 / s for s in self.scale)
        )
        rotation = self.rotation.inverse()
        position = reciprocal * (rotation * -self.position)
        return Transform(position, rotation, reciprocal)

    def _compose(self, parent: Transform) -> Transform:
        return Transform(
            parent.position + parent.scale * (parent.rotation * self.position),
            parent.rotation * self.rotation,
            parent.scale * self.scale,
        )

    def local_to_world(self, parent: Transform) -> Transform:
        """Treat this as local to ``parent`` and return it in world space."""
        return self._compose(parent)

    def world_to_local(self, parent: Transform) -> Transform:
        """Treat this as world space and return it relative to ``parent``."""
        return self._compose(parent.inverse())

    def world_to_local_vector(self, world_vector: Vector3) -> Vector3:
        """Express a world-space point in this transform's local space."""
        inverse = self.inverse()
        return inverse.position + inverse.scale * (inverse.rotation * world_vector)