"""Vertex and fragment shaders for the 2D and 3D pipelines."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from .color import LinearColor
from .matrix import Matrix3x3, Matrix4x4
from .vertex import Vertex2D, Vertex3D


def vertex_shader_2d(vertices: Iterable[Vertex2D], matrix: Matrix3x3) -> list[Vertex2D]:
    """Vertices with positions transformed by ``matrix`` as homogeneous points."""
    return [replace(v, position=matrix * v.position) for v in vertices]


def fragment_shader_2d(color: LinearColor, color_param: LinearColor) -> LinearColor:
    """Modulate a pixel colour by a colour parameter."""
    return color * color_param


def vertex_shader_3d(vertices: Iterable[Vertex3D], matrix: Matrix4x4) -> list[Vertex3D]:
    """Vertices with positions transformed by ``matrix``."""
    return [replace(v, position=matrix * v.position) for v in vertices]


def fragment_shader_3d(color: LinearColor, color_param: LinearColor) -> LinearColor:
    """Modulate a pixel colour by a colour parameter."""
    return color * color_param