# rasterkit

A small toolkit for writing a software rasterizer in pure Python. It uses only the
standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `rasterkit.mathutil` | Scalar helpers: `trunc_to_int`, `round_to_int`, `floor_to_int`, `ceil_to_int`, `equals_in_tolerance`, `lerp`, `square`, `deg2rad`, `rad2deg`, `clamp`, `get_sin_cos_rad`, `get_sin_cos`, `fmod` and `inv_sqrt`. Also the `BoundCheckResult` enum (`OUTSIDE`, `INTERSECT`, `INSIDE`) and constants such as `PI` and `SMALL_NUMBER`. |
| `rasterkit.vector2`, `vector3`, `vector4` | Immutable `Vector2`, `Vector3` and `Vector4` with arithmetic operators, `dot`, `size`, `normalized`, `equals_in_tolerance` and `max`. `Vector3` adds `cross`. `from_vector2` and `from_vector3` build homogeneous vectors. |
| `rasterkit.matrix` | Column-major `Matrix2x2`, `Matrix3x3` and `Matrix4x4`. Each has `*` with matrices, vectors and scalars, plus `transpose`, `to_strings` and an `IDENTITY` constant. |
| `rasterkit.screenpoint` | `ScreenPoint`, an integer pixel position or screen size, which converts to and from Cartesian coordinates. |
| `rasterkit.rotator` | `Rotator`, Euler angles in degrees (yaw, roll, pitch), with `clamped` and `get_local_axes`. |
| `rasterkit.quaternion` | `Quaternion`. It can be built from an axis and angle, a rotator, a look vector or a rotation matrix. It offers `slerp`, `rotate_vector`, `inverse`, `normalized` and `to_rotator`. |
| `rasterkit.transform` | `Transform`, which holds position, rotation and scale. Methods: `get_matrix`, `from_matrix`, `inverse`, `local_to_world`, `world_to_local`, `world_to_local_vector` and `add_yaw_rotation`, `add_roll_rotation`, `add_pitch_rotation`. |
| `rasterkit.color` | `Color32` (8-bit channels packed as BGRA), `LinearColor` (float RGBA with named constants such as `RED` and `WHITE`) and `HSVColor`. |
| `rasterkit.bounds` | `Plane`, `Circle`, `Rectangle`, `Sphere`, `Box`, and a six-plane `Frustum` whose `check_bound` classifies a point, sphere or box. |
| `rasterkit.vertex` | `Vertex2D` and `Vertex3D`, which hold position, colour and UV, with `+` and scalar `*` for interpolation. |
| `rasterkit.shader` | `vertex_shader_2d`, `vertex_shader_3d`, `fragment_shader_2d` and `fragment_shader_3d`. |
| `rasterkit.clipping` | `PerspectiveTest`, which clips triangle lists against one clip-space plane. Plane functions: `test_w0`/`edge_w0`, `test_nx`/`edge_nx`, `test_px`/`edge_px`, `test_ny`/`edge_ny`, `test_py`/`edge_py`, `test_near`/`edge_near` and `test_far`/`edge_far`. |
| `rasterkit.renderer` | `RendererInterface` (abstract), `FrameBufferRenderer`, and the line clipping helpers `test_region` and `cohen_sutherland_line_clip`. |

All value types are frozen dataclasses except `Transform`. Operations return new
objects; they do not modify their inputs. The shaders and
`PerspectiveTest.clip_triangles` return new lists.

## Installation

```
pip install .
```

## Example

```python
from rasterkit.clipping import PerspectiveTest, edge_w0, test_w0
from rasterkit.color import LinearColor
from rasterkit.quaternion import Quaternion
from rasterkit.renderer import FrameBufferRenderer
from rasterkit.screenpoint import ScreenPoint
from rasterkit.transform import Transform
from rasterkit.vector2 import Vector2
from rasterkit.vector3 import Vector3

# Rotate 90 degrees about the Y axis, then translate.
rotation = Quaternion.from_axis_angle(Vector3.UNIT_Y, 90.0)
transform = Transform(Vector3(1.0, 2.0, 3.0), rotation)
matrix = transform.get_matrix()
for line in matrix.to_strings():
    print(line)

# Clip triangles against the w = 0 plane.
behind_camera = PerspectiveTest(test_w0, edge_w0)

# Draw a red line on a 64x48 framebuffer. The origin is at the screen centre.
renderer = FrameBufferRenderer()
renderer.init(ScreenPoint(64, 48))
renderer.clear(LinearColor.WHITE)
renderer.draw_line(Vector2(-20.0, -10.0), Vector2(20.0, 10.0), LinearColor.RED)
print(renderer.get_pixel(ScreenPoint(12, 34)))
```

## Coordinates

- A `ScreenPoint` puts the origin at the top-left pixel, with Y pointing down.
- The `Vector2` positions passed to `draw_point` and `draw_line` put the origin at the
  centre of the screen, with Y pointing up. `draw_line` also accepts `Vector4`, and
  uses only its x and y.
- `ScreenPoint.to_screen_coordinate` and `ScreenPoint.to_cartesian_coordinate`
  convert between the two.

`draw_line` first clips the segment to the screen with Cohen–Sutherland, then
rasterises it with Bresenham's algorithm. It does not draw the final pixel.

## Errors

Invalid input raises an exception rather than being silently accepted:

- `ValueError`:
  - `Color32` channels outside 0..255.
  - A `Plane` whose normal is not of unit length.
  - Collinear points passed to `Plane.from_points`.
  - A `Frustum` without exactly six planes.
  - A non-positive argument to `inv_sqrt`.
  - A negative screen size passed to `FrameBufferRenderer.init`.
- `TypeError`: a bound or position of an unsupported type.

## What it does not do

`FrameBufferRenderer` keeps its colour and depth buffers in memory only:

- It opens no window and writes no image file. Read pixels back with `get_pixel`.
- Text queued with `push_statistic_text` and `push_statistic_texts` can be read
  through `statistic_texts`. It is never rendered, and `end_frame` discards it.
- `LinearColor.to_color32` accepts an `srgb` flag but applies no gamma conversion.

The package has no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```