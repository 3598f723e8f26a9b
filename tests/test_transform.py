import pytest

from rasterkit.matrix import Matrix3x3, Matrix4x4
from rasterkit.quaternion import Quaternion
from rasterkit.rotator import Rotator
from rasterkit.transform import Transform
from rasterkit.vector3 import Vector3


def close(a, b, tol=1e-5):
    return tuple(a) == pytest.approx(tuple(b), abs=tol)


def assert_vec_close(a, b, tol=1e-5):
    assert tuple(a) == pytest.approx(tuple(b), abs=tol)


def assert_same_rotation(a, b, tol=1e-5):
    assert close(a, b, tol) or close(a, -b, tol)


@pytest.fixture
def transform():
    return Transform(
        Vector3(1.0, -2.0, 3.0),
        Quaternion.from_rotator(Rotator(30.0, 10.0, 20.0)),
        Vector3(2.0, 2.0, 2.0),
    )


def test_default_matrix_is_identity():
    t = Transform()
    assert t.position == Vector3.ZERO
    assert t.scale == Vector3.ONE
    assert t.get_matrix() == Matrix4x4.IDENTITY


def test_add_position():
    t = Transform(Vector3(1.0, 2.0, 3.0))
    t.add_position(Vector3(4.0, 5.0, 6.0))
    assert t.position == Vector3(1.0, 2.0, 3.0) + Vector3(4.0, 5.0, 6.0)


def test_set_rotation_accepts_each_form():
    rotator = Rotator(12.0, -33.0, 57.0)
    q = Quaternion.from_rotator(rotator)

    t = Transform()
    t.set_rotation(q)
    assert t.rotation == q

    t.set_rotation(rotator)
    assert t.rotation == q

    t.set_rotation(Matrix3x3(q * Vector3.UNIT_X, q * Vector3.UNIT_Y, q * Vector3.UNIT_Z))
    assert_same_rotation(t.rotation, q)


def test_set_rotation_rejects_other_types():
    with pytest.raises(TypeError):
        Transform().set_rotation(Vector3.ONE)


def test_axes_are_orthonormal(transform):
    x, y, z = transform.x_axis(), transform.y_axis(), transform.z_axis()
    for axis in (x, y, z):
        assert axis.size() == pytest.approx(1.0, abs=1e-5)
    assert x.dot(y) == pytest.approx(0.0, abs=1e-5)
    assert_vec_close(x.cross(y), z)


def test_matrix_maps_points(transform):
    p = Vector3(0.5, 1.5, -2.0)
    expected = transform.position + transform.rotation * (p * transform.scale)
    assert_vec_close(transform.get_matrix() * p, expected)


def test_world_to_local_vector_undoes_transform(transform):
    p = Vector3(0.5, 1.5, -2.0)
    world = transform.position + transform.scale * (transform.rotation * p)
    assert_vec_close(transform.world_to_local_vector(world), p)


def test_inverse_scale_reciprocal_and_zero():
    inverse = Transform(scale=Vector3(2.0, 0.0, 4.0)).inverse()
    assert inverse.scale == Vector3(1.0 / 2.0, 0.0, 1.0 / 4.0)


def test_inverse_composes_to_identity(transform):
    result = transform.local_to_world(transform.inverse())
    assert_vec_close(result.scale, Vector3.ONE)
    assert_same_rotation(result.rotation, Quaternion.IDENTITY)


def test_local_world_round_trip(transform):
    child = Transform(
        Vector3(-1.0, 0.5, 2.0),
        Quaternion.from_rotator(Rotator(-15.0, 40.0, 5.0)),
        Vector3(3.0, 1.0, 0.5),
    )
    back = child.local_to_world(transform).world_to_local(transform)
    assert_vec_close(back.position, child.position)
    assert_vec_close(back.scale, child.scale)
    assert_same_rotation(back.rotation, child.rotation)


def test_from_matrix_round_trip_unit_scale():
    original = Transform(
        Vector3(1.0, 2.0, 3.0), Quaternion.from_rotator(Rotator(30.0, 10.0, 20.0))
    )
    recovered = Transform.from_matrix(original.get_matrix())
    assert_vec_close(recovered.position, original.position)
    assert_vec_close(recovered.scale, Vector3.ONE)
    assert_same_rotation(recovered.rotation, original.rotation)


def test_from_matrix_recovers_scale_and_position(transform):
    recovered = Transform.from_matrix(transform.get_matrix())
    assert_vec_close(recovered.position, transform.position)
    assert_vec_close(recovered.scale, transform.scale)


def test_add_yaw_rotation():
    t = Transform()
    t.add_yaw_rotation(30.0)
    assert t.rotation.to_rotator().yaw == pytest.approx(30.0, abs=1e-3)


def test_add_negative_yaw_matches_direct_rotation():
    t = Transform()
    t.add_yaw_rotation(-30.0)
    expected = Transform(rotation=Quaternion.from_rotator(Rotator(-30.0, 0.0, 0.0)))
    assert_vec_close(t.x_axis(), expected.x_axis())
    assert_vec_close(t.z_axis(), expected.z_axis())


def test_add_roll_and_pitch_rotation():
    t = Transform()
    t.add_roll_rotation(25.0)
    assert t.rotation.to_rotator().roll == pytest.approx(25.0, abs=1e-3)

    t = Transform()
    t.add_pitch_rotation(40.0)
    assert t.rotation.to_rotator().pitch == pytest.approx(40.0, abs=1e-3)