import math

import pytest

from sdftext.vector import Vec3

A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-4.0, 0.5, 2.0)
ORIGIN = Vec3()


def _approx_vec(v):
    return pytest.approx(tuple(v), abs=1e-9)


def test_default_is_zero():
    assert Vec3() == Vec3(0, 0, 0)


def test_add_sub_round_trip():
    assert _approx_vec(A + B - B) == tuple(A)


def test_negation_and_inverted_agree():
    assert A.inverted() == -A
    assert A + A.inverted() == ORIGIN


def test_scalar_mul_commutes():
    assert 2.5 * A == A * 2.5
    assert tuple(A * 2) == (A.x * 2, A.y * 2, A.z * 2)


def test_scalar_division_inverts_multiplication():
    assert tuple(A * 4 / 4) == _approx_vec(A)


def test_vector_division_inverts_componentwise_mul():
    assert tuple(A * B / B) == _approx_vec(A)


def test_division_by_zero_raises():
    assert tuple(A / 2) == _approx_vec(A * 0.5)
    with pytest.raises(ZeroDivisionError):
        A / 0


def test_componentwise_ordering():
    small = Vec3(0, 0, 0)
    big = Vec3(1, 1, 1)
    assert small <= big
    assert big >= small
    assert not (Vec3(2, 0, 0) <= big)
    assert not (small >= big)


def test_equals_tolerates_rounding():
    assert A.equals(Vec3(A.x + 1e-9, A.y, A.z - 1e-9))
    assert not A.equals(Vec3(A.x + 0.1, A.y, A.z))


def test_length_matches_length_sq():
    assert A.length() ** 2 == pytest.approx(A.length_sq())


def test_length_of_pythagorean_triple():
    assert Vec3(3, 4, 0).length() == pytest.approx(5.0)


def test_dot_with_self_is_length_sq():
    assert A.dot(A) == pytest.approx(A.length_sq())
    assert A.dot(B) == pytest.approx(B.dot(A))


def test_cross_of_axes():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-9)
    assert B.cross(A) == -c


def test_distance_relations():
    assert A.distance_from(B) == pytest.approx((A - B).length())
    assert A.distance_from_sq(B) == pytest.approx(A.distance_from(B) ** 2)
    assert A.distance_from(B) == pytest.approx(B.distance_from(A))


def test_is_between_points():
    begin = Vec3(0, 0, 0)
    end = Vec3(10, 0, 0)
    assert Vec3(5, 0, 0).is_between_points(begin, end)
    assert not Vec3(15, 0, 0).is_between_points(begin, end)
    assert not Vec3(-1, 0, 0).is_between_points(begin, end)


def test_normalized_has_unit_length():
    n = A.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.cross(A).length() == pytest.approx(0.0, abs=1e-9)
    assert n.dot(A) > 0


def test_normalized_zero_stays_zero():
    assert ORIGIN.normalized() == ORIGIN


def test_with_length():
    v = A.with_length(7.5)
    assert v.length() == pytest.approx(7.5)
    assert v.normalized().equals(A.normalized())


@pytest.mark.parametrize("method", ["rotated_xz", "rotated_xy", "rotated_yz"])
def test_rotation_preserves_distance_to_center(method):
    center = Vec3(0.5, -1.0, 2.0)
    rotated = getattr(A, method)(37.0, center)
    assert rotated.distance_from(center) == pytest.approx(A.distance_from(center))


@pytest.mark.parametrize("method", ["rotated_xz", "rotated_xy", "rotated_yz"])
def test_rotation_round_trip(method):
    center = Vec3(1.0, 2.0, 3.0)
    there = getattr(A, method)(63.0, center)
    back = getattr(there, method)(-63.0, center)
    assert tuple(back) == _approx_vec(A)


@pytest.mark.parametrize("method", ["rotated_xz", "rotated_xy", "rotated_yz"])
def test_full_turn_is_identity(method):
    assert tuple(getattr(A, method)(360.0, B)) == _approx_vec(A)


def test_rotation_keeps_axis_component():
    assert A.rotated_xz(45.0, B).y == A.y
    assert A.rotated_xy(45.0, B).z == A.z
    assert A.rotated_yz(45.0, B).x == A.x


def test_interpolated_endpoints_and_midpoint():
    assert A.interpolated(B, 1.0) == A
    assert A.interpolated(B, 0.0) == B
    mid = A.interpolated(B, 0.5)
    assert mid.distance_from(A) == pytest.approx(mid.distance_from(B))


def test_horizontal_angle_ranges():
    for v in (A, B, Vec3(-1, -1, -1), Vec3(0, 1, 0)):
        angle = v.horizontal_angle()
        assert angle.z == 0.0
        assert 0.0 <= angle.x < 360.0
        assert 0.0 <= angle.y < 360.0


def test_horizontal_angle_along_z_axis_is_zero():
    angle = Vec3(0, 0, 1).horizontal_angle()
    assert tuple(angle) == _approx_vec(ORIGIN)


def test_horizontal_angle_yaw_matches_atan2():
    angle = B.horizontal_angle()
    expected = math.degrees(math.atan2(B.x, B.z)) % 360.0
    assert angle.y == pytest.approx(expected)


def test_as_4_values():
    assert A.as_4_values() == (A.x, A.y, A.z, 0.0)


def test_frozen():
    v = Vec3(1.5, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 0.0  # type: ignore[misc]
    assert v.x == 1.5