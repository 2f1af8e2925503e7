import math

import pytest

from cncpath.geometry import AABB, Quaternion, Transform, Vec3, arc_length


def _close(a, b, tol=1e-9):
    return all(abs(p - q) < tol for p, q in zip(a, b))


def test_vec3_arithmetic_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * 4) / 4 == a


def test_vec3_length_of_pythagorean_triple():
    assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_length_squared_matches_dot_and_length():
    v = Vec3(1.2, -3.4, 5.6)
    assert v.length_squared() == pytest.approx(v.dot(v))
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_dot_is_symmetric():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert a.dot(b) == b.dot(a)


@pytest.mark.parametrize(
    "vector, expected",
    [
        (Vec3(1.0, 2.0, 3.0), True),
        (Vec3(float("nan"), 0.0, 0.0), False),
        (Vec3(0.0, float("inf"), 0.0), False),
        (Vec3(0.0, 0.0, float("-inf")), False),
    ],
)
def test_vec3_is_finite(vector, expected):
    assert vector.is_finite() is expected


def test_aabb_size_and_center_invariants():
    box = AABB(Vec3(-1.0, 2.0, 0.0), Vec3(3.0, 6.0, 10.0))
    assert box.min + box.size() == box.max
    assert box.contains(box.center())
    assert box.center() - box.min == box.max - box.center()


def test_aabb_contains_boundary_and_rejects_outside():
    box = AABB(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
    assert box.contains(box.min)
    assert box.contains(box.max)
    assert not box.contains(Vec3(1.5, 0.5, 0.5))
    assert not box.contains(Vec3(0.5, -0.1, 0.5))


def test_default_aabb_is_degenerate_at_origin():
    box = AABB()
    assert box.min == Vec3()
    assert box.max == Vec3()


def test_identity_quaternion_leaves_vectors_unchanged():
    q = Quaternion.identity()
    v = Vec3(1.0, -2.0, 3.0)
    assert q.is_identity()
    assert _close(q.rotate(v), v)


def test_quarter_turn_about_z_maps_x_to_y():
    q = Quaternion.from_axis_angle(Vec3(0.0, 0.0, 1.0), math.pi / 2)
    assert _close(q.rotate(Vec3(1.0, 0.0, 0.0)), Vec3(0.0, 1.0, 0.0))
    assert not q.is_identity()


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(Vec3(1.0, 2.0, -0.5), 1.234)
    v = Vec3(3.0, -1.0, 2.0)
    assert q.rotate(v).length() == pytest.approx(v.length())


def test_conjugate_undoes_rotation():
    q = Quaternion.from_axis_angle(Vec3(0.3, -1.0, 0.7), 0.9)
    v = Vec3(2.0, 5.0, -3.0)
    assert _close(q.conjugate().rotate(q.rotate(v)), v)
    assert (q * q.conjugate()).is_identity(1e-12)


def test_normalized_has_unit_norm():
    q = Quaternion(2.0, 1.0, -3.0, 0.5).normalized()
    assert math.sqrt(q.w ** 2 + q.x ** 2 + q.y ** 2 + q.z ** 2) == pytest.approx(1.0)


def test_zero_axis_and_zero_quaternion_raise():
    with pytest.raises(ValueError):
        Quaternion.from_axis_angle(Vec3(), 1.0)
    with pytest.raises(ValueError):
        Quaternion(0.0, 0.0, 0.0, 0.0).normalized()


def test_transform_identity_and_inverse_round_trip():
    assert Transform.identity().transform_point(Vec3(1.0, 2.0, 3.0)) == Vec3(1.0, 2.0, 3.0)
    t = Transform(Vec3(10.0, -5.0, 2.0), Quaternion.from_axis_angle(Vec3(1.0, 1.0, 0.0), 0.7))
    p = Vec3(4.0, 1.0, -6.0)
    assert _close(t.inverse().transform_point(t.transform_point(p)), p)
    assert _close(t.transform_point(t.inverse().transform_point(p)), p)


def test_transform_compose_applies_other_first():
    shift = Transform(Vec3(1.0, 0.0, 0.0), Quaternion.identity())
    turn = Transform(Vec3(), Quaternion.from_axis_angle(Vec3(0.0, 0.0, 1.0), math.pi / 2))
    result = shift.compose(turn).transform_point(Vec3(1.0, 0.0, 0.0))
    assert result.x == pytest.approx(1.0)
    assert result.y == pytest.approx(1.0)
    assert result.z == pytest.approx(0.0, abs=1e-12)

    reversed_result = turn.compose(shift).transform_point(Vec3(1.0, 0.0, 0.0))
    assert reversed_result.x == pytest.approx(0.0, abs=1e-12)
    assert reversed_result.y == pytest.approx(2.0)
    assert reversed_result.z == pytest.approx(0.0, abs=1e-12)


def test_arc_length_quarter_circle():
    length = arc_length(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3())
    assert length == pytest.approx(math.pi / 2)


def test_arc_length_scales_with_radius_and_is_symmetric():
    centre = Vec3(5.0, 5.0, 0.0)
    small = arc_length(centre + Vec3(1.0, 0.0, 0.0), centre + Vec3(0.6, 0.8, 0.0), centre)
    large = arc_length(centre + Vec3(2.0, 0.0, 0.0), centre + Vec3(1.2, 1.6, 0.0), centre)
    assert large == pytest.approx(2 * small)
    assert arc_length(centre + Vec3(0.6, 0.8, 0.0), centre + Vec3(1.0, 0.0, 0.0), centre) == pytest.approx(small)


def test_arc_length_zero_radius_is_zero():
    assert arc_length(Vec3(1.0, 1.0, 1.0), Vec3(2.0, 2.0, 2.0), Vec3(1.0, 1.0, 1.0)) == 0.0