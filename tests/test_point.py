import math

import pytest

from cncpath.geometry import Quaternion, Vec3
from cncpath.point import PointFlags, ToolpathPoint


def test_defaults():
    point = ToolpathPoint(Vec3(1.0, 2.0, 3.0))
    assert point.orientation == Quaternion.identity()
    assert not point.has_orientation()
    assert not point.has_feedrate()
    assert not point.has_spindle_speed()
    assert point.flags == PointFlags()
    assert not point.is_rapid()
    assert not point.is_cutting()
    assert point.is_valid()


def test_overrides_are_kept():
    point = ToolpathPoint(Vec3(), feedrate=800.0, spindle_speed=18000.0)
    assert point.has_feedrate()
    assert point.feedrate == 800.0
    assert point.has_spindle_speed()
    assert point.spindle_speed == 18000.0


def test_zero_feedrate_still_counts_as_set():
    point = ToolpathPoint(Vec3(), feedrate=0.0)
    assert point.has_feedrate()


def test_tilted_orientation_is_reported():
    tilt = Quaternion.from_axis_angle(Vec3(1.0, 0.0, 0.0), math.pi / 6)
    point = ToolpathPoint(Vec3(), orientation=tilt)
    assert point.has_orientation()
    assert point.orientation == tilt


def test_tool_transform_places_origin_at_position():
    position = Vec3(5.0, -3.0, 12.0)
    tilt = Quaternion.from_axis_angle(Vec3(0.0, 1.0, 0.0), 0.5)
    point = ToolpathPoint(position, orientation=tilt)
    transform = point.tool_transform()
    assert transform.position == position
    assert transform.rotation == tilt
    assert transform.transform_point(Vec3()) == position
    back = transform.inverse().transform_point(transform.transform_point(Vec3(1.0, 2.0, 3.0)))
    assert all(abs(a - b) < 1e-9 for a, b in zip(back, Vec3(1.0, 2.0, 3.0)))


@pytest.mark.parametrize(
    "position",
    [Vec3(float("nan"), 0.0, 0.0), Vec3(0.0, float("inf"), 0.0), Vec3(0.0, 0.0, float("-inf"))],
)
def test_non_finite_position_is_invalid(position):
    assert ToolpathPoint(position).is_valid() is False


def test_flags_drive_rapid_and_cutting():
    point = ToolpathPoint(Vec3(), flags=PointFlags(is_rapid=True))
    assert point.is_rapid()
    assert not point.is_cutting()
    point.flags.is_cutting = True
    assert point.is_cutting()


def test_default_flags_are_not_shared():
    first = ToolpathPoint(Vec3())
    second = ToolpathPoint(Vec3())
    first.flags.is_plunge = True
    assert second.flags.is_plunge is False
    assert first.flags.is_plunge is True