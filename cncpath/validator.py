"""Checks of toolpath geometry, continuity, machine limits and tool use."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from cncpath.move import ToolpathMove
from cncpath.motion import MoveType
from cncpath.toolpath import Toolpath

RADIUS_TOLERANCE = 1e-6
MIN_RADIUS = 1e-9
CONTINUITY_TOLERANCE = 1e-6


class ValidationError(ValueError):
    """Raised when a toolpath fails validation."""


def _fmt(value: float) -> str:
    return f"{value:f}"


@dataclass(frozen=True)
class AxisLimits:
    """Travel range of one machine axis."""

    min_position: float
    max_position: float

    def contains(self, value: float) -> bool:
        """True if ``value`` lies within the travel range."""
        return self.min_position <= value <= self.max_position


@dataclass(frozen=True)
class MachineLimits:
    """Axis travel ranges and spindle speed range of a machine.

    An axis left as ``None`` is not present on the machine and is not checked.
    """

    x: Optional[AxisLimits] = None
    y: Optional[AxisLimits] = None
    z: Optional[AxisLimits] = None
    a: Optional[AxisLimits] = None
    b: Optional[AxisLimits] = None
    c: Optional[AxisLimits] = None
    spindle_min_rpm: float = 0.0
    spindle_max_rpm: float = math.inf


def validate(toolpath: Toolpath, machine: Optional[MachineLimits] = None) -> None:
    """Run every check on ``toolpath``; raise ValidationError on the first failure."""
    if toolpath.is_empty():
        return
    moves = list(toolpath)
    for index, move in enumerate(moves):
        validate_move(move, index)
        if index + 1 < len(moves):
            validate_continuity(move, moves[index + 1], index)
        if machine is not None:
            validate_machine_limits(move, machine, index)
    if machine is not None:
        validate_tool_consistency(toolpath, machine)


def validate_move(move: ToolpathMove, index: int) -> None:
    """Check a single move on its own."""
    if not move.is_valid():
        raise ValidationError(f"Toolpath move {index} is invalid")

    if move.is_zero_length():
        raise ValidationError(
            f"Toolpath move {index} has zero length "
            "(start and end positions are identical)"
        )

    if move.move_type.requires_feedrate() and not move.end_state.has_feed_rate():
        raise ValidationError(
            f"Toolpath move {index} is a cutting motion but has no feedrate"
        )

    if move.move_type.is_arc():
        validate_arc(move, index)

    if move.move_type is MoveType.RAPID and not move.rapid_allowed:
        raise ValidationError(
            f"Toolpath move {index} is a rapid move but rapid is not allowed "
            "(safety violation)"
        )


def validate_arc(move: ToolpathMove, index: int) -> None:
    """Check that an arc has a center equidistant from its start and end."""
    if move.arc_center is None:
        raise ValidationError(
            f"Toolpath move {index} is an arc but has no center point"
        )
    center = move.arc_center
    start_radius = (move.start_state.position - center).length()
    end_radius = (move.end_state.position - center).length()
    radius_error = abs(start_radius - end_radius)
    if radius_error > RADIUS_TOLERANCE:
        raise ValidationError(
            f"Toolpath move {index} arc has inconsistent radius: "
            f"start={_fmt(start_radius)}, end={_fmt(end_radius)}, "
            f"error={_fmt(radius_error)}"
        )
    if start_radius < MIN_RADIUS:
        raise ValidationError(f"Toolpath move {index} arc has zero radius")


def validate_continuity(move1: ToolpathMove, move2: ToolpathMove, index: int) -> None:
    """Check that ``move2`` starts where ``move1`` ends."""
    end1 = move1.end_state.position
    start2 = move2.start_state.position
    distance = (end1 - start2).length()
    if distance > CONTINUITY_TOLERANCE:
        raise ValidationError(
            f"Toolpath discontinuity at move {index}: end position "
            f"({_fmt(end1.x)}, {_fmt(end1.y)}, {_fmt(end1.z)}) "
            "does not match next start position "
            f"({_fmt(start2.x)}, {_fmt(start2.y)}, {_fmt(start2.z)}) "
            f"distance={_fmt(distance)}"
        )


def _check_axis(
    index: int,
    name: str,
    limits: Optional[AxisLimits],
    values: Iterable[Tuple[str, float]],
) -> None:
    if limits is None:
        return
    for which, value in values:
        if not limits.contains(value):
            raise ValidationError(
                f"Toolpath move {index} {which} {name} position {_fmt(value)} "
                f"exceeds machine limits [{_fmt(limits.min_position)}, "
                f"{_fmt(limits.max_position)}]"
            )


def validate_machine_limits(
    move: ToolpathMove, machine: MachineLimits, index: int
) -> None:
    """Check that positions, rotary axes and spindle speed fit the machine."""
    start = move.start_state
    end = move.end_state
    linear: Sequence[Tuple[str, Optional[AxisLimits], float, float]] = (
        ("X", machine.x, start.position.x, end.position.x),
        ("Y", machine.y, start.position.y, end.position.y),
        ("Z", machine.z, start.position.z, end.position.z),
        ("A", machine.a, start.a, end.a),
        ("B", machine.b, start.b, end.b),
        ("C", machine.c, start.c, end.c),
    )
    for name, limits, start_value, end_value in linear:
        _check_axis(index, name, limits, (("start", start_value), ("end", end_value)))

    if end.is_spindle_running():
        rpm = end.spindle_rpm
        if rpm < machine.spindle_min_rpm or rpm > machine.spindle_max_rpm:
            raise ValidationError(
                f"Toolpath move {index} spindle RPM {_fmt(rpm)} exceeds machine "
                f"limits [{_fmt(machine.spindle_min_rpm)}, "
                f"{_fmt(machine.spindle_max_rpm)}]"
            )


def validate_tool_consistency(toolpath: Toolpath, machine: MachineLimits) -> None:
    """Check that tool changes name a tool and cutting moves have one active."""
    for index, move in enumerate(toolpath):
        tool_id = move.end_state.active_tool_id
        if move.move_type is MoveType.TOOL_CHANGE and not tool_id:
            raise ValidationError(
                f"Toolpath move {index} is a tool change but has no tool ID"
            )
        if move.move_type.is_cutting() and not tool_id:
            raise ValidationError(
                f"Toolpath move {index} is a cutting motion but has no active tool"
            )


def is_valid(toolpath: Toolpath, machine: Optional[MachineLimits] = None) -> bool:
    """True if ``toolpath`` passes every check."""
    try:
        validate(toolpath, machine)
    except ValidationError:
        return False
    return True