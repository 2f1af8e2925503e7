"""One atomic CNC instruction as a transition between two machine states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cncpath.geometry import Vec3, arc_length
from cncpath.motion import MoveType
from cncpath.state import ToolpathState

DEFAULT_RAPID_RATE = 10000.0
TOOL_CHANGE_SECONDS = 5.0
SPINDLE_CONTROL_SECONDS = 0.1

_STATIONARY = (
    MoveType.DWELL,
    MoveType.TOOL_CHANGE,
    MoveType.SPINDLE_START,
    MoveType.SPINDLE_STOP,
)


@dataclass(frozen=True)
class ToolpathMove:
    """Immutable move from a start state to an end state."""

    move_type: MoveType
    start_state: ToolpathState
    end_state: ToolpathState
    arc_center: Optional[Vec3] = None
    dwell_duration: float = 0.0
    rapid_allowed: bool = False

    @classmethod
    def rapid(cls, start: ToolpathState, end: ToolpathState) -> ToolpathMove:
        """Rapid positioning move; rapid motion is marked as allowed."""
        return cls(MoveType.RAPID, start, end, rapid_allowed=True)

    @classmethod
    def linear(cls, start: ToolpathState, end: ToolpathState) -> ToolpathMove:
        """Straight cutting move."""
        return cls(MoveType.LINEAR, start, end)

    @classmethod
    def arc(
        cls,
        arc_type: MoveType,
        start: ToolpathState,
        end: ToolpathState,
        center: Vec3,
    ) -> ToolpathMove:
        """Arc cutting move around ``center``."""
        return cls(arc_type, start, end, arc_center=center)

    @classmethod
    def dwell(cls, state: ToolpathState, duration: float) -> ToolpathMove:
        """Pause of ``duration`` seconds in ``state``."""
        return cls(MoveType.DWELL, state, state, dwell_duration=duration)

    @classmethod
    def tool_change(cls, state: ToolpathState, new_tool_id: str) -> ToolpathMove:
        """Tool change move; the end state is the given state unchanged."""
        return cls(MoveType.TOOL_CHANGE, state, state)

    @classmethod
    def spindle_start(cls, state: ToolpathState, rpm: float) -> ToolpathMove:
        """Spindle start move; the end state is the given state unchanged."""
        return cls(MoveType.SPINDLE_START, state, state)

    @classmethod
    def spindle_stop(cls, state: ToolpathState) -> ToolpathMove:
        """Spindle stop move; the end state is the given state unchanged."""
        return cls(MoveType.SPINDLE_STOP, state, state)

    def length(self) -> float:
        """Geometric length: arc length for arcs, straight distance otherwise."""
        if self.move_type in _STATIONARY:
            return 0.0
        start = self.start_state.position
        end = self.end_state.position
        if self.move_type.is_arc():
            if self.arc_center is None:
                return 0.0
            return arc_length(start, end, self.arc_center)
        return (end - start).length()

    def estimated_time(self, default_rapid_rate: float = DEFAULT_RAPID_RATE) -> float:
        """Estimated execution time in seconds."""
        if self.move_type is MoveType.DWELL:
            return self.dwell_duration
        if self.move_type is MoveType.TOOL_CHANGE:
            return TOOL_CHANGE_SECONDS
        if self.move_type in (MoveType.SPINDLE_START, MoveType.SPINDLE_STOP):
            return SPINDLE_CONTROL_SECONDS
        rate = (
            default_rapid_rate
            if self.move_type is MoveType.RAPID
            else self.end_state.feed_rate
        )
        if rate <= 0.0:
            return 0.0
        return self.length() / rate * 60.0

    def is_valid(self) -> bool:
        """True if states are valid and feedrate, arc center and rapid flag are consistent."""
        if not (self.start_state.is_valid() and self.end_state.is_valid()):
            return False
        if self.move_type.requires_feedrate() and not self.end_state.has_feed_rate():
            return False
        if self.move_type.is_arc() and self.arc_center is None:
            return False
        if self.move_type is MoveType.RAPID and not self.rapid_allowed:
            return False
        return True

    def is_zero_length(self) -> bool:
        """True if a moving move starts and ends at the same position."""
        if self.move_type in _STATIONARY:
            return False
        delta = self.end_state.position - self.start_state.position
        return delta.length_squared() < 1e-12