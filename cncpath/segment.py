"""One motion command of a toolpath, built from toolpath points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cncpath.geometry import Vec3, arc_length
from cncpath.motion import MotionType
from cncpath.point import ToolpathPoint

DEFAULT_RAPID_RATE = 10000.0
TOOL_CHANGE_SECONDS = 5.0


class ArcPlane(Enum):
    """Plane of circular interpolation."""

    XY = auto()
    XZ = auto()
    YZ = auto()


@dataclass(frozen=True)
class ToolpathSegment:
    """Immutable motion segment between two points, mapping to one G-code command."""

    motion_type: MotionType
    start_point: ToolpathPoint
    end_point: ToolpathPoint
    arc_center: Optional[Vec3] = None
    arc_plane: ArcPlane = ArcPlane.XY
    feedrate: float = 0.0
    comment: str = ""
    dwell_duration: float = 0.0
    tool_number: int = 0

    @classmethod
    def rapid(
        cls, start: ToolpathPoint, end: ToolpathPoint, comment: str = ""
    ) -> ToolpathSegment:
        """Rapid positioning (G0)."""
        return cls(MotionType.RAPID, start, end, comment=comment)

    @classmethod
    def linear(
        cls,
        start: ToolpathPoint,
        end: ToolpathPoint,
        feedrate: float,
        comment: str = "",
    ) -> ToolpathSegment:
        """Linear interpolation (G1) at ``feedrate``."""
        return cls(MotionType.LINEAR, start, end, feedrate=feedrate, comment=comment)

    @classmethod
    def arc(
        cls,
        arc_type: MotionType,
        start: ToolpathPoint,
        end: ToolpathPoint,
        center: Vec3,
        plane: ArcPlane,
        feedrate: float,
        comment: str = "",
    ) -> ToolpathSegment:
        """Circular interpolation (G2/G3) around ``center``."""
        return cls(
            arc_type,
            start,
            end,
            arc_center=center,
            arc_plane=plane,
            feedrate=feedrate,
            comment=comment,
        )

    @classmethod
    def dwell(
        cls, point: ToolpathPoint, duration: float, comment: str = ""
    ) -> ToolpathSegment:
        """Pause (G4) of ``duration`` seconds at ``point``."""
        return cls(
            MotionType.DWELL, point, point, comment=comment, dwell_duration=duration
        )

    @classmethod
    def tool_change(
        cls, point: ToolpathPoint, tool_number: int, comment: str = ""
    ) -> ToolpathSegment:
        """Tool change (M6) to ``tool_number`` at ``point``."""
        return cls(
            MotionType.TOOL_CHANGE, point, point, comment=comment, tool_number=tool_number
        )

    def _is_stationary(self) -> bool:
        return self.motion_type in (MotionType.DWELL, MotionType.TOOL_CHANGE)

    def length(self) -> float:
        """Geometric length: arc length for arcs, straight distance otherwise."""
        if self._is_stationary():
            return 0.0
        start = self.start_point.position
        end = self.end_point.position
        if self.motion_type.is_arc():
            if self.arc_center is None:
                return 0.0
            return arc_length(start, end, self.arc_center)
        return (end - start).length()

    def estimated_time(self, default_rapid_rate: float = DEFAULT_RAPID_RATE) -> float:
        """Estimated execution time in seconds."""
        if self.motion_type is MotionType.DWELL:
            return self.dwell_duration
        if self.motion_type is MotionType.TOOL_CHANGE:
            return TOOL_CHANGE_SECONDS
        rate = default_rapid_rate if self.motion_type is MotionType.RAPID else self.feedrate
        if rate <= 0.0:
            return 0.0
        return self.length() / rate * 60.0

    def is_valid(self) -> bool:
        """True if points are finite, feedrate is set where needed and arcs have a center."""
        if not (self.start_point.is_valid() and self.end_point.is_valid()):
            return False
        if self.motion_type.requires_feedrate() and self.feedrate <= 0.0:
            return False
        if self.motion_type.is_arc() and self.arc_center is None:
            return False
        return True

    def is_zero_length(self) -> bool:
        """True if a moving segment starts and ends at the same position."""
        if self._is_stationary():
            return False
        delta = self.end_point.position - self.start_point.position
        return delta.length_squared() < 1e-12