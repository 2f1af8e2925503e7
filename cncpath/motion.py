"""Motion and move type enumerations for toolpaths."""

from __future__ import annotations

from enum import Enum, auto


class MotionType(Enum):
    """Segment motion types: G0, G1, G2, G3, G4 and M6."""

    RAPID = auto()
    LINEAR = auto()
    ARC_CW = auto()
    ARC_CCW = auto()
    DWELL = auto()
    TOOL_CHANGE = auto()

    def is_cutting(self) -> bool:
        """True for motions that remove material."""
        return self in (MotionType.LINEAR, MotionType.ARC_CW, MotionType.ARC_CCW)

    def is_arc(self) -> bool:
        """True for circular interpolation."""
        return self in (MotionType.ARC_CW, MotionType.ARC_CCW)

    def requires_feedrate(self) -> bool:
        """True for motions that need a feedrate."""
        return self.is_cutting()


class MoveType(Enum):
    """Toolpath move types, including spindle control."""

    RAPID = auto()
    LINEAR = auto()
    ARC_CW = auto()
    ARC_CCW = auto()
    DWELL = auto()
    TOOL_CHANGE = auto()
    SPINDLE_START = auto()
    SPINDLE_STOP = auto()

    def is_cutting(self) -> bool:
        """True for moves that remove material."""
        return self in (MoveType.LINEAR, MoveType.ARC_CW, MoveType.ARC_CCW)

    def is_arc(self) -> bool:
        """True for circular interpolation."""
        return self in (MoveType.ARC_CW, MoveType.ARC_CCW)

    def requires_feedrate(self) -> bool:
        """True for moves that need a feedrate."""
        return self.is_cutting()

    def is_control(self) -> bool:
        """True for moves that change machine state without motion."""
        return self in (MoveType.TOOL_CHANGE, MoveType.SPINDLE_START, MoveType.SPINDLE_STOP)