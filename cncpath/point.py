"""Single tool position with optional orientation and motion overrides."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cncpath.geometry import Quaternion, Transform, Vec3


@dataclass
class PointFlags:
    """Motion characteristics of a toolpath point."""

    is_rapid: bool = False
    is_cutting: bool = False
    is_plunge: bool = False
    is_retract: bool = False


@dataclass
class ToolpathPoint:
    """Tool tip position, orientation (vertical by default), overrides and flags."""

    position: Vec3
    orientation: Optional[Quaternion] = None
    feedrate: Optional[float] = None
    spindle_speed: Optional[float] = None
    flags: PointFlags = field(default_factory=PointFlags)

    def __post_init__(self) -> None:
        if self.orientation is None:
            self.orientation = Quaternion.identity()

    def has_orientation(self) -> bool:
        """True if the orientation differs from vertical."""
        return not self.orientation.is_identity(1e-9)

    def has_feedrate(self) -> bool:
        """True if a feedrate override is set."""
        return self.feedrate is not None

    def has_spindle_speed(self) -> bool:
        """True if a spindle speed override is set."""
        return self.spindle_speed is not None

    def tool_transform(self) -> Transform:
        """Pose of the tool at this point."""
        return Transform(self.position, self.orientation)

    def is_valid(self) -> bool:
        """True if the position is finite."""
        return self.position.is_finite()

    def is_rapid(self) -> bool:
        """True if flagged as rapid positioning."""
        return self.flags.is_rapid

    def is_cutting(self) -> bool:
        """True if flagged as a cutting motion."""
        return self.flags.is_cutting