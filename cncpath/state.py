"""Snapshot of machine state at a point in a toolpath."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple

from cncpath.geometry import Vec3


class CoordinateMode(Enum):
    """Coordinate interpretation: absolute (G90) or incremental (G91)."""

    ABSOLUTE = auto()
    INCREMENTAL = auto()


class CoolantState(Enum):
    """Coolant mode."""

    OFF = auto()
    FLOOD = auto()
    MIST = auto()
    THROUGH = auto()


def _non_negative(value: float) -> float:
    # NaN fails the comparison and is clamped to zero as well.
    return float(value) if value >= 0.0 else 0.0


@dataclass(frozen=True)
class ToolpathState:
    """Immutable machine state: position, rotary axes, feed, spindle, tool, coolant, mode."""

    position: Vec3
    feed_rate: float = 0.0
    spindle_rpm: float = 0.0
    active_tool_id: str = ""
    coolant_state: CoolantState = CoolantState.OFF
    coordinate_mode: CoordinateMode = CoordinateMode.ABSOLUTE
    rotary_axes: Tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        axes = tuple(float(v) for v in self.rotary_axes)
        if len(axes) != 3:
            raise ValueError("rotary_axes must hold exactly three values (A, B, C)")
        object.__setattr__(self, "rotary_axes", axes)
        object.__setattr__(self, "feed_rate", _non_negative(self.feed_rate))
        object.__setattr__(self, "spindle_rpm", _non_negative(self.spindle_rpm))

    @property
    def a(self) -> float:
        """A-axis position."""
        return self.rotary_axes[0]

    @property
    def b(self) -> float:
        """B-axis position."""
        return self.rotary_axes[1]

    @property
    def c(self) -> float:
        """C-axis position."""
        return self.rotary_axes[2]

    def has_feed_rate(self) -> bool:
        """True if a positive feed rate is set."""
        return self.feed_rate > 0.0

    def is_spindle_running(self) -> bool:
        """True if the spindle speed is positive."""
        return self.spindle_rpm > 0.0

    def has_active_tool(self) -> bool:
        """True if a tool is loaded."""
        return bool(self.active_tool_id)

    def is_coolant_on(self) -> bool:
        """True unless coolant is off."""
        return self.coolant_state is not CoolantState.OFF

    def is_absolute_mode(self) -> bool:
        """True in absolute coordinate mode."""
        return self.coordinate_mode is CoordinateMode.ABSOLUTE

    def is_incremental_mode(self) -> bool:
        """True in incremental coordinate mode."""
        return self.coordinate_mode is CoordinateMode.INCREMENTAL

    def is_valid(self) -> bool:
        """True if every numeric component is finite."""
        return (
            self.position.is_finite()
            and all(math.isfinite(v) for v in self.rotary_axes)
            and math.isfinite(self.feed_rate)
            and math.isfinite(self.spindle_rpm)
        )