"""Raw stock, work offsets and the workpiece mounted on the machine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from itertools import product

from cncpath.geometry import AABB, Quaternion, Transform, Vec3


class StockType(Enum):
    """Shape of the raw stock."""

    BLOCK = auto()
    CYLINDER = auto()
    CUSTOM = auto()


def _positive(value: float) -> float:
    # NaN fails the comparison and is clamped to zero as well.
    return float(value) if value > 0.0 else 0.0


@dataclass(frozen=True)
class StockDimensions:
    """Stock size along X (width), Y (length) and Z (height); non-positive values become 0."""

    width: float
    length: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _positive(self.width))
        object.__setattr__(self, "length", _positive(self.length))
        object.__setattr__(self, "height", _positive(self.height))

    def dimensions(self) -> Vec3:
        """Dimensions as a vector (width, length, height)."""
        return Vec3(self.width, self.length, self.height)

    def bounding_box(self) -> AABB:
        """Box from the origin corner to (width, length, height)."""
        return AABB(Vec3(0.0, 0.0, 0.0), self.dimensions())

    def volume(self) -> float:
        """Volume of the stock block."""
        return self.width * self.length * self.height

    def center(self) -> Vec3:
        """Center of the stock block."""
        return Vec3(self.width * 0.5, self.length * 0.5, self.height * 0.5)

    def is_valid(self) -> bool:
        """True if all dimensions are positive and finite."""
        return all(v > 0.0 and math.isfinite(v) for v in self.dimensions())

    def equals(self, other: StockDimensions, tolerance: float = 1e-9) -> bool:
        """True if every dimension matches ``other`` within ``tolerance``."""
        return (
            abs(self.width - other.width) < tolerance
            and abs(self.length - other.length) < tolerance
            and abs(self.height - other.height) < tolerance
        )


class WorkOffsetId(IntEnum):
    """Work offset codes."""

    G54 = 1
    G55 = 2
    G56 = 3
    G57 = 4
    G58 = 5
    G59 = 6
    G59_1 = 7
    G59_2 = 8
    G59_3 = 9


@dataclass
class WorkOffset:
    """Work offset: transform from workpiece coordinates to machine coordinates."""

    id: WorkOffsetId = WorkOffsetId.G54
    transform: Transform = field(default_factory=Transform.identity)

    @property
    def translation(self) -> Vec3:
        """Translation part of the offset."""
        return self.transform.position

    @translation.setter
    def translation(self, value: Vec3) -> None:
        self.transform = Transform(value, self.transform.rotation)

    @property
    def rotation(self) -> Quaternion:
        """Rotation part of the offset."""
        return self.transform.rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        self.transform = Transform(self.transform.position, value)

    def workpiece_to_machine(self, workpiece_point: Vec3) -> Vec3:
        """Map a workpiece point into machine coordinates."""
        return self.transform.transform_point(workpiece_point)

    def machine_to_workpiece(self, machine_point: Vec3) -> Vec3:
        """Map a machine point into workpiece coordinates."""
        return self.transform.inverse().transform_point(machine_point)

    def is_translation_only(self) -> bool:
        """True if the offset has no rotation."""
        return self.transform.rotation.is_identity(1e-9)

    def is_valid(self) -> bool:
        """True if no translation component is NaN."""
        return not any(math.isnan(c) for c in self.transform.position)


@dataclass
class Workpiece:
    """Stock mounted on the machine: fixed dimensions and a movable pose."""

    id: str
    name: str
    type: StockType
    dimensions: StockDimensions
    world_transform: Transform = field(default_factory=Transform.identity)

    def bounding_box_in_machine_coords(self) -> AABB:
        """Axis-aligned box around the stock corners in machine coordinates."""
        local = self.dimensions.bounding_box()
        corners = [
            self.world_transform.transform_point(Vec3(x, y, z))
            for x, y, z in product(
                (local.min.x, local.max.x),
                (local.min.y, local.max.y),
                (local.min.z, local.max.z),
            )
        ]
        return AABB(
            Vec3(
                min(c.x for c in corners),
                min(c.y for c in corners),
                min(c.z for c in corners),
            ),
            Vec3(
                max(c.x for c in corners),
                max(c.y for c in corners),
                max(c.z for c in corners),
            ),
        )

    def bounding_box_in_workpiece_coords(self) -> AABB:
        """Stock box in its own frame."""
        return self.dimensions.bounding_box()

    def workpiece_to_machine(self, workpiece_point: Vec3) -> Vec3:
        """Map a workpiece point into machine coordinates."""
        return self.world_transform.transform_point(workpiece_point)

    def machine_to_workpiece(self, machine_point: Vec3) -> Vec3:
        """Map a machine point into workpiece coordinates."""
        return self.world_transform.inverse().transform_point(machine_point)

    def is_valid(self) -> bool:
        """True if ID and name are set and the dimensions are valid."""
        return bool(self.id) and bool(self.name) and self.dimensions.is_valid()