"""Basic 3D geometry: vectors, boxes, rotations and rigid transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """Immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def dot(self, other: Vec3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return all(math.isfinite(c) for c in self)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box given by its two corners."""

    min: Vec3 = field(default_factory=Vec3)
    max: Vec3 = field(default_factory=Vec3)

    def size(self) -> Vec3:
        """Extent along each axis."""
        return self.max - self.min

    def center(self) -> Vec3:
        """Midpoint of the box."""
        return (self.min + self.max) * 0.5

    def contains(self, point: Vec3) -> bool:
        """True if the point lies inside or on the box."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        """The rotation that changes nothing."""
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quaternion:
        """Rotation by ``angle`` radians about ``axis``."""
        norm = axis.length()
        if norm == 0.0:
            raise ValueError("rotation axis must not be zero")
        half = angle * 0.5
        s = math.sin(half) / norm
        return cls(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self.w, self.x, self.y, self.z
        w2, x2, y2, z2 = other.w, other.x, other.y, other.z
        return Quaternion(
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        )

    def conjugate(self) -> Quaternion:
        """Quaternion with the vector part negated."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def normalized(self) -> Quaternion:
        """Unit quaternion in the same direction."""
        norm = math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)
        if norm == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quaternion(self.w / norm, self.x / norm, self.y / norm, self.z / norm)

    def rotate(self, vector: Vec3) -> Vec3:
        """Rotate a vector by this rotation."""
        q = self.normalized()
        u = Vec3(q.x, q.y, q.z)
        t = _cross(u, vector) * 2.0
        return vector + t * q.w + _cross(u, t)

    def is_identity(self, tolerance: float = 1e-9) -> bool:
        """True if this is the identity rotation within ``tolerance``."""
        return (
            abs(self.w - 1.0) < tolerance
            and abs(self.x) < tolerance
            and abs(self.y) < tolerance
            and abs(self.z) < tolerance
        )


@dataclass(frozen=True)
class Transform:
    """Rigid transform: rotation followed by translation."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Quaternion = field(default_factory=Quaternion)

    @classmethod
    def identity(cls) -> Transform:
        """The transform that changes nothing."""
        return cls()

    def transform_point(self, point: Vec3) -> Vec3:
        """Map a point from the local frame into the parent frame."""
        return self.rotation.rotate(point) + self.position

    def inverse(self) -> Transform:
        """Transform that undoes this one."""
        inv_rotation = self.rotation.normalized().conjugate()
        return Transform(-inv_rotation.rotate(self.position), inv_rotation)

    def compose(self, other: Transform) -> Transform:
        """Transform applying ``other`` first and then ``self``."""
        return Transform(
            self.rotation.rotate(other.position) + self.position,
            self.rotation * other.rotation,
        )


def arc_length(start: Vec3, end: Vec3, center: Vec3) -> float:
    """Length of the shorter circular arc from ``start`` to ``end`` around ``center``."""
    start_vec = start - center
    end_vec = end - center
    radius = start_vec.length()
    if radius < 1e-9:
        return 0.0
    cosine = start_vec.dot(end_vec) / (radius * radius)
    cosine = max(-1.0, min(1.0, cosine))
    return radius * math.acos(cosine)