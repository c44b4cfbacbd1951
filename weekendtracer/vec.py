"""Three-component vectors and the geometric helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: Scalar) -> Vec3:
        """Return a vector with all three components set to ``value``."""
        return cls(value, value, value)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | Scalar) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Vec3 | Scalar) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"


Point3 = Vec3


def dot(v: Vec3, w: Vec3) -> float:
    """Scalar product of two vectors."""
    return v.x * w.x + v.y * w.y + v.z * w.z


def cross(v: Vec3, w: Vec3) -> Vec3:
    """Vector product of two vectors."""
    return Vec3(
        v.y * w.z - v.z * w.y,
        v.z * w.x - v.x * w.z,
        v.x * w.y - v.y * w.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to length one."""
    return v / v.length()


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect ``v`` about the surface with unit normal ``n``."""
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, eta_ratio: float) -> Vec3:
    """Refract unit vector ``uv`` through a surface with unit normal ``n``."""
    cos_theta = min(dot(-uv, n), 1.0)
    perpendicular = eta_ratio * (uv + cos_theta * n)
    parallel = -math.sqrt(abs(1.0 - perpendicular.length_squared())) * n
    return perpendicular + parallel