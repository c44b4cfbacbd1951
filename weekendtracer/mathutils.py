"""Numeric helpers and random sampling used by the renderer."""

from __future__ import annotations

import math
import random as _random
from typing import TypeVar

from .vec import Vec3, dot

INFINITY = math.inf
PI = 3.1415926535897932385

_rng = _random.Random()

T = TypeVar("T")


def lerp(t: float, start: T, end: T) -> T:
    """Linear interpolation from ``start`` (t=0) to ``end`` (t=1)."""
    return (1 - t) * start + t * end


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI / 180.0


def seed(value: int | None) -> None:
    """Seed the shared random generator."""
    _rng.seed(value)


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random float in ``[low, high)``."""
    return low + (high - low) * _rng.random()


def random_vec(low: float = 0.0, high: float = 1.0) -> Vec3:
    """Return a vector whose components are each random in ``[low, high)``."""
    return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))


def random_unit_vector() -> Vec3:
    """Return a uniformly distributed random unit vector."""
    while True:
        p = random_vec(-1.0, 1.0)
        lensq = p.length_squared()
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """Return a random unit vector in the hemisphere around ``normal``."""
    on_sphere = random_unit_vector()
    return on_sphere if dot(on_sphere, normal) > 0.0 else -on_sphere


def random_in_unit_disk() -> Vec3:
    """Return a random point inside the unit disk in the xy plane."""
    while True:
        p = Vec3(random_double(-1.0, 1.0), random_double(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def near_zero(v: Vec3) -> bool:
    """True when every component of ``v`` is tiny."""
    e = 1e-8
    return abs(v.x) < e and abs(v.y) < e and abs(v.z) < e