"""Ray-intersectable objects: spheres and collections of objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

from .interval import Interval
from .ray import Ray
from .vec import Vec3, dot

if TYPE_CHECKING:
    from .material import Material


@dataclass
class HitRecord:
    """Where a ray struck a surface and what the surface is made of."""

    point: Vec3 = field(default_factory=Vec3)
    distance: float = 0.0
    normal: Vec3 = field(default_factory=Vec3)
    front_face: bool = False
    material: Optional["Material"] = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the stored normal against the incoming ray.

        ``outward_normal`` is expected to have unit length.
        """
        self.front_face = dot(ray.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        """Return the nearest hit with distance strictly inside ``interval``."""


@dataclass
class HittableList(Hittable):
    """A group of objects hit as one; the nearest hit wins."""

    objects: list[Hittable] = field(default_factory=list)

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects = list(objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        closest = interval.max
        result: HitRecord | None = None
        for obj in self.objects:
            record = obj.hit(ray, Interval(interval.min, closest))
            if record is not None:
                closest = record.distance
                result = record
        return result


@dataclass
class Sphere(Hittable):
    """A sphere with a centre, a non-negative radius and a material."""

    center: Vec3
    radius: float
    material: Optional["Material"] = None

    def __post_init__(self) -> None:
        self.radius = max(0.0, self.radius)

    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        h = dot(ray.direction, oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        root = (h - sqrt_d) / a
        if not interval.surrounds(root):
            root = (h + sqrt_d) / a
            if not interval.surrounds(root):
                return None

        point = ray.at(root)
        record = HitRecord(point=point, distance=root, material=self.material)
        record.set_face_normal(ray, (point - self.center) / self.radius)
        return record