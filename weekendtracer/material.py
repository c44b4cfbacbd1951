"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .hittable import HitRecord
from .mathutils import near_zero, random_double, random_unit_vector
from .ray import Ray
from .vec import Vec3, dot, reflect, refract, unit_vector


@dataclass(frozen=True)
class Scatter:
    """A scattered ray and the colour it is attenuated by."""

    attenuation: Vec3
    scattered: Ray


class Material:
    """A surface that absorbs every ray."""

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        """Return the scattered ray, or None if the ray is absorbed."""
        return None


@dataclass(frozen=True)
class Lambertian(Material):
    """A diffuse surface."""

    albedo: Vec3

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        direction = hit.normal + random_unit_vector()
        if near_zero(direction):
            direction = hit.normal
        return Scatter(self.albedo, Ray(hit.point, direction))


@dataclass(frozen=True)
class Metal(Material):
    """A reflective surface; ``fuzz`` (at most 1) blurs the reflection."""

    albedo: Vec3
    fuzz: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "fuzz", self.fuzz if self.fuzz < 1 else 1.0)

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        reflected = reflect(ray.direction, hit.normal)
        reflected = unit_vector(reflected) + self.fuzz * random_unit_vector()
        scattered = Ray(hit.point, reflected)
        if dot(scattered.direction, hit.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """A clear refracting material such as glass or water."""

    refraction_index: float

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        ratio = 1.0 / self.refraction_index if hit.front_face else self.refraction_index
        unit_direction = unit_vector(ray.direction)
        cos_theta = min(dot(-unit_direction, hit.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ratio) > random_double():
            direction = reflect(unit_direction, hit.normal)
        else:
            direction = refract(unit_direction, hit.normal, ratio)
        return Scatter(Vec3.splat(1.0), Ray(hit.point, direction))

    @staticmethod
    def reflectance(cosine: float, refraction_index: float) -> float:
        """Schlick's approximation of reflectance."""
        r0 = (1 - refraction_index) / (1 + refraction_index)
        r0 = r0 * r0
        return r0 + (1 - r0) * (1 - cosine) ** 5