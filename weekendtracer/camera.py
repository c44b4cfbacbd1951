"""A positionable thin-lens camera that renders a scene to PPM text."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from .color import write_color
from .hittable import Hittable
from .interval import Interval
from .mathutils import INFINITY, degrees_to_radians, lerp, random_double, random_in_unit_disk
from .ray import Ray
from .vec import Vec3, cross, unit_vector

_BLACK = Vec3(0.0, 0.0, 0.0)
_WHITE = Vec3.splat(1.0)
_SKY = Vec3(0.5, 0.7, 1.0)


class Camera:
    """Casts anti-aliased rays through an image grid and shades them."""

    def __init__(
        self,
        aspect_ratio: float = 1.0,
        image_width: int = 100,
        look_from: Vec3 = Vec3(0.0, 0.0, 0.0),
        look_at: Vec3 = Vec3(0.0, 0.0, -1.0),
        up: Vec3 = Vec3(0.0, 1.0, 0.0),
        vertical_fov: float = 90.0,
        defocus_angle: float = 0.0,
        focus_distance: float = 10.0,
        samples_per_pixel: int = 50,
        max_depth: int = 10,
    ) -> None:
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.look_from = look_from
        self.look_at = look_at
        self.up = up
        self.vertical_fov = vertical_fov
        self.defocus_angle = defocus_angle
        self.focus_distance = focus_distance
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self._initialize()

    def _initialize(self) -> None:
        self._height = max(1, int(self.image_width / self.aspect_ratio))
        self._sample_scale = 1.0 / self.samples_per_pixel
        self._center = self.look_from

        theta = degrees_to_radians(self.vertical_fov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * self.focus_distance
        viewport_width = viewport_height * (self.image_width / self._height)

        w = unit_vector(self.look_from - self.look_at)
        u = unit_vector(cross(self.up, w))
        v = cross(w, u)

        viewport_u = viewport_width * u
        viewport_v = viewport_height * -v
        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self._height

        upper_left = self._center - self.focus_distance * w - viewport_u / 2 - viewport_v / 2
        self._pixel00 = upper_left + 0.5 * (self._pixel_delta_u + self._pixel_delta_v)

        defocus_radius = self.focus_distance * math.tan(
            degrees_to_radians(self.defocus_angle / 2)
        )
        self._defocus_u = u * defocus_radius
        self._defocus_v = v * defocus_radius

    def height(self) -> int:
        """Image height in pixels, derived from width and aspect ratio."""
        return self._height

    def get_ray(self, i: int, j: int) -> Ray:
        """Return a ray through a random point of pixel (i, j)."""
        dx = random_double() - 0.5
        dy = random_double() - 0.5
        pixel_sample = (
            self._pixel00
            + (i + dx) * self._pixel_delta_u
            + (j + dy) * self._pixel_delta_v
        )
        origin = self._center if self.defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(origin, pixel_sample - origin)

    def _defocus_disk_sample(self) -> Vec3:
        p = random_in_unit_disk()
        return self._center + p.x * self._defocus_u + p.y * self._defocus_v

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Vec3:
        """Trace ``ray`` through ``world`` for at most ``depth`` bounces."""
        if depth <= 0:
            return _BLACK
        record = world.hit(ray, Interval(0.001, INFINITY))
        if record is not None:
            if record.material is None:
                return _BLACK
            result = record.material.scatter(ray, record)
            if result is None:
                return _BLACK
            return result.attenuation * self.ray_color(result.scattered, depth - 1, world)

        unit_dir = unit_vector(ray.direction)
        a = 0.9 * (unit_dir.y + 1.0)
        return lerp(a, _WHITE, _SKY)

    def render(self, world: Hittable, out: TextIO | None = None, log: TextIO | None = None) -> None:
        """Render ``world`` as a P3 PPM image to ``out``, with progress on ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log
        self._initialize()

        out.write(f"P3\n{self.image_width} {self._height}\n255\n")
        for j in range(self._height):
            log.write(f"\rScanlines remaining {self._height - j} ")
            log.flush()
            for i in range(self.image_width):
                pixel = sum(
                    (
                        self.ray_color(self.get_ray(i, j), self.max_depth, world)
                        for _ in range(self.samples_per_pixel)
                    ),
                    Vec3(),
                )
                write_color(out, pixel * self._sample_scale)
        log.write("\rDone.                  \n")