"""The demo scene: a field of random small spheres around three large ones."""

from __future__ import annotations

import argparse
import sys

from .camera import Camera
from .color import random_color
from .hittable import HittableList, Sphere
from .material import Dielectric, Lambertian, Material, Metal
from .mathutils import random_double, seed
from .vec import Vec3

_FOCUS_POINT = Vec3(4, 0.2, 0)


def _random_material() -> Material:
    choose = random_double()
    if choose < 0.8:
        return Lambertian(random_color() * random_color())
    if choose < 0.95:
        return Metal(random_color(0.5, 1.0), random_double(0.0, 0.5))
    return Dielectric(1.5)


def build_world() -> HittableList:
    """Build the scene using the shared random generator."""
    world = HittableList()
    world.add(Sphere(Vec3(0, -1000, 0), 1000, Lambertian(Vec3(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose = random_double()
            center = Vec3(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - _FOCUS_POINT).length() <= 0.9:
                continue
            if choose < 0.8:
                material: Material = Lambertian(random_color() * random_color())
            elif choose < 0.95:
                material = Metal(random_color(0.5, 1.0), random_double(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vec3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vec3(-4, 1, 0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4, 1, 0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return world


def default_camera(width: int = 1080, samples_per_pixel: int = 500, max_depth: int = 50) -> Camera:
    """The camera framing the demo scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=width,
        look_from=Vec3(13, 2, 3),
        look_at=Vec3(0, 0, 0),
        up=Vec3(0, 1, 0),
        vertical_fov=20.0,
        defocus_angle=0.6,
        focus_distance=10.0,
        samples_per_pixel=samples_per_pixel,
        max_depth=max_depth,
    )


def main(argv: list[str] | None = None) -> int:
    """Render the demo scene as PPM to standard output."""
    parser = argparse.ArgumentParser(description="Render the demo scene as a PPM image.")
    parser.add_argument("--width", type=int, default=1080, help="image width in pixels")
    parser.add_argument("--samples", type=int, default=500, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, default=50, help="maximum bounces per ray")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    if args.width < 1:
        parser.error("--width must be at least 1")
    if args.samples < 1:
        parser.error("--samples must be at least 1")

    if args.seed is not None:
        seed(args.seed)
    world = build_world()
    camera = default_camera(args.width, args.samples, args.max_depth)
    camera.render(world, sys.stdout, sys.stderr)
    return 0