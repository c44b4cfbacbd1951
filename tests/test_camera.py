import io
import math

import pytest

from weekendtracer import mathutils
from weekendtracer.camera import Camera
from weekendtracer.hittable import HittableList, Sphere
from weekendtracer.material import Material
from weekendtracer.ray import Ray
from weekendtracer.vec import Vec3, dot, unit_vector


def test_height_from_aspect_ratio():
    assert Camera(aspect_ratio=2.0, image_width=10).height() == 5
    assert Camera(aspect_ratio=100.0, image_width=10).height() == 1


def test_pinhole_ray_starts_at_look_from():
    mathutils.seed(1)
    origin = Vec3(1, 2, 3)
    cam = Camera(image_width=4, look_from=origin, look_at=Vec3(0, 0, 0))
    assert cam.get_ray(2, 1).origin == origin


def test_single_pixel_ray_lies_in_viewport():
    mathutils.seed(2)
    cam = Camera(aspect_ratio=1.0, image_width=1, vertical_fov=90.0, focus_distance=1.0)
    for _ in range(20):
        d = cam.get_ray(0, 0).direction
        assert d.z == pytest.approx(-1.0)
        assert abs(d.x) <= 1.0
        assert abs(d.y) <= 1.0


def test_defocus_origin_within_lens():
    mathutils.seed(3)
    cam = Camera(image_width=8, defocus_angle=10.0, focus_distance=2.0)
    radius = 2.0 * math.tan(math.radians(5.0))
    for _ in range(20):
        origin = cam.get_ray(3, 3).origin
        assert origin.z == pytest.approx(0.0)
        assert (origin - cam.look_from).length() <= radius + 1e-12


def test_ray_color_depth_zero_is_black():
    cam = Camera()
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 1, 0)), 0, HittableList()) == Vec3(0, 0, 0)


def test_sky_color():
    cam = Camera()
    world = HittableList()
    assert cam.ray_color(Ray(Vec3(), Vec3(0, -1, 0)), 5, world) == Vec3.splat(1.0)
    for direction in (Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(1, 1, -1)):
        assert cam.ray_color(Ray(Vec3(), direction), 5, world).b == pytest.approx(1.0)


def test_absorbing_world_is_black():
    cam = Camera()
    world = HittableList([Sphere(Vec3(0, 0, -2), 1.0, Material())])
    assert cam.ray_color(Ray(Vec3(), Vec3(0, 0, -1)), 5, world) == Vec3(0, 0, 0)


def test_render_writes_ppm():
    mathutils.seed(4)
    cam = Camera(aspect_ratio=2.0, image_width=4, samples_per_pixel=2, max_depth=3)
    world = HittableList([Sphere(Vec3(0, 0, -1), 0.5, Material())])
    out, log = io.StringIO(), io.StringIO()
    cam.render(world, out, log)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    assert len(lines) == 3 + 4 * 2
    for line in lines[3:]:
        values = [int(v) for v in line.split()]
        assert len(values) == 3
        assert all(0 <= v <= 255 for v in values)
    assert log.getvalue().endswith("Done.                  \n")
    assert "Scanlines remaining 2" in log.getvalue()


def test_center_ray_points_at_target():
    mathutils.seed(5)
    target = Vec3(0, 0, 0)
    cam = Camera(image_width=101, aspect_ratio=1.0, look_from=Vec3(5, 5, 5), look_at=target)
    d = unit_vector(cam.get_ray(50, 50).direction)
    toward = unit_vector(target - cam.look_from)
    assert dot(d, toward) > 0.99