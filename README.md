# weekendtracer

A small path tracer in pure Python. It renders scenes made of spheres. The
spheres can be diffuse (Lambertian), metal or glass (dielectric). The camera has
a chosen field of view and can blur with depth of field. The image is written as
a plain-text PPM (`P3`) file.

## Installation

```
pip install .
```

It needs no third-party libraries at run time. To run the tests, install the
`test` extra (`pip install .[test]`) and run `pytest`.

## Rendering the demo scene

The `weekendtracer` command builds the "many random spheres" scene. It writes
the image to standard output and reports progress on standard error:

```
weekendtracer > image.ppm
```

Options:

- `--width N`: image width in pixels (default 1080). The height follows from a 16:9 aspect ratio.
- `--samples N`: samples per pixel (default 500)
- `--max-depth N`: the most bounces a ray may make (default 50)
- `--seed N`: seed the random generator, so the scene and the image can be repeated

Pure Python is slow, so a render at the default settings takes a very long time.
For a quick preview, try something like:

```
weekendtracer --width 200 --samples 10 --seed 1 > preview.ppm
```

## Using the library

```python
import sys

from weekendtracer.camera import Camera
from weekendtracer.hittable import HittableList, Sphere
from weekendtracer.material import Lambertian, Metal
from weekendtracer.vec import Vec3

world = HittableList()
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0, 0, -1), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 0.1)))

camera = Camera(
    aspect_ratio=16 / 9,
    image_width=200,
    look_from=Vec3(0, 0, 0),
    look_at=Vec3(0, 0, -1),
    up=Vec3(0, 1, 0),
    vertical_fov=90,
    defocus_angle=0,
    focus_distance=1,
    samples_per_pixel=10,
    max_depth=10,
)

with open("image.ppm", "w") as out:
    camera.render(world, out, sys.stderr)
```

`Camera.render(world, out=None, log=None)` writes to standard output and
standard error when you give no streams. `Camera.height()` returns the image
height in pixels. `Camera.get_ray(i, j)` and `Camera.ray_color(ray, depth, world)`
give you single samples.

The modules:

- `weekendtracer.vec`: the immutable `Vec3` type (also used for points and colours), with `dot`, `cross`, `unit_vector`, `reflect` and `refract`
- `weekendtracer.ray`: the `Ray` type, with `at(t)`
- `weekendtracer.interval`: the `Interval` type, with `Interval.EMPTY` and `Interval.UNIVERSE`
- `weekendtracer.hittable`: `HitRecord`, the abstract `Hittable`, `HittableList` and `Sphere`. `hit(ray, interval)` returns a `HitRecord` or `None`.
- `weekendtracer.material`: `Material`, `Lambertian`, `Metal`, `Dielectric` and the `Scatter` result. `scatter(ray, hit)` returns a `Scatter` or `None` when the ray is absorbed.
- `weekendtracer.camera`: the `Camera` type
- `weekendtracer.color`: gamma correction (`linear_to_gamma`), pixel conversion (`color_to_bytes`, `to_color_i`), `write_color` and `random_color`
- `weekendtracer.mathutils`: `lerp`, `degrees_to_radians`, random sampling helpers, and `seed` for repeatable renders
- `weekendtracer.scene`: the demo scene, through `build_world()` and `default_camera(width, samples_per_pixel, max_depth)`, and the `main` function behind the command

For repeatable output, call `weekendtracer.mathutils.seed(...)` before you build
the scene and render it.

## Limitations

- The only shapes are spheres.
- The only output format is plain-text PPM. The package does not write PNG or any other image format, and it has no viewer.
- Rendering runs on a single thread.