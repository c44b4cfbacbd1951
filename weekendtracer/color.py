"""Colour conversion and output in plain PPM text form."""

from __future__ import annotations

import math
from typing import TextIO

from .interval import Interval
from .mathutils import random_vec
from .vec import Vec3

Color = Vec3

_INTENSITY = Interval(0.0, 0.999)


def to_color_i(color: Color) -> Vec3:
    """Scale a linear colour in [0, 1] to integer components in [0, 255]."""
    return Vec3(int(255.999 * color.r), int(255.999 * color.g), int(255.999 * color.b))


def linear_to_gamma(linear_component: float) -> float:
    """Apply gamma 2 correction; non-positive input gives zero."""
    return math.sqrt(linear_component) if linear_component > 0.0 else 0.0


def color_to_bytes(color: Color) -> tuple[int, int, int]:
    """Gamma-correct and clamp a colour to three byte values."""
    r, g, b = (int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in color)
    return r, g, b


def write_color(out: TextIO, color: Color) -> None:
    """Write one pixel as a line of three byte values."""
    r, g, b = color_to_bytes(color)
    out.write(f"{r} {g} {b}\n")


def random_color(low: float = 0.0, high: float = 1.0) -> Color:
    """Return a colour with each channel random in ``[low, high)``."""
    return random_vec(low, high)