"""A small path tracer that renders spheres to plain-text PPM images."""

__version__ = "0.1.0"