"""Seeded fish population simulation, Perlin noise and procedural lake topography maps."""

__version__ = "0.1.0"