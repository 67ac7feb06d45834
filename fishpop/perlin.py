"""Seeded two-dimensional gradient (Perlin) noise."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

_GRADIENTS = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


class Perlin:
    """Gradient noise whose values lie in [-1, 1] and are zero on integer lattice points."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        table = list(range(256))
        random.Random(seed).shuffle(table)
        self._perm = tuple(table)

    def _gradient(self, ix: int, iy: int) -> tuple[float, float]:
        index = self._perm[(self._perm[ix & 255] + iy) & 255]
        return _GRADIENTS[index % len(_GRADIENTS)]

    def get(self, point: Sequence[float]) -> float:
        """Noise value at the 2-D ``point``."""
        if len(point) != 2:
            raise ValueError(f"expected a 2-D point, got {len(point)} coordinates")
        x, y = float(point[0]), float(point[1])
        x0, y0 = math.floor(x), math.floor(y)
        fx, fy = x - x0, y - y0

        def corner(dx: int, dy: int) -> float:
            gx, gy = self._gradient(x0 + dx, y0 + dy)
            return gx * (fx - dx) + gy * (fy - dy)

        u, v = _fade(fx), _fade(fy)
        bottom = _lerp(corner(0, 0), corner(1, 0), u)
        top = _lerp(corner(0, 1), corner(1, 1), u)
        return max(-1.0, min(1.0, _lerp(bottom, top, v)))