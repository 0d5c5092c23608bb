"""Seeded Perlin gradient noise in two, three and four dimensions."""

from __future__ import annotations

import math
import random
from typing import Callable, Sequence

__all__ = ["Perlin", "grad3d", "grad4d"]

_GRAD2 = (
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


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad2d(hash_value: int, x: float, y: float) -> float:
    a, b = _GRAD2[hash_value & 7]
    return a * x + b * y


def grad3d(hash_value: int, x: float, y: float, z: float) -> float:
    """Dot product of the offset with one of 16 gradient directions."""
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def grad4d(hash_value: int, x: float, y: float, z: float, w: float) -> float:
    """Dot product of the offset with one of 32 gradient directions."""
    h = hash_value & 31
    a = x if h < 24 else y
    b = y if h < 16 else z
    c = z if h < 8 else w
    return (-a if h & 1 else a) + (-b if h & 2 else b) + (-c if h & 4 else c)


class Perlin:
    """Perlin noise over a permutation table shuffled from ``seed``."""

    def __init__(self, seed: int) -> None:
        table = list(range(256))
        random.Random(seed).shuffle(table)
        self._table = tuple(table)
        self._perm = self._table * 2

    @property
    def permutation(self) -> tuple[int, ...]:
        """The 256-entry permutation table."""
        return self._table

    def _noise(
        self, point: Sequence[float], grad: Callable[..., float]
    ) -> float:
        perm = self._perm
        cells = [math.floor(c) & 255 for c in point]
        fracs = [c - math.floor(c) for c in point]
        weights = [_fade(f) for f in fracs]

        def corner(axis: int, tail: tuple[int, ...]) -> float:
            # The first axis is interpolated innermost.
            if axis < 0:
                h = 0
                for cell, offset in zip(cells, tail):
                    h = perm[h + cell + offset]
                return grad(h, *(f - o for f, o in zip(fracs, tail)))
            low = corner(axis - 1, (0,) + tail)
            high = corner(axis - 1, (1,) + tail)
            return _lerp(weights[axis], low, high)

        return corner(len(cells) - 1, ())

    def noise2d(self, x: float, y: float) -> float:
        """2D Perlin noise, roughly in [-1, 1]."""
        return self._noise((x, y), _grad2d)

    def noise3d(self, x: float, y: float, z: float) -> float:
        """3D Perlin noise, roughly in [-1, 1]."""
        return self._noise((x, y, z), grad3d)

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        """4D Perlin noise, roughly in [-1, 1]."""
        return self._noise((x, y, z, w), grad4d)