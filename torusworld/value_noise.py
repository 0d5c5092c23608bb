"""Value noise in three and four dimensions.

Every integer lattice point gets a pseudorandom scalar from a sine hash.
Values between lattice points are blended with a Hermite curve. Results
lie in [0, 1].
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

__all__ = ["hash3", "hash4", "noise3d", "noise4d"]


def _fract(x: float) -> float:
    return x - math.floor(x)


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def hash3(x: float, y: float, z: float) -> float:
    """Pseudorandom value in [0, 1) for a 3D point."""
    return _fract(math.sin(x * 127.1 + y * 311.7 + z * 74.7) * 43758.5453)


def hash4(x: float, y: float, z: float, w: float) -> float:
    """Pseudorandom value in [0, 1) for a 4D point."""
    return _fract(
        math.sin(x * 127.1 + y * 311.7 + z * 74.7 + w * 269.5) * 43758.5453
    )


def _value_noise(point: Sequence[float], hash_fn: Callable[..., float]) -> float:
    cell = [math.floor(c) for c in point]
    weights = [_smooth(_fract(c)) for c in point]

    def blend(axis: int, tail: tuple[int, ...]) -> float:
        # The first axis is blended innermost, the last axis outermost.
        if axis < 0:
            return hash_fn(*(float(c + o) for c, o in zip(cell, tail)))
        low = blend(axis - 1, (0,) + tail)
        high = blend(axis - 1, (1,) + tail)
        return _lerp(low, high, weights[axis])

    return blend(len(cell) - 1, ())


def noise3d(x: float, y: float, z: float) -> float:
    """Smooth 3D value noise in [0, 1]."""
    return _value_noise((x, y, z), hash3)


def noise4d(x: float, y: float, z: float, w: float) -> float:
    """Smooth 4D value noise in [0, 1]."""
    return _value_noise((x, y, z, w), hash4)