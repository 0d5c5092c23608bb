"""Fractal Brownian motion built on any 3D or 4D noise function."""

from __future__ import annotations

import enum
from typing import Callable

from torusworld.perlin import Perlin
from torusworld.simplex import simplex4d
from torusworld.value_noise import noise4d

__all__ = ["NoiseType", "fbm3d", "fbm4d", "noise_function_4d"]

NoiseFunction3D = Callable[[float, float, float], float]
NoiseFunction4D = Callable[[float, float, float, float], float]


class NoiseType(enum.Enum):
    """The noise families a heightmap can be built from."""

    VALUE = "value"
    PERLIN = "perlin"
    SIMPLEX = "simplex"


def _fbm(
    point: tuple[float, ...],
    octaves: int,
    lacunarity: float,
    gain: float,
    noise: Callable[..., float],
) -> float:
    if octaves < 1:
        raise ValueError(f"octaves must be at least 1, got {octaves}")
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0
    for _ in range(octaves):
        total += noise(*(c * frequency for c in point)) * amplitude
        max_value += amplitude
        amplitude *= gain
        frequency *= lacunarity
    # Noise in [-1, 1] maps to [0, 1].
    return (total / max_value + 1.0) / 2.0


def fbm3d(
    x: float,
    y: float,
    z: float,
    octaves: int,
    lacunarity: float,
    gain: float,
    noise: NoiseFunction3D,
) -> float:
    """Sum ``octaves`` layers of 3D ``noise``, normalised to [0, 1]."""
    return _fbm((x, y, z), octaves, lacunarity, gain, noise)


def fbm4d(
    x: float,
    y: float,
    z: float,
    w: float,
    octaves: int,
    lacunarity: float,
    gain: float,
    noise: NoiseFunction4D,
) -> float:
    """Sum ``octaves`` layers of 4D ``noise``, normalised to [0, 1]."""
    return _fbm((x, y, z, w), octaves, lacunarity, gain, noise)


def noise_function_4d(noise_type: NoiseType, seed: int = 42) -> NoiseFunction4D:
    """Return the 4D noise function for ``noise_type``.

    ``seed`` only affects Perlin noise; the other families are fixed.
    """
    if noise_type is NoiseType.VALUE:
        return noise4d
    if noise_type is NoiseType.PERLIN:
        return Perlin(seed).noise4d
    if noise_type is NoiseType.SIMPLEX:
        return simplex4d
    raise ValueError(f"unknown noise type: {noise_type!r}")