"""Torus geometry, noise heightmaps on the torus, and terrain meshes.

A heightmap has ``height`` rows and ``width`` columns. Its columns run
around the major circle (angle theta) and its rows around the minor
circle (angle phi), so it wraps seamlessly in both directions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from torusworld.fbm import NoiseType, fbm4d, noise_function_4d
from torusworld.storage import (
    PathLike,
    heightmap_exists,
    heightmap_path,
    load_matrix,
    save_heightmap,
)

__all__ = [
    "Torus",
    "TorusFrame",
    "Mesh",
    "generate_heightmap",
    "get_heightmap",
    "write_pgm",
    "build_torus_mesh",
    "build_flat_torus_mesh",
]

_TAU = 2.0 * math.pi
_FLT_MIN = float(np.finfo(np.float32).tiny)
_MAX_VERTICES = 1 << 16
_TORUS_RELIEF = 400.0
_FLAT_RELIEF = 50.0

_OCTAVES = 6
_LACUNARITY = 2.0
_GAIN = 0.5
_WARP_OFFSET = 0.1
_WARP_STRENGTH = 1.0
_CONTRAST = 4.0


@dataclass(frozen=True)
class TorusFrame:
    """Precomputed angles at one surface point, for repeated queries."""

    major: float
    minor: float
    theta: float
    phi: float
    cos_theta: float
    sin_theta: float
    cos_phi: float
    sin_phi: float

    @property
    def position(self) -> np.ndarray:
        ring = self.major + self.minor * self.cos_phi
        return np.array(
            [ring * self.cos_theta, self.minor * self.sin_phi, ring * self.sin_theta]
        )

    @property
    def normal(self) -> np.ndarray:
        return np.array(
            [self.cos_phi * self.cos_theta, self.sin_phi, self.cos_phi * self.sin_theta]
        )

    @property
    def theta_tangent(self) -> np.ndarray:
        return np.array([-self.sin_theta, 0.0, self.cos_theta])

    @property
    def phi_tangent(self) -> np.ndarray:
        return np.array(
            [-self.sin_phi * self.cos_theta, self.cos_phi, -self.sin_phi * self.sin_theta]
        )


@dataclass(frozen=True)
class Torus:
    """A torus with radii ``major`` and ``minor`` over a width x height map."""

    major: float
    minor: float
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"map size must be positive, got {self.width} x {self.height}"
            )

    def theta(self, u: float) -> float:
        """Angle around the major circle for map column ``u``."""
        return _TAU * u / self.width

    def phi(self, v: float) -> float:
        """Angle around the minor circle for map row ``v``."""
        return _TAU * v / self.height

    def frame(self, u: float, v: float) -> TorusFrame:
        """Angles and their sines and cosines at map point (u, v)."""
        theta = self.theta(u)
        phi = self.phi(v)
        return TorusFrame(
            major=self.major,
            minor=self.minor,
            theta=theta,
            phi=phi,
            cos_theta=math.cos(theta),
            sin_theta=math.sin(theta),
            cos_phi=math.cos(phi),
            sin_phi=math.sin(phi),
        )

    def position(self, u: float, v: float) -> np.ndarray:
        """Point on the surface at map point (u, v)."""
        return self.frame(u, v).position

    def normal(self, u: float, v: float) -> np.ndarray:
        """Outward unit normal at map point (u, v)."""
        return self.frame(u, v).normal

    def theta_tangent(self, u: float, v: float) -> np.ndarray:
        """Unit tangent along the major circle; independent of ``v``."""
        return self.frame(u, 0.0).theta_tangent

    def phi_tangent(self, u: float, v: float) -> np.ndarray:
        """Unit tangent along the minor circle at map point (u, v)."""
        return self.frame(u, v).phi_tangent


@dataclass
class Mesh:
    """Triangle mesh with per-vertex normals and texture coordinates."""

    vertices: np.ndarray
    normals: np.ndarray
    texcoords: np.ndarray
    indices: np.ndarray

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


def _warped_height(point: tuple[float, float, float, float], noise) -> float:
    def fbm(p) -> float:
        return fbm4d(*p, _OCTAVES, _LACUNARITY, _GAIN, noise)

    displacement = []
    for axis in range(4):
        shifted = list(point)
        shifted[axis] += _WARP_OFFSET
        displacement.append(fbm(shifted))
    warped = [c + _WARP_STRENGTH * d for c, d in zip(point, displacement)]
    return fbm(warped) ** _CONTRAST


def generate_heightmap(
    torus: Torus,
    noise_type: NoiseType = NoiseType.PERLIN,
    seed: int = 42,
    scale: float = 0.005,
) -> np.ndarray:
    """Domain-warped fractal noise sampled seamlessly over the torus.

    Returns a float32 array of shape (height, width) with values in [0, 1].
    """
    noise = noise_function_4d(noise_type, seed)
    columns = [
        (
            torus.major * math.cos(u * _TAU / torus.width) * scale,
            torus.major * math.sin(u * _TAU / torus.width) * scale,
        )
        for u in range(torus.width)
    ]
    rows = []
    for v in range(torus.height):
        angle = v * _TAU / torus.height
        nz = torus.minor * math.cos(angle) * scale
        nw = torus.minor * math.sin(angle) * scale
        rows.append([_warped_height((nx, ny, nz, nw), noise) for nx, ny in columns])
    heights = np.array(rows, dtype=np.float32)
    if heights.min() < 0.0 or heights.max() > 1.0:
        raise ValueError("noise produced heights outside [0, 1]")
    return heights


def get_heightmap(
    torus: Torus, filename: str = "heightmap.bin", root: PathLike = "."
) -> np.ndarray:
    """Load the cached heightmap, or generate it and store it in the cache.

    Raises ``ValueError`` if a cached map does not fit ``torus``.
    """
    if heightmap_exists(filename, root):
        heights = load_matrix(heightmap_path(filename, root))
        if heights.shape != (torus.height, torus.width):
            raise ValueError(
                f"cached heightmap has shape {heights.shape}, "
                f"expected {(torus.height, torus.width)}"
            )
        return heights
    heights = generate_heightmap(torus)
    save_heightmap(filename, heights, root)
    return heights


def _check_heightmap(heightmap, torus: Torus | None = None) -> np.ndarray:
    heights = np.asarray(heightmap, dtype=np.float64)
    if heights.ndim != 2 or heights.size == 0:
        raise ValueError(f"heightmap must be a non-empty 2D array, got {heights.shape}")
    if torus is not None and heights.shape != (torus.height, torus.width):
        raise ValueError(
            f"heightmap has shape {heights.shape}, "
            f"expected {(torus.height, torus.width)}"
        )
    if heights.min() < 0.0 or heights.max() > 1.0:
        raise ValueError("heightmap values must lie in [0, 1]")
    return heights


def write_pgm(path: PathLike, heightmap) -> None:
    """Write ``heightmap`` as a binary greyscale PGM image."""
    heights = _check_heightmap(heightmap)
    rows, cols = heights.shape
    pixels = (heights * 255.0).astype(np.uint8)
    Path(path).write_bytes(f"P5\n{cols} {rows}\n255\n".encode("ascii") + pixels.tobytes())


def _relief(heights: np.ndarray, relief: float) -> tuple[float, float]:
    # The floor starts at the smallest positive float, so heights are
    # effectively measured from zero.
    floor = min(float(heights.min()), _FLT_MIN)
    peak = float(heights.max())
    if peak == floor:
        raise ValueError("heightmap is flat")
    return floor, relief / (peak - floor)


def _check_resolution(rings: int, sides: int) -> None:
    if rings <= 0 or sides <= 0:
        raise ValueError(f"rings and sides must be positive, got {rings} and {sides}")
    if rings * sides > _MAX_VERTICES:
        raise ValueError(
            f"{rings * sides} vertices exceed the 16-bit index limit of {_MAX_VERTICES}"
        )


def _angles(rings: int, sides: int) -> tuple[np.ndarray, np.ndarray]:
    theta = (np.arange(rings) / rings * _TAU)[:, None]
    phi = (np.arange(sides) / sides * _TAU)[None, :]
    return theta, phi


def _sample(
    heights: np.ndarray, columns: np.ndarray, rows: np.ndarray
) -> np.ndarray:
    rows_n, cols_n = heights.shape
    sx = np.mod(np.trunc(columns).astype(np.int64), cols_n)
    sy = np.mod(np.trunc(rows).astype(np.int64), rows_n)
    return heights[sy, sx]


def _normalize(vectors: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(vectors, axis=-1, keepdims=True)
    safe = np.where(lengths == 0.0, 1.0, lengths)
    return np.where(lengths == 0.0, 0.0, vectors / safe)


def _assemble(grid: np.ndarray, wrap: bool) -> Mesh:
    rings, sides, _ = grid.shape

    p00 = grid
    p01 = np.roll(grid, -1, axis=1)
    p10 = np.roll(grid, -1, axis=0)
    p11 = np.roll(p10, -1, axis=1)
    n1 = _normalize(np.cross(p01 - p00, p10 - p00))
    n2 = _normalize(np.cross(p01 - p10, p11 - p10))

    normals = (
        n1
        + np.roll(n1, 1, axis=1)
        + np.roll(n1, 1, axis=0)
        + np.roll(n2, 1, axis=0)
        + np.roll(n2, 1, axis=1)
        + np.roll(n2, (1, 1), axis=(0, 1))
    )

    if wrap:
        ii, jj = np.arange(rings), np.arange(sides)
        ii1, jj1 = (ii + 1) % rings, (jj + 1) % sides
    else:
        ii, jj = np.arange(rings - 1), np.arange(sides - 1)
        ii1, jj1 = ii + 1, jj + 1
    v00 = ii[:, None] * sides + jj[None, :]
    v01 = ii[:, None] * sides + jj1[None, :]
    v10 = ii1[:, None] * sides + jj[None, :]
    v11 = ii1[:, None] * sides + jj1[None, :]
    indices = np.stack([v00, v01, v10, v10, v01, v11], axis=-1).reshape(-1)

    i_grid, j_grid = np.meshgrid(np.arange(rings), np.arange(sides), indexing="ij")
    texcoords = np.stack([j_grid / sides, i_grid / rings], axis=-1)

    return Mesh(
        vertices=grid.reshape(-1, 3).astype(np.float32),
        normals=_normalize(normals).reshape(-1, 3).astype(np.float32),
        texcoords=texcoords.reshape(-1, 2).astype(np.float32),
        indices=indices.astype(np.uint16),
    )


def build_torus_mesh(torus: Torus, heightmap, rings: int, sides: int) -> Mesh:
    """A closed torus whose surface is pushed outward by the heightmap."""
    _check_resolution(rings, sides)
    heights = _check_heightmap(heightmap, torus)
    floor, gradient = _relief(heights, _TORUS_RELIEF)

    theta, phi = _angles(rings, sides)
    ring = torus.major + torus.minor * np.cos(phi)
    x = ring * np.cos(theta)
    y = np.broadcast_to(torus.minor * np.sin(phi), x.shape)
    z = ring * np.sin(theta)
    normal = np.stack(
        np.broadcast_arrays(
            np.cos(phi) * np.cos(theta), np.sin(phi), np.cos(phi) * np.sin(theta)
        ),
        axis=-1,
    )

    sampled = _sample(heights, z, torus.height - x)
    lift = (sampled - floor) * gradient
    grid = np.stack([x, y, z], axis=-1) + normal * lift[..., None]
    return _assemble(grid, wrap=True)


def build_flat_torus_mesh(torus: Torus, heightmap, rings: int, sides: int) -> Mesh:
    """The torus surface unrolled onto the x-z plane, heights along y."""
    _check_resolution(rings, sides)
    heights = _check_heightmap(heightmap, torus)
    floor, gradient = _relief(heights, _FLAT_RELIEF)

    half_width = torus.width / 2.0
    half_height = torus.height / 2.0
    theta, phi = _angles(rings, sides)
    x, z = np.broadcast_arrays(
        half_height - phi * torus.minor, torus.major * theta - half_width
    )

    sampled = _sample(heights, z + half_width, half_height - x)
    lift = (sampled - floor) * gradient
    grid = np.stack([x, lift, z], axis=-1)
    return _assemble(grid, wrap=False)