"""Simplex noise in three and four dimensions over a fixed permutation."""

from __future__ import annotations

import math
from typing import Sequence

__all__ = ["simplex3d", "simplex4d"]

_F3 = 0.3333333
_G3 = 0.1666667
_F4 = 0.309017
_G4 = 0.1381966

_GRAD3 = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

_GRAD4 = (
    (0, 1, 1, 1), (0, 1, 1, -1), (0, 1, -1, 1), (0, 1, -1, -1),
    (0, -1, 1, 1), (0, -1, 1, -1), (0, -1, -1, 1), (0, -1, -1, -1),
    (1, 0, 1, 1), (1, 0, 1, -1), (1, 0, -1, 1), (1, 0, -1, -1),
    (-1, 0, 1, 1), (-1, 0, 1, -1), (-1, 0, -1, 1), (-1, 0, -1, -1),
    (1, 1, 0, 1), (1, 1, 0, -1), (1, -1, 0, 1), (1, -1, 0, -1),
    (-1, 1, 0, 1), (-1, 1, 0, -1), (-1, -1, 0, 1), (-1, -1, 0, -1),
    (1, 1, 1, 0), (1, 1, -1, 0), (1, -1, 1, 0), (1, -1, -1, 0),
    (-1, 1, 1, 0), (-1, 1, -1, 0), (-1, -1, 1, 0), (-1, -1, -1, 0),
)

_PERM = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)


def _hash(cell: Sequence[int]) -> int:
    """Fold lattice coordinates through the permutation, last axis first."""
    h = 0
    for c in reversed(cell):
        h = _PERM[(c + h) & 255]
    return h


def _contribution(gradient: Sequence[int], offset: Sequence[float]) -> float:
    t = 0.6 - sum(d * d for d in offset)
    if t < 0:
        return 0.0
    t *= t
    return t * t * sum(g * d for g, d in zip(gradient, offset))


def _simplex_sum(
    base: Sequence[int],
    origin_offset: Sequence[float],
    corners: Sequence[Sequence[int]],
    unskew: float,
    grads: Sequence[Sequence[int]],
    grad_index,
) -> float:
    total = 0.0
    for n, corner in enumerate(corners):
        offset = [d - o + n * unskew for d, o in zip(origin_offset, corner)]
        h = _hash([b + o for b, o in zip(base, corner)])
        total += _contribution(grads[grad_index(h)], offset)
    return total


def simplex3d(x: float, y: float, z: float) -> float:
    """3D simplex noise, roughly in [-1, 1]."""
    s = (x + y + z) * _F3
    i, j, k = math.floor(x + s), math.floor(y + s), math.floor(z + s)
    t = (i + j + k) * _G3
    x0, y0, z0 = x - (i - t), y - (j - t), z - (k - t)

    if x0 >= y0:
        if y0 >= z0:
            first, second = (1, 0, 0), (1, 1, 0)
        elif x0 >= z0:
            first, second = (1, 0, 0), (1, 0, 1)
        else:
            first, second = (0, 0, 1), (1, 0, 1)
    else:
        if y0 < z0:
            first, second = (0, 0, 1), (0, 1, 1)
        elif x0 < z0:
            first, second = (0, 1, 0), (0, 1, 1)
        else:
            first, second = (0, 1, 0), (1, 1, 0)

    corners = ((0, 0, 0), first, second, (1, 1, 1))
    total = _simplex_sum(
        (i, j, k), (x0, y0, z0), corners, _G3, _GRAD3, lambda h: h % 12
    )
    return 32.0 * total


def simplex4d(x: float, y: float, z: float, w: float) -> float:
    """4D simplex noise, roughly in [-1, 1]."""
    s = (x + y + z + w) * _F4
    cell = tuple(math.floor(c + s) for c in (x, y, z, w))
    t = sum(cell) * _G4
    origin_offset = [c - (b - t) for c, b in zip((x, y, z, w), cell)]

    ranks = [
        sum(1 for b, other in enumerate(origin_offset) if b != a and value > other)
        for a, value in enumerate(origin_offset)
    ]
    corners = [tuple(int(r >= 4 - n) for r in ranks) for n in range(5)]
    total = _simplex_sum(
        cell, origin_offset, corners, _G4, _GRAD4, lambda h: h & 31
    )
    return 27.0 * total