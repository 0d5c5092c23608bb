"""Binary storage of float matrices and the heightmap cache on disk.

A matrix file holds two 32-bit integers, rows then columns, followed by
the values as 32-bit floats in row order.
"""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Union

import numpy as np

__all__ = [
    "RESOURCES_DIR",
    "HEIGHTMAPS_DIR",
    "build_fullpath",
    "heightmap_path",
    "heightmap_exists",
    "save_matrix",
    "load_matrix",
    "save_heightmap",
]

RESOURCES_DIR = "resources"
HEIGHTMAPS_DIR = "heightmaps"

_HEADER = struct.Struct("<ii")
_FLOAT = np.dtype("<f4")

PathLike = Union[str, "os.PathLike[str]"]


def build_fullpath(folder1: str, folder2: str, filename: str) -> str:
    """Join two folders and a file name with the platform separator."""
    return f"{folder1}{os.sep}{folder2}{os.sep}{filename}"


def heightmap_path(filename: str, root: PathLike = ".") -> Path:
    """Location of a cached heightmap below ``root``."""
    return Path(root) / RESOURCES_DIR / HEIGHTMAPS_DIR / filename


def heightmap_exists(filename: str, root: PathLike = ".") -> bool:
    """Whether the cached heightmap ``filename`` exists below ``root``."""
    return heightmap_path(filename, root).is_file()


def save_matrix(path: PathLike, matrix) -> None:
    """Write a 2D matrix to ``path`` in the binary matrix format."""
    data = np.asarray(matrix, dtype=_FLOAT)
    if data.ndim != 2:
        raise ValueError(f"matrix must be two-dimensional, got shape {data.shape}")
    rows, cols = data.shape
    with open(path, "wb") as f:
        f.write(_HEADER.pack(rows, cols))
        f.write(np.ascontiguousarray(data).tobytes())


def load_matrix(path: PathLike) -> np.ndarray:
    """Read a matrix written by :func:`save_matrix`.

    Raises ``ValueError`` if the header or data is missing or malformed.
    """
    with open(path, "rb") as f:
        header = f.read(_HEADER.size)
        if len(header) != _HEADER.size:
            raise ValueError(f"{path}: truncated matrix header")
        rows, cols = _HEADER.unpack(header)
        if rows < 0 or cols < 0:
            raise ValueError(f"{path}: invalid dimensions {rows} x {cols}")
        expected = rows * cols * _FLOAT.itemsize
        payload = f.read(expected)
    if len(payload) != expected:
        raise ValueError(f"{path}: truncated matrix data")
    return np.frombuffer(payload, dtype=_FLOAT).reshape(rows, cols).copy()


def save_heightmap(filename: str, heightmap, root: PathLike = ".") -> Path:
    """Store ``heightmap`` in the cache below ``root`` and return its path."""
    path = heightmap_path(filename, root)
    path.parent.mkdir(parents=True, exist_ok=True)
    save_matrix(path, heightmap)
    return path