import os
import struct

import numpy as np
import pytest

from torusworld.storage import (
    build_fullpath,
    heightmap_exists,
    heightmap_path,
    load_matrix,
    save_heightmap,
    save_matrix,
)


def test_build_fullpath_uses_platform_separator():
    assert build_fullpath("resources", "heightmaps", "heightmap.bin") == (
        "resources" + os.sep + "heightmaps" + os.sep + "heightmap.bin"
    )


def test_heightmap_path_layout(tmp_path):
    assert heightmap_path("heightmap.bin", tmp_path) == (
        tmp_path / "resources" / "heightmaps" / "heightmap.bin"
    )


def test_matrix_round_trip(tmp_path):
    matrix = [[0.0, 0.25, 0.5], [0.75, 1.0, 0.125]]
    path = tmp_path / "m.bin"
    save_matrix(path, matrix)
    loaded = load_matrix(path)
    assert loaded.shape == (2, 3)
    np.testing.assert_array_equal(loaded, np.array(matrix, dtype=np.float32))


def test_file_layout_header_and_size(tmp_path):
    path = tmp_path / "m.bin"
    save_matrix(path, np.zeros((4, 5)))
    raw = path.read_bytes()
    assert raw[:8] == struct.pack("<ii", 4, 5)
    assert len(raw) == 8 + 4 * 5 * 4


def test_values_stored_as_float32(tmp_path):
    path = tmp_path / "m.bin"
    save_matrix(path, [[1.5]])
    assert path.read_bytes()[8:] == struct.pack("<f", 1.5)


def test_truncated_header_rejected(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"\x01\x00")
    with pytest.raises(ValueError):
        load_matrix(path)


def test_truncated_data_rejected(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(struct.pack("<ii", 2, 2) + struct.pack("<f", 1.0))
    with pytest.raises(ValueError):
        load_matrix(path)


def test_negative_dimensions_rejected(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(struct.pack("<ii", -1, 2))
    with pytest.raises(ValueError):
        load_matrix(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(tmp_path / "absent.bin")


def test_non_2d_matrix_rejected(tmp_path):
    with pytest.raises(ValueError):
        save_matrix(tmp_path / "m.bin", [1.0, 2.0, 3.0])


def test_save_heightmap_creates_directories(tmp_path):
    assert heightmap_exists("heightmap.bin", tmp_path) is False
    heightmap = np.linspace(0.0, 1.0, 12, dtype=np.float32).reshape(3, 4)
    path = save_heightmap("heightmap.bin", heightmap, tmp_path)
    assert path == heightmap_path("heightmap.bin", tmp_path)
    assert heightmap_exists("heightmap.bin", tmp_path) is True
    np.testing.assert_array_equal(load_matrix(path), heightmap)