import pytest

from torusworld.fbm import NoiseType, fbm3d, fbm4d, noise_function_4d
from torusworld.perlin import Perlin
from torusworld.simplex import simplex4d
from torusworld.value_noise import noise3d, noise4d


def test_constant_one_noise_normalises_to_one():
    assert fbm3d(0.3, 0.2, 0.1, 6, 2.0, 0.5, lambda x, y, z: 1.0) == pytest.approx(1.0)


def test_constant_minus_one_noise_normalises_to_zero():
    result = fbm4d(0.3, 0.2, 0.1, 0.9, 6, 2.0, 0.5, lambda x, y, z, w: -1.0)
    assert result == pytest.approx(0.0)


def test_single_octave_is_shifted_noise():
    value = noise3d(1.3, 2.7, 0.4)
    assert fbm3d(1.3, 2.7, 0.4, 1, 2.0, 0.5, noise3d) == pytest.approx((value + 1.0) / 2.0)


def test_frequencies_grow_by_lacunarity():
    calls = []

    def recorder(x, y, z, w):
        calls.append((x, y, z, w))
        return 0.0

    result = fbm4d(1.0, 2.0, 3.0, 4.0, 3, 2.0, 0.5, recorder)
    assert result == pytest.approx(0.5)
    assert calls == [
        (1.0, 2.0, 3.0, 4.0),
        (2.0, 4.0, 6.0, 8.0),
        (4.0, 8.0, 12.0, 16.0),
    ]


def test_value_noise_fbm_stays_in_unit_interval():
    for i in range(20):
        result = fbm4d(i * 0.37, i * 0.11, -i * 0.23, i * 0.05, 6, 2.0, 0.5, noise4d)
        assert 0.0 <= result <= 1.0


def test_zero_octaves_rejected():
    with pytest.raises(ValueError):
        fbm3d(0.0, 0.0, 0.0, 0, 2.0, 0.5, noise3d)


def test_value_type_selects_value_noise():
    assert noise_function_4d(NoiseType.VALUE, 0) is noise4d


def test_simplex_type_selects_simplex_noise():
    assert noise_function_4d(NoiseType.SIMPLEX, 0) is simplex4d


def test_perlin_type_uses_seed():
    fn = noise_function_4d(NoiseType.PERLIN, 42)
    expected = Perlin(42).noise4d(0.5, 1.25, 2.75, 3.5)
    assert fn(0.5, 1.25, 2.75, 3.5) == pytest.approx(expected)


def test_unknown_noise_type_rejected():
    with pytest.raises(ValueError):
        noise_function_4d("cellular", 0)