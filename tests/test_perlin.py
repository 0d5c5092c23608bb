import pytest

from torusworld.perlin import Perlin, grad3d, grad4d

POINTS = [(0.3, 0.7, 1.2, 2.9), (-5.4, 3.1, 0.05, -0.6), (12.25, -7.75, 4.5, 9.1)]


@pytest.fixture
def perlin():
    return Perlin(42)


def test_permutation_is_a_permutation(perlin):
    assert sorted(perlin.permutation) == list(range(256))


def test_seeded_table_is_shuffled():
    table = list(Perlin(7).permutation)
    assert sorted(table) == list(range(256))
    assert table != list(range(256))


def test_different_seeds_differ():
    assert Perlin(1).permutation != Perlin(2).permutation


def test_same_seed_same_noise():
    a, b = Perlin(3), Perlin(3)
    for x, y, z, w in POINTS:
        assert a.noise4d(x, y, z, w) == b.noise4d(x, y, z, w)


@pytest.mark.parametrize("x,y", [(0, 0), (3, 5), (-2, 7), (300, -1)])
def test_noise2d_zero_at_lattice(perlin, x, y):
    assert perlin.noise2d(float(x), float(y)) == 0.0


@pytest.mark.parametrize("x,y,z", [(0, 0, 0), (1, -4, 9), (-17, 2, 33)])
def test_noise3d_zero_at_lattice(perlin, x, y, z):
    assert perlin.noise3d(float(x), float(y), float(z)) == 0.0


@pytest.mark.parametrize("x,y,z,w", [(0, 0, 0, 0), (2, -3, 5, 8)])
def test_noise4d_zero_at_lattice(perlin, x, y, z, w):
    assert perlin.noise4d(float(x), float(y), float(z), float(w)) == 0.0


def test_noise3d_repeats_every_256(perlin):
    for x, y, z, _ in POINTS:
        assert perlin.noise3d(x + 256.0, y, z) == pytest.approx(
            perlin.noise3d(x, y, z), abs=1e-9
        )


def test_noise2d_repeats_every_256(perlin):
    for x, y, _, _ in POINTS:
        assert perlin.noise2d(x, y - 256.0) == pytest.approx(
            perlin.noise2d(x, y), abs=1e-9
        )


def test_noise_is_bounded(perlin):
    for x, y, z, w in POINTS:
        assert abs(perlin.noise2d(x, y)) <= 2.0
        assert abs(perlin.noise3d(x, y, z)) <= 2.0
        assert abs(perlin.noise4d(x, y, z, w)) <= 3.0


def test_noise3d_is_continuous(perlin):
    for x, y, z, _ in POINTS:
        assert abs(perlin.noise3d(x, y, z) - perlin.noise3d(x, y + 1e-6, z)) < 1e-4


def test_noise_is_not_constant(perlin):
    values = {round(perlin.noise3d(x * 0.37, 0.5, 0.5), 9) for x in range(1, 20)}
    assert len(values) > 5


def test_grad3d_sign_bits_negate():
    assert grad3d(3, 0.4, -1.5, 2.0) == pytest.approx(-grad3d(0, 0.4, -1.5, 2.0))


def test_grad3d_uses_low_four_bits():
    assert grad3d(5, 0.1, 0.2, 0.3) == grad3d(5 + 16, 0.1, 0.2, 0.3)


def test_grad3d_first_direction():
    assert grad3d(0, 1.0, 2.0, 3.0) == 3.0


def test_grad4d_uses_low_five_bits():
    assert grad4d(9, 0.1, 0.2, 0.3, 0.4) == grad4d(9 + 32, 0.1, 0.2, 0.3, 0.4)


def test_grad4d_all_sign_bits_negate():
    assert grad4d(7, 0.5, -0.25, 1.5, 2.0) == pytest.approx(
        -grad4d(0, 0.5, -0.25, 1.5, 2.0)
    )


def test_grad_zero_offset_is_zero():
    for h in range(32):
        assert grad3d(h, 0.0, 0.0, 0.0) == 0.0
        assert grad4d(h, 0.0, 0.0, 0.0, 0.0) == 0.0