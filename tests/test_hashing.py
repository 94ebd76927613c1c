import math

import pytest

from terrain.noise import hashing
from terrain.noise.tables2d import RAND_VECS_2D

SEEDS = [0, 1337, -42, 2**31 - 1]
POINTS = [(0, 0), (5, -3), (hashing.PRIME_X, hashing.PRIME_Y), (-123456789, 987654321)]


@pytest.mark.parametrize("f", [0.3, 1.7, -0.3, -1.7, 12.999, -7.25])
def test_fast_floor_brackets_value(f):
    n = hashing.fast_floor(f)
    assert n <= f < n + 1


def test_fast_floor_of_negative_whole_number_steps_down():
    assert hashing.fast_floor(-1.0) == int(-1.0) - 1


@pytest.mark.parametrize("f", [0.2, 0.7, 2.5, -0.2, -0.7, -2.5, 9.49])
def test_fast_round_is_within_half(f):
    assert abs(f - hashing.fast_round(f)) <= 0.5


def test_fast_round_half_goes_away_from_zero():
    assert hashing.fast_round(2.5) == 3
    assert hashing.fast_round(-2.5) == -3


@pytest.mark.parametrize("a,b", [(0.0, 1.0), (-3.0, 7.5), (2.0, 2.0)])
def test_lerp_endpoints(a, b):
    assert hashing.lerp(a, b, 0.0) == a
    assert hashing.lerp(a, b, 1.0) == pytest.approx(b)


@pytest.mark.parametrize("curve", [hashing.interp_hermite, hashing.interp_quintic])
def test_interpolation_curves_fix_endpoints_and_midpoint(curve):
    assert curve(0.0) == 0.0
    assert curve(1.0) == pytest.approx(1.0)
    assert curve(0.5) == pytest.approx(0.5)


@pytest.mark.parametrize("curve", [hashing.interp_hermite, hashing.interp_quintic])
def test_interpolation_curves_are_monotonic(curve):
    samples = [curve(n / 20) for n in range(21)]
    assert samples == sorted(samples)


def test_cubic_lerp_passes_through_inner_points():
    assert hashing.cubic_lerp(4.0, -1.0, 3.0, 8.0, 0.0) == -1.0
    assert hashing.cubic_lerp(4.0, -1.0, 3.0, 8.0, 1.0) == pytest.approx(3.0)


@pytest.mark.parametrize("t", [0.0, 0.25, 0.9, 1.3, 2.6, 5.1])
def test_ping_pong_range_and_period(t):
    value = hashing.ping_pong(t)
    assert 0.0 <= value <= 1.0
    assert hashing.ping_pong(t + 2.0) == pytest.approx(value)


@pytest.mark.parametrize("d", [0.1, 0.4, 0.75])
def test_ping_pong_is_symmetric_about_one(d):
    assert hashing.ping_pong(1 + d) == pytest.approx(hashing.ping_pong(1 - d))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_hash2d_is_unsigned_32_bit_and_symmetric(seed, x, y):
    h = hashing.hash2d(seed, x, y)
    assert 0 <= h < 2**32
    assert h == hashing.hash2d(seed, y, x)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_hash3d_with_zero_z_matches_hash2d(seed, x, y):
    assert hashing.hash3d(seed, x, y, 0) == hashing.hash2d(seed, x, y)


@pytest.mark.parametrize("seed", SEEDS)
def test_hash_only_uses_low_32_bits(seed):
    assert hashing.hash2d(seed + 2**32, 17, 29) == hashing.hash2d(seed, 17, 29)
    assert hashing.hash2d(seed, hashing.PRIME_Y2, 0) == hashing.hash2d(
        seed, 2 * hashing.PRIME_Y, 0)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_val_coords_in_unit_range(seed, x, y):
    assert -1.0 <= hashing.val_coord2d(seed, x, y) < 1.0
    assert -1.0 <= hashing.val_coord3d(seed, x, y, x ^ y) < 1.0


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord2d_is_linear_in_offset(seed, x, y):
    assert hashing.grad_coord2d(seed, x, y, 0.0, 0.0) == 0.0
    base = hashing.grad_coord2d(seed, x, y, 0.3, -0.6)
    assert hashing.grad_coord2d(seed, x, y, 0.6, -1.2) == pytest.approx(2 * base)
    assert abs(base) <= math.hypot(0.3, -0.6) + 1e-6


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord3d_bounded_and_linear(seed, x, y):
    z = x - y
    assert hashing.grad_coord3d(seed, x, y, z, 0.0, 0.0, 0.0) == 0.0
    base = hashing.grad_coord3d(seed, x, y, z, 0.2, 0.5, -0.4)
    assert hashing.grad_coord3d(seed, x, y, z, -0.2, -0.5, 0.4) == pytest.approx(-base)
    assert abs(base) <= math.sqrt(2) * math.sqrt(0.2**2 + 0.5**2 + 0.4**2) + 1e-6


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_out2d_is_table_unit_vector(seed, x, y):
    vx, vy = hashing.grad_coord_out2d(seed, x, y)
    assert math.hypot(vx, vy) == pytest.approx(1.0, abs=1e-5)
    pairs = list(zip(RAND_VECS_2D[0::2], RAND_VECS_2D[1::2]))
    assert (vx, vy) in pairs


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_out3d_is_unit_vector(seed, x, y):
    v = hashing.grad_coord_out3d(seed, x, y, x + y)
    assert math.sqrt(sum(c * c for c in v)) == pytest.approx(1.0, abs=1e-5)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_dual2d_bounded_by_offset(seed, x, y):
    assert hashing.grad_coord_dual2d(seed, x, y, 0.0, 0.0) == (0.0, 0.0)
    ox, oy = hashing.grad_coord_dual2d(seed, x, y, 0.4, 0.1)
    assert math.hypot(ox, oy) <= math.hypot(0.4, 0.1) + 1e-6
    dx, dy = hashing.grad_coord_dual2d(seed, x, y, 0.8, 0.2)
    assert (dx, dy) == (pytest.approx(2 * ox), pytest.approx(2 * oy))


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("x,y", POINTS)
def test_grad_coord_dual3d_bounded_by_offset(seed, x, y):
    assert hashing.grad_coord_dual3d(seed, x, y, 7, 0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    out = hashing.grad_coord_dual3d(seed, x, y, 7, 0.3, -0.2, 0.5)
    norm = math.sqrt(sum(c * c for c in out))
    assert norm <= math.sqrt(2) * math.sqrt(0.3**2 + 0.2**2 + 0.5**2) + 1e-6