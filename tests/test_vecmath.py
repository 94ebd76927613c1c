import math

import numpy as np
import pytest

from terrain.vecmath import cross, deg_to_rad, look_at, normalize, perspective, translate


def _apply(matrix, point):
    result = matrix @ np.array([*point, 1.0])
    return result[:3] / result[3]


@pytest.mark.parametrize("v", [(3.0, 4.0, 0.0), (-1.0, 2.0, 5.0), (0.0, 0.0, 9.0)])
def test_normalize_gives_unit_vector_in_same_direction(v):
    n = normalize(v)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(cross(n, v), 0.0)
    assert np.dot(n, v) > 0


def test_normalize_zero_vector_is_nan():
    result = normalize((0.0, 0.0, 0.0))
    assert [math.isnan(float(component)) for component in result] == [True, True, True]


def test_cross_of_axes():
    assert np.allclose(cross((1, 0, 0), (0, 1, 0)), (0, 0, 1))


def test_cross_is_anticommutative_and_orthogonal():
    a = (1.0, 2.0, 3.0)
    b = (-4.0, 0.5, 2.0)
    c = cross(a, b)
    assert np.allclose(c, -cross(b, a))
    assert np.dot(c, a) == pytest.approx(0.0)
    assert np.dot(c, b) == pytest.approx(0.0)


def test_deg_to_rad_half_turn():
    assert deg_to_rad(180) == pytest.approx(math.pi)


def test_translate_moves_points():
    m = translate(1.5, -2.0, 3.0)
    assert np.allclose(_apply(m, (1.0, 1.0, 1.0)), (2.5, -1.0, 4.0))


def test_look_at_maps_eye_to_origin_and_center_ahead():
    eye = (2.0, 3.0, 4.0)
    center = (-1.0, 0.5, 2.0)
    view = look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(view, eye), 0.0)
    ahead = _apply(view, center)
    assert ahead[0] == pytest.approx(0.0, abs=1e-9)
    assert ahead[1] == pytest.approx(0.0, abs=1e-9)
    assert ahead[2] < 0
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 100.0
    proj = perspective(deg_to_rad(45), 1.0, near, far)
    assert _apply(proj, (0.0, 0.0, -near))[2] == pytest.approx(-1.0)
    assert _apply(proj, (0.0, 0.0, -far))[2] == pytest.approx(1.0)


def test_perspective_aspect_scales_x_only():
    wide = perspective(1.0, 2.0, 0.1, 10.0)
    square = perspective(1.0, 1.0, 0.1, 10.0)
    assert wide[0, 0] == pytest.approx(square[0, 0] / 2.0)
    assert wide[1, 1] == pytest.approx(square[1, 1])