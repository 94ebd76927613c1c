import numpy as np
import pytest

from terrain.camera import ASPECT, Camera, Key
from terrain.vecmath import deg_to_rad, perspective


def _camera():
    return Camera((1.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_initial_orientation():
    cam = _camera()
    assert np.allclose(cam.direction, (1.0, 0.0, 0.0))
    assert np.linalg.norm(cam.right) == pytest.approx(1.0)
    assert np.dot(cam.right, cam.direction) == pytest.approx(0.0)
    assert np.dot(cam.up, cam.direction) == pytest.approx(0.0)


def test_update_without_keys_keeps_position_and_orbit_radius():
    cam = _camera()
    cam.update(set(), 1.0)
    assert np.allclose(cam.pos, (1.0, 0.0, 0.0))
    assert np.linalg.norm(cam.target - cam.pos) == pytest.approx(cam.radius)
    assert np.allclose(cam.model, np.identity(4))
    assert np.allclose(cam.perspective, perspective(deg_to_rad(66), ASPECT, 0.1, 100.0))


def test_forward_then_back_returns_to_start():
    cam = _camera()
    start = cam.pos.copy()
    cam.update({Key.W}, 1.0)
    moved = cam.pos.copy()
    assert moved[0] > start[0]
    assert moved[1] == pytest.approx(start[1])
    assert moved[2] == pytest.approx(start[2])
    cam.update({Key.S}, 1.0)
    assert np.allclose(cam.pos, start)


def test_strafe_keeps_height():
    cam = _camera()
    cam.update({Key.D}, 1.0)
    assert cam.pos[1] == pytest.approx(0.0)
    assert not np.allclose(cam.pos, (1.0, 0.0, 0.0))


def test_vertical_moves_by_dt():
    cam = _camera()
    cam.update({Key.Q}, 2.0)
    assert cam.pos[1] == pytest.approx(2.0)
    cam.update({Key.E}, 2.0)
    assert cam.pos[1] == pytest.approx(0.0)


def test_yaw_keys_turn_in_opposite_directions():
    cam = _camera()
    cam.update({Key.H}, 1.0)
    assert cam.rotation[1] < 0
    cam.update({Key.L}, 1.0)
    assert cam.rotation[1] == pytest.approx(0.0)


def test_pitch_is_clamped():
    cam = _camera()
    cam.rotation = np.array([-89.89, 0.0, 0.0])
    cam.update({Key.J}, 1.0)
    assert cam.rotation[0] == pytest.approx(-89.89)
    cam.rotation = np.array([89.89, 0.0, 0.0])
    cam.update({Key.K}, 1.0)
    assert cam.rotation[0] == pytest.approx(89.89)


def test_pitch_moves_inside_limits():
    cam = _camera()
    cam.update({Key.K}, 1.0)
    assert cam.rotation[0] > 0