"""Keyboard-driven orbit and fly camera."""

import math
from collections.abc import Collection
from enum import Enum

import numpy as np

from .vecmath import cross, deg_to_rad, look_at, normalize, perspective, translate

# Integer division of the window size, as the projection has always used.
ASPECT = 1280 // 720
NEAR = 0.1
FAR = 100.0
ROTATE_STEP = 0.03
PITCH_LIMIT = 89.9


class Key(Enum):
    """Keys that steer the camera."""

    H = "h"
    L = "l"
    J = "j"
    K = "k"
    W = "w"
    S = "s"
    D = "d"
    A = "a"
    Q = "q"
    E = "e"


class Camera:
    """Camera with a position, a look target and a rotation driven by keys."""

    def __init__(self, pos, target) -> None:
        self.pos = np.asarray(pos, dtype=np.float64).reshape(3).copy()
        self.target = np.asarray(target, dtype=np.float64).reshape(3).copy()
        self.rotation = np.zeros(3)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self._orient()

        self.radius = 7.0
        self.cam_x = math.cos(self.rotation[1]) * self.radius
        self.cam_y = 0.0
        self.cam_z = math.sin(self.rotation[1]) * self.radius
        self.view = look_at((self.cam_x, self.pos[1], self.cam_z), self.target, self.up)
        self.perspective = perspective(deg_to_rad(45), ASPECT, NEAR, FAR)
        self.model = np.zeros((4, 4))
        self.speed = 5.0

    def _orient(self) -> None:
        self.direction = normalize(self.pos - self.target)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.right = normalize(cross(self.world_up, self.direction))
        self.up = cross(self.direction, self.right)

    def update(self, pressed: Collection[Key], dt: float) -> None:
        """Advance one frame given the keys held down and the scaled frame time."""
        self._orient()
        self.view = look_at(self.pos, self.target, self.up)
        self.perspective = perspective(deg_to_rad(66), ASPECT, NEAR, FAR)
        self.model = translate(0.0, 0.0, 0.0)

        pitch, yaw = self.rotation[0], self.rotation[1]
        self.cam_x = math.cos(yaw) * self.radius * math.cos(pitch)
        self.cam_y = math.sin(pitch) * self.radius
        self.cam_z = math.sin(yaw) * self.radius * math.cos(pitch)
        self.target = np.array([self.cam_x, self.cam_y, self.cam_z]) + self.pos
        self.view = look_at(self.pos, self.target, self.up)

        step = ROTATE_STEP * dt
        if Key.H in pressed:
            self.rotation = self.rotation + (0.0, -step, 0.0)
        if Key.L in pressed:
            self.rotation = self.rotation + (0.0, step, 0.0)
        if Key.J in pressed and self.rotation[0] - ROTATE_STEP > -PITCH_LIMIT:
            self.rotation = self.rotation + (-step, 0.0, 0.0)
        if Key.K in pressed and self.rotation[0] + ROTATE_STEP < PITCH_LIMIT:
            self.rotation = self.rotation + (step, 0.0, 0.0)

        scale = dt * self.speed / 100
        forward = np.array([self.cam_x * scale, 0.0, self.cam_z * scale])
        if Key.W in pressed:
            self.pos = self.pos + forward
        elif Key.S in pressed:
            self.pos = self.pos - forward

        sideways = np.array([
            self.right[0] * self.radius * scale, 0.0, self.right[2] * self.radius * scale,
        ])
        if Key.D in pressed:
            self.pos = self.pos + sideways
        elif Key.A in pressed:
            self.pos = self.pos - sideways

        if Key.Q in pressed:
            self.pos = self.pos + (0.0, dt, 0.0)
        elif Key.E in pressed:
            self.pos = self.pos + (0.0, -dt, 0.0)