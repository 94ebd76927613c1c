"""Small 3D vector and 4x4 matrix helpers for the camera and the scene.

Vectors are numpy arrays of three floats. Matrices are 4x4 numpy arrays
that act on column vectors (``matrix @ point``), following the OpenGL
conventions for view and projection matrices.
"""

import math

import numpy as np


def _vec3(v) -> np.ndarray:
    return np.asarray(v, dtype=np.float64).reshape(3)


def normalize(v) -> np.ndarray:
    """Unit vector in the direction of ``v``.

    A zero vector has no direction; its components come back as NaN.
    """
    arr = _vec3(v)
    with np.errstate(divide="ignore", invalid="ignore"):
        return arr * (1.0 / np.linalg.norm(arr))


def cross(a, b) -> np.ndarray:
    """Cross product of two 3D vectors."""
    return np.cross(_vec3(a), _vec3(b))


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def translate(x: float, y: float, z: float) -> np.ndarray:
    """Matrix that moves points by (x, y, z)."""
    m = np.identity(4)
    m[:3, 3] = (x, y, z)
    return m


def look_at(eye, center, up) -> np.ndarray:
    """View matrix for a viewer at ``eye`` looking at ``center``."""
    eye = _vec3(eye)
    center = _vec3(center)
    forward = normalize(center - eye)
    side = normalize(cross(forward, normalize(up)))
    upward = cross(side, forward)

    m = np.identity(4)
    m[0, :3] = side
    m[1, :3] = upward
    m[2, :3] = -forward
    return m @ translate(*(-eye))


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection matrix with vertical field of view ``fovy`` in radians."""
    f = 1.0 / math.tan(fovy / 2.0)
    near_minus_far = near - far
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (near + far) / near_minus_far
    m[2, 3] = 2.0 * far * near / near_minus_far
    m[3, 2] = -1.0
    return m