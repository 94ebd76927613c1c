"""Domain warp kernels: simplex gradient warps and basic grid warps.

Every function returns the displacement to add to the input position.
The position itself is scaled by ``frequency`` inside the kernel; for
the simplex kernels it must already be skewed or rotated by the caller.
"""

import math
from typing import Tuple

from .hashing import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    fast_floor,
    fast_round,
    grad_coord_dual2d,
    grad_coord_dual3d,
    grad_coord_out2d,
    grad_coord_out3d,
    interp_hermite,
    lerp,
)

_SQRT3 = math.sqrt(3.0)
_G2 = (3 - _SQRT3) / 6
_C_T = 2 * (1 - 2 * _G2) * (1 / _G2 - 2)
_C_BASE = -2 * (1 - 2 * _G2) * (1 - 2 * _G2)
_SEED_STEP_3D = 1293373


def _falloff(a: float) -> float:
    return (a * a) * (a * a)


def simplex_gradient_warp_2d(
    seed: int, warp_amp: float, frequency: float,
    x: float, y: float, out_grad_only: bool,
) -> Tuple[float, float]:
    """Displacement from a 2D simplex gradient warp.

    With ``out_grad_only`` the raw random vectors of the lattice points
    are blended; otherwise they are weighted by the gradient dot product.
    """
    x *= frequency
    y *= frequency

    i = fast_floor(x)
    j = fast_floor(y)
    xi = x - i
    yi = y - j

    t = (xi + yi) * _G2
    x0 = xi - t
    y0 = yi - t

    i *= PRIME_X
    j *= PRIME_Y

    def gradient(xp: int, yp: int, dx: float, dy: float) -> Tuple[float, float]:
        if out_grad_only:
            return grad_coord_out2d(seed, xp, yp)
        return grad_coord_dual2d(seed, xp, yp, dx, dy)

    vx = vy = 0.0

    a = 0.5 - x0 * x0 - y0 * y0
    if a > 0:
        weight = _falloff(a)
        gx, gy = gradient(i, j, x0, y0)
        vx += weight * gx
        vy += weight * gy

    c = _C_T * t + (_C_BASE + a)
    if c > 0:
        x2 = x0 + (2 * _G2 - 1)
        y2 = y0 + (2 * _G2 - 1)
        weight = _falloff(c)
        gx, gy = gradient(i + PRIME_X, j + PRIME_Y, x2, y2)
        vx += weight * gx
        vy += weight * gy

    if y0 > x0:
        x1 = x0 + _G2
        y1 = y0 + (_G2 - 1)
        corner = (i, j + PRIME_Y)
    else:
        x1 = x0 + (_G2 - 1)
        y1 = y0 + _G2
        corner = (i + PRIME_X, j)
    b = 0.5 - x1 * x1 - y1 * y1
    if b > 0:
        weight = _falloff(b)
        gx, gy = gradient(corner[0], corner[1], x1, y1)
        vx += weight * gx
        vy += weight * gy

    return vx * warp_amp, vy * warp_amp


def opensimplex2_gradient_warp_3d(
    seed: int, warp_amp: float, frequency: float,
    x: float, y: float, z: float, out_grad_only: bool,
) -> Tuple[float, float, float]:
    """Displacement from a 3D OpenSimplex2 gradient warp."""
    x *= frequency
    y *= frequency
    z *= frequency

    i = fast_round(x)
    j = fast_round(y)
    k = fast_round(z)
    x0 = x - i
    y0 = y - j
    z0 = z - k

    x_sign = int(-x0 - 1.0) | 1
    y_sign = int(-y0 - 1.0) | 1
    z_sign = int(-z0 - 1.0) | 1

    ax0 = x_sign * -x0
    ay0 = y_sign * -y0
    az0 = z_sign * -z0

    i *= PRIME_X
    j *= PRIME_Y
    k *= PRIME_Z

    vx = vy = vz = 0.0
    a = (0.6 - x0 * x0) - (y0 * y0 + z0 * z0)

    for lattice in range(2):
        def gradient(
            xp: int, yp: int, zp: int, dx: float, dy: float, dz: float,
        ) -> Tuple[float, float, float]:
            if out_grad_only:
                return grad_coord_out3d(seed, xp, yp, zp)
            return grad_coord_dual3d(seed, xp, yp, zp, dx, dy, dz)

        if a > 0:
            weight = _falloff(a)
            gx, gy, gz = gradient(i, j, k, x0, y0, z0)
            vx += weight * gx
            vy += weight * gy
            vz += weight * gz

        b = a + 1
        i1, j1, k1 = i, j, k
        x1, y1, z1 = x0, y0, z0
        if ax0 >= ay0 and ax0 >= az0:
            x1 += x_sign
            b -= x_sign * 2 * x1
            i1 -= x_sign * PRIME_X
        elif ay0 > ax0 and ay0 >= az0:
            y1 += y_sign
            b -= y_sign * 2 * y1
            j1 -= y_sign * PRIME_Y
        else:
            z1 += z_sign
            b -= z_sign * 2 * z1
            k1 -= z_sign * PRIME_Z

        if b > 0:
            weight = _falloff(b)
            gx, gy, gz = gradient(i1, j1, k1, x1, y1, z1)
            vx += weight * gx
            vy += weight * gy
            vz += weight * gz

        if lattice == 1:
            break

        ax0 = 0.5 - ax0
        ay0 = 0.5 - ay0
        az0 = 0.5 - az0

        x0 = x_sign * ax0
        y0 = y_sign * ay0
        z0 = z_sign * az0

        a += (0.75 - ax0) - (ay0 + az0)

        i += (x_sign >> 1) & PRIME_X
        j += (y_sign >> 1) & PRIME_Y
        k += (z_sign >> 1) & PRIME_Z

        x_sign = -x_sign
        y_sign = -y_sign
        z_sign = -z_sign

        seed += _SEED_STEP_3D

    return vx * warp_amp, vy * warp_amp, vz * warp_amp


def basic_grid_warp_2d(
    seed: int, warp_amp: float, frequency: float, x: float, y: float,
) -> Tuple[float, float]:
    """Displacement from random vectors interpolated over a square grid."""
    xf = x * frequency
    yf = y * frequency

    x0 = fast_floor(xf)
    y0 = fast_floor(yf)

    xs = interp_hermite(xf - x0)
    ys = interp_hermite(yf - y0)

    x0 *= PRIME_X
    y0 *= PRIME_Y
    x1 = x0 + PRIME_X
    y1 = y0 + PRIME_Y

    def along_x(yp: int) -> Tuple[float, float]:
        left = grad_coord_out2d(seed, x0, yp)
        right = grad_coord_out2d(seed, x1, yp)
        return lerp(left[0], right[0], xs), lerp(left[1], right[1], xs)

    bottom = along_x(y0)
    top = along_x(y1)

    return (
        lerp(bottom[0], top[0], ys) * warp_amp,
        lerp(bottom[1], top[1], ys) * warp_amp,
    )


def basic_grid_warp_3d(
    seed: int, warp_amp: float, frequency: float, x: float, y: float, z: float,
) -> Tuple[float, float, float]:
    """Displacement from random vectors interpolated over a cubic grid."""
    xf = x * frequency
    yf = y * frequency
    zf = z * frequency

    x0 = fast_floor(xf)
    y0 = fast_floor(yf)
    z0 = fast_floor(zf)

    xs = interp_hermite(xf - x0)
    ys = interp_hermite(yf - y0)
    zs = interp_hermite(zf - z0)

    x0 *= PRIME_X
    y0 *= PRIME_Y
    z0 *= PRIME_Z
    x1 = x0 + PRIME_X
    y1 = y0 + PRIME_Y
    z1 = z0 + PRIME_Z

    def along_x(yp: int, zp: int) -> Tuple[float, ...]:
        left = grad_coord_out3d(seed, x0, yp, zp)
        right = grad_coord_out3d(seed, x1, yp, zp)
        return tuple(lerp(l, r, xs) for l, r in zip(left, right))

    def plane(zp: int) -> Tuple[float, ...]:
        near = along_x(y0, zp)
        far = along_x(y1, zp)
        return tuple(lerp(n, f, ys) for n, f in zip(near, far))

    front = plane(z0)
    back = plane(z1)
    dx, dy, dz = (lerp(f, b, zs) * warp_amp for f, b in zip(front, back))
    return dx, dy, dz