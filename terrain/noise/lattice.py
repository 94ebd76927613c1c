"""Lattice-based noise: cellular, Perlin, cubic value and value noise.

Inputs are coordinates already scaled by frequency as the generator
requires.
"""

import math
import sys
from typing import Callable, Sequence

from .hashing import (
    PRIME_X,
    PRIME_X2,
    PRIME_Y,
    PRIME_Y2,
    PRIME_Z,
    PRIME_Z2,
    cubic_lerp,
    fast_floor,
    fast_round,
    grad_coord2d,
    grad_coord3d,
    hash2d,
    hash3d,
    interp_hermite,
    interp_quintic,
    lerp,
    val_coord2d,
    val_coord3d,
)
from .options import CellularDistanceFunction, CellularReturnType
from .tables2d import RAND_VECS_2D
from .tables3d import RAND_VECS_3D

_INV_2_POW_31 = 1 / 2147483648.0
_JITTER_2D = 0.43701595
_JITTER_3D = 0.39614353


def _euclidean_sq(components: Sequence[float]) -> float:
    return sum(c * c for c in components)


def _manhattan(components: Sequence[float]) -> float:
    return sum(abs(c) for c in components)


def _hybrid(components: Sequence[float]) -> float:
    return _manhattan(components) + _euclidean_sq(components)


def _distance_metric(distance_function: int) -> Callable[[Sequence[float]], float]:
    if distance_function == CellularDistanceFunction.MANHATTAN:
        return _manhattan
    if distance_function == CellularDistanceFunction.HYBRID:
        return _hybrid
    return _euclidean_sq


def _cellular_result(
    dist0: float, dist1: float, closest_hash: int,
    distance_function: int, return_type: int,
) -> float:
    if (distance_function == CellularDistanceFunction.EUCLIDEAN
            and return_type >= CellularReturnType.DISTANCE):
        dist0 = math.sqrt(dist0)
        if return_type >= CellularReturnType.DISTANCE2:
            dist1 = math.sqrt(dist1)

    if return_type == CellularReturnType.CELL_VALUE:
        return closest_hash * _INV_2_POW_31
    if return_type == CellularReturnType.DISTANCE:
        return dist0 - 1
    if return_type == CellularReturnType.DISTANCE2:
        return dist1 - 1
    if return_type == CellularReturnType.DISTANCE2_ADD:
        return (dist1 + dist0) * 0.5 - 1
    if return_type == CellularReturnType.DISTANCE2_SUB:
        return dist1 - dist0 - 1
    if return_type == CellularReturnType.DISTANCE2_MUL:
        return dist1 * dist0 * 0.5 - 1
    if return_type == CellularReturnType.DISTANCE2_DIV:
        return dist0 / dist1 - 1
    return 0.0


def cellular_2d(
    seed: int, x: float, y: float,
    distance_function: int, return_type: int, jitter_mod: float,
) -> float:
    """2D cellular (Worley) noise over the 3x3 neighbourhood of the nearest cell."""
    xr = fast_round(x)
    yr = fast_round(y)
    metric = _distance_metric(distance_function)
    jitter = _JITTER_2D * jitter_mod

    dist0 = dist1 = sys.float_info.max
    closest_hash = 0

    for xi in range(xr - 1, xr + 2):
        x_primed = xi * PRIME_X
        for yi in range(yr - 1, yr + 2):
            h = hash2d(seed, x_primed, yi * PRIME_Y)
            idx = h & (255 << 1)
            vec = (
                (xi - x) + RAND_VECS_2D[idx] * jitter,
                (yi - y) + RAND_VECS_2D[idx | 1] * jitter,
            )
            distance = metric(vec)
            dist1 = max(min(dist1, distance), dist0)
            if distance < dist0:
                dist0 = distance
                closest_hash = h

    return _cellular_result(dist0, dist1, closest_hash, distance_function, return_type)


def cellular_3d(
    seed: int, x: float, y: float, z: float,
    distance_function: int, return_type: int, jitter_mod: float,
) -> float:
    """3D cellular (Worley) noise over the 3x3x3 neighbourhood of the nearest cell."""
    xr = fast_round(x)
    yr = fast_round(y)
    zr = fast_round(z)
    metric = _distance_metric(distance_function)
    jitter = _JITTER_3D * jitter_mod

    dist0 = dist1 = sys.float_info.max
    closest_hash = 0

    for xi in range(xr - 1, xr + 2):
        x_primed = xi * PRIME_X
        for yi in range(yr - 1, yr + 2):
            y_primed = yi * PRIME_Y
            for zi in range(zr - 1, zr + 2):
                h = hash3d(seed, x_primed, y_primed, zi * PRIME_Z)
                idx = h & (255 << 2)
                vec = (
                    (xi - x) + RAND_VECS_3D[idx] * jitter,
                    (yi - y) + RAND_VECS_3D[idx | 1] * jitter,
                    (zi - z) + RAND_VECS_3D[idx | 2] * jitter,
                )
                distance = metric(vec)
                dist1 = max(min(dist1, distance), dist0)
                if distance < dist0:
                    dist0 = distance
                    closest_hash = h

    return _cellular_result(dist0, dist1, closest_hash, distance_function, return_type)


def perlin_2d(seed: int, x: float, y: float) -> float:
    """2D Perlin gradient noise with quintic interpolation."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)

    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1
    yd1 = yd0 - 1

    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)

    x0 *= PRIME_X
    y0 *= PRIME_Y
    x1 = x0 + PRIME_X
    y1 = y0 + PRIME_Y

    xf0 = lerp(grad_coord2d(seed, x0, y0, xd0, yd0), grad_coord2d(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(grad_coord2d(seed, x0, y1, xd0, yd1), grad_coord2d(seed, x1, y1, xd1, yd1), xs)

    return lerp(xf0, xf1, ys) * 1.4247691104677813


def perlin_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D Perlin gradient noise with quintic interpolation."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)

    xd0 = x - x0
    yd0 = y - y0
    zd0 = z - z0
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1

    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)
    zs = interp_quintic(zd0)

    x0 *= PRIME_X
    y0 *= PRIME_Y
    z0 *= PRIME_Z
    x1 = x0 + PRIME_X
    y1 = y0 + PRIME_Y
    z1 = z0 + PRIME_Z

    def along_x(yp: int, zp: int, yd: float, zd: float) -> float:
        return lerp(
            grad_coord3d(seed, x0, yp, zp, xd0, yd, zd),
            grad_coord3d(seed, x1, yp, zp, xd1, yd, zd),
            xs,
        )

    yf0 = lerp(along_x(y0, z0, yd0, zd0), along_x(y1, z0, yd1, zd0), ys)
    yf1 = lerp(along_x(y0, z1, yd0, zd1), along_x(y1, z1, yd1, zd1), ys)

    return lerp(yf0, yf1, zs) * 0.964921414852142333984375


def value_cubic_2d(seed: int, x: float, y: float) -> float:
    """2D value noise with cubic interpolation over a 4x4 neighbourhood."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)

    xs = x - x1
    ys = y - y1

    x1 *= PRIME_X
    y1 *= PRIME_Y

    xs_primed = (x1 - PRIME_X, x1, x1 + PRIME_X, x1 + PRIME_X2)
    ys_primed = (y1 - PRIME_Y, y1, y1 + PRIME_Y, y1 + PRIME_Y2)

    rows = [
        cubic_lerp(*(val_coord2d(seed, xp, yp) for xp in xs_primed), xs)
        for yp in ys_primed
    ]
    return cubic_lerp(*rows, ys) * (1 / (1.5 * 1.5))


def value_cubic_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D value noise with cubic interpolation over a 4x4x4 neighbourhood."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    z1 = fast_floor(z)

    xs = x - x1
    ys = y - y1
    zs = z - z1

    x1 *= PRIME_X
    y1 *= PRIME_Y
    z1 *= PRIME_Z

    xs_primed = (x1 - PRIME_X, x1, x1 + PRIME_X, x1 + PRIME_X2)
    ys_primed = (y1 - PRIME_Y, y1, y1 + PRIME_Y, y1 + PRIME_Y2)
    zs_primed = (z1 - PRIME_Z, z1, z1 + PRIME_Z, z1 + PRIME_Z2)

    def plane(zp: int) -> float:
        rows = [
            cubic_lerp(*(val_coord3d(seed, xp, yp, zp) for xp in xs_primed), xs)
            for yp in ys_primed
        ]
        return cubic_lerp(*rows, ys)

    planes = [plane(zp) for zp in zs_primed]
    return cubic_lerp(*planes, zs) * (1 / (1.5 * 1.5 * 1.5))


def value_2d(seed: int, x: float, y: float) -> float:
    """2D value noise with Hermite interpolation."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)

    xs = interp_hermite(x - x0)
    ys = interp_hermite(y - y0)

    x0 *= PRIME_X
    y0 *= PRIME_Y
    x1 = x0 + PRIME_X
    y1 = y0 + PRIME_Y

    xf0 = lerp(val_coord2d(seed, x0, y0), val_coord2d(seed, x1, y0), xs)
    xf1 = lerp(val_coord2d(seed, x0, y1), val_coord2d(seed, x1, y1), xs)

    return lerp(xf0, xf1, ys)


def value_3d(seed: int, x: float, y: float, z: float) -> float:
    """3D value noise with Hermite interpolation."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)

    xs = interp_hermite(x - x0)
    ys = interp_hermite(y - y0)
    zs = interp_hermite(z - z0)

    x0 *= PRIME_X
    y0 *= PRIME_Y
    z0 *= PRIME_Z
    x1 = x0 + PRIME_X
    y1 = y0 + PRIME_Y
    z1 = z0 + PRIME_Z

    xf00 = lerp(val_coord3d(seed, x0, y0, z0), val_coord3d(seed, x1, y0, z0), xs)
    xf10 = lerp(val_coord3d(seed, x0, y1, z0), val_coord3d(seed, x1, y1, z0), xs)
    xf01 = lerp(val_coord3d(seed, x0, y0, z1), val_coord3d(seed, x1, y0, z1), xs)
    xf11 = lerp(val_coord3d(seed, x0, y1, z1), val_coord3d(seed, x1, y1, z1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)

    return lerp(yf0, yf1, zs)