"""Lattice hashing, gradient lookups and interpolation helpers for noise.

Coordinates handed to the hash functions are "primed": integer lattice
coordinates already multiplied by the axis primes below. Only the low
32 bits of a hash input take part, so arbitrary Python integers behave
like the wrapping machine integers the hash was designed for.
"""

from .tables2d import GRADIENTS_2D, RAND_VECS_2D
from .tables3d import GRADIENTS_3D, RAND_VECS_3D

PRIME_X = 501125321
PRIME_Y = 1136930381
PRIME_Z = 1720413743

PRIME_X2 = PRIME_X << 1
PRIME_Y2 = -2021106534
PRIME_Z2 = -854139810

_MASK32 = 0xFFFFFFFF
_HASH_MULTIPLIER = 0x27D4EB2D
_INV_2_POW_31 = 1 / 2147483648.0


def fast_floor(f: float) -> int:
    """Floor used by the noise functions.

    Negative whole numbers map one step lower than a true floor; the
    noise functions depend on that exact behaviour.
    """
    return int(f) if f >= 0 else int(f) - 1


def fast_round(f: float) -> int:
    """Round half away from zero."""
    return int(f + 0.5) if f >= 0 else int(f - 0.5)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b``."""
    return a + t * (b - a)


def interp_hermite(t: float) -> float:
    """Cubic smoothstep curve."""
    return t * t * (3 - 2 * t)


def interp_quintic(t: float) -> float:
    """Quintic smootherstep curve."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def cubic_lerp(a: float, b: float, c: float, d: float, t: float) -> float:
    """Cubic interpolation between ``b`` and ``c`` using neighbours ``a`` and ``d``."""
    p = (d - c) - (a - b)
    return t * t * t * p + t * t * ((a - b) - p) + t * (c - a) + b


def ping_pong(t: float) -> float:
    """Fold ``t`` into a triangle wave of period two."""
    t -= int(t * 0.5) * 2
    return t if t < 1 else 2 - t


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def hash2d(seed: int, x_primed: int, y_primed: int) -> int:
    """32-bit unsigned hash of a primed 2D lattice point."""
    return ((seed ^ x_primed ^ y_primed) & _MASK32) * _HASH_MULTIPLIER & _MASK32


def hash3d(seed: int, x_primed: int, y_primed: int, z_primed: int) -> int:
    """32-bit unsigned hash of a primed 3D lattice point."""
    return ((seed ^ x_primed ^ y_primed ^ z_primed) & _MASK32) * _HASH_MULTIPLIER & _MASK32


def _value_from_hash(h: int) -> float:
    h = (h * h) & _MASK32
    h ^= (h << 19) & _MASK32
    return _to_int32(h) * _INV_2_POW_31


def val_coord2d(seed: int, x_primed: int, y_primed: int) -> float:
    """Pseudo-random value in [-1, 1) for a 2D lattice point."""
    return _value_from_hash(hash2d(seed, x_primed, y_primed))


def val_coord3d(seed: int, x_primed: int, y_primed: int, z_primed: int) -> float:
    """Pseudo-random value in [-1, 1) for a 3D lattice point."""
    return _value_from_hash(hash3d(seed, x_primed, y_primed, z_primed))


def grad_coord2d(seed: int, x_primed: int, y_primed: int, xd: float, yd: float) -> float:
    """Dot product of the lattice point's gradient with the offset (xd, yd)."""
    h = hash2d(seed, x_primed, y_primed)
    h ^= h >> 15
    h &= 127 << 1
    return xd * GRADIENTS_2D[h] + yd * GRADIENTS_2D[h | 1]


def grad_coord3d(
    seed: int, x_primed: int, y_primed: int, z_primed: int,
    xd: float, yd: float, zd: float,
) -> float:
    """Dot product of the lattice point's gradient with the offset (xd, yd, zd)."""
    h = hash3d(seed, x_primed, y_primed, z_primed)
    h ^= h >> 15
    h &= 63 << 2
    return xd * GRADIENTS_3D[h] + yd * GRADIENTS_3D[h | 1] + zd * GRADIENTS_3D[h | 2]


def grad_coord_out2d(seed: int, x_primed: int, y_primed: int) -> tuple[float, float]:
    """Random unit vector attached to a 2D lattice point."""
    h = hash2d(seed, x_primed, y_primed) & (255 << 1)
    return RAND_VECS_2D[h], RAND_VECS_2D[h | 1]


def grad_coord_out3d(
    seed: int, x_primed: int, y_primed: int, z_primed: int,
) -> tuple[float, float, float]:
    """Random unit vector attached to a 3D lattice point."""
    h = hash3d(seed, x_primed, y_primed, z_primed) & (255 << 2)
    return RAND_VECS_3D[h], RAND_VECS_3D[h | 1], RAND_VECS_3D[h | 2]


def grad_coord_dual2d(
    seed: int, x_primed: int, y_primed: int, xd: float, yd: float,
) -> tuple[float, float]:
    """Random vector scaled by the gradient dot product at a 2D lattice point."""
    h = hash2d(seed, x_primed, y_primed)
    index1 = h & (127 << 1)
    index2 = (h >> 7) & (255 << 1)
    value = xd * GRADIENTS_2D[index1] + yd * GRADIENTS_2D[index1 | 1]
    return value * RAND_VECS_2D[index2], value * RAND_VECS_2D[index2 | 1]


def grad_coord_dual3d(
    seed: int, x_primed: int, y_primed: int, z_primed: int,
    xd: float, yd: float, zd: float,
) -> tuple[float, float, float]:
    """Random vector scaled by the gradient dot product at a 3D lattice point."""
    h = hash3d(seed, x_primed, y_primed, z_primed)
    index1 = h & (63 << 2)
    index2 = (h >> 6) & (255 << 2)
    value = (
        xd * GRADIENTS_3D[index1]
        + yd * GRADIENTS_3D[index1 | 1]
        + zd * GRADIENTS_3D[index1 | 2]
    )
    return (
        value * RAND_VECS_3D[index2],
        value * RAND_VECS_3D[index2 | 1],
        value * RAND_VECS_3D[index2 | 2],
    )