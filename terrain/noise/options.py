"""Enumerations that configure noise generation."""

from enum import IntEnum


class NoiseType(IntEnum):
    """Noise algorithm used for 2D and 3D noise."""

    OPENSIMPLEX2 = 0
    OPENSIMPLEX2S = 1
    CELLULAR = 2
    PERLIN = 3
    VALUE_CUBIC = 4
    VALUE = 5


class RotationType3D(IntEnum):
    """Domain rotation applied to 3D noise coordinates."""

    NONE = 0
    IMPROVE_XY_PLANES = 1
    IMPROVE_XZ_PLANES = 2


class FractalType(IntEnum):
    """Method used to combine octaves of noise or domain warp."""

    NONE = 0
    FBM = 1
    RIDGED = 2
    PING_PONG = 3
    DOMAIN_WARP_PROGRESSIVE = 4
    DOMAIN_WARP_INDEPENDENT = 5


class CellularDistanceFunction(IntEnum):
    """Distance metric used by cellular noise."""

    EUCLIDEAN = 0
    EUCLIDEAN_SQ = 1
    MANHATTAN = 2
    HYBRID = 3


class CellularReturnType(IntEnum):
    """Value returned by cellular noise.

    The ordering matters: every member from DISTANCE upward uses the
    nearest distance, and every member from DISTANCE2 upward also uses
    the second nearest.
    """

    CELL_VALUE = 0
    DISTANCE = 1
    DISTANCE2 = 2
    DISTANCE2_ADD = 3
    DISTANCE2_SUB = 4
    DISTANCE2_MUL = 5
    DISTANCE2_DIV = 6


class DomainWarpType(IntEnum):
    """Algorithm used for domain warping."""

    OPENSIMPLEX2 = 0
    OPENSIMPLEX2_REDUCED = 1
    BASIC_GRID = 2