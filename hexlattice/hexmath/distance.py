from __future__ import annotations

import math

from .coords import Cube


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves toward positive infinity.

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def cube_round(cube: Cube) -> Cube:
    """Round fractional cube coordinates to the cube of the containing hexagon."""
    q, r, s = cube.q, cube.r, cube.s
    iq = round_half_up(q)
    ir = round_half_up(r)
    is_ = round_half_up(s)
    dq = abs(iq - q)
    dr = abs(ir - r)
    ds = abs(is_ - s)

    if dq > dr and dq > ds:
        iq = -ir - is_
    elif dr > ds:
        ir = -iq - is_
    else:
        is_ = -iq - ir

    return Cube(iq, ir, is_)


def cube_distance(a: Cube, b: Cube) -> float:
    """Number of hexagons between two cubes (fractional for fractional cubes)."""
    dq = a.q - b.q
    dr = a.r - b.r
    total = abs(dq) + abs(dr) + abs(dq + dr)
    if isinstance(total, int):
        return total // 2
    return total / 2
