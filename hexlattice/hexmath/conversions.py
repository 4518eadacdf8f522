from __future__ import annotations

import math

from .coords import Coordinates, Cube, HexLayout, Offset, Point
from .distance import cube_round

SQRT3 = math.sqrt(3)
SQRT1_3 = 1 / SQRT3


def _half_step(index: float, even: bool) -> float:
    # Number of half-shifted lines between line 0 and ``index``.
    sign = 1 if even else -1
    return (index + sign * (index % 2)) // 2


def offset_to_cube(o: Offset, layout: HexLayout) -> Cube:
    i, j = o.i, o.j
    if layout.columns:
        q = j
        r = i - _half_step(j, layout.even)
    else:
        q = j - _half_step(i, layout.even)
        r = i
    return Cube(q, r, 0 - q - r)


def cube_to_offset(c: Cube, layout: HexLayout) -> Offset:
    q, r = c.q, c.r
    if layout.columns:
        j = q
        i = r + _half_step(q, layout.even)
    else:
        i = r
        j = q + _half_step(r, layout.even)
    return Offset(i, j)


def point_to_cube(p: Point, layout: HexLayout) -> Cube:
    """Project a pixel point into fractional cube space. Not rounded."""
    x = p.x / layout.size
    y = p.y / layout.size
    shift = 1 if layout.even else 0
    if layout.columns:
        q = (2 * SQRT1_3 * x) - (2 / 3)
        r = (-0.5 * (q + shift)) + y
    else:
        r = (2 * SQRT1_3 * y) - (2 / 3)
        q = (-0.5 * (r + shift)) + x
    return Cube(q, r, 0 - q - r)


def cube_to_point(c: Cube, layout: HexLayout) -> Point:
    shift = 1 if layout.even else 0
    if layout.columns:
        x = (SQRT3 / 2) * (c.q + (2 / 3))
        y = (0.5 * (c.q + shift)) + c.r
    else:
        y = (SQRT3 / 2) * (c.r + (2 / 3))
        x = (0.5 * (c.r + shift)) + c.q
    return Point(x * layout.size, y * layout.size)


def offset_center(o: Offset, layout: HexLayout) -> Point:
    i, j = o.i, o.j
    if layout.columns:
        x = 2 * SQRT1_3 * ((0.75 * j) + 0.5)
        even = (j + 1) % 2 == 0
        y = i + (0 if layout.even == even else 0.5)
    else:
        y = 2 * SQRT1_3 * ((0.75 * i) + 0.5)
        even = (i + 1) % 2 == 0
        x = j + (0 if layout.even == even else 0.5)
    return Point(x * layout.size, y * layout.size)


def to_cube(coords: Coordinates, layout: HexLayout) -> Cube:
    """Rounded cube of the hexagon identified by any coordinate kind."""
    if isinstance(coords, Offset):
        return offset_to_cube(coords, layout)
    if isinstance(coords, Cube):
        return cube_round(coords)
    if isinstance(coords, Point):
        return cube_round(point_to_cube(coords, layout))
    raise TypeError(f"unsupported coordinates: {coords!r}")


def to_fractional_cube(coords: Coordinates, layout: HexLayout) -> Cube:
    """Unrounded cube coordinates; points keep their position inside the hexagon."""
    if isinstance(coords, Point):
        return point_to_cube(coords, layout)
    if isinstance(coords, Offset):
        return offset_to_cube(coords, layout)
    if isinstance(coords, Cube):
        return coords
    raise TypeError(f"unsupported coordinates: {coords!r}")


def to_offset(coords: Coordinates, layout: HexLayout) -> Offset:
    if isinstance(coords, Offset):
        return Offset(coords.i, coords.j)
    return cube_to_offset(to_cube(coords, layout), layout)


def to_center(coords: Coordinates, layout: HexLayout) -> Point:
    if isinstance(coords, Offset):
        return offset_center(coords, layout)
    return cube_to_point(to_cube(coords, layout), layout)
