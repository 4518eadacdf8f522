"""Hexagon outlines, area templates and padded canvas dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .hexmath.conversions import SQRT1_3, SQRT3
from .hexmath.coords import HexLayout, Offset, Point
from .hexmath.distance import round_half_up


@dataclass(frozen=True, slots=True)
class GridDimensions:
    """Padded canvas size and the offset of the inner scene rectangle."""

    width: float
    height: float
    x: float
    y: float
    rows: int
    columns: int


def _ceil(value: float) -> float:
    return math.ceil(value) if math.isfinite(value) else value


def cell_shape(layout: HexLayout) -> list[Point]:
    """Vertices of a hexagon centered on the origin, in the order of :func:`cell_vertices`."""
    scale_x = layout.size_x / 4
    scale_y = layout.size_y / 4
    if layout.columns:
        x0 = -2 * scale_x
        x1 = -scale_x
        x2 = scale_x
        x3 = 2 * scale_x
        y0 = -2 * scale_y
        y1 = 2 * scale_y
        return [Point(x0, 0), Point(x1, y0), Point(x2, y0), Point(x3, 0), Point(x2, y1), Point(x1, y1)]
    y0 = -2 * scale_y
    y1 = -scale_y
    y2 = scale_y
    y3 = 2 * scale_y
    x0 = -2 * scale_x
    x1 = 2 * scale_x
    return [Point(0, y0), Point(x1, y1), Point(x1, y2), Point(0, y3), Point(x0, y2), Point(x0, y1)]


def cell_vertices(o: Offset, layout: HexLayout) -> list[Point]:
    """Vertices of a cell in positive orientation.

    The first vertex is the top vertex of a pointy-topped hexagon and the
    left vertex of a flat-topped one.
    """
    i, j = o.i, o.j
    scale_x = layout.size_x / 4
    scale_y = layout.size_y / 4
    if layout.columns:
        x = 3 * j
        x0 = x * scale_x
        x1 = (x + 1) * scale_x
        x2 = (x + 3) * scale_x
        x3 = (x + 4) * scale_x
        even = (j + 1) % 2 == 0
        y = (4 * i) - (2 if layout.even == even else 0)
        y0 = y * scale_y
        y1 = (y + 2) * scale_y
        y2 = (y + 4) * scale_y
        return [Point(x0, y1), Point(x1, y0), Point(x2, y0), Point(x3, y1), Point(x2, y2), Point(x1, y2)]
    y = 3 * i
    y0 = y * scale_y
    y1 = (y + 1) * scale_y
    y2 = (y + 3) * scale_y
    y3 = (y + 4) * scale_y
    even = (i + 1) % 2 == 0
    x = (4 * j) - (2 if layout.even == even else 0)
    x0 = x * scale_x
    x1 = (x + 2) * scale_x
    x2 = (x + 4) * scale_x
    return [Point(x1, y0), Point(x2, y1), Point(x2, y2), Point(x1, y3), Point(x0, y2), Point(x0, y1)]


def translated_point(
    layout: HexLayout, grid_distance: float, point: Point, direction: float, distance: float
) -> Point:
    """Move ``point`` by ``distance`` grid units toward ``direction`` (degrees).

    Distance is measured in hexagons along the direction, so equal
    distances trace out a hexagon rather than a circle.
    """
    direction = math.radians(direction)
    dx = math.cos(direction)
    dy = math.sin(direction)
    if layout.columns:
        q = 2 * SQRT1_3 * dx
        r = (-0.5 * q) + dy
    else:
        r = 2 * SQRT1_3 * dy
        q = (-0.5 * r) + dx
    s = distance / grid_distance * layout.size / ((abs(r) + abs(q) + abs(q + r)) / 2)
    return Point(point.x + (dx * s), point.y + (dy * s))


def hex_circle(layout: HexLayout, grid_distance: float, center: Point, radius: float) -> list[Point]:
    """The hexagonal "circle" of ``radius`` grid units, in positive orientation."""
    if radius <= 0:
        return []
    r = radius / grid_distance * layout.size
    x, y = center.x, center.y
    if layout.columns:
        x0 = r * (SQRT3 / 2)
        x1 = -x0
        y0 = r
        y1 = y0 / 2
        y2 = -y1
        y3 = -y0
        return [
            Point(x, y + y0),
            Point(x + x1, y + y1),
            Point(x + x1, y + y2),
            Point(x, y + y3),
            Point(x + x0, y + y2),
            Point(x + x0, y + y1),
        ]
    y0 = r * (SQRT3 / 2)
    y1 = -y0
    x0 = r
    x1 = x0 / 2
    x2 = -x1
    x3 = -x0
    return [
        Point(x + x0, y),
        Point(x + x1, y + y0),
        Point(x + x2, y + y0),
        Point(x + x3, y),
        Point(x + x2, y + y1),
        Point(x + x1, y + y1),
    ]


def line_line_intersection(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Intersection of the infinite lines AB and CD, or None if they are parallel."""
    dnm = ((d.y - c.y) * (b.x - a.x)) - ((d.x - c.x) * (b.y - a.y))
    if dnm == 0:
        return None
    t0 = (((d.x - c.x) * (a.y - c.y)) - ((d.y - c.y) * (a.x - c.x))) / dnm
    return Point(a.x + (t0 * (b.x - a.x)), a.y + (t0 * (b.y - a.y)))


def _normalize_radians(angle: float) -> float:
    pi2 = 2 * math.pi
    nr = (angle + math.pi) % pi2
    if nr < 0:
        nr += pi2
    return nr - math.pi


def cone(
    layout: HexLayout,
    grid_distance: float,
    origin: Point,
    radius: float,
    direction: float,
    angle: float,
) -> list[Point]:
    """The part of :func:`hex_circle` between two rays, origin first.

    ``direction`` and ``angle`` are in degrees.
    """
    if radius <= 0 or angle <= 0:
        return []
    circle = hex_circle(layout, grid_distance, origin, radius)
    if angle >= 360:
        return circle
    n = len(circle)
    a_min = _normalize_radians(math.radians(direction - (angle / 2)))
    a_max = a_min + math.radians(angle)
    size = layout.size
    p_min = Point(origin.x + (math.cos(a_min) * size), origin.y + (math.sin(a_min) * size))
    p_max = Point(origin.x + (math.cos(a_max) * size), origin.y + (math.sin(a_max) * size))
    angles = []
    for p in circle:
        a = math.atan2(p.y - origin.y, p.x - origin.x)
        angles.append(a if a >= a_min else a + (2 * math.pi))

    points = [Point(origin.x, origin.y)]
    c0, a0 = circle[n - 1], angles[n - 1]
    i = 0
    while i < n:
        c1, a1 = circle[i], angles[i]
        if a0 > a1:
            points.append(line_line_intersection(c0, c1, origin, p_min))
            while a1 < a_max:
                points.append(c1)
                i = (i + 1) % n
                c0, a0 = c1, a1
                c1, a1 = circle[i], angles[i]
                if a0 > a1:
                    break
            points.append(line_line_intersection(c0, c1, origin, p_max))
            break
        c0, a0 = c1, a1
        i += 1
    return points


def calculate_dimensions(layout: HexLayout, width: float, height: float, padding: float) -> GridDimensions:
    """Padded canvas size of a scene of ``width`` by ``height`` pixels.

    The top-left hexagon of the scene rectangle is a full hexagon for even
    grids and a half hexagon for odd grids.
    """
    columns, size = layout.columns, layout.size
    size_x = (2 * size) / SQRT3 if columns else size
    size_y = size if columns else (2 * size) / SQRT3
    stride_x = 0.75 * size_x if columns else size_x
    stride_y = size_y if columns else 0.75 * size_y

    if not padding:
        cols = _ceil(((width + (-size_x / 4 if columns else size_x / 2)) / stride_x) - 1e-6)
        rows = _ceil(((height + (size_y / 2 if columns else -size_y / 4)) / stride_y) - 1e-6)
        return GridDimensions(width=width, height=height, x=0, y=0, rows=rows, columns=cols)

    # Padding on the short diagonal divides evenly by the grid size; in the
    # cross-axis hexagons interleave and each one takes 75% of its long diagonal.
    # The ``* (1 / stride)`` form is kept on purpose: ``/ stride`` rounds differently.
    x = _ceil((padding * width) * (1 / stride_x)) * stride_x
    y = _ceil((padding * height) * (1 / stride_y)) * stride_y
    padded_width = width + (2 * round_half_up(_ceil((padding * width) * (1 / stride_x)) / (1 / stride_x)))
    padded_height = height + (2 * round_half_up(_ceil((padding * height) * (1 / stride_y)) / (1 / stride_y)))

    # Shift the padding by half a hexagon if the cross-axis hexagon count is odd
    cross_even = round_half_up(x / stride_x if columns else y / stride_y) % 2 == 0
    if not cross_even:
        if columns:
            y += size_y / 2
            padded_height += size_y
        else:
            x += size_x / 2
            padded_width += size_x

    # The last column (columns) or row (rows) must lie fully within the bounds
    cols = round_half_up(padded_width * (1 / stride_x))
    rows = round_half_up(padded_height * (1 / stride_y))
    padded_width = cols * stride_x
    padded_height = rows * stride_y
    if columns:
        rows += 1
        padded_width += size_x / 4
    else:
        cols += 1
        padded_height += size_y / 4
    return GridDimensions(width=padded_width, height=padded_height, x=x, y=y, rows=rows, columns=cols)


__all__ = [
    "GridDimensions",
    "calculate_dimensions",
    "cell_shape",
    "cell_vertices",
    "cone",
    "hex_circle",
    "line_line_intersection",
    "translated_point",
]
