"""Snapping of arbitrary points to canonical positions of a hexagonal grid.

Every primitive snapper works the same way: it builds a finer, odd-parity
hex layout whose cell centers coincide with the wanted candidate points,
translates the query point into that layout, snaps it to the nearest
center and translates the result back. :func:`snap_point` evaluates the
primitives a :class:`SnappingMode` asks for and keeps the nearest result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum, IntFlag
from typing import Callable

from .errors import InvalidSnappingMode
from .hexmath.conversions import SQRT1_3, cube_to_point, point_to_cube
from .hexmath.coords import HexLayout, Point
from .hexmath.distance import cube_round, round_half_up


class GridSnappingModes(IntFlag):
    """Bit layout of integer snapping modes."""

    CENTER = 0x1
    EDGE_MIDPOINT = 0x2
    TOP_LEFT_VERTEX = 0x10
    TOP_RIGHT_VERTEX = 0x20
    BOTTOM_LEFT_VERTEX = 0x40
    BOTTOM_RIGHT_VERTEX = 0x80
    VERTEX = 0xF0
    TOP_LEFT_CORNER = 0x100
    TOP_RIGHT_CORNER = 0x200
    BOTTOM_LEFT_CORNER = 0x400
    BOTTOM_RIGHT_CORNER = 0x800
    CORNER = 0xF00
    TOP_SIDE_MIDPOINT = 0x1000
    BOTTOM_SIDE_MIDPOINT = 0x2000
    LEFT_SIDE_MIDPOINT = 0x4000
    RIGHT_SIDE_MIDPOINT = 0x8000
    SIDE_MIDPOINT = 0xF000


VALID_MODE_BITS = 0xFFF3


class Anchor(Enum):
    """One of the four symmetric variants of a vertex or a bounding-box corner."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


class Side(Enum):
    """A side of the bounding box of a hexagon."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


ALL_ANCHORS = frozenset(Anchor)
ALL_SIDES = frozenset(Side)

_VERTEX_BITS = {
    Anchor.TOP_LEFT: GridSnappingModes.TOP_LEFT_VERTEX,
    Anchor.TOP_RIGHT: GridSnappingModes.TOP_RIGHT_VERTEX,
    Anchor.BOTTOM_LEFT: GridSnappingModes.BOTTOM_LEFT_VERTEX,
    Anchor.BOTTOM_RIGHT: GridSnappingModes.BOTTOM_RIGHT_VERTEX,
}
_CORNER_BITS = {
    Anchor.TOP_LEFT: GridSnappingModes.TOP_LEFT_CORNER,
    Anchor.TOP_RIGHT: GridSnappingModes.TOP_RIGHT_CORNER,
    Anchor.BOTTOM_LEFT: GridSnappingModes.BOTTOM_LEFT_CORNER,
    Anchor.BOTTOM_RIGHT: GridSnappingModes.BOTTOM_RIGHT_CORNER,
}
_SIDE_BITS = {
    Side.TOP: GridSnappingModes.TOP_SIDE_MIDPOINT,
    Side.BOTTOM: GridSnappingModes.BOTTOM_SIDE_MIDPOINT,
    Side.LEFT: GridSnappingModes.LEFT_SIDE_MIDPOINT,
    Side.RIGHT: GridSnappingModes.RIGHT_SIDE_MIDPOINT,
}


@dataclass(frozen=True)
class SnappingMode:
    """Which canonical points a snapped point may land on."""

    center: bool = False
    edge_midpoint: bool = False
    vertices: frozenset[Anchor] = field(default_factory=frozenset)
    corners: frozenset[Anchor] = field(default_factory=frozenset)
    sides: frozenset[Side] = field(default_factory=frozenset)

    @classmethod
    def builder(cls) -> SnappingModeBuilder:
        return SnappingModeBuilder()

    @classmethod
    def from_bits(cls, bits: int) -> SnappingMode:
        """Decode an integer mode made of :class:`GridSnappingModes` flags."""

        bits = int(bits)
        if bits < 0 or bits & ~VALID_MODE_BITS:
            raise InvalidSnappingMode(f"Invalid snapping mode: {bits:#x}")
        return cls(
            center=bool(bits & GridSnappingModes.CENTER),
            edge_midpoint=bool(bits & GridSnappingModes.EDGE_MIDPOINT),
            vertices=frozenset(a for a, bit in _VERTEX_BITS.items() if bits & bit),
            corners=frozenset(a for a, bit in _CORNER_BITS.items() if bits & bit),
            sides=frozenset(s for s, bit in _SIDE_BITS.items() if bits & bit),
        )

    def to_bits(self) -> int:
        bits = 0
        if self.center:
            bits |= GridSnappingModes.CENTER
        if self.edge_midpoint:
            bits |= GridSnappingModes.EDGE_MIDPOINT
        for anchor in self.vertices:
            bits |= _VERTEX_BITS[anchor]
        for anchor in self.corners:
            bits |= _CORNER_BITS[anchor]
        for side in self.sides:
            bits |= _SIDE_BITS[side]
        return int(bits)

    @property
    def is_empty(self) -> bool:
        return not (self.center or self.edge_midpoint or self.vertices or self.corners or self.sides)


class SnappingModeBuilder:
    """Chainable construction of a :class:`SnappingMode`.

    >>> SnappingMode.builder().center().vertex().build().to_bits() == 0xF1
    True
    """

    def __init__(self) -> None:
        self._center = False
        self._edge_midpoint = False
        self._vertices: set[Anchor] = set()
        self._corners: set[Anchor] = set()
        self._sides: set[Side] = set()

    def center(self) -> SnappingModeBuilder:
        self._center = True
        return self

    def edge_midpoint(self) -> SnappingModeBuilder:
        self._edge_midpoint = True
        return self

    def vertex(self, *anchors: Anchor) -> SnappingModeBuilder:
        """Any vertex, or only the given variants."""
        self._vertices.update(anchors or ALL_ANCHORS)
        return self

    def corner(self, *anchors: Anchor) -> SnappingModeBuilder:
        """Any bounding-box corner, or only the given variants."""
        self._corners.update(anchors or ALL_ANCHORS)
        return self

    def side_midpoint(self, *sides: Side) -> SnappingModeBuilder:
        self._sides.update(sides or ALL_SIDES)
        return self

    def build(self) -> SnappingMode:
        return SnappingMode(
            center=self._center,
            edge_midpoint=self._edge_midpoint,
            vertices=frozenset(self._vertices),
            corners=frozenset(self._corners),
            sides=frozenset(self._sides),
        )


@dataclass(frozen=True)
class SnappingBehavior:
    """A snapping mode together with the grid resolution it applies at."""

    mode: SnappingMode | int
    resolution: int = 1

    def resolved_mode(self) -> SnappingMode:
        if isinstance(self.mode, SnappingMode):
            return self.mode
        return SnappingMode.from_bits(self.mode)


def _pair(anchors: frozenset[Anchor], first: Anchor, second: Anchor) -> frozenset[Anchor]:
    if first in anchors or second in anchors:
        return anchors | {first, second}
    return anchors


def canonicalize(mode: SnappingMode, columns: bool) -> SnappingMode:
    """Merge the variants that describe the same points in this orientation."""

    vertices = mode.vertices
    corners = mode.corners
    if columns:
        # Top-left and bottom-left are the same vertex/corner, likewise on the right
        vertices = _pair(vertices, Anchor.TOP_LEFT, Anchor.BOTTOM_LEFT)
        corners = _pair(corners, Anchor.TOP_LEFT, Anchor.BOTTOM_LEFT)
        vertices = _pair(vertices, Anchor.TOP_RIGHT, Anchor.BOTTOM_RIGHT)
        corners = _pair(corners, Anchor.TOP_RIGHT, Anchor.BOTTOM_RIGHT)
        # The left side midpoint is the right vertex of the neighbour and vice versa
        if Side.LEFT in mode.sides:
            vertices = vertices | {Anchor.TOP_RIGHT, Anchor.BOTTOM_RIGHT}
        if Side.RIGHT in mode.sides:
            vertices = vertices | {Anchor.TOP_LEFT, Anchor.BOTTOM_LEFT}
    else:
        vertices = _pair(vertices, Anchor.TOP_LEFT, Anchor.TOP_RIGHT)
        corners = _pair(corners, Anchor.TOP_LEFT, Anchor.TOP_RIGHT)
        vertices = _pair(vertices, Anchor.BOTTOM_LEFT, Anchor.BOTTOM_RIGHT)
        corners = _pair(corners, Anchor.BOTTOM_LEFT, Anchor.BOTTOM_RIGHT)
        if Side.TOP in mode.sides:
            vertices = vertices | {Anchor.BOTTOM_LEFT, Anchor.BOTTOM_RIGHT}
        if Side.BOTTOM in mode.sides:
            vertices = vertices | {Anchor.TOP_LEFT, Anchor.TOP_RIGHT}
    return replace(mode, vertices=vertices, corners=corners)


def _floor(value: float) -> float:
    return math.floor(value) if math.isfinite(value) else value


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return value


class _Snapper:
    """The primitive snappers of one layout at one resolution."""

    def __init__(self, layout: HexLayout, resolution: int) -> None:
        self.layout = layout
        self.resolution = resolution
        self.size_x = layout.size_x
        self.size_y = layout.size_y

    def center(
        self,
        p: Point,
        dx: float = 0.0,
        dy: float = 0.0,
        columns: bool | None = None,
        even: bool | None = None,
        size: float | None = None,
    ) -> Point:
        """Snap to the nearest center of a (translated, subdivided) hex grid."""
        layout = self.layout
        columns = layout.columns if columns is None else columns
        even = layout.even if even is None else even
        size = layout.size if size is None else size

        sub = HexLayout(size=size / self.resolution, columns=columns, even=False)

        # Align the subdivided grid with this grid
        if columns:
            dx += (size - sub.size) * SQRT1_3
            if even:
                dy += size / 2
        else:
            if even:
                dx += size / 2
            dy += (size - sub.size) * SQRT1_3

        local = Point(p.x - dx, p.y - dy)
        snapped = cube_to_point(cube_round(point_to_cube(local, sub)), sub)
        return Point(snapped.x + dx, snapped.y + dy)

    def vertex(self, p: Point, dx: float = 0.0, dy: float = 0.0) -> Point:
        c = self.center(p, dx, dy)
        angle = math.atan2(p.y - c.y, p.x - c.x)
        step = math.pi / 3
        if self.layout.columns:
            angle = round_half_up(angle / step) * step
        else:
            angle = (_floor(angle / step) + 0.5) * step
        radius = max(self.size_x, self.size_y) / (2 * self.resolution)
        return Point(c.x + math.cos(angle) * radius, c.y + math.sin(angle) * radius)

    def vertex_or_center(self, p: Point) -> Point:
        dx = dy = 0.0
        if self.layout.columns:
            size = self.size_x / 2
            dy = size * (SQRT1_3 / 2)
        else:
            size = self.size_y / 2
            dx = size * (SQRT1_3 / 2)
        return self.center(p, dx, dy, not self.layout.columns, not self.layout.even, size)

    def edge(self, p: Point) -> Point:
        c = self.center(p)
        angle = math.atan2(p.y - c.y, p.x - c.x)
        step = math.pi / 3
        if self.layout.columns:
            angle = (_floor(angle / step) + 0.5) * step
        else:
            angle = round_half_up(angle / step) * step
        radius = min(self.size_x, self.size_y) / (2 * self.resolution)
        return Point(c.x + math.cos(angle) * radius, c.y + math.sin(angle) * radius)

    def edge_or_center(self, p: Point) -> Point:
        dx = dy = 0.0
        if self.layout.columns:
            size = self.size_y / 2
            dx = size * SQRT1_3
        else:
            size = self.size_x / 2
            dy = size * SQRT1_3
        return self.center(p, dx, dy, self.layout.columns, False, size)

    def _edge_or_vertex_around(self, p: Point, include_center: bool) -> Point:
        c = self.center(p)
        dx = p.x - c.x
        dy = p.y - c.y
        angle = math.atan2(dy, dx)
        step = math.pi / 3
        if self.layout.columns:
            angle = (_floor(angle / step) + 0.5) * step
        else:
            angle = round_half_up(angle / step) * step
        s = 2 * self.resolution
        radius1, radius2 = sorted((self.size_x / s, self.size_y / s))
        cos = math.cos(angle)
        sin = math.sin(angle)
        if include_center and (cos * dx) + (sin * dy) <= radius1 / 2:
            return c
        d = (cos * dy) - (sin * dx)
        if abs(d) <= radius2 / 4:
            return Point(c.x + cos * radius1, c.y + sin * radius1)
        angle += (math.pi / 6) * _sign(d)
        return Point(c.x + math.cos(angle) * radius2, c.y + math.sin(angle) * radius2)

    def edge_or_vertex(self, p: Point) -> Point:
        return self._edge_or_vertex_around(p, include_center=False)

    def edge_or_vertex_or_center(self, p: Point) -> Point:
        return self._edge_or_vertex_around(p, include_center=True)

    def corner(self, p: Point) -> Point:
        dx = dy = 0.0
        s = 2 * self.resolution
        if self.layout.columns:
            dy = self.size_y / s
        else:
            dx = self.size_x / s
        return self.vertex(p, dx, dy)

    def specific_vertex(self, p: Point, other: bool) -> Point:
        """Top/left vertex, or the bottom/right one when ``other`` is set."""
        dx = dy = 0.0
        s = (-2 if other else 2) * self.resolution
        if self.layout.columns:
            dx = self.size_x / s
        else:
            dy = self.size_y / s
        return self.center(p, dx, dy)

    def specific_vertex_or_center(self, p: Point, other: bool) -> Point:
        dx = dy = 0.0
        s = (2 if other else -2) * self.resolution
        if self.layout.columns:
            dx = self.size_x / s
        else:
            dy = self.size_y / s
        return self.vertex(p, dx, dy)

    def specific_corner(self, p: Point, other: bool) -> Point:
        dx = dy = 0.0
        s = (-4 if other else 4) * self.resolution
        if self.layout.columns:
            dx = self.size_x / s
        else:
            dy = self.size_y / s
        return self.center(p, dx, dy)

    def rectangular_grid(self, p: Point, other: bool) -> Point:
        """Snap to the rectangular lattice formed by complementary vertices and corners.

        ``other`` aligns the rectangles with the top-left vertices instead of
        the top-left corners.
        """
        tx = self.size_x / 2
        ty = self.size_y / 2
        sx = tx
        sy = ty
        dx = dy = 0.0
        d = 1 / 3 if other else 2 / 3
        if self.layout.columns:
            sx *= 1.5
            dx = d
        else:
            sy *= 1.5
            dy = d
        sx /= self.resolution
        sy /= self.resolution
        return Point(
            ((round_half_up(((p.x - tx) / sx) + dx) - dx) * sx) + tx,
            ((round_half_up(((p.y - ty) / sy) + dy) - dy) * sy) + ty,
        )

    def top_or_bottom(self, p: Point) -> Point:
        return self.center(p, 0.0, self.size_y / (2 * self.resolution))

    def left_or_right(self, p: Point) -> Point:
        return self.center(p, self.size_x / (2 * self.resolution), 0.0)


class _Nearest:
    """Keeps the candidate closest to the query point; earlier candidates win ties."""

    def __init__(self, origin: Point) -> None:
        self.origin = origin
        self.point: Point | None = None
        self.distance = math.inf

    def keep(self, candidate: Point) -> None:
        d = ((candidate.x - self.origin.x) ** 2) + ((candidate.y - self.origin.y) ** 2)
        if self.point is None or d < self.distance:
            self.point = candidate
            self.distance = d


def _validate_resolution(resolution: int) -> int:
    if isinstance(resolution, bool) or not isinstance(resolution, int) or resolution < 1:
        raise InvalidSnappingMode(f"resolution must be a positive integer, got {resolution!r}")
    return resolution


def snap_point(layout: HexLayout, point: Point, behavior: SnappingBehavior) -> Point:
    """Snap ``point`` to the nearest position allowed by ``behavior``."""

    mode = behavior.resolved_mode()
    resolution = _validate_resolution(behavior.resolution)
    if mode.is_empty:
        return Point(point.x, point.y)

    mode = canonicalize(mode, layout.columns)
    snap = _Snapper(layout, resolution)
    nearest = _Nearest(point)
    keep: Callable[[Point], None] = nearest.keep

    # Only top/bottom or left/right sides of the bounding box
    if not mode.edge_midpoint:
        if layout.columns:
            if mode.sides & {Side.TOP, Side.BOTTOM}:
                keep(snap.top_or_bottom(point))
        elif mode.sides & {Side.LEFT, Side.RIGHT}:
            keep(snap.left_or_right(point))

    top_left_vertex = Anchor.TOP_LEFT in mode.vertices
    if mode.vertices == ALL_ANCHORS:
        if mode.center and mode.edge_midpoint:
            keep(snap.edge_or_vertex_or_center(point))
        elif mode.edge_midpoint:
            keep(snap.edge_or_vertex(point))
        elif mode.center:
            keep(snap.vertex_or_center(point))
        else:
            keep(snap.vertex(point))
    elif mode.vertices:
        if mode.center and not mode.edge_midpoint:
            keep(snap.specific_vertex_or_center(point, not top_left_vertex))
        else:
            if mode.edge_midpoint and mode.center:
                keep(snap.edge_or_center(point))
            elif mode.edge_midpoint:
                keep(snap.edge(point))

            # Specific vertices and the complementary corners form a rectangular lattice
            if mode.vertices ^ mode.corners == ALL_ANCHORS:
                keep(snap.rectangular_grid(point, Anchor.TOP_LEFT not in mode.corners))
                return nearest.point

            keep(snap.specific_vertex(point, not top_left_vertex))
    else:
        if mode.center and mode.edge_midpoint:
            keep(snap.edge_or_center(point))
        elif mode.edge_midpoint:
            keep(snap.edge(point))
        elif mode.center:
            keep(snap.center(point))

    if mode.corners == ALL_ANCHORS:
        keep(snap.corner(point))
    elif mode.corners:
        keep(snap.specific_corner(point, Anchor.TOP_LEFT not in mode.corners))

    if nearest.point is None:
        raise InvalidSnappingMode(f"Snapping mode {mode.to_bits():#x} selects no snapping target")
    return nearest.point


__all__ = [
    "ALL_ANCHORS",
    "ALL_SIDES",
    "Anchor",
    "GridSnappingModes",
    "Side",
    "SnappingBehavior",
    "SnappingMode",
    "SnappingModeBuilder",
    "VALID_MODE_BITS",
    "canonicalize",
    "snap_point",
]
