"""
Hexagonal grid facade.

Ties the configuration to the conversion, snapping, measurement and shape
helpers and exposes them through one polymorphic API: every method that
takes ``coords`` accepts a :class:`Point`, an :class:`Offset` or a
:class:`Cube`.

Usage:
    grid = HexagonalGrid(size=100, orientation="columns", parity="even")
    offset = grid.get_offset(Point(120.0, 80.0))
    snapped = grid.get_snapped_point(Point(120.0, 80.0), SnappingBehavior(GridSnappingModes.VERTEX))
    path = grid.get_direct_path([Offset(0, 0), Offset(3, 4)])
"""

from __future__ import annotations

import logging
from typing import Sequence

from .config import GridConfiguration, GridType
from .hexmath.conversions import (
    cube_to_offset,
    cube_to_point,
    offset_to_cube,
    point_to_cube,
    to_center,
    to_cube,
    to_offset,
)
from .hexmath.coords import Coordinates, Cube, HexLayout, Offset, Point, Rect
from .hexmath.distance import cube_distance, cube_round
from .hexmath.neighbors import adjacent_cubes, shift_offset
from .measure import CostFunction, PathMeasurement, Waypoint, direct_path, measure_path
from .shapes import (
    GridDimensions,
    calculate_dimensions,
    cell_shape,
    cell_vertices,
    cone,
    hex_circle,
    translated_point,
)
from .snapping import SnappingBehavior, snap_point

logger = logging.getLogger(__name__)


class HexagonalGrid:
    """
    A hexagonal grid of flat-topped columns or pointy-topped rows.

    The configuration is fixed at construction; build a new grid to change
    orientation or parity.
    """

    def __init__(self, config: GridConfiguration | None = None, **kwargs: object) -> None:
        if config is None:
            config = GridConfiguration(**kwargs)
        elif kwargs:
            raise TypeError("pass either a GridConfiguration or keyword arguments, not both")
        self._config = config
        self._layout = config.layout
        logger.debug(
            "Created %s grid: size=%s orientation=%s parity=%s",
            config.grid_type.name,
            config.size,
            config.orientation.value,
            config.parity.value,
        )

    # --------- Properties ---------

    @property
    def config(self) -> GridConfiguration:
        return self._config

    @property
    def layout(self) -> HexLayout:
        return self._layout

    @property
    def type(self) -> GridType:
        return self._config.grid_type

    @property
    def size(self) -> float:
        return self._config.size

    @property
    def size_x(self) -> float:
        return self._layout.size_x

    @property
    def size_y(self) -> float:
        return self._layout.size_y

    @property
    def distance(self) -> float:
        return self._config.distance

    @property
    def units(self) -> str:
        return self._config.units

    @property
    def columns(self) -> bool:
        return self._layout.columns

    @property
    def even(self) -> bool:
        return self._layout.even

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"

    # --------- Conversions ---------

    @staticmethod
    def cube_round(cube: Cube) -> Cube:
        return cube_round(cube)

    @staticmethod
    def cube_distance(a: Cube, b: Cube) -> float:
        return cube_distance(a, b)

    def point_to_cube(self, point: Point) -> Cube:
        return point_to_cube(point, self._layout)

    def cube_to_point(self, cube: Cube) -> Point:
        return cube_to_point(cube, self._layout)

    def offset_to_cube(self, offset: Offset) -> Cube:
        return offset_to_cube(offset, self._layout)

    def cube_to_offset(self, cube: Cube) -> Offset:
        return cube_to_offset(cube, self._layout)

    def get_offset(self, coords: Coordinates) -> Offset:
        """Offset of the grid space corresponding to the coordinates."""
        return to_offset(coords, self._layout)

    def get_cube(self, coords: Coordinates) -> Cube:
        """Integer cube coordinates of the grid space corresponding to the coordinates."""
        return to_cube(coords, self._layout)

    def get_center_point(self, coords: Coordinates) -> Point:
        return to_center(coords, self._layout)

    def get_top_left_point(self, coords: Coordinates) -> Point:
        center = self.get_center_point(coords)
        return Point(center.x - (self.size_x / 2), center.y - (self.size_y / 2))

    def get_offset_range(self, bounds: Rect) -> tuple[int, int, int, int]:
        """
        Smallest half-open range ``(i0, j0, i1, j1)`` of offsets whose cells
        intersect the bounds. Empty bounds give ``(i, j, i, j)``.
        """
        x0, y0 = bounds.x, bounds.y
        o00 = self.get_offset(Point(x0, y0))
        i00, j00 = o00.i, o00.j
        if not (bounds.width > 0 and bounds.height > 0):
            return i00, j00, i00, j00
        x1 = x0 + bounds.width
        y1 = y0 + bounds.height
        o01 = self.get_offset(Point(x1, y0))
        o10 = self.get_offset(Point(x0, y1))
        o11 = self.get_offset(Point(x1, y1))
        i01, j01 = o01.i, o01.j
        i10, j10 = o10.i, o10.j
        i11, j11 = o11.i, o11.j
        i0 = min(i00, i01, i10, i11)
        j0 = min(j00, j01, j10, j11)
        i1 = max(i00, i01, i10, i11) + 1
        j1 = max(j00, j01, j10, j11) + 1

        # The corners are inside the range, but an edge of the rectangle may
        # still cross a staggered row or column outside of it.
        size_x, size_y, even = self.size_x, self.size_y, self.even
        if self.columns:
            start_even = j00 % 2 == 0
            if i00 == i01 and j00 < j01 and start_even != even and y0 < i00 * size_y:
                i0 -= 1
            if i10 == i11 and j10 < j11 and start_even == even and y1 > (i10 + 0.5) * size_y:
                i1 += 1
            if j00 == j10 and i00 < i10 and x0 < ((j00 * 0.75) + 0.25) * size_x:
                j0 -= 1
            if j01 == j11 and i01 < i11 and x1 > ((j01 * 0.75) + 0.75) * size_x:
                j1 += 1
        else:
            start_even = i00 % 2 == 0
            if j00 == j10 and i00 < i10 and start_even != even and x0 < j00 * size_x:
                j0 -= 1
            if j01 == j11 and i01 < i11 and start_even == even and x1 > (j01 + 0.5) * size_x:
                j1 += 1
            if i00 == i01 and j00 < j01 and y0 < ((i00 * 0.75) + 0.25) * size_y:
                i0 -= 1
            if i10 == i11 and j10 < j11 and y1 > ((i10 * 0.75) + 0.75) * size_y:
                i1 += 1
        return i0, j0, i1, j1

    # --------- Neighbours ---------

    def get_adjacent_cubes(self, coords: Coordinates) -> list[Cube]:
        return adjacent_cubes(self.get_cube(coords))

    def get_adjacent_offsets(self, coords: Coordinates) -> list[Offset]:
        return [self.get_offset(cube) for cube in self.get_adjacent_cubes(coords)]

    def test_adjacency(self, coords1: Coordinates, coords2: Coordinates) -> bool:
        return cube_distance(self.get_cube(coords1), self.get_cube(coords2)) == 1

    def get_shifted_offset(self, coords: Coordinates, direction: int) -> Offset:
        """Offset of the neighbouring grid space in a :class:`MovementDirection`."""
        return shift_offset(self.get_offset(coords), direction, self._layout)

    def get_shifted_cube(self, coords: Coordinates, direction: int) -> Cube:
        return self.get_cube(self.get_shifted_offset(coords, direction))

    def get_shifted_point(self, point: Point, direction: int) -> Point:
        """The point moved by the offset between its cell and the shifted cell."""
        center = self.get_center_point(point)
        shifted = self.get_center_point(self.get_shifted_offset(center, direction))
        return Point(point.x + (shifted.x - center.x), point.y + (shifted.y - center.y))

    # --------- Shapes ---------

    def get_shape(self) -> list[Point]:
        return cell_shape(self._layout)

    def get_vertices(self, coords: Coordinates) -> list[Point]:
        return cell_vertices(self.get_offset(coords), self._layout)

    def get_circle(self, center: Point, radius: float) -> list[Point]:
        return hex_circle(self._layout, self.distance, center, radius)

    def get_cone(self, origin: Point, radius: float, direction: float, angle: float) -> list[Point]:
        return cone(self._layout, self.distance, origin, radius, direction, angle)

    def get_translated_point(self, point: Point, direction: float, distance: float) -> Point:
        return translated_point(self._layout, self.distance, point, direction, distance)

    def calculate_dimensions(self, width: float, height: float, padding: float) -> GridDimensions:
        return calculate_dimensions(self._layout, width, height, padding)

    # --------- Snapping ---------

    def get_snapped_point(self, point: Point, behavior: SnappingBehavior) -> Point:
        return snap_point(self._layout, point, behavior)

    # --------- Paths ---------

    def measure_path(self, waypoints: Sequence[Waypoint], cost: CostFunction | None = None) -> PathMeasurement:
        return measure_path(self._layout, self.distance, waypoints, cost)

    def get_direct_path(self, waypoints: Sequence[Coordinates]) -> list[Offset]:
        return direct_path(self._layout, waypoints)
