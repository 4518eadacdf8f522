from .coords import Coordinates, Cube, HexLayout, Offset, Point, Rect
from .conversions import (
    cube_to_offset,
    cube_to_point,
    offset_center,
    offset_to_cube,
    point_to_cube,
    to_center,
    to_cube,
    to_fractional_cube,
    to_offset,
)
from .distance import cube_distance, cube_round, round_half_up
from .neighbors import MovementDirection, adjacent_cubes, shift_offset

__all__ = [
    "Coordinates",
    "Cube",
    "HexLayout",
    "Offset",
    "Point",
    "Rect",
    "cube_to_offset",
    "cube_to_point",
    "offset_center",
    "offset_to_cube",
    "point_to_cube",
    "to_center",
    "to_cube",
    "to_fractional_cube",
    "to_offset",
    "cube_distance",
    "cube_round",
    "round_half_up",
    "MovementDirection",
    "adjacent_cubes",
    "shift_offset",
]
