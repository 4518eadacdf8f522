from __future__ import annotations

from enum import IntFlag

from .coords import Cube, HexLayout, Offset

_CUBE_DIRS = (
    (0, -1, +1),
    (+1, -1, 0),
    (+1, 0, -1),
    (0, +1, -1),
    (-1, +1, 0),
    (-1, 0, +1),
)


class MovementDirection(IntFlag):
    UP = 0x1
    DOWN = 0x2
    LEFT = 0x4
    RIGHT = 0x8
    UP_LEFT = UP | LEFT
    UP_RIGHT = UP | RIGHT
    DOWN_LEFT = DOWN | LEFT
    DOWN_RIGHT = DOWN | RIGHT


def adjacent_cubes(c: Cube) -> list[Cube]:
    """The six neighbours in canonical angular order, for any orientation."""
    return [Cube(c.q + dq, c.r + dr, c.s + ds) for dq, dr, ds in _CUBE_DIRS]


def shift_offset(o: Offset, direction: int, layout: HexLayout) -> Offset:
    """Offset of the cell one step away in ``direction``.

    On flat-topped grids a diagonal move stays in the same row when the
    column is shifted toward that diagonal; pointy-topped grids do the same
    for columns.
    """
    direction = MovementDirection(direction)
    i, j = o.i, o.j
    vertical = MovementDirection.UP | MovementDirection.DOWN
    horizontal = MovementDirection.LEFT | MovementDirection.RIGHT
    if layout.columns:
        if bool(direction & MovementDirection.LEFT) != bool(direction & MovementDirection.RIGHT):
            even = (j % 2 == 0) == layout.even
            if (even and direction & MovementDirection.UP) or (not even and direction & MovementDirection.DOWN):
                direction &= ~vertical
    else:
        if bool(direction & MovementDirection.UP) != bool(direction & MovementDirection.DOWN):
            even = (i % 2 == 0) == layout.even
            if (even and direction & MovementDirection.LEFT) or (not even and direction & MovementDirection.RIGHT):
                direction &= ~horizontal
    if direction & MovementDirection.UP:
        i -= 1
    if direction & MovementDirection.DOWN:
        i += 1
    if direction & MovementDirection.LEFT:
        j -= 1
    if direction & MovementDirection.RIGHT:
        j += 1
    return Offset(i, j)
