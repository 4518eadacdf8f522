import pytest

from hexlattice.hexmath import (
    Cube,
    HexLayout,
    MovementDirection,
    Offset,
    adjacent_cubes,
    cube_distance,
    cube_to_offset,
    offset_to_cube,
    shift_offset,
)

D = MovementDirection


def test_adjacent_cubes_six_in_order():
    n = adjacent_cubes(Cube(0, 0, 0))
    assert n == [
        Cube(0, -1, 1),
        Cube(1, -1, 0),
        Cube(1, 0, -1),
        Cube(0, 1, -1),
        Cube(-1, 1, 0),
        Cube(-1, 0, 1),
    ]
    assert all(cube_distance(Cube(0, 0, 0), c) == 1 for c in n)


@pytest.mark.parametrize(
    ("layout", "offset", "expected"),
    [
        (HexLayout(100), Offset(0, 0), {(0, -1), (0, 1), (-1, -1), (-1, 0), (1, -1), (1, 0)}),
        (HexLayout(100), Offset(1, 0), {(1, -1), (1, 1), (0, 0), (0, 1), (2, 0), (2, 1)}),
        (HexLayout(100, columns=True, even=True), Offset(0, 0), {(-1, 0), (1, 0), (0, 1), (1, 1), (0, -1), (1, -1)}),
    ],
)
def test_adjacent_offsets(layout, offset, expected):
    cubes = adjacent_cubes(offset_to_cube(offset, layout))
    got = {(o.i, o.j) for o in (cube_to_offset(c, layout) for c in cubes)}
    assert got == expected


@pytest.mark.parametrize(
    ("columns", "directions"),
    [
        (False, [D.LEFT, D.RIGHT, D.UP_LEFT, D.UP_RIGHT, D.DOWN_LEFT, D.DOWN_RIGHT]),
        (True, [D.UP, D.DOWN, D.UP_LEFT, D.UP_RIGHT, D.DOWN_LEFT, D.DOWN_RIGHT]),
    ],
)
@pytest.mark.parametrize("even", [False, True])
def test_shifted_offsets_are_the_six_neighbours(columns, directions, even):
    layout = HexLayout(100, columns=columns, even=even)
    for origin in (Offset(0, 0), Offset(1, 1), Offset(2, 3), Offset(-1, -2)):
        c0 = offset_to_cube(origin, layout)
        shifted = {shift_offset(origin, d, layout) for d in directions}
        assert len(shifted) == 6
        assert shifted == {cube_to_offset(c, layout) for c in adjacent_cubes(c0)}


def test_shift_odd_rows():
    layout = HexLayout(100)
    assert shift_offset(Offset(0, 0), D.UP_LEFT, layout) == Offset(-1, -1)
    assert shift_offset(Offset(0, 0), D.UP_RIGHT, layout) == Offset(-1, 0)
    assert shift_offset(Offset(1, 0), D.DOWN_RIGHT, layout) == Offset(2, 1)
    assert shift_offset(Offset(1, 0), D.UP, layout) == Offset(0, 0)
