import math

import pytest

from hexlattice import HexagonalGrid, InvalidSnappingMode
from hexlattice.hexmath import Offset, Point
from hexlattice.snapping import (
    ALL_ANCHORS,
    Anchor,
    GridSnappingModes,
    Side,
    SnappingBehavior,
    SnappingMode,
    canonicalize,
)

M = GridSnappingModes
ROOT3 = math.sqrt(3)


def _xy(p):
    return (p.x, p.y)


def test_builder_matches_bits():
    mode = SnappingMode.builder().center().vertex().build()
    assert mode.to_bits() == 0xF1
    assert SnappingMode.from_bits(0xF1) == mode
    specific = SnappingMode.builder().corner(Anchor.TOP_LEFT).side_midpoint(Side.LEFT).build()
    assert specific.to_bits() == M.TOP_LEFT_CORNER | M.LEFT_SIDE_MIDPOINT


@pytest.mark.parametrize("bits", [-1, 0x4, 0x8, 0x10000])
def test_invalid_bits_raise(bits):
    with pytest.raises(InvalidSnappingMode):
        SnappingMode.from_bits(bits)


@pytest.mark.parametrize("resolution", [0, -2, 1.5, True])
def test_invalid_resolution_raises(resolution):
    grid = HexagonalGrid(size=100)
    with pytest.raises(InvalidSnappingMode):
        grid.get_snapped_point(Point(1, 2), SnappingBehavior(M.CENTER, resolution))


def test_invalid_snapping_mode_is_a_value_error():
    with pytest.raises(ValueError):
        SnappingMode.from_bits(0x4)


def test_empty_mode_returns_point():
    grid = HexagonalGrid(size=100)
    assert grid.get_snapped_point(Point(3.5, -2), SnappingBehavior(0)) == Point(3.5, -2)


def test_canonicalize_merges_equivalent_variants():
    rows = canonicalize(SnappingMode(vertices=frozenset({Anchor.TOP_LEFT})), columns=False)
    assert rows.vertices == {Anchor.TOP_LEFT, Anchor.TOP_RIGHT}
    cols = canonicalize(SnappingMode(sides=frozenset({Side.LEFT})), columns=True)
    assert cols.vertices == {Anchor.TOP_RIGHT, Anchor.BOTTOM_RIGHT}
    assert canonicalize(SnappingMode(vertices=ALL_ANCHORS), columns=True).vertices == ALL_ANCHORS


def test_center_snap():
    grid = HexagonalGrid(size=100)
    snapped = grid.get_snapped_point(Point(12, 70), SnappingBehavior(M.CENTER))
    assert _xy(snapped) == pytest.approx((0, 100 / ROOT3))


def test_vertex_snap_pointy():
    grid = HexagonalGrid(size=100)
    snapped = grid.get_snapped_point(Point(2, 3), SnappingBehavior(M.VERTEX))
    assert _xy(snapped) == pytest.approx((0, 0), abs=1e-9)


def test_center_or_vertex_keeps_canonical_points():
    grid = HexagonalGrid(size=100)
    behavior = SnappingBehavior(M.CENTER | M.VERTEX)
    assert _xy(grid.get_snapped_point(Point(0, 100 / ROOT3), behavior)) == pytest.approx((0, 100 / ROOT3))
    assert _xy(grid.get_snapped_point(Point(0, 0), behavior)) == pytest.approx((0, 0), abs=1e-9)
    # Close to the vertex rather than the center
    assert _xy(grid.get_snapped_point(Point(3, 8), behavior)) == pytest.approx((0, 0), abs=1e-9)


def test_edge_midpoint_snap_pointy():
    grid = HexagonalGrid(size=100)
    # Right edge of cell (0, 0) is the vertical edge at x = 50
    snapped = grid.get_snapped_point(Point(45, 60), SnappingBehavior(M.EDGE_MIDPOINT))
    assert _xy(snapped) == pytest.approx((50, 100 / ROOT3))


def test_resolution_subdivides_centers():
    grid = HexagonalGrid(size=100)
    center = grid.get_center_point(Offset(0, 0))
    assert _xy(grid.get_snapped_point(center, SnappingBehavior(M.CENTER, 2))) == pytest.approx(_xy(center))


IDEMPOTENT_MODES = [
    M.CENTER,
    M.VERTEX,
    M.EDGE_MIDPOINT,
    M.CENTER | M.VERTEX,
    M.CORNER,
    M.TOP_LEFT_CORNER,
    M.TOP_LEFT_VERTEX,
    M.TOP_LEFT_VERTEX | M.CENTER,
    M.TOP_LEFT_VERTEX | M.BOTTOM_LEFT_CORNER | M.BOTTOM_RIGHT_CORNER,
    M.SIDE_MIDPOINT,
    M.EDGE_MIDPOINT | M.VERTEX,
    M.EDGE_MIDPOINT | M.VERTEX | M.CENTER,
    M.EDGE_MIDPOINT | M.CENTER,
]


@pytest.mark.parametrize("columns", [False, True])
@pytest.mark.parametrize("even", [False, True])
@pytest.mark.parametrize("resolution", [1, 2, 3])
@pytest.mark.parametrize("bits", IDEMPOTENT_MODES)
def test_snapping_is_idempotent(columns, even, resolution, bits):
    grid = HexagonalGrid(size=100, orientation="columns" if columns else "rows", parity="even" if even else "odd")
    behavior = SnappingBehavior(bits, resolution)
    for p in (Point(13, 17), Point(-41, 92), Point(260, -35), Point(77.7, 140.2)):
        once = grid.get_snapped_point(p, behavior)
        twice = grid.get_snapped_point(once, behavior)
        assert _xy(twice) == pytest.approx(_xy(once), abs=1e-6)


H = 50 / ROOT3


@pytest.mark.parametrize(
    ("bits", "point", "expected"),
    [
        # corner
        (M.CORNER, (-45, 5), (-50, 0)),
        # specific_corner
        (M.TOP_LEFT_CORNER, (-45, 5), (-50, 0)),
        # specific_vertex
        (M.TOP_LEFT_VERTEX, (45, 25), (50, H)),
        # specific_vertex_or_center
        (M.TOP_LEFT_VERTEX | M.CENTER, (3, 50), (0, 2 * H)),
        (M.TOP_LEFT_VERTEX | M.CENTER, (45, 25), (50, H)),
        # rectangular_grid
        (M.TOP_LEFT_VERTEX | M.BOTTOM_LEFT_CORNER | M.BOTTOM_RIGHT_CORNER, (45, 25), (50, H)),
        (M.TOP_LEFT_VERTEX | M.BOTTOM_LEFT_CORNER | M.BOTTOM_RIGHT_CORNER, (-45, 110), (-50, 4 * H)),
        # left_or_right and vertex
        (M.SIDE_MIDPOINT, (48, 60), (50, 2 * H)),
        (M.SIDE_MIDPOINT, (3, 3), (0, 0)),
        # edge_or_vertex
        (M.EDGE_MIDPOINT | M.VERTEX, (45, 60), (50, 2 * H)),
        (M.EDGE_MIDPOINT | M.VERTEX, (45, 85), (50, 3 * H)),
        # edge_or_vertex_or_center
        (M.EDGE_MIDPOINT | M.VERTEX | M.CENTER, (5, 60), (0, 2 * H)),
        (M.EDGE_MIDPOINT | M.VERTEX | M.CENTER, (45, 60), (50, 2 * H)),
        # edge_or_center
        (M.EDGE_MIDPOINT | M.CENTER, (45, 60), (50, 2 * H)),
        (M.EDGE_MIDPOINT | M.CENTER, (10, 55), (0, 2 * H)),
    ],
)
def test_snapped_points_odd_rows(bits, point, expected):
    grid = HexagonalGrid(size=100)
    snapped = grid.get_snapped_point(Point(*point), SnappingBehavior(bits))
    assert _xy(snapped) == pytest.approx(expected, abs=1e-9)


def test_side_midpoint_odd_columns_uses_top_or_bottom():
    grid = HexagonalGrid(size=100, orientation="columns")
    snapped = grid.get_snapped_point(Point(60, 45), SnappingBehavior(M.SIDE_MIDPOINT))
    assert _xy(snapped) == pytest.approx((100 / ROOT3, 50))


def test_canonicalize_side_midpoints():
    top = canonicalize(SnappingMode(sides=frozenset({Side.TOP})), columns=False)
    assert top.vertices == {Anchor.BOTTOM_LEFT, Anchor.BOTTOM_RIGHT}
    bottom = canonicalize(SnappingMode(sides=frozenset({Side.BOTTOM})), columns=False)
    assert bottom.vertices == {Anchor.TOP_LEFT, Anchor.TOP_RIGHT}
    right = canonicalize(SnappingMode(sides=frozenset({Side.RIGHT})), columns=True)
    assert right.vertices == {Anchor.TOP_LEFT, Anchor.BOTTOM_LEFT}
    corners = canonicalize(SnappingMode(corners=frozenset({Anchor.BOTTOM_RIGHT})), columns=True)
    assert corners.corners == {Anchor.TOP_RIGHT, Anchor.BOTTOM_RIGHT}
    assert corners.vertices == frozenset()


def test_snapped_point_is_nearest_candidate():
    grid = HexagonalGrid(size=100)
    p = Point(20, 30)
    snapped = grid.get_snapped_point(p, SnappingBehavior(M.CENTER | M.VERTEX))
    d_snapped = math.dist(_xy(p), _xy(snapped))
    center = grid.get_center_point(p)
    assert d_snapped <= math.dist(_xy(p), _xy(center)) + 1e-9
    for vertex in grid.get_vertices(p):
        assert d_snapped <= math.dist(_xy(p), _xy(vertex)) + 1e-9
