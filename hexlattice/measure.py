"""Path measurement and direct paths across a hexagonal grid.

The direct path between two cells is the line drawing algorithm of
https://www.redblobgames.com/grids/hexagons/#line-drawing: sample the
straight line in cube space at ``n = cube_distance`` equal steps and round
every sample to its cell.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .hexmath.conversions import offset_to_cube, to_cube, to_fractional_cube, to_offset
from .hexmath.coords import Coordinates, Cube, HexLayout, Offset
from .hexmath.distance import cube_distance

logger = logging.getLogger(__name__)

CostFunction = Callable[[Offset, Offset, float], float]
"""Cost of a move between two grid spaces.

Called with the offset moved from, the offset moved to and the distance
between them, which is 0 if and only if the move is a teleport. Never
called with two equal offsets.
"""

# Nudge applied to samples of paths collinear with hexagon edges
EPS = 1e-6


@dataclass(frozen=True, slots=True)
class PathWaypoint:
    """A waypoint of a measured path; ``teleport`` skips the segment leading to it."""

    coords: Coordinates
    teleport: bool = False


Waypoint = PathWaypoint | Coordinates


@dataclass(eq=False)
class MeasuredSegment:
    """Measurements of the segment between two consecutive waypoints."""

    start: MeasuredWaypoint = field(repr=False)
    end: MeasuredWaypoint = field(repr=False)
    teleport: bool = False
    distance: float = 0.0
    spaces: int = 0
    cost: float = 0.0


@dataclass(eq=False)
class MeasuredWaypoint:
    """Cumulative measurements up to a waypoint."""

    backward: MeasuredSegment | None = field(default=None, repr=False)
    forward: MeasuredSegment | None = field(default=None, repr=False)
    distance: float = 0.0
    spaces: int = 0
    cost: float = 0.0


@dataclass(eq=False)
class PathMeasurement:
    waypoints: list[MeasuredWaypoint] = field(default_factory=list)
    segments: list[MeasuredSegment] = field(default_factory=list)
    distance: float = 0.0
    spaces: int = 0
    cost: float = 0.0


def _unwrap(waypoint: Waypoint) -> tuple[Coordinates, bool]:
    if isinstance(waypoint, PathWaypoint):
        return waypoint.coords, waypoint.teleport
    return waypoint, False


def _collinear_nudge(c0: Cube, c1: Cube, layout: HexLayout) -> tuple[float, float]:
    """The (q, r) nudge for a segment running along hexagon edges, else zero."""
    q0, r0 = c0.q, c0.r
    dq = q0 - c1.q
    dr = r0 - c1.r
    eq = er = 0.0
    if layout.columns:
        start_even = (q0 % 2 == 0) == layout.even
        if dq == dr:
            # SE-NW edges; keep symmetry with the E-W case
            er = EPS if start_even else -EPS
            eq = -er
        elif -2 * dq == dr:
            # SW-NE edges
            eq = EPS if start_even else -EPS
        elif dq == -2 * dr:
            # E-W edges; do not leave the row
            er = -EPS if start_even else EPS
    else:
        start_even = (r0 % 2 == 0) == layout.even
        if dq == dr:
            # SE-NW edges; keep symmetry with the S-N case
            eq = EPS if start_even else -EPS
            er = -eq
        elif dq == -2 * dr:
            # SW-NE edges
            er = EPS if start_even else -EPS
        elif -2 * dq == dr:
            # S-N edges; do not leave the column
            eq = -EPS if start_even else EPS
    return eq, er


def _mix(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def direct_path(layout: HexLayout, waypoints: Sequence[Coordinates]) -> list[Offset]:
    """Offsets of the cells a straight line through the waypoints passes."""

    if not waypoints:
        return []

    c0 = to_cube(waypoints[0], layout)
    path = [to_offset(c0, layout)]

    for coords in waypoints[1:]:
        c1 = to_cube(coords, layout)
        if c0.q == c1.q and c0.r == c1.r:
            continue

        eq, er = _collinear_nudge(c0, c1, layout)
        n = cube_distance(c0, c1)
        steps = int(n) if math.isfinite(n) else 0
        for k in range(1, steps):
            # The extra EPS breaks ties on E-W (columns) or S-N (rows) edges
            t = (k + EPS) / n
            q = _mix(c0.q, c1.q, t) + eq
            r = _mix(c0.r, c1.r, t) + er
            path.append(to_offset(Cube(q, r, 0 - q - r), layout))
        path.append(to_offset(c1, layout))
        c0 = c1

    return path


def _segment_cost(layout: HexLayout, distance: float, start: Cube, end: Cube, cost: CostFunction) -> float:
    path = direct_path(layout, [start, end])
    total = 0.0
    for o0, o1 in zip(path, path[1:]):
        total += cost(o0, o1, distance)
    return total


def measure_path(
    layout: HexLayout,
    distance: float,
    waypoints: Sequence[Waypoint],
    cost: CostFunction | None = None,
) -> PathMeasurement:
    """Measure a shortest, direct path through the waypoints.

    ``distance`` is the length of one grid space in grid units. Without a
    cost function the cost of a segment is its travelled distance in whole
    spaces.
    """

    result = PathMeasurement()
    if not waypoints:
        return result

    start = MeasuredWaypoint()
    result.waypoints.append(start)

    coords, _ = _unwrap(waypoints[0])
    o0 = to_offset(coords, layout)
    c0 = offset_to_cube(o0, layout)
    d0 = to_fractional_cube(coords, layout)

    for waypoint in waypoints[1:]:
        coords, teleport = _unwrap(waypoint)
        o1 = to_offset(coords, layout)
        c1 = offset_to_cube(o1, layout)
        d1 = to_fractional_cube(coords, layout)

        end = MeasuredWaypoint()
        segment = MeasuredSegment(start=start, end=end, teleport=teleport)
        start.forward = end.backward = segment

        if not teleport:
            spaces = cube_distance(c0, c1)
            d = cube_distance(d0, d1)
            if abs(d - spaces) < 1e-8:
                d = spaces
            segment.distance = d * distance
            segment.spaces = spaces
            if cost is not None:
                segment.cost = _segment_cost(layout, distance, c0, c1, cost)
            else:
                segment.cost = spaces * distance
        elif cost is not None and o0 != o1:
            segment.cost = cost(o0, o1, 0)

        result.distance += segment.distance
        result.spaces += segment.spaces
        result.cost += segment.cost

        end.distance = result.distance
        end.spaces = result.spaces
        end.cost = result.cost
        result.waypoints.append(end)
        result.segments.append(segment)

        start = end
        o0, c0, d0 = o1, c1, d1

    logger.debug(
        "Measured %d waypoints: distance=%s spaces=%s cost=%s",
        len(waypoints),
        result.distance,
        result.spaces,
        result.cost,
    )
    return result


__all__ = [
    "CostFunction",
    "MeasuredSegment",
    "MeasuredWaypoint",
    "PathMeasurement",
    "PathWaypoint",
    "Waypoint",
    "direct_path",
    "measure_path",
]
