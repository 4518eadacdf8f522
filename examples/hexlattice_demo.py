from hexlattice import (
    GridSnappingModes,
    HexagonalGrid,
    Offset,
    PathWaypoint,
    Point,
    SnappingBehavior,
)

grid = HexagonalGrid(size=100, distance=5, units="ft", orientation="columns", parity="even")
start = Offset(0, 0)
goal = Offset(3, 4)

difficult = {Offset(1, 1), Offset(2, 2)}


def cost(a: Offset, b: Offset, distance: float) -> float:
    return distance * 2 if b in difficult else distance


if __name__ == "__main__":
    print("path:", grid.get_direct_path([start, goal]))
    result = grid.measure_path([start, goal, PathWaypoint(Offset(0, 6), teleport=True)], cost)
    print(f"distance: {result.distance} {grid.units} over {result.spaces} spaces, cost {result.cost}")
    snapped = grid.get_snapped_point(Point(120, 80), SnappingBehavior(GridSnappingModes.CENTER | GridSnappingModes.VERTEX))
    print("snapped:", snapped)
