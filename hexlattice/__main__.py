"""Command line entry point for inspecting hexagonal grid coordinates."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import GridConfiguration, Orientation, Parity
from .errors import HexLatticeError
from .grid import HexagonalGrid
from .hexmath.coords import Offset, Point
from .measure import PathWaypoint
from .snapping import GridSnappingModes, SnappingBehavior

logger = logging.getLogger(__name__)


def _offset_arg(text: str) -> Offset:
    try:
        i, j = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected I,J but got {text!r}") from None
    return Offset(i, j)


def _mode_arg(text: str) -> int:
    bits = 0
    for name in text.split(","):
        key = name.strip().upper().replace("-", "_")
        try:
            bits |= GridSnappingModes[key]
        except KeyError:
            choices = ", ".join(m.name.lower() for m in GridSnappingModes)
            raise argparse.ArgumentTypeError(f"unknown snapping mode {name!r} (choose from {choices})") from None
    return int(bits)


def _fmt(value: float) -> str:
    if not isinstance(value, float):
        return str(value)
    # + 0.0 turns -0.0 into 0.0
    return f"{round(value, 4) + 0.0:.4f}".rstrip("0").rstrip(".")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexlattice", description="Hexagonal grid coordinate engine")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("--size", type=float, default=100.0, help="Grid size in pixels")
    ap.add_argument("--distance", type=float, default=1.0, help="Grid units per grid space")
    ap.add_argument("--units", default="", help="Label of the grid units")
    ap.add_argument("--columns", action="store_true", help="Flat-topped columns instead of pointy-topped rows")
    ap.add_argument("--even", action="store_true", help="Shift the even lines instead of the odd ones")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = ap.add_subparsers(dest="command", required=True)

    locate = sub.add_parser("locate", help="Offset, cube and center of the cell at a point")
    locate.add_argument("x", type=float)
    locate.add_argument("y", type=float)

    snap = sub.add_parser("snap", help="Snap a point to the grid")
    snap.add_argument("x", type=float)
    snap.add_argument("y", type=float)
    snap.add_argument("--mode", type=_mode_arg, default=int(GridSnappingModes.CENTER), help="Comma separated modes")
    snap.add_argument("--resolution", type=int, default=1)

    path = sub.add_parser("path", help="Cells of the direct path through offsets")
    path.add_argument("waypoints", type=_offset_arg, nargs="+", metavar="I,J")

    measure = sub.add_parser("measure", help="Measure a path through offsets")
    measure.add_argument("waypoints", type=_offset_arg, nargs="+", metavar="I,J")
    measure.add_argument(
        "--teleport", type=int, action="append", default=[], metavar="K", help="Teleport to waypoint K"
    )

    vertices = sub.add_parser("vertices", help="Outline of a cell")
    vertices.add_argument("offset", type=_offset_arg, metavar="I,J")

    dims = sub.add_parser("dimensions", help="Padded canvas dimensions of a scene")
    dims.add_argument("width", type=float)
    dims.add_argument("height", type=float)
    dims.add_argument("--padding", type=float, default=0.0)
    return ap


def _grid_from_args(ap: argparse.ArgumentParser, args: argparse.Namespace) -> HexagonalGrid:
    try:
        config = GridConfiguration(
            size=args.size,
            distance=args.distance,
            units=args.units,
            orientation=Orientation.COLUMNS if args.columns else Orientation.ROWS,
            parity=Parity.EVEN if args.even else Parity.ODD,
        )
    except ValidationError as exc:
        ap.error(f"invalid grid configuration: {exc}")
    return HexagonalGrid(config)


def _run(grid: HexagonalGrid, args: argparse.Namespace, console: Console) -> None:
    if args.command == "locate":
        point = Point(args.x, args.y)
        offset = grid.get_offset(point)
        cube = grid.get_cube(offset)
        center = grid.get_center_point(offset)
        table = Table(title=f"Cell at ({_fmt(args.x)}, {_fmt(args.y)})")
        table.add_column("Space")
        table.add_column("Coordinates")
        table.add_row("offset", f"i={offset.i} j={offset.j}")
        table.add_row("cube", f"q={cube.q} r={cube.r} s={cube.s}")
        table.add_row("center", f"x={_fmt(center.x)} y={_fmt(center.y)}")
        console.print(table)

    elif args.command == "snap":
        snapped = grid.get_snapped_point(Point(args.x, args.y), SnappingBehavior(args.mode, args.resolution))
        console.print(f"x={_fmt(snapped.x)} y={_fmt(snapped.y)}")

    elif args.command == "path":
        table = Table(title="Direct path")
        table.add_column("#", justify="right")
        table.add_column("i", justify="right")
        table.add_column("j", justify="right")
        for index, offset in enumerate(grid.get_direct_path(args.waypoints)):
            table.add_row(str(index), str(offset.i), str(offset.j))
        console.print(table)

    elif args.command == "measure":
        waypoints = [
            PathWaypoint(offset, teleport=index in args.teleport) for index, offset in enumerate(args.waypoints)
        ]
        result = grid.measure_path(waypoints)
        units = f" {grid.units}" if grid.units else ""
        table = Table(title="Path measurement")
        table.add_column("#", justify="right")
        table.add_column("Waypoint")
        table.add_column("Distance", justify="right")
        table.add_column("Spaces", justify="right")
        table.add_column("Cost", justify="right")
        for index, (offset, waypoint) in enumerate(zip(args.waypoints, result.waypoints)):
            label = f"{offset.i},{offset.j}"
            if index in args.teleport:
                label += " (teleport)"
            table.add_row(
                str(index), label, _fmt(waypoint.distance) + units, str(waypoint.spaces), _fmt(waypoint.cost)
            )
        console.print(table)

    elif args.command == "vertices":
        table = Table(title=f"Vertices of {args.offset.i},{args.offset.j}")
        table.add_column("x", justify="right")
        table.add_column("y", justify="right")
        for vertex in grid.get_vertices(args.offset):
            table.add_row(_fmt(vertex.x), _fmt(vertex.y))
        console.print(table)

    elif args.command == "dimensions":
        dims = grid.calculate_dimensions(args.width, args.height, args.padding)
        table = Table(title="Canvas dimensions")
        table.add_column("Field")
        table.add_column("Value", justify="right")
        for name in ("width", "height", "x", "y", "rows", "columns"):
            table.add_row(name, _fmt(getattr(dims, name)))
        console.print(table)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    console = console or Console()
    grid = _grid_from_args(ap, args)
    try:
        _run(grid, args, console)
    except HexLatticeError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
