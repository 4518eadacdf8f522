"""Hexagonal grid coordinate engine."""

from __future__ import annotations

from .config import GridConfiguration, GridType, Orientation, Parity
from .errors import HexLatticeError, InvalidSnappingMode
from .grid import HexagonalGrid
from .hexmath import Cube, MovementDirection, Offset, Point, Rect
from .measure import MeasuredSegment, MeasuredWaypoint, PathMeasurement, PathWaypoint
from .shapes import GridDimensions
from .snapping import (
    Anchor,
    GridSnappingModes,
    Side,
    SnappingBehavior,
    SnappingMode,
    SnappingModeBuilder,
)

__version__ = "0.1.0"

__all__ = [
    "Anchor",
    "Cube",
    "GridConfiguration",
    "GridDimensions",
    "GridSnappingModes",
    "GridType",
    "HexLatticeError",
    "HexagonalGrid",
    "InvalidSnappingMode",
    "MeasuredSegment",
    "MeasuredWaypoint",
    "MovementDirection",
    "Offset",
    "Orientation",
    "Parity",
    "PathMeasurement",
    "PathWaypoint",
    "Point",
    "Rect",
    "Side",
    "SnappingBehavior",
    "SnappingMode",
    "SnappingModeBuilder",
    "__version__",
]
