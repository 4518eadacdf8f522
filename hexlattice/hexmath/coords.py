from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Cube:
    """Cube coordinates of a hexagon; fractional before rounding."""

    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        total = self.q + self.r + self.s
        if not math.isfinite(total):
            return
        scale = max(1.0, abs(self.q), abs(self.r), abs(self.s))
        if abs(total) > 1e-9 * scale:
            raise ValueError("For cube coords, q + r + s must be 0")

    @classmethod
    def from_axial(cls, q: float, r: float) -> Cube:
        return cls(q, r, 0 - q - r)


@dataclass(frozen=True, slots=True)
class Offset:
    i: int  # row
    j: int  # column


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class HexLayout:
    """The parameters every conversion depends on.

    ``size`` is the short diagonal of the hexagon in pixels. ``columns``
    selects flat-topped hexagons stacked in columns (otherwise pointy-topped
    hexagons in rows) and ``even`` selects which lines are shifted by half a
    cell.
    """

    size: float
    columns: bool = False
    even: bool = False

    @property
    def size_x(self) -> float:
        return self.size * 2 / math.sqrt(3) if self.columns else self.size

    @property
    def size_y(self) -> float:
        return self.size if self.columns else self.size * 2 / math.sqrt(3)


Coordinates = Point | Offset | Cube
