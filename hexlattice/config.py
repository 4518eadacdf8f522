"""Validated configuration model for hexagonal grids."""

from __future__ import annotations

import math
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .hexmath.coords import HexLayout


class Orientation(str, Enum):
    """Which way the hexagons are stacked."""

    COLUMNS = "columns"  # flat-topped
    ROWS = "rows"  # pointy-topped


class Parity(str, Enum):
    """Whether the even or the odd lines are shifted by half a cell."""

    EVEN = "even"
    ODD = "odd"


class GridType(IntEnum):
    """Numeric grid type identifiers of the hexagonal variants."""

    HEXODDR = 2
    HEXEVENR = 3
    HEXODDQ = 4
    HEXEVENQ = 5


class GridConfiguration(BaseModel):
    """Immutable parameters of a hexagonal grid."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    size: float = Field(gt=0.0)
    distance: float = Field(default=1.0, gt=0.0)
    units: str = Field(default="")
    orientation: Orientation = Field(default=Orientation.ROWS)
    parity: Parity = Field(default=Parity.ODD)

    @field_validator("size", "distance")
    @classmethod
    def _require_finite(cls, value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value

    @field_validator("orientation", "parity", mode="before")
    @classmethod
    def _normalise_enum_text(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_grid_type(cls, grid_type: int, size: float, **kwargs: object) -> GridConfiguration:
        """Build a configuration from a numeric :class:`GridType`."""

        grid_type = GridType(grid_type)
        columns = grid_type in (GridType.HEXODDQ, GridType.HEXEVENQ)
        even = grid_type in (GridType.HEXEVENR, GridType.HEXEVENQ)
        return cls(
            size=size,
            orientation=Orientation.COLUMNS if columns else Orientation.ROWS,
            parity=Parity.EVEN if even else Parity.ODD,
            **kwargs,
        )

    @property
    def columns(self) -> bool:
        return self.orientation is Orientation.COLUMNS

    @property
    def even(self) -> bool:
        return self.parity is Parity.EVEN

    @property
    def grid_type(self) -> GridType:
        if self.columns:
            return GridType.HEXEVENQ if self.even else GridType.HEXODDQ
        return GridType.HEXEVENR if self.even else GridType.HEXODDR

    @property
    def layout(self) -> HexLayout:
        """The conversion parameters derived from this configuration."""

        return HexLayout(size=self.size, columns=self.columns, even=self.even)

    @property
    def size_x(self) -> float:
        """Width of a grid space in pixels."""

        return self.layout.size_x

    @property
    def size_y(self) -> float:
        """Height of a grid space in pixels."""

        return self.layout.size_y


__all__ = [
    "GridConfiguration",
    "GridType",
    "Orientation",
    "Parity",
]
