import math

import pytest
from pydantic import ValidationError

from hexlattice import GridConfiguration, GridType, Orientation, Parity


def test_defaults():
    config = GridConfiguration(size=100)
    assert config.orientation is Orientation.ROWS
    assert config.parity is Parity.ODD
    assert config.distance == 1.0
    assert config.units == ""
    assert config.grid_type is GridType.HEXODDR


@pytest.mark.parametrize("size", [0, -5, math.nan, math.inf])
def test_rejects_bad_size(size):
    with pytest.raises(ValidationError):
        GridConfiguration(size=size)


def test_rejects_bad_distance_and_unknown_fields():
    with pytest.raises(ValidationError):
        GridConfiguration(size=100, distance=0)
    with pytest.raises(ValidationError):
        GridConfiguration(size=100, shape="square")


def test_enum_text_is_normalised():
    config = GridConfiguration(size=100, orientation=" Columns ", parity="EVEN")
    assert config.columns and config.even
    assert config.grid_type is GridType.HEXEVENQ


def test_configuration_is_frozen():
    config = GridConfiguration(size=100)
    with pytest.raises(ValidationError):
        config.size = 50


@pytest.mark.parametrize("grid_type", list(GridType))
def test_grid_type_roundtrip(grid_type):
    config = GridConfiguration.from_grid_type(grid_type, 100, distance=5)
    assert config.grid_type is grid_type
    assert config.distance == 5


def test_sizes():
    rows = GridConfiguration(size=100)
    assert rows.size_x == pytest.approx(100)
    assert rows.size_y == pytest.approx(200 / math.sqrt(3))
    assert rows.layout.size == 100
