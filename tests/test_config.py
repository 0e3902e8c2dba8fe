import pytest
from pydantic import ValidationError

from hexlattice import GridConfig, RegionShape
from hexlattice.config import HexPointModel
from hexlattice.hexgrid import Disk, Point, Ring


def test_defaults_describe_a_single_cell_disk():
    config = GridConfig()
    assert config.shape is RegionShape.DISK
    assert config.region() == Disk(0)
    assert config.size == 1


def test_builds_ring_from_plain_payload():
    config = GridConfig.model_validate({"shape": "ring", "radius": 2, "center": [1, -1]})
    assert config.center == HexPointModel(q=1, r=-1)
    assert config.region() == Ring(2, Point(1, -1))
    assert config.size == 12


def test_indexed_map_uses_configured_region():
    grid = GridConfig(radius=3).indexed_map()
    assert grid.set(Point(-1, 2), "beacon")
    assert grid.keys() == {10}
    assert not grid.set(Point(4, 0), "outside")


def test_point_model_accepts_points_and_round_trips():
    model = HexPointModel.model_validate(Point(2, -5))
    assert model.to_point() == Point(2, -5)


@pytest.mark.parametrize(
    "payload",
    [
        {"radius": -1},
        {"shape": "square"},
        {"radius": 1, "unexpected": True},
        {"center": [1, 2, 3]},
    ],
)
def test_invalid_payloads_raise(payload):
    with pytest.raises(ValidationError):
        GridConfig.model_validate(payload)
