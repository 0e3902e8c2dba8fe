import pytest

from hexlattice.hexgrid import (
    ORIGIN,
    ZERO,
    Disk,
    Point,
    Ring,
    Vector,
    disk,
    disk_index_of,
    disk_offsets,
    disk_size,
    distance,
    length,
    ring,
    ring_around,
    ring_index_of,
    ring_offsets,
    ring_region,
    ring_size,
    spiral_around,
    vector_in_disk,
    vector_in_ring,
)


def test_ring_and_disk_sizes():
    assert [ring_size(r) for r in range(4)] == [1, 6, 12, 18]
    assert [disk_size(r) for r in range(4)] == [1, 7, 19, 37]
    for r in range(1, 10):
        assert disk_size(r) == disk_size(r - 1) + ring_size(r)


def test_radius_one_ring_order():
    assert list(ring_offsets(1)) == [
        Vector(1, 0),
        Vector(0, 1),
        Vector(-1, 1),
        Vector(-1, 0),
        Vector(0, -1),
        Vector(1, -1),
    ]


def test_radius_two_ring_order():
    assert list(ring_offsets(2)) == [
        Vector(2, 0),
        Vector(1, 1),
        Vector(0, 2),
        Vector(-1, 2),
        Vector(-2, 2),
        Vector(-2, 1),
        Vector(-2, 0),
        Vector(-1, -1),
        Vector(0, -2),
        Vector(1, -2),
        Vector(2, -2),
        Vector(2, -1),
    ]


def test_ring_zero_is_origin():
    assert vector_in_ring(0, 0) == ZERO
    assert list(ring(0)) == [ORIGIN]


def test_worked_example_radius_three_index_ten():
    assert vector_in_disk(3, 10) == Vector(-1, 2)
    assert disk_index_of(Vector(-1, 2)) == 10
    assert Disk(3).value_at(10) == Point(-1, 2)
    assert Disk(3).index_of(Point(-1, 2)) == 10


@pytest.mark.parametrize("radius", range(0, 8))
def test_disk_round_trip(radius):
    region = Disk(radius)
    for index in region.indices():
        v = vector_in_disk(radius, index)
        assert v is not None
        assert disk_index_of(v) == index
        assert region.index_of(region.value_at(index)) == index


@pytest.mark.parametrize("radius", range(0, 8))
def test_ring_round_trip_and_membership(radius):
    for index in range(ring_size(radius)):
        v = vector_in_ring(radius, index)
        assert length(v) == radius
        assert ring_index_of(v) == index


@pytest.mark.parametrize("radius", range(1, 6))
def test_corners_belong_to_the_segment_they_start(radius):
    for segment in range(6):
        corner = vector_in_ring(radius, segment * radius)
        assert ring_index_of(corner) == segment * radius
    # the corner shared by the last and first segments
    assert ring_index_of(Vector(radius, 0)) == 0


def test_disk_enumerates_each_cell_once():
    cells = list(Disk(4))
    assert len(cells) == disk_size(4)
    assert len(set(cells)) == len(cells)
    assert all(length(p - ORIGIN) <= 4 for p in cells)


@pytest.mark.parametrize("radius", [0, 1, 3])
def test_distance_bounded_by_diameter(radius):
    cells = list(Disk(radius))
    for a in cells:
        assert distance(a, a) == 0
        for b in cells:
            assert distance(a, b) <= 2 * radius


def test_out_of_range_forward_lookups_are_absent():
    assert vector_in_ring(0, 1) is None
    assert vector_in_ring(2, 12) is None
    assert vector_in_ring(2, -1) is None
    assert vector_in_disk(2, 19) is None
    assert vector_in_disk(2, -1) is None
    assert Disk(2).value_at(19) is None
    assert Ring(2).value_at(12) is None


def test_disk_region_contract():
    region = disk(2)
    assert region.radius == 2
    assert region.size() == 19
    assert len(region) == 19
    assert list(region.indices()) == list(range(19))
    assert region.is_valid(0) and region.is_valid(18)
    assert not region.is_valid(19) and not region.is_valid(-1)
    assert region.is_valid(Point(2, -2))
    assert not region.is_valid(Point(3, 0))
    assert Point(-1, 2) in region
    assert region.index_of(Point(3, 0)) is None
    assert not region.is_valid("not a cell")


def test_disk_with_center():
    center = Point(5, -3)
    region = Disk(1, center)
    assert list(region) == list(spiral_around(center, 1))
    assert region.value_at(0) == center
    assert region.value_at(1) == Point(6, -3)
    assert region.index_of(Point(6, -3)) == 1
    assert not region.is_valid(ORIGIN)


def test_ring_region_contract():
    region = ring_region(2, Point(1, 1))
    assert region.size() == 12
    assert list(region) == list(ring_around(Point(1, 1), 2))
    assert region.value_at(3) == Point(0, 3)
    assert region.index_of(Point(0, 3)) == 3
    assert region.index_of(Point(1, 1)) is None
    assert region.is_valid(Point(3, 1))
    assert not region.is_valid(Point(2, 1))
    assert region.is_valid(11) and not region.is_valid(12)


def test_disk_offsets_follow_ring_order():
    offsets = list(disk_offsets(2))
    assert offsets[0] == ZERO
    assert offsets[1:7] == list(ring_offsets(1))
    assert offsets[7:] == list(ring_offsets(2))


@pytest.mark.parametrize("cls", [Disk, Ring])
def test_negative_radius_rejected(cls):
    with pytest.raises(ValueError, match="radius must be non-negative"):
        cls(-1)


def test_regions_only_index_lattice_points():
    region = Disk(2)
    assert region.index_of(Point(0.5, 0.0)) is None
    assert not region.is_valid(Point(0.5, 0.0))
    assert region.index_of(Point(1.0, 0.0)) == 1
    assert region.index_of(Vector(1, 0)) is None
    assert region.index_of("label") is None
    assert not region.is_valid(None)
    assert Ring(1).index_of(Vector(1, 0)) is None
    assert Ring(1).index_of(Point(0.5, 0.5)) is None
    assert Ring(1).index_of(Point(1, 0)) == 0
