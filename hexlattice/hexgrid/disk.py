"""Canonical linear indexing of hex rings and disks.

A ring of radius ``R > 0`` is walked as six segments of ``R`` cells. Segment
``k`` starts at the corner ``R * unit(I + k)`` and walks along
``unit(I + k + 2)``; each segment owns its starting corner but not its end
corner. A disk is ring 0, then ring 1, ... ring ``R``::

                      +-----+
                     /       \\
              +-----+   0,2   +-----+
             /       \\       /       \\
      +-----+  -1,2   +-----+   1,1   +-----+
     /       \\       /       \\       /       \\
    +  -2,2   +-----+   0,1   +-----+   2,0   +
     \\       /       \\       /       \\       /
      +-----+  -1,1   +-----+   1,0   +-----+
     /       \\       /       \\       /       \\
    +  -2,1   +-----+   0,0   +-----+   2,-1  +
     \\       /       \\       /       \\       /
      +-----+  -1,0   +-----+   1,-1  +-----+
     /       \\       /       \\       /       \\
    +  -2,0   +-----+   0,-1  +-----+   2,-2  +
     \\       /       \\       /       \\       /
      +-----+  -1,-1  +-----+   1,-2  +-----+
             \\       /       \\       /
              +-----+   0,-2  +-----+
                     \\       /
                      +-----+

Scalars must be wide enough to hold ``3 * R * R``; Python ints always are.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Iterator

from .coords import ORIGIN, ZERO, Point, Scalar, Vector, length
from .neighbors import Neighborhood, neighbor_vector


def ring_size(radius: int) -> int:
    return 1 if radius == 0 else 6 * radius


def disk_size(radius: int) -> int:
    # 1 + sum(6 * i for i in 1..radius)
    return 1 + 3 * radius * (radius + 1)


def ring_indices(radius: int) -> range:
    return range(ring_size(radius))


def vector_in_ring(radius: int, index: int) -> Vector | None:
    """Return the ``index``-th offset of the ring, or ``None`` when out of range."""

    if radius < 0 or index < 0:
        return None
    if radius == 0:
        return ZERO if index == 0 else None
    if index >= 6 * radius:
        return None

    start = Neighborhood.I + index // radius
    edge = start + 2
    return radius * neighbor_vector(start) + (index % radius) * neighbor_vector(edge)


def vector_in_disk(radius: int, index: int) -> Vector | None:
    """Return the ``index``-th offset of the disk, or ``None`` when out of range."""

    if index < 0:
        return None
    for r in range(radius + 1):
        size = ring_size(r)
        if index < size:
            return vector_in_ring(r, index)
        index -= size
    return None


def ring_index_of(v: Vector) -> Scalar:
    """Index of ``v`` within the ring of radius ``length(v)``.

    Segment tests and local offsets::

        s == -R  ->  0R + r
        r ==  R  ->  1R - q
        q == -R  ->  2R + (R - r)
        s ==  R  ->  3R - r
        r == -R  ->  4R + q
        q ==  R  ->  5R + (R + r)

    The six boundary tests run in a fixed order and the first match wins, so
    a corner shared by two segments belongs to the segment it starts. Moving
    the ``q == radius`` test earlier would give ``<R,0>`` the index ``6R``
    instead of ``0``.
    """

    radius = length(v)
    if radius == 0:
        return 0

    q, r, s = v.q, v.r, v.s
    if s == -radius:
        return r
    if r == radius:
        return radius - q
    if q == -radius:
        return 2 * radius + (radius - r)
    if s == radius:
        return 3 * radius - r
    if r == -radius:
        return 4 * radius + q
    return 5 * radius + (radius + r)


def disk_index_of(v: Vector) -> Scalar:
    """Canonical disk index of ``v``, valid for any disk containing it."""

    radius = length(v)
    if radius == 0:
        return 0
    return disk_size(radius - 1) + ring_index_of(v)


def ring_offsets(radius: int) -> Iterator[Vector]:
    for i in ring_indices(radius):
        yield vector_in_ring(radius, i)


def ring_around(center: Point, radius: int) -> Iterator[Point]:
    for offset in ring_offsets(radius):
        yield center + offset


def ring(radius: int) -> Iterator[Point]:
    return ring_around(ORIGIN, radius)


def disk_offsets(radius: int) -> Iterator[Vector]:
    for r in range(radius + 1):
        yield from ring_offsets(r)


def spiral_around(center: Point, radius: int) -> Iterator[Point]:
    for offset in disk_offsets(radius):
        yield center + offset


def _lattice_offset(p: object, center: Point) -> Vector | None:
    """Offset of ``p`` from ``center``, or ``None`` unless ``p`` is a lattice cell."""

    if not isinstance(p, Point):
        return None
    for c in (p.q, p.r):
        if not isinstance(c, Real) or not float(c).is_integer():
            return None
    return p - center


@dataclass(frozen=True, slots=True)
class Disk:
    """All positions within ``radius`` hops of ``center``, indexed canonically."""

    radius: int
    center: Point = ORIGIN

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must be non-negative")

    def size(self) -> int:
        return disk_size(self.radius)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Point]:
        return spiral_around(self.center, self.radius)

    def __contains__(self, item: object) -> bool:
        return self.is_valid(item)

    def indices(self) -> range:
        return range(self.size())

    def positions(self) -> Iterator[Point]:
        return iter(self)

    def value_at(self, index: int) -> Point | None:
        offset = vector_in_disk(self.radius, index)
        return None if offset is None else self.center + offset

    def index_of(self, p: Point) -> int | None:
        offset = _lattice_offset(p, self.center)
        if offset is None or length(offset) > self.radius:
            return None
        return int(disk_index_of(offset))

    def is_valid(self, value: object) -> bool:
        if isinstance(value, Integral):
            return 0 <= value < self.size()
        return self.index_of(value) is not None


@dataclass(frozen=True, slots=True)
class Ring:
    """Positions exactly ``radius`` hops from ``center``, indexed canonically."""

    radius: int
    center: Point = ORIGIN

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must be non-negative")

    def size(self) -> int:
        return ring_size(self.radius)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Point]:
        return ring_around(self.center, self.radius)

    def __contains__(self, item: object) -> bool:
        return self.is_valid(item)

    def indices(self) -> range:
        return ring_indices(self.radius)

    def positions(self) -> Iterator[Point]:
        return iter(self)

    def value_at(self, index: int) -> Point | None:
        offset = vector_in_ring(self.radius, index)
        return None if offset is None else self.center + offset

    def index_of(self, p: Point) -> int | None:
        offset = _lattice_offset(p, self.center)
        if offset is None or length(offset) != self.radius:
            return None
        return int(ring_index_of(offset))

    def is_valid(self, value: object) -> bool:
        if isinstance(value, Integral):
            return 0 <= value < self.size()
        return self.index_of(value) is not None


def disk(radius: int, center: Point = ORIGIN) -> Disk:
    return Disk(radius, center)


def ring_region(radius: int, center: Point = ORIGIN) -> Ring:
    return Ring(radius, center)
