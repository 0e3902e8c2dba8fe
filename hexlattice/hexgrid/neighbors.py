from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable

from .coords import Axis, Point, SixfoldMixin, Vector
from .rotation import rotate

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..surfaces.surface import Surface


class Neighborhood(SixfoldMixin, Enum):
    """Edge-adjacent directions, each lying between two signed axes."""

    I = 0  # between -r and +q
    J = 1  # between +q and -s
    K = 2  # between -s and +r
    I_NEG = 3  # between +r and -q
    J_NEG = 4  # between -q and +s
    K_NEG = 5  # between +s and -r


NEIGHBORHOODS: tuple[Neighborhood, ...] = tuple(Neighborhood)
AXES: tuple[Axis, ...] = tuple(Axis)

I = Vector(1, 0)
J = I * rotate(1)
K = J * rotate(1)
IJ = I + J


def neighbor_vector(n: Neighborhood) -> Vector:
    return I * rotate(n)


def neighbor(p: Point, n: Neighborhood) -> Point:
    return p + neighbor_vector(n)


def diagonal_neighbor_vector(a: Axis) -> Vector:
    return IJ * rotate(a)


def diagonal_neighbor(p: Point, a: Axis) -> Point:
    return p + diagonal_neighbor_vector(a)


_NEIGHBOR_VECTORS = tuple(neighbor_vector(n) for n in NEIGHBORHOODS)
_DIAGONAL_VECTORS = tuple(diagonal_neighbor_vector(a) for a in AXES)


def neighbors(p: Point) -> Iterable[Point]:
    for d in _NEIGHBOR_VECTORS:
        yield p + d


def diagonal_neighbors(p: Point) -> Iterable[Point]:
    for d in _DIAGONAL_VECTORS:
        yield p + d


def neighbors_within(p: Point, surface: Surface) -> Iterable[Point]:
    for n in neighbors(p):
        if surface.is_valid(n):
            yield n
