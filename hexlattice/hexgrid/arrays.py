"""numpy forms of the ring/disk bijection for bulk work."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .neighbors import NEIGHBORHOODS, neighbor_vector

_DIRECTIONS: NDArray[np.int64] = np.array(
    [(v.q, v.r) for v in map(neighbor_vector, NEIGHBORHOODS)], dtype=np.int64
)


def ring_coordinates(radius: int) -> NDArray[np.int64]:
    """``(ring_size, 2)`` array of ``(q, r)`` ring offsets in canonical order."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    if radius == 0:
        return np.zeros((1, 2), dtype=np.int64)
    index = np.arange(6 * radius, dtype=np.int64)
    segment = index // radius
    offset = (index % radius)[:, np.newaxis]
    return radius * _DIRECTIONS[segment] + offset * _DIRECTIONS[(segment + 2) % 6]


def disk_coordinates(radius: int) -> NDArray[np.int64]:
    """``(disk_size, 2)`` array of ``(q, r)`` disk offsets in canonical order."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    return np.concatenate([ring_coordinates(r) for r in range(radius + 1)])


def disk_indices(qr: ArrayLike) -> NDArray[np.int64]:
    """Canonical disk index of every ``(q, r)`` row of ``qr``."""

    coords = np.asarray(qr, dtype=np.int64)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError("expected an (n, 2) array of (q, r) rows")

    q = coords[:, 0]
    r = coords[:, 1]
    s = -q - r
    radius = np.maximum(np.maximum(np.abs(q), np.abs(r)), np.abs(s))

    # np.select keeps the first matching condition, same order as ring_index_of
    local = np.select(
        [s == -radius, r == radius, q == -radius, s == radius, r == -radius],
        [r, radius - q, 3 * radius - r, 3 * radius - r, 4 * radius + q],
        default=6 * radius + r,
    )
    base = 1 + 3 * (radius - 1) * radius
    return np.where(radius == 0, 0, base + local)
