from .coords import ORIGIN, ZERO, Axis, Point, Scalar, Vector, distance, length
from .rotation import Rotation, clockwise, counterclockwise, rotate
from .neighbors import (
    AXES,
    I,
    IJ,
    J,
    K,
    NEIGHBORHOODS,
    Neighborhood,
    diagonal_neighbor,
    diagonal_neighbor_vector,
    diagonal_neighbors,
    neighbor,
    neighbor_vector,
    neighbors,
    neighbors_within,
)
from .disk import (
    Disk,
    Ring,
    disk,
    disk_index_of,
    disk_offsets,
    disk_size,
    ring,
    ring_around,
    ring_index_of,
    ring_indices,
    ring_offsets,
    ring_region,
    ring_size,
    spiral_around,
    vector_in_disk,
    vector_in_ring,
)
from .rounding import hex_round
from .arrays import disk_coordinates, disk_indices, ring_coordinates

__all__ = [
    "ORIGIN",
    "ZERO",
    "Axis",
    "Point",
    "Scalar",
    "Vector",
    "distance",
    "length",
    "Rotation",
    "clockwise",
    "counterclockwise",
    "rotate",
    "AXES",
    "I",
    "IJ",
    "J",
    "K",
    "NEIGHBORHOODS",
    "Neighborhood",
    "diagonal_neighbor",
    "diagonal_neighbor_vector",
    "diagonal_neighbors",
    "neighbor",
    "neighbor_vector",
    "neighbors",
    "neighbors_within",
    "Disk",
    "Ring",
    "disk",
    "disk_index_of",
    "disk_offsets",
    "disk_size",
    "ring",
    "ring_around",
    "ring_index_of",
    "ring_indices",
    "ring_offsets",
    "ring_region",
    "ring_size",
    "spiral_around",
    "vector_in_disk",
    "vector_in_ring",
    "hex_round",
    "disk_coordinates",
    "disk_indices",
    "ring_coordinates",
]
