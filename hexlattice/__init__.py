"""Hex lattice coordinates, ring/disk indexing and region-bound sparse maps."""

from .hexgrid import ORIGIN, ZERO, Disk, Neighborhood, Point, Ring, Rotation, Vector, disk, rotate
from .surfaces import IndexedSurface, SparseMap, Surface, bounded_map, indexed_map, sparse_map
from .config import GridConfig, RegionShape

__version__ = "0.1.0"

__all__ = [
    "ORIGIN",
    "ZERO",
    "Disk",
    "GridConfig",
    "IndexedSurface",
    "Neighborhood",
    "Point",
    "RegionShape",
    "Ring",
    "Rotation",
    "SparseMap",
    "Surface",
    "Vector",
    "__version__",
    "bounded_map",
    "disk",
    "indexed_map",
    "rotate",
    "sparse_map",
]
