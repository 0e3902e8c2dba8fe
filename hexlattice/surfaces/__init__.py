"""Surface contracts and the sparse maps built on them."""

from .surface import IndexedSurface, Surface
from .sparse_map import (
    BoundedKeys,
    IndexedKeys,
    KeyPolicy,
    SparseMap,
    UnboundKeys,
    bounded_map,
    indexed_map,
    sparse_map,
)
from .frames import mappings_frame

__all__ = [
    "BoundedKeys",
    "IndexedKeys",
    "IndexedSurface",
    "KeyPolicy",
    "SparseMap",
    "Surface",
    "UnboundKeys",
    "bounded_map",
    "indexed_map",
    "mappings_frame",
    "sparse_map",
]
