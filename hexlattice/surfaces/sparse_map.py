"""Sparse key/value storage over unbound, bounded or indexed regions.

One dict-backed :class:`SparseMap` is configured with a key policy. The policy
turns a caller key into a storage key, or rejects it:

* :class:`UnboundKeys` accepts everything,
* :class:`BoundedKeys` accepts keys its surface considers valid, reading
  integral keys on an indexed surface as indices of positions,
* :class:`IndexedKeys` stores by index; integral keys are indices and any
  other key is a position translated with the surface's ``index_of``.

Rejected keys never raise: ``optional`` gives ``None``, ``set`` gives
``False``, ``get`` gives the fallback and ``contains`` gives ``False``.

Maps are not synchronised. Concurrent readers are fine while no writer is
active; writers must be serialised by the caller.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Generic, Hashable, ItemsView, Iterator, KeysView, TypeVar, ValuesView

from .surface import IndexedSurface, Surface

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_REJECTED = object()


class UnboundKeys:
    """Accept any hashable key as-is."""

    bounds = None

    def resolve(self, key: Hashable) -> Any:
        return key


class BoundedKeys:
    """Accept positions inside ``surface``.

    On an indexed surface an integral key is read as an index and stored under
    its position, so a cell never has two entries.
    """

    def __init__(self, surface: Surface) -> None:
        if not isinstance(surface, Surface):
            raise TypeError("bounded maps require a surface with is_valid() and size()")
        self.bounds = surface

    def resolve(self, key: Hashable) -> Any:
        if isinstance(key, Integral) and isinstance(self.bounds, IndexedSurface):
            position = self.bounds.value_at(key) if self.bounds.is_valid(key) else None
            return _REJECTED if position is None else position
        return key if self.bounds.is_valid(key) else _REJECTED


class IndexedKeys:
    """Store by the index of ``surface``, translating positions on the way in."""

    def __init__(self, surface: IndexedSurface) -> None:
        if not isinstance(surface, IndexedSurface):
            raise TypeError(
                "indexed maps require a surface with value_at(), index_of(), indices()"
            )
        self.bounds = surface

    def resolve(self, key: Hashable) -> Any:
        if not isinstance(key, Integral):
            key = self.bounds.index_of(key)
            if key is None:
                return _REJECTED
        return key if self.bounds.is_valid(key) else _REJECTED


KeyPolicy = UnboundKeys | BoundedKeys | IndexedKeys


class SparseMap(Generic[K, V]):
    """Mapping from keys to values where unoccupied keys are simply absent."""

    def __init__(self, policy: KeyPolicy | None = None) -> None:
        self._policy: KeyPolicy = policy or UnboundKeys()
        self._content: dict[Any, V] = {}

    # ------------------------------------------------------------------
    @property
    def policy(self) -> KeyPolicy:
        return self._policy

    @property
    def bounds(self) -> Any:
        """Region backing this map, ``None`` for unbound maps."""

        return self._policy.bounds

    @property
    def is_indexed(self) -> bool:
        return isinstance(self._policy, IndexedKeys)

    def area(self) -> int | None:
        bounds = self.bounds
        return None if bounds is None else bounds.size()

    def is_valid(self, key: Hashable) -> bool:
        return self._policy.resolve(key) is not _REJECTED

    # ------------------------------------------------------------------
    def optional(self, key: Hashable) -> V | None:
        resolved = self._policy.resolve(key)
        if resolved is _REJECTED:
            return None
        return self._content.get(resolved)

    def get(self, key: Hashable, fallback: V) -> V:
        resolved = self._policy.resolve(key)
        if resolved is _REJECTED or resolved not in self._content:
            return fallback
        return self._content[resolved]

    def set(self, key: Hashable, value: V) -> bool:
        """Store ``value`` under ``key``; return ``False`` when the key is rejected."""

        resolved = self._policy.resolve(key)
        if resolved is _REJECTED:
            logger.debug("rejected write outside map bounds: %r", key)
            return False
        self._content[resolved] = value
        return True

    def contains(self, key: Hashable) -> bool:
        resolved = self._policy.resolve(key)
        return resolved is not _REJECTED and resolved in self._content

    def size(self) -> int:
        return len(self._content)

    def clear(self) -> None:
        self._content.clear()

    def mappings(self) -> ItemsView[Any, V]:
        return self._content.items()

    def keys(self) -> KeysView[Any]:
        return self._content.keys()

    def values(self) -> ValuesView[V]:
        return self._content.values()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, bounds={self.bounds!r})"

    # ------------------------------------------------------------------
    def _indexed_bounds(self) -> IndexedSurface:
        if not isinstance(self._policy, IndexedKeys):
            raise TypeError("operation requires an index-bijective map")
        return self._policy.bounds

    def indices(self) -> Iterator[int]:
        return iter(self._indexed_bounds().indices())

    def positions(self) -> Iterator[Any]:
        bounds = self._indexed_bounds()
        return (bounds.value_at(index) for index in bounds.indices())

    def position_at(self, index: int) -> Any:
        return self._indexed_bounds().value_at(index)

    def index_of(self, position: Any) -> int | None:
        return self._indexed_bounds().index_of(position)


def sparse_map() -> SparseMap[Any, Any]:
    return SparseMap(UnboundKeys())


def bounded_map(region: Surface) -> SparseMap[Any, Any]:
    return SparseMap(BoundedKeys(region))


def indexed_map(region: IndexedSurface) -> SparseMap[int, Any]:
    return SparseMap(IndexedKeys(region))
