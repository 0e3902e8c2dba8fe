"""Capability contracts for regions that back a sparse map.

Any object exposing these methods qualifies; regions do not subclass them.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable


@runtime_checkable
class Surface(Protocol):
    """A bounded region that can test membership."""

    def is_valid(self, value: Any) -> bool: ...

    def size(self) -> int: ...


@runtime_checkable
class IndexedSurface(Surface, Protocol):
    """A region in bijection with the index range ``[0, size())``.

    ``is_valid`` must accept indices as well as positions.
    """

    def value_at(self, index: int) -> Any: ...

    def index_of(self, value: Any) -> int | None: ...

    def indices(self) -> Iterable[int]: ...
