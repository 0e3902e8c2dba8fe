"""Columnar snapshots of sparse map contents."""

from __future__ import annotations

from typing import Any

import polars as pl

from ..hexgrid.coords import Point, Vector
from .sparse_map import SparseMap


def _column(name: str, items: list[Any]) -> pl.Series:
    if len({type(item) for item in items}) > 1:
        return pl.Series(name, items, dtype=pl.Object)
    return pl.Series(name, items)


def mappings_frame(sparse: SparseMap[Any, Any]) -> pl.DataFrame:
    """Return the occupied entries of ``sparse`` as a DataFrame.

    Indexed maps get an ``index`` column. Hex positions are spread over ``q``
    and ``r`` columns; other keys land in a ``key`` column. A column whose
    entries mix Python types is stored with the ``Object`` dtype. Row order
    follows the map and carries no meaning.
    """

    keys = list(sparse.keys())
    columns: dict[str, Any] = {}
    if sparse.is_indexed:
        columns["index"] = pl.Series("index", keys, dtype=pl.Int64)
        positions = [sparse.position_at(index) for index in keys]
    else:
        positions = keys

    if all(isinstance(p, Point | Vector) for p in positions):
        columns["q"] = [p.q for p in positions]
        columns["r"] = [p.r for p in positions]
    elif not sparse.is_indexed:
        columns["key"] = _column("key", keys)
    columns["value"] = _column("value", list(sparse.values()))
    return pl.DataFrame(columns)
