"""Validated configuration models describing hex regions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .hexgrid.coords import Point
from .hexgrid.disk import Disk, Ring
from .surfaces.sparse_map import SparseMap, indexed_map

logger = logging.getLogger(__name__)


class RegionShape(str, Enum):
    """Index-bijective region kinds that can be built from configuration."""

    DISK = "disk"
    RING = "ring"


class HexPointModel(BaseModel):
    """Serializable axial coordinate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    q: int = 0
    r: int = 0

    @model_validator(mode="before")
    @classmethod
    def _coerce_sequence(cls, value: object) -> Mapping[str, object] | object:
        if isinstance(value, Point):
            return {"q": value.q, "r": value.r}
        if isinstance(value, Mapping):
            return value
        if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
            sequence = list(value)
            if len(sequence) != 2:
                raise ValueError("a hex point needs exactly two components (q, r)")
            return {"q": sequence[0], "r": sequence[1]}
        return value

    def to_point(self) -> Point:
        return Point(self.q, self.r)


class GridConfig(BaseModel):
    """Top-level description of a bounded, indexed hex grid."""

    model_config = ConfigDict(extra="forbid")

    shape: RegionShape = Field(default=RegionShape.DISK)
    radius: int = Field(default=0, ge=0)
    center: HexPointModel = Field(default_factory=HexPointModel)

    @property
    def size(self) -> int:
        """Number of cells in the configured region."""

        return self.region().size()

    def region(self) -> Disk | Ring:
        center = self.center.to_point()
        if self.shape is RegionShape.RING:
            region: Disk | Ring = Ring(self.radius, center)
        else:
            region = Disk(self.radius, center)
        logger.debug("built %s region of radius %d at %r", self.shape.value, self.radius, center)
        return region

    def indexed_map(self) -> SparseMap[int, Any]:
        """Return an empty map addressed by the configured region's indices."""

        return indexed_map(self.region())
