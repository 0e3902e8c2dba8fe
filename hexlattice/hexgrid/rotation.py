from __future__ import annotations

from dataclasses import dataclass

from .coords import Axis, Vector


@dataclass(frozen=True, slots=True)
class Rotation:
    """Counterclockwise rotation by ``steps`` multiples of 60 degrees."""

    steps: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", ((int(self.steps) % 6) + 6) % 6)

    def __neg__(self) -> Rotation:
        return Rotation(-self.steps)

    def __add__(self, other: object) -> Rotation:
        if isinstance(other, Rotation):
            return Rotation(self.steps + other.steps)
        if isinstance(other, int):
            return Rotation(self.steps + other)
        return NotImplemented

    def __radd__(self, other: object) -> Rotation:
        return self.__add__(other)

    def __sub__(self, other: object) -> Rotation:
        if isinstance(other, Rotation):
            return Rotation(self.steps - other.steps)
        if isinstance(other, int):
            return Rotation(self.steps - other)
        return NotImplemented

    def apply(self, v: Vector) -> Vector:
        # <1,0> -> <0,1> -> <-1,1> -> <-1,0> -> <0,-1> -> <1,-1> -> <1,0>
        return Vector(v.get(Axis.Q_POS - self.steps), v.get(Axis.R_POS - self.steps))

    def __mul__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return self.apply(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector:
        return self.__mul__(other)


def counterclockwise(n: int = 1) -> Rotation:
    return Rotation(n)


def clockwise(n: int = 1) -> Rotation:
    return Rotation(-n)


def rotate(n: int) -> Rotation:
    """Rotation by ``n`` counterclockwise steps; enum directions are accepted."""

    return Rotation(int(n))
