"""Axial hex coordinates with a derived third component.

Positions (:class:`Point`) and displacements (:class:`Vector`) share one
representation: the two free components ``q`` and ``r``. The third cube
component ``s = -q - r`` is computed on demand and never stored, so
``q + r + s == 0`` holds by construction.

Flat-top wheel used by the axis and rotation helpers::

                 j
               <0,1>
              +r   -s
    k = <-,1>  \\   /  <1,0> = i
                \\ /
           -q -- . -- +q
                / \\
        <-,0>  /   \\  <1,->
              +s   -r
               <0,->
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import TypeAlias

Scalar: TypeAlias = int | float


class SixfoldMixin:
    """Modulo-6 arithmetic shared by the six-valued direction enums."""

    value: int

    def __add__(self, shift: int):
        return type(self)((self.value + int(shift)) % 6)

    def __radd__(self, shift: int):
        return self + shift

    def __sub__(self, shift: int):
        return self + -int(shift)

    def __neg__(self):
        return self + 3

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value


class Axis(SixfoldMixin, Enum):
    """Signed cube axes, ordered counterclockwise from ``+q``."""

    Q_POS = 0
    S_NEG = 1
    R_POS = 2
    Q_NEG = 3
    S_POS = 4
    R_NEG = 5


@dataclass(frozen=True, slots=True)
class _Hex:
    q: Scalar
    r: Scalar

    @property
    def s(self) -> Scalar:
        return -self.q - self.r

    @classmethod
    def qr(cls, q: Scalar, r: Scalar):
        return cls(q, r)

    @classmethod
    def rs(cls, r: Scalar, s: Scalar):
        return cls(-r - s, r)

    @classmethod
    def sq(cls, s: Scalar, q: Scalar):
        return cls(q, -q - s)

    def get(self, axis: Axis) -> Scalar:
        """Return the signed projection of this coordinate on ``axis``."""

        if axis is Axis.Q_POS:
            return self.q
        if axis is Axis.S_NEG:
            return -self.s
        if axis is Axis.R_POS:
            return self.r
        if axis is Axis.Q_NEG:
            return -self.q
        if axis is Axis.S_POS:
            return self.s
        return -self.r

    def as_cube(self) -> tuple[Scalar, Scalar, Scalar]:
        return self.q, self.r, self.s


class Vector(_Hex):
    """Displacement between two hex positions."""

    __slots__ = ()

    def __neg__(self) -> Vector:
        return Vector(-self.q, -self.r)

    def __add__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.q + other.q, self.r + other.r)
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.q - other.q, self.r - other.r)
        return NotImplemented

    def __mul__(self, scale: object) -> Vector:
        # rotations are applied by Rotation.__rmul__
        if isinstance(scale, Real):
            return Vector(scale * self.q, scale * self.r)
        return NotImplemented

    def __rmul__(self, scale: object) -> Vector:
        return self.__mul__(scale)

    def __truediv__(self, scale: object) -> Vector:
        if isinstance(scale, Real):
            return Vector(self.q / scale, self.r / scale)
        return NotImplemented

    def __floordiv__(self, scale: object) -> Vector:
        if isinstance(scale, Real):
            return Vector(self.q // scale, self.r // scale)
        return NotImplemented

    def length(self) -> Scalar:
        return length(self)


class Point(_Hex):
    """Position on the hex lattice."""

    __slots__ = ()

    def __add__(self, other: object) -> Point:
        if isinstance(other, Vector):
            return Point(self.q + other.q, self.r + other.r)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Vector):
            return Point(self.q - other.q, self.r - other.r)
        if isinstance(other, Point):
            return Vector(self.q - other.q, self.r - other.r)
        return NotImplemented

    def distance_to(self, other: Point) -> Scalar:
        return distance(self, other)


ORIGIN = Point(0, 0)
ZERO = Vector(0, 0)


def length(v: Vector) -> Scalar:
    """Number of cell hops spanned by ``v``.

    Equals ``(|q| + |r| + |s|) / 2`` since the triple sums to zero. The largest
    signed component is not enough: ``<-3,1>`` has ``s == 2`` but spans 3 hops.
    """

    return max(abs(v.q), abs(v.r), abs(v.s))


def distance(a: Point, b: Point) -> Scalar:
    return length(b - a)
