from __future__ import annotations

import math
from typing import TypeVar

from .coords import Point, Vector

H = TypeVar("H", Point, Vector)


def _round_half_away(x: float) -> int:
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def hex_round(h: H) -> H:
    """Snap a fractional coordinate to the nearest lattice cell.

    Each cube component is rounded half away from zero; the one that moved the
    most is rebuilt from the other two. Ties: ``q`` is rebuilt only when its
    error is strictly the largest, then ``r`` when its error strictly exceeds
    that of ``s``, otherwise ``s``.
    """

    q = _round_half_away(h.q)
    r = _round_half_away(h.r)
    s = _round_half_away(h.s)

    dq = abs(h.q - q)
    dr = abs(h.r - r)
    ds = abs(h.s - s)

    cls = type(h)
    if dq > dr and dq > ds:
        return cls.rs(r, s)
    if dr > ds:
        return cls.sq(s, q)
    return cls.qr(q, r)
