"""Regular polygons used to place child nodes around a node.

Angles are in degrees, zero at 3 o'clock, and the y axis points down.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Iterable

Point = tuple[float, float]

_EPS = 1e-12


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=_EPS, abs_tol=_EPS)


@dataclass(frozen=True)
class Line:
    """A line segment from ``p1`` to ``p2``."""

    p1: Point = (0.0, 0.0)
    p2: Point = (0.0, 0.0)

    @property
    def dx(self) -> float:
        return self.p2[0] - self.p1[0]

    @property
    def dy(self) -> float:
        return self.p2[1] - self.p1[1]

    def is_null(self) -> bool:
        """True when both end points coincide."""
        return _close(self.p1[0], self.p2[0]) and _close(self.p1[1], self.p2[1])

    def normal_vector(self) -> Line:
        """A line of the same length, starting at ``p1``, perpendicular to this one."""
        x, y = self.p1
        return Line(self.p1, (x + self.dy, y - self.dx))

    def intersects(self, other: Line) -> bool:
        """True when the two segments cross within both of their bounds."""
        ax, ay = self.dx, self.dy
        bx, by = other.p1[0] - other.p2[0], other.p1[1] - other.p2[1]
        cx, cy = self.p1[0] - other.p1[0], self.p1[1] - other.p1[1]

        denominator = ay * bx - ax * by
        if denominator == 0 or not math.isfinite(denominator):
            return False

        na = (by * cx - bx * cy) / denominator
        if na < 0 or na > 1:
            return False

        nb = (ax * cy - ay * cx) / denominator
        return 0 <= nb <= 1


@dataclass
class Side:
    """One side of a polygon and its outward normal."""

    edge: Line = field(default_factory=Line)
    norm: Line = field(default_factory=Line)


Ngon = list[Side]


def make_ngon(n: int, start_angle: float = 0.0) -> Ngon:
    """Make a unit polygon with *n* sides.

    The first side is perpendicular to the line through the centre at
    *start_angle*.
    """
    n = max(1, n)
    angle = 360.0 / n
    offset = start_angle - angle * 0.5

    result: Ngon = []
    for i in range(n):
        a = math.radians(-(angle * i + offset))
        b = math.radians(-(angle * (i + 1) + offset))
        edge = Line((math.cos(b), math.sin(b)), (math.cos(a), math.sin(a)))
        result.append(Side(edge, edge.normal_vector()))
    return result


def make_ngons(n: int) -> list[Ngon]:
    """Polygons indexed by side count up to *n*; entries 0 and 1 are empty."""
    return [[], []] + [make_ngon(i, 0) for i in range(2, n + 1)]


@lru_cache(maxsize=None)
def _ngon_template(n: int) -> tuple[Side, ...]:
    return tuple(make_ngon(n, 0)) if n >= 2 else ()


def get_ngon(n: int) -> Ngon:
    """Return a fresh copy of the polygon with *n* sides (empty below two)."""
    if n < 0:
        raise ValueError(f"side count must not be negative: {n}")
    return [replace(side) for side in _ngon_template(n)]


def get_ngon_side_norm(i: int, n: int) -> Line:
    """Return the normal of side *i* of the polygon with *n* sides."""
    ngon = get_ngon(n)
    if not 0 <= i < min(len(ngon), n):
        raise IndexError(f"side {i} out of range for a polygon with {n} sides")
    return ngon[i].norm


def get_guides(sides: int, points: Iterable[Point]) -> Ngon:
    """Return the polygon with *sides* sides, with occupied sides cleared.

    Each point is a position relative to the polygon's centre. The first
    side still free that the line from the centre to a point crosses has
    its normal set to a null line.
    """
    ngon = get_ngon(sides)

    for point in points:
        line = Line((0.0, 0.0), (float(point[0]), float(point[1])))
        if line.is_null():
            raise ValueError("a guide point must not be at the centre")
        for side in ngon:
            if not side.norm.is_null() and side.edge.intersects(line):
                side.norm = Line()
                break

    return ngon