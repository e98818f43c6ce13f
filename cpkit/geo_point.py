"""Points and vectors in the plane, with the basic predicates built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable

EPS = 1e-9
PI = math.pi


def sign(x: float) -> int:
    """-1, 0 or 1, treating values within ``EPS`` of zero as zero."""
    return (x > EPS) - (x < -EPS)


@dataclass(frozen=True, eq=False)
class Point:
    """A point or vector; equality and ordering tolerate ``EPS`` on ``x``."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> Point:
        if isinstance(k, Point):
            return NotImplemented
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Point:
        return Point(self.x / k, self.y / k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return sign(other.x - self.x) == 0 and sign(other.y - self.y) == 0

    def __lt__(self, other: Point) -> bool:
        if sign(other.x - self.x) == 0:
            return self.y < other.y
        return self.x < other.x

    def __gt__(self, other: Point) -> bool:
        if sign(other.x - self.x) == 0:
            return self.y > other.y
        return self.x > other.x

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g})"

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def perp(self) -> Point:
        """The vector turned 90 degrees counterclockwise."""
        return Point(-self.y, self.x)

    def arg(self) -> float:
        """Polar angle in ``(-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def truncate(self, r: float) -> Point:
        """The vector of length ``r`` in the same direction; a zero vector stays put."""
        k = self.norm()
        if not sign(k):
            return self
        r /= k
        return Point(self.x * r, self.y * r)


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def dist2(a: Point, b: Point) -> float:
    return dot(a - b, a - b)


def dist(a: Point, b: Point) -> float:
    return math.sqrt(dot(a - b, a - b))


def cross(a: Point, b: Point) -> float:
    return a.x * b.y - a.y * b.x


def cross2(a: Point, b: Point, c: Point) -> float:
    """Cross product of ``b - a`` and ``c - a``."""
    return cross(b - a, c - a)


def orientation(a: Point, b: Point, c: Point) -> int:
    """1 if ``a, b, c`` turn counterclockwise, -1 if clockwise, 0 if collinear."""
    return sign(cross(b - a, c - a))


def rotate_ccw90(a: Point) -> Point:
    return Point(-a.y, a.x)


def rotate_cw90(a: Point) -> Point:
    return Point(a.y, -a.x)


def rotate_ccw(a: Point, t: float) -> Point:
    c, s = math.cos(t), math.sin(t)
    return Point(a.x * c - a.y * s, a.x * s + a.y * c)


def rotate_cw(a: Point, t: float) -> Point:
    c, s = math.cos(t), math.sin(t)
    return Point(a.x * c + a.y * s, -a.x * s + a.y * c)


def rad_to_deg(r: float) -> float:
    return r * 180.0 / PI


def deg_to_rad(d: float) -> float:
    return d * PI / 180.0


def get_angle(a: Point, b: Point) -> float:
    """Unsigned angle between two non-zero vectors, in ``[0, pi]``."""
    cos_theta = dot(a, b) / a.norm() / b.norm()
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def is_point_in_angle(b: Point, a: Point, c: Point, p: Point) -> bool:
    """Whether ``p`` lies inside the angle ``bac`` (boundary included)."""
    if orientation(a, b, c) == 0:
        raise ValueError("the angle's arms are collinear")
    if orientation(a, c, b) < 0:
        b, c = c, b
    return orientation(a, c, p) >= 0 and orientation(a, b, p) <= 0


def _half(p: Point) -> bool:
    return p.y > 0.0 or (p.y == 0.0 and p.x < 0.0)


def _polar_before(a: Point, b: Point) -> bool:
    return (_half(a), 0.0, a.norm2()) < (_half(b), cross(a, b), b.norm2())


def _polar_cmp(a: Point, b: Point) -> int:
    if _polar_before(a, b):
        return -1
    if _polar_before(b, a):
        return 1
    return 0


def polar_sort(points: Iterable[Point], origin: Point | None = None) -> list[Point]:
    """Points ordered counterclockwise by angle around ``origin``, nearer first on ties."""
    if origin is None:
        return sorted(points, key=cmp_to_key(_polar_cmp))
    key = cmp_to_key(lambda a, b: _polar_cmp(a - origin, b - origin))
    return sorted(points, key=key)