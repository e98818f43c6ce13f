"""Circles in the plane: construction, relations, intersections and tangents."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable

from cpkit.geo_line import (
    Line,
    dist_from_point_to_line,
    dist_from_point_to_seg,
    line_line_intersection,
)
from cpkit.geo_point import (
    EPS,
    PI,
    Point,
    dist,
    dist2,
    dot,
    rotate_ccw90,
    rotate_cw90,
    sign,
)


@dataclass(frozen=True, eq=False)
class Circle:
    """Circle with a centre and a radius; equality tolerates ``EPS``."""

    center: Point
    radius: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.center == other.center and sign(self.radius - other.radius) == 0

    @classmethod
    def circumcircle(cls, a: Point, b: Point, c: Point) -> Circle:
        """The circle through three points; raises ``ValueError`` if they are collinear."""
        mid_b = (a + b) * 0.5
        mid_c = (a + c) * 0.5
        center = line_line_intersection(
            mid_b, mid_b + rotate_cw90(a - mid_b), mid_c, mid_c + rotate_cw90(a - mid_c)
        )
        if center is None:
            raise ValueError("the points are collinear")
        return cls(center, dist(a, center))

    @classmethod
    def incircle(cls, a: Point, b: Point, c: Point) -> Circle:
        """The circle inscribed in triangle ``abc``."""
        m = math.atan2(b.y - a.y, b.x - a.x)
        n = math.atan2(c.y - a.y, c.x - a.x)
        ua = a
        ub = a + Point(math.cos((n + m) / 2.0), math.sin((n + m) / 2.0))
        m = math.atan2(a.y - b.y, a.x - b.x)
        n = math.atan2(c.y - b.y, c.x - b.x)
        va = b
        vb = b + Point(math.cos((n + m) / 2.0), math.sin((n + m) / 2.0))
        center = line_line_intersection(ua, ub, va, vb)
        if center is None:
            raise ValueError("the triangle is degenerate")
        return cls(center, dist_from_point_to_seg(a, b, center))

    def area(self) -> float:
        return PI * self.radius * self.radius

    def circumference(self) -> float:
        return 2.0 * PI * self.radius


def _relation(d: float, r: float) -> int:
    if sign(d - r) < 0:
        return 2
    if sign(d - r) == 0:
        return 1
    return 0


def circle_point_relation(p: Point, r: float, b: Point) -> int:
    """0 if ``b`` is outside the circle, 1 if on it, 2 if inside."""
    return _relation(dist(p, b), r)


def circle_line_relation(p: Point, r: float, a: Point, b: Point) -> int:
    """0 if line ``ab`` misses the circle, 1 if it touches, 2 if it cuts through."""
    return _relation(dist_from_point_to_line(a, b, p), r)


def circle_line_intersection(c: Point, r: float, a: Point, b: Point) -> list[Point]:
    """Points where the line through ``a`` and ``b`` meets the circle."""
    b = b - a
    a = a - c
    big_a = dot(b, b)
    big_b = dot(a, b)
    big_c = dot(a, a) - r * r
    disc = big_b * big_b - big_a * big_c
    if disc < -EPS:
        return []
    result = [c + a + b * (-big_b + math.sqrt(disc + EPS)) / big_a]
    if disc > EPS:
        result.append(c + a + b * (-big_b - math.sqrt(disc)) / big_a)
    return result


def circle_circle_relation(a: Point, r: float, b: Point, big_r: float) -> int:
    """5 apart, 4 touching outside, 3 crossing, 2 touching inside, 1 nested."""
    d = dist(a, b)
    if sign(d - r - big_r) > 0:
        return 5
    if sign(d - r - big_r) == 0:
        return 4
    gap = abs(r - big_r)
    if sign(d - gap) > 0:
        return 3
    if sign(d - gap) == 0:
        return 2
    if sign(d - gap) < 0:
        return 1
    raise ValueError("the circles cannot be compared")


def circle_circle_intersection(a: Point, r: float, b: Point, big_r: float) -> list[Point]:
    """Points shared by two circles; raises ``ValueError`` if the circles coincide."""
    if a == b and sign(r - big_r) == 0:
        raise ValueError("the circles coincide")
    d = math.sqrt(dist2(a, b))
    if d > r + big_r or d + min(r, big_r) < max(r, big_r):
        return []
    x = (d * d - big_r * big_r + r * r) / (2 * d)
    y = math.sqrt(max(0.0, r * r - x * x))
    v = (b - a) / d
    result = [a + v * x + rotate_ccw90(v) * y]
    if y > 0:
        result.append(a + v * x - rotate_ccw90(v) * y)
    return result


def circles_through_points(a: Point, b: Point, r: float) -> list[Circle]:
    """Circles of radius ``r`` passing through both ``a`` and ``b``."""
    return [Circle(p, r) for p in circle_circle_intersection(a, r, b, r)]


def circles_tangent_to_line(u: Line, q: Point, r: float) -> list[Circle]:
    """Circles of radius ``r`` tangent to ``u`` and passing through ``q``."""
    d = dist_from_point_to_line(u.a, u.b, q)
    if sign(d - r * 2.0) > 0:
        return []
    left = rotate_ccw90(u.v).truncate(r)
    right = rotate_cw90(u.v).truncate(r)
    if sign(d) == 0:
        return [Circle(q + left, r), Circle(q + right, r)]
    u1 = Line.from_points(u.a + left, u.b + left)
    u2 = Line.from_points(u.a + right, u.b + right)
    centers = circle_line_intersection(q, r, u1.a, u1.b)
    if not centers:
        centers = circle_line_intersection(q, r, u2.a, u2.b)
    if not centers:
        return []
    first = centers[0]
    second = centers[1] if len(centers) > 1 else first
    if first == second:
        return [Circle(first, r)]
    return [Circle(first, r), Circle(second, r)]


def circle_circle_area(a: Point, r1: float, b: Point, r2: float) -> float:
    """Area of the intersection of two circles."""
    d = (a - b).norm()
    if r1 + r2 < d + EPS:
        return 0.0
    if r1 + d < r2 + EPS:
        return PI * r1 * r1
    if r2 + d < r1 + EPS:
        return PI * r2 * r2
    theta_1 = math.acos((r1 * r1 + d * d - r2 * r2) / (2 * r1 * d))
    theta_2 = math.acos((r2 * r2 + d * d - r1 * r1) / (2 * r2 * d))
    return r1 * r1 * (theta_1 - math.sin(2 * theta_1) / 2.0) + r2 * r2 * (
        theta_2 - math.sin(2 * theta_2) / 2.0
    )


def tangent_lines_from_point(p: Point, r: float, q: Point) -> list[Line]:
    """Tangent lines from ``q`` to the circle: none inside, one on it, two outside.

    Each line starts at ``q`` and, for an outside point, ends at its touching point.
    """
    side = sign(dist2(p, q) - r * r)
    if side < 0:
        return []
    if side == 0:
        return [Line.from_points(q, q + rotate_ccw90(q - p))]
    d = dist(p, q)
    along = r * r / d
    height = math.sqrt(r * r - along * along)
    base = (q - p).truncate(along)
    return [
        Line.from_points(q, p + (base + rotate_ccw90(q - p).truncate(height))),
        Line.from_points(q, p + (base + rotate_cw90(q - p).truncate(height))),
    ]


def tangent_lines_between_circles(
    c1: Point, r1: float, c2: Point, r2: float, inner: bool = False
) -> list[Line]:
    """Common outer (or, with ``inner``, inner) tangents of two circles.

    Each line runs from its touching point on the first circle to the one on
    the second. Raises ``ValueError`` if the circles coincide.
    """
    if inner:
        r2 = -r2
    d = c2 - c1
    dr = r1 - r2
    d2 = d.norm2()
    h2 = d2 - dr * dr
    if d2 == 0 or h2 < 0:
        if h2 == 0:
            raise ValueError("the circles coincide")
        return []
    lines = []
    for turn in (-1, 1):
        v = (d * dr + rotate_ccw90(d) * math.sqrt(h2) * turn) / d2
        lines.append(Line.from_points(c1 + v * r1, c2 + v * r2))
    return lines if h2 > 0 else lines[:1]


def _outside(c: Circle, p: Point) -> bool:
    return sign(dist(c.center, p) - c.radius) > 0


def _through_three(a: Point, b: Point, c: Point) -> Circle:
    try:
        return Circle.circumcircle(a, b, c)
    except ValueError:
        x, y = max(((a, b), (a, c), (b, c)), key=lambda pair: dist2(*pair))
        return Circle((x + y) / 2, dist(x, y) / 2)


def minimum_enclosing_circle(points: Iterable[Point]) -> Circle:
    """Smallest circle containing every point, in expected linear time."""
    p = list(points)
    if not p:
        raise ValueError("no points given")
    random.shuffle(p)
    c = Circle(p[0], 0.0)
    for i in range(1, len(p)):
        if not _outside(c, p[i]):
            continue
        c = Circle(p[i], 0.0)
        for j in range(i):
            if not _outside(c, p[j]):
                continue
            c = Circle((p[i] + p[j]) / 2, dist(p[i], p[j]) / 2)
            for k in range(j):
                if _outside(c, p[k]):
                    c = _through_three(p[i], p[j], p[k])
    return c


def maximum_circle_cover(points: Iterable[Point], r: float) -> tuple[int, Circle]:
    """Most points a circle of radius ``r`` can hold, with one such circle."""
    p = list(points)
    if not p:
        raise ValueError("no points given")
    if r <= 0:
        raise ValueError("radius must be positive")
    best = 0
    best_index = 0
    best_angle = 0.0
    for i, origin in enumerate(p):
        events: list[tuple[float, int]] = [(-PI, 1), (PI, -1)]
        for j, other in enumerate(p):
            if j == i:
                continue
            d = dist(origin, other)
            if d > r * 2:
                continue
            direction = (other - origin).arg()
            spread = math.acos(d / 2 / r)
            start, end = direction - spread, direction + spread
            if start > PI:
                start -= PI * 2
            if start <= -PI:
                start += PI * 2
            if end > PI:
                end -= PI * 2
            if end <= -PI:
                end += PI * 2
            events.append((start - EPS, 1))
            events.append((end, -1))
            if start > end:
                events.append((-PI, 1))
                events.append((PI, -1))
        events.sort()
        count = 0
        for angle, delta in events:
            count += delta
            if count > best:
                best, best_index, best_angle = count, i, angle
    origin = p[best_index]
    center = Point(origin.x + r * math.cos(best_angle), origin.y + r * math.sin(best_angle))
    return best, Circle(center, r)