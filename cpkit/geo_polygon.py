"""Polygons in the plane: areas, hulls, containment, distances and calipers."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from cpkit.geo_line import dist_from_point_to_line, dist_from_point_to_seg, is_point_on_seg
from cpkit.geo_point import Point, cross, dist, dist2, dot, orientation, sign


def _edges(points: Sequence[Point]):
    """Consecutive vertex pairs, closing the polygon."""
    return zip(points, [*points[1:], *points[:1]])


def _signed_double_area(points: Sequence[Point]) -> float:
    return sum(cross(p, q) for p, q in _edges(points))


def _acos(x: float) -> float:
    return math.acos(max(-1.0, min(1.0, x)))


def area_of_triangle(a: Point, b: Point, c: Point) -> float:
    return abs(cross(b - a, c - a) * 0.5)


def is_point_in_triangle(a: Point, b: Point, c: Point, p: Point) -> int:
    """-1 if ``p`` is strictly inside, 0 if on the boundary, 1 if strictly outside."""
    if sign(cross(b - a, c - a)) < 0:
        b, c = c, b
    c1 = sign(cross(b - a, p - a))
    c2 = sign(cross(c - b, p - b))
    c3 = sign(cross(a - c, p - c))
    if c1 < 0 or c2 < 0 or c3 < 0:
        return 1
    if c1 + c2 + c3 != 3:
        return 0
    return -1


def perimeter(points: Iterable[Point]) -> float:
    pts = list(points)
    return sum(dist(p, q) for p, q in _edges(pts))


def area(points: Iterable[Point]) -> float:
    """Area of a simple polygon given in either winding order."""
    return abs(_signed_double_area(list(points))) * 0.5


def centroid(points: Iterable[Point]) -> Point:
    """Centre of mass of a simple polygon with non-zero area."""
    pts = list(points)
    total = _signed_double_area(pts)
    if total == 0:
        raise ValueError("the polygon has no area")
    c = Point(0.0, 0.0)
    for p, q in _edges(pts):
        c = c + (p + q) * cross(p, q)
    return c / (3.0 * total)


def is_ccw(points: Iterable[Point]) -> bool:
    """True if the polygon winds counterclockwise."""
    return sign(_signed_double_area(list(points))) > 0


def geometric_median(points: Iterable[Point]) -> Point:
    """Point minimising the sum of distances to ``points`` (searched in [-1e5, 1e5]^2)."""
    pts = list(points)
    if not pts:
        raise ValueError("no points given")

    def total(z: Point) -> float:
        return sum(dist(p, z) for p in pts)

    def best_y(x: float) -> tuple[float, float]:
        lo, hi = -1e5, 1e5
        for _ in range(60):
            m1 = lo + (hi - lo) / 3
            m2 = hi - (hi - lo) / 3
            if total(Point(x, m1)) < total(Point(x, m2)):
                hi = m2
            else:
                lo = m1
        return lo, total(Point(x, lo))

    lo, hi = -1e5, 1e5
    for _ in range(60):
        m1 = lo + (hi - lo) / 3
        m2 = hi - (hi - lo) / 3
        if best_y(m1)[1] < best_y(m2)[1]:
            hi = m2
        else:
            lo = m1
    return Point(lo, best_y(lo)[0])


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Counterclockwise hull without collinear points, starting at the smallest point."""
    pts = list(points)
    if len(pts) <= 1:
        return pts
    up: list[Point] = []
    dn: list[Point] = []
    for p in sorted(pts):
        while len(up) > 1 and orientation(up[-2], up[-1], p) >= 0:
            up.pop()
        while len(dn) > 1 and orientation(dn[-2], dn[-1], p) <= 0:
            dn.pop()
        up.append(p)
        dn.append(p)
    hull = dn[:-1] if len(dn) > 1 else list(dn)
    hull.extend(reversed(up[1:]))
    if len(hull) == 2 and hull[0] == hull[1]:
        hull.pop()
    return hull


def is_convex(points: Iterable[Point]) -> bool:
    pts = list(points)
    n = len(pts)
    seen: set[int] = set()
    for i, p in enumerate(pts):
        q = pts[(i + 1) % n]
        r = pts[(i + 2) % n]
        seen.add(sign(cross(q - p, r - p)))
        if -1 in seen and 1 in seen:
            return False
    return True


def is_point_in_convex(points: Sequence[Point], x: Point) -> int:
    """-1 inside, 0 on the boundary, 1 outside a strictly convex ccw polygon, in O(log n)."""
    p = list(points)
    n = len(p)
    if n < 3:
        raise ValueError("a polygon needs at least three vertices")
    a = orientation(p[0], p[1], x)
    b = orientation(p[0], p[n - 1], x)
    if a < 0 or b > 0:
        return 1
    lo, hi = 1, n - 1
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if orientation(p[0], p[mid], x) >= 0:
            lo = mid
        else:
            hi = mid
    k = orientation(p[lo], p[hi], x)
    if k <= 0:
        return -k
    if lo == 1 and a == 0:
        return 0
    if hi == n - 1 and b == 0:
        return 0
    return -1


def is_point_on_polygon(points: Iterable[Point], z: Point) -> bool:
    return any(is_point_on_seg(p, q, z) for p, q in _edges(list(points)))


def winding_number(points: Iterable[Point], z: Point) -> int | None:
    """How many times the polygon winds around ``z``; None if ``z`` is on the boundary."""
    pts = list(points)
    if is_point_on_polygon(pts, z):
        return None
    total = 0
    for p, q in _edges(pts):
        below = p.y < z.y
        if below != (q.y < z.y):
            orient = orientation(z, q, p)
            if orient == 0:
                return 0
            if below == (orient > 0):
                total += 1 if below else -1
    return total


def is_point_in_polygon(points: Iterable[Point], z: Point) -> int:
    """-1 strictly inside, 0 on the boundary, 1 strictly outside."""
    k = winding_number(points, z)
    if k is None:
        return 0
    return 1 if k == 0 else -1


def diameter(points: Sequence[Point]) -> float:
    """Largest distance between two vertices of a convex ccw polygon."""
    p = list(points)
    n = len(p)
    if n == 0:
        raise ValueError("no points given")
    if n == 1:
        return 0.0
    if n == 2:
        return dist(p[0], p[1])
    best = 0.0
    j = 1
    for i in range(n):
        while cross(p[(i + 1) % n] - p[i], p[(j + 1) % n] - p[j]) >= 0:
            best = max(best, dist2(p[i], p[j]))
            j = (j + 1) % n
        best = max(best, dist2(p[i], p[j]))
    return math.sqrt(best)


def width(points: Sequence[Point]) -> float:
    """Smallest gap between two parallel lines enclosing a convex ccw polygon."""
    p = list(points)
    n = len(p)
    if n <= 2:
        return 0.0
    best = math.inf
    j = 1
    for i in range(n):
        while cross(p[(i + 1) % n] - p[i], p[(j + 1) % n] - p[j]) >= 0:
            j = (j + 1) % n
        best = min(best, dist_from_point_to_line(p[i], p[(i + 1) % n], p[j]))
    return best


def minimum_enclosing_rectangle(points: Sequence[Point]) -> float:
    """Smallest perimeter of a rectangle enclosing a convex ccw polygon."""
    p = list(points)
    n = len(p)
    if n <= 2:
        return perimeter(p)
    first = p[1] - p[0]
    mndot = 0
    lowest = dot(first, p[0])
    for i in range(1, n):
        value = dot(first, p[i])
        if value <= lowest:
            lowest = value
            mndot = i
    best = math.inf
    j = 1
    mxdot = 1
    for i in range(n):
        cur = p[(i + 1) % n] - p[i]
        while cross(cur, p[(j + 1) % n] - p[j]) >= 0:
            j = (j + 1) % n
        while dot(p[(mxdot + 1) % n], cur) >= dot(p[mxdot], cur):
            mxdot = (mxdot + 1) % n
        while dot(p[(mndot + 1) % n], cur) <= dot(p[mndot], cur):
            mndot = (mndot + 1) % n
        length = cur.norm()
        span = dot(p[mxdot], cur) / length - dot(p[mndot], cur) / length
        height = dist_from_point_to_line(p[i], p[(i + 1) % n], p[j])
        best = min(best, 2.0 * (span + height))
    return best


def _point_poly_tangent(p: list[Point], q: Point, direction: int, lo: int, hi: int) -> int:
    while hi - lo > 1:
        mid = (lo + hi) // 2
        pvs = orientation(q, p[mid], p[mid - 1]) != -direction
        nxt = orientation(q, p[mid], p[mid + 1]) != -direction
        if pvs and nxt:
            return mid
        if not (pvs or nxt):
            right = _point_poly_tangent(p, q, direction, mid + 1, hi)
            left = _point_poly_tangent(p, q, direction, lo, mid - 1)
            return right if orientation(q, p[right], p[left]) == direction else left
        if not pvs:
            if orientation(q, p[mid], p[lo]) == direction:
                hi = mid - 1
            elif orientation(q, p[lo], p[hi]) == direction:
                hi = mid - 1
            else:
                lo = mid + 1
        else:
            if orientation(q, p[mid], p[lo]) == direction:
                lo = mid + 1
            elif orientation(q, p[lo], p[hi]) == direction:
                hi = mid - 1
            else:
                lo = mid + 1
    best = lo
    for i in range(lo + 1, hi + 1):
        if orientation(q, p[best], p[i]) != direction:
            best = i
    return best


def tangents_from_point_to_polygon(points: Sequence[Point], q: Point) -> tuple[int, int]:
    """Indices ``(ccw, cw)`` of the vertices touched by tangents from an outside point."""
    p = list(points)
    if not p:
        raise ValueError("no points given")
    last = len(p) - 1
    return _point_poly_tangent(p, q, 1, 0, last), _point_poly_tangent(p, q, -1, 0, last)


def dist_from_point_to_polygon(points: Sequence[Point], z: Point) -> float:
    """Distance from a point strictly outside a convex polygon to the polygon."""
    p = list(points)
    n = len(p)
    if n == 0:
        raise ValueError("no points given")
    if n <= 3:
        return min(dist_from_point_to_seg(a, b, z) for a, b in _edges(p))
    hi, lo = tangents_from_point_to_polygon(p, z)
    if lo > hi:
        hi += n
    best = math.inf
    while lo < hi:
        mid = (lo + hi) // 2
        left = dist2(p[mid % n], z)
        right = dist2(p[(mid + 1) % n], z)
        best = min(best, left, right)
        if left < right:
            hi = mid
        else:
            lo = mid + 1
    best = math.sqrt(best)
    best = min(best, dist_from_point_to_seg(p[lo % n], p[(lo + 1) % n], z))
    best = min(best, dist_from_point_to_seg(p[lo % n], p[(lo - 1 + n) % n], z))
    return best


def dist_from_polygon_to_polygon(p1: Sequence[Point], p2: Sequence[Point]) -> float:
    """Distance between two convex polygons that neither overlap nor touch."""
    first, second = list(p1), list(p2)
    return min(
        min(dist_from_point_to_polygon(second, z) for z in first),
        min(dist_from_point_to_polygon(first, z) for z in second),
    )


def maximum_dist_from_polygon_to_polygon(u: Sequence[Point], v: Sequence[Point]) -> float:
    """Largest distance between a point of one convex polygon and one of another."""
    u, v = list(u), list(v)
    n, m = len(u), len(v)
    if not n or not m:
        raise ValueError("no points given")
    if n < 3 or m < 3:
        return math.sqrt(max(dist2(a, b) for a in u for b in v))
    if u[0].x > v[0].x:
        u, v = v, u
        n, m = m, n
    best = 0.0
    i = j = 0
    while j + 1 < m and v[j].x < v[j + 1].x:
        j += 1
    for _ in range(n + m + 10):
        if cross(u[(i + 1) % n] - u[i], v[(j + 1) % m] - v[j]) >= 0:
            j = (j + 1) % m
        else:
            i = (i + 1) % n
        best = max(best, dist2(u[i], v[j]))
    return math.sqrt(best)


def reorder_polygon(points: Sequence[Point]) -> list[Point]:
    """The polygon rotated so that its bottom-most, then left-most, vertex comes first."""
    p = list(points)
    pos = 0
    for i in range(1, len(p)):
        if p[i].y < p[pos].y or (sign(p[i].y - p[pos].y) == 0 and p[i].x < p[pos].x):
            pos = i
    return p[pos:] + p[:pos]


def _triangle_circle_intersection(c: Point, r: float, a: Point, b: Point) -> float:
    """Area shared by the circle (c, r) and the triangle c, a, b."""
    sd1, sd2 = dist2(c, a), dist2(c, b)
    if sd1 > sd2:
        a, b = b, a
        sd1, sd2 = sd2, sd1
    sd = dist2(a, b)
    d1, d2, d = math.sqrt(sd1), math.sqrt(sd2), math.sqrt(sd)
    x = abs(sd2 - sd - sd1) / (2 * d)
    h = math.sqrt(max(0.0, sd1 - x * x))
    if r >= d2:
        return h * d / 2
    result = 0.0
    if sd + sd1 < sd2:
        if r < d1:
            result = r * r * (_acos(h / d2) - _acos(h / d1)) / 2
        else:
            result = r * r * (_acos(h / d2) - _acos(h / r)) / 2
            y = math.sqrt(max(0.0, r * r - h * h))
            result += h * (y - x) / 2
    else:
        if r < h:
            result = r * r * (_acos(h / d2) + _acos(h / d1)) / 2
        else:
            result += r * r * (_acos(h / d2) - _acos(h / r)) / 2
            y = math.sqrt(max(0.0, r * r - h * h))
            result += h * y / 2
            if r < d1:
                result += r * r * (_acos(h / d1) - _acos(h / r)) / 2
                result += h * y / 2
            else:
                result += h * x / 2
    return result


def polygon_circle_intersection(points: Iterable[Point], center: Point, r: float) -> float:
    """Area of the intersection of a simple polygon and a circle."""
    pts = list(points)
    origin = Point(0.0, 0.0)
    total = 0.0
    for p, q in _edges(pts):
        turn = orientation(center, p, q)
        if turn == 0:
            continue
        piece = _triangle_circle_intersection(origin, r, p - center, q - center)
        total += piece if turn > 0 else -piece
    return abs(total)