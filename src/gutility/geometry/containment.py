"""
Point containment predicates.

Points can be Vec2/Vec2I or any indexable (x, y) such as a tuple or a numpy
array. Only the first two coordinates are read.
"""

from typing import Sequence, Tuple

from ..gutility_config import get_config
from ..gutility_types import DegenerateGeometryError, MalformedPolygonError


def barycentric(p, t1, t2, t3) -> Tuple[float, float, float]:
    """
    Barycentric weights (a, b, c) of p relative to the triangle (t1, t2, t3).

    p == a*t1 + b*t2 + c*t3 with a + b + c == 1.

    Raises:
        DegenerateGeometryError: The triangle's doubled signed area is within
            GUtilityConfig.degenerate_epsilon of zero (collinear vertices).
    """
    px, py = p[0], p[1]
    x1, y1 = t1[0], t1[1]
    x2, y2 = t2[0], t2[1]
    x3, y3 = t3[0], t3[1]

    denom = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    if denom == 0 or abs(denom) <= get_config().degenerate_epsilon:
        raise DegenerateGeometryError(f"Triangle {tuple(t1)}, {tuple(t2)}, {tuple(t3)} has zero area")

    a = ((y2 - y3) * (px - x3) + (x3 - x2) * (py - y3)) / denom
    b = ((y3 - y1) * (px - x3) + (x1 - x3) * (py - y3)) / denom
    return a, b, 1 - a - b


def point_in_triangle(p, t1, t2, t3) -> bool:
    """
    Check whether p lies strictly inside the triangle (t1, t2, t3).

    Points on an edge or vertex are outside. A degenerate (zero-area) triangle
    contains nothing.
    """
    try:
        a, b, c = barycentric(p, t1, t2, t3)
    except DegenerateGeometryError:
        return False
    return a > 0 and b > 0 and c > 0


def _edge_outcome(px, py, x1, y1, x2, y2) -> int:
    """-1 if the edge crosses the ray cast from (px, py) toward -x, +1 otherwise."""
    if py == y1 and y1 == y2:
        if x1 <= px <= x2 or x2 <= px <= x1:
            return -1
        return 1
    if y1 > y2:
        x1, y1, x2, y2 = x2, y2, x1, y1
    if py <= y1 or py >= y2:
        return 1
    delta = (x1 - px) * (y2 - py) - (y1 - py) * (x2 - px)
    if delta >= 0:
        return 1
    return -1


def point_in_polygon(point, poly: Sequence) -> bool:
    """
    Check whether point lies inside the polygon poly (ray-parity test).

    Every edge, including the closing edge from the last vertex back to the
    first, contributes -1 when it crosses the ray and +1 otherwise. Starting
    from -1 (outside), the running product is positive exactly when the number
    of crossings is odd.

    Edge rules:
        - A horizontal edge at the point's height counts as a crossing when
          the point lies on it (endpoints included).
        - Other edges only count when the point's y is strictly between the
          edge's endpoint heights, so a ray through a vertex touches neither
          incident edge. The centre of a diamond, level with
          two of its vertices, therefore reads as outside.
    """
    n = len(poly)
    if n < 3:
        raise MalformedPolygonError(f"A polygon needs at least 3 vertices, got {n}")

    px, py = point[0], point[1]
    last = poly[n - 1]
    result = -_edge_outcome(px, py, last[0], last[1], poly[0][0], poly[0][1])
    for i in range(n - 1):
        a = poly[i]
        b = poly[i + 1]
        result *= _edge_outcome(px, py, a[0], a[1], b[0], b[1])
    return result > 0


def signed_area(poly: Sequence) -> float:
    """Shoelace area, positive for counter-clockwise (y up) vertex order."""
    n = len(poly)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += poly[i][0] * poly[j][1]
        area -= poly[j][0] * poly[i][1]
    return area / 2.0


def polygon_area(poly: Sequence) -> float:
    """Unsigned shoelace area."""
    return abs(signed_area(poly))


def triangle_area(t1, t2, t3) -> float:
    """Unsigned area of a triangle."""
    return abs((t2[0] - t1[0]) * (t3[1] - t1[1]) - (t3[0] - t1[0]) * (t2[1] - t1[1])) / 2.0
