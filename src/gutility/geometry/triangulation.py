"""
Simple polygon triangulation by ear identification.

The live vertices form a ring stored as an index array: `nxt[i]` is the
vertex that follows i. Cutting an ear unlinks its middle vertex in O(1).

The sweep walks the ring with a single pointer. At every step the triple
(node, nxt[node], nxt[nxt[node]]) is tested as an ear; if it is one the
triangle is emitted and the middle vertex removed. The pointer then always
advances to nxt[node], whether or not an ear was cut, so ears are not emitted
in textbook "retry at the same node" order. The sweep wraps around the ring
until three vertices remain, which form the last triangle. An n-vertex simple
polygon therefore always yields exactly n - 2 triangles.

A candidate is an ear when:
    - its signed area has the polygon's orientation and is non-zero
      (reflex and collinear triples are rejected), and
    - no other live vertex lies on the closed triangle, edges and diagonal
      included. Vertices sharing a corner's coordinates do not block.

Each ear test scans every live vertex, and a lap of the ring performs one test
per live vertex, so triangulation costs O(n^2) for typical polygons and more
when long runs of reflex vertices force repeated laps. Bound the polygon size
on latency-sensitive paths.
"""

from typing import List, Sequence, Tuple

from ..gutility_config import get_config
from ..gutility_types import MalformedPolygonError
from ..mathutils.vec import Vec2, Vec2I
from ..profiling import profile
from .containment import signed_area

Triangle = Tuple[Vec2, Vec2, Vec2]
TriangleI = Tuple[Vec2I, Vec2I, Vec2I]


def _cross(o, a, b):
    return (a[0] - o[0]) * (b[1] - o[1]) - (b[0] - o[0]) * (a[1] - o[1])


def _touches_triangle(q, p1, p2, p3, orientation) -> bool:
    """True if q is inside or on the boundary of the triangle with the given winding."""
    return (_cross(p1, p2, q) * orientation >= 0 and
            _cross(p2, p3, q) * orientation >= 0 and
            _cross(p3, p1, q) * orientation >= 0)


def _is_ear(coords, nxt, a, b, c, orientation, epsilon) -> bool:
    p1, p2, p3 = coords[a], coords[b], coords[c]
    if _cross(p1, p2, p3) * orientation <= epsilon:
        return False

    corners = (p1, p2, p3)
    i = nxt[c]
    while i != a:
        q = coords[i]
        if q not in corners and _touches_triangle(q, p1, p2, p3, orientation):
            return False
        i = nxt[i]
    return True


def _ear_sweep(points: Sequence, coords: Sequence) -> list:
    """
    Run the ear sweep over coords and emit triangles built from points.

    points and coords are parallel lists; coords are the float positions the
    predicates run on, points are what ends up in the output triangles.
    """
    n = len(points)
    if n < 3:
        raise MalformedPolygonError(f"A polygon needs at least 3 vertices, got {n}")

    config = get_config()
    area = signed_area(coords)
    if config.validate_polygons and area == 0:
        raise MalformedPolygonError("Polygon has zero area")
    orientation = 1.0 if area > 0 else -1.0

    nxt = list(range(1, n)) + [0]
    remaining = n
    triangles = []

    node = 0
    misses = 0
    while remaining > 3:
        cur = nxt[node]
        after = nxt[cur]
        if _is_ear(coords, nxt, node, cur, after, orientation, config.degenerate_epsilon):
            triangles.append((points[node], points[cur], points[after]))
            nxt[node] = after
            remaining -= 1
            misses = 0
        else:
            misses += 1
            if misses >= remaining:
                raise MalformedPolygonError(
                    f"No ear found among {remaining} remaining vertices; polygon is not simple")
        node = nxt[node]

    cur = nxt[node]
    triangles.append((points[node], points[cur], points[nxt[cur]]))
    return triangles


@profile
def polygon_to_triangles(poly: Sequence) -> List[Triangle]:
    """
    Triangulate a simple polygon.

    Args:
        poly: At least 3 distinct points (Vec2 or any indexable (x, y)) in
            either winding. The polygon must be simple; this is not checked
            beyond what the sweep itself notices.

    Returns:
        len(poly) - 2 triangles (p1, p2, p3) of Vec2, each listed in the
        polygon's own vertex order.

    Raises:
        MalformedPolygonError: Fewer than 3 vertices, zero area, or no ear
            could be found (self-intersecting input).
    """
    points = [p if isinstance(p, Vec2) else Vec2(p[0], p[1]) for p in poly]
    return _ear_sweep(points, points)


@profile
def polygon_to_triangles_int(poly: Sequence) -> List[TriangleI]:
    """
    Triangulate a simple polygon with integer vertices.

    Same algorithm and triangle order as polygon_to_triangles; the predicates
    run on float copies of the points and the triangles hold the original
    Vec2I vertices.

    Raises:
        TypeError: A coordinate is not an integer.
        MalformedPolygonError: See polygon_to_triangles.
    """
    points = [p if isinstance(p, Vec2I) else Vec2I(p[0], p[1]) for p in poly]
    return _ear_sweep(points, [p.to_float() for p in points])


def triangulate(poly: Sequence) -> list:
    """Triangulate, picking the integer variant when every vertex is a Vec2I."""
    if len(poly) > 0 and all(isinstance(p, Vec2I) for p in poly):
        return polygon_to_triangles_int(poly)
    return polygon_to_triangles(poly)
