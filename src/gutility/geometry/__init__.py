"""Containment predicates, polygon triangulation and line/plane intersection."""

from .containment import (
    barycentric,
    point_in_triangle,
    point_in_polygon,
    signed_area,
    polygon_area,
    triangle_area,
)
from .triangulation import polygon_to_triangles, polygon_to_triangles_int, triangulate
from .intersection import (
    intersect_line_line,
    intersect_plane_line,
    try_intersect_line_line,
    try_intersect_plane_line,
)

__all__ = [
    'barycentric', 'point_in_triangle', 'point_in_polygon',
    'signed_area', 'polygon_area', 'triangle_area',
    'polygon_to_triangles', 'polygon_to_triangles_int', 'triangulate',
    'intersect_line_line', 'intersect_plane_line',
    'try_intersect_line_line', 'try_intersect_plane_line',
]
