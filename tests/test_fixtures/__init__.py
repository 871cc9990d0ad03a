"""Test fixtures and utilities for gutility testing.

Organized into logical modules:
- polygons: Deterministic polygon generators (square, l_shape, convex_polygon, random_polygon,
  star_polygon, random_simple_polygon) and is_simple
- assertions: Custom assertion functions (assert_vec_close, assert_triangulation)
"""

from .polygons import (
    square, l_shape, convex_polygon, random_polygon, star_polygon, rotate_points,
    random_simple_polygon, is_simple,
)
from .assertions import assert_vec_close, assert_triangulation

__all__ = [
    'square',
    'l_shape',
    'convex_polygon',
    'random_polygon',
    'star_polygon',
    'rotate_points',
    'random_simple_polygon',
    'is_simple',
    'assert_vec_close',
    'assert_triangulation',
]
