"""gutility - small computational-geometry core.

Point containment, simple-polygon triangulation, and line/plane intersection
on top of closed-form 2x2/3x3/4x4 matrix inversion.
"""

__version__ = "0.1.0"

from .gutility_config import GUtilityConfig, get_config, set_config, reset_config
from .gutility_types import (
    GUtilityError,
    DegenerateGeometryError,
    SingularMatrixError,
    SingularSystemError,
    MalformedPolygonError,
)
from .mathutils import (
    Vec2, Vec2I, Vec3, Vec3I, Vec4,
    Matrix2, Matrix3, Matrix4, matrix_inverse,
    Transform,
    Rect, RectI, Cuboid, get_bounds,
)
from .geometry import (
    barycentric,
    point_in_triangle,
    point_in_polygon,
    polygon_area,
    polygon_to_triangles,
    polygon_to_triangles_int,
    triangulate,
    intersect_line_line,
    intersect_plane_line,
    try_intersect_line_line,
    try_intersect_plane_line,
)

__all__ = [
    'GUtilityConfig', 'get_config', 'set_config', 'reset_config',
    'GUtilityError', 'DegenerateGeometryError', 'SingularMatrixError',
    'SingularSystemError', 'MalformedPolygonError',
    'Vec2', 'Vec2I', 'Vec3', 'Vec3I', 'Vec4',
    'Matrix2', 'Matrix3', 'Matrix4', 'matrix_inverse',
    'Transform',
    'Rect', 'RectI', 'Cuboid', 'get_bounds',
    'barycentric', 'point_in_triangle', 'point_in_polygon', 'polygon_area',
    'polygon_to_triangles', 'polygon_to_triangles_int', 'triangulate',
    'intersect_line_line', 'intersect_plane_line',
    'try_intersect_line_line', 'try_intersect_plane_line',
]
