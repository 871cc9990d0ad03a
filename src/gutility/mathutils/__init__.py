"""Value types: vectors, square matrices, affine transforms and axis-aligned boxes."""

from .vec import Vec2, Vec2I, Vec3, Vec3I, Vec4
from .matrix import SquareMatrix, Matrix2, Matrix3, Matrix4, as_matrix, matrix_inverse
from .transform import Transform
from .shapes import Rect, RectI, Cuboid, get_bounds

__all__ = [
    'Vec2', 'Vec2I', 'Vec3', 'Vec3I', 'Vec4',
    'SquareMatrix', 'Matrix2', 'Matrix3', 'Matrix4', 'as_matrix', 'matrix_inverse',
    'Transform',
    'Rect', 'RectI', 'Cuboid', 'get_bounds',
]
