"""
Transform - 4x4 affine transformation convenience wrapper.

Uses the column-vector convention: points are multiplied on the right
(M @ p) and the translation lives in the last column. Each builder method
returns a new Transform equal to `self @ op`, so the operation written last
is applied to the point first:

    t = Transform.identity().translate(5, 0, 0).rotate_z(math.pi / 2)
    t.transform_point((1, 0, 0))   # rotate, then translate -> (5, 1, 0)

Angles are in radians.
"""

import math
from typing import Iterable, List

from .matrix import Matrix4
from .vec import Vec3, Vec4


class Transform:
    __slots__ = ('matrix',)

    def __init__(self, matrix=None):
        if matrix is None:
            self.matrix = Matrix4.identity()
        elif isinstance(matrix, Matrix4):
            self.matrix = matrix
        else:
            self.matrix = Matrix4(matrix)

    def __repr__(self):
        return f"Transform({self.matrix!r})"

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return self.matrix == other.matrix

    __hash__ = None

    def __matmul__(self, other):
        if isinstance(other, Transform):
            return Transform(self.matrix @ other.matrix)
        return self.matrix @ other

    def __array__(self, dtype=None, copy=None):
        return self.matrix.__array__(dtype)

    @staticmethod
    def identity() -> 'Transform':
        return Transform()

    def _then(self, values) -> 'Transform':
        return Transform(self.matrix @ Matrix4(values))

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def translate(self, x, y, z) -> 'Transform':
        return self._then((1, 0, 0, x,
                           0, 1, 0, y,
                           0, 0, 1, z,
                           0, 0, 0, 1))

    def scale(self, x, y=None, z=None) -> 'Transform':
        """Scale per axis, or uniformly when only x is given."""
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise ValueError("Pass either one uniform factor or all three axis factors")
        return self._then((x, 0, 0, 0,
                           0, y, 0, 0,
                           0, 0, z, 0,
                           0, 0, 0, 1))

    def rotate(self, angle, axis) -> 'Transform':
        """Rotate by angle around an arbitrary axis (normalized here)."""
        x, y, z = Vec3(axis).normalized()
        if x == 0 and y == 0 and z == 0:
            raise ValueError("Rotation axis must be non-zero")
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1 - c
        return self._then((x * x * t + c,     x * y * t - z * s, x * z * t + y * s, 0,
                           x * y * t + z * s, y * y * t + c,     y * z * t - x * s, 0,
                           x * z * t - y * s, y * z * t + x * s, z * z * t + c,     0,
                           0, 0, 0, 1))

    def rotate_x(self, angle) -> 'Transform':
        c, s = math.cos(angle), math.sin(angle)
        return self._then((1, 0, 0, 0,
                           0, c, -s, 0,
                           0, s, c, 0,
                           0, 0, 0, 1))

    def rotate_y(self, angle) -> 'Transform':
        c, s = math.cos(angle), math.sin(angle)
        return self._then((c, 0, s, 0,
                           0, 1, 0, 0,
                           -s, 0, c, 0,
                           0, 0, 0, 1))

    def rotate_z(self, angle) -> 'Transform':
        c, s = math.cos(angle), math.sin(angle)
        return self._then((c, -s, 0, 0,
                           s, c, 0, 0,
                           0, 0, 1, 0,
                           0, 0, 0, 1))

    def inverse(self) -> 'Transform':
        """Inverse transform; raises SingularMatrixError for degenerate scales."""
        return Transform(self.matrix.inverse())

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    def apply(self, point) -> Vec4:
        """Transform a homogeneous point."""
        return self.matrix @ Vec4(point)

    def transform_point(self, point) -> Vec3:
        """Transform a cartesian point (w = 1) and project back."""
        return self.apply(Vec4.from_vec3(point, 1.0)).to_cartesian()

    def transform_direction(self, vector) -> Vec3:
        """Transform a direction (w = 0): translation is ignored."""
        r = self.apply(Vec4.from_vec3(vector, 0.0))
        return Vec3(r.x, r.y, r.z)

    def apply_all(self, points: Iterable) -> List[Vec4]:
        """Batch transform homogeneous points."""
        return [self.apply(p) for p in points]
