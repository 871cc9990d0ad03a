"""
Line-line (2D) and plane-line (3D) intersection.

Both solvers set up a small linear system for the parametric coordinates of
the intersection and solve it with the closed-form matrix inverse. A singular
system means there is no unique intersection (parallel or coincident lines, a
line parallel to the plane); the solvers then return None rather than a
coordinate.
"""

from typing import Optional, Tuple

from ..mathutils.matrix import Matrix2, Matrix3
from ..mathutils.vec import Vec2, Vec3
from ..profiling import profile


@profile
def intersect_line_line(from1, to1, from2, to2) -> Optional[Vec2]:
    """
    Intersection point of two infinite 2D lines.

    Args:
        from1, to1: Two distinct points on the first line
        from2, to2: Two distinct points on the second line

    Returns:
        The intersection as Vec2, or None if the lines are parallel or coincident.
    """
    from1 = Vec2(from1[0], from1[1])
    from2 = Vec2(from2[0], from2[1])
    dir1 = Vec2(to1[0], to1[1]) - from1
    dir2 = Vec2(to2[0], to2[1]) - from2

    # from1 + t * dir1 == from2 + s * dir2  <=>  [-dir1 dir2] (t, s) == from1 - from2
    inverse = Matrix2(-dir1.x, dir2.x,
                      -dir1.y, dir2.y).try_inverse()
    if inverse is None:
        return None
    t = (inverse @ (from1 - from2)).x
    return Vec2(from1.x + dir1.x * t, from1.y + dir1.y * t)


@profile
def intersect_plane_line(plane_origin, p, q, line_from, line_to) -> Optional[Vec3]:
    """
    Intersection point of a plane and an infinite 3D line.

    The plane passes through plane_origin, p and q; it is spanned by the
    offsets (plane_origin - p) and (plane_origin - q). The line passes
    through line_from and line_to.

    Returns:
        The intersection as Vec3, or None if the line is parallel to the plane
        (or the three plane points are collinear).
    """
    o = Vec3(plane_origin)
    line_from = Vec3(line_from)
    direction = Vec3(line_to) - line_from
    u = o - Vec3(p)
    v = o - Vec3(q)

    # a * u + b * v + c * direction == o - line_from
    inverse = Matrix3(u.x, v.x, direction.x,
                      u.y, v.y, direction.y,
                      u.z, v.z, direction.z).try_inverse()
    if inverse is None:
        return None
    c = (inverse @ (o - line_from)).z
    return line_from + direction * c


def try_intersect_line_line(from1, to1, from2, to2) -> Tuple[Optional[Vec2], bool]:
    """intersect_line_line returning (point, ok)."""
    point = intersect_line_line(from1, to1, from2, to2)
    return point, point is not None


def try_intersect_plane_line(plane_origin, p, q, line_from, line_to) -> Tuple[Optional[Vec3], bool]:
    """intersect_plane_line returning (point, ok)."""
    point = intersect_plane_line(plane_origin, p, q, line_from, line_to)
    return point, point is not None
