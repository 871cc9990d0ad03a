"""
    Error types shared by the gutility geometry core.

    All of these describe the outcome of a single computation and are
    recoverable by the caller. Predicates turn degeneracy into a plain
    "not contained" answer and the intersection solvers turn singularity into
    None, so most callers only meet these through the value-returning APIs
    (Matrix.inverse, barycentric, triangulation).
"""


class GUtilityError(Exception):
    """Base class for all gutility errors."""


class DegenerateGeometryError(GUtilityError, ValueError):
    """A triangle (or polygon) has zero signed area."""


class SingularMatrixError(GUtilityError, ArithmeticError):
    """A matrix determinant is zero (or within the configured epsilon of zero)."""

    def __init__(self, determinant, order):
        self.determinant = determinant
        self.order = order
        super().__init__(f"{order}x{order} matrix is singular (det={determinant!r})")


# Name used when the singular matrix comes from a linear system
SingularSystemError = SingularMatrixError


class MalformedPolygonError(GUtilityError, ValueError):
    """A polygon violates the simple-polygon precondition."""
