"""
Small dense square matrices (2x2, 3x3, 4x4) with closed-form inversion.

Values are stored as a flat row-major tuple and every operation returns a new
matrix; invert_in_place() is the one mutator and swaps the whole tuple at once.
Indexing follows numpy conventions:
    m[i, j]  -> element at row i, column j
    m[i]     -> row i as a tuple
and np.asarray(m) gives the equivalent (k, k) float array.

Inversion builds the adjugate (transposed cofactor matrix) and scales it by
1/det. A matrix counts as singular when |det| <= epsilon, where epsilon
defaults to GUtilityConfig.singular_epsilon (0.0: an exact-zero test).
Singularity is reported three ways, pick whichever fits the call site:
    m.inverse()          raises SingularMatrixError
    m.try_inverse()      returns None
    matrix_inverse(m)    returns (inverse_or_None, ok)
"""

from typing import Optional, Tuple
import numpy as np

from ..gutility_config import get_config
from ..gutility_types import SingularMatrixError
from .vec import Vec2, Vec3, Vec4


def _det3(a, b, c, d, e, f, g, h, i):
    """3x3 determinant, row-major arguments."""
    return a*(e*i - f*h) - b*(d*i - f*g) + c*(d*h - e*g)


class SquareMatrix:
    """Common behaviour of Matrix2, Matrix3 and Matrix4."""
    __slots__ = ('_v',)
    order = 0
    _vector_type = None

    def __init__(self, *values):
        n = self.order
        size = n * n
        if len(values) == 1:
            values = values[0]
            if isinstance(values, SquareMatrix):
                values = values._v
            elif isinstance(values, np.ndarray):
                values = values.reshape(-1).tolist()
            else:
                values = list(values)
                # Nested rows
                if len(values) == n and all(hasattr(row, '__len__') for row in values):
                    values = [x for row in values for x in row]
        if len(values) != size:
            raise ValueError(f"{type(self).__name__} needs {size} values, got {len(values)}")
        self._v = tuple(float(x) for x in values)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls):
        n = cls.order
        return cls([1.0 if i == j else 0.0 for i in range(n) for j in range(n)])

    @classmethod
    def filled(cls, c):
        """Matrix with every element set to c."""
        return cls([c] * (cls.order * cls.order))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def values(self) -> Tuple[float, ...]:
        """Flat row-major values."""
        return self._v

    def rows(self):
        n = self.order
        return tuple(self._v[i * n:(i + 1) * n] for i in range(n))

    def __getitem__(self, index):
        n = self.order
        if isinstance(index, tuple):
            i, j = index
            return self._v[i * n + j]
        return self.rows()[index]

    def __len__(self):
        return self.order

    def __iter__(self):
        return iter(self.rows())

    def __array__(self, dtype=None, copy=None):
        return np.array(self.rows(), dtype=dtype or float)

    def __eq__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.order == other.order and self._v == other._v

    # invert_in_place can change the values
    __hash__ = None

    def __repr__(self):
        body = ", ".join("(" + ", ".join(f"{x:g}" for x in row) + ")" for row in self.rows())
        return f"{type(self).__name__}({body})"

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _check_same(self, other):
        if not isinstance(other, SquareMatrix) or other.order != self.order:
            raise TypeError(f"Expected a {self.order}x{self.order} matrix, got {type(other).__name__}")

    def __add__(self, other):
        self._check_same(other)
        return type(self)([a + b for a, b in zip(self._v, other._v)])

    def __sub__(self, other):
        self._check_same(other)
        return type(self)([a - b for a, b in zip(self._v, other._v)])

    def __mul__(self, scalar):
        if isinstance(scalar, SquareMatrix):
            raise TypeError("Use the @ operator for matrix products")
        return type(self)([a * scalar for a in self._v])

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __neg__(self):
        return type(self)([-a for a in self._v])

    def __matmul__(self, other):
        n = self.order
        v = self._v
        if isinstance(other, SquareMatrix):
            self._check_same(other)
            r = other._v
            return type(self)([
                sum(v[i * n + k] * r[k * n + j] for k in range(n))
                for i in range(n) for j in range(n)
            ])
        if len(other) != n:
            raise ValueError(f"Expected a vector of length {n}, got {len(other)}")
        return self._vector_type(*(
            sum(v[i * n + k] * other[k] for k in range(n)) for i in range(n)
        ))

    def transpose(self):
        n = self.order
        return type(self)([self._v[j * n + i] for i in range(n) for j in range(n)])

    def trace(self) -> float:
        n = self.order
        return sum(self._v[i * n + i] for i in range(n))

    def apply(self, func):
        """New matrix with func applied to every element."""
        return type(self)([func(a) for a in self._v])

    # -------------------------------------------------------------------------
    # Inversion
    # -------------------------------------------------------------------------

    def determinant(self) -> float:
        raise NotImplementedError

    def _adjugate(self):
        """Transposed cofactor matrix as a flat row-major list."""
        raise NotImplementedError

    def try_inverse(self, epsilon: Optional[float] = None):
        """Return the inverse, or None when the matrix is singular."""
        if epsilon is None:
            epsilon = get_config().singular_epsilon
        det = self.determinant()
        if det == 0 or abs(det) <= epsilon:
            return None
        inv_det = 1.0 / det
        return type(self)([a * inv_det for a in self._adjugate()])

    def inverse(self, epsilon: Optional[float] = None):
        """Return the inverse; raises SingularMatrixError when singular."""
        result = self.try_inverse(epsilon)
        if result is None:
            raise SingularMatrixError(self.determinant(), self.order)
        return result

    def invert_in_place(self, epsilon: Optional[float] = None) -> bool:
        """
        Replace this matrix's values with its inverse.

        Returns:
            True on success. On a singular matrix returns False and the values
            are left untouched.
        """
        result = self.try_inverse(epsilon)
        if result is None:
            return False
        self._v = result._v
        return True


class Matrix2(SquareMatrix):
    """2x2 matrix:  [v0 v1]
                    [v2 v3]"""
    __slots__ = ()
    order = 2
    _vector_type = Vec2

    def determinant(self) -> float:
        v = self._v
        return v[0] * v[3] - v[1] * v[2]

    def _adjugate(self):
        v = self._v
        return [v[3], -v[1], -v[2], v[0]]


class Matrix3(SquareMatrix):
    """3x3 matrix, row-major."""
    __slots__ = ()
    order = 3
    _vector_type = Vec3

    def determinant(self) -> float:
        return _det3(*self._v)

    def _adjugate(self):
        v = self._v
        return [
            v[4]*v[8] - v[5]*v[7],  v[2]*v[7] - v[1]*v[8],  v[1]*v[5] - v[2]*v[4],
            v[5]*v[6] - v[3]*v[8],  v[0]*v[8] - v[2]*v[6],  v[2]*v[3] - v[0]*v[5],
            v[3]*v[7] - v[4]*v[6],  v[1]*v[6] - v[0]*v[7],  v[0]*v[4] - v[1]*v[3],
        ]


class Matrix4(SquareMatrix):
    """4x4 matrix, row-major."""
    __slots__ = ()
    order = 4
    _vector_type = Vec4

    def _cofactors(self):
        m = self.rows()
        cof = [[0.0] * 4 for _ in range(4)]
        for i in range(4):
            for j in range(4):
                # Minor matrix (3x3) excluding row i and col j
                minor = [m[r][c] for r in range(4) if r != i for c in range(4) if c != j]
                sign = -1.0 if (i + j) % 2 else 1.0
                cof[i][j] = sign * _det3(*minor)
        return cof

    def determinant(self) -> float:
        # Cofactor expansion along the first row
        m = self._v
        return (m[0] * _det3(m[5], m[6], m[7], m[9], m[10], m[11], m[13], m[14], m[15])
                - m[1] * _det3(m[4], m[6], m[7], m[8], m[10], m[11], m[12], m[14], m[15])
                + m[2] * _det3(m[4], m[5], m[7], m[8], m[9], m[11], m[12], m[13], m[15])
                - m[3] * _det3(m[4], m[5], m[6], m[8], m[9], m[10], m[12], m[13], m[14]))

    def _adjugate(self):
        cof = self._cofactors()
        return [cof[j][i] for i in range(4) for j in range(4)]


_MATRIX_TYPES = {2: Matrix2, 3: Matrix3, 4: Matrix4}


def as_matrix(values) -> SquareMatrix:
    """Wrap a (k, k) nested sequence or numpy array, k in {2, 3, 4}."""
    if isinstance(values, SquareMatrix):
        return values
    order = len(values)
    if order not in _MATRIX_TYPES:
        raise ValueError(f"Only 2x2, 3x3 and 4x4 matrices are supported, got {order} rows")
    return _MATRIX_TYPES[order](values)


def matrix_inverse(matrix, epsilon: Optional[float] = None) -> Tuple[Optional[SquareMatrix], bool]:
    """
    Invert a 2x2, 3x3 or 4x4 matrix.

    Returns:
        (inverse, True) on success, (None, False) when the matrix is singular.
    """
    result = as_matrix(matrix).try_inverse(epsilon)
    return result, result is not None
