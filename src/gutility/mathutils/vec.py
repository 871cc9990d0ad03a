"""
Lightweight 2D/3D/4D point and vector value types.

Vec2, Vec3 and Vec4 hold floats; Vec2I and Vec3I hold ints. All of them are
immutable, hashable and indexable like a tuple, so they can be passed anywhere
a plain (x, y[, z]) tuple or a numpy array is accepted, and vice versa.

Conversions between the integer and floating variants are always explicit:
    Vec2(1.9, -1.9).to_int()   -> Vec2I(1, -1)     (truncation toward zero)
    Vec2I(1, 2).to_float()     -> Vec2(1.0, 2.0)
"""
import math
import operator


def unpack_args(args, count):
    """Accept either `count` scalars or a single indexable of length `count`."""
    if len(args) == count:
        return args
    if len(args) == 0:
        return (0,) * count
    if len(args) == 1:
        try:
            if len(args[0]) == count:
                return tuple(args[0][i] for i in range(count))
        except TypeError:
            pass
    raise ValueError(f"Invalid arguments. Expected either a sequence of {count} values or {count} individual values.")


def _as_int(value):
    # Rejects floats: float -> int has to go through an explicit to_int()
    return operator.index(value)


class _VecBase:
    __slots__ = ()
    _fields = ()
    _coerce = float

    def __init__(self, *args):
        values = unpack_args(args, len(self._fields))
        coerce = type(self)._coerce
        for name, value in zip(self._fields, values):
            object.__setattr__(self, name, coerce(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), self.to_tuple())

    def __getitem__(self, i):
        if isinstance(i, slice):
            return self.to_tuple()[i]
        return getattr(self, self._fields[i])

    def __iter__(self):
        for name in self._fields:
            yield getattr(self, name)

    def __len__(self):
        return len(self._fields)

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(v) for v in self)})"

    def __eq__(self, other):
        try:
            if len(other) != len(self):
                return False
            return all(a == other[i] for i, a in enumerate(self))
        except TypeError:
            return NotImplemented

    def __hash__(self):
        return hash(self.to_tuple())

    def __add__(self, other):
        return type(self)(*(a + other[i] for i, a in enumerate(self)))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return type(self)(*(a - other[i] for i, a in enumerate(self)))

    def __rsub__(self, other):
        return type(self)(*(other[i] - a for i, a in enumerate(self)))

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __mul__(self, scalar):
        return type(self)(*(a * scalar for a in self))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def dot(self, other):
        """Dot product."""
        return sum(a * other[i] for i, a in enumerate(self))

    def length_sq(self):
        """Squared length (avoids sqrt)."""
        return sum(a * a for a in self)

    def length(self):
        """Vector length/magnitude."""
        return math.sqrt(self.length_sq())

    def to_tuple(self):
        """Convert to tuple."""
        return tuple(self)

    def to_list(self):
        """Convert to list."""
        return list(self)


class Vec2(_VecBase):
    """A 2D point/vector with float components."""
    __slots__ = ('x', 'y')
    _fields = ('x', 'y')

    def __truediv__(self, scalar):
        inv = 1.0 / scalar
        return Vec2(self.x * inv, self.y * inv)

    def cross(self, other):
        """Z component of the 3D cross product (signed parallelogram area)."""
        return self.x * other[1] - self.y * other[0]

    def normalized(self):
        """Return a unit-length copy; the zero vector stays zero."""
        length_sq = self.x * self.x + self.y * self.y
        if length_sq == 0:
            return Vec2(0.0, 0.0)
        inv = 1.0 / math.sqrt(length_sq)
        return Vec2(self.x * inv, self.y * inv)

    def to_int(self):
        return Vec2I(int(self.x), int(self.y))

    def to_float(self):
        return self

    @staticmethod
    def from_homogeneous(homo):
        """Project a homogeneous 2D point (x, y, w) to cartesian (x/w, y/w)."""
        return Vec2(homo[0] / homo[2], homo[1] / homo[2])


class Vec2I(_VecBase):
    """A 2D point/vector with integer components."""
    __slots__ = ('x', 'y')
    _fields = ('x', 'y')
    _coerce = staticmethod(_as_int)

    def cross(self, other):
        return self.x * other[1] - self.y * other[0]

    def normalized(self):
        return self.to_float().normalized()

    def to_int(self):
        return self

    def to_float(self):
        return Vec2(float(self.x), float(self.y))


class Vec3(_VecBase):
    """A 3D point/vector with float components."""
    __slots__ = ('x', 'y', 'z')
    _fields = ('x', 'y', 'z')

    def __truediv__(self, scalar):
        inv = 1.0 / scalar
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def cross(self, other):
        """Cross product."""
        return Vec3(
            self.y * other[2] - self.z * other[1],
            self.z * other[0] - self.x * other[2],
            self.x * other[1] - self.y * other[0]
        )

    def normalized(self):
        """Return a unit-length copy; the zero vector stays zero."""
        length_sq = self.length_sq()
        if length_sq == 0:
            return Vec3(0.0, 0.0, 0.0)
        inv = 1.0 / math.sqrt(length_sq)
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def to_int(self):
        return Vec3I(int(self.x), int(self.y), int(self.z))

    def to_float(self):
        return self

    @staticmethod
    def from_vec2(point, z=0.0):
        return Vec3(point[0], point[1], z)

    @staticmethod
    def from_homogeneous(homo):
        """Project a homogeneous point (x, y, z, w) to cartesian (x/w, y/w, z/w)."""
        return Vec3(homo[0] / homo[3], homo[1] / homo[3], homo[2] / homo[3])


class Vec3I(_VecBase):
    """A 3D point/vector with integer components."""
    __slots__ = ('x', 'y', 'z')
    _fields = ('x', 'y', 'z')
    _coerce = staticmethod(_as_int)

    def cross(self, other):
        return Vec3I(
            self.y * other[2] - self.z * other[1],
            self.z * other[0] - self.x * other[2],
            self.x * other[1] - self.y * other[0]
        )

    def normalized(self):
        return self.to_float().normalized()

    def to_int(self):
        return self

    def to_float(self):
        return Vec3(float(self.x), float(self.y), float(self.z))


class Vec4(_VecBase):
    """
    A homogeneous 3D point (x, y, z, w).

    Unlike the other vector types, scaling acts on the represented cartesian
    point: `v * s` divides w by s, so `(v * s).to_cartesian()` equals
    `v.to_cartesian() * s`.
    """
    __slots__ = ('x', 'y', 'z', 'w')
    _fields = ('x', 'y', 'z', 'w')

    def __mul__(self, scalar):
        return Vec4(self.x, self.y, self.z, self.w / scalar)

    def length_sq(self):
        """Squared length of the represented cartesian point (w ~ 0 treated as a direction)."""
        if abs(self.w) < 0.0001:
            return self.x * self.x + self.y * self.y + self.z * self.z
        n = 1.0 / self.w / self.w
        return (self.x * self.x + self.y * self.y + self.z * self.z) * n

    def norm_w(self):
        """Rescale so that w == 1 (directions, w == 0, are returned unchanged)."""
        if self.w == 0 or self.w == 1:
            return self
        return Vec4(self.x / self.w, self.y / self.w, self.z / self.w, 1.0)

    def normalized(self):
        """Unit-length point with w == 1; the zero vector keeps its w."""
        v = self.norm_w()
        length = math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
        if length > 0:
            inv = 1.0 / length
            return Vec4(v.x * inv, v.y * inv, v.z * inv, 1.0)
        return Vec4(0.0, 0.0, 0.0, v.w)

    def to_cartesian(self):
        if self.w == 0:
            return Vec3(self.x, self.y, self.z)
        return Vec3(self.x / self.w, self.y / self.w, self.z / self.w)

    @staticmethod
    def from_vec3(v, w=1.0):
        return Vec4(v[0], v[1], v[2], w)
