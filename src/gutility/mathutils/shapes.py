"""
Axis-aligned rectangles and boxes.

Rect/RectI use screen-style edges: L(eft) <= R(ight), T(op) <= B(ottom).
Cuboid adds N(ear) <= F(ar) for the third axis. All containment and
intersection tests are inclusive of the edges.
"""

from dataclasses import dataclass
from typing import Iterable, Union

from .vec import Vec2, Vec2I, Vec3


@dataclass(frozen=True)
class Rect:
    l: float
    t: float
    r: float
    b: float

    @property
    def width(self):
        return self.r - self.l

    @property
    def height(self):
        return self.b - self.t

    @property
    def area(self):
        return self.width * self.height

    @property
    def origin(self) -> Vec2:
        return Vec2(self.l, self.t)

    def contains(self, item) -> bool:
        """Inclusive containment of a point or of another rectangle."""
        if isinstance(item, Rect):
            return self.l <= item.l and self.r >= item.r and self.t <= item.t and self.b >= item.b
        x, y = item[0], item[1]
        return self.l <= x <= self.r and self.t <= y <= self.b

    def intersects_with(self, other) -> bool:
        return not (self.r < other.l or other.r < self.l or self.b < other.t or other.b < self.t)

    def continues(self, other) -> bool:
        """True if other shares a full edge with this rectangle."""
        return ((self.r == other.r and self.l == other.l and (self.b == other.t or self.t == other.b)) or
                (self.b == other.b and self.t == other.t and (self.l == other.r or self.r == other.l)))

    def to_int(self) -> 'RectI':
        """Truncate every edge toward zero."""
        return RectI(int(self.l), int(self.t), int(self.r), int(self.b))

    def to_float(self) -> 'Rect':
        return self

    @classmethod
    def from_xywh(cls, x, y, w, h):
        return cls(x, y, x + w, y + h)


@dataclass(frozen=True)
class RectI(Rect):
    l: int
    t: int
    r: int
    b: int

    @property
    def origin(self) -> Vec2I:
        return Vec2I(self.l, self.t)

    def to_int(self) -> 'RectI':
        return self

    def to_float(self) -> Rect:
        return Rect(float(self.l), float(self.t), float(self.r), float(self.b))


@dataclass(frozen=True)
class Cuboid:
    l: float
    t: float
    n: float
    r: float
    b: float
    f: float

    @property
    def width(self):
        return self.r - self.l

    @property
    def height(self):
        return self.b - self.t

    @property
    def depth(self):
        return self.f - self.n

    @property
    def volume(self):
        return self.width * self.height * self.depth

    @property
    def origin(self) -> Vec3:
        return Vec3(self.l, self.t, self.n)

    @staticmethod
    def from_position_size(position, size) -> 'Cuboid':
        return Cuboid(position[0], position[1], position[2],
                      position[0] + size[0], position[1] + size[1], position[2] + size[2])

    def contains(self, item) -> bool:
        if isinstance(item, Cuboid):
            return (self.l <= item.l and self.r >= item.r and
                    self.t <= item.t and self.b >= item.b and
                    self.n <= item.n and self.f >= item.f)
        x, y, z = item[0], item[1], item[2]
        return self.l <= x <= self.r and self.t <= y <= self.b and self.n <= z <= self.f

    def intersects_with(self, other: 'Cuboid') -> bool:
        return not (self.r < other.l or other.r < self.l or
                    self.b < other.t or other.b < self.t or
                    self.f < other.n or other.f < self.n)


def get_bounds(points: Iterable) -> Union[Rect, RectI]:
    """
    Bounding rectangle of a collection of 2D points.

    Returns a RectI when every point is a Vec2I, otherwise a Rect.
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute the bounds of an empty point collection")

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    if all(isinstance(p, Vec2I) for p in points):
        return RectI(min(xs), min(ys), max(xs), max(ys))
    return Rect(float(min(xs)), float(min(ys)), float(max(xs)), float(max(ys)))
