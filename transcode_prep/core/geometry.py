"""
Integer pixel geometry - points and half-open rectangles.

Small immutable value types used by the crop and scale calculations. A
Rectangle contains the points with x0 <= x < x1 and y0 <= y < y1. It is
well-formed (canonical) when x0 <= x1 and y0 <= y1; the operations here never
reject a rectangle that is not, they canonicalize or clip it instead.
"""
from dataclasses import dataclass
from typing import Tuple


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class Point:
    """An (x, y) pixel coordinate or vector"""
    x: int = 0
    y: int = 0

    def add(self, q: 'Point') -> 'Point':
        return Point(self.x + q.x, self.y + q.y)

    def sub(self, q: 'Point') -> 'Point':
        return Point(self.x - q.x, self.y - q.y)

    def div(self, k: int) -> 'Point':
        return Point(_trunc_div(self.x, k), _trunc_div(self.y, k))


@dataclass(frozen=True)
class Rectangle:
    """
    Half-open rectangle between (x0, y0) and (x1, y1).

    Examples:
        >>> r = Rectangle(0, 0, 1920, 1080)
        >>> r.dx(), r.dy()
        (1920, 1080)
        >>> Rectangle(10, 10, 0, 0).canon()
        Rectangle(x0=0, y0=0, x1=10, y1=10)
    """
    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0

    @classmethod
    def from_points(cls, lo: Point, hi: Point) -> 'Rectangle':
        return cls(lo.x, lo.y, hi.x, hi.y)

    @classmethod
    def from_size(cls, width: int, height: int) -> 'Rectangle':
        """Rectangle anchored at the origin with the given size."""
        return cls(0, 0, width, height)

    @classmethod
    def parse(cls, text: str) -> 'Rectangle':
        """
        Parse a 'WIDTHxHEIGHT' frame size into an origin-anchored rectangle.

        Raises:
            ValueError: If text is not two integers separated by 'x'

        Examples:
            >>> Rectangle.parse("1920x1080")
            Rectangle(x0=0, y0=0, x1=1920, y1=1080)
        """
        parts = text.lower().split('x')
        if len(parts) != 2:
            raise ValueError(f"Invalid frame size: {text!r}. Expected 'WIDTHxHEIGHT' (e.g., '1920x1080')")
        try:
            width, height = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"Invalid frame size: {text!r}. Both values must be integers")
        return cls.from_size(width, height)

    @property
    def min(self) -> Point:
        return Point(self.x0, self.y0)

    @property
    def max(self) -> Point:
        return Point(self.x1, self.y1)

    def dx(self) -> int:
        return self.x1 - self.x0

    def dy(self) -> int:
        return self.y1 - self.y0

    def size(self) -> Point:
        return Point(self.dx(), self.dy())

    def empty(self) -> bool:
        """Report whether the rectangle contains no points."""
        return self.x0 >= self.x1 or self.y0 >= self.y1

    def canon(self) -> 'Rectangle':
        """Return the well-formed version of r, with min <= max on both axes."""
        x0, x1 = sorted((self.x0, self.x1))
        y0, y1 = sorted((self.y0, self.y1))
        return Rectangle(x0, y0, x1, y1)

    def intersect(self, s: 'Rectangle') -> 'Rectangle':
        """
        Return the largest rectangle contained by both r and s.

        If the two do not overlap the zero rectangle is returned.
        """
        r = Rectangle(
            max(self.x0, s.x0),
            max(self.y0, s.y0),
            min(self.x1, s.x1),
            min(self.y1, s.y1),
        )
        if r.empty():
            return ZR
        return r

    def add(self, p: Point) -> 'Rectangle':
        return Rectangle(self.x0 + p.x, self.y0 + p.y, self.x1 + p.x, self.y1 + p.y)

    def sub(self, p: Point) -> 'Rectangle':
        return Rectangle(self.x0 - p.x, self.y0 - p.y, self.x1 - p.x, self.y1 - p.y)

    def center(self) -> Point:
        return self.min.add(self.size().div(2))

    def in_(self, s: 'Rectangle') -> bool:
        """Report whether every point in r is also in s."""
        if self.empty():
            return True
        return s.x0 <= self.x0 and self.x1 <= s.x1 and s.y0 <= self.y0 and self.y1 <= s.y1

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x0, self.y0, self.x1, self.y1)

    def __str__(self) -> str:
        return f"({self.x0},{self.y0})-({self.x1},{self.y1})"


# The zero rectangle
ZR = Rectangle()
