"""
svgops Geometry

Point arithmetic and 2D affine transforms.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import UnsupportedTransform, InvalidNumber
from .numbers import parse_number_list


@dataclass(frozen=True)
class Point:
    """A 2D point."""
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> 'Point':
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class AffineTransform:
    """
    An affine transform mapping (x, y) to (a*x + c*y + e, b*x + d*y + f).

    Coefficients follow the SVG matrix(a, b, c, d, e, f) order, i.e. the
    matrix [[a, c, e], [b, d, f], [0, 0, 1]]. The default is the identity.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> 'AffineTransform':
        return cls()

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

    def apply(self, point: Point) -> Point:
        """Transform a single point."""
        return Point(
            self.a * point.x + self.c * point.y + self.e,
            self.b * point.x + self.d * point.y + self.f
        )

    def multiply(self, other: 'AffineTransform') -> 'AffineTransform':
        """Compose: the result applies other first, then self."""
        a1, b1, c1, d1, e1, f1 = other.elements()
        a2, b2, c2, d2, e2, f2 = self.elements()
        return AffineTransform(
            a2 * a1 + c2 * b1,
            b2 * a1 + d2 * b1,
            a2 * c1 + c2 * d1,
            b2 * c1 + d2 * d1,
            a2 * e1 + c2 * f1 + e2,
            b2 * e1 + d2 * f1 + f2
        )

    def elements(self):
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def to_matrix(self) -> np.ndarray:
        """Return the transform as a 3x3 homogeneous matrix."""
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0.0, 0.0, 1.0],
        ])

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Transform an (N, 2) array of points."""
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        linear = self.to_matrix()[:2, :2]
        offset = np.array([self.e, self.f])
        return points @ linear.T + offset


IDENTITY = AffineTransform()


def parse_transform(text: Optional[str]) -> AffineTransform:
    """
    Parse a transform attribute.

    Only the matrix(a,b,c,d,e,f) form is supported. Any other transform
    function raises UnsupportedTransform; a matrix without exactly six
    numbers raises InvalidNumber.
    """
    if text is None:
        return IDENTITY
    stripped = text.strip()
    if not (stripped.startswith('matrix(') and stripped.endswith(')')):
        raise UnsupportedTransform(text)
    values = parse_number_list(stripped[len('matrix('):-1], 'transform')
    if len(values) != 6:
        raise InvalidNumber(text, 'transform')
    return AffineTransform(*values)
