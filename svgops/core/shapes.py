"""
svgops Shapes

Defines the shape nodes read from a document and the converters that turn
each of them into a canonical PathProgram.
"""

from dataclasses import dataclass, field
import math
from typing import Tuple, Union

from .geometry import Point
from .path_data import compile_path_data
from .program import PathProgram
from .style import StyleAttributes

# Control point distance for a quarter circle of radius 1 drawn as a cubic.
# See https://pomax.github.io/bezierinfo/#circles_cubic
KAPPA = 4 * (math.sqrt(2) - 1) / 3


@dataclass(frozen=True)
class Rect:
    origin: Point
    size: Point
    style: StyleAttributes = field(default_factory=StyleAttributes)


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    style: StyleAttributes = field(default_factory=StyleAttributes)


@dataclass(frozen=True)
class Ellipse:
    center: Point
    radius_x: float
    radius_y: float
    style: StyleAttributes = field(default_factory=StyleAttributes)


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    style: StyleAttributes = field(default_factory=StyleAttributes)


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Point, ...]
    style: StyleAttributes = field(default_factory=StyleAttributes)


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Point, ...]
    style: StyleAttributes = field(default_factory=StyleAttributes)


@dataclass(frozen=True)
class Path:
    data: str
    style: StyleAttributes = field(default_factory=StyleAttributes)


ShapeNode = Union[Rect, Circle, Ellipse, Line, Polygon, Polyline, Path]


def rect_program(origin: Point, size: Point) -> PathProgram:
    """Rectangle corners clockwise from origin, then a Close."""
    return (PathProgram()
            .move_to(origin)
            .line_to(origin + Point(size.x, 0))
            .line_to(origin + size)
            .line_to(origin + Point(0, size.y))
            .close()
            .freeze())


def ellipse_program(center: Point, radius_x: float, radius_y: float) -> PathProgram:
    """
    Approximate an ellipse with four cubic Bezier segments.

    The ellipse is modelled as a circle of radius radius_x scaled along y
    by radius_y / radius_x. It starts at the top and runs clockwise (in
    y-down coordinates) back to the top.
    """
    cx, cy = center.x, center.y
    rx, ry = radius_x, radius_y
    kx = rx * KAPPA
    ky = ry * KAPPA
    top = Point(cx, cy - ry)

    return (PathProgram()
            .move_to(top)
            .cube_to(Point(cx + kx, cy - ry), Point(cx + rx, cy - ky), Point(cx + rx, cy))
            .cube_to(Point(cx + rx, cy + ky), Point(cx + kx, cy + ry), Point(cx, cy + ry))
            .cube_to(Point(cx - kx, cy + ry), Point(cx - rx, cy + ky), Point(cx - rx, cy))
            .cube_to(Point(cx - rx, cy - ky), Point(cx - kx, cy - ry), top)
            .freeze())


def line_program(start: Point, end: Point) -> PathProgram:
    """An open two point path; meant for stroking."""
    return PathProgram().move_to(start).line_to(end).freeze()


def poly_program(points: Tuple[Point, ...], closed: bool) -> PathProgram:
    """
    Connect points with lines.

    A closed poly (polygon) gets an extra LineTo back to the first vertex
    unless the last vertex already coincides with it. Fewer than two
    points give an empty program.
    """
    program = PathProgram()
    if len(points) < 2:
        return program.freeze()
    first = points[0]
    program.move_to(first)
    for p in points[1:]:
        program.line_to(p)
    if closed and points[-1] != first:
        program.line_to(first)
    return program.freeze()


def convert_rect(shape: Rect) -> PathProgram:
    return rect_program(shape.origin, shape.size)


def convert_circle(shape: Circle) -> PathProgram:
    return ellipse_program(shape.center, shape.radius, shape.radius)


def convert_ellipse(shape: Ellipse) -> PathProgram:
    return ellipse_program(shape.center, shape.radius_x, shape.radius_y)


def convert_line(shape: Line) -> PathProgram:
    return line_program(shape.start, shape.end)


def convert_polygon(shape: Polygon) -> PathProgram:
    return poly_program(shape.points, closed=True)


def convert_polyline(shape: Polyline) -> PathProgram:
    return poly_program(shape.points, closed=False)


def convert_path(shape: Path) -> PathProgram:
    return compile_path_data(shape.data)
