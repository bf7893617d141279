"""
Qt Canvas

Binds the Canvas API to QPainter so compiled documents can be drawn in
any PyQt6 paint device (widgets, QImage, QPdfWriter, ...).
"""

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QTransform

from ..core.geometry import AffineTransform, Point
from ..core.program import MoveTo, LineTo, CubeTo, Close, PathProgram
from ..core.style import Color
from .canvas import Canvas

_CAPS = {
    'butt': Qt.PenCapStyle.FlatCap,
    'round': Qt.PenCapStyle.RoundCap,
    'square': Qt.PenCapStyle.SquareCap,
}

_JOINS = {
    'miter': Qt.PenJoinStyle.SvgMiterJoin,
    'round': Qt.PenJoinStyle.RoundJoin,
    'bevel': Qt.PenJoinStyle.BevelJoin,
}


def to_qpointf(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


def to_qcolor(color: Color) -> QColor:
    """Convert a packed ARGB color."""
    return QColor(color.red, color.green, color.blue, color.alpha)


def to_qtransform(transform: AffineTransform) -> QTransform:
    # QTransform(m11, m12, m21, m22, dx, dy) takes the coefficients in
    # SVG matrix(a, b, c, d, e, f) order.
    return QTransform(transform.a, transform.b, transform.c,
                      transform.d, transform.e, transform.f)


def program_to_qpainterpath(program: PathProgram) -> QPainterPath:
    """Build a QPainterPath from a path program."""
    path = QPainterPath()
    for op in program:
        if isinstance(op, MoveTo):
            path.moveTo(to_qpointf(op.point))
        elif isinstance(op, LineTo):
            path.lineTo(to_qpointf(op.point))
        elif isinstance(op, CubeTo):
            path.cubicTo(to_qpointf(op.ctrl1), to_qpointf(op.ctrl2), to_qpointf(op.end))
        elif isinstance(op, Close):
            path.closeSubpath()
    return path


class QtCanvas(Canvas):
    """Canvas drawing through an active QPainter."""

    def __init__(self, painter: QPainter):
        self.painter = painter
        self._path = QPainterPath()

    def push_transform(self, transform: AffineTransform) -> None:
        self.painter.save()
        self.painter.setTransform(to_qtransform(transform), True)

    def pop_transform(self) -> None:
        self.painter.restore()

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, point: Point) -> None:
        self._path.moveTo(to_qpointf(point))

    def line_to(self, point: Point) -> None:
        self._path.lineTo(to_qpointf(point))

    def cubic_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        self._path.cubicTo(to_qpointf(ctrl1), to_qpointf(ctrl2), to_qpointf(end))

    def close_path(self) -> None:
        self._path.closeSubpath()

    def end_path(self) -> QPainterPath:
        path = self._path
        self._path = QPainterPath()
        return path

    def fill(self, color: Color, path: QPainterPath) -> None:
        self.painter.fillPath(path, QBrush(to_qcolor(color)))

    def stroke(self, color: Color, width: float, path: QPainterPath,
               linecap: str = "", linejoin: str = "") -> None:
        pen = QPen(to_qcolor(color))
        pen.setWidthF(width)
        if linecap in _CAPS:
            pen.setCapStyle(_CAPS[linecap])
        if linejoin in _JOINS:
            pen.setJoinStyle(_JOINS[linejoin])
        self.painter.strokePath(path, pen)
