"""
Tests for shape to path program converters.
"""

import math
import unittest

from svgops.core.geometry import Point
from svgops.core.program import MoveTo, LineTo, CubeTo, Close, PathProgram
from svgops.core.shapes import (
    KAPPA, Rect, Circle, Ellipse, Line, Polygon, Polyline, Path,
    rect_program, ellipse_program, poly_program,
    convert_rect, convert_circle, convert_ellipse, convert_line,
    convert_polygon, convert_polyline, convert_path
)


class TestRect(unittest.TestCase):
    """Test rectangle conversion."""

    def test_corners_clockwise_then_close(self):
        program = convert_rect(Rect(Point(1, 2), Point(10, 20)))
        self.assertEqual(program.ops, (
            MoveTo(Point(1, 2)),
            LineTo(Point(11, 2)),
            LineTo(Point(11, 22)),
            LineTo(Point(1, 22)),
            Close(),
        ))
        self.assertEqual(program.pen, Point(1, 2))


class TestEllipse(unittest.TestCase):
    """Test ellipse and circle approximation."""

    def test_kappa(self):
        self.assertAlmostEqual(KAPPA, 0.5522847498, places=9)

    def test_unit_circle(self):
        program = convert_circle(Circle(Point(0, 0), 1))
        ops = program.ops
        self.assertEqual(ops[0], MoveTo(Point(0, -1)))
        cubes = ops[1:]
        self.assertEqual(len(cubes), 4)
        self.assertTrue(all(isinstance(op, CubeTo) for op in cubes))
        end = cubes[-1].end
        self.assertAlmostEqual(end.x, 0.0, delta=1e-5)
        self.assertAlmostEqual(end.y, -1.0, delta=1e-5)

    def test_unit_circle_control_points(self):
        ops = ellipse_program(Point(0, 0), 1, 1).ops
        first = ops[1]
        self.assertAlmostEqual(first.ctrl1.x, KAPPA)
        self.assertAlmostEqual(first.ctrl1.y, -1)
        self.assertAlmostEqual(first.ctrl2.x, 1)
        self.assertAlmostEqual(first.ctrl2.y, -KAPPA)
        self.assertEqual(first.end, Point(1, 0))
        self.assertEqual(ops[2].end, Point(0, 1))
        self.assertEqual(ops[3].end, Point(-1, 0))

    def test_curve_midpoints_on_circle(self):
        """The approximation stays within 0.05% of the radius."""
        program = convert_circle(Circle(Point(5, 5), 10))
        pen = program.ops[0].point
        for op in program.ops[1:]:
            t = 0.5
            x = ((1 - t) ** 3 * pen.x + 3 * (1 - t) ** 2 * t * op.ctrl1.x
                 + 3 * (1 - t) * t ** 2 * op.ctrl2.x + t ** 3 * op.end.x)
            y = ((1 - t) ** 3 * pen.y + 3 * (1 - t) ** 2 * t * op.ctrl1.y
                 + 3 * (1 - t) * t ** 2 * op.ctrl2.y + t ** 3 * op.end.y)
            self.assertAlmostEqual(math.hypot(x - 5, y - 5), 10, delta=10 * 5e-4)
            pen = op.end

    def test_ellipse_extents(self):
        program = convert_ellipse(Ellipse(Point(10, 20), 4, 2))
        ops = program.ops
        self.assertEqual(ops[0].point, Point(10, 18))
        self.assertEqual(ops[1].end, Point(14, 20))
        self.assertEqual(ops[2].end, Point(10, 22))
        self.assertEqual(ops[3].end, Point(6, 20))
        self.assertEqual(ops[4].end, Point(10, 18))
        # Minor axis control points are scaled by ry / rx.
        self.assertAlmostEqual(ops[1].ctrl2.y, 20 - 2 * KAPPA)
        self.assertAlmostEqual(ops[1].ctrl1.x, 10 + 4 * KAPPA)

    def test_zero_radius(self):
        program = convert_ellipse(Ellipse(Point(3, 3), 0, 0))
        self.assertEqual(len(program), 5)
        self.assertTrue(all(p == Point(3, 3) for p in program.points()))


class TestLineAndPoly(unittest.TestCase):
    """Test line, polygon and polyline conversion."""

    def test_line_is_open(self):
        program = convert_line(Line(Point(0, 0), Point(5, 5)))
        self.assertEqual(program.ops, (MoveTo(Point(0, 0)), LineTo(Point(5, 5))))

    def test_polygon_closes_with_line(self):
        points = (Point(0, 0), Point(10, 0), Point(10, 10))
        program = convert_polygon(Polygon(points))
        self.assertEqual(program.ops, (
            MoveTo(Point(0, 0)),
            LineTo(Point(10, 0)),
            LineTo(Point(10, 10)),
            LineTo(Point(0, 0)),
        ))

    def test_polygon_already_closed(self):
        points = (Point(0, 0), Point(10, 0), Point(0, 0))
        program = convert_polygon(Polygon(points))
        self.assertEqual(len(program), 3)
        self.assertNotIn(Close(), program.ops)

    def test_polyline_never_closes(self):
        points = (Point(0, 0), Point(10, 0), Point(10, 10))
        program = convert_polyline(Polyline(points))
        self.assertEqual(len(program), 3)
        self.assertEqual(program.pen, Point(10, 10))

    def test_too_few_points(self):
        self.assertEqual(len(poly_program((), closed=True)), 0)
        self.assertEqual(len(poly_program((Point(1, 1),), closed=True)), 0)
        self.assertEqual(len(poly_program((Point(1, 1),), closed=False)), 0)


class TestPathConversion(unittest.TestCase):
    def test_path_uses_path_data(self):
        program = convert_path(Path("M0,0 L1,1"))
        self.assertEqual(program.ops, (MoveTo(Point(0, 0)), LineTo(Point(1, 1))))


class TestPathProgram(unittest.TestCase):
    """Test PathProgram bookkeeping."""

    def test_pen_tracking(self):
        program = PathProgram()
        self.assertEqual(program.pen, Point(0, 0))
        program.move_to(Point(1, 1)).line_to(Point(2, 2))
        self.assertEqual(program.pen, Point(2, 2))
        program.cube_to(Point(3, 3), Point(4, 4), Point(5, 5))
        self.assertEqual(program.pen, Point(5, 5))
        program.close()
        self.assertEqual(program.pen, Point(1, 1))

    def test_frozen_rejects_appends(self):
        program = rect_program(Point(0, 0), Point(1, 1))
        self.assertTrue(program.frozen)
        with self.assertRaises(RuntimeError):
            program.line_to(Point(5, 5))

    def test_from_ops(self):
        original = rect_program(Point(0, 0), Point(2, 3))
        self.assertEqual(PathProgram.from_ops(original.ops), original)

    def test_points_include_controls(self):
        program = PathProgram().move_to(Point(0, 0)).cube_to(Point(1, 0), Point(2, 0), Point(3, 0))
        self.assertEqual(program.points(), [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)])


if __name__ == '__main__':
    unittest.main()
