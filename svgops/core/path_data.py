"""
Path Data Compiler

Compiles the d attribute of a <path> element into a PathProgram.

Supported commands: M m L l H h V v C c S s Z z. Elliptical arcs and
quadratic curves are not supported.

Relative coordinates of every pair in one command are offset by the pen
as it stood when the command began, not by the previous pair of the same
command. A moveto with several pairs emits one MoveTo followed by
LineTos, and only its first pair becomes the subpath start.
"""

from typing import List

from .errors import UnknownPathCommand, MalformedPathData
from .geometry import Point, ORIGIN
from .numbers import scan_leading_number
from .program import PathProgram

_SEPARATORS = ' ,\t\n\r\f\v'
_COMMANDS = frozenset('MmLlHhVvCcSs')
_CLOSE = frozenset('Zz')

# Coordinates consumed per segment for the pair based commands
_ARITY = {'m': 2, 'l': 2, 'c': 6, 's': 4}


class PathDataCompiler:
    """
    State machine over path data.

    pen is the current point, subpath_start the point recorded by the most
    recent moveto, and last_control the second control point of the
    previous cubic (reset to the pen by any other command). One instance
    compiles one string; create a new compiler per path.
    """

    def __init__(self):
        self.program = PathProgram()
        self.pen: Point = ORIGIN
        self.subpath_start: Point = ORIGIN
        self.last_control: Point = ORIGIN

    def compile(self, data: str) -> PathProgram:
        text = data.strip()
        while True:
            text = text.lstrip(_SEPARATORS)
            if not text:
                break
            fragment = text
            command = text[0]
            text = text[1:]
            if command in _CLOSE:
                self._close()
                continue
            if command not in _COMMANDS:
                raise UnknownPathCommand(command, fragment)
            coords, text = self._read_coordinates(text)
            self._execute(command, coords, fragment)
        return self.program.freeze()

    def _read_coordinates(self, text: str):
        coords: List[float] = []
        while True:
            text = text.lstrip(_SEPARATORS)
            consumed, value, ok = scan_leading_number(text)
            if not ok:
                return coords, text
            coords.append(value)
            text = text[consumed:]

    def _execute(self, command: str, coords: List[float], fragment: str) -> None:
        op = command.lower()
        relative = command.islower()
        if not coords:
            raise MalformedPathData(f"missing coordinates for {command}", fragment)
        if op in ('h', 'v'):
            self._axis_lines(op, coords, relative)
            return

        if len(coords) % 2 != 0:
            raise MalformedPathData("odd number of coordinates", fragment)
        if len(coords) % _ARITY[op] != 0:
            raise MalformedPathData(f"wrong number of coordinates for {command}", fragment)

        offset = self.pen if relative else ORIGIN
        points = [Point(coords[i], coords[i + 1]) + offset
                  for i in range(0, len(coords), 2)]

        if op == 'm':
            self.program.move_to(points[0])
            self.subpath_start = points[0]
            for p in points[1:]:
                self.program.line_to(p)
            self.pen = self.last_control = points[-1]
        elif op == 'l':
            for p in points:
                self.program.line_to(p)
            self.pen = self.last_control = points[-1]
        elif op == 'c':
            for i in range(0, len(points), 3):
                ctrl1, ctrl2, end = points[i], points[i + 1], points[i + 2]
                self.program.cube_to(ctrl1, ctrl2, end)
                self.pen = end
                self.last_control = ctrl2
        elif op == 's':
            for i in range(0, len(points), 2):
                ctrl2, end = points[i], points[i + 1]
                # Reflect the previous second control point through the pen.
                ctrl1 = self.pen * 2 - self.last_control
                self.program.cube_to(ctrl1, ctrl2, end)
                self.pen = end
                self.last_control = ctrl2

    def _axis_lines(self, op: str, values: List[float], relative: bool) -> None:
        origin = self.pen
        p = origin
        for value in values:
            if op == 'h':
                p = Point(value + origin.x if relative else value, origin.y)
            else:
                p = Point(origin.x, value + origin.y if relative else value)
            self.program.line_to(p)
        self.pen = self.last_control = p

    def _close(self) -> None:
        if self.pen != self.subpath_start:
            self.program.line_to(self.subpath_start)
        self.pen = self.last_control = self.subpath_start


def compile_path_data(data: str) -> PathProgram:
    """Compile path data into a frozen PathProgram."""
    return PathDataCompiler().compile(data)
