"""
svgops Path Programs

A PathProgram is the ordered list of drawing primitives for one shape.
It is built by appending ops, then frozen; a frozen program rejects
further appends.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from .geometry import Point, ORIGIN


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CubeTo:
    ctrl1: Point
    ctrl2: Point
    end: Point


@dataclass(frozen=True)
class Close:
    pass


DrawOp = Union[MoveTo, LineTo, CubeTo, Close]


class PathProgram:
    """
    Ordered sequence of DrawOps.

    The program tracks its pen (the end point of the last emitted op) and
    the start of the current subpath, which a Close returns the pen to.
    """

    def __init__(self):
        self._ops: List[DrawOp] = []
        self._pen: Point = ORIGIN
        self._start: Point = ORIGIN
        self._frozen = False

    @classmethod
    def from_ops(cls, ops) -> 'PathProgram':
        """Rebuild a frozen program from a sequence of ops."""
        program = cls()
        for op in ops:
            if isinstance(op, MoveTo):
                program.move_to(op.point)
            elif isinstance(op, LineTo):
                program.line_to(op.point)
            elif isinstance(op, CubeTo):
                program.cube_to(op.ctrl1, op.ctrl2, op.end)
            elif isinstance(op, Close):
                program.close()
            else:
                raise TypeError(f"not a draw op: {op!r}")
        return program.freeze()

    def _append(self, op: DrawOp) -> 'PathProgram':
        if self._frozen:
            raise RuntimeError("cannot append to a frozen path program")
        self._ops.append(op)
        return self

    def move_to(self, point: Point) -> 'PathProgram':
        """Start a new subpath at point."""
        self._append(MoveTo(point))
        self._pen = self._start = point
        return self

    def line_to(self, point: Point) -> 'PathProgram':
        self._append(LineTo(point))
        self._pen = point
        return self

    def cube_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> 'PathProgram':
        self._append(CubeTo(ctrl1, ctrl2, end))
        self._pen = end
        return self

    def close(self) -> 'PathProgram':
        """Close the current subpath."""
        self._append(Close())
        self._pen = self._start
        return self

    def freeze(self) -> 'PathProgram':
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def pen(self) -> Point:
        return self._pen

    @property
    def subpath_start(self) -> Point:
        return self._start

    @property
    def ops(self) -> Tuple[DrawOp, ...]:
        return tuple(self._ops)

    def points(self) -> List[Point]:
        """Every point referenced by the program, control points included."""
        result = []
        for op in self._ops:
            if isinstance(op, (MoveTo, LineTo)):
                result.append(op.point)
            elif isinstance(op, CubeTo):
                result.extend((op.ctrl1, op.ctrl2, op.end))
        return result

    def __iter__(self) -> Iterator[DrawOp]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PathProgram):
            return NotImplemented
        return self._ops == other._ops

    def __repr__(self) -> str:
        return f"PathProgram({self._ops!r})"
