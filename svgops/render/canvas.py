"""
Host Drawing API

A Canvas is the minimal interface a host vector graphics runtime must
offer to draw compiled documents: path building, fill, stroke and a
push/pop transform scope. replay() drives any Canvas from a Document.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from ..core.document import Document
from ..core.geometry import AffineTransform, IDENTITY, Point
from ..core.program import MoveTo, LineTo, CubeTo, Close, PathProgram
from ..core.style import Color


class Canvas(ABC):
    """
    Abstract drawing target.

    Every method maps to one host call. end_path() returns whatever handle
    the host uses for a finished path; fill() and stroke() receive it back.
    """

    @abstractmethod
    def push_transform(self, transform: AffineTransform) -> None:
        """Concatenate transform onto the current one until the next pop."""
        pass

    @abstractmethod
    def pop_transform(self) -> None:
        pass

    @abstractmethod
    def begin_path(self) -> None:
        pass

    @abstractmethod
    def move_to(self, point: Point) -> None:
        pass

    @abstractmethod
    def line_to(self, point: Point) -> None:
        pass

    @abstractmethod
    def cubic_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        pass

    @abstractmethod
    def close_path(self) -> None:
        pass

    @abstractmethod
    def end_path(self) -> Any:
        pass

    @abstractmethod
    def fill(self, color: Color, path: Any) -> None:
        pass

    @abstractmethod
    def stroke(self, color: Color, width: float, path: Any,
               linecap: str = "", linejoin: str = "") -> None:
        pass


class ScopeStack:
    """
    Transform scopes opened on a canvas.

    Scopes are closed in strict LIFO order; unwind() closes every scope
    still open and is safe to call from a finally block.
    """

    def __init__(self, canvas: Canvas):
        self.canvas = canvas
        self._scopes: List[AffineTransform] = []

    def push(self, transform: AffineTransform) -> None:
        self.canvas.push_transform(transform)
        self._scopes.append(transform)

    def pop(self) -> None:
        self._scopes.pop()
        self.canvas.pop_transform()

    def unwind(self) -> None:
        while self._scopes:
            self.pop()

    def __len__(self) -> int:
        return len(self._scopes)


def draw_program(canvas: Canvas, program: PathProgram) -> Any:
    """Issue the path building calls for program and return the path."""
    canvas.begin_path()
    for op in program:
        if isinstance(op, MoveTo):
            canvas.move_to(op.point)
        elif isinstance(op, LineTo):
            canvas.line_to(op.point)
        elif isinstance(op, CubeTo):
            canvas.cubic_to(op.ctrl1, op.ctrl2, op.end)
        elif isinstance(op, Close):
            canvas.close_path()
    return canvas.end_path()


def replay(document: Document, canvas: Canvas) -> None:
    """
    Draw every compiled shape of document onto canvas.

    Each shape runs inside its own transform scope when it has a
    non-identity transform. Fill is painted before stroke.
    """
    scopes = ScopeStack(canvas)
    try:
        for shape in document.shapes:
            if not shape.transform.is_identity:
                scopes.push(shape.transform)
            path = draw_program(canvas, shape.program)
            if shape.fill.set:
                canvas.fill(shape.fill, path)
            if shape.stroke.set:
                canvas.stroke(shape.stroke, shape.stroke_width, path,
                              shape.linecap, shape.linejoin)
            scopes.unwind()
    finally:
        scopes.unwind()


@dataclass(frozen=True)
class Image:
    """A drawable image: its view box and a function drawing it on a canvas."""
    view_box: Optional[Tuple[Point, Point]]
    draw: Callable[[Canvas], None]


class RecordingCanvas(Canvas):
    """
    Canvas that records every call as a tuple.

    Useful for tests and for diffing two compilations: identical input
    always records an identical instruction list.
    """

    def __init__(self):
        self.instructions: List[tuple] = []
        self._transforms: List[AffineTransform] = [IDENTITY]
        self._paths = 0

    @property
    def current_transform(self) -> AffineTransform:
        return self._transforms[-1]

    @property
    def depth(self) -> int:
        """Number of open transform scopes."""
        return len(self._transforms) - 1

    def push_transform(self, transform: AffineTransform) -> None:
        self._transforms.append(self.current_transform.multiply(transform))
        self.instructions.append(('push_transform', transform.elements()))

    def pop_transform(self) -> None:
        if len(self._transforms) == 1:
            raise RuntimeError("pop_transform without matching push_transform")
        self._transforms.pop()
        self.instructions.append(('pop_transform',))

    def begin_path(self) -> None:
        self.instructions.append(('begin_path',))

    def move_to(self, point: Point) -> None:
        self.instructions.append(('move_to', (point.x, point.y)))

    def line_to(self, point: Point) -> None:
        self.instructions.append(('line_to', (point.x, point.y)))

    def cubic_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        self.instructions.append(('cubic_to', (ctrl1.x, ctrl1.y),
                                  (ctrl2.x, ctrl2.y), (end.x, end.y)))

    def close_path(self) -> None:
        self.instructions.append(('close_path',))

    def end_path(self) -> int:
        self._paths += 1
        self.instructions.append(('end_path', self._paths))
        return self._paths

    def fill(self, color: Color, path: Any) -> None:
        self.instructions.append(('fill', color.value, path))

    def stroke(self, color: Color, width: float, path: Any,
               linecap: str = "", linejoin: str = "") -> None:
        self.instructions.append(('stroke', color.value, width, path, linecap, linejoin))
