"""
Python Source Generator for svgops

Writes compiled documents out as a Python module. Each image becomes a
draw function issuing Canvas calls plus a module level Image object:

    Image_star = Image(view_box=(Point(0, 0), Point(24, 24)), draw=_draw_star)

The generated draw function makes exactly the calls replay() would make
for the same document.
"""

import keyword
import logging
import re
from pathlib import Path as FilePath
from typing import Dict, List

from ..core.document import Document
from ..core.geometry import AffineTransform, Point
from ..core.style import Color
from ..render.canvas import Canvas, replay

logger = logging.getLogger(__name__)

HEADER = "# Code generated by svgops; DO NOT EDIT.\n"

IMPORTS = (
    "from svgops.core.geometry import AffineTransform, Point\n"
    "from svgops.core.style import Color\n"
    "from svgops.render.canvas import Image\n"
)

_NOT_IDENTIFIER = re.compile(r'\W')


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float, without a trailing .0"""
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text


def format_point(point: Point) -> str:
    return f"Point({format_number(point.x)}, {format_number(point.y)})"


def image_name(filepath, prefix: str = "Image_") -> str:
    """Python identifier for the image compiled from filepath."""
    stem = _NOT_IDENTIFIER.sub('_', FilePath(filepath).stem)
    name = prefix + stem
    if not name.isidentifier() or keyword.iskeyword(name):
        name = '_' + name
    return name


class SourceCanvas(Canvas):
    """Canvas that writes each call as a line of Python source."""

    def __init__(self, canvas_name: str = 'c', indent: int = 1):
        self.canvas_name = canvas_name
        self.lines: List[str] = []
        self._indent = indent

    def _emit(self, text: str) -> None:
        self.lines.append('    ' * self._indent + text)

    def _call(self, method: str, *args: str) -> None:
        self._emit(f"{self.canvas_name}.{method}({', '.join(args)})")

    def push_transform(self, transform: AffineTransform) -> None:
        coefficients = ', '.join(format_number(v) for v in transform.elements())
        self._call('push_transform', f"AffineTransform({coefficients})")
        self._emit("try:")
        self._indent += 1

    def pop_transform(self) -> None:
        self._indent -= 1
        self._emit("finally:")
        self._indent += 1
        self._call('pop_transform')
        self._indent -= 1

    def begin_path(self) -> None:
        self._call('begin_path')

    def move_to(self, point: Point) -> None:
        self._call('move_to', format_point(point))

    def line_to(self, point: Point) -> None:
        self._call('line_to', format_point(point))

    def cubic_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        self._call('cubic_to', format_point(ctrl1), format_point(ctrl2), format_point(end))

    def close_path(self) -> None:
        self._call('close_path')

    def end_path(self) -> str:
        self._emit(f"p = {self.canvas_name}.end_path()")
        return 'p'

    def fill(self, color: Color, path: str) -> None:
        self._call('fill', f"Color.from_argb({color.value:#010x})", path)

    def stroke(self, color: Color, width: float, path: str,
               linecap: str = "", linejoin: str = "") -> None:
        self._call('stroke', f"Color.from_argb({color.value:#010x})",
                   format_number(width), path, repr(linecap), repr(linejoin))


def generate_image(name: str, document: Document) -> str:
    """Source for one image: its draw function and Image object."""
    canvas = SourceCanvas()
    replay(document, canvas)
    body = canvas.lines or ['    pass']

    if document.view_box is None:
        view_box = 'None'
    else:
        view_box = f"({format_point(document.view_box.min)}, {format_point(document.view_box.max)})"

    draw = f"_draw_{name}"
    return (f"def {draw}(c):\n" + '\n'.join(body) + "\n\n\n"
            f"{name} = Image(view_box={view_box}, draw={draw})\n")


def generate_module(documents: Dict[str, Document]) -> str:
    """
    Generate a Python module defining one Image per named document.

    Images appear in the mapping's order.
    """
    parts = [HEADER, "\n", IMPORTS]
    for name, document in documents.items():
        if not name.isidentifier():
            raise ValueError(f"image name is not a Python identifier: {name!r}")
        parts.append("\n\n")
        parts.append(generate_image(name, document))
    logger.debug(f"Generated module with {len(documents)} images")
    return ''.join(parts)


def write_module(documents: Dict[str, Document], filepath) -> None:
    """Generate the module and write it to filepath."""
    source = generate_module(documents)
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(source)
