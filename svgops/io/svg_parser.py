"""
SVG Parser for svgops

Walks the element tree of an SVG document and compiles every painted
shape into a PathProgram. Only a small subset of SVG is accepted:

- <g> groups, flattened (their attributes are ignored)
- <title>, skipped with its whole subtree
- <rect>, <circle>, <ellipse>, <line>, <polygon>, <polyline>, <path>

Any other element aborts the compilation of the whole document.
"""

from collections import deque
from concurrent.futures import ProcessPoolExecutor
import logging
from pathlib import Path as FilePath
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union, get_args
from xml.etree import ElementTree as ET

from ..core.document import CompiledShape, Document, ViewBox
from ..core.errors import (
    CompileError, InvalidRoot, UnsupportedNamespace, UnsupportedElement,
    UnexpectedEndOfInput, MalformedDocument, InvalidViewBox, MalformedPoints
)
from ..core.geometry import Point
from ..core.numbers import parse_number, parse_number_list, scan_number_list
from ..core.program import PathProgram
from ..core.shapes import (
    ShapeNode, Rect, Circle, Ellipse, Line, Polygon, Polyline, Path,
    convert_rect, convert_circle, convert_ellipse, convert_line,
    convert_polygon, convert_polyline, convert_path
)
from ..core.style import read_style

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'


def _split_tag(tag: str):
    """Split an ElementTree tag into (namespace, local name)."""
    if tag.startswith('{'):
        namespace, _, local = tag[1:].partition('}')
        return namespace, local
    return '', tag


def _number(attrs: Mapping[str, str], name: str) -> float:
    value = attrs.get(name)
    if value is None:
        return 0.0
    return parse_number(value, name)


def _points(attrs: Mapping[str, str]):
    text = attrs.get('points', '')
    values = scan_number_list(text)
    if len(values) % 2 != 0:
        raise MalformedPoints(text)
    return tuple(Point(values[i], values[i + 1]) for i in range(0, len(values), 2))


def _read_rect(attrs):
    return Rect(Point(_number(attrs, 'x'), _number(attrs, 'y')),
                Point(_number(attrs, 'width'), _number(attrs, 'height')),
                read_style(attrs))


def _read_circle(attrs):
    return Circle(Point(_number(attrs, 'cx'), _number(attrs, 'cy')),
                  _number(attrs, 'r'), read_style(attrs))


def _read_ellipse(attrs):
    return Ellipse(Point(_number(attrs, 'cx'), _number(attrs, 'cy')),
                   _number(attrs, 'rx'), _number(attrs, 'ry'), read_style(attrs))


def _read_line(attrs):
    return Line(Point(_number(attrs, 'x1'), _number(attrs, 'y1')),
                Point(_number(attrs, 'x2'), _number(attrs, 'y2')),
                read_style(attrs))


def _read_polygon(attrs):
    return Polygon(_points(attrs), read_style(attrs))


def _read_polyline(attrs):
    return Polyline(_points(attrs), read_style(attrs))


def _read_path(attrs):
    return Path(attrs.get('d', ''), read_style(attrs))


# Element name -> shape node reader
_READERS: Dict[str, Callable[[Mapping[str, str]], ShapeNode]] = {
    'rect': _read_rect,
    'circle': _read_circle,
    'ellipse': _read_ellipse,
    'line': _read_line,
    'polygon': _read_polygon,
    'polyline': _read_polyline,
    'path': _read_path,
}

# Shape node type -> path converter
_CONVERTERS: Dict[type, Callable[..., PathProgram]] = {
    Rect: convert_rect,
    Circle: convert_circle,
    Ellipse: convert_ellipse,
    Line: convert_line,
    Polygon: convert_polygon,
    Polyline: convert_polyline,
    Path: convert_path,
}

_unconverted = set(get_args(ShapeNode)) - set(_CONVERTERS)
if _unconverted:
    raise TypeError(f"shape nodes without a converter: {sorted(t.__name__ for t in _unconverted)}")


def compile_shape(node: ShapeNode) -> Optional[CompiledShape]:
    """
    Compile one shape node.

    Returns None for shapes with neither fill nor stroke; those draw
    nothing and are dropped without compiling their geometry.
    """
    style = node.style
    if not style.is_painted:
        return None
    program = _CONVERTERS[type(node)](node)
    return CompiledShape(
        transform=style.transform,
        program=program,
        fill=style.fill,
        stroke=style.stroke,
        stroke_width=style.stroke_width,
        linecap=style.linecap,
        linejoin=style.linejoin
    )


class _ElementStream:
    """
    Incremental element events from a line iterator.

    Lines are fed one at a time into an XMLPullParser; line is the number
    of the line most recently fed, which is where the element currently
    being handled ends its start tag.
    """

    def __init__(self, lines: Iterable[Union[str, bytes]]):
        self._lines = iter(lines)
        self._parser = ET.XMLPullParser(events=('start', 'end'))
        self._pending = deque()
        self._closed = False
        self.line = 0

    def next(self):
        """Return the next (event, element) pair."""
        while not self._pending:
            if self._closed:
                raise UnexpectedEndOfInput("unexpected end of file")
            chunk = next(self._lines, None)
            try:
                if chunk is None:
                    self._closed = True
                    self._parser.close()
                else:
                    self.line += 1
                    self._parser.feed(chunk)
                # Syntax errors found by feed() surface here, queued among the events.
                self._pending.extend(self._parser.read_events())
            except ET.ParseError as e:
                line, column = e.position
                if chunk is None:
                    error = UnexpectedEndOfInput("unexpected end of file")
                else:
                    error = MalformedDocument(str(e).split(':')[0])
                raise error.locate(None, line, column) from e
        return self._pending.popleft()


class SVGParser:
    """Parse SVG files into compiled Documents."""

    def __init__(self):
        self._shapes: List[CompiledShape] = []

    def parse_file(self, filepath) -> Document:
        """Parse an SVG file and return a Document."""
        with open(filepath, 'rb') as f:
            return self.parse_lines(f, filename=str(filepath))

    def parse_string(self, svg_string: str, filename: Optional[str] = None) -> Document:
        """Parse an SVG string and return a Document."""
        return self.parse_lines(svg_string.splitlines(keepends=True), filename)

    def parse_lines(self, lines: Iterable[Union[str, bytes]],
                    filename: Optional[str] = None) -> Document:
        """Parse a document supplied as an iterable of lines."""
        self._shapes = []
        stream = _ElementStream(lines)
        try:
            document = self._parse_document(stream)
        except CompileError as err:
            err.locate(filename, stream.line)
            raise
        logger.debug(f"Parsed {filename or '<string>'}: viewBox={document.view_box}, "
                     f"shapes={len(document.shapes)}")
        return document

    def _parse_document(self, stream: _ElementStream) -> Document:
        _, root = stream.next()
        namespace, name = _split_tag(root.tag)
        if name != 'svg':
            raise InvalidRoot(name)
        if namespace != SVG_NS:
            raise UnsupportedNamespace(namespace)

        view_box = None
        text = root.get('viewBox')
        if text is not None:
            values = parse_number_list(text, 'viewBox')
            if len(values) != 4:
                raise InvalidViewBox(text)
            view_box = ViewBox(Point(values[0], values[1]), Point(values[2], values[3]))

        self._parse_children(stream)
        return Document(view_box=view_box, shapes=tuple(self._shapes))

    def _parse_children(self, stream: _ElementStream) -> None:
        """Compile the children of the open element up to its end tag."""
        while True:
            event, element = stream.next()
            if event == 'end':
                return
            _, name = _split_tag(element.tag)
            if name == 'g':
                # Flatten groups.
                self._parse_children(stream)
                continue
            if name == 'title':
                self._skip(stream)
                continue
            reader = _READERS.get(name)
            if reader is None:
                raise UnsupportedElement(name)
            node = reader(element.attrib)
            self._skip(stream)
            compiled = compile_shape(node)
            if compiled is not None:
                self._shapes.append(compiled)

    def _skip(self, stream: _ElementStream) -> None:
        """Consume the rest of the open element, children included."""
        depth = 1
        while depth:
            event, _ = stream.next()
            depth += 1 if event == 'start' else -1


def compile_file(filepath) -> Document:
    """Compile a single SVG file."""
    return SVGParser().parse_file(filepath)


def compile_string(svg_string: str, filename: Optional[str] = None) -> Document:
    """Compile SVG source text."""
    return SVGParser().parse_string(svg_string, filename)


def compile_files(filepaths: Sequence[Union[str, FilePath]], jobs: int = 1) -> List[Document]:
    """
    Compile several files, results in the order given.

    Files are independent, so with jobs > 1 they are compiled in worker
    processes. The first failure is raised.
    """
    filepaths = list(filepaths)
    if jobs <= 1 or len(filepaths) <= 1:
        return [compile_file(path) for path in filepaths]
    logger.debug(f"Compiling {len(filepaths)} files with {jobs} workers")
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(compile_file, filepaths))
