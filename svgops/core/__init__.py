"""
svgops Core Module

Contains the core data structures and compilers:
- Geometry: Point, AffineTransform
- Style: Color, StyleAttributes
- Programs: DrawOp variants and PathProgram
- Shapes: shape nodes and their path converters
- Document: the compiled output of one file
"""

# Import order matters - geometry first, then programs, then shapes
from .errors import (
    CompileError, StructuralError, SVGAttributeError, PathSyntaxError
)
from .geometry import Point, AffineTransform, BoundingBox, parse_transform
from .style import Color, StyleAttributes, parse_color
from .program import MoveTo, LineTo, CubeTo, Close, PathProgram
from .path_data import compile_path_data
from .shapes import (
    Rect, Circle, Ellipse, Line, Polygon, Polyline, Path, ShapeNode
)
from .document import ViewBox, CompiledShape, Document

__all__ = [
    'CompileError', 'StructuralError', 'SVGAttributeError', 'PathSyntaxError',
    'Point', 'AffineTransform', 'BoundingBox', 'parse_transform',
    'Color', 'StyleAttributes', 'parse_color',
    'MoveTo', 'LineTo', 'CubeTo', 'Close', 'PathProgram',
    'compile_path_data',
    'Rect', 'Circle', 'Ellipse', 'Line', 'Polygon', 'Polyline', 'Path', 'ShapeNode',
    'ViewBox', 'CompiledShape', 'Document'
]
