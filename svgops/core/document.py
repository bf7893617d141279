"""
svgops Document Model

The Document is the result of compiling one SVG file: the declared view
box plus the compiled shapes in document order.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .geometry import AffineTransform, BoundingBox, Point
from .program import PathProgram
from .style import Color


@dataclass(frozen=True)
class ViewBox:
    """The logical coordinate rectangle the document is drawn within."""
    min: Point
    max: Point


@dataclass(frozen=True)
class CompiledShape:
    """One painted shape: its transform, path program and paints."""
    transform: AffineTransform
    program: PathProgram
    fill: Color = field(default_factory=Color)
    stroke: Color = field(default_factory=Color)
    stroke_width: float = 0.0
    linecap: str = ""
    linejoin: str = ""


@dataclass(frozen=True)
class Document:
    """
    A compiled SVG document.

    Groups are already flattened, so shapes is a flat sequence in source
    order. Documents are never mutated after compilation.
    """
    view_box: Optional[ViewBox] = None
    shapes: Tuple[CompiledShape, ...] = ()

    def get_bounds(self) -> Optional[BoundingBox]:
        """
        Bounding box of every transformed program point.

        Control points are included, so the box may be larger than the
        painted area. Returns None if no shape has any points.
        """
        chunks = []
        for shape in self.shapes:
            points = shape.program.points()
            if not points:
                continue
            coords = np.array([(p.x, p.y) for p in points], dtype=float)
            chunks.append(shape.transform.transform_points(coords))
        if not chunks:
            return None
        everything = np.vstack(chunks)
        min_x, min_y = everything.min(axis=0)
        max_x, max_y = everything.max(axis=0)
        return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))
