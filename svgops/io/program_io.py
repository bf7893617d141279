"""
Program File I/O for svgops

Saves and loads compiled documents as JSON.
"""

import json
from typing import Any, Dict

from ..core.document import CompiledShape, Document, ViewBox
from ..core.geometry import AffineTransform, Point
from ..core.program import MoveTo, LineTo, CubeTo, Close, DrawOp, PathProgram
from ..core.style import Color

FORMAT_VERSION = '1.0'


def _point(p: Point) -> list:
    return [p.x, p.y]


def op_to_dict(op: DrawOp) -> Dict[str, Any]:
    """Convert a draw op to a dictionary."""
    if isinstance(op, MoveTo):
        return {'op': 'move_to', 'points': [_point(op.point)]}
    elif isinstance(op, LineTo):
        return {'op': 'line_to', 'points': [_point(op.point)]}
    elif isinstance(op, CubeTo):
        return {'op': 'cube_to', 'points': [_point(op.ctrl1), _point(op.ctrl2), _point(op.end)]}
    elif isinstance(op, Close):
        return {'op': 'close', 'points': []}
    raise TypeError(f"not a draw op: {op!r}")


def dict_to_op(data: Dict[str, Any]) -> DrawOp:
    """Convert a dictionary back to a draw op."""
    points = [Point(x, y) for x, y in data.get('points', [])]
    kind = data['op']
    if kind == 'move_to':
        return MoveTo(points[0])
    elif kind == 'line_to':
        return LineTo(points[0])
    elif kind == 'cube_to':
        return CubeTo(points[0], points[1], points[2])
    elif kind == 'close':
        return Close()
    raise ValueError(f"unknown draw op: {kind!r}")


def shape_to_dict(shape: CompiledShape) -> Dict[str, Any]:
    return {
        'transform': list(shape.transform.elements()),
        'fill': shape.fill.to_hex(),
        'stroke': shape.stroke.to_hex(),
        'stroke_width': shape.stroke_width,
        'linecap': shape.linecap,
        'linejoin': shape.linejoin,
        'ops': [op_to_dict(op) for op in shape.program],
    }


def dict_to_shape(data: Dict[str, Any]) -> CompiledShape:
    return CompiledShape(
        transform=AffineTransform(*data.get('transform', [1.0, 0.0, 0.0, 1.0, 0.0, 0.0])),
        program=PathProgram.from_ops(dict_to_op(op) for op in data.get('ops', [])),
        fill=Color.from_hex(data.get('fill')),
        stroke=Color.from_hex(data.get('stroke')),
        stroke_width=data.get('stroke_width', 0.0),
        linecap=data.get('linecap', ''),
        linejoin=data.get('linejoin', '')
    )


def document_to_dict(document: Document) -> Dict[str, Any]:
    """Convert a compiled document to a JSON-ready dictionary."""
    view_box = None
    if document.view_box is not None:
        view_box = {'min': _point(document.view_box.min), 'max': _point(document.view_box.max)}
    return {
        'view_box': view_box,
        'shapes': [shape_to_dict(shape) for shape in document.shapes],
    }


def dict_to_document(data: Dict[str, Any]) -> Document:
    view_box = None
    if data.get('view_box') is not None:
        view_box = ViewBox(Point(*data['view_box']['min']), Point(*data['view_box']['max']))
    return Document(
        view_box=view_box,
        shapes=tuple(dict_to_shape(shape) for shape in data.get('shapes', []))
    )


def documents_to_json(documents: Dict[str, Document]) -> str:
    """Serialize named documents; the output depends only on the input."""
    data = {
        'version': FORMAT_VERSION,
        'images': {name: document_to_dict(doc) for name, doc in documents.items()},
    }
    return json.dumps(data, indent=2, ensure_ascii=False) + '\n'


def save_documents(documents: Dict[str, Document], filepath: str) -> None:
    """
    Save named documents to a JSON file.

    Args:
        documents: Mapping of image name to compiled document
        filepath: Path to save the file
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(documents_to_json(documents))


def load_documents(filepath: str) -> Dict[str, Document]:
    """Load named documents saved by save_documents()."""
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)
    version = data.get('version')
    if version != FORMAT_VERSION:
        raise ValueError(f"unsupported program file version: {version!r}")
    return {name: dict_to_document(doc) for name, doc in data.get('images', {}).items()}
