"""
svgops I/O Module

Handles SVG import and compiled program export.
"""

from .svg_parser import SVGParser, compile_file, compile_files, compile_string
from .program_io import save_documents, load_documents
from .codegen import generate_module, write_module, image_name

__all__ = [
    'SVGParser', 'compile_file', 'compile_files', 'compile_string',
    'save_documents', 'load_documents',
    'generate_module', 'write_module', 'image_name'
]
