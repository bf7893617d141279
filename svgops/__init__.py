"""
svgops - SVG subset to drawing program compiler

Compiles a small, well-defined subset of SVG into ordered lists of path
primitives (move, line, cubic, close) plus fill and stroke paints that a
host vector graphics runtime can replay.
"""

__version__ = "0.1.0"
