"""
svgops Render Module

Host drawing API and replay of compiled documents. The PyQt6 binding
lives in qt_canvas and is imported on demand.
"""

from .canvas import Canvas, ScopeStack, RecordingCanvas, Image, draw_program, replay

__all__ = ['Canvas', 'ScopeStack', 'RecordingCanvas', 'Image', 'draw_program', 'replay']
