# guis/__init__.py
"""
Nonogram Player - GUI Package
Tkinter interface components.
"""
from .puzzle_canvas import PuzzleCanvas
from .status_bar import EnhancedStatusBar

__all__ = ['PuzzleCanvas', 'EnhancedStatusBar']
