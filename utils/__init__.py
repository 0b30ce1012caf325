"""
Nonogram Player - Utilities Package
Row/column extraction and coordinate helpers.
"""
from .lines import get_row, get_column, coordinate_to_string

__all__ = ['get_row', 'get_column', 'coordinate_to_string']
