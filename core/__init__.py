"""
Nonogram Player - Core Package
Puzzle model, clue generation, solved-clue and mistake detection, CSV loading.
"""
from .types import Axis, CellState, ClueStatus, PuzzleLoadError
from .puzzle import Puzzle
from .loader import load_puzzle_csv, parse_puzzle_csv, save_puzzle_csv
from .stroke import PaintStroke

__all__ = ['Axis', 'CellState', 'ClueStatus', 'PuzzleLoadError', 'Puzzle',
           'load_puzzle_csv', 'parse_puzzle_csv', 'save_puzzle_csv', 'PaintStroke']
