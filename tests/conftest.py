import os
import sys
import pytest

# Add project root to sys.path (so tests can import core.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from core.puzzle import Puzzle
from core.types import CellState


@pytest.fixture
def load_puzzle():
    """Returns a function that loads a Puzzle from a CSV file under the project root."""
    def _load(path):
        return Puzzle.load_from_file(os.path.join(PROJECT_ROOT, path))
    return _load


@pytest.fixture
def make_puzzle():
    """Returns a function that builds a Puzzle from rows of 0/1 values."""
    return Puzzle.from_bits


@pytest.fixture
def copy_solution():
    """Returns a function that sets a puzzle's player grid to its exact solution."""
    def _copy(puzzle):
        for y in range(puzzle.height):
            for x in range(puzzle.width):
                puzzle.set_cell(x, y, puzzle.get_solution_cell(x, y))
        return puzzle
    return _copy


@pytest.fixture
def mark_line():
    """Returns a function that writes a row of player marks from a string.

    '#' = FILLED, 'x' = CROSSED, '.' = EMPTY.
    """
    symbols = {"#": CellState.FILLED, "x": CellState.CROSSED, ".": CellState.EMPTY}

    def _mark(puzzle, y, pattern):
        for x, ch in enumerate(pattern):
            puzzle.set_cell(x, y, symbols[ch])
        return puzzle
    return _mark
