"""
Clue generation: run-length encoding of the solution grid.
"""
from typing import Sequence, Tuple, Union

from core.types import Axis, CellState
from utils.lines import get_column

Grid = Sequence[Sequence[CellState]]


def line_clues(cells: Sequence[CellState]) -> Tuple[int, ...]:
    """
    Run lengths of FILLED cells along one line, in index order.

    Any non-FILLED cell ends a run. A line without filled cells yields (0,).
    """
    clues = []
    count = 0
    for cell in cells:
        if cell == CellState.FILLED:
            count += 1
        elif count > 0:
            clues.append(count)
            count = 0

    # Keep the trailing run, or a single zero for a blank line
    if count > 0 or not clues:
        clues.append(count)

    return tuple(clues)


def generate_row_clues(solution: Grid) -> Tuple[Tuple[int, ...], ...]:
    """Clues for every row, left to right."""
    return tuple(line_clues(row) for row in solution)


def generate_column_clues(solution: Grid) -> Tuple[Tuple[int, ...], ...]:
    """Clues for every column, top to bottom."""
    width = len(solution[0]) if solution else 0
    return tuple(line_clues(get_column(solution, x)) for x in range(width))


def generate_clues(solution: Grid, axis: Union[Axis, str]) -> Tuple[Tuple[int, ...], ...]:
    """
    Generate the clues along one axis.

    Args:
        solution: Row-major grid of FILLED/CROSSED cells
        axis: Axis.ROW / Axis.COLUMN (or their string values)

    Returns:
        One tuple of run lengths per line
    """
    axis = Axis(axis)
    if axis == Axis.ROW:
        return generate_row_clues(solution)
    return generate_column_clues(solution)
