"""
Puzzle - nonogram state owner for the Nonogram player.

Holds the fixed solution, the clues derived from it, the player's grid and the
display status of every clue. All player input goes through set_cell() and
toggle_clue_mark(); solved clue statuses are refreshed by update_solved_clues().

Coordinates are (x, y) = (column, row). Grids are stored row-major, grid[y][x].
"""
from typing import Dict, List, Sequence, Tuple, Union

from core.clues import generate_column_clues, generate_row_clues
from core.mistakes import find_mistakes
from core.solved_clues import apply_solved_flags, find_solved_clues
from core.types import Axis, CellState, ClueStatus
from utils.lines import get_column, get_row

_SOLUTION_STATES = (CellState.FILLED, CellState.CROSSED)
_BITS = {1: CellState.FILLED, 0: CellState.CROSSED}


class Puzzle:
    """
    A nonogram puzzle and the player's progress on it.

    Responsibilities:
        - Own the solution grid and derive the row/column clues once
        - Track the player's grid (EMPTY / FILLED / CROSSED per cell)
        - Track a ClueStatus per clue (UNMARKED / MARKED / SOLVED)
        - Report solved clues and mistakes on demand

    Attributes:
        width: Number of columns
        height: Number of rows
        solution: Immutable row-major grid of FILLED/CROSSED cells
        player_grid: Row-major grid of the player's marks (mutate via set_cell)
        row_clues: One tuple of run lengths per row
        column_clues: One tuple of run lengths per column
        row_clue_status: One ClueStatus list per row, same shape as row_clues
        column_clue_status: One ClueStatus list per column, same shape as column_clues
    """

    def __init__(self, solution: Sequence[Sequence[CellState]]):
        """
        Create a puzzle from its solution.

        Args:
            solution: Rectangular row-major grid containing only FILLED and
                CROSSED cells (at least one row and one column)

        Raises:
            ValueError: If the grid is empty, ragged or contains other states
        """
        if not solution or not solution[0]:
            raise ValueError("Solution grid must have at least one row and one column")

        width = len(solution[0])
        for y, row in enumerate(solution):
            if len(row) != width:
                raise ValueError(f"Solution row {y} has {len(row)} cells, expected {width}")
            for x, cell in enumerate(row):
                if cell not in _SOLUTION_STATES:
                    raise ValueError(f"Solution cell ({x}, {y}) must be FILLED or CROSSED, got {cell!r}")

        # Grid dimensions
        self.width: int = width
        self.height: int = len(solution)

        # Fixed solution and the clues derived from it
        self.solution: Tuple[Tuple[CellState, ...], ...] = tuple(tuple(row) for row in solution)
        self.row_clues: Tuple[Tuple[int, ...], ...] = generate_row_clues(self.solution)
        self.column_clues: Tuple[Tuple[int, ...], ...] = generate_column_clues(self.solution)

        # Clue display status, same shape as the clues
        self.row_clue_status: List[List[ClueStatus]] = [
            [ClueStatus.UNMARKED] * len(clues) for clues in self.row_clues
        ]
        self.column_clue_status: List[List[ClueStatus]] = [
            [ClueStatus.UNMARKED] * len(clues) for clues in self.column_clues
        ]

        # Filled totals per solution line, used by the over-fill check
        self._row_filled: Tuple[int, ...] = tuple(sum(self.row_clues[y]) for y in range(self.height))
        self._column_filled: Tuple[int, ...] = tuple(sum(self.column_clues[x]) for x in range(self.width))

        # Player marks, all EMPTY to start with
        self.player_grid: List[List[CellState]] = []
        self._initialize_empty_grid()

    def _initialize_empty_grid(self) -> None:
        """Set every player cell to EMPTY."""
        self.player_grid = [[CellState.EMPTY] * self.width for _ in range(self.height)]

    @classmethod
    def from_bits(cls, rows: Sequence[Sequence[int]]) -> 'Puzzle':
        """
        Create a puzzle from a 0/1 table (1 = filled, 0 = crossed).

        Raises:
            ValueError: If a value is not 0 or 1, or the table is malformed
        """
        solution = []
        for y, row in enumerate(rows):
            cells = []
            for x, bit in enumerate(row):
                if type(bit) is not int or bit not in _BITS:
                    raise ValueError(f"Cell ({x}, {y}) must be 0 or 1, got {bit!r}")
                cells.append(_BITS[bit])
            solution.append(cells)
        return cls(solution)

    # =============================================================================
    # CELL ACCESS
    # =============================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """True if (x, y) is inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid")

    def get_cell(self, x: int, y: int) -> CellState:
        """Player mark at (x, y)."""
        self._check_bounds(x, y)
        return self.player_grid[y][x]

    def get_solution_cell(self, x: int, y: int) -> CellState:
        """Solution value at (x, y)."""
        self._check_bounds(x, y)
        return self.solution[y][x]

    def set_cell(self, x: int, y: int, state: CellState) -> bool:
        """
        Set the player's mark at (x, y).

        Args:
            x: Column index
            y: Row index
            state: New CellState

        Returns:
            True if the cell changed

        Raises:
            IndexError: If (x, y) is outside the grid
            TypeError: If state is not a CellState
        """
        self._check_bounds(x, y)
        if not isinstance(state, CellState):
            raise TypeError(f"Cell state must be a CellState, got {state!r}")

        if self.player_grid[y][x] == state:
            return False
        self.player_grid[y][x] = state
        return True

    def clear_progress(self) -> None:
        """Empty the player grid and reset every clue status (marks included)."""
        self._initialize_empty_grid()
        for statuses in self.row_clue_status + self.column_clue_status:
            for index in range(len(statuses)):
                statuses[index] = ClueStatus.UNMARKED

    # =============================================================================
    # CLUES
    # =============================================================================

    def _clue_lines(self, axis: Union[Axis, str]) -> Tuple[Tuple[Tuple[int, ...], ...], List[List[ClueStatus]]]:
        axis = Axis(axis)
        if axis == Axis.ROW:
            return self.row_clues, self.row_clue_status
        return self.column_clues, self.column_clue_status

    def get_clues(self, axis: Union[Axis, str], line: int) -> Tuple[int, ...]:
        """Clue sequence of row/column `line`."""
        clues, _ = self._clue_lines(axis)
        return clues[line]

    def get_clue_status(self, axis: Union[Axis, str], line: int) -> List[ClueStatus]:
        """Copy of the status list of row/column `line`."""
        _, statuses = self._clue_lines(axis)
        return list(statuses[line])

    def toggle_clue_mark(self, axis: Union[Axis, str], line: int, index: int) -> ClueStatus:
        """
        Toggle a player mark on one clue (UNMARKED <-> MARKED).

        SOLVED clues are left unchanged.

        Args:
            axis: Axis.ROW or Axis.COLUMN
            line: Row or column index
            index: Clue index within the line, 0 = first clue

        Returns:
            The clue's status after the toggle

        Raises:
            IndexError: If line or index is out of range
        """
        clues, statuses = self._clue_lines(axis)
        if not 0 <= line < len(clues):
            raise IndexError(f"Line {line} out of range [0, {len(clues)})")
        if not 0 <= index < len(clues[line]):
            raise IndexError(f"Clue {index} out of range [0, {len(clues[line])})")

        current = statuses[line][index]
        if current == ClueStatus.UNMARKED:
            statuses[line][index] = ClueStatus.MARKED
        elif current == ClueStatus.MARKED:
            statuses[line][index] = ClueStatus.UNMARKED
        return statuses[line][index]

    def update_solved_clues(self) -> None:
        """
        Recompute which clues are solved by the current player grid.

        Runs over every row and column. Clues the player has MARKED keep that
        status; all others become SOLVED or UNMARKED. Calling it again without
        touching the grid gives the same statuses.
        """
        for y in range(self.height):
            flags = find_solved_clues(get_row(self.player_grid, y), self.row_clues[y], self._row_filled[y])
            apply_solved_flags(self.row_clue_status[y], flags)

        for x in range(self.width):
            flags = find_solved_clues(get_column(self.player_grid, x), self.column_clues[x], self._column_filled[x])
            apply_solved_flags(self.column_clue_status[x], flags)

    # =============================================================================
    # PROGRESS QUERIES
    # =============================================================================

    def list_mistakes(self) -> List[Tuple[int, int]]:
        """(x, y) of every player mark that contradicts the solution."""
        return find_mistakes(self.solution, self.player_grid)

    def is_complete(self) -> bool:
        """True when the filled cells are exactly the solution's filled cells."""
        for answer_row, player_row in zip(self.solution, self.player_grid):
            for answer, mark in zip(answer_row, player_row):
                if (mark == CellState.FILLED) != (answer == CellState.FILLED):
                    return False
        return True

    def count_cells(self, state: CellState) -> int:
        """Number of player cells currently in `state`."""
        return sum(row.count(state) for row in self.player_grid)

    def get_statistics(self) -> Dict:
        """
        Summary of the player's progress.

        Returns:
            Dict with cell counts, clue counts, mistakes and completion
        """
        all_statuses = [s for line in self.row_clue_status + self.column_clue_status for s in line]
        return {
            "width": self.width,
            "height": self.height,
            "filled_cells": self.count_cells(CellState.FILLED),
            "crossed_cells": self.count_cells(CellState.CROSSED),
            "empty_cells": self.count_cells(CellState.EMPTY),
            "solution_filled": sum(self._row_filled),
            "total_clues": len(all_statuses),
            "solved_clues": all_statuses.count(ClueStatus.SOLVED),
            "marked_clues": all_statuses.count(ClueStatus.MARKED),
            "mistakes": len(self.list_mistakes()),
            "is_complete": self.is_complete(),
        }

    # =============================================================================
    # FILE IMPORT/EXPORT
    # =============================================================================

    @classmethod
    def load_from_file(cls, filename: str) -> 'Puzzle':
        """Load a puzzle from a CSV file (see core.loader for the format)."""
        from core.loader import load_puzzle_csv
        return load_puzzle_csv(filename, puzzle_class=cls)

    def save_csv(self, filename: str) -> None:
        """Save the solution to a CSV puzzle file."""
        from core.loader import save_puzzle_csv
        save_puzzle_csv(self, filename)

    def __repr__(self) -> str:
        return f"Puzzle({self.width}x{self.height})"

