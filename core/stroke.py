"""
Paint strokes: press, drag and release painting of player cells.
"""
from typing import List, Optional, Tuple

from core.types import CellState


class PaintStroke:
    """
    One press-drag-release painting gesture.

    The button decides the action (FILLED or CROSSED). If the cell under the
    initial press already holds that state, the whole stroke erases instead
    (action becomes EMPTY). Every cell the pointer enters while the stroke is
    active is set to the action.
    """

    def __init__(self, puzzle, action: CellState):
        if action not in (CellState.FILLED, CellState.CROSSED):
            raise ValueError(f"Stroke action must be FILLED or CROSSED, got {action!r}")
        self.puzzle = puzzle
        self.button_action = action
        self.action: Optional[CellState] = None
        self.painted: List[Tuple[int, int]] = []

    @property
    def active(self) -> bool:
        return self.action is not None

    def press(self, x: int, y: int) -> bool:
        """
        Start the stroke on cell (x, y).

        Returns:
            True if the stroke started (the press was inside the grid)
        """
        if not self.puzzle.in_bounds(x, y):
            return False

        if self.puzzle.get_cell(x, y) == self.button_action:
            self.action = CellState.EMPTY
        else:
            self.action = self.button_action
        self.paint(x, y)
        return True

    def paint(self, x: int, y: int) -> bool:
        """Apply the stroke action to (x, y). Returns True if the cell changed."""
        if not self.active or not self.puzzle.in_bounds(x, y):
            return False
        if self.puzzle.set_cell(x, y, self.action):
            self.painted.append((x, y))
            return True
        return False

    def release(self) -> List[Tuple[int, int]]:
        """End the stroke and return the cells it changed."""
        self.action = None
        return list(self.painted)
