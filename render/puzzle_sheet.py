# render/puzzle_sheet.py
"""
Puzzle sheet renderer.
Draws a nonogram (clues, grid and optionally the player's marks) with
matplotlib, for printing or sharing as an image.

Key features:
- Same board geometry as the interactive canvas (render.board_layout)
- Solved and marked clues drawn in grey, open clues in bold black
- Filled cells as black squares, crossed cells as an X
"""

import numpy as np
import matplotlib.patches as patches
from typing import Optional

from core.types import CellState, ClueStatus
from render.board_layout import BoardLayout


class PuzzleSheetRenderer:
    """
    Render a Puzzle onto a matplotlib axis.
    """

    def __init__(self, cell_size: float = 30.0, margin: float = 40.0, text_weight: str = 'bold'):
        """
        Initialize the renderer.

        Args:
            cell_size: Edge length of a cell in board units
            margin: Blank border around the puzzle in board units
            text_weight: Font weight for open clues ('normal' or 'bold')
        """
        self.layout = BoardLayout(cell_size=cell_size, margin=margin)
        self.tw = text_weight

    def _clue_style(self, status: ClueStatus):
        """(colour, weight) of a clue label."""
        if status == ClueStatus.UNMARKED:
            return 'black', self.tw
        return '#808080', 'normal'

    def _draw_cross(self, ax, x0: float, y0: float, size: float):
        xs = np.array([x0, x0 + size])
        ys = np.array([y0, y0 + size])
        ax.plot(xs, ys, color='black', linewidth=1.5)
        ax.plot(xs, ys[::-1], color='black', linewidth=1.5)

    def render_puzzle(self, puzzle, ax=None, *, show_marks: bool = True) -> Optional[object]:
        """
        Render a complete puzzle.

        Args:
            puzzle: core.puzzle.Puzzle to draw
            ax: Optional matplotlib axis (creates new figure if None)
            show_marks: Draw the player's filled/crossed cells

        Returns:
            Matplotlib axis object
        """
        if ax is None:
            import matplotlib.pyplot as plt
            fig, ax = plt.subplots(figsize=(8, 8))

        layout = self.layout
        layout.set_puzzle(puzzle)
        cell = layout.cell_size
        font_size = max(6, min(20, cell / 2.5))

        # Cells
        if show_marks:
            for y in range(puzzle.height):
                for x in range(puzzle.width):
                    state = puzzle.player_grid[y][x]
                    x0, y0, _, _ = layout.cell_box(x, y)
                    if state == CellState.FILLED:
                        ax.add_patch(patches.Rectangle((x0, y0), cell, cell, facecolor='black', edgecolor='none'))
                    elif state == CellState.CROSSED:
                        self._draw_cross(ax, x0, y0, cell)

        # Clues
        for y, clues in enumerate(puzzle.row_clues):
            for index, value in enumerate(clues):
                cx, cy = layout.row_clue_center(y, index)
                color, weight = self._clue_style(puzzle.row_clue_status[y][index])
                ax.text(cx, cy, str(value), ha='center', va='center',
                        fontsize=font_size, fontweight=weight, color=color)

        for x, clues in enumerate(puzzle.column_clues):
            for index, value in enumerate(clues):
                cx, cy = layout.column_clue_center(x, index)
                color, weight = self._clue_style(puzzle.column_clue_status[x][index])
                ax.text(cx, cy, str(value), ha='center', va='center',
                        fontsize=font_size, fontweight=weight, color=color)

        # Grid lines
        for width, (x0, y0, x1, y1) in layout.grid_lines():
            ax.plot([x0, x1], [y0, y1], color='#595959', linewidth=width / 2.0,
                    solid_capstyle='projecting')

        # Set up the axis
        board_w, board_h = layout.board_size
        ax.set_aspect('equal')
        ax.set_xlim(0, board_w)
        ax.set_ylim(board_h, 0)  # Invert Y to match grid convention
        ax.axis('off')

        return ax


def save_puzzle_image(puzzle, filename: str, *, show_marks: bool = True, dpi: int = 150) -> None:
    """Render a puzzle to an image file (format from the file extension)."""
    from matplotlib.figure import Figure

    fig = Figure(figsize=(8, 8))
    ax = fig.add_subplot(1, 1, 1)
    PuzzleSheetRenderer().render_puzzle(puzzle, ax, show_marks=show_marks)
    fig.savefig(filename, dpi=dpi, bbox_inches="tight")
