"""
Board geometry for drawing a nonogram and mapping pointer positions back to it.

The board is laid out in "board units" (one cell = cell_size units):
the clue bands sit above and to the left of the grid, with a margin around
everything. fit() scales and centres that layout inside an allocated area;
hit_test() undoes the transform to find what is under the pointer.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

CELL_SIZE = 30
PUZZLE_MARGIN = 40
MAJOR_GRID_EVERY = 5

BORDER_LINE_WIDTH = 4
MAJOR_GRID_LINE_WIDTH = 3
MINOR_GRID_LINE_WIDTH = 1

CELL = "cell"
ROW_CLUE = "row_clue"
COLUMN_CLUE = "column_clue"


@dataclass(frozen=True)
class BoardTarget:
    """What lies under a pointer position.

    kind is CELL, ROW_CLUE or COLUMN_CLUE. For cells (x, y) is the cell; for a
    row clue y is the row and clue_index the clue; for a column clue x is the
    column and clue_index the clue.
    """
    kind: str
    x: Optional[int] = None
    y: Optional[int] = None
    clue_index: Optional[int] = None


class BoardLayout:
    """Computes positions of cells, clues and grid lines for one puzzle."""

    def __init__(self, cell_size: float = CELL_SIZE, margin: float = PUZZLE_MARGIN):
        """
        Args:
            cell_size: Edge length of a cell in board units
            margin: Blank border around the board in board units
        """
        self.cell_size = cell_size
        self.margin = margin

        self.puzzle = None
        self.clue_columns = 0   # width of the row clue band, in cells
        self.clue_rows = 0      # height of the column clue band, in cells

        self.scale = 1.0
        self.translation: Tuple[float, float] = (0.0, 0.0)

    # =============================================================================
    # LAYOUT
    # =============================================================================

    def set_puzzle(self, puzzle) -> None:
        """Measure the clue bands of a puzzle (None clears the layout)."""
        self.puzzle = puzzle
        if puzzle is None:
            self.clue_columns = self.clue_rows = 0
            return
        self.clue_columns = max(len(clues) for clues in puzzle.row_clues)
        self.clue_rows = max(len(clues) for clues in puzzle.column_clues)

    @property
    def clues_width(self) -> float:
        return self.clue_columns * self.cell_size

    @property
    def clues_height(self) -> float:
        return self.clue_rows * self.cell_size

    @property
    def grid_origin(self) -> Tuple[float, float]:
        """Top-left corner of the cell grid in board units."""
        return self.margin + self.clues_width, self.margin + self.clues_height

    @property
    def board_size(self) -> Tuple[float, float]:
        """Total board size (grid, clues and margins) in board units."""
        if self.puzzle is None:
            return 2 * self.margin, 2 * self.margin
        width = self.puzzle.width * self.cell_size + self.margin * 2 + self.clues_width
        height = self.puzzle.height * self.cell_size + self.margin * 2 + self.clues_height
        return width, height

    def fit(self, alloc_width: float, alloc_height: float) -> None:
        """
        Scale the board to fit an allocated area, centred along the slack axis.

        Args:
            alloc_width: Available width in pixels
            alloc_height: Available height in pixels
        """
        draw_width, draw_height = self.board_size
        sx = alloc_width / draw_width
        sy = alloc_height / draw_height

        if sx < sy:
            self.scale = sx
            self.translation = (0.0, (alloc_height / sx - draw_height) / 2.0)
        else:
            self.scale = sy
            self.translation = ((alloc_width / sy - draw_width) / 2.0, 0.0)

    # =============================================================================
    # BOARD UNITS -> PIXELS
    # =============================================================================

    def to_pixel(self, ux: float, uy: float) -> Tuple[float, float]:
        """Convert board units to pixel coordinates."""
        tx, ty = self.translation
        return (ux + tx) * self.scale, (uy + ty) * self.scale

    def cell_box(self, x: int, y: int) -> Tuple[float, float, float, float]:
        """Board-unit box (x0, y0, x1, y1) of cell (x, y)."""
        ox, oy = self.grid_origin
        x0 = ox + x * self.cell_size
        y0 = oy + y * self.cell_size
        return x0, y0, x0 + self.cell_size, y0 + self.cell_size

    def row_clue_center(self, y: int, index: int) -> Tuple[float, float]:
        """Board-unit centre of clue `index` of row y (clues end at the grid edge)."""
        count = len(self.puzzle.row_clues[y])
        ox, oy = self.grid_origin
        return (ox - (count - index) * self.cell_size + self.cell_size / 2.0,
                oy + y * self.cell_size + self.cell_size / 2.0)

    def column_clue_center(self, x: int, index: int) -> Tuple[float, float]:
        """Board-unit centre of clue `index` of column x (clues end at the grid edge)."""
        count = len(self.puzzle.column_clues[x])
        ox, oy = self.grid_origin
        return (ox + x * self.cell_size + self.cell_size / 2.0,
                oy - (count - index) * self.cell_size + self.cell_size / 2.0)

    def grid_lines(self) -> List[Tuple[float, Tuple[float, float, float, float]]]:
        """
        Grid lines in drawing order, as (line_width, (x0, y0, x1, y1)) in board units.

        Interior lines span the clue bands too; every MAJOR_GRID_EVERY-th line is
        drawn thicker, and the outer border thickest.
        """
        if self.puzzle is None:
            return []

        ox, oy = self.grid_origin
        right = ox + self.puzzle.width * self.cell_size
        bottom = oy + self.puzzle.height * self.cell_size
        lines = []

        lines.append((BORDER_LINE_WIDTH, (ox, self.margin, ox, bottom)))
        lines.append((BORDER_LINE_WIDTH, (right, self.margin, right, bottom)))
        lines.append((BORDER_LINE_WIDTH, (self.margin, oy, right, oy)))
        lines.append((BORDER_LINE_WIDTH, (self.margin, bottom, right, bottom)))

        for x in range(1, self.puzzle.width):
            width = MAJOR_GRID_LINE_WIDTH if x % MAJOR_GRID_EVERY == 0 else MINOR_GRID_LINE_WIDTH
            px = ox + x * self.cell_size
            lines.append((width, (px, self.margin, px, bottom)))
        for y in range(1, self.puzzle.height):
            width = MAJOR_GRID_LINE_WIDTH if y % MAJOR_GRID_EVERY == 0 else MINOR_GRID_LINE_WIDTH
            py = oy + y * self.cell_size
            lines.append((width, (self.margin, py, right, py)))

        return lines

    # =============================================================================
    # PIXELS -> BOARD
    # =============================================================================

    def hit_test(self, px: float, py: float) -> Optional[BoardTarget]:
        """
        Find the cell or clue under a pixel position.

        Args:
            px, py: Pixel coordinates relative to the drawing area

        Returns:
            A BoardTarget, or None when the pointer is over margin, the blank
            corner above the row clues, or blank space in a short clue line
        """
        if self.puzzle is None:
            return None

        tx, ty = self.translation
        ox, oy = self.grid_origin
        gx = (px / self.scale - tx - ox) / self.cell_size
        gy = (py / self.scale - ty - oy) / self.cell_size

        if gx < 0 and gy < 0:
            return None
        if gx >= self.puzzle.width or gy >= self.puzzle.height:
            return None
        if gx < -self.clue_columns or gy < -self.clue_rows:
            return None

        x, y = math.floor(gx), math.floor(gy)

        if x >= 0 and y >= 0:
            return BoardTarget(CELL, x=x, y=y)

        if x < 0:
            index = x + len(self.puzzle.row_clues[y])
            if index < 0:
                return None
            return BoardTarget(ROW_CLUE, y=y, clue_index=index)

        index = y + len(self.puzzle.column_clues[x])
        if index < 0:
            return None
        return BoardTarget(COLUMN_CLUE, x=x, clue_index=index)
