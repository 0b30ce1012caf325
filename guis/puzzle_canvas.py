"""
PuzzleCanvas - interactive nonogram board on a Tkinter Canvas.

Left button fills, right button crosses; pressing on a cell that already has
that mark erases instead, and dragging repeats the action over every cell the
pointer passes. Clicking a clue toggles the player's mark on it.
"""
import tkinter as tk
from typing import Callable, Optional

from core.puzzle import Puzzle
from core.stroke import PaintStroke
from core.types import Axis, CellState, ClueStatus
from render.board_layout import CELL, COLUMN_CLUE, ROW_CLUE, BoardLayout, BoardTarget

BACKGROUND = "lightgray"
BOARD_COLOR = "white"
HIGHLIGHT_COLOR = "#ccf6fe"
GRID_COLOR = "#595959"
MISTAKE_COLOR = "#ff6b6b"
OPEN_CLUE_COLOR = "black"
DONE_CLUE_COLOR = "#808080"
CLUE_FONT_SIZE = 20  # board units


class PuzzleCanvas:
    """Interactive canvas for playing a nonogram."""

    def __init__(self, parent: tk.Widget, width: int = 800, height: int = 600):
        """Initialize the puzzle canvas."""
        self.canvas = tk.Canvas(parent, width=width, height=height, bg=BACKGROUND, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        # Puzzle and geometry
        self.puzzle: Optional[Puzzle] = None
        self.layout = BoardLayout()

        # Interaction state
        self.hover: Optional[BoardTarget] = None
        self.stroke: Optional[PaintStroke] = None
        self.show_mistakes = False

        # Callbacks
        self.on_puzzle_change: Optional[Callable] = None
        self.position_callback: Optional[Callable] = None

        self._setup_event_bindings()

    def _setup_event_bindings(self):
        """Set up mouse and resize handlers."""
        self.canvas.bind("<ButtonPress-1>", lambda e: self._on_press(e, CellState.FILLED))
        self.canvas.bind("<ButtonPress-3>", lambda e: self._on_press(e, CellState.CROSSED))
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<B3-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", lambda e: self._on_release(e, CellState.FILLED))
        self.canvas.bind("<ButtonRelease-3>", lambda e: self._on_release(e, CellState.CROSSED))
        self.canvas.bind("<Motion>", self._on_mouse_motion)
        self.canvas.bind("<Leave>", self._on_mouse_leave)
        self.canvas.bind("<Configure>", lambda e: self.redraw())

    def set_puzzle(self, puzzle: Optional[Puzzle]):
        """Set the puzzle to display and play."""
        self.puzzle = puzzle
        self.layout.set_puzzle(puzzle)
        self.stroke = None
        self.hover = None
        self.show_mistakes = False
        self.redraw()

    def set_change_callback(self, callback: Callable):
        """Set callback function to be called when the player changes the puzzle."""
        self.on_puzzle_change = callback

    def set_position_callback(self, callback: Callable):
        """Set position update callback for status bar."""
        self.position_callback = callback

    def set_show_mistakes(self, enabled: bool):
        """Highlight cells whose marks contradict the solution."""
        self.show_mistakes = enabled
        self.redraw()

    def _notify_puzzle_change(self):
        if self.on_puzzle_change:
            self.on_puzzle_change()

    # =============================================================================
    # EVENTS
    # =============================================================================

    def _update_hover(self, event) -> Optional[BoardTarget]:
        self.hover = self.layout.hit_test(event.x, event.y)
        if self.position_callback:
            if self.hover is not None and self.hover.kind == CELL:
                self.position_callback(self.hover.x, self.hover.y)
            else:
                self.position_callback()  # Clear position display
        return self.hover

    def _on_press(self, event, action: CellState):
        """Start a paint stroke on a cell, or toggle a clue mark."""
        if self.puzzle is None or self.stroke is not None:
            return

        self.canvas.focus_set()
        target = self._update_hover(event)
        if target is None:
            return

        if target.kind == CELL:
            stroke = PaintStroke(self.puzzle, action)
            if stroke.press(target.x, target.y):
                self.stroke = stroke
        elif target.kind == ROW_CLUE:
            self.puzzle.toggle_clue_mark(Axis.ROW, target.y, target.clue_index)
        elif target.kind == COLUMN_CLUE:
            self.puzzle.toggle_clue_mark(Axis.COLUMN, target.x, target.clue_index)

        self._notify_puzzle_change()
        self.redraw()

    def _on_drag(self, event):
        """Extend the active stroke to the cell under the pointer."""
        target = self._update_hover(event)
        if self.stroke is not None and target is not None and target.kind == CELL:
            if self.stroke.paint(target.x, target.y):
                self._notify_puzzle_change()
        self.redraw()

    def _on_release(self, event, action: CellState):
        """Finish the stroke started by the same button."""
        if self.stroke is None or self.stroke.button_action != action:
            return
        self.stroke.release()
        self.stroke = None
        self._notify_puzzle_change()
        self.redraw()

    def _on_mouse_motion(self, event):
        """Track the hovered cell for the row/column highlight."""
        previous = self.hover
        if self._update_hover(event) != previous:
            self.redraw()

    def _on_mouse_leave(self, event):
        self.hover = None
        if self.position_callback:
            self.position_callback()
        self.redraw()

    # =============================================================================
    # DRAWING
    # =============================================================================

    def redraw(self):
        """Redraw the whole board, refreshing solved clue statuses first."""
        self.canvas.delete("all")
        if self.puzzle is None:
            return

        self.puzzle.update_solved_clues()

        width = max(self.canvas.winfo_width(), 1)
        height = max(self.canvas.winfo_height(), 1)
        self.layout.fit(width, height)

        self._draw_background()
        self._draw_highlight()
        self._draw_clues()
        self._draw_cells()
        if self.show_mistakes:
            self._draw_mistakes()
        self._draw_grid()

    def _rect(self, x0: float, y0: float, x1: float, y1: float, **kwargs) -> int:
        """Draw a board-unit rectangle."""
        px0, py0 = self.layout.to_pixel(x0, y0)
        px1, py1 = self.layout.to_pixel(x1, y1)
        return self.canvas.create_rectangle(px0, py0, px1, py1, **kwargs)

    def _draw_background(self):
        layout = self.layout
        ox, oy = layout.grid_origin
        grid_w = self.puzzle.width * layout.cell_size
        grid_h = self.puzzle.height * layout.cell_size

        # Column clue band + grid, and row clue band + grid
        self._rect(ox, layout.margin, ox + grid_w, oy + grid_h, fill=BOARD_COLOR, outline="")
        self._rect(layout.margin, oy, ox + grid_w, oy + grid_h, fill=BOARD_COLOR, outline="")

    def _draw_highlight(self):
        """Shade the row and column of the hovered cell or clue."""
        if self.hover is None:
            return
        layout = self.layout
        ox, oy = layout.grid_origin
        grid_w = self.puzzle.width * layout.cell_size
        grid_h = self.puzzle.height * layout.cell_size

        if self.hover.x is not None and self.hover.x >= 0:
            x0 = ox + self.hover.x * layout.cell_size
            self._rect(x0, layout.margin, x0 + layout.cell_size, oy + grid_h, fill=HIGHLIGHT_COLOR, outline="")
        if self.hover.y is not None and self.hover.y >= 0:
            y0 = oy + self.hover.y * layout.cell_size
            self._rect(layout.margin, y0, ox + grid_w, y0 + layout.cell_size, fill=HIGHLIGHT_COLOR, outline="")

    def _draw_clue(self, center, value: int, status: ClueStatus):
        px, py = self.layout.to_pixel(*center)
        size = max(6, round(CLUE_FONT_SIZE * self.layout.scale * 0.75))
        if status == ClueStatus.UNMARKED:
            font, color = ("Arial", size, "bold"), OPEN_CLUE_COLOR
        else:
            font, color = ("Arial", size), DONE_CLUE_COLOR
        self.canvas.create_text(px, py, text=str(value), font=font, fill=color)

    def _draw_clues(self):
        for y, clues in enumerate(self.puzzle.row_clues):
            for index, value in enumerate(clues):
                self._draw_clue(self.layout.row_clue_center(y, index), value,
                                self.puzzle.row_clue_status[y][index])
        for x, clues in enumerate(self.puzzle.column_clues):
            for index, value in enumerate(clues):
                self._draw_clue(self.layout.column_clue_center(x, index), value,
                                self.puzzle.column_clue_status[x][index])

    def _draw_cells(self):
        line_width = max(1, round(2 * self.layout.scale))
        for y in range(self.puzzle.height):
            for x in range(self.puzzle.width):
                state = self.puzzle.player_grid[y][x]
                if state == CellState.EMPTY:
                    continue
                x0, y0, x1, y1 = self.layout.cell_box(x, y)
                if state == CellState.FILLED:
                    self._rect(x0, y0, x1, y1, fill="black", outline="")
                else:
                    px0, py0 = self.layout.to_pixel(x0, y0)
                    px1, py1 = self.layout.to_pixel(x1, y1)
                    self.canvas.create_line(px0, py0, px1, py1, width=line_width)
                    self.canvas.create_line(px1, py0, px0, py1, width=line_width)

    def _draw_mistakes(self):
        line_width = max(2, round(3 * self.layout.scale))
        for x, y in self.puzzle.list_mistakes():
            self._rect(*self.layout.cell_box(x, y), outline=MISTAKE_COLOR, width=line_width)

    def _draw_grid(self):
        for width, (x0, y0, x1, y1) in self.layout.grid_lines():
            px0, py0 = self.layout.to_pixel(x0, y0)
            px1, py1 = self.layout.to_pixel(x1, y1)
            self.canvas.create_line(px0, py0, px1, py1, fill=GRID_COLOR,
                                    width=max(1, round(width * self.layout.scale)),
                                    capstyle=tk.PROJECTING)
