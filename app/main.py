"""
Nonogram player main application.
Open a CSV puzzle, paint the grid, and watch solved clues fade out.
"""

import tkinter as tk
from tkinter import ttk, messagebox, filedialog
import sys
import os
from typing import Optional

# Add project root to path first
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Then import project modules
from core.puzzle import Puzzle
from core.types import PuzzleLoadError
from guis.puzzle_canvas import PuzzleCanvas
from guis.status_bar import EnhancedStatusBar
from render.puzzle_sheet import save_puzzle_image

CSV_FILETYPES = [("CSV puzzles", "*.csv"), ("All files", "*.*")]

ABOUT_TEXT = """NONOGRAM PLAYER

Fill cells so that every row and column matches its clues.
Each clue is the length of one block of filled cells, in order.

MOUSE:
• Left button: fill a cell (drag to fill several)
• Right button: cross out a cell
• Pressing on a cell that already has the mark erases it
• Click a clue to mark it as done

Solved clues turn grey automatically.

PUZZLE FILES:
First line "columns,rows", then one line per row of 0/1 values."""


class NonogramApp:
    """Nonogram player window."""

    def __init__(self, puzzle_path: Optional[str] = None):
        """Initialize the application."""
        self.root = tk.Tk()
        self.root.title("Nonogram Player")
        self.root.geometry("900x800")

        # Application state
        self.puzzle: Optional[Puzzle] = None
        self.puzzle_name = ""
        self.completed = False

        # UI Components
        self.canvas: PuzzleCanvas = None
        self.show_mistakes_var = tk.BooleanVar(value=False)
        self.enhanced_status_bar = EnhancedStatusBar(self.root)

        self._create_ui()

        if puzzle_path:
            self._load_puzzle(puzzle_path)
        else:
            self.enhanced_status_bar.update_main_status("Open a puzzle to start")

    def _create_ui(self):
        """Create the user interface."""
        self._create_toolbar()

        canvas_frame = ttk.Frame(self.root)
        canvas_frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.canvas = PuzzleCanvas(canvas_frame, width=880, height=700)
        self.canvas.set_change_callback(self._on_puzzle_change)
        self.canvas.set_position_callback(self.enhanced_status_bar.update_position)

    def _create_toolbar(self):
        """Create the button row above the board."""
        toolbar = ttk.Frame(self.root, padding=5)
        toolbar.pack(side=tk.TOP, fill=tk.X)

        ttk.Button(toolbar, text="Open Puzzle", command=self._open_puzzle).pack(side=tk.LEFT, padx=(0, 3))
        ttk.Button(toolbar, text="Save Puzzle CSV", command=self._save_puzzle_csv).pack(side=tk.LEFT, padx=(0, 3))
        ttk.Button(toolbar, text="Export Image", command=self._export_image).pack(side=tk.LEFT, padx=(0, 3))

        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=5)

        ttk.Checkbutton(toolbar, text="Show Mistakes", variable=self.show_mistakes_var,
                        command=self._toggle_mistakes).pack(side=tk.LEFT, padx=(0, 3))
        ttk.Button(toolbar, text="Clear Progress", command=self._clear_progress).pack(side=tk.LEFT, padx=(0, 3))

        ttk.Button(toolbar, text="About", command=self._show_about).pack(side=tk.RIGHT)

    # =============================================================================
    # FILE OPERATIONS
    # =============================================================================

    def _open_puzzle(self):
        """Ask for a CSV puzzle and load it."""
        if self._has_progress():
            result = messagebox.askyesno("Open Puzzle",
                                         "Progress on the current puzzle will be lost. Continue?")
            if not result:
                return

        filename = filedialog.askopenfilename(filetypes=CSV_FILETYPES, title="Open Puzzle")
        if filename:
            self._load_puzzle(filename)

    def _has_progress(self) -> bool:
        """Check if the current puzzle has unfinished player marks."""
        if not self.puzzle or self.completed:
            return False

        stats = self.puzzle.get_statistics()
        return stats["empty_cells"] < stats["width"] * stats["height"]

    def _load_puzzle(self, filename: str) -> bool:
        """Load a puzzle file; on failure keep the current puzzle."""
        try:
            puzzle = Puzzle.load_from_file(filename)
        except PuzzleLoadError as e:
            messagebox.showerror("Open Error", f"Invalid puzzle file:\n{e}")
            return False
        except OSError as e:
            messagebox.showerror("Open Error", f"Could not read {filename}:\n{e.strerror or e}")
            return False

        self.puzzle = puzzle
        self.puzzle_name = os.path.basename(filename)
        self.completed = False
        self.show_mistakes_var.set(False)
        self.canvas.set_puzzle(puzzle)
        self.root.title(f"Nonogram Player - {self.puzzle_name}")
        self.enhanced_status_bar.update_main_status(
            f"Loaded {self.puzzle_name} ({puzzle.width} × {puzzle.height})")
        self._update_status()
        return True

    def _save_puzzle_csv(self):
        """Save the current puzzle's solution as a CSV puzzle file."""
        if self.puzzle is None:
            messagebox.showwarning("No Puzzle", "No puzzle to save.")
            return

        filename = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=CSV_FILETYPES,
                                                title="Save Puzzle as CSV")
        if filename:
            try:
                self.puzzle.save_csv(filename)
                self.enhanced_status_bar.update_main_status(f"Puzzle saved to {filename}")
            except OSError as e:
                messagebox.showerror("Save Error", f"Failed to save puzzle: {str(e)}")

    def _export_image(self):
        """Export the board (with the player's marks) as an image."""
        if self.puzzle is None:
            messagebox.showwarning("No Puzzle", "No puzzle to export.")
            return

        filename = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG images", "*.png"), ("PDF documents", "*.pdf"), ("All files", "*.*")],
            title="Export Puzzle Image"
        )
        if filename:
            try:
                save_puzzle_image(self.puzzle, filename)
                self.enhanced_status_bar.update_main_status(f"Image exported to {filename}")
            except (OSError, ValueError) as e:
                messagebox.showerror("Export Error", f"Failed to export image: {str(e)}")

    # =============================================================================
    # PLAY ACTIONS
    # =============================================================================

    def _toggle_mistakes(self):
        """Show or hide mistake highlighting."""
        if self.puzzle is None:
            self.show_mistakes_var.set(False)
            return
        self.canvas.set_show_mistakes(self.show_mistakes_var.get())
        self._update_status()

    def _clear_progress(self):
        """Reset the player's grid."""
        if self.puzzle is None:
            return
        result = messagebox.askyesno("Clear Progress", "Erase all marks on this puzzle?")
        if not result:
            return
        self.puzzle.clear_progress()
        self.completed = False
        self.canvas.redraw()
        self.enhanced_status_bar.update_main_status("Progress cleared")
        self._update_status()

    def _show_about(self):
        messagebox.showinfo("About Nonogram Player", ABOUT_TEXT)

    # =============================================================================
    # STATUS
    # =============================================================================

    def _on_puzzle_change(self):
        """Called by the canvas whenever the player changes something."""
        self._update_status()

        if self.puzzle is not None and not self.completed and self.canvas.stroke is None \
                and self.puzzle.is_complete():
            self.completed = True
            self.enhanced_status_bar.update_main_status(f"Solved {self.puzzle_name}!")
            messagebox.showinfo("Puzzle Solved", "Congratulations, the picture is complete!")

    def _update_status(self):
        """Refresh progress and mistake zones."""
        if self.puzzle is None:
            self.enhanced_status_bar.update_progress(0, 0)
            self.enhanced_status_bar.update_mistakes(None)
            return

        self.puzzle.update_solved_clues()
        stats = self.puzzle.get_statistics()
        self.enhanced_status_bar.update_progress(stats["solved_clues"], stats["total_clues"])
        if self.show_mistakes_var.get():
            self.enhanced_status_bar.update_mistakes(stats["mistakes"])
        else:
            self.enhanced_status_bar.update_mistakes(None)

    def run(self):
        """Start the application main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    try:
        puzzle_path = sys.argv[1] if len(sys.argv) > 1 else None
        app = NonogramApp(puzzle_path)
        app.run()
    except Exception as e:
        print(f"Error starting application: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
