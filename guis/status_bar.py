import tkinter as tk
from tkinter import ttk
from typing import Optional

from utils.lines import coordinate_to_string


class EnhancedStatusBar:
    """Status bar with message, progress, mistakes and position zones."""

    def __init__(self, parent: tk.Widget):
        self.frame = ttk.Frame(parent)
        self.frame.pack(side=tk.BOTTOM, fill=tk.X)

        # Create status zones
        self._create_status_zones()

    def _create_status_zones(self):
        """Create different zones of the status bar."""
        # Main status (left side)
        self.main_status = tk.StringVar(value="Ready")
        main_label = ttk.Label(self.frame, textvariable=self.main_status,
                               relief=tk.SUNKEN, anchor=tk.W, padding=3)
        main_label.pack(side=tk.LEFT, fill=tk.X, expand=True)

        ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

        # Solved clue progress
        self.progress_var = tk.StringVar(value="")
        progress_label = ttk.Label(self.frame, textvariable=self.progress_var,
                                   relief=tk.SUNKEN, anchor=tk.CENTER, padding=3, width=18)
        progress_label.pack(side=tk.LEFT)

        ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

        # Mistakes (only filled in on request)
        self.mistakes_var = tk.StringVar(value="")
        mistakes_label = ttk.Label(self.frame, textvariable=self.mistakes_var,
                                   relief=tk.SUNKEN, anchor=tk.CENTER, padding=3, width=15)
        mistakes_label.pack(side=tk.LEFT)

        # Position info (right side)
        self.position_var = tk.StringVar(value="")
        position_label = ttk.Label(self.frame, textvariable=self.position_var,
                                   relief=tk.SUNKEN, anchor=tk.E, padding=3, width=10)
        position_label.pack(side=tk.RIGHT)

    def update_main_status(self, status: str):
        """Update main status message."""
        self.main_status.set(status)

    def update_progress(self, solved: int, total: int):
        """Update the solved clue counter."""
        if total:
            self.progress_var.set(f"Clues: {solved}/{total}")
        else:
            self.progress_var.set("")

    def update_mistakes(self, mistakes: Optional[int]):
        """Show the mistake count, or clear it with None."""
        if mistakes is None:
            self.mistakes_var.set("")
        elif mistakes > 0:
            self.mistakes_var.set(f"❌ {mistakes} mistakes")
        else:
            self.mistakes_var.set("✅ No mistakes")

    def update_position(self, x: Optional[int] = None, y: Optional[int] = None):
        """Update hovered cell info."""
        if x is not None and y is not None:
            self.position_var.set(f"({coordinate_to_string(x + 1, y + 1)})")
        else:
            self.position_var.set("")
