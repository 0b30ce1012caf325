"""
Shared types for the Nonogram player.
Separated to avoid circular imports between modules.
"""
from enum import Enum


class CellState(Enum):
    """Possible states for grid cells."""
    EMPTY = "empty"       # Not marked by the player
    FILLED = "filled"     # Part of the picture
    CROSSED = "crossed"   # Not part of the picture


class ClueStatus(Enum):
    """Display status of a single clue number."""
    UNMARKED = "unmarked"
    MARKED = "marked"     # Set by the player, never touched by detection
    SOLVED = "solved"     # Computed by the solved-clue detector


class Axis(Enum):
    """Line direction used by clue generation and clue marking."""
    ROW = "row"
    COLUMN = "column"


class PuzzleLoadError(ValueError):
    """Raised when a puzzle file cannot be turned into a Puzzle."""


class HeaderError(PuzzleLoadError):
    """Dimension record is missing or malformed."""


class SizeMismatchError(PuzzleLoadError):
    """A data row does not have the declared number of columns."""


class RowCountError(PuzzleLoadError):
    """Fewer or more data rows than declared."""


class CellValueError(PuzzleLoadError):
    """A cell token is not 0 or 1."""
