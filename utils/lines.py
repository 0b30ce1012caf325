"""
Line and coordinate helpers for rectangular row-major grids.
"""
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def get_row(grid: Sequence[Sequence[T]], y: int) -> List[T]:
    """Return row y as a list (left to right)."""
    return list(grid[y])


def get_column(grid: Sequence[Sequence[T]], x: int) -> List[T]:
    """Return column x as a list (top to bottom)."""
    return [row[x] for row in grid]


def coordinate_to_string(x: int, y: int) -> str:
    """Convert an (x, y) cell coordinate to the "x,y" display form."""
    return f"{x},{y}"

