"""
Mistake detection: player marks that contradict the solution.
"""
from typing import List, Sequence, Tuple

from core.types import CellState

# Player mark -> solution value it contradicts
_CONTRADICTIONS = {
    CellState.FILLED: CellState.CROSSED,
    CellState.CROSSED: CellState.FILLED,
}


def is_mistake(mark: CellState, answer: CellState) -> bool:
    """True if a player mark disagrees with the solution cell. EMPTY never does."""
    return _CONTRADICTIONS.get(mark) == answer


def find_mistakes(solution: Sequence[Sequence[CellState]],
                  player_grid: Sequence[Sequence[CellState]]) -> List[Tuple[int, int]]:
    """
    List every (x, y) where the player's mark contradicts the solution.

    Coordinates come back in row-major order (top row first, left to right).
    """
    mistakes = []
    for y, (answer_row, player_row) in enumerate(zip(solution, player_grid)):
        for x, (answer, mark) in enumerate(zip(answer_row, player_row)):
            if is_mistake(mark, answer):
                mistakes.append((x, y))
    return mistakes
