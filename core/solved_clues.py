"""
Solved-clue detection for a single line of the player grid.

A clue counts as solved when the player has drawn its run as a closed block of
FILLED cells that lines up with the clue sequence from one end of the line.
Partial progress can make one end of a line certain while the middle is still
open, so the scan runs forward from the start and, once it meets an unknown
cell or a run that does not match, restarts from the far end. The reverse scan
stops at the first cell the forward scan left unconfirmed, so no run is read
by both scans. A line read to its end without a stop has no reverse scan.
"""
from typing import List, MutableSequence, Sequence

from core.types import CellState, ClueStatus


def _blank_line_solved(line: Sequence[CellState]) -> bool:
    """A (0,) clue is satisfied once every cell of the line is crossed out."""
    return all(cell == CellState.CROSSED for cell in line)


def find_solved_clues(line: Sequence[CellState], clues: Sequence[int],
                      solution_filled: int) -> List[bool]:
    """
    Work out which clues of one line are solved by the player's marks.

    Args:
        line: Player cells of the row/column, in index order
        clues: Clue sequence of the same line
        solution_filled: Number of FILLED cells in the solution's line

    Returns:
        One flag per clue, True where the clue is solved
    """
    solved = [False] * len(clues)
    if not clues:
        return solved

    if tuple(clues) == (0,):
        solved[0] = _blank_line_solved(line)
        return solved

    # Over-filled line: nothing in it can be trusted
    if sum(1 for cell in line if cell == CellState.FILLED) > solution_filled:
        return solved

    last = len(line) - 1
    front = 0  # next clue expected from the start of the line
    count = 0
    run_start = 0
    boundary = None  # first cell the forward scan did not confirm

    for i, cell in enumerate(line):
        if cell == CellState.EMPTY:
            boundary = run_start if count else i
            break
        if cell == CellState.FILLED:
            if count == 0:
                run_start = i
            count += 1
            if i < last:
                continue
        if count == 0:
            continue

        # Run closed by a cross or by the end of the line
        if front < len(clues) and count == clues[front]:
            solved[front] = True
            front += 1
            count = 0
            if front == len(clues):
                break
        else:
            boundary = run_start
            break

    # Every clue confirmed, or the whole line read without a stop
    if boundary is None:
        return solved

    back = len(clues) - 1  # next clue expected from the end of the line
    count = 0

    for i in range(last, boundary - 1, -1):
        if back < front:
            break
        cell = line[i]
        if cell == CellState.EMPTY:
            break
        if cell == CellState.FILLED:
            count += 1
            if i > boundary:
                continue
        if count == 0:
            continue

        if count == clues[back]:
            solved[back] = True
            back -= 1
            count = 0
        else:
            break

    return solved


def apply_solved_flags(statuses: MutableSequence[ClueStatus], flags: Sequence[bool]) -> None:
    """
    Write detection results into a status list in place.

    MARKED entries belong to the player and are left alone; every other entry
    becomes SOLVED or UNMARKED according to its flag.
    """
    for index, flag in enumerate(flags):
        if statuses[index] == ClueStatus.MARKED:
            continue
        statuses[index] = ClueStatus.SOLVED if flag else ClueStatus.UNMARKED
