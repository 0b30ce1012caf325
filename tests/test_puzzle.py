"""
Puzzle model:
- Construction checks the solution shape and contents
- Player grid starts empty, statuses match the clue shapes
- set_cell bounds/type checks
- Clue marking toggles UNMARKED <-> MARKED and leaves SOLVED alone
- Completion, statistics and progress reset
"""

import pytest

from core.puzzle import Puzzle
from core.types import Axis, CellState, ClueStatus

F = CellState.FILLED
X = CellState.CROSSED
E = CellState.EMPTY


def test_new_puzzle_shape(load_puzzle):
    p = load_puzzle("puzzles/heart.csv")
    assert (p.width, p.height) == (7, 6)
    assert len(p.solution) == p.height and all(len(r) == p.width for r in p.solution)
    assert len(p.player_grid) == p.height and all(len(r) == p.width for r in p.player_grid)
    assert all(c == E for row in p.player_grid for c in row)
    assert all(c in (F, X) for row in p.solution for c in row)

    for clues, statuses in zip(p.row_clues + p.column_clues, p.row_clue_status + p.column_clue_status):
        assert len(clues) == len(statuses)
        assert all(s == ClueStatus.UNMARKED for s in statuses)


@pytest.mark.parametrize("solution", [
    [],
    [[]],
    [[F, X], [F]],
    [[F, E]],
])
def test_invalid_solution_rejected(solution):
    with pytest.raises(ValueError):
        Puzzle(solution)


@pytest.mark.parametrize("bit", [2, -1, True, False, 1.0, 0.0, "1"])
def test_from_bits_rejects_other_values(bit):
    with pytest.raises(ValueError):
        Puzzle.from_bits([[1, bit]])


def test_solution_is_immutable(make_puzzle):
    p = make_puzzle([[1, 0]])
    with pytest.raises(TypeError):
        p.solution[0][0] = X


def test_set_cell(make_puzzle):
    p = make_puzzle([[1, 0, 1], [0, 1, 0]])
    assert p.set_cell(2, 1, F) is True
    assert p.get_cell(2, 1) == F
    assert p.player_grid[1][2] == F
    assert p.set_cell(2, 1, F) is False   # no change


def test_set_cell_out_of_bounds(make_puzzle):
    p = make_puzzle([[1, 0, 1]])
    with pytest.raises(IndexError):
        p.set_cell(3, 0, F)
    with pytest.raises(IndexError):
        p.set_cell(0, -1, F)


def test_set_cell_requires_cell_state(make_puzzle):
    p = make_puzzle([[1, 0, 1]])
    with pytest.raises(TypeError):
        p.set_cell(0, 0, "filled")


def test_toggle_clue_mark(make_puzzle):
    p = make_puzzle([[1, 0, 1], [1, 1, 0]])
    assert p.toggle_clue_mark(Axis.ROW, 0, 1) == ClueStatus.MARKED
    assert p.row_clue_status[0] == [ClueStatus.UNMARKED, ClueStatus.MARKED]
    assert p.toggle_clue_mark("row", 0, 1) == ClueStatus.UNMARKED

    assert p.toggle_clue_mark(Axis.COLUMN, 0, 0) == ClueStatus.MARKED
    assert p.get_clue_status(Axis.COLUMN, 0) == [ClueStatus.MARKED]


def test_toggle_leaves_solved_clue(make_puzzle):
    p = make_puzzle([[1, 1]])
    p.set_cell(0, 0, F)
    p.set_cell(1, 0, F)
    p.update_solved_clues()
    assert p.row_clue_status[0] == [ClueStatus.SOLVED]
    assert p.toggle_clue_mark(Axis.ROW, 0, 0) == ClueStatus.SOLVED


def test_toggle_clue_mark_bounds(make_puzzle):
    p = make_puzzle([[1, 0, 1]])
    with pytest.raises(IndexError):
        p.toggle_clue_mark(Axis.ROW, 1, 0)
    with pytest.raises(IndexError):
        p.toggle_clue_mark(Axis.ROW, 0, 2)
    with pytest.raises(ValueError):
        p.toggle_clue_mark("diagonal", 0, 0)


def test_get_clues(load_puzzle):
    p = load_puzzle("puzzles/arrow.csv")
    assert p.get_clues(Axis.ROW, 1) == (4,)
    assert p.get_clues("column", 2) == (1,)


def test_is_complete_ignores_crosses(make_puzzle):
    p = make_puzzle([[1, 0, 1]])
    assert not p.is_complete()
    p.set_cell(0, 0, F)
    p.set_cell(2, 0, F)
    assert p.is_complete()          # the middle cell may stay empty
    p.set_cell(1, 0, F)
    assert not p.is_complete()


def test_statistics(make_puzzle):
    p = make_puzzle([[1, 0, 1], [0, 0, 0]])
    p.set_cell(0, 0, F)
    p.set_cell(1, 0, X)
    p.set_cell(2, 0, F)
    p.set_cell(0, 1, F)
    p.toggle_clue_mark(Axis.ROW, 1, 0)
    p.update_solved_clues()

    stats = p.get_statistics()
    assert stats["filled_cells"] == 3
    assert stats["crossed_cells"] == 1
    assert stats["empty_cells"] == 2
    assert stats["solution_filled"] == 2
    assert stats["total_clues"] == 2 + 1 + 3
    assert stats["marked_clues"] == 1
    assert stats["mistakes"] == 1
    assert stats["is_complete"] is False
    # Only row 0 counts: column 0 is over-filled and column 2 is still open below
    assert stats["solved_clues"] == 2


def test_clear_progress(make_puzzle):
    p = make_puzzle([[1, 0, 1]])
    p.set_cell(0, 0, F)
    p.set_cell(1, 0, X)
    p.set_cell(2, 0, F)
    p.toggle_clue_mark(Axis.COLUMN, 1, 0)
    p.update_solved_clues()

    p.clear_progress()
    assert all(c == E for row in p.player_grid for c in row)
    for statuses in p.row_clue_status + p.column_clue_status:
        assert all(s == ClueStatus.UNMARKED for s in statuses)
