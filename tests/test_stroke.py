"""
Paint strokes:
- The button's state is painted on every cell the stroke passes
- Pressing on a cell that already has the button's state erases instead
- Presses outside the grid do nothing
"""

import pytest

from core.stroke import PaintStroke
from core.types import CellState

F = CellState.FILLED
X = CellState.CROSSED
E = CellState.EMPTY


def test_fill_stroke(make_puzzle):
    p = make_puzzle([[1, 1, 0, 1]])
    stroke = PaintStroke(p, F)
    assert stroke.press(0, 0)
    assert stroke.active
    stroke.paint(1, 0)
    stroke.paint(2, 0)
    changed = stroke.release()

    assert changed == [(0, 0), (1, 0), (2, 0)]
    assert not stroke.active
    assert p.player_grid[0] == [F, F, F, E]


def test_pressing_same_state_erases(make_puzzle):
    p = make_puzzle([[1, 1, 0]])
    p.set_cell(0, 0, F)
    p.set_cell(1, 0, F)
    p.set_cell(2, 0, X)

    stroke = PaintStroke(p, F)
    stroke.press(0, 0)
    assert stroke.action == E
    stroke.paint(1, 0)
    stroke.paint(2, 0)
    stroke.release()
    assert p.player_grid[0] == [E, E, E]


def test_cross_stroke_overwrites_fill(make_puzzle):
    p = make_puzzle([[1, 0]])
    p.set_cell(1, 0, F)
    stroke = PaintStroke(p, X)
    stroke.press(0, 0)
    assert stroke.action == X
    stroke.paint(1, 0)
    assert p.player_grid[0] == [X, X]


def test_unchanged_cells_are_not_reported(make_puzzle):
    p = make_puzzle([[1, 1, 1]])
    p.set_cell(1, 0, F)
    stroke = PaintStroke(p, F)
    stroke.press(0, 0)
    assert stroke.paint(1, 0) is False
    assert stroke.paint(2, 0) is True
    assert stroke.release() == [(0, 0), (2, 0)]


def test_press_outside_grid(make_puzzle):
    p = make_puzzle([[1, 0]])
    stroke = PaintStroke(p, F)
    assert stroke.press(2, 0) is False
    assert not stroke.active
    assert stroke.paint(0, 0) is False
    assert p.player_grid[0] == [E, E]


def test_drag_outside_grid_is_ignored(make_puzzle):
    p = make_puzzle([[1, 0]])
    stroke = PaintStroke(p, F)
    stroke.press(0, 0)
    assert stroke.paint(5, 5) is False
    assert stroke.paint(-1, 0) is False


def test_release_stops_painting(make_puzzle):
    p = make_puzzle([[1, 0]])
    stroke = PaintStroke(p, F)
    stroke.press(0, 0)
    stroke.release()
    assert stroke.paint(1, 0) is False
    assert p.get_cell(1, 0) == E


def test_invalid_action(make_puzzle):
    with pytest.raises(ValueError):
        PaintStroke(make_puzzle([[1]]), E)
