"""
Puzzle sheet rendering:
- One text label per clue, grey once solved or marked
- Player marks are drawn only when asked for
- save_puzzle_image writes an image file
"""

from matplotlib.figure import Figure
from matplotlib.colors import to_hex

from core.types import Axis, CellState
from render.puzzle_sheet import PuzzleSheetRenderer, save_puzzle_image


def _new_axis():
    return Figure(figsize=(4, 4)).add_subplot(1, 1, 1)


def test_one_label_per_clue(load_puzzle):
    p = load_puzzle("puzzles/smiley.csv")
    ax = PuzzleSheetRenderer().render_puzzle(p, _new_axis())

    total = sum(len(c) for c in p.row_clues) + sum(len(c) for c in p.column_clues)
    assert len(ax.texts) == total
    labels = sorted(t.get_text() for t in ax.texts)
    expected = sorted(str(v) for clues in p.row_clues + p.column_clues for v in clues)
    assert labels == expected


def test_marked_clue_is_grey(make_puzzle):
    p = make_puzzle([[1, 0, 1]])
    p.toggle_clue_mark(Axis.ROW, 0, 0)
    ax = PuzzleSheetRenderer().render_puzzle(p, _new_axis())

    # Row clues are drawn first
    first, second = ax.texts[0], ax.texts[1]
    assert to_hex(first.get_color()) == "#808080"
    assert to_hex(second.get_color()) == "#000000"


def test_marks_are_optional(make_puzzle):
    p = make_puzzle([[1, 0], [0, 1]])
    p.set_cell(0, 0, CellState.FILLED)
    p.set_cell(1, 1, CellState.FILLED)

    with_marks = PuzzleSheetRenderer().render_puzzle(p, _new_axis())
    without_marks = PuzzleSheetRenderer().render_puzzle(p, _new_axis(), show_marks=False)
    assert len(with_marks.patches) == 2
    assert len(without_marks.patches) == 0


def test_axis_is_flipped_to_grid_order(load_puzzle):
    p = load_puzzle("puzzles/arrow.csv")
    renderer = PuzzleSheetRenderer()
    ax = renderer.render_puzzle(p, _new_axis())
    board_w, board_h = renderer.layout.board_size
    assert ax.get_xlim() == (0, board_w)
    assert ax.get_ylim() == (board_h, 0)


def test_save_puzzle_image(tmp_path, load_puzzle):
    path = tmp_path / "heart.png"
    save_puzzle_image(load_puzzle("puzzles/heart.csv"), str(path), dpi=50)
    assert path.exists()
    with open(path, "rb") as f:
        assert f.read(8) == b"\x89PNG\r\n\x1a\n"
