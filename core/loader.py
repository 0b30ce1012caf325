"""
CSV puzzle files.

Format:
    columns,rows
    1,0,1,...
    ...

The first record declares the column count (width) then the row count
(height). It is followed by exactly `rows` records of exactly `columns`
tokens; "1" is a filled solution cell and "0" a crossed one.
"""
import csv
import io
from typing import List, Optional, Type

from core.puzzle import Puzzle
from core.types import (
    CellState,
    CellValueError,
    HeaderError,
    RowCountError,
    SizeMismatchError,
)

_TOKENS = {"1": CellState.FILLED, "0": CellState.CROSSED}


def _read_records(text: str) -> List[List[str]]:
    """Split CSV text into stripped records, dropping trailing blank lines."""
    records = [[field.strip() for field in record] for record in csv.reader(io.StringIO(text))]
    while records and not any(records[-1]):
        records.pop()
    return records


def _parse_header(record: List[str], source: str):
    if len(record) < 2:
        raise HeaderError(f"{source}: first line must contain the column and row counts")
    try:
        columns, rows = int(record[0]), int(record[1])
    except ValueError:
        raise HeaderError(f"{source}: column and row counts must be integers, got {record[:2]}") from None
    if columns <= 0 or rows <= 0:
        raise HeaderError(f"{source}: puzzle dimensions must be positive: {columns}x{rows}")
    return columns, rows


def parse_puzzle_csv(text: str, source: str = "<puzzle>",
                     puzzle_class: Optional[Type[Puzzle]] = None) -> Puzzle:
    """
    Build a Puzzle from CSV text.

    Args:
        text: File contents
        source: Name used in error messages (usually the file path)
        puzzle_class: Puzzle subclass to instantiate

    Returns:
        The new Puzzle

    Raises:
        HeaderError: Missing or malformed dimension record
        SizeMismatchError: A data row has the wrong number of columns
        RowCountError: Fewer or more data rows than declared
        CellValueError: A token is not 0 or 1
    """
    puzzle_class = puzzle_class or Puzzle
    records = _read_records(text)
    if not records:
        raise HeaderError(f"{source} is empty.")

    columns, rows = _parse_header(records[0], source)
    data = records[1:]

    if len(data) < rows:
        raise RowCountError(f"{source} has less rows than listed ({len(data)} of {rows}).")
    if len(data) > rows:
        raise RowCountError(f"{source} has more rows than listed ({len(data)} of {rows}).")

    solution = []
    for y, record in enumerate(data):
        if len(record) != columns:
            raise SizeMismatchError(
                f"{source} has a bad or inconsistent column count in row {y + 1} "
                f"({len(record)} of {columns})."
            )
        row = []
        for x, token in enumerate(record):
            if token not in _TOKENS:
                raise CellValueError(f"A value in {source} is not 0 or 1: {token!r} at ({x}, {y}).")
            row.append(_TOKENS[token])
        solution.append(row)

    return puzzle_class(solution)


def load_puzzle_csv(filename: str, puzzle_class: Optional[Type[Puzzle]] = None) -> Puzzle:
    """Load a Puzzle from a CSV file. OSError from opening the file propagates."""
    with open(filename, 'r', newline='') as f:
        text = f.read()
    return parse_puzzle_csv(text, source=filename, puzzle_class=puzzle_class)


def puzzle_to_csv(puzzle: Puzzle) -> str:
    """Serialize a puzzle's solution in the CSV puzzle format."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow([puzzle.width, puzzle.height])
    for row in puzzle.solution:
        writer.writerow(["1" if cell == CellState.FILLED else "0" for cell in row])
    return out.getvalue()


def save_puzzle_csv(puzzle: Puzzle, filename: str) -> None:
    """Write a puzzle's solution to a CSV file."""
    with open(filename, 'w', newline='') as f:
        f.write(puzzle_to_csv(puzzle))
