from __future__ import annotations
from pathlib import Path
from typing import List, Tuple, Union

Rows = List[List[int]]


class PuzzleFormatError(ValueError):
    """Raised for puzzle text that does not describe a size-N board."""


def parse_puzzle(text: str) -> Tuple[int, Rows]:
    """
    Puzzle text format:
      - '#' starts a comment that runs to end of line
      - blank lines are ignored
      - first line with a single integer is the size N
      - then exactly N rows of N space-separated integers
    """
    size = 0
    board: Rows = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            row = [int(tok) for tok in line.split()]
        except ValueError:
            raise PuzzleFormatError(f"line {lineno}: expected integers, got {line!r}") from None
        if size == 0:
            if len(row) != 1 or row[0] < 2:
                raise PuzzleFormatError(f"line {lineno}: expected the puzzle size (>= 2) first")
            size = row[0]
            continue
        if len(row) != size:
            raise PuzzleFormatError(f"line {lineno}: Invalid row size ({len(row)} != {size})")
        board.append(row)
    if size == 0:
        raise PuzzleFormatError("missing puzzle size")
    if len(board) != size:
        raise PuzzleFormatError(f"Expected {size} rows, got {len(board)}")
    cells = sorted(v for row in board for v in row)
    if cells != list(range(size * size)):
        raise PuzzleFormatError(f"tiles must be a permutation of 0..{size * size - 1}")
    return size, board


def load_puzzle(path: Union[str, Path]) -> Tuple[int, Rows]:
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise PuzzleFormatError(f"Could not open file {path}: {e.strerror}") from e
    return parse_puzzle(text)
