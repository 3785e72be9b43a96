"""The letter grid plus the mutable state shared by the search.

The in-use mask and the word buffer are the only state the search mutates.
There is exactly one of each per Board, and mark_used / mark_unused must be
called in matching pairs around every step of the search.
"""

from typing import Iterable

import numpy as np

from wordgrid.neighbors import init_neighbors


class Board:
    letters: np.ndarray
    used: np.ndarray

    def __init__(self, rows: list[str]):
        n = len(rows)
        assert n > 0, "empty board"
        for row in rows:
            assert len(row) == n, f"board is not square: {rows}"
            assert all("a" <= let <= "z" for let in row), row
        self.n = n
        self.letters = np.array([list(row) for row in rows], dtype="<U1")
        self.letters.flags.writeable = False
        self.used = np.zeros((n, n), dtype=bool)
        self._search = [""] * (n * n)
        self.neighbors = init_neighbors(n)

    def __str__(self):
        return "\n".join("".join(row) for row in self.letters)

    def __len__(self):
        return self.n * self.n

    def letter(self, row: int, col: int) -> str:
        return str(self.letters[row, col])

    def cells(self):
        """All (row, col) pairs in row-major order."""
        return ((row, col) for row in range(self.n) for col in range(self.n))

    def mark_used(self, row: int, col: int, depth: int):
        assert not self.used[row, col], f"({row},{col}) is already in use"
        assert 0 <= depth < len(self._search), depth
        self.used[row, col] = True
        self._search[depth] = self.letter(row, col)

    def mark_unused(self, row: int, col: int, depth: int):
        assert self.used[row, col], f"({row},{col}) is not in use"
        assert 0 <= depth < len(self._search), depth
        self.used[row, col] = False
        self._search[depth] = ""

    def word(self, depth: int) -> str:
        return "".join(self._search[:depth])

    def is_clear(self):
        return not self.used.any() and not any(self._search)


def parse_board(lines: Iterable[str], name="<board>") -> Board:
    """Parse a board, one row per line. The first non-blank line sets the size."""
    rows = []
    n = None
    for line_num, line in enumerate(lines, start=1):
        row = line.strip().lower()
        if not row:
            continue
        if n is None:
            n = len(row)
        if len(row) != n:
            raise ValueError(f"{name}:{line_num} expected {n} letters, got {len(row)}")
        if not all("a" <= let <= "z" for let in row):
            raise ValueError(f"{name}:{line_num} board rows may only contain a-z: {row}")
        rows.append(row)
    if n is None:
        raise ValueError(f"{name}: board is empty")
    if len(rows) != n:
        raise ValueError(f"{name}: expected {n} rows, got {len(rows)}")
    return Board(rows)


def read_board(path: str) -> Board:
    with open(path) as f:
        return parse_board(f, name=path)
