from dataclasses import dataclass
from typing import Iterator

from wordgrid.board import Board
from wordgrid.trie import Trie, TrieNode, to_idx


@dataclass(frozen=True)
class Found:
    """A word, the (row, col) its search started from, and the cells spelling it."""

    word: str
    row: int
    col: int
    path: tuple[tuple[int, int], ...]


class Solver:
    """Find words on a Board by walking it in lock-step with a Trie.

    The board's mask and word buffer are shared by every frame of the search.
    """

    _trie: Trie
    _board: Board

    def __init__(self, trie: Trie, board: Board):
        assert not trie.is_destroyed()
        assert not trie.root.is_word()
        self._trie = trie
        self._board = board
        self._n = board.n
        self._cells = [to_idx(let) for let in board.letters.flat]
        self._neighbors = board.neighbors
        self._seq: list[int] = []
        self._runs = 0
        self._unique = False

    def pos(self, idx: int):
        return divmod(idx, self._n)

    def find_words(self, unique=False) -> Iterator[Found]:
        """Yield every word on the board, in row-major order of starting cell.

        With unique=False, a word is reported once per path that spells it.
        With unique=True, only the first path for each word is reported.
        """
        assert self._board.is_clear()
        self._unique = unique
        self._seq = []
        if unique:
            self._runs = 1 + self._trie.root.mark()
            self._trie.root.set_mark(self._runs)
        t = self._trie.root
        for i in range(0, len(self._cells)):
            d = t.descend(self._cells[i])
            if d:
                yield from self._visit(i, i, d, 0)

    def solve(self, unique=False) -> list[Found]:
        return [*self.find_words(unique)]

    def _visit(self, start: int, i: int, t: TrieNode, depth: int):
        row, col = self.pos(i)
        self._board.mark_used(row, col, depth)
        self._seq.append(i)
        try:
            yield from self._dfs(start, i, t, depth + 1)
        finally:
            self._seq.pop()
            self._board.mark_unused(row, col, depth)

    def _dfs(self, start: int, i: int, t: TrieNode, depth: int):
        if t.is_word():
            if not self._unique or t.mark() != self._runs:
                t.set_mark(self._runs)
                row, col = self.pos(start)
                yield Found(
                    word=self._board.word(depth),
                    row=row,
                    col=col,
                    path=tuple(self.pos(idx) for idx in self._seq),
                )

        used = self._board.used
        for idx in self._neighbors[i]:
            r, c = self.pos(idx)
            if not used[r, c]:
                d = t.descend(self._cells[idx])
                if d:
                    yield from self._visit(start, idx, d, depth)
