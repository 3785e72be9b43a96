import numpy as np

from wordgrid.board import Board
from wordgrid.trie import ALPHABET_SIZE, to_idx


class Histogram:
    """How many times each letter appears on a board.

    Used to skip dictionary words that can't possibly be spelled on the board.
    This only checks that each letter is present, not that there are enough
    copies of it, so some unspellable words still get through.
    """

    counts: np.ndarray

    def __init__(self, counts: np.ndarray, max_length: int):
        assert counts.shape == (ALPHABET_SIZE,)
        self.counts = counts
        self.counts.flags.writeable = False
        self.max_length = max_length

    @staticmethod
    def from_board(board: Board):
        idxs = [to_idx(let) for let in board.letters.flat]
        counts = np.bincount(idxs, minlength=ALPHABET_SIZE)
        return Histogram(counts, max_length=len(board))

    def count(self, letter: str) -> int:
        return int(self.counts[to_idx(letter)])

    def admits(self, word: str) -> bool:
        if len(word) > self.max_length:
            return False
        return all(self.counts[to_idx(let)] > 0 for let in word)
