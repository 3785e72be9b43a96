from wordgrid.histogram import Histogram
from wordgrid.test_utils import make_board


def test_counts():
    h = Histogram.from_board(make_board("aba", "cca", "zzz"))
    assert h.count("a") == 3
    assert h.count("b") == 1
    assert h.count("c") == 2
    assert h.count("z") == 3
    assert h.count("q") == 0
    assert int(h.counts.sum()) == 9
    assert h.max_length == 9


def test_admits():
    h = Histogram.from_board(make_board("ab", "cd"))
    assert h.admits("abcd")
    assert h.admits("dcba")
    assert not h.admits("abe")
    # Too long to fit on the board, even though all the letters are present.
    assert not h.admits("abcda")


def test_admits_ignores_multiplicity():
    # Only one "e" on the board, but "eel" still gets through.
    h = Histogram.from_board(make_board("el", "xy"))
    assert h.admits("eel")
