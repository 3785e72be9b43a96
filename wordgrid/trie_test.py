import pytest

from wordgrid import trie as trie_module
from wordgrid.trie import Trie, TrieAllocationError, make_lookup_table, to_idx


def test_trie():
    t = Trie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.root.is_word()

    assert t.size() == 6
    assert t.find_word("agriculture") is not None
    assert t.find_word("culture") is not None
    assert t.find_word("boggle") is not None
    assert t.find_word("tea") is not None
    assert t.find_word("sea") is not None
    assert t.find_word("teapot") is not None

    assert t.find_word("teap") is not None
    assert not t.is_word(t.find_word("teap"))
    assert t.find_word("random") is None
    assert not t.is_word(t.find_word("cultur"))

    wd = t.child(t.root, "t")
    assert wd is not None
    assert wd.letter == "t"
    wd = t.child(wd, "e")
    assert wd is not None
    assert t.child(wd, "x") is None
    wd = wd.descend(to_idx("a"))
    assert wd is not None
    assert t.is_word(wd)
    assert wd.mark() == 0
    wd.set_mark(12345)
    assert wd.mark() == 12345
    t.reset_marks()
    assert wd.mark() == 0

    child = t.find_word("agriculture")
    assert child is not None
    assert Trie.reverse_lookup(t.root, child) == "agriculture"


def test_insert_returns_whether_new():
    t = Trie()
    assert t.insert("tea")
    nodes = t.num_nodes()
    assert not t.insert("tea")
    assert t.num_nodes() == nodes
    assert t.size() == 1

    # A prefix of an existing word creates no nodes, but is a new word.
    assert t.insert("te")
    assert t.num_nodes() == nodes
    assert t.size() == 2


def test_insert_rejects_empty_word():
    t = Trie()
    with pytest.raises(ValueError):
        t.insert("")
    assert not t.root.is_word()


def test_num_nodes_matches_allocations():
    t = Trie.create_from_wordlist(["tea", "teapot", "sea"])
    # root + t-e-a + p-o-t + s-e-a
    assert t.num_nodes() == 10
    assert t.alloc_calls == 10


def test_destroy():
    t = Trie.create_from_wordlist(["tea", "teapot", "sea", "seat", "boggle"])
    nodes = t.num_nodes()
    assert t.alloc_calls == nodes
    assert t.free_calls == 0

    t.destroy()
    assert t.is_destroyed()
    assert t.root is None
    assert t.free_calls == nodes
    assert t.alloc_calls == t.free_calls
    assert t.size() == 0

    # Destroying again is a no-op.
    t.destroy()
    assert t.free_calls == nodes

    with pytest.raises(AssertionError):
        t.insert("tea")


def test_destroy_empty_trie():
    t = Trie()
    t.destroy()
    assert t.alloc_calls == 1
    assert t.free_calls == 1


def test_allocation_failure(monkeypatch):
    t = Trie()
    t.insert("tea")

    def fail(letter):
        raise MemoryError()

    monkeypatch.setattr(trie_module, "TrieNode", fail)
    with pytest.raises(TrieAllocationError):
        t.insert("sea")
    assert t.alloc_calls == 4


def test_lookup_table():
    t = Trie.create_from_wordlist(["at", "an"])
    table = make_lookup_table(t.root)
    assert sorted(table.values()) == ["", "a", "an", "at"]
    assert table[t.find_word("an")] == "an"
