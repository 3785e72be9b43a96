from typing import Iterable, Self

LETTER_A = ord("a")
ALPHABET_SIZE = 26


class TrieAllocationError(MemoryError):
    """The trie could not grow. A partially built trie must not be used."""


def to_idx(letter: str) -> int:
    assert "a" <= letter <= "z", letter
    return ord(letter) - LETTER_A


class TrieNode:
    __slots__ = ("letter", "_children", "_is_word", "_mark")

    letter: str
    _children: list[Self | None]
    _is_word: bool
    _mark: int

    def __init__(self, letter: str = ""):
        self.letter = letter
        self._is_word = False
        self._mark = 0
        self._children = [None] * ALPHABET_SIZE

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._is_word

    def mark(self):
        return self._mark

    def set_mark(self, mark):
        self._mark = mark

    def children(self):
        return (c for c in self._children if c)

    # ---

    def set_is_word(self):
        self._is_word = True

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self.children())

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self.children())

    def find_word(self, word: str):
        node = self
        for letter in word:
            node = node.descend(to_idx(letter))
            if node is None:
                return None
        return node


class Trie:
    """Owns the root TrieNode and tracks how many nodes it allocates and frees."""

    root: TrieNode | None

    def __init__(self):
        self.alloc_calls = 0
        self.free_calls = 0
        self.root = None
        self.root = self._alloc_node("")

    def _alloc_node(self, letter: str) -> TrieNode:
        try:
            node = TrieNode(letter)
        except MemoryError as e:
            raise TrieAllocationError(f"Unable to allocate trie node for {letter!r}") from e
        self.alloc_calls += 1
        return node

    def insert(self, word: str) -> bool:
        """Add a word. Returns False if it was already present."""
        assert self.root is not None, "insert() on a destroyed trie"
        if word == "":
            raise ValueError("Cannot insert the empty word")
        node = self.root
        for letter in word:
            c = to_idx(letter)
            child = node.descend(c)
            if child is None:
                child = self._alloc_node(letter)
                node._children[c] = child
            node = child
        if node.is_word():
            return False
        node.set_is_word()
        return True

    def child(self, node: TrieNode, letter: str) -> TrieNode | None:
        return node.descend(to_idx(letter))

    def is_word(self, node: TrieNode) -> bool:
        return node.is_word()

    def find_word(self, word: str) -> TrieNode | None:
        assert self.root is not None
        return self.root.find_word(word)

    def size(self):
        return self.root.size() if self.root else 0

    def num_nodes(self):
        return self.root.num_nodes() if self.root else 0

    def reset_marks(self):
        for node in iter_nodes(self.root):
            node.set_mark(0)

    def destroy(self):
        """Release every node. The trie is empty and unusable afterwards."""
        if self.root is None:
            return
        self._free(self.root)
        self.root = None

    def _free(self, node: TrieNode):
        for i, child in enumerate(node._children):
            if child:
                self._free(child)
                node._children[i] = None
        self.free_calls += 1

    def is_destroyed(self):
        return self.root is None

    @staticmethod
    def reverse_lookup(root: TrieNode, node: TrieNode):
        return reverse_lookup(root, node)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        """words should already be lowercase a-z."""
        trie = Trie()
        for word in words:
            trie.insert(word)
        return trie


def iter_nodes(node: TrieNode | None):
    if node is None:
        return
    stack = [node]
    while stack:
        n = stack.pop()
        yield n
        stack.extend(n.children())


def reverse_lookup(root: TrieNode, node: TrieNode):
    if root is node:
        return ""
    for child in root.children():
        child_result = reverse_lookup(child, node)
        if child_result is not None:
            return child.letter + child_result
    return None


def make_lookup_table(t: TrieNode, prefix="", out=None) -> dict[TrieNode, str]:
    """Construct a TrieNode -> str table for debugging."""
    out = out if out is not None else {}
    out[t] = prefix
    for child in t.children():
        make_lookup_table(child, prefix + child.letter, out)
    return out
