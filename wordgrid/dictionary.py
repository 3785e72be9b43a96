"""Load a word list into a Trie, skipping words that can't appear on a board."""

from dataclasses import dataclass
from typing import Iterable

from tqdm import tqdm

from wordgrid.histogram import Histogram
from wordgrid.trie import Trie


@dataclass
class LoadStats:
    lines: int = 0
    inserted: int = 0
    duplicates: int = 0
    pruned: int = 0
    skipped: int = 0


def normalize_word(line: str, min_length: int = 1) -> str | None:
    """Lowercase a dictionary line, or return None if it isn't a usable word."""
    word = line.strip().lower()
    if len(word) < max(1, min_length):
        return None
    for let in word:
        if let < "a" or let > "z":
            return None
    return word


def build_trie(
    words: Iterable[str],
    histogram: Histogram,
    *,
    min_length: int = 1,
    progress: bool = False,
) -> tuple[Trie, LoadStats]:
    trie = Trie()
    stats = LoadStats()
    try:
        for line in tqdm(words, disable=not progress, unit=" words"):
            stats.lines += 1
            word = normalize_word(line, min_length)
            if word is None:
                stats.skipped += 1
            elif not histogram.admits(word):
                stats.pruned += 1
            elif trie.insert(word):
                stats.inserted += 1
            else:
                stats.duplicates += 1
    except MemoryError:
        # Don't leave a partial dictionary around to be searched.
        trie.destroy()
        raise
    return trie, stats


def load_trie(
    dict_input: str,
    histogram: Histogram,
    *,
    min_length: int = 1,
    progress: bool = False,
) -> tuple[Trie, LoadStats]:
    with open(dict_input) as f:
        return build_trie(f, histogram, min_length=min_length, progress=progress)
