#!/usr/bin/env python
"""Find all the words on a board and print them as they're found."""

import argparse
import sys
import time

from wordgrid.args import add_standard_args, get_board_from_args, get_trie_from_args
from wordgrid.solver import Solver


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find every dictionary word that can be spelled on a board.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Print each word once, even if there are several paths that spell it.",
    )
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print the cells used to spell each word.",
    )
    args = parser.parse_args(argv)

    board, histogram = get_board_from_args(args)
    print(f"Board is {board.n} x {board.n}")
    for row in board.letters:
        print("".join(f"{let:>2}" for let in row))

    start_s = time.time()
    trie, stats = get_trie_from_args(args, histogram)
    print(f"Filtered dictionary down to {stats.inserted} words")

    n = 0
    try:
        solver = Solver(trie, board)
        for found in solver.find_words(unique=args.unique):
            if args.paths:
                path = " ".join(f"({r},{c})" for r, c in found.path)
                print(f"Found word {found.word} ({found.row},{found.col}): {path}")
            else:
                print(f"Found word {found.word} ({found.row},{found.col})")
            n += 1
        assert board.is_clear()
    finally:
        trie.destroy()
        print(f"num alloc calls = {trie.alloc_calls}, num free calls = {trie.free_calls}")
    assert trie.alloc_calls == trie.free_calls

    elapsed_s = time.time() - start_s
    sys.stderr.write(
        f"{stats.lines} dictionary lines, {stats.pruned} pruned, "
        f"{n} words found in {elapsed_s:.2f}s\n"
    )


if __name__ == "__main__":
    main()
