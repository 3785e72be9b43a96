#!/usr/bin/env python
"""Filter a word list to the words that could possibly appear on a board."""

import argparse
import fileinput

from wordgrid.args import add_standard_args, get_board_from_args
from wordgrid.dictionary import normalize_word


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the dictionary words that pass a board's letter filter.",
    )
    add_standard_args(parser, dictionary=False)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Word lists, or stdin"
    )
    args = parser.parse_args(argv)
    _, histogram = get_board_from_args(args)

    for line in fileinput.input(files=args.files):
        word = normalize_word(line, args.min_length)
        if word and histogram.admits(word):
            print(word)


if __name__ == "__main__":
    main()
