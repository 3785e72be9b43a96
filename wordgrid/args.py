"""Standard command-line arguments shared across tools."""

import argparse

from wordgrid.board import Board, read_board
from wordgrid.dictionary import LoadStats, load_trie
from wordgrid.histogram import Histogram
from wordgrid.trie import Trie


def add_standard_args(parser: argparse.ArgumentParser, *, dictionary=True):
    parser.add_argument(
        "board",
        type=str,
        help="Path to a board file: N lines of N letters each.",
    )
    if dictionary:
        parser.add_argument(
            "dictionary",
            type=str,
            help="Path to dictionary file with one word per line.",
        )
    parser.add_argument(
        "--min_length",
        type=int,
        default=1,
        help="Ignore dictionary words shorter than this.",
    )
    if dictionary:
        parser.add_argument(
            "--progress",
            action="store_true",
            help="Show a progress bar while loading the dictionary.",
        )


def get_board_from_args(args: argparse.Namespace) -> tuple[Board, Histogram]:
    board = read_board(args.board)
    return board, Histogram.from_board(board)


def get_trie_from_args(
    args: argparse.Namespace, histogram: Histogram
) -> tuple[Trie, LoadStats]:
    return load_trie(
        args.dictionary,
        histogram,
        min_length=args.min_length,
        progress=args.progress,
    )
