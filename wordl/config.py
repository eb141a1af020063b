"""
Run-time settings shared by the command-line entry points.

Everything is configured from argparse flags; the defaults live here so both
apps agree on them.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

DEFAULT_WORDS_PATH = "wordl/datasets/data/words_5.txt"
DEFAULT_RANKER = "positional_freq"
DEFAULT_TOP_N = 3


@dataclass(frozen=True)
class Settings:
    words_path: str = DEFAULT_WORDS_PATH
    ranker: str = DEFAULT_RANKER
    top_n: int = DEFAULT_TOP_N
    strict: bool = True          # reject contradictory rounds instead of recording them
    include_hits: bool = False   # also fold Hit letters into the required multiset
    verbose: bool = False


def add_settings_arguments(ap: argparse.ArgumentParser, *, ranker_choices: str = "") -> None:
    """Register the flags every app understands."""
    ap.add_argument("--words", dest="words_path", default=DEFAULT_WORDS_PATH,
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--ranker", default=DEFAULT_RANKER,
                    help=f"ranker id{f' (one of: {ranker_choices})' if ranker_choices else ''}")
    ap.add_argument("--top", dest="top_n", type=int, default=DEFAULT_TOP_N,
                    help="how many suggestions to show")
    ap.add_argument("--lenient", action="store_true",
                    help="record contradictory feedback instead of rejecting it")
    ap.add_argument("--include-hits", action="store_true",
                    help="count hit letters toward the required letters")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def settings_from_args(args: argparse.Namespace) -> Settings:
    if args.top_n < 1:
        raise ValueError(f"--top must be >= 1, got {args.top_n}")
    return Settings(
        words_path=args.words_path,
        ranker=args.ranker,
        top_n=args.top_n,
        strict=not args.lenient,
        include_hits=args.include_hits,
        verbose=args.verbose,
    )
