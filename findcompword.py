#!/usr/bin/env python3
"""
Longest compound word finder - findcompword.py

Loads a word list and prints its longest compound word: the longest word
that is also a concatenation of two or more other words in the list.

By default the word list is expected to be sorted. Pass --unsorted to sort
(and de-duplicate) it first. Pass --parallel to spread the search over all
CPU cores; among equally long compounds the sequential search reports the
first in sorted order, the parallel one any of them.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import argparse
import sys
import time

from compound import decompose, find_longest, find_longest_parallel
from wordlist import (
    DEFAULT_WORDFREQ_LANG, DEFAULT_WORDFREQ_LIMIT, DEFAULT_WORDLIST,
    is_sorted, load_words, wordfreq_words,
)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the longest compound word in a word list")
    parser.add_argument(
        "--source",
        choices=["file", "wordfreq"],
        default="file",
        help="Where to read words from: a word list file (default) or the wordfreq top-N list",
    )
    parser.add_argument(
        "--src",
        type=Path,
        default=DEFAULT_WORDLIST,
        help=f"Word list file, one word per line (default: {DEFAULT_WORDLIST})",
    )
    parser.add_argument(
        "--unsorted",
        action="store_true",
        help="The word list is not sorted; sort and de-duplicate it before searching",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Search using all CPU cores",
    )
    parser.add_argument(
        "--workers",
        type=positive_int,
        default=None,
        help="Number of worker processes for --parallel (default: one per CPU core)",
    )
    parser.add_argument(
        "--lang",
        default=DEFAULT_WORDFREQ_LANG,
        help=f"Language for --source=wordfreq (default: {DEFAULT_WORDFREQ_LANG})",
    )
    parser.add_argument(
        "--wordfreq-limit",
        type=positive_int,
        default=DEFAULT_WORDFREQ_LIMIT,
        help=f"How many of the most frequent words to load (default: {DEFAULT_WORDFREQ_LIMIT})",
    )
    parser.add_argument(
        "--alpha-only",
        action="store_true",
        help="Drop words containing non-alphabetic characters",
    )
    parser.add_argument(
        "--min-length",
        type=positive_int,
        default=1,
        help="Drop words shorter than this many characters",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while searching",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if args.source == "wordfreq":
        words = wordfreq_words(
            args.lang,
            args.wordfreq_limit,
            alphabetic_only=args.alpha_only,
            min_length=args.min_length,
        )
        label = f"wordfreq top {args.wordfreq_limit} ({args.lang})"
    else:
        try:
            words = load_words(
                args.src,
                unsorted=args.unsorted,
                alphabetic_only=args.alpha_only,
                min_length=args.min_length,
            )
        except (OSError, UnicodeDecodeError) as e:
            print(f"Failed to read word list: {e}", file=sys.stderr)
            sys.exit(1)
        label = str(args.src)

    print(f"Loaded {len(words):,} words from {label}")

    if not is_sorted(words):
        print("Warning: word list is not sorted, results may be wrong (use --unsorted)",
              file=sys.stderr)

    start = time.perf_counter()
    if args.parallel:
        longest = find_longest_parallel(words, args.workers, show_progress=args.progress)
    else:
        longest = find_longest(words, show_progress=args.progress)
    elapsed = time.perf_counter() - start

    if longest:
        print(f"Longest compound word: {longest} ({len(longest)} chars)")
        print(f"  {' | '.join(decompose(words, longest))}")
    else:
        print("No compound word found")
    print(f"Search took {elapsed:.4f}s")


if __name__ == "__main__":
    main()
