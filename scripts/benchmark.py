#!/usr/bin/env python3
"""
Benchmark script for the compound word search.
Times the sequential and the parallel search over the same word list.

Either benchmark a word list file (default: word.list) or generate a random
list with one planted compound word near the end of the sorted order, which
is the case where the parallel search pays off.
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, List
import argparse
import random
import statistics
import string
import time

from compound import find_longest, find_longest_parallel
from wordlist import DEFAULT_WORDLIST, load_words


def generate_words(count: int, seed: int, min_length: int = 5, max_length: int = 44) -> List[str]:
    """Random lowercase words plus one compound built from two of them, sorted."""
    rng = random.Random(seed)
    words = set()
    while len(words) < count:
        length = rng.randint(min_length, max_length)
        words.add("".join(rng.choice(string.ascii_lowercase) for _ in range(length)))

    late = sorted(words)[-max(2, count // 50):]
    head, tail = rng.sample(late, 2)
    words.add(head + tail)
    return sorted(words)


def benchmark(name: str, search: Callable[[], str], iterations: int) -> float:
    print(f"\n--- Benchmarking {name} (x{iterations}) ---")
    times = []
    result = ""
    for i in range(iterations):
        start = time.perf_counter()
        result = search()
        duration = time.perf_counter() - start
        times.append(duration)
        print(f"Run {i+1}: {duration:.4f}s")

    avg_time = statistics.mean(times)
    print(f"Result: {result or '(none)'} ({len(result)} chars)")
    print(f"Average: {avg_time:.4f}s")
    print(f"Min: {min(times):.4f}s")
    print(f"Max: {max(times):.4f}s")
    return avg_time


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare sequential and parallel compound word search")
    parser.add_argument('--src', type=Path, default=DEFAULT_WORDLIST,
                        help=f'Word list file (default: {DEFAULT_WORDLIST})')
    parser.add_argument('--unsorted', action='store_true',
                        help='Sort and de-duplicate the word list first')
    parser.add_argument('--generate', type=int, default=0,
                        help='Benchmark a generated list of this many random words instead of --src')
    parser.add_argument('--seed', type=int, default=0,
                        help='Seed for --generate (default: 0)')
    parser.add_argument('--iterations', '-n', type=int, default=3,
                        help='Runs per search (default: 3)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker processes for the parallel search (default: one per CPU core)')
    return parser.parse_args()


def main():
    args = parse_args()

    if args.generate:
        print(f"Generating {args.generate:,} random words...")
        words = generate_words(args.generate, args.seed)
    else:
        words = load_words(args.src, unsorted=args.unsorted)
    print(f"Words: {len(words):,}")

    sequential = benchmark("sequential", lambda: find_longest(words), args.iterations)
    parallel = benchmark("parallel", lambda: find_longest_parallel(words, args.workers), args.iterations)

    print(f"\n{'='*40}")
    print(f"Parallel / sequential: {parallel / sequential:.2f}x")


if __name__ == "__main__":
    main()
