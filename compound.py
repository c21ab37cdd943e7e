"""
Compound word search - compound.py

Finds the longest word in a sorted word list that is a concatenation of two
or more other words from the same list.

Words are plain ``str`` values, so every split happens on codepoints and a
multi-byte character is never cut in half. The word list must be sorted
ascending and free of duplicates; membership is a binary search over it.
"""

from __future__ import annotations
from bisect import bisect_left
from multiprocessing import Process, Queue, cpu_count
from typing import List, Optional, Sequence, Tuple
from tqdm import tqdm
import queue
import traceback

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

WORK_QUEUE_SIZE = 1000
RESULT_QUEUE_SIZE = 1000

# How long a dispatch waits on a full work queue before draining results again
DISPATCH_POLL_SECONDS = 0.05


# ============================================================================ #
#                              HELPERS                                         #
# ============================================================================ #

def progress(iterable, desc="", total=None):
    return tqdm(iterable, desc=desc, total=total, ascii=" ▖▘▝▗▚▞█",
                bar_format='{desc}: |{bar:20}| {n_fmt}/{total_fmt}')


# ============================================================================ #
#                              MEMBERSHIP                                      #
# ============================================================================ #

def contains(words: Sequence[str], s: str) -> bool:
    """Tell if ``s`` is in the sorted ``words``."""
    i = bisect_left(words, s)
    return i < len(words) and words[i] == s


# ============================================================================ #
#                              DECOMPOSITION                                   #
# ============================================================================ #

def decompose(words: Sequence[str], word: str) -> Optional[Tuple[str, ...]]:
    """
    Split ``word`` into two or more members of ``words``.

    Split points are tried shortest prefix first. The prefix must be a member;
    the rest is then either a member or is split again. Pending suffixes are
    kept on an explicit stack, one frame per constituent taken so far, so
    words made of thousands of constituents do not hit the recursion limit.
    Every frame starts further into ``word``, so the stack never grows past
    ``len(word)``.

    Returns the constituents of the first decomposition found, or None.
    """
    n = len(word)
    # [start of the pending suffix, next split point to try]
    stack = [[0, 1]]
    parts: List[str] = []
    while stack:
        frame = stack[-1]
        start, i = frame
        if i >= n:
            stack.pop()
            if parts:
                parts.pop()
            continue
        frame[1] = i + 1
        prefix = word[start:i]
        if not contains(words, prefix):
            continue
        rest = word[i:]
        if contains(words, rest):
            return tuple(parts) + (prefix, rest)
        parts.append(prefix)
        stack.append([i, i + 1])
    return None


def compound(words: Sequence[str], word: str) -> bool:
    """Tell if ``word`` can be assembled from at least two members of ``words``."""
    return decompose(words, word) is not None


# ============================================================================ #
#                              SEQUENTIAL SEARCH                               #
# ============================================================================ #

def find_longest(words: Sequence[str], *, show_progress: bool = False) -> str:
    """
    Return the longest compound word in ``words``, or "" if there is none.

    Among equally long compounds the first in sorted order wins, since only a
    strictly longer word replaces the current best.
    """
    longest = ""
    candidates = progress(words, "Searching", len(words)) if show_progress else words
    for word in candidates:
        if len(longest) >= len(word):
            continue  # already have one at least as long
        if compound(words, word):
            longest = word
    return longest


# ============================================================================ #
#                              PARALLEL SEARCH                                 #
# ============================================================================ #

# Stop sentinel on the work queue, done marker on the result queue
_STOP = None


class CompoundSearchError(RuntimeError):
    """A worker process failed during the parallel search."""


def _compound_worker(words: Sequence[str], work_queue: Queue, result_queue: Queue) -> None:
    """Worker loop: check words until the stop sentinel, then report done."""
    try:
        for word in iter(work_queue.get, _STOP):
            if compound(words, word):
                result_queue.put(word)
    except Exception:
        result_queue.put(CompoundSearchError(traceback.format_exc()))
    finally:
        result_queue.put(_STOP)


class _Dispatcher:
    """
    Owns the current best while words are handed out to the workers.

    Workers only ever write to the result queue, so ``longest`` has a single
    writer and needs no lock. Results arrive in any order; ``longest`` only
    moves to a strictly longer candidate.

    A failure reported by a worker, or a worker that dies without reporting
    done, raises CompoundSearchError instead of waiting on it forever.
    """

    def __init__(self, work_queue: Queue, result_queue: Queue, procs: List[Process]):
        self.work_queue = work_queue
        self.result_queue = result_queue
        self.procs = procs
        self.running = len(procs)
        self.longest = ""

    def _take(self, candidate) -> None:
        if candidate is _STOP:
            self.running -= 1
        elif isinstance(candidate, CompoundSearchError):
            raise candidate
        elif len(candidate) > len(self.longest):
            self.longest = candidate

    def check_workers(self) -> None:
        """Raise if a worker exited abnormally."""
        for p in self.procs:
            if p.exitcode not in (None, 0):
                raise CompoundSearchError(f"worker {p.pid} exited with code {p.exitcode}")

    def drain(self) -> None:
        """Collect whatever results are ready without blocking."""
        while True:
            try:
                candidate = self.result_queue.get_nowait()
            except queue.Empty:
                return
            self._take(candidate)

    def send(self, item: Optional[str]) -> None:
        """Queue ``item`` for the workers, draining results while the queue is full."""
        while True:
            try:
                self.work_queue.put(item, timeout=DISPATCH_POLL_SECONDS)
                return
            except queue.Full:
                self.drain()
                self.check_workers()

    def finish(self) -> str:
        """Stop every worker and collect results until all of them are done."""
        for _ in range(self.running):
            self.send(_STOP)
        while self.running:
            try:
                candidate = self.result_queue.get(timeout=DISPATCH_POLL_SECONDS)
            except queue.Empty:
                self.check_workers()
                continue
            self._take(candidate)
        return self.longest


def find_longest_parallel(
    words: Sequence[str],
    workers: Optional[int] = None,
    *,
    show_progress: bool = False,
) -> str:
    """
    Return the longest compound word in ``words``, using all CPU cores.

    The expensive compound checks run in ``workers`` processes (default: one
    per core). Words are handed out in sorted order, but results come back in
    any order, so among equally long compounds any one may be returned.

    Raises CompoundSearchError if a worker fails; the remaining workers are
    terminated first.
    """
    n = workers or cpu_count()
    work_queue: Queue = Queue(WORK_QUEUE_SIZE)
    result_queue: Queue = Queue(RESULT_QUEUE_SIZE)

    procs = [
        Process(target=_compound_worker, args=(words, work_queue, result_queue), daemon=True)
        for _ in range(n)
    ]
    for p in procs:
        p.start()

    dispatcher = _Dispatcher(work_queue, result_queue, procs)
    try:
        candidates = progress(words, "Dispatching", len(words)) if show_progress else words
        for word in candidates:
            if len(dispatcher.longest) >= len(word):
                continue
            dispatcher.drain()
            if len(dispatcher.longest) < len(word):
                dispatcher.send(word)
        longest = dispatcher.finish()
    finally:
        if dispatcher.running:
            for p in procs:
                if p.is_alive():
                    p.terminate()
            # unread items must not keep the feeder threads alive
            work_queue.cancel_join_thread()
            result_queue.cancel_join_thread()
        for p in procs:
            p.join()
        work_queue.close()
        result_queue.close()

    return longest
