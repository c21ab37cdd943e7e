"""Word list loading for the compound word search.

Sources
- A plain text file with one word per line (default: ``word.list``).
- The ``wordfreq`` top-N list for a language.

The search relies on the list being sorted and free of duplicates, so files
that are not already in that shape must be loaded with ``unsorted=True``.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Set

from wordfreq import top_n_list

DEFAULT_WORDLIST = Path("word.list")
DEFAULT_WORDFREQ_LANG = "en"
DEFAULT_WORDFREQ_LIMIT = 50000


def load_lines(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle]


def filter_words(
    words: Iterable[str],
    *,
    alphabetic_only: bool = False,
    min_length: int = 1,
    sort_output: bool = False,
) -> List[str]:
    """Drop empty entries and duplicates; other entries are kept exactly as given."""
    seen: Set[str] = set()
    output: List[str] = []

    for word in words:
        if not word:
            continue
        if alphabetic_only and not word.isalpha():
            continue
        if len(word) < min_length:
            continue
        if word in seen:
            continue
        seen.add(word)
        output.append(word)

    if sort_output:
        output.sort()
    return output


def load_words(
    path: Path,
    *,
    unsorted: bool = False,
    alphabetic_only: bool = False,
    min_length: int = 1,
) -> List[str]:
    """Read a word list file, sorting it only when ``unsorted`` is set."""
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    return filter_words(
        load_lines(path),
        alphabetic_only=alphabetic_only,
        min_length=min_length,
        sort_output=unsorted,
    )


def wordfreq_words(
    lang: str = DEFAULT_WORDFREQ_LANG,
    limit: int = DEFAULT_WORDFREQ_LIMIT,
    *,
    alphabetic_only: bool = False,
    min_length: int = 1,
) -> List[str]:
    """Return the ``limit`` most frequent words of ``lang``, sorted."""
    return filter_words(
        top_n_list(lang, limit, wordlist="best"),
        alphabetic_only=alphabetic_only,
        min_length=min_length,
        sort_output=True,
    )


def is_sorted(words: Sequence[str]) -> bool:
    """Tell if ``words`` is strictly ascending, i.e. sorted with no duplicates."""
    return all(a < b for a, b in zip(words, words[1:]))
