"""Generic scoring and voting routines shared by the classifiers.

Score maps are plain dicts built fresh per classification. Their insertion
order is the declared family order and decides ties.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .config import Family
from .knowledge import SourceFile


def score_families(families: Sequence[Family], haystack: Iterable[str]) -> dict[str, int]:
    """Score each family by indicator presence.

    A family earns its weight once for every indicator that is a substring
    of at least one haystack entry.
    """
    names = list(haystack)
    scores: dict[str, int] = {}
    for family in families:
        score = 0
        for indicator in family.indicators:
            if any(indicator in name for name in names):
                score += family.weight
        scores[family.key] = score
    return scores


def strict_winner(scores: dict[str, int]) -> tuple[str | None, int]:
    """Return the first key holding the highest positive score.

    A later key must exceed the running maximum to replace it, so the
    earliest declared key wins a tie. Returns (None, 0) without signal.
    """
    winner: str | None = None
    best = 0
    for key, score in scores.items():
        if score > best:
            winner, best = key, score
    return winner, best


def strict_majority(counts: dict[str, int], default: str) -> str:
    """Return the key whose count beats every other key, else ``default``."""
    for key, count in counts.items():
        if all(count > other for k, other in counts.items() if k != key):
            return key
    return default


def file_matches(file: SourceFile, patterns: Iterable[str | re.Pattern[str]]) -> bool:
    return any(re.search(p, file.content) for p in patterns)


def count_files(files: Iterable[SourceFile], *patterns: str | re.Pattern[str]) -> int:
    """Number of files in which any of ``patterns`` matches."""
    return sum(1 for f in files if file_matches(f, patterns))


def count_matches(files: Iterable[SourceFile], pattern: str | re.Pattern[str]) -> int:
    """Total number of non-overlapping matches across all files."""
    return sum(len(re.findall(pattern, f.content)) for f in files)


def tally_families(files: Sequence[SourceFile], families: Sequence[Family]) -> dict[str, int]:
    """Per-family count of files matching any of the family's markers."""
    return {family.key: count_files(files, *family.indicators) for family in families}


def exceeds(count: int, other: int, ratio: int) -> bool:
    """True when ``count`` is strictly greater than ``ratio`` times ``other``."""
    return count > other * ratio
