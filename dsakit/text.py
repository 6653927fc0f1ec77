"""String algorithms."""

from __future__ import annotations

from collections import Counter


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for index, ch in enumerate(s):
        if ch in last_seen:
            left = max(left, last_seen[ch] + 1)
        last_seen[ch] = index
        best = max(best, index - left + 1)
    return best


def min_deletions(s: str) -> int:
    """Fewest characters to delete so that every character frequency is unique."""
    used: set[int] = set()
    deletions = 0
    for _, freq in sorted(Counter(s).items()):
        while freq and freq in used:
            freq -= 1
            deletions += 1
        if freq:
            used.add(freq)
    return deletions