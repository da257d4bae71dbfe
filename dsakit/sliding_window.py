"""Sliding-window solutions to string problems."""

from __future__ import annotations


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    start = 0
    longest = 0
    last_seen: dict[str, int] = {}

    for end, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = end
        longest = max(longest, end - start + 1)

    return longest