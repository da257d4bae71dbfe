"""Two-pointer solutions to sequence and string problems."""

from __future__ import annotations

from collections.abc import MutableSequence


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its unique values come first.

    Returns how many unique values there are; entries past that count are
    left as they were.
    """
    if not nums:
        return 0

    slow = 0
    for value in list(nums[1:]):
        if value != nums[slow]:
            slow += 1
            nums[slow] = value
    return slow + 1


def _is_alphanumeric(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    letters = [char.lower() for char in s if _is_alphanumeric(char)]
    return letters == letters[::-1]