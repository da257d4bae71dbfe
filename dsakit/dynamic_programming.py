"""Greedy and dynamic-programming solutions to classic array problems."""

from __future__ import annotations

from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from a single buy followed by a later sell.

    Returns 0 when no profitable trade exists or fewer than two prices are given.
    """
    if len(prices) <= 1:
        return 0

    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of non-overlapping trades is allowed."""
    return sum(
        today - yesterday
        for yesterday, today in zip(prices, prices[1:])
        if today > yesterday
    )


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable from the first.

    Each entry is the maximum jump length from that position.
    """
    last = len(nums) - 1
    reach = 0
    for position, jump in enumerate(nums):
        if position > reach:
            return False
        reach = max(reach, position + jump)
        if reach >= last:
            return True
    return reach >= last