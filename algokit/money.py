"""Greedy change making with coins and banknotes."""

from __future__ import annotations

from collections.abc import Iterable

COINS = (500, 100, 50, 10)
DENOMINATIONS = (50000, 10000, 5000, 1000, 500, 100, 50, 10, 1)


def _greedy(amount: int, denominations: Iterable[int]) -> dict[int, int]:
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    counts = {}
    for value in denominations:
        counts[value], amount = divmod(amount, value)
    return counts


def coin_count(amount: int) -> int:
    """Return how many 500/100/50/10 coins make up amount; a rest below 10 is dropped."""
    return sum(_greedy(amount, COINS).values())


def currency_breakdown(amount: int) -> dict[int, int]:
    """Return the number of each note and coin, largest first, that make up amount."""
    return _greedy(amount, DENOMINATIONS)