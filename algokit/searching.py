"""Searching in sorted data, nearest values and substring matching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_HASH_BASE = 2


def binary_search(data: Sequence[Any], target: Any) -> int | None:
    """Return the index of target in ascending data, or None if it is absent."""
    low, high = 0, len(data) - 1
    while low <= high:
        middle = (low + high) // 2
        if data[middle] == target:
            return middle
        if target < data[middle]:
            high = middle - 1
        else:
            low = middle + 1
    return None


def nearest(values: Iterable[int], target: int) -> int:
    """Return the first value with the smallest distance to target.

    Raises ValueError if values is empty.
    """
    best: int | None = None
    best_distance = None
    for value in values:
        distance = abs(value - target)
        if best_distance is None or distance < best_distance:
            best, best_distance = value, distance
    if best is None:
        raise ValueError("nearest() needs at least one value")
    return best


def find_string(parent: str, pattern: str) -> int:
    """Return the first index where pattern occurs in parent, or -1.

    Checks every window character by character.
    """
    for start in range(len(parent) - len(pattern) + 1):
        if all(parent[start + k] == char for k, char in enumerate(pattern)):
            return start
    return -1


def _window_hash(text: str) -> int:
    value = 0
    for char in text:
        value = value * _HASH_BASE + ord(char)
    return value


def rabin_karp(parent: str, pattern: str) -> list[int]:
    """Return every index where pattern occurs in parent, using a rolling hash."""
    size = len(pattern)
    if size > len(parent):
        return []
    if size == 0:
        return list(range(len(parent) + 1))
    power = _HASH_BASE ** (size - 1)
    pattern_hash = _window_hash(pattern)
    window_hash = _window_hash(parent[:size])
    matches = []
    for start in range(len(parent) - size + 1):
        if start:
            window_hash = (
                _HASH_BASE * (window_hash - ord(parent[start - 1]) * power)
                + ord(parent[start + size - 1])
            )
        if window_hash == pattern_hash and parent[start:start + size] == pattern:
            matches.append(start)
    return matches