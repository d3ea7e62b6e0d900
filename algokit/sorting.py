"""Classic comparison sorts and score ranking."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, sorted by repeatedly swapping neighbours."""
    result = list(values)
    size = len(result)
    for done in range(size - 1):
        for j in range(size - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, fixing one position at a time from the front."""
    result = list(values)
    size = len(result)
    for i in range(size - 1):
        for j in range(i + 1, size):
            if result[i] > result[j]:
                result[i], result[j] = result[j], result[i]
    return result


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, inserting each item into the sorted prefix."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _sift_down(heap: list[Any], root: int, size: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def build_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list arranged as a max-heap."""
    heap = list(values)
    for root in reversed(range(len(heap) // 2)):
        _sift_down(heap, root, len(heap))
    return heap


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using a max-heap."""
    heap = build_heap(values)
    for end in reversed(range(1, len(heap))):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap


def rank_scores(scores: Iterable[Any]) -> list[int]:
    """Return each score's rank: one more than the number of strictly higher scores."""
    scores = list(scores)
    return [1 + sum(other > score for other in scores) for score in scores]