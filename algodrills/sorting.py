"""Elementary comparison sorts."""

from __future__ import annotations

from collections.abc import Iterable


def exchange_sort(values: Iterable[int]) -> list[int]:
    """Sort by swapping each position with any later, smaller element."""
    items = list(values)
    size = len(items)
    for i in range(size):
        for j in range(i + 1, size):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element into each position."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items