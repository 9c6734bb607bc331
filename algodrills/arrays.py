"""Array drills: rearranging, counting, rotating and selecting elements."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence


def arrange_halves(values: Sequence[int]) -> list[int]:
    """Run the half-arranging exchange pass and return the rearranged list.

    Every element is compared with the first half, and the larger value is
    moved forward. It is then compared with the second half, the last slot
    excluded, and the smaller value is moved forward.
    """
    items = list(values)
    size = len(items)
    mid = size // 2
    for i in range(size):
        for j in range(mid):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
        for j in range(mid, size - 1):
            if items[i] < items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def count_occurrences(values: Iterable[int]) -> dict[int, int]:
    """Map each distinct value to its count, in order of first appearance."""
    return dict(Counter(values))


def merge(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def unique_elements(values: Iterable[int]) -> list[int]:
    """Return the elements that occur exactly once, in their original order."""
    items = list(values)
    counts = Counter(items)
    return [value for value in items if counts[value] == 1]


def repeated_elements(values: Iterable[int]) -> list[int]:
    """Return each value that occurs more than once, at its first appearance."""
    counts = Counter(values)
    return [value for value, count in counts.items() if count > 1]


def product_sum(
    values: Iterable[int], weights: Iterable[int]
) -> tuple[list[int], int]:
    """Pair the sorted values with the sorted weights and multiply them.

    Returns the sorted values with the first ``len(weights)`` of them replaced
    by their products, and the sum of those products.
    """
    ordered = sorted(values)
    ordered_weights = sorted(weights)
    if len(ordered_weights) > len(ordered):
        raise ValueError("there are more weights than values")
    products = [value * weight for value, weight in zip(ordered, ordered_weights)]
    return products + ordered[len(products):], sum(products)


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


def _check_shift(values: Sequence[int], k: int) -> None:
    if not 0 <= k <= len(values):
        raise ValueError(f"shift must be between 0 and {len(values)}, got {k}")


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Rotate the sequence ``k`` places to the right."""
    _check_shift(values, k)
    split = len(values) - k
    return [*values[split:], *values[:split]]


def rotate_left(values: Sequence[int], k: int) -> list[int]:
    """Rotate the sequence ``k`` places to the left."""
    _check_shift(values, k)
    return [*values[k:], *values[:k]]


def rotate_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Rotate a square matrix a quarter turn clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(matrix))]


def shuffle_halves(values: Sequence[int]) -> list[int]:
    """Interleave the first half with the second half, starting with the first."""
    if len(values) % 2:
        raise ValueError("sequence length must be even")
    half = len(values) // 2
    return [item for pair in zip(values[:half], values[half:]) for item in pair]


def kth_max_min(values: Iterable[int], k: int) -> tuple[int, int]:
    """Return the k-th largest and the k-th smallest value."""
    ordered = sorted(values)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return ordered[-k], ordered[k - 1]


def max_and_second_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the maximum and the runner-up found by a single scan.

    Both start at the first element, so when the first element is the
    maximum the runner-up only moves if a strictly smaller value follows a
    larger runner-up candidate; otherwise it stays equal to the maximum.
    """
    iterator = iter(values)
    try:
        largest = second = next(iterator)
    except StopIteration:
        raise ValueError("sequence is empty") from None
    for value in iterator:
        if value > largest:
            second, largest = largest, value
        if second < value < largest:
            second = value
    return largest, second


def traverse(values: Iterable[int]) -> Iterator[int]:
    """Yield the elements from first to last."""
    yield from values