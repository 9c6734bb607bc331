"""Star and digit patterns, each returned as a list of text rows."""

from __future__ import annotations


def _row(spaces: int, stars: int) -> str:
    return " " * max(spaces, 0) + "*" * max(stars, 0)


def square(n: int) -> list[str]:
    """Return ``n`` rows of ``n`` stars."""
    return ["*" * n for _ in range(n)]


def hollow_square(n: int) -> list[str]:
    """Return an ``n`` by ``n`` square outline, each cell two characters wide."""
    rows = []
    for i in range(1, n + 1):
        cells = (
            "* " if i in (1, n) or j in (1, n) else "  "
            for j in range(1, n + 1)
        )
        rows.append("".join(cells))
    return rows


def right_triangle(n: int) -> list[str]:
    """Return a right-aligned triangle growing from one star to ``n``."""
    return [_row(n - i, i) for i in range(1, n + 1)]


def inverted_right_triangle(n: int) -> list[str]:
    """Return a triangle shrinking from ``n`` stars, shifted right one more space per row.

    The first row already carries one leading space.
    """
    return [_row(i, n - i + 1) for i in range(1, n + 1)]


def descending_triangle(n: int) -> list[str]:
    """Return a left-aligned triangle shrinking from ``n`` stars to one."""
    return ["*" * (n - i + 1) for i in range(1, n + 1)]


def hollow_triangle(n: int) -> list[str]:
    """Return a left-aligned triangle outline whose last row is solid."""
    rows = []
    for i in range(1, n + 1):
        if i == n or i <= 2:
            rows.append("*" * i)
        else:
            rows.append("*" + " " * (i - 2) + "*")
    return rows


def pyramid(n: int) -> list[str]:
    """Return a centred pyramid of ``n`` rows with 1, 3, 5, ... stars."""
    return [_row(n - i, 2 * i - 1) for i in range(1, n + 1)]


def inverted_pyramid(n: int) -> list[str]:
    """Return ``n + 1`` rows shrinking from ``2n - 1`` stars.

    The final row holds only ``n`` spaces.
    """
    return [_row(i, 2 * (n - i) - 1) for i in range(n + 1)]


def hourglass(n: int) -> list[str]:
    """Return a shrinking top half followed by a growing pyramid.

    The top half starts at ``2n - 3`` stars and ends with a row of
    ``n`` spaces.
    """
    top = [_row(i, 2 * (n - i) - 1) for i in range(1, n + 1)]
    return top + pyramid(n)


def diamond(n: int) -> list[str]:
    """Return a diamond whose widest row holds ``2n - 1`` stars."""
    upper = [_row(n - i - 1, 2 * i + 1) for i in range(n)]
    lower = [_row(i + 1, 2 * (n - i - 1) - 1) for i in range(n - 1)]
    return upper + lower


def number_triangle(n: int) -> list[str]:
    """Return rows counting from 1 up to the row number."""
    return ["".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1)]


def parallelogram(n: int) -> list[str]:
    """Return ``n`` rows of ``2n - 1`` stars, each shifted one place left of the one above."""
    return [_row(n - i - 1, 2 * n - 1) for i in range(n)]