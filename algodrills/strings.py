"""String drills: reversal, character frequency, case and permutations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def non_repeating_chars(text: str) -> str:
    """Return the characters that occur exactly once, ordered by code point."""
    counts = Counter(text)
    return "".join(sorted(char for char, count in counts.items() if count == 1))


def _ascii_upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def word_score(text: str) -> int:
    """Sum letter positions, A=1 through Z=26, after upper-casing ASCII letters.

    Other characters contribute their code point minus 64.
    """
    return sum(ord(_ascii_upper(char)) - 64 for char in text)


def upper_lower(text: str) -> tuple[str, str]:
    """Return the ASCII letters and spaces of ``text`` upper-cased and lower-cased.

    All other characters are dropped from both results.
    """
    kept = [char for char in text if char == " " or char.isascii() and char.isalpha()]
    return "".join(kept).upper(), "".join(kept).lower()


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap-and-backtrack order."""
    chars = list(text)
    last = len(chars) - 1

    def permute(start: int) -> Iterator[str]:
        if start == last:
            yield "".join(chars)
            return
        for i in range(start, len(chars)):
            chars[start], chars[i] = chars[i], chars[start]
            yield from permute(start + 1)
            chars[start], chars[i] = chars[i], chars[start]

    if chars:
        yield from permute(0)