"""Integer drills: primes, digit counts and palindromes."""

from __future__ import annotations


def is_prime(number: int) -> bool:
    """Test primality by trial division from 2 up to ``number // 2 - 1``.

    The divisor range stops short of ``number // 2``, so 4 is accepted.
    """
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, number // 2))


def primes_up_to(limit: int) -> list[int]:
    """Return every number from 0 to ``limit`` that :func:`is_prime` accepts."""
    return [number for number in range(limit + 1) if is_prime(number)]


def count_digit(number: int, digit: int) -> int:
    """Count how often ``digit`` appears in the decimal form of ``number``.

    Zero has no digits to scan, so it yields a count of zero.
    """
    if not 0 <= digit <= 9:
        raise ValueError(f"digit must be between 0 and 9, got {digit}")
    remaining = abs(number)
    count = 0
    while remaining:
        remaining, last = divmod(remaining, 10)
        count += last == digit
    return count


def is_palindrome(number: int) -> bool:
    """Return whether the digits of ``number`` read the same both ways."""
    digits = str(abs(number))
    return digits == digits[::-1]