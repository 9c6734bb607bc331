# algodrills

A collection of classic programming drills: array manipulation, number
checks, string tricks, simple sorts and star patterns. Each drill is a
plain Python function that takes its input as arguments and returns its
result, so it can be used from your own code; four of them can also be
run from the command line.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Modules

### `algodrills.arrays`

- `arrange_halves(values)`: runs an exchange pass that pushes larger
  values into the first half and smaller ones forward in the second half.
- `count_occurrences(values)`: dict of value to count, in order of first
  appearance.
- `merge(first, second)`: the elements of `first` followed by `second`.
- `unique_elements(values)`: values that occur exactly once, in order.
- `repeated_elements(values)`: each value occurring more than once, once.
- `product_sum(values, weights)`: sorts both, multiplies pairwise and
  returns the updated list and the sum of the products; raises
  `ValueError` if there are more weights than values.
- `remove_duplicates(values)`: keeps the first occurrence of each value.
- `rotate_right(values, k)`, `rotate_left(values, k)`: rotate by `k`
  places; `k` must lie between 0 and the length, else `ValueError`.
- `rotate_matrix(matrix)`: quarter turn clockwise of a square matrix.
- `shuffle_halves(values)`: interleaves the two halves of an even-length
  sequence.
- `kth_max_min(values, k)`: `(k-th largest, k-th smallest)`.
- `max_and_second_max(values)`: maximum and runner-up from a single scan
  that starts both at the first element.
- `traverse(values)`: yields the elements in order.

### `algodrills.numbers`

- `is_prime(number)`: trial division by 2 up to `number // 2 - 1`; because
  the range stops short, 4 is reported as prime.
- `primes_up_to(limit)`: every number from 0 to `limit` that `is_prime`
  accepts.
- `count_digit(number, digit)`: how often a digit appears in a number.
- `is_palindrome(number)`: whether the digits read the same both ways.

### `algodrills.strings`

- `reverse(text)`
- `non_repeating_chars(text)`: characters occurring once, by code point.
- `word_score(text)`: sum of letter positions (A=1 … Z=26) after
  upper-casing ASCII letters; other characters count as code point − 64.
- `upper_lower(text)`: ASCII letters and spaces, upper- and lower-cased.
- `permutations(text)`: generator of arrangements in swap-and-backtrack
  order.

### `algodrills.sorting`

- `exchange_sort(values)`, `selection_sort(values)`: return a new sorted
  list.

### `algodrills.patterns`

Each function returns a list of text rows: `square`, `hollow_square`,
`right_triangle`, `inverted_right_triangle`, `descending_triangle`,
`hollow_triangle`, `pyramid`, `inverted_pyramid`, `hourglass`, `diamond`,
`number_triangle`, `parallelogram`.

## Using the library

```python
from algodrills.numbers import count_digit, is_palindrome
from algodrills.strings import reverse
from algodrills.sorting import selection_sort
from algodrills.patterns import diamond

count_digit(897982, 9)                 # 2
is_palindrome(121)                     # True
reverse("hello")                       # "olleh"
selection_sort([2, 1, 4, 3, 5, 7, 6])  # [1, 2, 3, 4, 5, 6, 7]
print("\n".join(diamond(3)))
```

## Command line

Installing the package provides the `algodrills` command with four
sub-commands:

```
algodrills kth K VALUE [VALUE ...]   # k-th largest and smallest value
algodrills primes LIMIT              # numbers from 0 to LIMIT accepted by is_prime
algodrills palindrome NUMBER         # prints Yes or No
algodrills diamond SIZE              # draws a diamond of stars
```

For the full usage:

```
algodrills --help
```

## What it does not do

The command takes all its input as arguments; it does not prompt for
values. Only the four drills above are available from the command line;
the rest are reachable from Python only.