# algokit

A small collection of classic algorithms written as plain Python functions,
plus a two-stack FIFO queue. It has no runtime dependencies and needs
Python 3.10 or later. The `test` extra adds pytest and hypothesis.

## Modules

### `algokit.searching`

- `median_of_sorted(nums1, nums2)`: median of the two sequences combined, as a
  float. Raises `ValueError` if both are empty.
- `search_rotated(nums, target)`: index of `target` in a rotated sorted
  sequence, or `-1` if it is absent.
- `find_min_rotated(nums)`: smallest value of a rotated sorted sequence of
  distinct values. Raises `ValueError` on an empty sequence.
- `next_greatest_letter(letters, target)`: smallest letter greater than
  `target`, or the first letter if none is greater. Raises `ValueError` on an
  empty sequence.

### `algokit.arrays`

- `set_zeroes(matrix)`: zeroes, in place, every row and column that holds a
  zero; returns `None`.
- `sort_colors(nums)`: sorts, in place, a list of 0s, 1s and 2s; returns
  `None`. Raises `ValueError` if any other value is present.
- `max_consecutive_ones(nums)`: length of the longest run of 1s (0 if none).
- `asteroid_collision(asteroids)`: asteroids left after all collisions.
  Positive values move right, negative values move left; the smaller one
  explodes, and equal ones both explode.
- `running_sum(nums)`: list of prefix sums.
- `gcd_of_extremes(nums)`: greatest common divisor of the smallest and largest
  values. Raises `ValueError` on an empty sequence.
- `count_strictly_between(nums)`: number of values that have both a strictly
  smaller and a strictly greater value in `nums`.
- `semi_ordered_moves(nums)`: adjacent swaps needed to bring 1 to the front
  and `n` to the back of a permutation of `1..n`. Raises `ValueError` if 1 or
  `n` is missing.

### `algokit.counting`

- `climb_stairs(n)`: ways to climb `n` steps taking 1 or 2 at a time. Raises
  `ValueError` for negative `n`.
- `pascal_row(row)`: row `row` (from 0) of Pascal's triangle. Raises
  `ValueError` for a negative row.
- `pascal_triangle(num_rows)`: the first `num_rows` rows (empty for zero or
  fewer).
- `target_sum_ways(nums, target)`: number of ways to put `+` or `-` before each
  number so that the sum equals `target`.
- `coin_change_ways(amount, coins)`: number of coin combinations, with
  unlimited supply, that sum to `amount`. Raises `ValueError` for a coin that
  is not positive; returns 0 for a negative amount.

### `algokit.integers`

- `hamming_weight(n)`: number of set bits of `n` taken as an unsigned 32-bit
  value.
- `is_power_of_three(n)`: whether `n` is 3 raised to a non-negative integer
  power.

### `algokit.textops`

- `reverse_vowels(s)`: reverses the order of the vowels (`aeiouAEIOU`), leaving
  every other character in place.
- `remove_adjacent_duplicates(s)`: repeatedly removes pairs of equal adjacent
  characters.
- `gcd_of_strings(a, b)`: longest string that divides both `a` and `b`, or
  `""` if there is none.
- `minimized_length(s)`: number of distinct characters in `s`.

### `algokit.stackqueue`

`TwoStackQueue` is a FIFO queue kept in two stacks. It has `push(x)`, `pop()`,
`peek()` and `is_empty()`, and supports `len()`. `pop()` and `peek()` raise
`IndexError` on an empty queue.

## Examples

```python
from algokit.searching import median_of_sorted, search_rotated
from algokit.counting import pascal_triangle, coin_change_ways
from algokit.textops import gcd_of_strings
from algokit.stackqueue import TwoStackQueue

median_of_sorted([1, 3], [2])             # 2.0
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)  # 4
pascal_triangle(3)                        # [[1], [1, 1], [1, 2, 1]]
coin_change_ways(5, [1, 2, 5])            # 4
gcd_of_strings("ABCABC", "ABC")           # "ABC"

queue = TwoStackQueue()
queue.push(1)
queue.push(2)
queue.pop()       # 1
queue.peek()      # 2
queue.is_empty()  # False
len(queue)        # 1
```

## What it does not do

The package is a library only. It has no command-line program, and it reads
no input and writes no output of its own.