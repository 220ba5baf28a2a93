"""String transformations."""

from __future__ import annotations

import math

_VOWELS = frozenset("aeiouAEIOU")


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    reversed_vowels = reversed([c for c in s if c in _VOWELS])
    return "".join(next(reversed_vowels) if c in _VOWELS else c for c in s)


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def gcd_of_strings(a: str, b: str) -> str:
    """Return the longest string that divides both ``a`` and ``b``."""
    if a + b != b + a:
        return ""
    return a[: math.gcd(len(a), len(b))]


def minimized_length(s: str) -> int:
    """Return the length left once duplicate characters are removed."""
    return len(set(s))