"""Bit and divisibility properties of integers."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF


def hamming_weight(n: int) -> int:
    """Return the number of set bits in ``n`` viewed as an unsigned 32-bit value."""
    return bin(n & _UINT32_MASK).count("1")


def is_power_of_three(n: int) -> bool:
    """Return whether ``n`` is an integral power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1