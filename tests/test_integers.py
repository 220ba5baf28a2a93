from hypothesis import given
from hypothesis import strategies as st

from algokit.integers import hamming_weight, is_power_of_three

MASK = 0xFFFFFFFF


def test_hamming_weight_extremes():
    assert hamming_weight(0) == 0
    assert hamming_weight(MASK) == 32


def test_hamming_weight_wraps_negative():
    assert hamming_weight(-1) == 32


@given(st.integers(0, 31))
def test_hamming_weight_single_bit(k):
    assert hamming_weight(1 << k) == 1


@given(st.integers(0, MASK))
def test_hamming_weight_complement(n):
    assert hamming_weight(n) + hamming_weight(n ^ MASK) == 32


@given(st.integers(0, MASK), st.integers(0, MASK))
def test_hamming_weight_disjoint_union(a, b):
    assert hamming_weight(a | b) == hamming_weight(a) + hamming_weight(b) - hamming_weight(a & b)


@given(st.integers(0, 19))
def test_powers_of_three(k):
    assert is_power_of_three(3**k)


@given(st.integers(0, 19))
def test_doubled_powers_are_not(k):
    assert not is_power_of_three(2 * 3**k)


def test_non_positive_values():
    assert not is_power_of_three(0)
    assert not is_power_of_three(-3)
    assert not is_power_of_three(-1)