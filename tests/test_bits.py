import pytest

from algokit.bits import longest_subsequence


def test_example_one():
    assert longest_subsequence("1001010", 5) == 5


def test_example_two():
    assert longest_subsequence("00101001", 1) == 6


def test_all_zeros_are_kept():
    assert longest_subsequence("0000", 0) == len("0000")


def test_large_bound_keeps_everything():
    bits = "1011"
    assert longest_subsequence(bits, int(bits, 2)) == len(bits)


@pytest.mark.parametrize("bits, k", [("110100", 3), ("1111", 2), ("0101", 0), ("1", 0)])
def test_at_least_every_zero_and_at_most_length(bits, k):
    result = longest_subsequence(bits, k)
    assert bits.count("0") <= result <= len(bits)


def test_empty_string():
    assert longest_subsequence("", 10) == 0


def test_high_ones_ignored_beyond_31_bits():
    bits = "1" + "0" * 40
    assert longest_subsequence(bits, 2**62) == 40


def test_invalid_characters():
    with pytest.raises(ValueError):
        longest_subsequence("10a1", 3)