"""Longest binary subsequence whose value does not exceed a bound."""

from __future__ import annotations

# Ones at or beyond this bit position never fit in a 32-bit signed bound.
_MAX_BIT = 31


def longest_subsequence(bits: str, k: int) -> int:
    """Return the length of the longest subsequence of ``bits`` worth at most ``k``."""
    if set(bits) - {"0", "1"}:
        raise ValueError("bits must contain only '0' and '1'")
    length = 0
    budget = k
    for position, bit in enumerate(reversed(bits)):
        if bit == "0":
            length += 1
        elif position < _MAX_BIT and budget >= 1 << position:
            budget -= 1 << position
            length += 1
    return length