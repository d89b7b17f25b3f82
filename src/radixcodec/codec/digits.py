"""Multi-precision arithmetic on small-integer digit arrays."""
from __future__ import annotations

from typing import Iterable

from .types import DigitArray


def count_leading(values: Iterable[int], value: int) -> int:
    """Return how many items at the start of *values* equal *value*."""

    count = 0
    for item in values:
        if item != value:
            break
        count += 1
    return count


def divmod_in_place(digits: DigitArray, divisor: int, radix: int) -> int:
    """Divide the big-endian *digits* (base *radix*) by *divisor* in place.

    The quotient replaces *digits* digit for digit, so it may gain leading
    zeros. Returns the remainder.
    """

    remainder = 0
    for index, digit in enumerate(digits):
        digits[index], remainder = divmod(remainder * radix + digit, divisor)
    return remainder


def muladd_in_place(digits: DigitArray, factor: int, addend: int, radix: int) -> None:
    """Replace the little-endian *digits* (base *radix*) by ``digits * factor + addend``.

    The array grows at its end when the carry overflows the most significant
    digit.
    """

    carry = addend
    for index, digit in enumerate(digits):
        carry += digit * factor
        digits[index] = carry % radix
        carry //= radix
    while carry:
        digits.append(carry % radix)
        carry //= radix


def strip_leading_zeros(digits: DigitArray) -> None:
    """Remove the zero digits at the front of a big-endian digit array."""

    del digits[: count_leading(digits, 0)]


__all__ = ["count_leading", "divmod_in_place", "muladd_in_place", "strip_leading_zeros"]
