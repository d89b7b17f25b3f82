"""Conversion of base-N symbol sequences back into byte buffers."""
from __future__ import annotations

from typing import List

from .alphabet import Alphabet
from .buffers import WritableBuffer, write_prefix
from .digits import count_leading, muladd_in_place
from .errors import InvalidSymbolError
from .types import SymbolInput

_BYTE_RADIX = 256


def symbol_digits(alphabet: Alphabet, symbols: SymbolInput) -> List[int]:
    """Map every symbol of *symbols* to its digit value.

    Raises:
        InvalidSymbolError: For the first symbol, scanning left to right,
            that is not a member of *alphabet*.
    """

    lookup = alphabet.lookup
    digits: List[int] = []
    if isinstance(symbols, str):
        for position, char in enumerate(symbols):
            code = ord(char)
            digit = lookup[code] if code <= 0xFF else -1
            if digit < 0:
                raise InvalidSymbolError(position, char)
            digits.append(digit)
        return digits

    for position, code in enumerate(memoryview(symbols).tobytes()):
        digit = lookup[code]
        if digit < 0:
            raise InvalidSymbolError(position, chr(code))
        digits.append(digit)
    return digits


def decode(alphabet: Alphabet, symbols: SymbolInput) -> bytes:
    """Decode *symbols* back into the bytes they encode.

    Leading zero-digit symbols map one-to-one onto leading zero bytes; the
    rest is read as a big-endian base-N magnitude.

    Raises:
        InvalidSymbolError: If a symbol is not part of *alphabet*. No partial
            output is produced.
    """

    digits = symbol_digits(alphabet, symbols)
    zeros = count_leading(digits, 0)

    # little-endian so the accumulator can grow by appending
    magnitude: List[int] = []
    for digit in digits[zeros:]:
        muladd_in_place(magnitude, alphabet.base, digit, _BYTE_RADIX)

    magnitude.reverse()
    return bytes(zeros) + bytes(magnitude)


def max_decoded_len(symbol_count: int) -> int:
    """Return an upper bound on the decoded length of *symbol_count* symbols."""

    if symbol_count < 0:
        raise ValueError("symbol_count must be non-negative")
    return symbol_count


def decode_into(alphabet: Alphabet, symbols: SymbolInput, buffer: WritableBuffer) -> int:
    """Decode *symbols* into the start of *buffer* and return the byte count.

    Raises:
        InvalidSymbolError: If a symbol is not part of *alphabet*.
        BufferTooSmallError: If the decoded bytes do not fit in *buffer*.
    """

    return write_prefix(buffer, decode(alphabet, symbols))


__all__ = ["decode", "decode_into", "max_decoded_len", "symbol_digits"]
