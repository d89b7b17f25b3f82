"""Conversion of byte buffers into base-N symbol sequences."""
from __future__ import annotations

from typing import List

from .alphabet import Alphabet
from .buffers import WritableBuffer, write_prefix
from .digits import count_leading, divmod_in_place, strip_leading_zeros
from .types import BytesLike

_BYTE_RADIX = 256


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        raise TypeError("data must be a bytes-like object, not str")
    # memoryview rejects ints, which bytes() would turn into zero-filled buffers
    return memoryview(data).tobytes()


def encode_digits(data: BytesLike, base: int) -> List[int]:
    """Return the base-*base* digits of *data*, most significant first.

    Every leading zero byte of *data* contributes one leading zero digit; the
    remaining bytes are converted as a big-endian unsigned magnitude.
    """

    payload = _as_bytes(data)
    zeros = count_leading(payload, 0)
    magnitude = list(payload[zeros:])

    digits: List[int] = []
    while magnitude:
        digits.append(divmod_in_place(magnitude, base, _BYTE_RADIX))
        strip_leading_zeros(magnitude)

    digits.extend([0] * zeros)
    digits.reverse()
    return digits


def encode_bytes(alphabet: Alphabet, data: BytesLike) -> bytes:
    """Encode *data* and return the symbols as raw bytes."""

    symbols = alphabet.symbols
    return bytes(symbols[digit] for digit in encode_digits(data, alphabet.base))


def encode(alphabet: Alphabet, data: BytesLike) -> str:
    """Encode *data* into a string of symbols from *alphabet*.

    Each symbol byte becomes the character with the same code point, so
    ASCII alphabets produce plain ASCII text. Encoding never fails.
    """

    return encode_bytes(alphabet, data).decode("latin-1")


def max_encoded_len(alphabet: Alphabet, byte_count: int) -> int:
    """Return an upper bound on the encoded length of *byte_count* bytes."""

    if byte_count < 0:
        raise ValueError("byte_count must be non-negative")
    bits_per_symbol = alphabet.base.bit_length() - 1
    return byte_count * 8 // bits_per_symbol + 1


def encode_into(alphabet: Alphabet, data: BytesLike, buffer: WritableBuffer) -> int:
    """Encode *data* into the start of *buffer* and return the symbol count.

    Raises:
        BufferTooSmallError: If the encoded symbols do not fit in *buffer*.
    """

    return write_prefix(buffer, encode_bytes(alphabet, data))


__all__ = ["encode", "encode_bytes", "encode_digits", "encode_into", "max_encoded_len"]
