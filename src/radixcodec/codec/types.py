"""Type aliases shared by codec components."""

from __future__ import annotations

from typing import List, Sequence, Union

BytesLike = Union[bytes, bytearray, memoryview]
"""Binary payload accepted by the encoder and the buffer targets."""

SymbolInput = Union[str, BytesLike]
"""Symbol sequence accepted by the decoder."""

AlphabetInput = Union[str, BytesLike, Sequence[int]]
"""Candidate symbol ordering accepted by :class:`~radixcodec.codec.alphabet.Alphabet`."""

DigitArray = List[int]
"""Mutable list of small integers used as a multi-precision accumulator."""


__all__ = [
    "AlphabetInput",
    "BytesLike",
    "DigitArray",
    "SymbolInput",
]
