"""Custom exception hierarchy for the codec package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import RadixCodecError


class CodecError(RadixCodecError):
    """Base class for codec-specific exceptions."""


class AlphabetError(CodecError):
    """Raised when a candidate alphabet cannot be used as a numeral system."""


@dataclass
class InvalidSizeError(AlphabetError):
    size: int
    expected: Optional[int] = None

    def __str__(self) -> str:
        if self.expected is not None:
            return f"alphabet has {self.size} symbols, expected exactly {self.expected}"
        return f"alphabet has {self.size} symbols, must have between 2 and 256"


@dataclass
class DuplicateSymbolError(AlphabetError):
    symbol: int
    first: int
    second: int

    def __str__(self) -> str:
        return (
            f"alphabet contained a duplicate symbol {chr(self.symbol)!r} "
            f"at indexes {self.first} and {self.second}"
        )


@dataclass
class UnsupportedSymbolError(AlphabetError):
    """Raised when an alphabet entry does not fit in a single byte."""

    index: int

    def __str__(self) -> str:
        return f"alphabet contained a symbol wider than one byte at index {self.index}"


class DecodeError(CodecError):
    """Raised when a symbol sequence cannot be decoded."""


@dataclass
class InvalidSymbolError(DecodeError):
    position: int
    value: str

    def __str__(self) -> str:
        return f"invalid symbol {self.value!r} at position {self.position}"


@dataclass
class BufferTooSmallError(CodecError):
    required: int
    available: int

    def __str__(self) -> str:
        return (
            f"output buffer too small: {self.required} bytes required, "
            f"{self.available} available"
        )


__all__ = [
    "AlphabetError",
    "BufferTooSmallError",
    "CodecError",
    "DecodeError",
    "DuplicateSymbolError",
    "InvalidSizeError",
    "InvalidSymbolError",
    "UnsupportedSymbolError",
]
