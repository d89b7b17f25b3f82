"""Validated symbol orderings used as base-N digits."""

from __future__ import annotations

from typing import Optional, Tuple, Union

from .errors import DuplicateSymbolError, InvalidSizeError, UnsupportedSymbolError
from .types import AlphabetInput

MIN_BASE = 2
MAX_BASE = 256

_ABSENT = -1
"""Lookup table marker for byte values that are not part of the alphabet."""


def _symbol_bytes(symbols: AlphabetInput) -> bytes:
    if isinstance(symbols, str):
        for index, char in enumerate(symbols):
            if ord(char) > 0xFF:
                raise UnsupportedSymbolError(index)
        return symbols.encode("latin-1")
    if isinstance(symbols, (bytes, bytearray, memoryview)):
        return bytes(symbols)
    if isinstance(symbols, int):
        raise TypeError("symbols must be a str, bytes-like object or sequence of ints")
    values = list(symbols)
    for index, value in enumerate(values):
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise UnsupportedSymbolError(index)
    return bytes(values)


class Alphabet:
    """An ordered set of distinct byte symbols defining a base-N numeral system.

    The symbol at index 0 is the zero digit: it represents leading zero bytes
    on encode and is recognised as such on decode.

    Args:
        symbols: The symbol ordering. ``str`` inputs map each character to the
            byte with the same code point, so only U+0000..U+00FF are allowed.
        size: When given, the exact number of symbols required.

    Raises:
        InvalidSizeError: If the number of symbols is outside ``[2, 256]`` or
            differs from *size*.
        DuplicateSymbolError: If a symbol occurs more than once.
        UnsupportedSymbolError: If an entry does not fit in one byte.
    """

    __slots__ = ("_symbols", "_lookup")

    def __init__(self, symbols: AlphabetInput, *, size: Optional[int] = None) -> None:
        encoded = _symbol_bytes(symbols)
        if size is not None and len(encoded) != size:
            raise InvalidSizeError(len(encoded), size)
        if not MIN_BASE <= len(encoded) <= MAX_BASE:
            raise InvalidSizeError(len(encoded))

        lookup = [_ABSENT] * 256
        for index, symbol in enumerate(encoded):
            if lookup[symbol] != _ABSENT:
                raise DuplicateSymbolError(symbol, lookup[symbol], index)
            lookup[symbol] = index

        self._symbols = encoded
        self._lookup: Tuple[int, ...] = tuple(lookup)

    @property
    def symbols(self) -> bytes:
        """Return the symbol ordering as raw bytes."""

        return self._symbols

    @property
    def base(self) -> int:
        """Return the numeric radix of the alphabet."""

        return len(self._symbols)

    @property
    def zero_symbol(self) -> int:
        return self._symbols[0]

    @property
    def lookup(self) -> Tuple[int, ...]:
        """Return the 256-entry symbol to digit table, ``-1`` for non-members."""

        return self._lookup

    def digit_of(self, symbol: Union[int, str]) -> Optional[int]:
        """Return the digit value of *symbol*, or ``None`` if it is not a member."""

        if isinstance(symbol, str):
            if len(symbol) != 1:
                raise ValueError("symbol must be a single character")
            symbol = ord(symbol)
        elif not isinstance(symbol, int):
            raise TypeError(f"symbol must be an int or a str, not {type(symbol).__name__}")
        if not 0 <= symbol <= 0xFF:
            return None
        digit = self._lookup[symbol]
        return None if digit == _ABSENT else digit

    def symbol_of(self, digit: int) -> int:
        """Return the byte value of the symbol representing *digit*."""

        if not 0 <= digit < len(self._symbols):
            raise IndexError(f"digit {digit} out of range for base {self.base}")
        return self._symbols[digit]

    def as_str(self) -> str:
        """Return the symbols as text, one character per byte."""

        return self._symbols.decode("latin-1")

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, (int, str)):
            return False
        if isinstance(symbol, str) and len(symbol) != 1:
            return False
        return self.digit_of(symbol) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({self.as_str()!r})"


__all__ = ["Alphabet", "MAX_BASE", "MIN_BASE"]
