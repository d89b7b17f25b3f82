"""Tests for alphabet construction and lookups."""

from __future__ import annotations

import pytest

from radixcodec.codec import (
    BITCOIN,
    Alphabet,
    AlphabetError,
    DuplicateSymbolError,
    InvalidSizeError,
    UnsupportedSymbolError,
)


def test_alphabet_exposes_base_and_symbols() -> None:
    alphabet = Alphabet("01")

    assert alphabet.base == 2
    assert len(alphabet) == 2
    assert alphabet.symbols == b"01"
    assert alphabet.zero_symbol == ord("0")
    assert alphabet.as_str() == "01"


@pytest.mark.parametrize(
    "symbols, base",
    [
        ("01", 2),
        (b"abc", 3),
        (bytearray(b"xyz"), 3),
        (memoryview(b"pq"), 2),
        ([0x41, 0x42, 0x43], 3),
        (bytes(range(256)), 256),
    ],
)
def test_alphabet_accepts_supported_inputs(symbols, base: int) -> None:
    alphabet = Alphabet(symbols)
    assert alphabet.base == base
    assert len(alphabet.symbols) == base


def test_duplicate_symbol_reports_both_indexes() -> None:
    with pytest.raises(DuplicateSymbolError) as excinfo:
        Alphabet("aab")

    error = excinfo.value
    assert (error.symbol, error.first, error.second) == (ord("a"), 0, 1)
    assert "duplicate symbol 'a' at indexes 0 and 1" in str(error)


def test_duplicate_symbol_found_after_other_symbols() -> None:
    with pytest.raises(DuplicateSymbolError) as excinfo:
        Alphabet("abcdb")

    assert (excinfo.value.first, excinfo.value.second) == (1, 4)


@pytest.mark.parametrize("symbols", ["", "a", list(range(256)) + [0]])
def test_size_outside_range_is_rejected(symbols) -> None:
    with pytest.raises(InvalidSizeError) as excinfo:
        Alphabet(symbols)

    assert excinfo.value.size == len(symbols)
    assert excinfo.value.expected is None


def test_expected_size_must_match_exactly() -> None:
    with pytest.raises(InvalidSizeError) as excinfo:
        Alphabet("abc", size=58)

    assert excinfo.value.size == 3
    assert excinfo.value.expected == 58
    assert "expected exactly 58" in str(excinfo.value)

    assert Alphabet("abc", size=3).base == 3


def test_symbols_wider_than_a_byte_are_rejected() -> None:
    with pytest.raises(UnsupportedSymbolError) as excinfo:
        Alphabet("a€")
    assert excinfo.value.index == 1

    with pytest.raises(UnsupportedSymbolError):
        Alphabet([0, 300])


def test_latin1_symbols_are_single_bytes() -> None:
    alphabet = Alphabet("a\xe9")
    assert alphabet.symbols == b"a\xe9"
    assert alphabet.digit_of("\xe9") == 1


def test_alphabet_errors_share_a_base_class() -> None:
    for bad in ("aa", "a"):
        with pytest.raises(AlphabetError):
            Alphabet(bad)


def test_digit_and_symbol_lookups() -> None:
    assert BITCOIN.digit_of("1") == 0
    assert BITCOIN.digit_of(ord("z")) == 57
    assert BITCOIN.digit_of("0") is None
    assert BITCOIN.digit_of("l") is None
    assert BITCOIN.digit_of(999) is None

    assert BITCOIN.symbol_of(0) == ord("1")
    assert BITCOIN.symbol_of(57) == ord("z")
    with pytest.raises(IndexError):
        BITCOIN.symbol_of(58)

    with pytest.raises(ValueError):
        BITCOIN.digit_of("ab")


def test_membership() -> None:
    assert "A" in BITCOIN
    assert ord("A") in BITCOIN
    assert "O" not in BITCOIN
    assert "AB" not in BITCOIN
    assert None not in BITCOIN


def test_equality_and_hashing() -> None:
    first = Alphabet("abc")
    second = Alphabet(b"abc")

    assert first == second
    assert hash(first) == hash(second)
    assert first != Alphabet("acb")
    assert len({first, second}) == 1
    assert repr(first) == "Alphabet('abc')"


def test_integer_symbols_argument_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        Alphabet(58)  # type: ignore[arg-type]


@pytest.mark.parametrize("symbol", [1.5, None, b"1"])
def test_digit_of_rejects_other_types(symbol) -> None:
    with pytest.raises(TypeError, match="symbol must be an int or a str"):
        BITCOIN.digit_of(symbol)
