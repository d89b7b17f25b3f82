"""Arbitrary-base conversion engine."""

from .alphabet import MAX_BASE, MIN_BASE, Alphabet
from .api import transcode
from .decoder import decode, decode_into, max_decoded_len
from .encoder import encode, encode_bytes, encode_into, max_encoded_len
from .errors import (
    AlphabetError,
    BufferTooSmallError,
    CodecError,
    DecodeError,
    DuplicateSymbolError,
    InvalidSizeError,
    InvalidSymbolError,
    UnsupportedSymbolError,
)
from .presets import BITCOIN, FLICKR, MONERO, PRESETS, RIPPLE, resolve_alphabet

__all__ = [
    "Alphabet",
    "AlphabetError",
    "BITCOIN",
    "BufferTooSmallError",
    "CodecError",
    "DecodeError",
    "DuplicateSymbolError",
    "FLICKR",
    "InvalidSizeError",
    "InvalidSymbolError",
    "MAX_BASE",
    "MIN_BASE",
    "MONERO",
    "PRESETS",
    "RIPPLE",
    "UnsupportedSymbolError",
    "decode",
    "decode_into",
    "encode",
    "encode_bytes",
    "encode_into",
    "max_decoded_len",
    "max_encoded_len",
    "resolve_alphabet",
    "transcode",
]
