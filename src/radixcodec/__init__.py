"""Arbitrary-base binary-to-text codec."""

from .codec import (
    BITCOIN,
    FLICKR,
    MONERO,
    PRESETS,
    RIPPLE,
    Alphabet,
    AlphabetError,
    BufferTooSmallError,
    CodecError,
    DecodeError,
    DuplicateSymbolError,
    InvalidSizeError,
    InvalidSymbolError,
    UnsupportedSymbolError,
    decode,
    decode_into,
    encode,
    encode_bytes,
    encode_into,
    max_decoded_len,
    max_encoded_len,
    resolve_alphabet,
    transcode,
)
from .exceptions import ConfigurationError, RadixCodecError

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "AlphabetError",
    "BITCOIN",
    "BufferTooSmallError",
    "CodecError",
    "ConfigurationError",
    "DecodeError",
    "DuplicateSymbolError",
    "FLICKR",
    "InvalidSizeError",
    "InvalidSymbolError",
    "MONERO",
    "PRESETS",
    "RIPPLE",
    "RadixCodecError",
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
