"""High level helpers built on the encoder and decoder."""

from __future__ import annotations

from typing import Union

from .alphabet import Alphabet
from .decoder import decode
from .encoder import encode
from .presets import resolve_alphabet
from .types import SymbolInput


def transcode(
    symbols: SymbolInput,
    source: Union[str, Alphabet],
    target: Union[str, Alphabet],
) -> str:
    """Re-express *symbols* written in *source* using the *target* alphabet.

    Both alphabets may be given as :class:`Alphabet` instances or as names
    understood by :func:`~radixcodec.codec.presets.resolve_alphabet`. The
    leading zero-digit run of *symbols* is kept as target zero digits.
    """

    payload = decode(resolve_alphabet(source), symbols)
    return encode(resolve_alphabet(target), payload)


__all__ = ["transcode"]
