"""Well-known alphabets and resolution of alphabet names."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from ..exceptions import ConfigurationError
from .alphabet import Alphabet

_BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

PRESETS: Mapping[str, str] = MappingProxyType(
    {
        # https://en.bitcoin.it/wiki/Base58Check_encoding#Base58_symbol_chart
        "bitcoin": _BASE58,
        "monero": _BASE58,
        # https://wiki.ripple.com/Encodings
        "ripple": "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz",
        # https://www.flickr.com/groups/api/discuss/72157616713786392/
        "flickr": "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
    }
)
"""Read-only mapping of preset names to their symbol orderings."""

BITCOIN = Alphabet(PRESETS["bitcoin"], size=58)
MONERO = Alphabet(PRESETS["monero"], size=58)
RIPPLE = Alphabet(PRESETS["ripple"], size=58)
FLICKR = Alphabet(PRESETS["flickr"], size=58)

_CUSTOM_PREFIX = "custom("
_CUSTOM_SUFFIX = ")"


def resolve_alphabet(value: Union[str, Alphabet]) -> Alphabet:
    """Return the alphabet named by *value*.

    *value* may be an :class:`Alphabet`, a preset name or ``custom(<symbols>)``
    with the symbols spelled out literally. Names and the ``custom`` keyword are
    case-insensitive; custom symbols are taken as written.

    Raises:
        ConfigurationError: If *value* names no known alphabet.
        AlphabetError: If the ``custom(...)`` symbols are not a valid alphabet.
    """

    if isinstance(value, Alphabet):
        return value
    if value[: len(_CUSTOM_PREFIX)].lower() == _CUSTOM_PREFIX and value.endswith(_CUSTOM_SUFFIX):
        return Alphabet(value[len(_CUSTOM_PREFIX) : -len(_CUSTOM_SUFFIX)])

    symbols = PRESETS.get(value.lower())
    if symbols is None:
        known = ", ".join(sorted(PRESETS))
        raise ConfigurationError(
            f"'{value}' is not a known alphabet (expected one of {known} or custom(...))"
        )
    return Alphabet(symbols)


__all__ = ["BITCOIN", "FLICKR", "MONERO", "PRESETS", "RIPPLE", "resolve_alphabet"]
