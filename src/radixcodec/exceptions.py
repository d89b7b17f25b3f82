"""Custom exception hierarchy for the radixcodec toolkit."""
from __future__ import annotations


class RadixCodecError(Exception):
    """Base class for all radixcodec errors."""


class ConfigurationError(RadixCodecError):
    """Raised when user-supplied configuration is invalid."""


__all__ = [
    "ConfigurationError",
    "RadixCodecError",
]
