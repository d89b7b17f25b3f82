"""Environment-driven settings for the command line interface."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .utils.logging import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

ALPHABET_ENV = "RADIXCODEC_ALPHABET"
DEFAULT_ALPHABET = "bitcoin"


@dataclass(frozen=True)
class Settings:
    """Defaults applied when the command line leaves an option unset.

    Values can be overridden via environment variables:
    - RADIXCODEC_ALPHABET
    - RADIXCODEC_LOG_LEVEL
    """

    alphabet: str = field(default_factory=lambda: os.getenv(ALPHABET_ENV) or DEFAULT_ALPHABET)
    log_level: str = field(
        default_factory=lambda: (os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    )


def load_settings() -> Settings:
    """Return settings read from the current environment."""

    return Settings()


__all__ = ["ALPHABET_ENV", "DEFAULT_ALPHABET", "Settings", "load_settings"]
