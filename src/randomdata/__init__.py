"""Random values and filler text for test fixtures and data seeding.

The module-level functions below delegate to a lazily created process-wide
:class:`~randomdata.generator.RandomData`.  Construct a ``RandomData`` directly
to inject custom sources or configuration.  The command line interface lives
in :mod:`randomdata.cli`.
"""

from __future__ import annotations

from typing import Any

from .generator import RandomData, get_default
from .utils.errors import (
    AlphabetEmptyError,
    AlphabetTooLargeError,
    ParagraphCountInvalidError,
    RandomDataError,
    RangeInvalidError,
    SamplingExhaustedError,
    SentenceCountInvalidError,
    WordCountInvalidError,
)

__version__ = "0.1.0"

_FACADE = (
    "integer",
    "wide_integer",
    "real",
    "decimal",
    "boolean",
    "datetime",
    "duration",
    "version",
    "enum_value",
    "pick",
    "ipv4_address",
    "coordinate",
    "string",
    "alpha_string",
    "alphanumeric_string",
    "word",
    "words",
    "title_words",
    "sentence",
    "paragraphs",
)


def __getattr__(name: str) -> Any:
    if name in _FACADE:
        return getattr(get_default(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RandomData",
    "get_default",
    "RandomDataError",
    "RangeInvalidError",
    "AlphabetTooLargeError",
    "AlphabetEmptyError",
    "WordCountInvalidError",
    "SentenceCountInvalidError",
    "ParagraphCountInvalidError",
    "SamplingExhaustedError",
    "__version__",
    *_FACADE,
]
