"""Unbiased random strings over small alphabets.

Characters are chosen by rejection sampling on single secure random bytes.
For an alphabet of ``k`` distinct characters every byte below
``256 - 256 % k`` maps to ``alphabet[byte % k]``; bytes at or above that
threshold are discarded.  Each retained byte therefore selects every
character with exactly equal probability.

The alphabet is deduplicated before use and may hold at most 256 characters,
so one byte can always address it.  The presets ``ALPHA`` and
``ALPHANUMERIC`` leave out glyphs that are easy to confuse when read back
(``i``, ``l``, ``o``, ``I``, ``O``, ``0`` and ``1``).
"""

from __future__ import annotations

import string as _string
from typing import Final

from .sampling import integer
from .sources import SecureByteSource, UniformSource
from .utils.errors import (
    AlphabetEmptyError,
    AlphabetTooLargeError,
    RangeInvalidError,
    SamplingExhaustedError,
)
from .utils.logging import get_logger

__all__ = [
    "BYTE_SIZE",
    "GENERAL",
    "ALPHA",
    "ALPHANUMERIC",
    "normalize_alphabet",
    "rejection_threshold",
    "random_string",
]

log = get_logger(__name__)

BYTE_SIZE: Final = 0x100

GENERAL: Final = _string.ascii_letters + _string.digits
ALPHA: Final = "abcdefghjkmnpqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
ALPHANUMERIC: Final = ALPHA + "23456789"


def normalize_alphabet(alphabet: str) -> str:
    """Return ``alphabet`` with duplicates removed, keeping first occurrences."""

    pool = "".join(dict.fromkeys(alphabet))
    if not pool:
        raise AlphabetEmptyError("alphabet must contain at least one character")
    if len(pool) > BYTE_SIZE:
        raise AlphabetTooLargeError(
            f"alphabet has {len(pool)} distinct characters; at most {BYTE_SIZE} allowed"
        )
    return pool


def rejection_threshold(size: int) -> int:
    """Return the first byte value discarded for an alphabet of ``size``."""

    return BYTE_SIZE - (BYTE_SIZE % size)


def random_string(
    min_length: int = 5,
    max_length: int = 20,
    alphabet: str = GENERAL,
    *,
    source: UniformSource,
    secure: SecureByteSource,
    batch_size: int = 128,
    max_consecutive_rejections: int = 4096,
) -> str:
    """Return a string of ``min_length..max_length`` characters from ``alphabet``.

    The length is drawn from ``source``; the characters from ``secure``.
    ``max_consecutive_rejections`` bounds the number of bytes discarded in a
    row before :class:`SamplingExhaustedError` is raised.
    """

    if min_length < 0 or max_length < 0:
        raise RangeInvalidError("string lengths must not be negative")
    pool = normalize_alphabet(alphabet)
    length = integer(min_length, max_length, source=source)

    size = len(pool)
    threshold = rejection_threshold(size)
    out: list[str] = []
    rejected = 0
    while len(out) < length:
        for byte in secure.token_bytes(batch_size):
            if byte >= threshold:
                rejected += 1
                if rejected >= max_consecutive_rejections:
                    log.error(
                        "discarded %d consecutive bytes for a %d-character alphabet",
                        rejected,
                        size,
                    )
                    raise SamplingExhaustedError(
                        f"byte source produced {rejected} consecutive unusable bytes"
                    )
                continue
            rejected = 0
            out.append(pool[byte % size])
            if len(out) == length:
                break
    return "".join(out)
