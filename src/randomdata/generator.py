"""Configured random data generator.

:class:`RandomData` binds a uniform source, a secure byte source and a
:class:`~randomdata.config.ConfigModel` to the sampling helpers so callers
can write ``gen.sentence()`` instead of threading sources and defaults
through every call.  The algorithms themselves live in
:mod:`randomdata.sampling`, :mod:`randomdata.strings`, :mod:`randomdata.text`,
:mod:`randomdata.picker` and :mod:`randomdata.network` and accept any
conforming source.

Unless a seed is configured the generator is not reproducible: repeated calls
with identical arguments may return different values.
"""

from __future__ import annotations

import datetime as _dt
import enum
import threading
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import TypeVar

from . import network, picker, sampling, strings, text
from .config import ConfigModel, load_config
from .sources import (
    LockedUniformSource,
    SecureByteSource,
    UniformSource,
    default_secure_source,
    default_uniform_source,
)

__all__ = ["RandomData", "get_default"]

T = TypeVar("T")


class RandomData:
    """Generate random primitives and filler text."""

    def __init__(
        self,
        cfg: ConfigModel | None = None,
        *,
        source: UniformSource | None = None,
        secure: SecureByteSource | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration supplying defaults.  Loaded from the packaged
            defaults when omitted.
        source:
            Uniform source.  When omitted a seeded private source is created
            if ``cfg.seed`` is set, otherwise the process-wide source is used.
        secure:
            Secure byte source for string generation.  Defaults to the
            process-wide source.
        """

        if cfg is None:
            cfg = load_config()
        if source is None:
            source = (
                LockedUniformSource(cfg.seed) if cfg.seed is not None else default_uniform_source()
            )
        self.cfg: ConfigModel = cfg
        self.source: UniformSource = source
        self.secure: SecureByteSource = secure if secure is not None else default_secure_source()

    # -- Numbers -------------------------------------------------------------

    def integer(
        self, min_value: int = sampling.INT32_MIN, max_value: int = sampling.INT32_MAX
    ) -> int:
        return sampling.integer(min_value, max_value, source=self.source)

    def wide_integer(
        self, min_value: int = sampling.INT64_MIN, max_value: int = sampling.INT64_MAX
    ) -> int:
        return sampling.wide_integer(min_value, max_value, source=self.source)

    def real(self, min_value: float | None = None, max_value: float | None = None) -> float:
        return sampling.real(min_value, max_value, source=self.source)

    def decimal(self, min_value: int | None = None, max_value: int | None = None) -> Decimal:
        return sampling.decimal(min_value, max_value, source=self.source)

    def boolean(self, chance: int = 50) -> bool:
        return sampling.boolean(chance, source=self.source)

    # -- Time ----------------------------------------------------------------

    def datetime(
        self, start: _dt.datetime | None = None, end: _dt.datetime | None = None
    ) -> _dt.datetime:
        return sampling.datetime(start, end, source=self.source)

    def duration(
        self, min_value: _dt.timedelta | None = None, max_value: _dt.timedelta | None = None
    ) -> _dt.timedelta:
        return sampling.duration(min_value, max_value, source=self.source)

    # -- Structured values -----------------------------------------------------

    def version(self, min_version: str | None = None, max_version: str | None = None) -> str:
        """Return a four-part version string within the given bounds."""

        return sampling.version(
            min_version,
            max_version,
            source=self.source,
            floor=self.cfg.versions.floor_tuple,
            ceiling=self.cfg.versions.ceiling_tuple,
        )

    def enum_value(self, values: type[enum.Enum] | Sequence[T]) -> T:
        return sampling.enum_value(values, source=self.source)

    def pick(self, items: Iterable[T] | None, default: T | None = None) -> T | None:
        return picker.pick(items, default, source=self.source)

    def ipv4_address(self) -> str:
        return network.ipv4_address(source=self.source)

    def coordinate(self) -> str:
        return network.coordinate(source=self.source)

    # -- Strings ---------------------------------------------------------------

    def string(
        self,
        min_length: int | None = None,
        max_length: int | None = None,
        alphabet: str = strings.GENERAL,
    ) -> str:
        """Return a random string; lengths default to the configured bounds."""

        opts = self.cfg.strings
        return strings.random_string(
            opts.min_length if min_length is None else min_length,
            opts.max_length if max_length is None else max_length,
            alphabet,
            source=self.source,
            secure=self.secure,
            batch_size=opts.batch_size,
            max_consecutive_rejections=opts.max_consecutive_rejections,
        )

    def alpha_string(self, min_length: int | None = None, max_length: int | None = None) -> str:
        return self.string(min_length, max_length, strings.ALPHA)

    def alphanumeric_string(
        self, min_length: int | None = None, max_length: int | None = None
    ) -> str:
        return self.string(min_length, max_length, strings.ALPHANUMERIC)

    # -- Text ------------------------------------------------------------------

    def word(self, title_case: bool = True) -> str:
        return text.word(title_case, source=self.source)

    def words(
        self,
        min_words: int | None = None,
        max_words: int | None = None,
        title_first: bool = True,
        title_all: bool = True,
    ) -> str:
        opts = self.cfg.text
        return text.words(
            opts.min_words if min_words is None else min_words,
            opts.max_words if max_words is None else max_words,
            title_first,
            title_all,
            source=self.source,
        )

    def title_words(self, min_words: int | None = None, max_words: int | None = None) -> str:
        return self.words(min_words, max_words, title_all=True)

    def sentence(self, min_words: int | None = None, max_words: int | None = None) -> str:
        opts = self.cfg.text
        return text.sentence(
            opts.min_sentence_words if min_words is None else min_words,
            opts.max_sentence_words if max_words is None else max_words,
            source=self.source,
        )

    def paragraphs(
        self,
        count: int | None = None,
        min_sentences: int | None = None,
        max_sentences: int | None = None,
        min_sentence_words: int | None = None,
        max_sentence_words: int | None = None,
        html: bool = False,
    ) -> str:
        """Return filler paragraphs; omitted counts come from ``cfg.text``."""

        opts = self.cfg.text
        return text.paragraphs(
            opts.paragraph_count if count is None else count,
            opts.min_sentences if min_sentences is None else min_sentences,
            opts.max_sentences if max_sentences is None else max_sentences,
            opts.min_sentence_words if min_sentence_words is None else min_sentence_words,
            opts.max_sentence_words if max_sentence_words is None else max_sentence_words,
            html,
            source=self.source,
        )


_default_lock = threading.Lock()
_default: RandomData | None = None


def get_default() -> RandomData:
    """Return the process-wide generator built from the packaged defaults."""

    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = RandomData()
    return _default
