"""Lorem-ipsum style filler text.

Words are drawn uniformly from :data:`randomdata.lexicon.WORDS`; every count
(words per phrase, words per sentence, sentences per paragraph) is drawn with
:func:`randomdata.sampling.integer`.  Composition rules:

* a *phrase* is words joined by single spaces.  The first word is title-cased
  when ``title_first`` or ``title_all`` is set, later words only when
  ``title_all`` is set;
* a *sentence* capitalizes its first word and ends with a period;
* *paragraphs* share a single sampled sentence count.  The first paragraph
  always opens with :data:`OPENER`, which counts as one of its sentences.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from .lexicon import WORDS
from .sampling import integer
from .sources import UniformSource
from .utils.errors import (
    ParagraphCountInvalidError,
    SentenceCountInvalidError,
    WordCountInvalidError,
)

__all__ = [
    "OPENER",
    "MIN_PHRASE_WORDS",
    "MIN_SENTENCE_WORDS",
    "upper_first",
    "word",
    "words",
    "sentence",
    "paragraphs",
]

OPENER: Final = "Lorem ipsum dolor sit amet."
MIN_PHRASE_WORDS: Final = 2
MIN_SENTENCE_WORDS: Final = 3


def upper_first(text: str) -> str:
    """Upper-case the first character that is not a space or a tab."""

    for idx, ch in enumerate(text):
        if ch not in " \t":
            return text[:idx] + ch.upper() + text[idx + 1 :]
    return text


def word(
    title_case: bool = True, *, source: UniformSource, lexicon: Sequence[str] = WORDS
) -> str:
    """Return one lexicon word, optionally with its first letter upper-cased."""

    picked = lexicon[integer(0, len(lexicon) - 1, source=source)]
    return upper_first(picked) if title_case else picked


def words(
    min_words: int = 2,
    max_words: int = 10,
    title_first: bool = True,
    title_all: bool = True,
    *,
    source: UniformSource,
    lexicon: Sequence[str] = WORDS,
) -> str:
    """Return a space separated phrase of ``min_words..max_words`` words."""

    if min_words < MIN_PHRASE_WORDS or max_words < MIN_PHRASE_WORDS:
        raise WordCountInvalidError(f"phrases need at least {MIN_PHRASE_WORDS} words")
    count = integer(min_words, max_words, source=source)
    out = [word(title_first or title_all, source=source, lexicon=lexicon)]
    out.extend(word(title_all, source=source, lexicon=lexicon) for _ in range(count - 1))
    return " ".join(out)


def _check_sentence_words(min_words: int, max_words: int) -> None:
    if min_words < MIN_SENTENCE_WORDS or max_words < MIN_SENTENCE_WORDS:
        raise WordCountInvalidError(f"sentences need at least {MIN_SENTENCE_WORDS} words")


def sentence(
    min_words: int = 5,
    max_words: int = 25,
    *,
    source: UniformSource,
    lexicon: Sequence[str] = WORDS,
) -> str:
    """Return a capitalized sentence terminated by a period."""

    _check_sentence_words(min_words, max_words)
    first = word(True, source=source, lexicon=lexicon)
    count = integer(min_words, max_words, source=source)
    rest = [word(False, source=source, lexicon=lexicon) for _ in range(count - 1)]
    return " ".join([first, *rest]) + "."


def paragraphs(
    count: int = 3,
    min_sentences: int = 3,
    max_sentences: int = 25,
    min_sentence_words: int = 5,
    max_sentence_words: int = 25,
    html: bool = False,
    *,
    source: UniformSource,
    lexicon: Sequence[str] = WORDS,
) -> str:
    """Return ``count`` paragraphs of filler text.

    With ``html`` each paragraph is wrapped in ``<p>``/``</p>``; otherwise
    paragraphs are separated by one blank line.
    """

    if count < 1:
        raise ParagraphCountInvalidError("at least one paragraph is required")
    if min_sentences < 1 or max_sentences < 1:
        raise SentenceCountInvalidError("paragraphs need at least one sentence")
    _check_sentence_words(min_sentence_words, max_sentence_words)

    per_paragraph = integer(min_sentences, max_sentences, source=source)

    def _sentences(n: int) -> list[str]:
        return [
            sentence(min_sentence_words, max_sentence_words, source=source, lexicon=lexicon)
            for _ in range(n)
        ]

    blocks = [" ".join([OPENER, *_sentences(per_paragraph - 1)])]
    blocks.extend(" ".join(_sentences(per_paragraph)) for _ in range(count - 1))

    if html:
        return "".join(f"<p>{block}</p>" for block in blocks)
    return "\n\n".join(blocks)
