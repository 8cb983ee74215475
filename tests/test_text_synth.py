from __future__ import annotations

import pytest

from randomdata.lexicon import WORDS
from randomdata.sources import LockedUniformSource
from randomdata.text import OPENER, paragraphs, sentence, upper_first, word, words
from randomdata.utils.errors import (
    ParagraphCountInvalidError,
    SentenceCountInvalidError,
    WordCountInvalidError,
)

SRC = LockedUniformSource(seed=2024)
LOWER = set(WORDS)


def test_lexicon_is_lowercase() -> None:
    assert len(WORDS) > 400
    assert all(w.isalpha() and w == w.lower() for w in WORDS)


def test_upper_first() -> None:
    assert upper_first("hello") == "Hello"
    assert upper_first("  hello") == "  Hello"
    assert upper_first("\tworld") == "\tWorld"
    assert upper_first("iPhone") == "IPhone"
    assert upper_first("") == ""
    assert upper_first("   ") == "   "


def test_word() -> None:
    for _ in range(100):
        assert word(False, source=SRC) in LOWER
        titled = word(True, source=SRC)
        assert titled[0].isupper()
        assert titled.lower() in LOWER


def test_words_count_and_casing() -> None:
    for _ in range(50):
        out = words(4, 4, source=SRC).split(" ")
        assert len(out) == 4
        assert all(w[0].isupper() for w in out)


def test_words_title_first_only() -> None:
    for _ in range(50):
        out = words(3, 6, title_first=True, title_all=False, source=SRC).split(" ")
        assert 3 <= len(out) <= 6
        assert out[0][0].isupper()
        assert all(w in LOWER for w in out[1:])


def test_words_no_title() -> None:
    out = words(5, 5, title_first=False, title_all=False, source=SRC).split(" ")
    assert all(w in LOWER for w in out)


@pytest.mark.parametrize(("lo", "hi"), [(1, 5), (2, 1), (0, 0)])
def test_words_bounds(lo: int, hi: int) -> None:
    with pytest.raises(WordCountInvalidError):
        words(lo, hi, source=SRC)


def test_sentence_shape() -> None:
    for _ in range(100):
        out = sentence(source=SRC)
        assert out.endswith(".")
        assert out[0].isupper()
        assert 5 <= len(out.split(" ")) <= 25


def test_sentence_exact_count() -> None:
    out = sentence(3, 3, source=SRC)
    tokens = out[:-1].split(" ")
    assert len(tokens) == 3
    assert all(t in LOWER for t in tokens[1:])


@pytest.mark.parametrize(("lo", "hi"), [(2, 5), (5, 2)])
def test_sentence_bounds(lo: int, hi: int) -> None:
    with pytest.raises(WordCountInvalidError):
        sentence(lo, hi, source=SRC)


def test_paragraphs_html() -> None:
    out = paragraphs(2, html=True, source=SRC)
    assert out.count("<p>") == 2
    assert out.count("</p>") == 2
    assert out.startswith("<p>" + OPENER)
    assert out.endswith("</p>")


def test_paragraphs_plain() -> None:
    out = paragraphs(2, html=False, source=SRC)
    assert out.count("\n\n") == 1
    assert "<p>" not in out
    assert out.startswith(OPENER)


def test_paragraphs_share_sentence_count() -> None:
    for _ in range(20):
        blocks = paragraphs(4, 1, 6, 3, 5, source=SRC).split("\n\n")
        assert len(blocks) == 4
        counts = {block.count(".") for block in blocks}
        assert len(counts) == 1
        assert 1 <= counts.pop() <= 6


def test_paragraphs_single_sentence() -> None:
    assert paragraphs(1, 1, 1, source=SRC) == OPENER


def test_paragraphs_bounds() -> None:
    with pytest.raises(ParagraphCountInvalidError):
        paragraphs(0, source=SRC)
    with pytest.raises(SentenceCountInvalidError):
        paragraphs(1, 0, 3, source=SRC)
    with pytest.raises(SentenceCountInvalidError):
        paragraphs(1, 1, 0, source=SRC)
    with pytest.raises(WordCountInvalidError):
        paragraphs(1, 1, 1, 2, 5, source=SRC)
