"""Typed exceptions for bad sampling arguments and exhausted rejection loops."""


class RandomDataError(ValueError):
    """Base class for contract errors raised on bad call-site arguments."""


class RangeInvalidError(RandomDataError):
    """Raised when a lower bound exceeds its upper bound."""


class AlphabetError(RandomDataError):
    """Base class for character pool errors."""


class AlphabetTooLargeError(AlphabetError):
    """Raised when a character pool holds more than 256 distinct entries."""


class AlphabetEmptyError(AlphabetError):
    """Raised when a character pool holds no characters."""


class CountError(RandomDataError):
    """Base class for word/sentence/paragraph count errors."""


class WordCountInvalidError(CountError):
    """Raised when a word count bound is below its floor."""


class SentenceCountInvalidError(CountError):
    """Raised when a sentence count bound is below 1."""


class ParagraphCountInvalidError(CountError):
    """Raised when a paragraph count is below 1."""


class SamplingExhaustedError(RuntimeError):
    """Raised when rejection sampling discards too many bytes in a row."""
