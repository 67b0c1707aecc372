"""Module with extraction of character n-grams from strings."""

from abc import ABC, abstractmethod
from typing_extensions import override

from src.data_models import Ngram


class NgramExtractor(ABC):
    """An interface of a character n-gram extractor."""

    @abstractmethod
    def extract(self, text: str, n: int) -> list[Ngram]:
        """
        Split a text into character n-grams.

        Args:
            text (str): A text to be split.
            n (int): Length of a single n-gram.

        Returns:
            list[Ngram]: N-grams in the order of their appearance, repeats included.
        """


class ContiguousNgramExtractor(NgramExtractor):
    """Sliding window over a text moving one character at a time."""

    @override
    def extract(self, text: str, n: int) -> list[Ngram]:
        return ngrams_from_string(text, n)


def ngrams_from_string(text: str, n: int) -> list[Ngram]:
    """
    Get every contiguous substring of length `n` from a text.

    Args:
        text (str): A text to be split.
        n (int): Length of a single n-gram.

    Returns:
        list[Ngram]: N-grams from left to right. Empty if the text is shorter than
            `n` or `n` is not positive.
    """
    if n <= 0:
        return []
    return [text[i : i + n] for i in range(len(text) - n + 1)]
