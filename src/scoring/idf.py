"""Module with inverse document frequency scoring of n-grams."""

import math
from abc import ABC, abstractmethod
from typing_extensions import override


class IDFScorer(ABC):
    """An interface for scoring how distinctive an n-gram is in a corpus."""

    @abstractmethod
    def score(
        self,
        total_strings: int,
        string_frequency: int,
        total_frequency: int,
        max_frequency: int,
    ) -> float:
        """
        Score an n-gram given its frequencies in a corpus.

        Args:
            total_strings (int): A number of strings in the corpus.
            string_frequency (int): A number of distinct strings containing
                the n-gram.
            total_frequency (int): A number of all occurrences of the n-gram.
            max_frequency (int): The highest total frequency of any n-gram in
                the corpus.

        Returns:
            float: The higher the score, the rarer the n-gram.
        """

    def get_name(self) -> str:
        """
        Get name of the scorer.

        Returns:
            str: Name of the scorer.
        """
        return type(self).__name__


class ModifiedIDFScorer(IDFScorer):
    """Smoothed IDF depending only on the corpus size and the string frequency."""

    @override
    def score(
        self,
        total_strings: int,
        string_frequency: int,
        total_frequency: int,
        max_frequency: int,
    ) -> float:
        # Total and maximal frequencies do not affect this variant.
        return ngram_idf_value(total_strings, string_frequency)


def ngram_idf_value(total_strings: int, string_frequency: int) -> float:
    """
    Compute log2(total_strings / (1 + string_frequency)).

    Args:
        total_strings (int): A number of strings in the corpus.
        string_frequency (int): A number of distinct strings containing the n-gram.

    Raises:
        ValueError: Raised if the corpus is empty or the frequency is negative.

    Returns:
        float: IDF score, strictly decreasing in `string_frequency`.
    """
    if total_strings <= 0:
        raise ValueError(
            f"IDF requires a non-empty corpus, got {total_strings} strings."
        )
    if string_frequency < 0:
        raise ValueError(
            f"String frequency cannot be negative, got {string_frequency}."
        )
    return math.log2(total_strings / (1 + string_frequency))
