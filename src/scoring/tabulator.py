"""Module with tabulation of n-gram occurrences across a corpus of strings."""

from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator

from loguru import logger
from tqdm import tqdm

from src.configuration import config
from src.data_models import Ngram
from src.nlp.ngrams import ContiguousNgramExtractor, NgramExtractor


class NGramSet:
    """Mapping of n-grams to the distinct strings containing them."""

    def __init__(self) -> None:
        """Initialise an empty occurrence index."""
        self._set: defaultdict[Ngram, set[str]] = defaultdict(set)

    def add(self, ngram: Ngram, text: str) -> None:
        """
        Record that a string contains an n-gram. Adding the same pair is a no-op.

        Args:
            ngram (Ngram): The n-gram found.
            text (str): The string it was found in.
        """
        self._set[ngram].add(text)

    def strings(self, ngram: Ngram) -> frozenset[str]:
        """
        Get distinct strings containing an n-gram.

        Args:
            ngram (Ngram): The n-gram to be looked up.

        Returns:
            frozenset[str]: Strings containing the n-gram, empty if it was never added.
        """
        return frozenset(self._set.get(ngram, ()))

    def update(self, other: "NGramSet") -> None:
        """Union occurrences of another index into this one."""
        for ngram, strings in other.items():
            self._set[ngram].update(strings)

    def items(self) -> Iterator[tuple[Ngram, frozenset[str]]]:
        """Iterate over n-grams and their distinct strings."""
        for ngram, strings in self._set.items():
            yield ngram, frozenset(strings)

    def __contains__(self, ngram: object) -> bool:
        return ngram in self._set

    def __len__(self) -> int:
        return len(self._set)


class CorpusTabulator:
    """Accumulator of n-gram counts and occurrences over a corpus."""

    def __init__(self, n: int, extractor: NgramExtractor | None = None) -> None:
        """
        Initialise empty tables for n-grams of a given length.

        Args:
            n (int): Length of the n-grams to be tabulated.
            extractor (NgramExtractor | None, optional): Splits strings into
                n-grams. Defaults to a contiguous sliding window.

        Raises:
            ValueError: Raised if `n` is negative.
        """
        if n < 0:
            raise ValueError(f"N-gram length cannot be negative, got {n}.")
        self.n = n
        self._extractor = extractor or ContiguousNgramExtractor()
        self._counts: Counter[Ngram] = Counter()
        self._occurrences = NGramSet()
        self._num_strings = 0

    @property
    def counts(self) -> Counter[Ngram]:
        """Total occurrences of every n-gram seen, repeats within a string included."""
        return self._counts

    @property
    def occurrences(self) -> NGramSet:
        """Distinct lower-cased strings containing every n-gram seen."""
        return self._occurrences

    @property
    def num_strings(self) -> int:
        """A number of strings processed, duplicates included."""
        return self._num_strings

    @property
    def max_frequency(self) -> int:
        """The highest total frequency of any n-gram, 0 for an empty corpus."""
        return max(self._counts.values(), default=0)

    def add_string(self, text: str) -> None:
        """
        Tabulate n-grams of a single string.

        Args:
            text (str): A corpus string. It is lower-cased before splitting.
        """
        text = text.lower()
        self._num_strings += 1
        for ngram in self._extractor.extract(text, self.n):
            self._occurrences.add(ngram, text)
            self._counts[ngram] += 1

    def add_corpus(self, corpus: Iterable[str]) -> None:
        """
        Tabulate n-grams of every string in a corpus.

        Args:
            corpus (Iterable[str]): Strings to be processed.
        """
        for text in tqdm(
            corpus,
            desc=f"Tabulating {self.n}-grams",
            unit="string",
            disable=not config.show_progress,
        ):
            self.add_string(text)
        logger.debug(
            f"Tabulated {len(self._counts)} distinct {self.n}-grams "
            f"from {self._num_strings} strings."
        )

    def merge(self, other: "CorpusTabulator") -> None:
        """
        Fold a partial tabulation of another part of the corpus into this one.

        Args:
            other (CorpusTabulator): Tabulation to be merged in.

        Raises:
            ValueError: Raised if both tabulations use different n-gram lengths.
        """
        if other.n != self.n:
            raise ValueError(
                f"Cannot merge tabulations of {other.n}-grams into {self.n}-grams."
            )
        self._counts.update(other.counts)
        self._occurrences.update(other.occurrences)
        self._num_strings += other.num_strings


def tabulate_corpus(
    corpus: Iterable[str], n: int, extractor: NgramExtractor | None = None
) -> CorpusTabulator:
    """
    Tabulate n-gram statistics of a corpus.

    Args:
        corpus (Iterable[str]): Strings to be processed.
        n (int): Length of the n-grams.
        extractor (NgramExtractor | None, optional): Splits strings into n-grams.
            Defaults to a contiguous sliding window.

    Returns:
        CorpusTabulator: Filled tables of counts and occurrences.
    """
    tabulator = CorpusTabulator(n, extractor=extractor)
    tabulator.add_corpus(corpus)
    return tabulator
