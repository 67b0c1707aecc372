"""Module enumerating every n-gram that can be built from the alphabet."""

from itertools import product

from loguru import logger

from src.configuration import config
from src.data_models import Ngram
from src.scoring.alphabet import LOWERCASE_LETTERS


def validate_ngram_length(n: int, max_length: int | None = None) -> None:
    """
    Check whether n-grams of a given length can be enumerated.

    Args:
        n (int): Length of the n-grams.
        max_length (int | None, optional): The longest length allowed. If None,
            the value from the configuration is used. Defaults to None.

    Raises:
        ValueError: Raised if `n` is negative or exceeds the allowed length.
    """
    if max_length is None:
        max_length = config.max_ngram_length
    if n < 0:
        raise ValueError(f"N-gram length cannot be negative, got {n}.")
    if n > max_length:
        raise ValueError(
            f"N-gram length {n} exceeds the limit of {max_length}; "
            f"it would enumerate {len(LOWERCASE_LETTERS) ** n} n-grams."
        )


def all_ngrams(n: int, max_length: int | None = None) -> list[Ngram]:
    """
    Get all possible n-grams of a given length.

    N-grams are ordered lexicographically: the leading letter changes slowest.

    Args:
        n (int): Length of the n-grams.
        max_length (int | None, optional): The longest length allowed. If None,
            the value from the configuration is used. Defaults to None.

    Raises:
        ValueError: Raised if `n` is negative or exceeds the allowed length.

    Returns:
        list[Ngram]: All 26^n n-grams. Empty for `n` equal to 0.
    """
    validate_ngram_length(n, max_length)
    if n == 0:
        return []

    ngrams = ["".join(letters) for letters in product(LOWERCASE_LETTERS, repeat=n)]
    logger.debug(f"Enumerated {len(ngrams)} n-grams of length {n}.")
    return ngrams
