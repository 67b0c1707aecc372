"""Module smoothing scores of n-grams absent from the corpus."""

import math

from loguru import logger

from src.configuration import AdjustmentMode, config
from src.data_models import NGramScores, Score


def highest_idf(scores: NGramScores) -> float:
    """
    Get the highest IDF score in a table.

    Args:
        scores (NGramScores): The table to be searched.

    Returns:
        float: The highest IDF score, never lower than 0.
    """
    highest = 0.0
    for score in scores.values():
        highest = max(highest, score.idf)
    return highest


def _needs_adjustment(score: Score, mode: AdjustmentMode) -> bool:
    if mode == "zero_score":
        return score.idf == 0
    return not score.observed


def adjust_scores(
    scores: NGramScores, mode: AdjustmentMode | None = None
) -> NGramScores:
    """
    Treat n-grams absent from the corpus as the rarest ones.

    Their IDF score is replaced with the highest IDF in the table rounded up,
    and their frequencies are reset to 0.

    Args:
        scores (NGramScores): The table to be adjusted in place.
        mode (AdjustmentMode | None, optional): Which entries are rewritten.
            "unobserved" rewrites n-grams never seen in the corpus. "zero_score"
            rewrites every entry with IDF equal to 0, seen or not. If None,
            the value from the configuration is used. Defaults to None.

    Returns:
        NGramScores: The same, adjusted table.
    """
    if mode is None:
        mode = config.adjustment_mode

    max_idf = math.ceil(highest_idf(scores))
    smoothed = Score(idf=max_idf)
    adjusted = 0
    for ngram, score in scores.items():
        if _needs_adjustment(score, mode):
            scores[ngram] = smoothed
            adjusted += 1

    logger.debug(f"Set IDF of {adjusted} n-grams to {max_idf} ({mode} mode).")
    return scores
