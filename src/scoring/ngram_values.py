"""Module computing n-gram statistics of a corpus for gibberish scoring."""

from collections.abc import Iterable

from loguru import logger

from src.configuration import AdjustmentMode, config
from src.data_models import UNOBSERVED, NGramScores, Score
from src.nlp.ngrams import NgramExtractor
from src.scoring.adjuster import adjust_scores
from src.scoring.idf import IDFScorer, ModifiedIDFScorer
from src.scoring.tabulator import CorpusTabulator, tabulate_corpus
from src.scoring.universe import all_ngrams, validate_ngram_length


def merge_scores(
    tabulation: CorpusTabulator, scorer: IDFScorer | None = None
) -> NGramScores:
    """
    Score every possible n-gram using statistics of a tabulated corpus.

    N-grams absent from the corpus score (0, 0, 0). N-grams seen in the corpus
    that contain characters outside the alphabet are not a part of the table.

    Args:
        tabulation (CorpusTabulator): Counts and occurrences of the corpus.
        scorer (IDFScorer | None, optional): Scorer of observed n-grams.
            Defaults to the modified IDF.

    Returns:
        NGramScores: Scores of all n-grams of the tabulated length.
    """
    scorer = scorer or ModifiedIDFScorer()
    keys = all_ngrams(tabulation.n)
    scores = NGramScores.from_keys_and_values(keys, [UNOBSERVED] * len(keys))

    max_frequency = tabulation.max_frequency
    skipped = 0
    for ngram, strings in tabulation.occurrences.items():
        if ngram not in scores:
            skipped += 1
            continue
        string_frequency = len(strings)
        total_frequency = tabulation.counts[ngram]
        scores[ngram] = Score(
            string_frequency=string_frequency,
            total_frequency=total_frequency,
            idf=scorer.score(
                total_strings=tabulation.num_strings,
                string_frequency=string_frequency,
                total_frequency=total_frequency,
                max_frequency=max_frequency,
            ),
            observed=True,
        )

    if skipped:
        logger.debug(f"Skipped {skipped} n-grams with characters outside the alphabet.")
    return scores


def ngram_values(
    corpus: Iterable[str],
    n: int | None = None,
    re_adjust: bool | None = None,
    *,
    mode: AdjustmentMode | None = None,
    scorer: IDFScorer | None = None,
    extractor: NgramExtractor | None = None,
) -> NGramScores:
    """
    Compute n-gram statistics across a corpus of strings.

    Args:
        corpus (Iterable[str]): Strings to be processed.
        n (int | None, optional): Length of the n-grams. If None, the value from
            the configuration is used. Defaults to None.
        re_adjust (bool | None, optional): Whether n-grams absent from the corpus
            should score as the rarest ones. If None, the value from
            the configuration is used. Defaults to None.
        mode (AdjustmentMode | None, optional): Which entries the adjustment
            rewrites. Defaults to the value from the configuration.
        scorer (IDFScorer | None, optional): Scorer of observed n-grams.
            Defaults to the modified IDF.
        extractor (NgramExtractor | None, optional): Splits strings into n-grams.
            Defaults to a contiguous sliding window.

    Raises:
        ValueError: Raised if `n` is negative or too large to be enumerated.

    Returns:
        NGramScores: Scores of all n-grams of length `n`.
    """
    if n is None:
        n = config.ngram_length
    if re_adjust is None:
        re_adjust = config.re_adjust

    # Fail on a bad length before scanning the whole corpus.
    validate_ngram_length(n)

    tabulation = tabulate_corpus(corpus, n, extractor=extractor)
    scores = merge_scores(tabulation, scorer=scorer)
    logger.debug(
        f"Scored {len(scores.observed())} of {len(scores)} {n}-grams "
        f"using {tabulation.num_strings} strings."
    )

    if re_adjust:
        adjust_scores(scores, mode=mode)
    return scores
