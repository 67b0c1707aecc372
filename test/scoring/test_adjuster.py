# test/scoring/test_adjuster.py

from src.data_models import NGramScores, Score
from src.scoring.adjuster import adjust_scores, highest_idf


def _table():
    return NGramScores(
        {
            "aa": Score(string_frequency=1, total_frequency=1, idf=0.0, observed=True),
            "ab": Score(string_frequency=1, total_frequency=2, idf=2.3, observed=True),
            "ac": Score(string_frequency=3, total_frequency=3, idf=-0.5, observed=True),
            "ad": Score(),
        }
    )


def test_highest_idf():
    assert highest_idf(_table()) == 2.3


def test_highest_idf_is_never_negative():
    table = NGramScores(
        {"aa": Score(string_frequency=1, total_frequency=1, idf=-1.0, observed=True)}
    )
    assert highest_idf(table) == 0.0
    assert highest_idf(NGramScores()) == 0.0


def test_unobserved_mode_rewrites_only_unseen_ngrams():
    table = adjust_scores(_table(), mode="unobserved")

    assert table["ad"] == Score(idf=3.0)
    assert table["aa"] == Score(
        string_frequency=1, total_frequency=1, idf=0.0, observed=True
    )
    assert table.idf("ab") == 2.3


def test_zero_score_mode_rewrites_every_zero():
    table = adjust_scores(_table(), mode="zero_score")

    assert table["ad"] == Score(idf=3.0)
    assert table["aa"] == Score(idf=3.0)
    assert not table["aa"].observed
    assert table.idf("ac") == -0.5


def test_adjustment_is_idempotent():
    once = adjust_scores(_table(), mode="unobserved")
    twice = adjust_scores(NGramScores(once), mode="unobserved")
    assert once == twice


def test_no_zero_left_unless_highest_is_zero():
    table = adjust_scores(_table(), mode="zero_score")
    assert all(score.idf != 0 for score in table.values())
