# test/test_main.py

from typer.testing import CliRunner

from src.main import app

runner = CliRunner()


def test_tabulate_prints_extreme_ngrams():
    result = runner.invoke(
        app, ["tabulate", "the", "then", "that", "zebra", "--length", "2", "--top", "2"]
    )

    assert result.exit_code == 0, result.output
    assert "Rarest observed n-grams:" in result.output
    assert "Most common observed n-grams:" in result.output
    # "th" occurs in three strings, so it is the most common.
    common_section = result.output.split("Most common observed n-grams:")[1]
    assert common_section.splitlines()[1].strip().startswith("th")
    assert "IDF of unseen n-grams:" in result.output


def test_tabulate_without_adjustment():
    result = runner.invoke(
        app, ["tabulate", "aab", "abc", "--length", "2", "--no-re-adjust"]
    )
    assert result.exit_code == 0, result.output
    assert "IDF of unseen n-grams:" not in result.output


def test_tabulate_rejects_unknown_mode():
    result = runner.invoke(app, ["tabulate", "abc", "--mode", "nonsense"])
    assert result.exit_code != 0


def test_tabulate_rejects_negative_length():
    result = runner.invoke(app, ["tabulate", "abc", "--length", "-1"])
    assert result.exit_code != 0


def test_universe_shows_size_and_head():
    result = runner.invoke(app, ["universe", "--length", "2", "--head", "3"])

    assert result.exit_code == 0, result.output
    assert "676 n-grams of length 2" in result.output
    assert "aa" in result.output
    assert "ac" in result.output
    assert "ad" not in result.output
