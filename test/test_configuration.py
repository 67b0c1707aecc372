# test/test_configuration.py

import pytest
from pydantic import ValidationError

from src.configuration import Configuration, load_configuration


def test_missing_file_gives_defaults(tmp_path):
    configuration = load_configuration(tmp_path / "missing.toml")
    assert configuration == Configuration()


def test_values_are_read_from_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('ngram_length = 2\nadjustment_mode = "zero_score"\n')

    configuration = load_configuration(path)

    assert configuration.ngram_length == 2
    assert configuration.adjustment_mode == "zero_score"
    assert configuration.re_adjust


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('adjustment_mode = "sometimes"\n')

    with pytest.raises(ValidationError):
        load_configuration(path)
