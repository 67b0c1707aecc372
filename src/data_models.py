"""Module with project-wide data models."""

from collections.abc import Sequence
from typing import Self

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

Ngram = str
ScoreTuple = tuple[float, float, float]
TensorisedScores = tuple[list[Ngram], np.ndarray]


class Score(BaseModel):
    """Statistics of a single n-gram across a corpus."""

    string_frequency: int = Field(0, ge=0)
    total_frequency: int = Field(0, ge=0)
    idf: float = 0.0
    # Distinguishes an n-gram never seen in the corpus from a seen one scoring 0.
    observed: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_frequencies(self) -> Self:
        """Validate that a string cannot contain an n-gram fewer times than once."""
        if self.string_frequency > self.total_frequency:
            raise ValueError(
                "The string frequency of an n-gram cannot exceed its total frequency "
                f"({self.string_frequency} > {self.total_frequency})."
            )
        return self

    def as_tuple(self) -> ScoreTuple:
        """
        Convert the score to a plain triple.

        Returns:
            ScoreTuple: (string frequency, total frequency, IDF score).
        """
        return (
            float(self.string_frequency),
            float(self.total_frequency),
            self.idf,
        )


UNOBSERVED = Score()


class NGramScores(dict[Ngram, Score]):
    """Mapping of every n-gram of a given length to its score."""

    @classmethod
    def from_keys_and_values(
        cls, keys: Sequence[Ngram], values: Sequence[Score]
    ) -> Self:
        """
        Build a table from parallel sequences of n-grams and their scores.

        Args:
            keys (Sequence[Ngram]): N-grams used as keys.
            values (Sequence[Score]): Initial scores, one per key.

        Raises:
            ValueError: Raised if both sequences differ in length.

        Returns:
            Self: A new score table.
        """
        if len(keys) != len(values):
            raise ValueError(
                f"Cannot pair {len(keys)} n-grams with {len(values)} scores."
            )
        return cls(zip(keys, values, strict=True))

    def idf(self, ngram: Ngram) -> float:
        """
        Get the IDF score of an n-gram.

        Args:
            ngram (Ngram): The n-gram to be looked up.

        Raises:
            KeyError: Raised if the n-gram is not a part of the table.

        Returns:
            float: IDF score of the n-gram.
        """
        return self[ngram].idf

    def observed(self) -> dict[Ngram, Score]:
        """Get only the entries of n-grams present in the corpus."""
        return {ngram: score for ngram, score in self.items() if score.observed}

    def to_tensor(self) -> TensorisedScores:
        """
        Convert the table into a matrix for vectorised processing.

        Returns:
            TensorisedScores: N-grams and a matrix of shape (n-grams, 3) whose rows
                hold string frequency, total frequency, and IDF score of the n-gram
                at the same position.
        """
        keys = list(self.keys())
        matrix = np.array(
            [self[key].as_tuple() for key in keys], dtype=np.float64
        ).reshape(len(keys), 3)
        return keys, matrix
