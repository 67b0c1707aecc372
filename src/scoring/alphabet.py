"""Module with the alphabet n-grams are built from."""

import string
from typing import Final

LOWERCASE_LETTERS: Final[tuple[str, ...]] = tuple(string.ascii_lowercase)
