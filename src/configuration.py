"""The configuration module."""

import tomllib
from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field

AdjustmentMode = Literal["unobserved", "zero_score"]


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "Gibberish N-gram Statistics"

    ngram_length: int = Field(3, ge=0)
    # 26^n n-grams are enumerated, so the length has to stay small.
    max_ngram_length: int = Field(4, ge=1)

    re_adjust: bool = True
    adjustment_mode: AdjustmentMode = "unobserved"

    show_progress: bool = False
    report_top: int = Field(10, ge=1)


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """Load configuration from the configuration file."""
    if not configuration_file.exists():
        logger.debug(f"No configuration file at {configuration_file}, using defaults.")
        return Configuration()

    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
