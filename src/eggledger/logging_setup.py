"""Logging configuration for the command-line entry point."""

import logging
import os
from typing import Literal

Level = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVEL_ENV_VAR = "EGGLEDGER_LOG_LEVEL"


def setup_logging(level: Level | str | None = None) -> None:
    """Configure root logging once.

    Args:
        level: Level name; falls back to EGGLEDGER_LOG_LEVEL, then WARNING
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
