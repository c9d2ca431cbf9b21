"""Logging configuration for applications embedding the parser."""

from __future__ import annotations

import logging

from src.config.settings import load_settings


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    The level comes from `level`, then from `LOG_LEVEL` via settings. Parsing never logs; only
    batch validation reports rejections, and never with the raw identity number.
    """

    log_level = (level or load_settings().log_level).upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
