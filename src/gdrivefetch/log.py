"""Logging setup for command-line runs."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure root logging once and return the package logger."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logger = logging.getLogger("gdrivefetch")
    logger.setLevel(level)
    return logger
