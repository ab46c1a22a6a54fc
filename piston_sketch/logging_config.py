# -*- coding: utf-8 -*-
"""Console logging for the application."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stdout handler to the ``piston_sketch`` logger."""
    logger = logging.getLogger("piston_sketch")
    logger.setLevel(level)
    # Avoid duplicate lines when the window is re-created in one process.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(handler)
    logger.debug("Logging initialized.")
    return logger
