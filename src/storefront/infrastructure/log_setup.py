"""Logging configuration for the storefront process."""

from __future__ import annotations

import logging

LOGGER_NAME = "storefront"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the ``storefront`` logger.

    Safe to call more than once: handlers are only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    return logger
