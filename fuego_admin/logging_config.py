"""Rotating file logging for the admin panel."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from fuego_admin.config import DEBUG, LOG_PATH


def setup_logging(log_path: str = LOG_PATH, debug: bool = DEBUG) -> logging.Logger:
    """Configure the ``fuego_admin`` logger tree once and return its root logger.

    Only a file handler is installed: the Textual app owns the terminal.
    """
    logger = logging.getLogger("fuego_admin")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    directory = os.path.dirname(log_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_handler = RotatingFileHandler(log_path, maxBytes=10_000_000, backupCount=5, encoding="utf-8")
    if debug:
        file_handler.setLevel(logging.DEBUG)
    else:
        file_handler.setLevel(logging.INFO)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)

    logger.addHandler(file_handler)

    return logger
