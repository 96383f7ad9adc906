"""Logging setup for the graphwalk entry points.

Library modules only call `logging.getLogger(__name__)`; handlers are
attached here, by the CLI and the HTTP server, never on import.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "graphwalk"


def setup_logger(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[str] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """Configure and return the package logger.

    Console output goes to stderr so announcement lines on stdout stay clean.

    Examples:
        >>> logger = setup_logger("DEBUG")
        >>> logger = setup_logger(log_file="walk.log")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for `name`."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
