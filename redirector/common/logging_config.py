"""Logging configuration for the URL redirector."""

import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Setup logging configuration.

    Logs go to stderr by default; stdout carries the interactive prompts.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to use JSON format
        stream: Stream for the console handler (defaults to sys.stderr)

    Returns:
        Configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("redirector")
    logger.setLevel(numeric_level)

    # Repeated calls (tests, reloads) must not stack handlers
    logger.handlers.clear()

    if json_format:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
