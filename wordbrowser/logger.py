"""Logging configuration for the word browser."""

import logging
import sys
from pathlib import Path

import config


def setup_logger(
    name: str = "wordbrowser",
    log_path: Path | None = None,
    level: int = logging.INFO,
    console: bool = False,
) -> logging.Logger:
    """
    Set up and return a configured logger.

    Args:
        name: Logger name
        log_path: Optional log file path. If None, generates a timestamp-based one.
        level: Logging level
        console: Also echo records to stderr

    Returns:
        Configured logger instance
    """
    if log_path is None:
        log_path = config.get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # File handler - captures everything
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # The console belongs to the interactive session, so echo is opt-in
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

    logger.debug(f"Log file: {log_path}")

    return logger


def get_logger(name: str = "wordbrowser") -> logging.Logger:
    """
    Get an existing logger by name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
