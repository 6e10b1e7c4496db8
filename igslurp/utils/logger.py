"""Logging configuration for igslurp."""

import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_DIR = Path.home() / ".config" / "instagram" / "logs"


def setup_logger(
    name: str = "igslurp",
    log_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    console_output: bool = False,
) -> logging.Logger:
    """
    Setup and configure logger with file and optional console handlers.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files. If None, uses ~/.config/instagram/logs
        console_output: Whether to also write log records to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        log_dir.mkdir(parents=True, exist_ok=True)

        # File handler with rotation (max 5MB, keep 3 backups)
        file_handler = RotatingFileHandler(
            log_dir / f"{name}.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            log_dir / f"{name}_errors.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(detailed_formatter)
        logger.addHandler(error_handler)
    except OSError as e:
        # Read-only home directories still get a working CLI
        print(f"Warning: file logging disabled ({e})", file=sys.stderr)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(simple_formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logger initialized: {name}")
    return logger


def get_logger(name: str = "igslurp") -> logging.Logger:
    """
    Get a module logger.

    Module loggers (``igslurp.core.client`` and friends) propagate to the
    ``igslurp`` logger configured by :func:`setup_logger`.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
