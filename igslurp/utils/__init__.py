"""Utility modules for igslurp."""

from .exceptions import (
    IgSlurpError,
    ConfigurationError,
    ValidationError,
    UnknownCommandError,
    ApiError,
    ResolutionError,
    TransportError,
)
from .logger import setup_logger, get_logger
from .rate_limiter import CourtesyDelay, NoDelay, DEFAULT_PAGE_DELAY

__all__ = [
    # Exceptions
    "IgSlurpError",
    "ConfigurationError",
    "ValidationError",
    "UnknownCommandError",
    "ApiError",
    "ResolutionError",
    "TransportError",
    # Logger
    "setup_logger",
    "get_logger",
    # Courtesy delay
    "CourtesyDelay",
    "NoDelay",
    "DEFAULT_PAGE_DELAY",
]
