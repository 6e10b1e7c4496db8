"""
igslurp - Instagram API client for social media intelligence.

Fetch profiles, followers, following lists, posts, highlights and reels from
the Instagram scraper API on RapidAPI, with username resolution and
automatic cursor pagination.
"""

__version__ = "1.0.0"

from .core import (
    InstagramApiClient,
    CursorPaginator,
    IdentifierResolver,
    CommandDispatcher,
    PaginationCursor,
)
from .storage import AppConfig, get_config, CredentialResolver, resolve_credentials
from .utils import (
    IgSlurpError,
    ConfigurationError,
    ValidationError,
    UnknownCommandError,
    ApiError,
    ResolutionError,
    TransportError,
    CourtesyDelay,
    NoDelay,
    get_logger,
)

__all__ = [
    # Core
    "InstagramApiClient",
    "CursorPaginator",
    "IdentifierResolver",
    "CommandDispatcher",
    "PaginationCursor",
    # Storage
    "AppConfig",
    "get_config",
    "CredentialResolver",
    "resolve_credentials",
    # Utils
    "IgSlurpError",
    "ConfigurationError",
    "ValidationError",
    "UnknownCommandError",
    "ApiError",
    "ResolutionError",
    "TransportError",
    "CourtesyDelay",
    "NoDelay",
    "get_logger",
    # Metadata
    "__version__",
]
