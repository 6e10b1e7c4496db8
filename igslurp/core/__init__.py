"""Core modules: API client, pagination, identifier resolution and dispatch."""

from .client import InstagramApiClient
from .commands import COMMANDS, Command, CommandDispatcher, get_command
from .endpoints import ENDPOINTS, Endpoint, Page, PaginationCursor
from .pagination import CursorPaginator, MAX_PAGES
from .resolver import IdentifierResolver, is_numeric_id

__all__ = [
    "InstagramApiClient",
    "COMMANDS",
    "Command",
    "CommandDispatcher",
    "get_command",
    "ENDPOINTS",
    "Endpoint",
    "Page",
    "PaginationCursor",
    "CursorPaginator",
    "MAX_PAGES",
    "IdentifierResolver",
    "is_numeric_id",
]
