"""Command table and dispatch."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .client import InstagramApiClient
from .endpoints import CURSOR_PARAM, get_endpoint
from .pagination import CursorPaginator
from .resolver import IdentifierResolver, is_numeric_id
from ..utils.exceptions import UnknownCommandError, ValidationError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# How the positional value becomes a query parameter
BY_SHAPE = "shape"        # digits -> user_id, anything else -> username
USERNAME = "username"     # always sent as username
RESOLVE = "resolve"       # resolved to a numeric user_id first


@dataclass(frozen=True)
class Command:
    """One CLI command and how it reaches the API."""

    name: str
    endpoint: str
    identifier: str
    value_label: str
    description: str
    paged: bool = False
    paginated: bool = False


COMMANDS: Dict[str, Command] = {
    command.name: command
    for command in (
        Command("profile", "profile", BY_SHAPE, "Username or user_id",
                "Get profile information by username or user_id"),
        Command("user-id", "user_id_by_username", USERNAME, "Username",
                "Get user ID by username"),
        Command("following", "following", RESOLVE, "Username or user ID",
                "Get list of users someone is following (accepts username or user_id)",
                paged=True, paginated=True),
        Command("followers", "followers", RESOLVE, "Username or user ID",
                "Get list of followers (accepts username or user_id)",
                paged=True, paginated=True),
        Command("posts", "feed", BY_SHAPE, "User ID or username",
                "Get user's posts", paged=True, paginated=True),
        Command("highlights", "highlights", BY_SHAPE, "User ID or username",
                "Get user's story highlights"),
        Command("reels", "reels", RESOLVE, "Username or user ID",
                "Get user's reels (accepts username or user_id)",
                paged=True, paginated=True),
    )
}


def get_command(name: str) -> Command:
    """
    Look up a command by name.

    Raises:
        UnknownCommandError: If no such command exists
    """
    try:
        return COMMANDS[name]
    except KeyError:
        raise UnknownCommandError(name) from None


class CommandDispatcher:
    """Route a command and its value to the resolver, client or paginator."""

    def __init__(
        self,
        client: InstagramApiClient,
        paginator: CursorPaginator,
        resolver: IdentifierResolver,
        default_count: int = 25,
    ):
        self.client = client
        self.paginator = paginator
        self.resolver = resolver
        self.default_count = default_count

    def build_params(
        self,
        command: Command,
        value: str,
        count: Optional[int] = None,
        max_id: Optional[str] = None,
    ) -> Dict[str, str]:
        """Build the query parameters for ``command``."""
        if command.identifier == RESOLVE:
            params = {"user_id": self.resolver.resolve(value)}
        elif command.identifier == USERNAME:
            params = {"username": value}
        elif is_numeric_id(value):
            params = {"user_id": value}
        else:
            params = {"username": value}

        if command.paged:
            if max_id:
                params[CURSOR_PARAM] = max_id
            params["count"] = str(count if count is not None else self.default_count)

        return params

    def dispatch(
        self,
        name: str,
        value: Optional[str],
        count: Optional[int] = None,
        max_id: Optional[str] = None,
        auto_paginate: bool = False,
    ) -> Any:
        """
        Run one command and return the raw JSON document.

        With ``auto_paginate`` the items of every page are gathered and
        wrapped back into the endpoint's response shape.

        Raises:
            UnknownCommandError: If the command does not exist
            ValidationError: If the value is missing
        """
        command = get_command(name)
        if value is None or not value.strip():
            raise ValidationError(f"{command.value_label} is required.")
        value = value.strip()

        params = self.build_params(command, value, count=count, max_id=max_id)
        logger.info(f"Running {command.name} against {command.endpoint}")

        if auto_paginate and command.paginated:
            endpoint = get_endpoint(command.endpoint)
            items = self.paginator.paginate(command.endpoint, params, endpoint.parse_page)
            return endpoint.wrap(items)

        return self.client.execute(command.endpoint, params)
