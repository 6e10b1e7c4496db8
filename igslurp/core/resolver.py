"""Username to numeric user ID resolution."""

import re
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .client import InstagramApiClient
from ..utils.exceptions import ResolutionError
from ..utils.logger import get_logger

logger = get_logger(__name__)

USER_ID_ENDPOINT = "user_id_by_username"
USER_ID_FIELD = "UserID"

_NUMERIC = re.compile(r"[0-9]+")


def is_numeric_id(value: str) -> bool:
    """Return True if ``value`` is made only of ASCII digits."""
    return bool(_NUMERIC.fullmatch(value))


class IdentifierResolver:
    """Turn a username or numeric ID into a numeric user ID."""

    def __init__(self, client: InstagramApiClient, status: Optional[Console] = None):
        """
        Initialize resolver.

        Args:
            client: API client for the lookup call
            status: Console for progress notices (stderr by default)
        """
        self.client = client
        self.status = status if status is not None else Console(stderr=True)

    def resolve(self, value: str) -> str:
        """
        Resolve ``value`` to a numeric user ID.

        Numeric input is returned as is without touching the API.

        Raises:
            ResolutionError: If the lookup returns no user ID
            ApiError: If the lookup call itself fails
        """
        if is_numeric_id(value):
            return value

        self.status.print(f"[cyan]Resolving username '[yellow]{escape(value)}[/yellow]' to user ID...[/cyan]")
        logger.info(f"Resolving username {value}")

        document = self.client.execute(USER_ID_ENDPOINT, {"username": value})
        user_id = document.get(USER_ID_FIELD) if isinstance(document, dict) else None
        if user_id is None or isinstance(user_id, bool) or str(user_id).strip() == "":
            logger.error(f"No user ID returned for {value}")
            raise ResolutionError(value)

        user_id = str(user_id).strip()
        self.status.print(f"[green]Found user ID: [magenta]{user_id}[/magenta][/green]")
        logger.info(f"Resolved {value} to {user_id}")
        return user_id
