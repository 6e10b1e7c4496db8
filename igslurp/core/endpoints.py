"""Typed page accessors for the paginated endpoints."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

CURSOR_PARAM = "next_max_id"


@dataclass(frozen=True)
class PaginationCursor:
    """
    Continuation cursor as reported by one response.

    The API reports the cursor under ``next_max_id`` on most endpoints and
    under ``max_id`` on others. ``next_max_id`` wins when both are set.
    """

    next_max_id: Optional[str] = None
    max_id: Optional[str] = None

    @classmethod
    def from_response(cls, document: Any) -> "PaginationCursor":
        """Read both cursor fields from a response object."""
        if not isinstance(document, dict):
            return cls()
        return cls(
            next_max_id=_cursor_value(document.get("next_max_id")),
            max_id=_cursor_value(document.get("max_id")),
        )

    @property
    def effective(self) -> Optional[str]:
        """The cursor to send with the next request, or None when exhausted."""
        return self.next_max_id or self.max_id


def _cursor_value(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


@dataclass
class Page:
    """One parsed page: its items and where to continue from."""

    items: List[Any] = field(default_factory=list)
    cursor: PaginationCursor = field(default_factory=PaginationCursor)


def _list_at(document: Any, path: Tuple[str, ...]) -> List[Any]:
    """
    Return the list found under ``path``.

    A missing path yields an empty list. Anything other than a list at the
    end of the path means the endpoint is wired to the wrong accessor.
    """
    node = document
    for key in path:
        if not isinstance(node, dict) or node.get(key) is None:
            return []
        node = node[key]
    if not isinstance(node, list):
        raise TypeError(f"Expected a list at {'.'.join(path)}, got {type(node).__name__}")
    return node


def _wrap_at(path: Tuple[str, ...], items: List[Any]) -> Dict[str, Any]:
    document: Any = items
    for key in reversed(path):
        document = {key: document}
    return document


@dataclass(frozen=True)
class Endpoint:
    """A paginated endpoint: where its items live and where its cursor lives."""

    name: str
    items_path: Tuple[str, ...]
    cursor_container: Optional[str] = None

    def parse_page(self, document: Any) -> Page:
        """Extract the items and continuation cursor from one response."""
        items = _list_at(document, self.items_path)
        scope = document
        if self.cursor_container and isinstance(document, dict):
            container = document.get(self.cursor_container)
            if isinstance(container, dict):
                scope = container
        return Page(items=list(items), cursor=PaginationCursor.from_response(scope))

    def wrap(self, items: List[Any]) -> Dict[str, Any]:
        """Rebuild a response-shaped document around accumulated items."""
        return _wrap_at(self.items_path, items)


ENDPOINTS: Dict[str, Endpoint] = {
    "following": Endpoint("following", ("users",)),
    "followers": Endpoint("followers", ("users",)),
    "feed": Endpoint("feed", ("items",)),
    "reels": Endpoint("reels", ("data", "items"), cursor_container="paging_info"),
}

PageAccessor = Callable[[Any], Page]


def get_endpoint(name: str) -> Endpoint:
    """Look up a paginated endpoint by name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Endpoint '{name}' does not support pagination") from None
