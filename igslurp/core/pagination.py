"""Cursor-driven pagination over the API client."""

from typing import Any, Dict, List, Mapping, Optional

from .client import InstagramApiClient
from .endpoints import CURSOR_PARAM, PageAccessor, get_endpoint
from ..utils.logger import get_logger
from ..utils.rate_limiter import CourtesyDelay

logger = get_logger(__name__)

MAX_PAGES = 50


class CursorPaginator:
    """
    Fetch every page of a collection and concatenate the items.

    Pagination is fail-fast: an error on any page propagates and whatever was
    gathered from earlier pages is discarded.
    """

    def __init__(
        self,
        client: InstagramApiClient,
        delay: Optional[CourtesyDelay] = None,
        max_pages: int = MAX_PAGES,
    ):
        """
        Initialize paginator.

        Args:
            client: API client used for every page
            delay: Pause taken between pages (0.5s fixed delay by default)
            max_pages: Page cap, at most 50
        """
        if not 1 <= max_pages <= MAX_PAGES:
            raise ValueError(f"max_pages must be between 1 and {MAX_PAGES}")
        self.client = client
        self.delay = delay if delay is not None else CourtesyDelay()
        self.max_pages = max_pages

    def paginate(
        self,
        endpoint: str,
        base_params: Mapping[str, str],
        items: Optional[PageAccessor] = None,
    ) -> List[Any]:
        """
        Fetch all pages of ``endpoint``.

        Args:
            endpoint: Endpoint name
            base_params: Query parameters sent with every page
            items: Page accessor; defaults to the endpoint's declared accessor

        Returns:
            Items of every page, in page order

        Raises:
            ApiError: If any page declares an error
            TransportError: If any page fails below the API level
        """
        parse_page = items if items is not None else get_endpoint(endpoint).parse_page

        accumulated: List[Any] = []
        cursor: Optional[str] = None
        pages = 0

        while True:
            params: Dict[str, str] = dict(base_params)
            if cursor is not None:
                params[CURSOR_PARAM] = cursor

            document = self.client.execute(endpoint, params)
            page = parse_page(document)
            accumulated.extend(page.items)
            cursor = page.cursor.effective
            pages += 1

            logger.info(
                f"Fetched {endpoint} page {pages}: {len(page.items)} items "
                f"({len(accumulated)} total)"
            )

            if cursor is None:
                break
            if pages >= self.max_pages:
                logger.warning(f"Stopped {endpoint} pagination at the {self.max_pages}-page cap")
                break

            self.delay.wait()

        return accumulated
