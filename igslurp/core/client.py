"""Authenticated requests against the Instagram scraper API."""

from typing import Any, Dict, Mapping, Optional

import requests

from ..storage.config import AppConfig
from ..utils.exceptions import ApiError, TransportError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class InstagramApiClient:
    """Issue one authenticated GET per call and surface API-declared errors."""

    def __init__(
        self,
        api_key: str,
        config: AppConfig,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize API client.

        Args:
            api_key: RapidAPI key
            config: Application configuration (base URL, host header, timeout)
            session: HTTP session to use. A new one is created if omitted.
        """
        self.base_url = config.base_url
        self.timeout = config.request_timeout
        self.headers = {
            "x-rapidapi-host": config.api_host,
            "x-rapidapi-key": api_key,
        }
        self.session = session if session is not None else requests.Session()

    def execute(self, endpoint: str, params: Optional[Mapping[str, str]] = None) -> Any:
        """
        Call one endpoint and return the parsed JSON document.

        Args:
            endpoint: Endpoint name, e.g. ``profile``
            params: Query parameters

        Returns:
            Parsed JSON document, unchanged

        Raises:
            ApiError: If the document carries an ``error`` that is not null or false
            TransportError: If the request fails, the body is not JSON, or the
                HTTP status signals an error without an ``error`` field
        """
        url = f"{self.base_url}/{endpoint}"
        query: Dict[str, str] = dict(params or {})
        logger.debug(f"GET {url} params={query}")

        try:
            response = self.session.get(url, params=query, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        try:
            document = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response from {endpoint} (HTTP {response.status_code})")
            raise TransportError(
                f"Invalid JSON in response from {endpoint}",
                status_code=response.status_code,
            ) from e

        # null and false mean "no error"; any other value, "" included, is one
        error = document.get("error") if isinstance(document, dict) else None
        if error is not None and error is not False:
            message = str(error)
            logger.error(f"API error from {endpoint}: {message}")
            raise ApiError(message)

        if response.status_code >= 400:
            detail = document.get("message") if isinstance(document, dict) else None
            suffix = f" ({detail})" if detail else ""
            logger.error(f"HTTP {response.status_code} from {endpoint}{suffix}")
            raise TransportError(
                f"HTTP {response.status_code} from {endpoint}{suffix}",
                status_code=response.status_code,
            )

        return document

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "InstagramApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
