"""eBay Browse API client -- executes a single item-summary search request."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from pydantic import BaseModel, ConfigDict

from ebay_search.query import SearchConfig, build_search_config

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class EbaySearchError(Exception):
    """Base class for failures while executing a search request."""


class EbayTransportError(EbaySearchError):
    """Raised when the request never produced an HTTP response (DNS, connection, timeout)."""


class EbayDecodeError(EbaySearchError):
    """Raised when a successful response body is not a JSON document."""


class SearchResult(BaseModel):
    """Outcome of one search request.

    ``data`` holds the parsed JSON body for 2xx responses and is ``None`` otherwise.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    data: Optional[Any] = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class EbaySearchClient:
    """Issues item-summary search requests against the eBay Browse API.

    Each call to :meth:`execute` performs exactly one GET request. Nothing is
    retried and no state is carried from one call to the next.

    Args:
        timeout: HTTP request timeout in seconds, greater than zero.
        session: Optional pre-built ``requests.Session`` to send requests with.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers["User-Agent"] = "ebay-search/0.1.0"

    def __enter__(self) -> EbaySearchClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def execute(self, config: SearchConfig) -> SearchResult:
        """Send the request described by ``config`` and return its result.

        Non-2xx responses are not errors: they come back as a result whose
        ``ok`` is False, carrying the status code and raw body.

        Args:
            config: The search configuration to send.

        Returns:
            SearchResult with the parsed JSON body on success.

        Raises:
            EbayTransportError: If the request fails before a response arrives.
            EbayDecodeError: If a 2xx body is not a JSON object or array.
        """
        logger.debug("GET %s params=%s", config.search_url, config.search_parameters)

        try:
            resp = self._session.request(
                "GET",
                config.search_url,
                params=config.search_parameters,
                headers=config.headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise EbayTransportError(
                f"Search request to {config.search_url} failed: {exc}"
            ) from exc

        body = resp.text
        if not 200 <= resp.status_code < 300:
            logger.warning(
                "Search request failed with status code %s: %s",
                resp.status_code,
                body[:500],
            )
            return SearchResult(status_code=resp.status_code, text=body)

        try:
            data = resp.json()
        except requests.JSONDecodeError as exc:
            raise EbayDecodeError(
                f"Response body is not valid JSON: {body[:200]!r}"
            ) from exc

        if not isinstance(data, (dict, list)):
            raise EbayDecodeError(
                f"Expected a JSON object or array, got {type(data).__name__}"
            )

        logger.info(
            "Search for %r returned status %s",
            config.search_parameters.get("q"),
            resp.status_code,
        )
        return SearchResult(status_code=resp.status_code, data=data, text=body)

    def search(self, search_text: str, access_token: str, **options: Any) -> SearchResult:
        """Build a configuration for ``search_text`` and execute it.

        Args:
            search_text: What to search for.
            access_token: OAuth access token from eBay.
            **options: Passed through to :func:`build_search_config`
                (``limit``, ``search_url``, ``app_id``, ``cert_id``).

        Returns:
            The SearchResult of the single request.
        """
        config = build_search_config(search_text, access_token, **options)
        return self.execute(config)
