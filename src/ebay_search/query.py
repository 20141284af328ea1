"""Search request configuration -- headers, query parameters and endpoint for one Browse API call."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from requests.exceptions import InvalidHeader
from requests.utils import check_header_validity

DEFAULT_SEARCH_URL = "https://api.sandbox.ebay.com/buy/browse/v1/item_summary/search"
DEFAULT_RESULT_LIMIT = 5
MAX_RESULT_LIMIT = 200

# Header values go out as latin-1; only visible ASCII and tab are safe.
_INVALID_TOKEN_CHARS = re.compile(r"[^\t\x20-\x7e]")


class QueryBuildError(ValueError):
    """Raised when a search configuration cannot be built from the given inputs."""


class InvalidHeaderValueError(QueryBuildError):
    """Raised when the access token cannot be carried in an HTTP header."""


class SearchConfig(BaseModel):
    """Everything needed to issue one item-summary search request.

    Instances are frozen and the header and parameter maps are read-only:
    build a new one instead of changing an existing one.
    """

    model_config = ConfigDict(frozen=True)

    app_id: Optional[str] = None
    cert_id: Optional[str] = None
    search_url: str = DEFAULT_SEARCH_URL
    headers: Mapping[str, str]
    search_parameters: Mapping[str, str]

    @field_validator("headers", "search_parameters")
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def __repr__(self) -> str:
        # Keep the bearer token out of reprs and log lines.
        return (
            f"SearchConfig(search_url={self.search_url!r}, "
            f"search_parameters={self.search_parameters!r})"
        )

    __str__ = __repr__


def build_search_config(
    search_text: str,
    access_token: str,
    *,
    limit: int = DEFAULT_RESULT_LIMIT,
    search_url: str = DEFAULT_SEARCH_URL,
    app_id: Optional[str] = None,
    cert_id: Optional[str] = None,
) -> SearchConfig:
    """Build a search configuration.

    Args:
        search_text: Free-text query, the item you are searching for.
        access_token: OAuth access token from eBay.
        limit: Maximum number of item summaries to return (1-200).
        search_url: Item-summary search endpoint.
        app_id: eBay developer application ID, if configured.
        cert_id: eBay developer certificate ID, if configured.

    Returns:
        A frozen SearchConfig.

    Raises:
        QueryBuildError: If the search text is blank or the limit is out of range.
        InvalidHeaderValueError: If the token contains characters not allowed in a header.
    """
    if not search_text or not search_text.strip():
        raise QueryBuildError("Search text must not be empty")

    if isinstance(limit, bool) or not isinstance(limit, int):
        raise QueryBuildError(f"Result limit must be an integer, got {limit!r}")
    if not 1 <= limit <= MAX_RESULT_LIMIT:
        raise QueryBuildError(
            f"Result limit must be between 1 and {MAX_RESULT_LIMIT}, got {limit}"
        )

    auth_header = ("Authorization", f"Bearer {access_token}")
    if _INVALID_TOKEN_CHARS.search(access_token):
        raise InvalidHeaderValueError(
            "Access token must contain only printable ASCII characters"
        )
    try:
        check_header_validity(auth_header)
    except InvalidHeader as exc:
        raise InvalidHeaderValueError(
            "Access token contains characters that are not valid in an HTTP header"
        ) from exc

    headers = {
        "Content-Type": "application/json",
        auth_header[0]: auth_header[1],
    }
    search_parameters = {
        "q": search_text,
        "limit": str(limit),
    }

    return SearchConfig(
        app_id=app_id,
        cert_id=cert_id,
        search_url=search_url,
        headers=headers,
        search_parameters=search_parameters,
    )
