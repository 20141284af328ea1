"""ebay-search: one-shot item searches against the eBay Browse API."""

from ebay_search.client import (
    EbayDecodeError,
    EbaySearchClient,
    EbaySearchError,
    EbayTransportError,
    SearchResult,
)
from ebay_search.config import AppConfig, ConfigError, load_config
from ebay_search.query import (
    InvalidHeaderValueError,
    QueryBuildError,
    SearchConfig,
    build_search_config,
)

__version__ = "0.1.0"
__all__ = [
    "AppConfig",
    "ConfigError",
    "EbayDecodeError",
    "EbaySearchClient",
    "EbaySearchError",
    "EbayTransportError",
    "InvalidHeaderValueError",
    "QueryBuildError",
    "SearchConfig",
    "SearchResult",
    "build_search_config",
    "load_config",
]
