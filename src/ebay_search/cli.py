"""`ebay-search` command line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ebay_search.client import EbaySearchClient, EbaySearchError, SearchResult
from ebay_search.config import ConfigError, load_config
from ebay_search.query import QueryBuildError, build_search_config

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "laptop"

EXIT_OK = 0
EXIT_REQUEST_FAILED = 1
EXIT_CONFIG_ERROR = 2


def render_result(result: SearchResult) -> str:
    """Format a search result for the console."""
    if result.ok:
        return json.dumps(result.data, indent=2, ensure_ascii=False)
    return f"Request failed with status code: {result.status_code}"


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ebay-search",
        description="Search eBay item summaries and print the JSON response.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=DEFAULT_QUERY,
        help="Text to search for (default: %(default)s).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to the TOML config file (default: ./config.toml).",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of results.")
    parser.add_argument("--endpoint", help="Override the item-summary search URL.")
    parser.add_argument("--timeout", type=_positive_float, help="HTTP timeout in seconds.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity (default: %(default)s).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        app_config = load_config(args.config)
    except ConfigError as exc:
        logger.debug("Configuration invalid", exc_info=True)
        print(f"Error reading configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        search_config = build_search_config(
            args.query,
            app_config.access_token,
            limit=args.limit if args.limit is not None else app_config.limit,
            search_url=args.endpoint or app_config.search_url,
            app_id=app_config.app_id,
            cert_id=app_config.cert_id,
        )
    except QueryBuildError as exc:
        logger.debug("Could not build search request", exc_info=True)
        print(f"Invalid search request: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    timeout = args.timeout if args.timeout is not None else app_config.timeout
    with EbaySearchClient(timeout=timeout) as client:
        try:
            result = client.execute(search_config)
        except EbaySearchError as exc:
            logger.debug("Search request failed", exc_info=True)
            print(f"Problem with the request: {exc}", file=sys.stderr)
            return EXIT_REQUEST_FAILED

    print(render_result(result))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
