"""Shared pytest fixtures and mock responses for ebay-search tests."""

import json
from unittest.mock import Mock, patch

import pytest
import requests


# Test token (NOT A REAL TOKEN - for testing only)
TEST_ACCESS_TOKEN = "v^1.1#i^1#p^1#r^0#I^3#f^0#t^H4sIAAAAAAAAAOVYa2wUVRTe7bY"
TEST_SEARCH_URL = "https://api.test.ebay.com/buy/browse/v1/item_summary/search"

# Mock API responses
MOCK_SEARCH_RESPONSE = {
    "href": TEST_SEARCH_URL + "?q=laptop&limit=5&offset=0",
    "total": 2,
    "limit": 5,
    "offset": 0,
    "itemSummaries": [
        {
            "itemId": "v1|110553331690|0",
            "title": "Lenovo ThinkPad T480 14in i5 8GB",
            "price": {"value": "249.99", "currency": "USD"},
            "condition": "Used",
        },
        {
            "itemId": "v1|110553331691|0",
            "title": "Dell Latitude 7490 Ultrabook",
            "price": {"value": "199.00", "currency": "USD"},
            "condition": "Used",
        },
    ],
}

MOCK_ERROR_RESPONSE = {
    "errors": [
        {
            "errorId": 1001,
            "domain": "OAuth",
            "category": "REQUEST",
            "message": "Invalid access token",
        }
    ]
}


def make_response(status_code, text):
    """Build a mock requests.Response with the given status and raw body."""

    def decode():
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise requests.JSONDecodeError(exc.msg, exc.doc, exc.pos)

    response = Mock()
    response.status_code = status_code
    response.text = text
    response.json.side_effect = decode
    return response


@pytest.fixture
def mock_response_200():
    """Mock successful HTTP 200 search response."""
    return make_response(200, json.dumps(MOCK_SEARCH_RESPONSE))


@pytest.fixture
def mock_response_small():
    """Mock HTTP 200 response with a minimal JSON object."""
    return make_response(200, '{"a":1}')


@pytest.fixture
def mock_response_401():
    """Mock HTTP 401 Unauthorized response."""
    return make_response(401, json.dumps(MOCK_ERROR_RESPONSE))


@pytest.fixture
def mock_response_404():
    """Mock HTTP 404 Not Found response."""
    return make_response(404, '{"error": "Not found"}')


@pytest.fixture
def mock_response_not_json():
    """Mock HTTP 200 response whose body is not JSON."""
    return make_response(200, "not json")


@pytest.fixture
def mock_response_truncated():
    """Mock HTTP 200 response with a truncated JSON body."""
    return make_response(200, '{"total": 2, "itemSummaries": [{"itemId": ')


@pytest.fixture
def search_config():
    """A search configuration for 'laptop' against the test endpoint."""
    from ebay_search.query import build_search_config

    return build_search_config(
        "laptop",
        TEST_ACCESS_TOKEN,
        search_url=TEST_SEARCH_URL,
    )


@pytest.fixture
def search_client():
    """Create an EbaySearchClient with a mocked session."""
    from ebay_search.client import EbaySearchClient

    with patch("requests.Session"):
        return EbaySearchClient(timeout=30)


@pytest.fixture
def config_file(tmp_path):
    """Write a config.toml with an access token and app identifiers."""
    path = tmp_path / "config.toml"
    path.write_text(
        "\n".join(
            [
                "[api_keys]",
                f'ebay = "{TEST_ACCESS_TOKEN}"',
                "",
                "[ebay]",
                'app_id = "TestApp-SBX-0000"',
                'cert_id = "SBX-0000-cert"',
                f'search_url = "{TEST_SEARCH_URL}"',
                "limit = 3",
                "timeout = 10",
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    monkeypatch.delenv("EBAY_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("EBAY_SEARCH_CONFIG_FILE", raising=False)
