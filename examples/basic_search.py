"""Basic example: search eBay item summaries with a token from config.toml."""

from ebay_search import EbaySearchClient, load_config

config = load_config()

with EbaySearchClient(timeout=config.timeout) as client:
    result = client.search(
        "laptop",
        config.access_token,
        limit=config.limit,
        search_url=config.search_url,
    )

if not result.ok:
    print(f"Request failed with status code: {result.status_code}")
else:
    print(f"=== {result.data.get('total', 0)} matches, showing {config.limit} ===")
    for item in result.data.get("itemSummaries", []):
        price = item.get("price", {})
        print(f"  - {item.get('title', 'N/A')} | {price.get('value', '?')} {price.get('currency', '')}")
