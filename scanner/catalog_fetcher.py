# scanner/catalog_fetcher.py
import logging

import requests

from scanner.models import Product, ProductPage
from utils.errors import CatalogFetchError
from utils.http_helpers import get_next_page_info

logger = logging.getLogger(__name__)

PAGE_SIZE = 250


def _request_page(config, session, page_info=None):
    """Fetch a single products page and return the decoded response."""
    params = {"limit": PAGE_SIZE}
    if page_info:
        params["page_info"] = page_info

    try:
        response = session.get(
            config.products_url,
            params=params,
            headers={
                "X-Shopify-Access-Token": config.access_token,
                "Content-Type": "application/json",
            },
            timeout=config.timeout,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"Shopify request failed: {e}")
        raise CatalogFetchError(f"Shopify API request failed: {e}") from e

    if response.status_code >= 400:
        logger.error(f"Shopify API error {response.status_code}: {response.text[:200]}")
        raise CatalogFetchError(
            f"Shopify API request failed with status {response.status_code}",
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise CatalogFetchError(f"Shopify API returned invalid JSON: {e}") from e

    return data, response.headers.get("Link")


def _parse_product(entry, page_number):
    if not isinstance(entry, dict) or entry.get("id") is None:
        raise CatalogFetchError(f"Malformed product on page {page_number}: {entry!r:.100}")
    if not isinstance(entry.get("tags"), (str, type(None))):
        raise CatalogFetchError(f"Product {entry['id']} has non-string tags on page {page_number}")
    return Product.from_api(entry)


def iter_product_pages(config, session):
    """Yield product pages until Shopify stops returning a new next cursor."""
    page_info = None
    page_number = 0
    seen = set()

    while True:
        data, link_header = _request_page(config, session, page_info)
        page_number += 1

        if not isinstance(data, dict) or data.get("products") is None:
            logger.info(f"Page {page_number} has no product list, treating as end of data")
            return

        page = ProductPage(
            products=tuple(_parse_product(p, page_number) for p in data["products"]),
            next_page_info=get_next_page_info(link_header),
        )
        logger.info(f"Fetched page {page_number} with {len(page.products)} products")
        yield page

        if not page.has_next:
            return
        if page.next_page_info in seen:
            logger.warning(f"Shopify returned an already used cursor, stopping after page {page_number}")
            return
        seen.add(page.next_page_info)
        page_info = page.next_page_info


def fetch_all_products(config, session=None):
    """Fetch every product of the store.

    Raises CatalogFetchError on any failed page; no partial list is returned.
    """
    own_session = session is None
    session = session or requests.Session()

    try:
        products = []
        for page in iter_product_pages(config, session):
            products.extend(page.products)
    finally:
        if own_session:
            session.close()

    logger.info(f"Fetched {len(products)} products from {config.store_domain}")
    return products
