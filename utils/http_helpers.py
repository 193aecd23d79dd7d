# utils/http_helpers.py
import logging
from urllib.parse import parse_qs, urlparse

from requests.utils import parse_header_links

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
SHOPIFY_DOMAIN_SUFFIX = ".myshopify.com"


def normalize_store_domain(domain):
    """Strip scheme and path from a store domain, appending .myshopify.com to bare shop names."""
    if not domain:
        return domain

    domain = domain.strip()
    if "://" in domain:
        domain = domain.split("://", 1)[1]
    domain = domain.split("/", 1)[0].lower()

    # "my-store" -> "my-store.myshopify.com"; custom domains are kept as-is
    if "." not in domain:
        domain += SHOPIFY_DOMAIN_SUFFIX
    return domain


def get_next_page_info(link_header):
    """Return the page_info cursor of the rel="next" link, or None.

    Shopify sends cursors in a Link header such as:
    <https://shop.myshopify.com/admin/api/2023-10/products.json?limit=250&page_info=abc>; rel="next"
    A missing header, a missing next relation or a next URL without a
    page_info parameter all mean there is no next page.
    """
    if not link_header:
        return None

    for link in parse_header_links(link_header):
        rels = link.get("rel", "").split()
        if "next" not in rels:
            continue
        values = parse_qs(urlparse(link.get("url", "")).query).get("page_info")
        if values and values[0]:
            return values[0]
        logger.debug(f"Next link without page_info: {link.get('url')}")
        return None

    return None


def mask_secret(value, visible=4):
    """Mask a secret for logging, keeping only the last few characters."""
    if not value:
        return ""
    if len(value) <= visible * 2:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
