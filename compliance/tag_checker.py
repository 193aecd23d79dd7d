# compliance/tag_checker.py
import logging

from scanner.models import split_tags

logger = logging.getLogger(__name__)


def is_compliant(product, required_tags):
    """A product is compliant when it carries at least one required tag."""
    return not product.tag_set.isdisjoint(required_tags)


def find_non_compliant(products, required_tags):
    """Return ids of products lacking every required tag, in fetch order."""
    # Required tags are lowercased at config load; normalize again for direct callers
    required = split_tags(",".join(required_tags))

    logger.info(f"Checking {len(products)} products for tags: {sorted(required)}")

    missing = [p.id for p in products if not is_compliant(p, required)]

    logger.info(f"Found {len(missing)} products missing required tags")
    return missing
