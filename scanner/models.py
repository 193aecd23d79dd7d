# scanner/models.py
from dataclasses import dataclass
from typing import Optional, Tuple, Union

ProductId = Union[int, str]


def split_tags(tags):
    """Split a Shopify tag string into a set of trimmed, lowercase tags."""
    return frozenset(t.strip().lower() for t in (tags or "").split(",") if t.strip())


@dataclass(frozen=True)
class Product:
    """The subset of a Shopify product the tag check reads."""

    id: ProductId
    tags: str = ""

    @property
    def tag_set(self):
        return split_tags(self.tags)

    @classmethod
    def from_api(cls, data):
        # Shopify returns tags as "a, b, c"; null is treated as untagged
        return cls(id=data.get("id"), tags=data.get("tags") or "")


@dataclass(frozen=True)
class ProductPage:
    """One page of a products listing."""

    products: Tuple[Product, ...]
    next_page_info: Optional[str] = None

    @property
    def has_next(self):
        return self.next_page_info is not None
