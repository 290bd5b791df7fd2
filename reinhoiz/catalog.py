"""Read-only catalog context shared by every page builder."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Sequence, Tuple

from .images import order_images
from .models import Product
from .utils import collation_key


def build_tag_index(products: Iterable[Product]) -> Tuple[str, ...]:
    """Return every tag used by the catalog exactly once, sorted."""

    return tuple(sorted({tag for product in products for tag in product.tags}))


def sort_products(products: Iterable[Product]) -> List[Product]:
    """Order products by display name the way a German reader expects."""

    return sorted(products, key=lambda product: (collation_key(product.name), product.id))


def products_with_tag(products: Sequence[Product], tag: str) -> List[Product]:
    return [product for product in products if tag in product.tags]


@dataclass(frozen=True)
class SiteContext:
    """Products and tags computed once per run and passed to every builder."""

    products: Tuple[Product, ...]
    tags: Tuple[str, ...]

    @classmethod
    def from_products(cls, products: Iterable[Product]) -> "SiteContext":
        ordered = [replace(product, images=order_images(product.images)) for product in products]
        if not ordered:
            raise ValueError("Product catalog is empty; nothing to publish")
        sorted_products = tuple(sort_products(ordered))
        return cls(products=sorted_products, tags=build_tag_index(sorted_products))

    @property
    def lead_product(self) -> Product:
        return self.products[0]
