"""Data models used by the reinhoiz site generator."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class ProductImage:
    """One product photo in its rendered size variants."""

    small: str
    large: str
    variants: Dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, payload: dict) -> "ProductImage":
        if not isinstance(payload, dict):
            raise ValueError(f"Image record must be an object: {payload!r}")
        small = payload.get("small")
        large = payload.get("large")
        if not isinstance(small, str) or not isinstance(large, str):
            raise ValueError(f"Image record needs 'small' and 'large' paths: {payload!r}")
        variants = {
            str(key): str(value)
            for key, value in payload.items()
            if key not in {"small", "large"} and isinstance(value, str)
        }
        return cls(small=small, large=large, variants=variants)


@dataclass(frozen=True)
class Product:
    """Represents a single catalog item from the product dataset."""

    id: str
    name: str
    description: str
    tags: Tuple[str, ...]
    images: Tuple[ProductImage, ...]

    def __post_init__(self) -> None:
        if not self.images:
            raise ValueError(f"Product {self.id!r} has no images")

    @property
    def preview_image(self) -> ProductImage:
        return self.images[0]

    @classmethod
    def from_dict(cls, payload: dict) -> "Product":
        if not isinstance(payload, dict):
            raise ValueError(f"Product record must be an object: {payload!r}")
        raw_id = payload.get("id")
        name = payload.get("name")
        if raw_id is None or not isinstance(name, str):
            raise ValueError(f"Product record needs 'id' and 'name': {payload!r}")
        tags = payload.get("tags") or []
        images = payload.get("images") or []
        if not isinstance(tags, list) or not isinstance(images, list):
            raise ValueError(f"Product {raw_id!r} needs 'tags' and 'images' lists")
        return cls(
            id=str(raw_id),
            name=name,
            description=str(payload.get("description") or ""),
            tags=tuple(str(tag) for tag in tags),
            images=tuple(ProductImage.from_dict(image) for image in images),
        )


@dataclass(frozen=True)
class PlainText:
    """Description text that the renderer escapes."""

    text: str


@dataclass(frozen=True)
class TrustedHtml:
    """Pre-rendered HTML that the renderer emits verbatim."""

    html: str


Description = Union[PlainText, TrustedHtml]


@dataclass(frozen=True)
class MetaAttributes:
    """Open Graph block rendered into the page head."""

    og_image: str
    og_title: str
    og_type: str
    og_url: str
    og_site_name: str
    og_description: Description
