"""Page models for every page the site publishes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple, Union

import markdown

from .catalog import SiteContext, products_with_tag
from .config import SiteSettings
from .models import Description, MetaAttributes, PlainText, Product, TrustedHtml

IMPRESSUM = "impressum"
DATA_PROTECTION = "data-protection"


@dataclass(frozen=True)
class HomePage:
    tags: Tuple[str, ...]
    meta: MetaAttributes
    products: Tuple[Product, ...]
    main_template: str = field(default="home", init=False)


@dataclass(frozen=True)
class ProductPage:
    tags: Tuple[str, ...]
    meta: MetaAttributes
    product: Product
    main_template: str = field(default="product", init=False)


@dataclass(frozen=True)
class CategoryPage:
    tags: Tuple[str, ...]
    meta: MetaAttributes
    tag: str
    products: Tuple[Product, ...]
    main_template: str = field(default="category", init=False)


@dataclass(frozen=True)
class StaticPage:
    """Impressum and data-protection pages; they carry no catalog content."""

    tags: Tuple[str, ...]
    meta: MetaAttributes
    main_template: str

    def __post_init__(self) -> None:
        if self.main_template not in {IMPRESSUM, DATA_PROTECTION}:
            raise ValueError(f"Unsupported static page: {self.main_template!r}")


@dataclass(frozen=True)
class NotFoundPage:
    tags: Tuple[str, ...]
    meta: MetaAttributes
    products: Tuple[Product, ...]
    main_template: str = field(default="404", init=False)


Page = Union[HomePage, ProductPage, CategoryPage, StaticPage, NotFoundPage]


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text)


def _meta(
    settings: SiteSettings,
    *,
    image_source: Product,
    title: str,
    url: str,
    description: Description,
) -> MetaAttributes:
    return MetaAttributes(
        og_image=image_source.preview_image.large,
        og_title=title,
        og_type=settings.og_type,
        og_url=url,
        og_site_name=settings.site_name,
        og_description=description,
    )


def _listing_image_source(
    context: SiteContext, settings: SiteSettings, listed: Sequence[Product]
) -> Product:
    if settings.shared_og_image or not listed:
        return context.lead_product
    return listed[0]


def build_home_page(context: SiteContext, settings: SiteSettings) -> HomePage:
    return HomePage(
        tags=context.tags,
        products=context.products,
        meta=_meta(
            settings,
            image_source=context.lead_product,
            title=settings.home_title,
            url=settings.url(),
            description=PlainText(settings.home_description),
        ),
    )


def build_product_page(
    context: SiteContext, settings: SiteSettings, product: Product
) -> ProductPage:
    """Product pages are the only pages whose description is rendered markdown."""

    return ProductPage(
        tags=context.tags,
        product=product,
        meta=_meta(
            settings,
            image_source=product,
            title=product.name,
            url=settings.url(f"/produkt/{product.id}/"),
            description=TrustedHtml(markdown_to_html(product.description)),
        ),
    )


def build_category_page(context: SiteContext, settings: SiteSettings, tag: str) -> CategoryPage:
    listed = tuple(products_with_tag(context.products, tag))
    return CategoryPage(
        tags=context.tags,
        tag=tag,
        products=listed,
        meta=_meta(
            settings,
            image_source=_listing_image_source(context, settings, listed),
            title=settings.category_title.format(tag=tag),
            url=settings.url(f"/kategorie/{tag}.html"),
            description=PlainText(settings.category_description.format(tag=tag)),
        ),
    )


def build_impressum_page(context: SiteContext, settings: SiteSettings) -> StaticPage:
    return StaticPage(
        tags=context.tags,
        main_template=IMPRESSUM,
        meta=_meta(
            settings,
            image_source=context.lead_product,
            title=settings.impressum_title,
            url=settings.url("/impressum.html"),
            description=PlainText(settings.impressum_title),
        ),
    )


def build_data_protection_page(context: SiteContext, settings: SiteSettings) -> StaticPage:
    return StaticPage(
        tags=context.tags,
        main_template=DATA_PROTECTION,
        meta=_meta(
            settings,
            image_source=context.lead_product,
            title=settings.data_protection_title,
            url=settings.url("/datenschutz.html"),
            description=PlainText(settings.data_protection_title),
        ),
    )


def build_not_found_page(context: SiteContext, settings: SiteSettings) -> NotFoundPage:
    # Served for arbitrary paths, so the canonical URL points at the home page.
    return NotFoundPage(
        tags=context.tags,
        products=context.products,
        meta=_meta(
            settings,
            image_source=context.lead_product,
            title=settings.not_found_title,
            url=settings.url(),
            description=PlainText(settings.not_found_description),
        ),
    )


def iter_pages(context: SiteContext, settings: SiteSettings) -> Iterator[Page]:
    """Yield every page of the site in publishing order."""

    yield build_home_page(context, settings)
    for product in context.products:
        yield build_product_page(context, settings, product)
    for tag in context.tags:
        yield build_category_page(context, settings, tag)
    yield build_impressum_page(context, settings)
    yield build_data_protection_page(context, settings)
    yield build_not_found_page(context, settings)
