import pytest

from reinhoiz.catalog import SiteContext, build_tag_index, products_with_tag, sort_products
from reinhoiz.models import Product, ProductImage


def make_product(product_id: str, name: str, tags=(), smalls=("x/1__a.jpg",)) -> Product:
    return Product(
        id=product_id,
        name=name,
        description=f"Beschreibung von {name}",
        tags=tuple(tags),
        images=tuple(ProductImage(small=small, large=f"{small}-large") for small in smalls),
    )


def test_build_tag_index_dedupes_and_sorts():
    products = [
        make_product("a", "Zebra", tags=["wood", "gift"]),
        make_product("b", "Apple", tags=["wood", "deko"]),
        make_product("c", "Birke"),
    ]
    assert build_tag_index(products) == ("deko", "gift", "wood")


def test_sort_products_uses_locale_aware_order():
    products = [
        make_product("1", "zirbe"),
        make_product("2", "Öllampe"),
        make_product("3", "Ahorn"),
        make_product("4", "ochse"),
    ]
    assert [product.name for product in sort_products(products)] == [
        "Ahorn",
        "ochse",
        "Öllampe",
        "zirbe",
    ]


def test_products_with_tag_returns_exact_subset():
    products = [
        make_product("a", "Apple", tags=["wood", "gift"]),
        make_product("b", "Birke", tags=["wood"]),
        make_product("c", "Cedar", tags=["gift"]),
    ]
    assert [product.id for product in products_with_tag(products, "gift")] == ["a", "c"]


def test_site_context_orders_products_images_and_tags():
    context = SiteContext.from_products(
        [
            make_product("a", "Zebra", tags=["wood"], smalls=["x/200__p.jpg", "x/10__q.jpg"]),
            make_product("b", "Apple", tags=["wood", "gift"]),
        ]
    )
    assert [product.name for product in context.products] == ["Apple", "Zebra"]
    zebra = context.products[1]
    assert [image.small for image in zebra.images] == ["x/10__q.jpg", "x/200__p.jpg"]
    assert context.tags == ("gift", "wood")
    assert context.lead_product.id == "b"


def test_site_context_rejects_empty_catalog():
    with pytest.raises(ValueError):
        SiteContext.from_products([])
