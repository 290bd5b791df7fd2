import pytest
from markupsafe import Markup

from reinhoiz.catalog import SiteContext
from reinhoiz.config import PARTIAL_NAMES, SOURCE_DIR, SiteSettings
from reinhoiz.models import PlainText, Product, ProductImage, TrustedHtml
from reinhoiz.pages import (
    build_category_page,
    build_home_page,
    build_impressum_page,
    build_product_page,
)
from reinhoiz.renderer import (
    PageRenderer,
    TemplateSet,
    description_text,
    description_value,
    page_context,
)


def make_context() -> SiteContext:
    return SiteContext.from_products(
        [
            Product(
                id="stern",
                name="Stern <groß>",
                description="Ein *handgemachter* Stern",
                tags=("Holz & Stein",),
                images=(ProductImage(small="sterne/1__s.jpg", large="sterne/1__s-l.jpg"),),
            ),
            Product(
                id="kugel",
                name="Kugel",
                description="Rund",
                tags=("deko",),
                images=(ProductImage(small="kugeln/1__k.jpg", large="kugeln/1__k-l.jpg"),),
            ),
        ]
    )


def stub_templates() -> TemplateSet:
    partials = {name: f"[{name}]" for name in PARTIAL_NAMES}
    partials["category"] = "[category {{ tag }}]"
    return TemplateSet(shell="<main>{% include main_template %}</main>", partials=partials)


def test_description_value_marks_only_trusted_html_safe():
    trusted = description_value(TrustedHtml("<p>hi</p>"))
    plain = description_value(PlainText("<p>hi</p>"))
    assert isinstance(trusted, Markup)
    assert not isinstance(plain, Markup)
    assert description_text(TrustedHtml("<p>a &amp; b</p>")) == "a & b"


def test_description_value_rejects_untyped_strings():
    with pytest.raises(TypeError):
        description_value("<p>raw</p>")


def test_page_context_rejects_unknown_page_types():
    with pytest.raises(TypeError):
        page_context(object())


def test_shell_includes_partial_named_by_page():
    context = make_context()
    renderer = PageRenderer(stub_templates())
    settings = SiteSettings()
    assert renderer.render(build_home_page(context, settings)) == "<main>[home]</main>"
    assert renderer.render(build_impressum_page(context, settings)) == "<main>[impressum]</main>"
    category = build_category_page(context, settings, "deko")
    assert renderer.render(category) == "<main>[category deko]</main>"


def test_per_instance_pages_get_fresh_shell():
    renderer = PageRenderer(stub_templates())
    context = make_context()
    settings = SiteSettings()
    product = build_product_page(context, settings, context.products[0])
    assert renderer._shell_for(product) is not renderer._shell_for(product)
    home = build_home_page(context, settings)
    assert renderer._shell_for(home) is renderer._shell_for(home)


def test_template_set_load_requires_every_partial(tmp_path):
    (tmp_path / "index.html.jinja").write_text("{% include main_template %}", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        TemplateSet.load(tmp_path)


def test_bundled_templates_escape_plain_text_but_not_trusted_html():
    context = make_context()
    settings = SiteSettings()
    renderer = PageRenderer(TemplateSet.load(SOURCE_DIR))

    stern = next(product for product in context.products if product.id == "stern")
    product_html = renderer.render(build_product_page(context, settings, stern))
    assert "<em>handgemachter</em>" in product_html
    assert "Stern &lt;groß&gt;" in product_html
    assert 'content="Ein handgemachter Stern"' in product_html
    assert 'property="og:url" content="http://www.reinhoiz.de/produkt/stern/"' in product_html

    category_html = renderer.render(build_category_page(context, settings, "Holz & Stein"))
    assert "Alles zum Thema Holz &amp; Stein" in category_html
    assert "Alles zum Thema Holz & Stein" not in category_html
    assert 'data-product="stern"' in category_html
    assert 'data-product="kugel"' not in category_html


def test_bundled_home_page_lists_products_in_sorted_order():
    context = make_context()
    renderer = PageRenderer(TemplateSet.load(SOURCE_DIR))
    html = renderer.render(build_home_page(context, SiteSettings()))
    assert html.index('data-product="kugel"') < html.index('data-product="stern"')
    assert 'href="/kategorie/deko.html"' in html
