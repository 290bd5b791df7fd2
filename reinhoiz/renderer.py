"""Render page models through the shared page shell."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from jinja2 import DictLoader, Environment, StrictUndefined, Template
from markupsafe import Markup

from .config import PARTIAL_NAMES, SHELL_TEMPLATE
from .models import Description, MetaAttributes, PlainText, TrustedHtml
from .pages import CategoryPage, HomePage, NotFoundPage, Page, ProductPage, StaticPage
from .utils import read_text

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateSet:
    """Template sources read from disk before anything is rendered."""

    shell: str
    partials: Mapping[str, str]

    @classmethod
    def load(cls, source_dir: Path) -> "TemplateSet":
        shell = read_text(source_dir / SHELL_TEMPLATE)
        partials = {name: read_text(source_dir / f"{name}.html.jinja") for name in PARTIAL_NAMES}
        LOGGER.debug("Loaded page shell and %s partials from %s", len(partials), source_dir)
        return cls(shell=shell, partials=partials)


def description_value(description: Description) -> Any:
    """Plain text is left for autoescaping; trusted HTML is marked safe."""

    if isinstance(description, TrustedHtml):
        return Markup(description.html)
    if isinstance(description, PlainText):
        return description.text
    raise TypeError(f"Unsupported description type: {type(description).__name__}")


def description_text(description: Description) -> str:
    """Tag-free text for attribute values such as 'og:description'."""

    if isinstance(description, TrustedHtml):
        return Markup(description.html).striptags()
    return description_value(description)


PAGE_TYPES = (HomePage, ProductPage, CategoryPage, StaticPage, NotFoundPage)


def _meta_context(meta: MetaAttributes) -> Dict[str, Any]:
    return {
        "og_image": meta.og_image,
        "og_title": meta.og_title,
        "og_type": meta.og_type,
        "og_url": meta.og_url,
        "og_site_name": meta.og_site_name,
        "og_description": description_value(meta.og_description),
        "og_description_text": description_text(meta.og_description),
    }


def page_context(page: Page) -> Dict[str, Any]:
    """Flatten a page model into the variables the templates read."""

    if not isinstance(page, PAGE_TYPES):
        raise TypeError(f"Unsupported page type: {type(page).__name__}")
    context: Dict[str, Any] = {
        "main_template": page.main_template,
        "tags": page.tags,
        "meta": _meta_context(page.meta),
    }
    if isinstance(page, (HomePage, NotFoundPage)):
        context["products"] = page.products
    elif isinstance(page, ProductPage):
        context["product"] = page.product
    elif isinstance(page, CategoryPage):
        context["tag"] = page.tag
        context["products"] = page.products
    return context


class PageRenderer:
    """Renders every page kind through one shell that includes the page's partial."""

    def __init__(self, templates: TemplateSet) -> None:
        self.templates = templates
        self.environment = Environment(
            loader=DictLoader(dict(templates.partials)),
            autoescape=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._shared_shell = self.environment.from_string(templates.shell)

    def _shell_for(self, page: Page) -> Template:
        # Per-instance pages get a freshly compiled shell.
        if isinstance(page, (ProductPage, CategoryPage)):
            return self.environment.from_string(self.templates.shell)
        return self._shared_shell

    def render(self, page: Page) -> str:
        return self._shell_for(page).render(page_context(page))
