"""Configuration helpers for the reinhoiz site generator."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
SOURCE_DIR = Path(__file__).resolve().parent / "site"
OUTPUT_DIR = BASE_DIR / "dist" / "bootstrap"
DATA_FILE = OUTPUT_DIR / "produkt" / "products.json"

SHELL_TEMPLATE = "index.html.jinja"
ROBOTS_FILE = "robots.txt"
PARTIAL_NAMES: tuple[str, ...] = (
    "home",
    "product",
    "category",
    "preview",
    "impressum",
    "data-protection",
    "404",
)


@dataclass(frozen=True)
class SiteSettings:
    """Site level copy and metadata used when building page models."""

    site_url: str = "http://www.reinhoiz.de"
    # The live site publishes its URL as og:site_name.
    site_name: str = "http://www.reinhoiz.de"
    og_type: str = "website"
    home_title: str = "Hochwertige Dekorationsgegenstände aus Holz. reinhoiz.de"
    home_description: str = "Hochwertige Dekorationsgegenstände aus Holz"
    category_title: str = "Kategorie {tag}"
    category_description: str = "Alles zum Thema {tag}"
    impressum_title: str = "Impressum"
    data_protection_title: str = "Datenschutzerklärung"
    not_found_title: str = "Schöne Bastelsachen aus Holz. reinhoiz.de"
    not_found_description: str = "Hier findest du Bastelsachen aus Holz"
    shared_og_image: bool = False

    def url(self, path: str = "") -> str:
        base = self.site_url.rstrip("/")
        if not path:
            return base
        if path.startswith("/"):
            return f"{base}{path}"
        return f"{base}/{path}"


def default_settings() -> SiteSettings:
    """Return the default reinhoiz.de settings."""

    return SiteSettings()
