"""Map rendered pages to files below the output root."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from .pages import (
    DATA_PROTECTION,
    IMPRESSUM,
    CategoryPage,
    HomePage,
    NotFoundPage,
    Page,
    ProductPage,
    StaticPage,
)

LOGGER = logging.getLogger(__name__)

PRODUCT_DIR = "produkt"
CATEGORY_DIR = "kategorie"
STATIC_PAGE_FILES = {
    IMPRESSUM: "impressum.html",
    DATA_PROTECTION: "datenschutz.html",
}


def path_segment(value: str, kind: str) -> str:
    """Return ``value`` if it names a single file or folder below its section."""

    if not value or value in {".", ".."} or "/" in value or "\\" in value:
        raise ValueError(f"Invalid {kind} for an output path: {value!r}")
    return value


class OutputRouter:
    def __init__(self, output_dir: Path | str, protected: Iterable[Path] = ()) -> None:
        self.output_dir = Path(output_dir)
        self.protected = {Path(path).resolve() for path in protected}

    def path_for(self, page: Page) -> Path:
        if isinstance(page, HomePage):
            return self.output_dir / "index.html"
        if isinstance(page, ProductPage):
            product_dir = path_segment(page.product.id, "product id")
            return self.output_dir / PRODUCT_DIR / product_dir / "index.html"
        if isinstance(page, CategoryPage):
            return self.output_dir / CATEGORY_DIR / f"{path_segment(page.tag, 'tag')}.html"
        if isinstance(page, StaticPage):
            return self.output_dir / STATIC_PAGE_FILES[page.main_template]
        if isinstance(page, NotFoundPage):
            return self.output_dir / "404.html"
        raise TypeError(f"Unsupported page type: {type(page).__name__}")

    def _check_target(self, target: Path) -> None:
        if target.resolve() in self.protected:
            raise RuntimeError(f"Refusing to overwrite source file {target}")

    def write_page(self, target: Path, html: str) -> None:
        """Write ``html`` to ``target``, creating parent folders as needed."""

        self._check_target(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        LOGGER.debug("Wrote %s", target)

    def copy_asset(self, source: Path, name: str | None = None) -> Path:
        """Copy a static file into the output root byte for byte."""

        target = self.output_dir / (name or source.name)
        self._check_target(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        LOGGER.debug("Copied %s to %s", source, target)
        return target
