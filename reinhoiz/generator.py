"""Static site generator for the reinhoiz product catalog."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .catalog import SiteContext
from .config import (
    DATA_FILE,
    OUTPUT_DIR,
    PARTIAL_NAMES,
    ROBOTS_FILE,
    SHELL_TEMPLATE,
    SOURCE_DIR,
    SiteSettings,
    default_settings,
)
from .pages import Page, iter_pages
from .renderer import PageRenderer, TemplateSet
from .repository import ProductRepository
from .router import OutputRouter

LOGGER = logging.getLogger(__name__)


@dataclass
class BuildReport:
    pages: int = 0
    products: int = 0
    categories: int = 0


class SiteGenerator:
    def __init__(
        self,
        output_dir: Path | str = OUTPUT_DIR,
        source_dir: Path | str = SOURCE_DIR,
        data_file: Path | str = DATA_FILE,
        settings: SiteSettings | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.source_dir = Path(source_dir)
        self.repository = ProductRepository(Path(data_file))
        self.settings = settings or default_settings()

    def _source_files(self) -> list[Path]:
        names = [SHELL_TEMPLATE, ROBOTS_FILE]
        names.extend(f"{name}.html.jinja" for name in PARTIAL_NAMES)
        return [self.source_dir / name for name in names] + [self.repository.data_file]

    def build(self) -> BuildReport:
        # Everything is read before the first write so a broken input leaves no output behind.
        products = self.repository.load_products()
        context = SiteContext.from_products(products)
        renderer = PageRenderer(TemplateSet.load(self.source_dir))
        robots = self.source_dir / ROBOTS_FILE
        if not robots.is_file():
            raise FileNotFoundError(f"Missing static file {robots}")

        router = OutputRouter(self.output_dir, protected=self._source_files())
        targets: dict[Path, Page] = {}
        for page in iter_pages(context, self.settings):
            target = router.path_for(page)
            if target in targets:
                raise ValueError(f"Two pages map to {target}")
            targets[target] = page

        LOGGER.info("Rendering site to %s", self.output_dir)
        report = BuildReport(products=len(context.products), categories=len(context.tags))
        for target, page in targets.items():
            router.write_page(target, renderer.render(page))
            report.pages += 1
        router.copy_asset(robots, ROBOTS_FILE)
        LOGGER.info(
            "Wrote %s pages (%s products, %s categories)",
            report.pages,
            report.products,
            report.categories,
        )
        return report
