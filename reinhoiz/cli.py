"""Command line entrypoint for the reinhoiz site build."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import DATA_FILE, OUTPUT_DIR, SOURCE_DIR
from .generator import SiteGenerator

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="reinhoiz static site commands")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.set_defaults(func=handle_build, data=DATA_FILE, source=SOURCE_DIR, output=OUTPUT_DIR)
    subparsers = parser.add_subparsers(dest="command")

    build_parser_ = subparsers.add_parser("build", help="Render the static site from the dataset")
    build_parser_.add_argument(
        "--data",
        type=Path,
        default=DATA_FILE,
        help="Product dataset produced by the upstream pipeline",
    )
    build_parser_.add_argument(
        "--source",
        type=Path,
        default=SOURCE_DIR,
        help="Directory holding the page templates and robots.txt",
    )
    build_parser_.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_DIR,
        help="Output directory for the static site",
    )
    build_parser_.set_defaults(func=handle_build)

    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def handle_build(args: argparse.Namespace) -> None:
    generator = SiteGenerator(
        output_dir=args.output,
        source_dir=args.source,
        data_file=args.data,
    )
    report = generator.build()
    LOGGER.info("Build complete. %s pages written to %s", report.pages, args.output)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
