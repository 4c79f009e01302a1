#!/usr/bin/env python3
"""Gallery Management CLI

Command-line utility to inspect theme sources, generate listing pages,
validate existing listings and render the gallery catalog.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gallery.config import Config, GallerySettings
from gallery.exceptions import GalleryError
from gallery.generation.generator import GalleryGenerator
from gallery.listing.loader import load_listings
from gallery.logger import ConsoleLogger, Logger, session_logger
from gallery.rendering.engine import RenderingEngine
from gallery.themes.registry import ThemeRegistry
from gallery.validation.listing_validator import ListingValidator
from gallery.validation.models import ValidationResult


def load_registry(args, settings: GallerySettings, logger: Logger) -> ThemeRegistry:
    themes_dir = Config.get_themes_dir(args.themes_dir)
    return ThemeRegistry(
        str(themes_dir),
        logger,
        exclude=settings.exclude,
        require_screenshot=settings.require_screenshot,
    )


def list_themes(args, settings: GallerySettings) -> int:
    """List loadable themes"""
    logger: Logger = session_logger
    registry = load_registry(args, settings, logger)
    themes = registry.list_themes()

    if not themes:
        logger.info("No themes found.")
        return 0

    logger.info(f"{len(themes)} Theme(s) Found:")
    if args.verbose:
        logger.info(f"{'Folder':<24} {'Name':<24} {'License':<12} {'Min version':<12}")
        logger.info("-" * 76)
        for item in themes:
            logger.info(
                f"{item.slug:<24} {item.name:<24} {item.license:<12} {item.min_version:<12}"
            )
    else:
        for item in themes:
            logger.info(item.slug)
    return 0


def show_theme(args, settings: GallerySettings) -> int:
    """Show the metadata of a single theme"""
    logger: Logger = session_logger
    registry = load_registry(args, settings, logger)
    source = registry.get_theme(args.name)
    metadata = source.metadata

    logger.info(f"Theme:        {metadata.name}")
    logger.info(f"Folder:       {source.path}")
    logger.info(f"Description:  {metadata.description}")
    logger.info(f"License:      {metadata.license}")
    logger.info(f"Homepage:     {metadata.homepage}")
    logger.info(f"Min version:  {metadata.min_version}")
    logger.info(f"Demo:         {metadata.demo or '-'}")
    author = metadata.author.name
    if metadata.author.homepage:
        author += f" <{metadata.author.homepage}>"
    logger.info(f"Author:       {author}")
    if metadata.original is not None:
        logger.info(f"Ported from:  {metadata.original.repo or metadata.original.homepage}")
    logger.info(f"Screenshot:   {'yes' if source.screenshot_path else 'no'}")
    return 0


def check_themes(args, settings: GallerySettings) -> int:
    """Report theme folders that cannot be turned into listings"""
    logger: Logger = session_logger
    registry = load_registry(args, settings, logger)

    loaded = len(registry.list_themes())
    if not registry.load_errors:
        logger.info(f"All {loaded} theme(s) are valid.")
        return 0

    logger.info(f"{loaded} valid, {len(registry.load_errors)} invalid theme(s):")
    for name, reason in sorted(registry.load_errors.items()):
        logger.info(f"  {name}: {reason}")
    return 1


def generate_listings(args, settings: GallerySettings) -> int:
    """Generate listing pages for every valid theme"""
    logger: Logger = session_logger
    registry = load_registry(args, settings, logger)
    output_dir = Config.get_content_dir(args.output)

    generator = GalleryGenerator(registry, logger, settings=settings)
    report = generator.generate(output_dir, clean=not args.no_clean)

    logger.info(f"Listings written: {len(report.written)} -> {report.output_dir}")
    if report.skipped:
        logger.info(f"Themes skipped:   {len(report.skipped)}")
        for name, reason in sorted(report.skipped.items()):
            logger.info(f"  {name}: {reason}")
    if report.failed:
        logger.error(f"Listings failed:  {len(report.failed)}")
        for name, reason in sorted(report.failed.items()):
            logger.error(f"  {name}: {reason}")
    return 0 if report.ok else 1


def _report_result(logger: Logger, result: ValidationResult, strict: bool) -> None:
    if result.passes(strict) and not result.warnings:
        logger.info(f"OK       {result.source}")
        return
    label = "INVALID " if not result.passes(strict) else "WARNING "
    logger.info(f"{label} {result.source}")
    for entry in result.errors:
        logger.info(f"    error   {entry.field}: {entry.message}")
    for entry in result.warnings:
        logger.info(f"    warning {entry.field}: {entry.message}")


def validate_listings(args, settings: GallerySettings) -> int:
    """Validate a listing file or every listing in a directory"""
    logger: Logger = session_logger
    validator = ListingValidator(logger=logger, require_screenshot=settings.require_screenshot)
    path = Path(args.path)

    if path.is_file():
        results: List[ValidationResult] = [validator.validate_file(path)]
    elif path.is_dir():
        results = validator.validate_directory(path).results
    else:
        logger.error(f"No such file or directory: {path}")
        return 1

    if not results:
        logger.info("No listings found.")
        return 0

    for result in results:
        _report_result(logger, result, args.strict)

    failing = [result for result in results if not result.passes(args.strict)]
    logger.info(f"{len(results)} listing(s) checked, {len(failing)} failing")
    return 1 if failing else 0


def render_catalog(args, settings: GallerySettings) -> int:
    """Render a markdown catalog of all listings"""
    logger: Logger = session_logger
    content_dir = Config.get_content_dir(args.content_dir)
    listings = load_listings(content_dir, logger)

    engine = RenderingEngine(logger)
    catalog = engine.render_catalog(listings, title=args.title or settings.catalog_title)

    output_file = Path(args.output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(catalog, encoding="utf-8")
    logger.info(f"Catalog with {len(listings)} theme(s) written to {output_file}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Theme gallery management utility",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List themes with details
  gallery-manager themes list --verbose

  # Report broken theme folders
  gallery-manager --themes-dir ./themes themes check

  # Regenerate every listing
  gallery-manager listings generate content/themes

  # Validate generated listings, failing on warnings too
  gallery-manager listings validate content/themes --strict

  # Render the catalog page
  gallery-manager listings catalog content/themes CATALOG.md
        """,
    )
    parser.add_argument(
        "--themes-dir",
        type=str,
        default=None,
        help="Directory holding the theme checkouts (default: GALLERY_THEMES_DIR or ./themes)",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="YAML settings file (default: GALLERY_SETTINGS or ./gallery.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: GALLERY_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="resource", help="Resource to manage")

    # Themes subcommands
    themes_parser = subparsers.add_parser("themes", help="Inspect theme sources")
    themes_subparsers = themes_parser.add_subparsers(dest="command", help="Themes command")

    themes_list = themes_subparsers.add_parser("list", help="List valid themes")
    themes_list.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed information",
    )

    themes_show = themes_subparsers.add_parser("show", help="Show one theme")
    themes_show.add_argument("name", help="Theme folder name")

    themes_subparsers.add_parser("check", help="Report invalid theme folders")

    # Listings subcommands
    listings_parser = subparsers.add_parser("listings", help="Manage listing pages")
    listings_subparsers = listings_parser.add_subparsers(dest="command", help="Listings command")

    listings_generate = listings_subparsers.add_parser(
        "generate",
        help="Write one listing folder per theme",
    )
    listings_generate.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output directory (default: GALLERY_CONTENT_DIR or ./content/themes)",
    )
    listings_generate.add_argument(
        "--no-clean",
        action="store_true",
        help="Keep listing folders of themes that no longer exist",
    )

    listings_validate = listings_subparsers.add_parser(
        "validate",
        help="Validate a listing file or directory",
    )
    listings_validate.add_argument("path", help="index.md file or content directory")
    listings_validate.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures",
    )

    listings_catalog = listings_subparsers.add_parser(
        "catalog",
        help="Render a markdown catalog of all listings",
    )
    listings_catalog.add_argument("content_dir", help="Directory with listing folders")
    listings_catalog.add_argument("output_file", help="Markdown file to write")
    listings_catalog.add_argument(
        "--title",
        type=str,
        default=None,
        help="Catalog heading (default: catalog_title setting)",
    )

    parser.set_defaults(_parsers={"themes": themes_parser, "listings": listings_parser})
    return parser


COMMANDS = {
    ("themes", "list"): list_themes,
    ("themes", "show"): show_theme,
    ("themes", "check"): check_themes,
    ("listings", "generate"): generate_listings,
    ("listings", "validate"): validate_listings,
    ("listings", "catalog"): render_catalog,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger: Logger = session_logger

    if isinstance(logger, ConsoleLogger):
        level_name = Config.get_log_level(args.log_level)
        logger.set_level(getattr(logging, level_name, logging.INFO))

    if not args.resource:
        parser.print_help()
        return 1
    if not args.command:
        args._parsers[args.resource].print_help()
        return 1

    handler = COMMANDS[(args.resource, args.command)]
    try:
        settings = Config.load_settings(args.settings)
        return handler(args, settings)
    except GalleryError as e:
        logger.error(e.message, code=e.code)
        return 1
    except OSError as e:
        logger.error(f"File system error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
