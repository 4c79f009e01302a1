"""Build gallery listings from theme sources and write them to disk."""

import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from gallery.config import GallerySettings
from gallery.exceptions import HistoryUnavailableError
from gallery.generation.history import GitHistory, HistoryInfo
from gallery.listing.models import (
    Listing,
    ListingAuthor,
    ListingExtra,
    ListingFrontmatter,
    is_http_url,
)
from gallery.logger import Logger
from gallery.rendering.engine import RenderingEngine
from gallery.themes.registry import ThemeRegistry
from gallery.themes.theme_metadata import ThemeSource
from gallery.validation.listing_validator import LISTING_FILE, SCREENSHOT_FILE, ListingValidator

# Template delimiters in a README would be executed by the site generator
_README_ESCAPES = (
    ("{{", "{{/*"),
    ("}}", "*/}}"),
    ("{%", "{%/*"),
    ("%}", "*/%}"),
)


def escape_template_syntax(text: str) -> str:
    """Wrap template delimiters in comments so they render verbatim."""
    for raw, escaped in _README_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def build_listing(
    source: ThemeSource,
    readme: str,
    history: HistoryInfo,
    template: str = "theme.html",
) -> Listing:
    """
    Map a theme's metadata and history onto a listing page.

    The repository falls back to the theme homepage when the checkout has
    no usable http(s) remote.
    """
    metadata = source.metadata
    repository = history.repository
    if not repository or not is_http_url(repository):
        repository = metadata.homepage

    frontmatter = ListingFrontmatter(
        title=metadata.name,
        description=metadata.description,
        template=template,
        date=history.updated,
        extra=ListingExtra(
            created=history.created,
            updated=history.updated,
            repository=repository,
            homepage=metadata.homepage,
            minimum_version=metadata.min_version,
            license=metadata.license,
            demo=metadata.demo or "",
            author=ListingAuthor(
                name=metadata.author.name,
                homepage=metadata.author.homepage,
            ),
        ),
    )
    return Listing(
        slug=source.slug,
        frontmatter=frontmatter,
        body=escape_template_syntax(readme),
    )


class GenerationReport(BaseModel):
    """Outcome of one generation run."""

    output_dir: Path
    written: List[str] = Field(default_factory=list)
    skipped: Dict[str, str] = Field(default_factory=dict)
    failed: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class GalleryGenerator:
    """Writes one listing folder per loaded theme."""

    def __init__(
        self,
        registry: ThemeRegistry,
        logger: Logger,
        history: Optional[GitHistory] = None,
        settings: Optional[GallerySettings] = None,
        engine: Optional[RenderingEngine] = None,
    ):
        self.registry = registry
        self.logger = logger
        self.settings = settings or GallerySettings()
        self.history = history or GitHistory(
            timeout=self.settings.git_timeout_seconds, logger=logger
        )
        self.engine = engine or RenderingEngine(logger)
        self.validator = ListingValidator(
            logger=logger, require_screenshot=self.settings.require_screenshot
        )

    def resolve_history(self, source: ThemeSource) -> HistoryInfo:
        """Git history of the theme, or theme.toml's mtime when git has none."""
        try:
            return self.history.lookup(source.path)
        except HistoryUnavailableError as e:
            self.logger.warning(
                "Falling back to file timestamps", theme=source.slug, reason=e.reason
            )
            mtime = (source.path / "theme.toml").stat().st_mtime
            stamp = datetime.fromtimestamp(mtime, tz=timezone.utc).replace(microsecond=0)
            return HistoryInfo(created=stamp, updated=stamp, repository=None)

    def build(self, source: ThemeSource) -> Listing:
        readme = source.readme_path.read_text(encoding="utf-8")
        return build_listing(
            source,
            readme,
            self.resolve_history(source),
            template=self.settings.listing_template,
        )

    def clean_output(self, output_dir: Path) -> int:
        """
        Remove previously generated listing folders.

        Only folders holding an ``index.md`` are removed; the section page
        and any other files are left alone.
        """
        removed = 0
        if not output_dir.is_dir():
            return removed
        for folder in output_dir.iterdir():
            if folder.is_dir() and (folder / LISTING_FILE).exists():
                shutil.rmtree(folder)
                removed += 1
        self.logger.debug("Removed stale listings", count=removed, path=str(output_dir))
        return removed

    def write_listing(self, listing: Listing, source: ThemeSource, output_dir: Path) -> Path:
        folder = output_dir / listing.slug
        folder.mkdir(parents=True, exist_ok=True)
        listing_file = folder / LISTING_FILE
        listing_file.write_text(self.engine.render_listing(listing), encoding="utf-8")
        if source.screenshot_path is not None:
            shutil.copyfile(source.screenshot_path, folder / SCREENSHOT_FILE)
        return listing_file

    def generate(self, output_dir: Path, clean: bool = True) -> GenerationReport:
        """
        Generate every listing into ``output_dir``.

        Each written page is validated again; a page that fails is removed
        and reported instead of raising.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        if clean:
            self.clean_output(output_dir)

        report = GenerationReport(
            output_dir=output_dir, skipped=dict(self.registry.load_errors)
        )
        for source in self.registry.list_sources():
            try:
                listing = self.build(source)
            except (OSError, UnicodeDecodeError, ValueError) as e:
                # pydantic's ValidationError is a ValueError
                report.failed[source.slug] = str(e)
                self.logger.error("Cannot build listing", theme=source.slug, error=str(e))
                continue

            try:
                listing_file = self.write_listing(listing, source, output_dir)
            except OSError as e:
                shutil.rmtree(output_dir / listing.slug, ignore_errors=True)
                report.failed[source.slug] = str(e)
                self.logger.error("Cannot write listing", theme=source.slug, error=str(e))
                continue

            result = self.validator.validate_file(listing_file)
            if not result.is_valid:
                shutil.rmtree(listing_file.parent)
                report.failed[source.slug] = result.get_error_summary()
                self.logger.error("Generated listing is invalid", theme=source.slug)
                continue

            report.written.append(source.slug)
            self.logger.info("Wrote listing", theme=source.slug, path=str(listing_file))

        self.logger.info(
            "Generation finished",
            written=len(report.written),
            skipped=len(report.skipped),
            failed=len(report.failed),
        )
        return report
