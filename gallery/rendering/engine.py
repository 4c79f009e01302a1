"""Rendering engine for listing pages and the gallery catalog."""

from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from gallery.listing.frontmatter import dump_frontmatter
from gallery.listing.models import Listing
from gallery.logger import Logger

TEMPLATES_DIR = Path(__file__).parent / "templates"
LISTING_TEMPLATE = "listing.md.j2"
CATALOG_TEMPLATE = "catalog.md.j2"


def markdown_cell(value: object) -> str:
    """Make a value safe to place inside a markdown table cell."""
    text = " ".join(str(value).split())
    return text.replace("|", "\\|")


class RenderingEngine:
    """Renders listings and catalogs with Jinja2 templates."""

    def __init__(self, logger: Logger, templates_dir: Optional[Path] = None):
        """
        Initialize the rendering engine.

        Args:
            logger: Logger instance
            templates_dir: Directory with listing.md.j2 and catalog.md.j2
                (uses the bundled templates if None)
        """
        self.logger = logger
        self.templates_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
        self._jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._jinja_env.filters["cell"] = markdown_cell

    def render_listing(self, listing: Listing) -> str:
        """Render the full text of a listing's index.md."""
        template = self._jinja_env.get_template(LISTING_TEMPLATE)
        return template.render(
            frontmatter=dump_frontmatter(listing.frontmatter.to_toml_dict()),
            body=listing.body,
            listing=listing,
        )

    def render_catalog(self, listings: Iterable[Listing], title: str = "Themes") -> str:
        """
        Render a markdown table summarising every listing.

        Rows are ordered by title, case-insensitively.
        """
        ordered = sorted(listings, key=lambda listing: listing.title.lower())
        template = self._jinja_env.get_template(CATALOG_TEMPLATE)
        content = template.render(title=title, listings=ordered)
        self.logger.info("Rendered catalog", themes=len(ordered))
        return content
