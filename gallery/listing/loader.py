"""Load parsed listings from a content directory."""
from pathlib import Path
from typing import List

from gallery.exceptions import FrontmatterError
from gallery.listing.frontmatter import parse_listing
from gallery.listing.models import Listing
from gallery.logger import Logger

LISTING_FILE = "index.md"


def load_listings(directory: Path, logger: Logger) -> List[Listing]:
    """
    Parse every ``<slug>/index.md`` under ``directory``.

    Pages that fail to parse are logged and left out.
    """
    directory = Path(directory)
    listings: List[Listing] = []
    if not directory.is_dir():
        logger.warning("Listing directory does not exist", path=str(directory))
        return listings

    for folder in sorted(directory.iterdir()):
        listing_file = folder / LISTING_FILE
        if folder.name.startswith(".") or not listing_file.is_file():
            continue
        try:
            text = listing_file.read_text(encoding="utf-8")
            listings.append(parse_listing(text, slug=folder.name, path=listing_file))
        except FrontmatterError as e:
            logger.warning("Skipping invalid listing", slug=folder.name, error=e.reason)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read listing", slug=folder.name, error=str(e))
    return listings
