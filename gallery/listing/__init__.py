"""Listing pages: models, frontmatter codec and loader."""
from gallery.listing.models import Listing, ListingAuthor, ListingExtra, ListingFrontmatter
from gallery.listing.frontmatter import (
    dump_frontmatter,
    parse_frontmatter,
    parse_listing,
    render_listing,
    split_frontmatter,
)
from gallery.listing.loader import load_listings

__all__ = [
    "Listing",
    "ListingAuthor",
    "ListingExtra",
    "ListingFrontmatter",
    "dump_frontmatter",
    "load_listings",
    "parse_frontmatter",
    "parse_listing",
    "render_listing",
    "split_frontmatter",
]
