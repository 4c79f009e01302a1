"""Listing generation from theme sources."""
from gallery.generation.history import GitHistory, HistoryInfo, normalize_remote_url
from gallery.generation.generator import (
    GalleryGenerator,
    GenerationReport,
    build_listing,
    escape_template_syntax,
)

__all__ = [
    "GitHistory",
    "HistoryInfo",
    "normalize_remote_url",
    "GalleryGenerator",
    "GenerationReport",
    "build_listing",
    "escape_template_syntax",
]
