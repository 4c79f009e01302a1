"""Theme registry package."""
from gallery.themes.registry import ThemeRegistry
from gallery.themes.theme_metadata import ThemeAuthor, ThemeMetadata, ThemeOrigin, ThemeSource
from gallery.themes.theme_list_item import ThemeListItem

__all__ = [
    "ThemeRegistry",
    "ThemeAuthor",
    "ThemeMetadata",
    "ThemeOrigin",
    "ThemeSource",
    "ThemeListItem",
]
