"""Custom exceptions for the theme registry and listing pipeline.

Messages name the offending theme or file and, where possible, list the
alternatives so the caller can correct the input.
"""

from gallery.exceptions.base import (
    GalleryError,
    ValidationError,
    ConfigurationError,
    RegistryError,
)
from gallery.exceptions.theme import ThemeNotFoundError, InvalidThemeError
from gallery.exceptions.frontmatter import FrontmatterError
from gallery.exceptions.history import HistoryUnavailableError

__all__ = [
    # Base exceptions
    "GalleryError",
    "ValidationError",
    "ConfigurationError",
    "RegistryError",
    # Specific exceptions
    "ThemeNotFoundError",
    "InvalidThemeError",
    "FrontmatterError",
    "HistoryUnavailableError",
]
