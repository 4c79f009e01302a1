"""Theme lookup and loading exceptions."""
from typing import List, Optional

from gallery.exceptions.base import RegistryError


class ThemeNotFoundError(RegistryError):
    """Raised when a theme cannot be found in the registry."""

    default_code = "THEME_NOT_FOUND"

    def __init__(self, theme_name: str, available_themes: Optional[List[str]] = None):
        """
        Args:
            theme_name: Name of the theme that was not found
            available_themes: Themes currently loaded in the registry
        """
        available_text = ""
        if available_themes:
            theme_list = ", ".join(available_themes)
            available_text = f" Available themes: {theme_list}."

        message = f"Theme '{theme_name}' not found.{available_text}"
        super().__init__(message, details={"theme": theme_name})
        self.theme_name = theme_name


class InvalidThemeError(RegistryError):
    """Raised when a theme directory cannot be turned into a listing."""

    default_code = "INVALID_THEME"

    def __init__(self, theme_name: str, reason: str, path: Optional[str] = None):
        """
        Args:
            theme_name: Directory name of the theme
            reason: Explanation of what is wrong
            path: Path of the offending file or directory
        """
        location = f" ({path})" if path else ""
        message = f"Invalid theme '{theme_name}'{location}: {reason}"
        super().__init__(message, details={"theme": theme_name, "path": path})
        self.theme_name = theme_name
        self.reason = reason
