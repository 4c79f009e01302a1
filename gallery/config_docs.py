"""Centralized configuration documentation and defaults for the theme gallery.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Directories
# -----------
# GALLERY_THEMES_DIR: Directory with one checkout per theme (default: ./themes)
#   Each theme folder holds theme.toml, README.md and screenshot.png
#
# GALLERY_CONTENT_DIR: Output directory for listing folders
#   (default: ./content/themes)
#
# Settings
# --------
# GALLERY_SETTINGS: Path to a YAML settings file (default: ./gallery.yaml if present)
#   Keys: listing_template, exclude, catalog_title, require_screenshot,
#         git_timeout_seconds
#
# Logging
# -------
# GALLERY_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_LISTING_TEMPLATE = "theme.html"
DEFAULT_CATALOG_TITLE = "Themes"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_GIT_TIMEOUT_SECONDS = 30

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of the current configuration.

    Returns:
        Dictionary with resolved directories, settings file and log level
    """
    from gallery.config import Config

    settings_path = Config.get_settings_path()
    return {
        "themes_dir": str(Config.get_themes_dir()),
        "content_dir": str(Config.get_content_dir()),
        "settings_file": str(settings_path) if settings_path else None,
        "log_level": Config.get_log_level(),
    }
