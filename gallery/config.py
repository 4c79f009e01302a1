"""Gallery configuration.

Directories are resolved with the priority chain:
1. Explicit argument (CLI flag)
2. Environment variable
3. Default below the current working directory

Generation settings live in an optional YAML file whose values override
``GallerySettings`` defaults.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from gallery.config_docs import (
    DEFAULT_CATALOG_TITLE,
    DEFAULT_GIT_TIMEOUT_SECONDS,
    DEFAULT_LISTING_TEMPLATE,
    DEFAULT_LOG_LEVEL,
)
from gallery.exceptions import ConfigurationError

ENV_THEMES_DIR = "GALLERY_THEMES_DIR"
ENV_CONTENT_DIR = "GALLERY_CONTENT_DIR"
ENV_SETTINGS = "GALLERY_SETTINGS"
ENV_LOG_LEVEL = "GALLERY_LOG_LEVEL"

DEFAULT_SETTINGS_FILE = "gallery.yaml"


class GallerySettings(BaseModel):
    """Tunable options for listing generation and validation."""

    model_config = ConfigDict(extra="forbid")

    listing_template: str = DEFAULT_LISTING_TEMPLATE
    exclude: List[str] = Field(default_factory=list)
    catalog_title: str = DEFAULT_CATALOG_TITLE
    require_screenshot: bool = True
    git_timeout_seconds: int = Field(default=DEFAULT_GIT_TIMEOUT_SECONDS, gt=0)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "GallerySettings":
        """Load settings from a YAML file.

        Raises:
            ConfigurationError: If the file is unreadable or has unknown keys
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read settings file {path}: {e}", details={"path": str(path)}
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Settings file {path} is not valid YAML: {e}", details={"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file {path} must contain a mapping", details={"path": str(path)}
            )

        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid settings in {path}: {e}", details={"path": str(path)}
            ) from e


class Config:
    """Directory and settings resolution for the gallery tools."""

    @classmethod
    def get_themes_dir(cls, cli_dir: Optional[str] = None) -> Path:
        """Directory holding one sub-directory per theme."""
        if cli_dir:
            return Path(cli_dir)
        env_dir = os.environ.get(ENV_THEMES_DIR)
        if env_dir:
            return Path(env_dir)
        return Path.cwd() / "themes"

    @classmethod
    def get_content_dir(cls, cli_dir: Optional[str] = None) -> Path:
        """Directory receiving the generated listing folders."""
        if cli_dir:
            return Path(cli_dir)
        env_dir = os.environ.get(ENV_CONTENT_DIR)
        if env_dir:
            return Path(env_dir)
        return Path.cwd() / "content" / "themes"

    @classmethod
    def get_settings_path(cls, cli_path: Optional[str] = None) -> Optional[Path]:
        """Settings file path, or None when no file is configured or present."""
        if cli_path:
            return Path(cli_path)
        env_path = os.environ.get(ENV_SETTINGS)
        if env_path:
            return Path(env_path)
        default = Path.cwd() / DEFAULT_SETTINGS_FILE
        return default if default.exists() else None

    @classmethod
    def load_settings(cls, cli_path: Optional[str] = None) -> GallerySettings:
        """Load settings, falling back to defaults when no file is configured.

        An explicitly requested file that does not exist is an error.
        """
        path = cls.get_settings_path(cli_path)
        if path is None:
            return GallerySettings()
        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {path}", details={"path": str(path)}
            )
        return GallerySettings.from_yaml(path)

    @staticmethod
    def get_log_level(cli_level: Optional[str] = None) -> str:
        return (cli_level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
