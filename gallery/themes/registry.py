"""Theme registry for discovering gallery themes on disk."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from gallery.registry_base import BaseRegistry
from gallery.themes.theme_metadata import ThemeMetadata, ThemeSource
from gallery.themes.theme_list_item import ThemeListItem
from gallery.logger import Logger
from gallery.exceptions import InvalidThemeError, ThemeNotFoundError

METADATA_FILE = "theme.toml"
README_FILE = "README.md"
SCREENSHOT_FILE = "screenshot.png"


class ThemeRegistry(BaseRegistry):
    """Manages loading and discovery of theme checkouts."""

    def __init__(
        self,
        themes_dir: str,
        logger: Logger,
        exclude: Optional[Iterable[str]] = None,
        require_screenshot: bool = True,
    ):
        """
        Initialize the theme registry.

        Args:
            themes_dir: Directory holding one folder per theme
            logger: Logger instance
            exclude: Theme folder names to ignore
            require_screenshot: Skip themes without screenshot.png
        """
        self._themes: Dict[str, ThemeSource] = {}
        self.require_screenshot = require_screenshot
        super().__init__(themes_dir, logger, exclude)

    def _get_registry_type(self) -> str:
        return "theme"

    def _load_items(self) -> None:
        """Load every theme folder below the registry directory."""
        for theme_dir in self._discover_item_dirs():
            self._load_theme(theme_dir)

        self.logger.info(
            f"Loaded {len(self._themes)} theme(s)",
            directory=str(self.registry_dir),
            skipped=len(self.load_errors),
        )

    def _load_theme(self, theme_dir: Path) -> None:
        slug = theme_dir.name
        metadata_file = theme_dir / METADATA_FILE
        readme_file = theme_dir / README_FILE
        screenshot_file = theme_dir / SCREENSHOT_FILE

        if not metadata_file.exists():
            self._record_error(slug, f"missing {METADATA_FILE}")
            return
        if not readme_file.exists():
            self._record_error(slug, f"missing {README_FILE}")
            return
        if self.require_screenshot and not screenshot_file.exists():
            self._record_error(slug, f"missing {SCREENSHOT_FILE}")
            return

        metadata_data = self._load_toml_file(metadata_file)
        if metadata_data is None:
            self._record_error(slug, f"{METADATA_FILE} is not valid TOML")
            return

        try:
            metadata = ThemeMetadata.model_validate(metadata_data)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            self._record_error(slug, f"invalid {METADATA_FILE}: {problems}")
            return

        self._themes[slug] = ThemeSource(
            slug=slug,
            path=theme_dir,
            metadata=metadata,
            readme_path=readme_file,
            screenshot_path=screenshot_file if screenshot_file.exists() else None,
        )
        self.logger.debug(f"Loaded theme: {slug} ({metadata.name})")

    def list_themes(self) -> List[ThemeListItem]:
        """Get a summary of every loaded theme, ordered by folder name."""
        return [
            ThemeListItem(
                slug=source.slug,
                name=source.metadata.name,
                description=source.metadata.description,
                license=source.metadata.license,
                min_version=source.metadata.min_version,
            )
            for source in self._themes.values()
        ]

    def list_sources(self) -> List[ThemeSource]:
        return list(self._themes.values())

    def get_theme(self, slug: str) -> ThemeSource:
        """
        Get a loaded theme.

        Raises:
            ThemeNotFoundError: If no theme folder has that name
            InvalidThemeError: If the folder exists but was skipped while loading
        """
        source = self._themes.get(slug)
        if source is None:
            if slug in self.load_errors:
                raise InvalidThemeError(
                    slug, self.load_errors[slug], path=str(self.registry_dir / slug)
                )
            raise ThemeNotFoundError(slug, available_themes=sorted(self._themes))
        return source

    def get_theme_metadata(self, slug: str) -> Optional[ThemeMetadata]:
        """Get metadata for a theme, or None."""
        source = self._themes.get(slug)
        return source.metadata if source else None

    def get_readme(self, slug: str) -> str:
        """Get README text for a theme."""
        return self.get_theme(slug).readme_path.read_text(encoding="utf-8")

    def get_screenshot_path(self, slug: str) -> Optional[Path]:
        return self.get_theme(slug).screenshot_path

    def theme_exists(self, slug: str) -> bool:
        """Check if a theme was loaded."""
        return slug in self._themes
