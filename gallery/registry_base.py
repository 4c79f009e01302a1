"""Base registry for directory-per-item collections."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import toml

from gallery.logger import Logger


class BaseRegistry(ABC):
    """Abstract base for registries loading one item per sub-directory."""

    def __init__(
        self,
        registry_dir: str,
        logger: Logger,
        exclude: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the registry.

        Args:
            registry_dir: Path to directory containing one folder per item
            logger: Logger instance
            exclude: Folder names to ignore
        """
        self.registry_dir = Path(registry_dir)
        self.logger = logger
        self.exclude = set(exclude or [])
        self.load_errors: Dict[str, str] = {}

        self._load_items()

    def _get_registry_type(self) -> str:
        """Get registry type, used in log messages. Override in subclasses."""
        return "items"

    def _discover_item_dirs(self) -> List[Path]:
        """
        Find all item directories in the registry.

        Items are directories at root level that are not hidden, do not
        start with underscore and are not excluded. Returned sorted by name.
        """
        if not self.registry_dir.exists():
            self.logger.warning(f"Registry directory does not exist: {self.registry_dir}")
            return []

        item_dirs = []
        for item in sorted(self.registry_dir.iterdir()):
            if not item.is_dir() or item.name.startswith((".", "_")):
                continue
            if item.name in self.exclude:
                self.logger.debug(
                    f"Excluded {self._get_registry_type()} directory", name=item.name
                )
                continue
            item_dirs.append(item)
        return item_dirs

    @abstractmethod
    def _load_items(self) -> None:
        """Load all items from registry directory. Implemented by subclasses."""
        pass

    def _load_toml_file(self, file_path: Path) -> Optional[Dict[str, Any]]:
        """Load and parse a TOML file, logging and returning None on failure."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return toml.load(f)
        except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
            self.logger.error(f"Failed to parse TOML {file_path}: {e}")
            return None

    def _record_error(self, name: str, reason: str) -> None:
        """Remember why an item was skipped."""
        self.load_errors[name] = reason
        self.logger.error(f"Skipping {self._get_registry_type()} '{name}': {reason}")
