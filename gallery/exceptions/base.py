"""Base exception classes for the theme gallery.

Every error carries a machine-readable ``code``, a human-readable
``message`` and an optional ``details`` mapping so the CLI can report
failures uniformly.
"""

from typing import Any, Dict, Optional


class GalleryError(Exception):
    """Root of all gallery errors."""

    default_code = "GALLERY_ERROR"

    def __init__(
        self,
        message: str = "",
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(GalleryError):
    """Input failed validation."""

    default_code = "VALIDATION_ERROR"


class ConfigurationError(GalleryError):
    """Settings could not be loaded or are inconsistent."""

    default_code = "CONFIGURATION_ERROR"


class RegistryError(GalleryError):
    """A registry could not load or resolve an item."""

    default_code = "REGISTRY_ERROR"
