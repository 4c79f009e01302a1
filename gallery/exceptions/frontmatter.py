"""Frontmatter parsing exception."""
from typing import Optional

from gallery.exceptions.base import ValidationError


class FrontmatterError(ValidationError):
    """Raised when a listing's frontmatter block is missing or undecodable."""

    default_code = "INVALID_FRONTMATTER"

    def __init__(self, reason: str, source: Optional[str] = None):
        """
        Args:
            reason: What went wrong while splitting or decoding
            source: File path or label of the document
        """
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{reason}", details={"source": source})
        self.reason = reason
        self.source = source
