"""Git history lookup exception."""
from gallery.exceptions.base import GalleryError


class HistoryUnavailableError(GalleryError):
    """Raised when commit dates or the remote URL cannot be read."""

    default_code = "HISTORY_UNAVAILABLE"

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"No git history for '{path}': {reason}",
            details={"path": path},
        )
        self.path = path
        self.reason = reason
