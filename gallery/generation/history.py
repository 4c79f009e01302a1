"""Commit dates and repository URL of a theme checkout, read from git."""

import re
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple
from urllib.parse import urlparse, urlunparse

from gallery.exceptions import HistoryUnavailableError
from gallery.logger import Logger, session_logger

_SCP_LIKE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")


@dataclass
class HistoryInfo:
    """What the generator needs from version control for one theme."""

    created: datetime
    updated: datetime
    repository: Optional[str] = None


def normalize_remote_url(url: str) -> str:
    """
    Rewrite a git remote URL as a browsable https URL.

    ``git@github.com:owner/repo.git`` and ``ssh://git@github.com/owner/repo``
    both become ``https://github.com/owner/repo``. Credentials and a
    trailing ``.git`` are removed; http(s) URLs keep their scheme.
    """
    url = url.strip()
    if "://" not in url:
        match = _SCP_LIKE.match(url)
        if match is None:
            return url
        url = f"https://{match.group('host')}/{match.group('path')}"

    parsed = urlparse(url)
    scheme = parsed.scheme if parsed.scheme in ("http", "https") else "https"
    host = parsed.hostname or ""
    if parsed.port and scheme == parsed.scheme:
        host = f"{host}:{parsed.port}"
    path = parsed.path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    return urlunparse((scheme, host, path, "", "", ""))


class GitHistory:
    """Reads author dates and the origin remote with the git command line."""

    def __init__(self, timeout: int = 30, logger: Optional[Logger] = None):
        self.timeout = timeout
        self.logger = logger or session_logger

    def _run_git(self, path: Path, *args: str) -> str:
        command = ["git", "-C", str(path), *args]
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except FileNotFoundError as e:
            raise HistoryUnavailableError(str(path), "git executable not found") from e
        except subprocess.TimeoutExpired as e:
            raise HistoryUnavailableError(
                str(path), f"git timed out after {self.timeout}s"
            ) from e
        except subprocess.CalledProcessError as e:
            reason = (e.stderr or "").strip() or f"git exited with status {e.returncode}"
            raise HistoryUnavailableError(str(path), reason) from e
        return completed.stdout

    def commit_dates(self, path: Path) -> Tuple[datetime, datetime]:
        """
        Return ``(created, updated)``: the author dates of the oldest and
        newest commits touching ``path``.

        Raises:
            HistoryUnavailableError: If git fails or there are no commits
        """
        output = self._run_git(Path(path), "log", "--pretty=format:%aI", "--", ".")
        stamps = [line.strip() for line in output.splitlines() if line.strip()]
        if not stamps:
            raise HistoryUnavailableError(str(path), "no commits")
        try:
            dates = [datetime.fromisoformat(stamp) for stamp in stamps]
        except ValueError as e:
            raise HistoryUnavailableError(str(path), f"unparseable commit date: {e}") from e
        return min(dates), max(dates)

    def repository_url(self, path: Path) -> Optional[str]:
        """Origin remote of the checkout as an https URL, or None when unset."""
        try:
            output = self._run_git(Path(path), "config", "--get", "remote.origin.url")
        except HistoryUnavailableError as e:
            # `git config --get` exits 1 when the key is missing
            self.logger.debug("No origin remote", path=str(path), reason=e.reason)
            return None
        url = output.strip()
        return normalize_remote_url(url) if url else None

    def lookup(self, path: Path) -> HistoryInfo:
        created, updated = self.commit_dates(path)
        return HistoryInfo(created=created, updated=updated, repository=self.repository_url(path))
