"""Pytest configuration and fixtures

Provides shared fixtures for all tests: theme checkouts built in a
temporary directory, a stand-in for git history and ready-made listings.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gallery.exceptions import HistoryUnavailableError  # noqa: E402
from gallery.generation.history import GitHistory, HistoryInfo  # noqa: E402
from gallery.logger import DefaultLogger  # noqa: E402


# ============================================================================
# THEME SOURCES
# ============================================================================

FAKE_PNG = b"\x89PNG\r\n\x1a\n fake screenshot"

THEME_TOML = """\
name = "{name}"
description = "A robust, elegant dark theme"
license = "MIT"
homepage = "https://github.com/example/{slug}"
min_version = "0.11.0"
demo = "https://example.github.io/{slug}/"

[extra]
accent = "teal"

[author]
name = "Jane Doe"
homepage = "https://jane.example.com"
"""

README = """\
# {name}

Add the theme to `config.toml`:

```toml
theme = "{slug}"
```

Use the `{{{{ resize_image() }}}}` shortcode and `{{% if %}}` blocks freely.
"""


def write_theme(
    themes_dir: Path,
    slug: str,
    name: Optional[str] = None,
    toml_text: Optional[str] = None,
    readme: Optional[str] = None,
    screenshot: bool = True,
) -> Path:
    """Create a theme folder with theme.toml, README.md and screenshot.png."""
    name = name or slug.replace("-", " ").title()
    theme_dir = themes_dir / slug
    theme_dir.mkdir(parents=True, exist_ok=True)
    if toml_text is None:
        toml_text = THEME_TOML.format(name=name, slug=slug)
    if toml_text is not False:
        (theme_dir / "theme.toml").write_text(toml_text, encoding="utf-8")
    if readme is None:
        readme = README.format(name=name, slug=slug)
    if readme is not False:
        (theme_dir / "README.md").write_text(readme, encoding="utf-8")
    if screenshot:
        (theme_dir / "screenshot.png").write_bytes(FAKE_PNG)
    return theme_dir


@pytest.fixture
def themes_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "themes"
    directory.mkdir()
    return directory


@pytest.fixture
def populated_themes_dir(themes_dir: Path) -> Path:
    """Two valid themes and one folder without metadata."""
    write_theme(themes_dir, "after-dark", name="after-dark")
    write_theme(themes_dir, "book", name="book")
    (themes_dir / "not-a-theme").mkdir()
    return themes_dir


@pytest.fixture
def logger() -> DefaultLogger:
    return DefaultLogger()


# ============================================================================
# GIT HISTORY STAND-IN
# ============================================================================

CREATED = datetime(2018, 1, 31, 14, 52, 4, tzinfo=timezone(timedelta(hours=1)))
UPDATED = datetime(2023, 6, 2, 9, 0, 0, tzinfo=timezone.utc)


class FakeHistory(GitHistory):
    """Returns fixed dates instead of calling git."""

    def __init__(
        self,
        created: datetime = CREATED,
        updated: datetime = UPDATED,
        repository: Optional[str] = "https://github.com/example/theme",
        unavailable: bool = False,
    ):
        super().__init__()
        self.created = created
        self.updated = updated
        self.repository = repository
        self.unavailable = unavailable
        self.calls = []

    def lookup(self, path: Path) -> HistoryInfo:
        self.calls.append(Path(path).name)
        if self.unavailable:
            raise HistoryUnavailableError(str(path), "not a git repository")
        return HistoryInfo(created=self.created, updated=self.updated, repository=self.repository)


@pytest.fixture
def fake_history() -> FakeHistory:
    return FakeHistory()


# ============================================================================
# LISTINGS
# ============================================================================

VALID_LISTING = """\
+++
title = "after-dark"
description = "A robust, elegant dark theme"
template = "theme.html"
date = 2023-06-02T09:00:00Z

[extra]
created = 2018-01-31T14:52:04+01:00
updated = 2023-06-02T09:00:00Z
repository = "https://github.com/example/after-dark"
homepage = "https://github.com/example/after-dark"
minimum_version = "0.11.0"
license = "MIT"
demo = "https://example.github.io/after-dark/"

[extra.author]
name = "Jane Doe"
homepage = "https://jane.example.com"
+++

# after-dark

A dark theme.
"""


@pytest.fixture
def valid_listing_text() -> str:
    return VALID_LISTING


def write_listing(content_dir: Path, slug: str, text: str = VALID_LISTING, screenshot: bool = True) -> Path:
    folder = content_dir / slug
    folder.mkdir(parents=True, exist_ok=True)
    listing_file = folder / "index.md"
    listing_file.write_text(text, encoding="utf-8")
    if screenshot:
        (folder / "screenshot.png").write_bytes(FAKE_PNG)
    return listing_file
