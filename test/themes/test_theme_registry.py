"""Unit tests for gallery.themes.registry.ThemeRegistry."""
from __future__ import annotations

from pathlib import Path

import pytest

from conftest import write_theme
from gallery.exceptions import InvalidThemeError, ThemeNotFoundError
from gallery.logger import DefaultLogger
from gallery.themes.registry import ThemeRegistry


@pytest.fixture
def theme_registry(populated_themes_dir: Path, logger: DefaultLogger) -> ThemeRegistry:
    return ThemeRegistry(str(populated_themes_dir), logger)


# ============================================================================
# BASIC FUNCTIONALITY TESTS
# ============================================================================

def test_list_themes_returns_valid_themes_sorted(theme_registry: ThemeRegistry) -> None:
    slugs = [item.slug for item in theme_registry.list_themes()]
    assert slugs == ["after-dark", "book"]


def test_list_item_fields(theme_registry: ThemeRegistry) -> None:
    item = theme_registry.list_themes()[0]
    assert item.name == "after-dark"
    assert item.license == "MIT"
    assert item.min_version == "0.11.0"
    assert item.description.startswith("A robust")


def test_get_theme_metadata(theme_registry: ThemeRegistry) -> None:
    metadata = theme_registry.get_theme_metadata("after-dark")
    assert metadata is not None
    assert metadata.author.name == "Jane Doe"
    assert metadata.demo == "https://example.github.io/after-dark/"
    assert metadata.extra == {"accent": "teal"}
    assert metadata.original is None


def test_readme_and_screenshot(theme_registry: ThemeRegistry) -> None:
    assert theme_registry.get_readme("book").startswith("# book")
    screenshot = theme_registry.get_screenshot_path("book")
    assert screenshot is not None and screenshot.name == "screenshot.png"


def test_theme_exists_handles_valid_and_missing(theme_registry: ThemeRegistry) -> None:
    assert theme_registry.theme_exists("after-dark") is True
    assert theme_registry.theme_exists("not-a-theme") is False
    assert theme_registry.get_theme_metadata("missing") is None


def test_get_theme_unknown_lists_available(theme_registry: ThemeRegistry) -> None:
    with pytest.raises(ThemeNotFoundError) as exc_info:
        theme_registry.get_theme("missing")
    assert "after-dark, book" in str(exc_info.value)
    assert exc_info.value.code == "THEME_NOT_FOUND"


# ============================================================================
# SKIPPED THEMES
# ============================================================================

def test_folder_without_metadata_recorded(theme_registry: ThemeRegistry) -> None:
    assert theme_registry.load_errors == {"not-a-theme": "missing theme.toml"}


def test_missing_readme_skipped(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(themes_dir, "no-readme", readme=False)
    registry = ThemeRegistry(str(themes_dir), logger)
    assert registry.list_themes() == []
    assert registry.load_errors["no-readme"] == "missing README.md"


def test_get_skipped_theme_reports_reason(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(themes_dir, "no-readme", readme=False)
    registry = ThemeRegistry(str(themes_dir), logger)
    with pytest.raises(InvalidThemeError) as exc_info:
        registry.get_theme("no-readme")
    assert exc_info.value.reason == "missing README.md"
    assert exc_info.value.code == "INVALID_THEME"
    assert "Invalid theme 'no-readme'" in exc_info.value.message


def test_missing_screenshot_skipped_unless_optional(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(themes_dir, "no-shot", screenshot=False)

    strict = ThemeRegistry(str(themes_dir), logger)
    assert strict.load_errors["no-shot"] == "missing screenshot.png"

    lenient = ThemeRegistry(str(themes_dir), logger, require_screenshot=False)
    assert lenient.theme_exists("no-shot")
    assert lenient.get_screenshot_path("no-shot") is None


def test_unparseable_toml_skipped(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(themes_dir, "broken", toml_text="name = \n")
    registry = ThemeRegistry(str(themes_dir), logger)
    assert registry.load_errors["broken"] == "theme.toml is not valid TOML"


def test_schema_errors_name_the_field(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(
        themes_dir,
        "bad-version",
        toml_text=(
            'name = "bad"\ndescription = "d"\nlicense = "MIT"\n'
            'homepage = "https://example.com"\nmin_version = "latest"\n'
            '[author]\nname = "Jane"\n'
        ),
    )
    registry = ThemeRegistry(str(themes_dir), logger)
    assert "min_version" in registry.load_errors["bad-version"]


def test_ported_theme_keeps_original(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(
        themes_dir,
        "ported",
        toml_text=(
            'name = "ported"\ndescription = "d"\nlicense = "MIT"\n'
            'homepage = "https://example.com"\nmin_version = "0.9.0"\n'
            '[author]\nname = "Jane"\n'
            '[original]\nauthor = "someone"\nrepo = "https://github.com/someone/hugo-theme"\n'
        ),
    )
    registry = ThemeRegistry(str(themes_dir), logger)
    metadata = registry.get_theme_metadata("ported")
    assert metadata.original.author == "someone"
    assert metadata.demo is None


def test_hidden_and_excluded_folders_ignored(themes_dir: Path, logger: DefaultLogger) -> None:
    write_theme(themes_dir, ".git")
    write_theme(themes_dir, "_drafts")
    write_theme(themes_dir, "keep")
    write_theme(themes_dir, "drop")
    registry = ThemeRegistry(str(themes_dir), logger, exclude=["drop"])
    assert [item.slug for item in registry.list_themes()] == ["keep"]
    assert registry.load_errors == {}


def test_missing_directory_gives_empty_registry(tmp_path: Path, logger: DefaultLogger) -> None:
    registry = ThemeRegistry(str(tmp_path / "nope"), logger)
    assert registry.list_themes() == []
    assert registry.load_errors == {}
