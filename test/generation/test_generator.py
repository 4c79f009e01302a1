"""Tests for building and writing gallery listings."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from conftest import CREATED, UPDATED, FakeHistory, write_theme
from gallery.config import GallerySettings
from gallery.generation.generator import GalleryGenerator, build_listing, escape_template_syntax
from gallery.generation.history import HistoryInfo
from gallery.listing.frontmatter import parse_listing
from gallery.themes.registry import ThemeRegistry


@pytest.fixture
def registry(populated_themes_dir, logger) -> ThemeRegistry:
    return ThemeRegistry(str(populated_themes_dir), logger)


@pytest.fixture
def generator(registry, logger, fake_history) -> GalleryGenerator:
    return GalleryGenerator(registry, logger, history=fake_history)


class TestEscapeTemplateSyntax:
    def test_expressions_and_statements_are_commented(self):
        text = "{{ resize_image() }} and {% if x %}y{% endif %}"
        assert escape_template_syntax(text) == (
            "{{/* resize_image() */}} and {%/* if x */%}y{%/* endif */%}"
        )

    def test_plain_text_untouched(self):
        assert escape_template_syntax("# Title\n\n{ single braces }") == "# Title\n\n{ single braces }"


class TestBuildListing:
    """Mapping theme metadata onto listing frontmatter."""

    def test_field_mapping(self, registry):
        source = registry.get_theme("after-dark")
        history = HistoryInfo(created=CREATED, updated=UPDATED, repository="https://github.com/x/y")
        listing = build_listing(source, "# readme\n", history)
        frontmatter = listing.frontmatter

        assert listing.slug == "after-dark"
        assert frontmatter.title == "after-dark"
        assert frontmatter.description == "A robust, elegant dark theme"
        assert frontmatter.template == "theme.html"
        assert frontmatter.date == UPDATED
        assert frontmatter.extra.created == CREATED
        assert frontmatter.extra.updated == UPDATED
        assert frontmatter.extra.repository == "https://github.com/x/y"
        assert frontmatter.extra.homepage == "https://github.com/example/after-dark"
        assert frontmatter.extra.minimum_version == "0.11.0"
        assert frontmatter.extra.license == "MIT"
        assert frontmatter.extra.demo == "https://example.github.io/after-dark/"
        assert frontmatter.extra.author.name == "Jane Doe"
        assert frontmatter.extra.author.homepage == "https://jane.example.com"
        assert listing.body == "# readme\n"

    def test_repository_falls_back_to_homepage(self, registry):
        source = registry.get_theme("book")
        for repository in (None, "/srv/git/book"):
            history = HistoryInfo(created=CREATED, updated=UPDATED, repository=repository)
            listing = build_listing(source, "", history)
            assert listing.frontmatter.extra.repository == "https://github.com/example/book"

    def test_missing_demo_and_author_homepage_become_empty(self, themes_dir, logger):
        write_theme(
            themes_dir,
            "plain",
            toml_text=(
                'name = "plain"\ndescription = "d"\nlicense = "MIT"\n'
                'homepage = "https://example.com"\nmin_version = "0.9.0"\n'
                '[author]\nname = "Jane"\n'
            ),
        )
        source = ThemeRegistry(str(themes_dir), logger).get_theme("plain")
        listing = build_listing(source, "", HistoryInfo(created=CREATED, updated=UPDATED))
        assert listing.frontmatter.extra.demo == ""
        assert listing.frontmatter.extra.author.homepage == ""

    def test_custom_template_name(self, registry):
        source = registry.get_theme("book")
        history = HistoryInfo(created=CREATED, updated=UPDATED)
        listing = build_listing(source, "", history, template="gallery-item.html")
        assert listing.frontmatter.template == "gallery-item.html"


class TestGenerate:
    """Writing listing folders."""

    def test_writes_listing_and_screenshot(self, generator, tmp_path):
        output = tmp_path / "content" / "themes"
        report = generator.generate(output)

        assert report.ok
        assert report.written == ["after-dark", "book"]
        assert report.skipped == {"not-a-theme": "missing theme.toml"}
        assert (output / "after-dark" / "screenshot.png").read_bytes().startswith(b"\x89PNG")

        text = (output / "after-dark" / "index.md").read_text(encoding="utf-8")
        assert text.startswith("+++\n")
        listing = parse_listing(text, slug="after-dark")
        assert listing.frontmatter.extra.repository == "https://github.com/example/theme"
        assert listing.frontmatter.date == UPDATED
        assert "{{/* resize_image() */}}" in listing.body
        assert "{%/* if */%}" in listing.body

    def test_clean_removes_stale_listings_only(self, generator, tmp_path):
        output = tmp_path / "site"
        stale = output / "removed-theme"
        stale.mkdir(parents=True)
        (stale / "index.md").write_text("old")
        (output / "_index.md").write_text('+++\ntitle = "Themes"\n+++\n')
        (output / "assets").mkdir()

        generator.generate(output)

        assert not stale.exists()
        assert (output / "_index.md").exists()
        assert (output / "assets").exists()

    def test_no_clean_keeps_stale_listings(self, generator, tmp_path):
        stale = tmp_path / "site" / "removed-theme"
        stale.mkdir(parents=True)
        (stale / "index.md").write_text("old")

        generator.generate(tmp_path / "site", clean=False)

        assert stale.exists()

    def test_history_fallback_uses_file_time(self, registry, logger, tmp_path):
        generator = GalleryGenerator(registry, logger, history=FakeHistory(unavailable=True))
        report = generator.generate(tmp_path / "out")

        assert report.written == ["after-dark", "book"]
        listing = parse_listing(
            (tmp_path / "out" / "book" / "index.md").read_text(encoding="utf-8"), slug="book"
        )
        extra = listing.frontmatter.extra
        assert extra.created == extra.updated
        assert extra.updated.microsecond == 0
        assert extra.repository == "https://github.com/example/book"

    def test_unbuildable_listing_is_reported(self, registry, logger, tmp_path):
        # A creation date after the update date cannot form a valid listing
        history = FakeHistory(
            created=datetime(2024, 1, 1, tzinfo=timezone.utc),
            updated=datetime(2020, 1, 1, tzinfo=timezone.utc),
        )
        generator = GalleryGenerator(registry, logger, history=history)
        report = generator.generate(tmp_path / "out")

        assert not report.ok
        assert set(report.failed) == {"after-dark", "book"}
        assert not (tmp_path / "out" / "after-dark").exists()

    def test_write_failure_is_reported_and_run_continues(
        self, themes_dir, logger, fake_history, tmp_path
    ):
        write_theme(themes_dir, "a-ok")
        write_theme(themes_dir, "b-bad", screenshot=False)
        (themes_dir / "b-bad" / "screenshot.png").mkdir()
        write_theme(themes_dir, "c-ok")
        registry = ThemeRegistry(str(themes_dir), logger)
        generator = GalleryGenerator(registry, logger, history=fake_history)

        report = generator.generate(tmp_path / "out")

        assert report.written == ["a-ok", "c-ok"]
        assert list(report.failed) == ["b-bad"]
        assert not report.ok
        assert not (tmp_path / "out" / "b-bad").exists()
        assert (tmp_path / "out" / "c-ok" / "screenshot.png").exists()

    def test_settings_template_and_screenshot(self, themes_dir, logger, fake_history, tmp_path):
        write_theme(themes_dir, "no-shot", screenshot=False)
        settings = GallerySettings(listing_template="gallery.html", require_screenshot=False)
        registry = ThemeRegistry(str(themes_dir), logger, require_screenshot=False)
        generator = GalleryGenerator(registry, logger, history=fake_history, settings=settings)

        report = generator.generate(tmp_path / "out")

        assert report.written == ["no-shot"]
        folder = Path(tmp_path / "out" / "no-shot")
        assert not (folder / "screenshot.png").exists()
        listing = parse_listing((folder / "index.md").read_text(encoding="utf-8"), slug="no-shot")
        assert listing.frontmatter.template == "gallery.html"
