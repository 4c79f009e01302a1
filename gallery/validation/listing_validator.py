"""Validator for theme listing pages."""
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from gallery.exceptions import FrontmatterError
from gallery.listing.frontmatter import parse_frontmatter
from gallery.listing.models import ListingFrontmatter
from gallery.logger import Logger, session_logger
from gallery.validation.models import DirectoryReport, ValidationError, ValidationResult

LISTING_FILE = "index.md"
SECTION_FILE = "_index.md"
SCREENSHOT_FILE = "screenshot.png"

# What each field should hold, used to explain schema failures
FIELD_EXPECTATIONS: Dict[str, str] = {
    "title": "Non-empty theme name",
    "description": "One-line description string",
    "template": "Name of the page template, e.g. theme.html",
    "date": "TOML datetime of the last update",
    "extra": "Table with created, updated, repository, homepage, minimum_version, "
    "license, demo and author; updated on or after created",
    "extra.created": "TOML datetime of the first commit",
    "extra.updated": "TOML datetime of the last commit",
    "extra.repository": "http(s) URL of the theme repository",
    "extra.homepage": "http(s) URL of the theme homepage",
    "extra.minimum_version": "Dotted version such as 0.17.2",
    "extra.license": "Non-empty license name",
    "extra.demo": "http(s) URL of a live demo, or empty string",
    "extra.author": "Table with name and homepage",
    "extra.author.name": "Non-empty author name",
    "extra.author.homepage": "http(s) URL, or empty string",
}

FIELD_SUGGESTIONS: Dict[str, List[str]] = {
    "extra.minimum_version": ["Copy min_version from the theme's theme.toml"],
    "extra.repository": ["Use the clone URL of the theme, rewritten to https"],
    "extra": ["Regenerate the listing from the theme sources"],
}


class ListingValidator:
    """Checks listing pages against the listing schema."""

    def __init__(self, logger: Optional[Logger] = None, require_screenshot: bool = True):
        self.logger = logger or session_logger
        self.require_screenshot = require_screenshot

    def validate_text(
        self,
        text: str,
        source: str = "<listing>",
        folder: Optional[Path] = None,
    ) -> ValidationResult:
        """
        Validate the text of a listing page.

        Args:
            text: Full page text including the frontmatter block
            source: Label used in messages (usually the file path)
            folder: Listing folder, used to check for the screenshot

        Returns:
            ValidationResult with errors and warnings
        """
        try:
            data, _body = parse_frontmatter(text, source=source)
        except FrontmatterError as e:
            return ValidationResult(
                source=source,
                is_valid=False,
                errors=[
                    ValidationError(
                        field="frontmatter",
                        message=e.reason,
                        received_value=text[:40],
                        expected="Document opening with a '+++' (TOML) or '---' (YAML) block",
                        suggestions=[
                            "Start the page with '+++' on its own line",
                            "Close the block with the same delimiter on its own line",
                        ],
                    )
                ],
            )

        errors: List[ValidationError] = []
        warnings: List[ValidationError] = []
        frontmatter: Optional[ListingFrontmatter] = None
        try:
            frontmatter = ListingFrontmatter.model_validate(data)
        except PydanticValidationError as e:
            errors.extend(self._convert_errors(e))

        if frontmatter is not None:
            warnings.extend(self._consistency_warnings(frontmatter))
        if folder is not None and self.require_screenshot:
            if not (folder / SCREENSHOT_FILE).exists():
                warnings.append(
                    ValidationError(
                        field="screenshot",
                        message=f"{SCREENSHOT_FILE} missing next to the listing",
                        received_value=str(folder),
                        expected=f"{SCREENSHOT_FILE} in the listing folder",
                        suggestions=["Copy the screenshot from the theme repository"],
                    )
                )

        result = ValidationResult(
            source=source, is_valid=not errors, errors=errors, warnings=warnings
        )
        if errors:
            self.logger.debug("Listing invalid", source=source, errors=len(errors))
        return result

    def validate_file(self, path: Path) -> ValidationResult:
        """Validate a listing file on disk."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return ValidationResult(
                source=str(path),
                is_valid=False,
                errors=[
                    ValidationError(
                        field="file",
                        message=f"Cannot read listing: {e}",
                        received_value=str(path),
                        expected="Readable UTF-8 markdown file",
                    )
                ],
            )
        return self.validate_text(text, source=str(path), folder=path.parent)

    def validate_directory(self, directory: Path) -> DirectoryReport:
        """
        Validate every ``<slug>/index.md`` under a content directory.

        Hidden folders and the section page ``_index.md`` are skipped.
        """
        directory = Path(directory)
        report = DirectoryReport(directory=directory)
        if not directory.is_dir():
            self.logger.warning("Listing directory does not exist", path=str(directory))
            return report

        for folder in sorted(directory.iterdir()):
            if not folder.is_dir() or folder.name.startswith("."):
                continue
            listing_file = folder / LISTING_FILE
            if not listing_file.exists():
                self.logger.debug("No listing in folder", folder=folder.name)
                continue
            report.results.append(self.validate_file(listing_file))

        self.logger.info(
            "Validated listings",
            directory=str(directory),
            total=len(report.results),
            invalid=len(report.invalid),
        )
        return report

    def _convert_errors(self, exc: PydanticValidationError) -> List[ValidationError]:
        converted = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "frontmatter"
            message = err["msg"]
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            received: Any = err.get("input")
            if err["type"] == "missing":
                received = None
            converted.append(
                ValidationError(
                    field=field,
                    message=message,
                    received_value=_printable(received),
                    expected=FIELD_EXPECTATIONS.get(field, "See listing schema"),
                    suggestions=FIELD_SUGGESTIONS.get(field, []),
                )
            )
        return converted

    def _consistency_warnings(self, frontmatter: ListingFrontmatter) -> List[ValidationError]:
        warnings = []
        if frontmatter.date != frontmatter.extra.updated:
            warnings.append(
                ValidationError(
                    field="date",
                    message="date differs from extra.updated",
                    received_value=frontmatter.date.isoformat(),
                    expected=frontmatter.extra.updated.isoformat(),
                    suggestions=["Set date to the same value as extra.updated"],
                )
            )
        if not frontmatter.extra.demo:
            warnings.append(
                ValidationError(
                    field="extra.demo",
                    message="No demo URL",
                    received_value="",
                    expected=FIELD_EXPECTATIONS["extra.demo"],
                    suggestions=["Add a demo URL to the theme's theme.toml"],
                )
            )
        return warnings


def _printable(value: Any) -> Any:
    # Keep reports JSON friendly
    if isinstance(value, (dict, list)):
        return repr(value)[:80]
    if value is not None and not isinstance(value, (str, int, float, bool)):
        return str(value)
    return value
