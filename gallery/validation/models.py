"""Validation result models for listing checks."""
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidationError(BaseModel):
    """Detailed validation error with helpful suggestions"""

    field: str
    message: str
    received_value: Any = None
    expected: str
    suggestions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "extra.minimum_version",
                "message": "'latest' is not a MAJOR.MINOR[.PATCH] version",
                "received_value": "latest",
                "expected": "Dotted version such as 0.17.2",
                "suggestions": ["Use the oldest generator release the theme builds with"],
            }
        }
    )


class ValidationResult(BaseModel):
    """Result of validating one listing page"""

    source: str = ""
    is_valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)

    def passes(self, strict: bool = False) -> bool:
        """True when valid and, in strict mode, free of warnings."""
        if strict:
            return self.is_valid and not self.warnings
        return self.is_valid

    def get_error_summary(self) -> str:
        """Get a formatted summary of all errors and warnings"""
        if not self.errors and not self.warnings:
            return "No errors"

        lines = []
        if self.errors:
            lines.append("Validation failed with the following errors:\n")
            lines.extend(_describe(self.errors))
        if self.warnings:
            lines.append("Warnings:\n")
            lines.extend(_describe(self.warnings))
        return "\n".join(lines)

    def get_json_errors(self) -> List[Dict[str, Any]]:
        """Get errors in JSON-friendly format"""
        return [
            {
                "field": err.field,
                "message": err.message,
                "received": err.received_value,
                "expected": err.expected,
                "suggestions": err.suggestions,
            }
            for err in self.errors
        ]


def _describe(entries: List[ValidationError]) -> List[str]:
    lines = []
    for i, error in enumerate(entries, 1):
        lines.append(f"{i}. {error.field}: {error.message}")
        lines.append(f"   Received: {error.received_value}")
        lines.append(f"   Expected: {error.expected}")
        if error.suggestions:
            lines.append("   Suggestions:")
            for suggestion in error.suggestions:
                lines.append(f"   - {suggestion}")
        lines.append("")
    return lines


class DirectoryReport(BaseModel):
    """Validation results for every listing under a content directory."""

    directory: Path
    results: List[ValidationResult] = Field(default_factory=list)

    @property
    def invalid(self) -> List[ValidationResult]:
        return [result for result in self.results if not result.is_valid]

    @property
    def with_warnings(self) -> List[ValidationResult]:
        return [result for result in self.results if result.warnings]

    def passes(self, strict: bool = False) -> bool:
        return all(result.passes(strict) for result in self.results)

    def get_result(self, source: str) -> Optional[ValidationResult]:
        for result in self.results:
            if result.source == source:
                return result
        return None
