"""Listing validation."""
from gallery.validation.models import DirectoryReport, ValidationError, ValidationResult
from gallery.validation.listing_validator import ListingValidator

__all__ = ["DirectoryReport", "ListingValidator", "ValidationError", "ValidationResult"]
