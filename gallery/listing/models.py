"""Listing models: the frontmatter of a gallery page describing one theme."""

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

VERSION_PATTERN = re.compile(r"^\d+\.\d+(\.\d+)?$")


def is_http_url(value: str) -> bool:
    """True when ``value`` is an absolute http(s) URL with a host."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def check_url(value: str, allow_empty: bool = False) -> str:
    value = value.strip()
    if not value and allow_empty:
        return value
    if not is_http_url(value):
        raise ValueError(f"'{value}' is not an http(s) URL")
    return value


def as_aware(value: datetime) -> datetime:
    """Naive timestamps are read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ListingAuthor(BaseModel):
    """Author of the theme as shown in the gallery."""

    name: str = Field(min_length=1)
    homepage: str = ""

    @field_validator("homepage")
    @classmethod
    def _homepage_is_url(cls, value: str) -> str:
        return check_url(value, allow_empty=True)


class ListingExtra(BaseModel):
    """The ``[extra]`` table of a listing."""

    model_config = ConfigDict(extra="allow")

    created: datetime
    updated: datetime
    repository: str
    homepage: str
    minimum_version: str
    license: str = Field(min_length=1)
    demo: str = ""
    author: ListingAuthor

    @field_validator("created", "updated")
    @classmethod
    def _timestamps_are_aware(cls, value: datetime) -> datetime:
        return as_aware(value)

    @field_validator("repository", "homepage")
    @classmethod
    def _links_are_urls(cls, value: str) -> str:
        return check_url(value)

    @field_validator("demo")
    @classmethod
    def _demo_is_url(cls, value: str) -> str:
        return check_url(value, allow_empty=True)

    @field_validator("minimum_version")
    @classmethod
    def _version_is_dotted(cls, value: str) -> str:
        value = value.strip()
        if not VERSION_PATTERN.match(value):
            raise ValueError(f"'{value}' is not a MAJOR.MINOR[.PATCH] version")
        return value

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> "ListingExtra":
        if self.updated < self.created:
            raise ValueError(
                f"updated ({self.updated.isoformat()}) is earlier than "
                f"created ({self.created.isoformat()})"
            )
        return self


class ListingFrontmatter(BaseModel):
    """Complete frontmatter of a theme listing page."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1)
    description: str
    template: str = Field(default="theme.html", min_length=1)
    date: datetime
    extra: ListingExtra

    @field_validator("date")
    @classmethod
    def _date_is_aware(cls, value: datetime) -> datetime:
        return as_aware(value)

    def to_toml_dict(self) -> Dict[str, Any]:
        """Mapping in the key order listings are written with."""
        return self.model_dump()


class Listing(BaseModel):
    """A listing page: folder slug, frontmatter and markdown body."""

    slug: str
    frontmatter: ListingFrontmatter
    body: str = ""
    path: Optional[Path] = None

    @property
    def title(self) -> str:
        return self.frontmatter.title

    @property
    def updated(self) -> datetime:
        return self.frontmatter.extra.updated
