"""Theme metadata model loaded from theme.toml."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gallery.listing.models import VERSION_PATTERN, check_url


class ThemeAuthor(BaseModel):
    """The ``[author]`` table of theme.toml."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    homepage: str = ""

    @field_validator("homepage")
    @classmethod
    def _homepage_is_url(cls, value: str) -> str:
        return check_url(value, allow_empty=True)


class ThemeOrigin(BaseModel):
    """The ``[original]`` table of a theme ported from another project."""

    model_config = ConfigDict(extra="allow")

    author: str = ""
    homepage: str = ""
    repo: str = ""


class ThemeMetadata(BaseModel):
    """Metadata shipped by a theme author in theme.toml."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    description: str
    license: str = Field(min_length=1)
    homepage: str
    min_version: str
    demo: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)
    author: ThemeAuthor
    original: Optional[ThemeOrigin] = None

    @field_validator("homepage")
    @classmethod
    def _homepage_is_url(cls, value: str) -> str:
        return check_url(value)

    @field_validator("demo")
    @classmethod
    def _demo_is_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return check_url(value, allow_empty=True)

    @field_validator("min_version")
    @classmethod
    def _version_is_dotted(cls, value: str) -> str:
        value = value.strip()
        if not VERSION_PATTERN.match(value):
            raise ValueError(f"'{value}' is not a MAJOR.MINOR[.PATCH] version")
        return value


class ThemeSource(BaseModel):
    """A theme directory that passed loading: its metadata and file locations."""

    slug: str
    path: Path
    metadata: ThemeMetadata
    readme_path: Path
    screenshot_path: Optional[Path] = None
