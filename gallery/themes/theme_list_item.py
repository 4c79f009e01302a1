"""Theme list item model for theme discovery."""

from pydantic import BaseModel


class ThemeListItem(BaseModel):
    """A summary item for listing available themes."""

    slug: str
    name: str
    description: str
    license: str
    min_version: str
