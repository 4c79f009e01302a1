"""Split, decode and encode the frontmatter block of a markdown document.

Two delimiters are recognised at the start of a document:

    +++            ---
    toml body      yaml body
    +++            ---

Anything after the closing delimiter is the page body.
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import toml
import yaml
from pydantic import ValidationError as PydanticValidationError

from gallery.exceptions import FrontmatterError
from gallery.listing.models import Listing, ListingFrontmatter

TOML_FORMAT = "toml"
YAML_FORMAT = "yaml"

_DELIMITERS = {"+++": TOML_FORMAT, "---": YAML_FORMAT}

_FRONTMATTER_RE = re.compile(
    r"^\s*(?P<delim>\+\+\+|---)[ \t]*\r?\n"
    r"(?P<frontmatter>.*?)"
    r"^(?P=delim)[ \t]*(?:\r?\n|$)"
    r"(?P<body>.*)\Z",
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(text: str, source: Optional[str] = None) -> Tuple[str, str, str]:
    """Split a document into ``(format, raw_frontmatter, body)``.

    Raises:
        FrontmatterError: If the document does not open with a delimited block
    """
    match = _FRONTMATTER_RE.match(text)
    if match is None:
        raise FrontmatterError(
            "document does not start with a '+++' or '---' frontmatter block",
            source=source,
        )
    fmt = _DELIMITERS[match.group("delim")]
    return fmt, match.group("frontmatter"), match.group("body")


def decode_frontmatter(fmt: str, raw: str, source: Optional[str] = None) -> Dict[str, Any]:
    """Decode a raw frontmatter block into a mapping."""
    try:
        if fmt == TOML_FORMAT:
            data = toml.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (toml.TomlDecodeError, yaml.YAMLError) as e:
        raise FrontmatterError(f"cannot decode {fmt} frontmatter: {e}", source=source) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(f"{fmt} frontmatter must be a table", source=source)
    return data


def parse_frontmatter(text: str, source: Optional[str] = None) -> Tuple[Dict[str, Any], str]:
    """Return the decoded frontmatter mapping and the body of ``text``."""
    fmt, raw, body = split_frontmatter(text, source=source)
    return decode_frontmatter(fmt, raw, source=source), body


def dump_frontmatter(data: Dict[str, Any]) -> str:
    """Encode ``data`` as a ``+++`` delimited TOML block (trailing newline included)."""
    encoded = toml.dumps(data)
    if not encoded.endswith("\n"):
        encoded += "\n"
    return f"+++\n{encoded}+++\n"


def parse_listing(text: str, slug: str, path: Optional[Path] = None) -> Listing:
    """Parse and schema-check a listing page.

    Raises:
        FrontmatterError: If the frontmatter is missing, undecodable or does
            not match the listing schema
    """
    source = str(path) if path else slug
    data, body = parse_frontmatter(text, source=source)
    try:
        frontmatter = ListingFrontmatter.model_validate(data)
    except PydanticValidationError as e:
        raise FrontmatterError(f"frontmatter does not match listing schema: {e}", source=source) from e
    return Listing(slug=slug, frontmatter=frontmatter, body=body, path=path)


def render_listing(listing: Listing) -> str:
    """Serialise a listing back to page text."""
    return dump_frontmatter(listing.frontmatter.to_toml_dict()) + listing.body
