import datetime
import logging
import re
from typing import List

import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from folio.errors import MalformedFrontMatter
from folio.schemas.blog import PostRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "description")
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ContentParser:
    """Split a post file into YAML front-matter and markdown body."""

    def __init__(self, handler=None):
        self.handler = handler or YAMLHandler()

    def parse(self, slug: str, text: str) -> PostRecord:
        metadata, body = self.split(slug, text)

        for key in REQUIRED_FIELDS:
            value = metadata.get(key)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise MalformedFrontMatter(slug, f"missing required field '{key}'")

        try:
            return PostRecord(
                slug=slug,
                title=str(metadata["title"]),
                date=_normalize_date(slug, metadata["date"]),
                description=str(metadata["description"]),
                tags=_normalize_tags(slug, metadata.get("tags")),
                content=body,
            )
        except ValidationError as e:
            raise MalformedFrontMatter(slug, str(e)) from e

    def split(self, slug: str, text: str) -> tuple[dict, str]:
        """Return the metadata mapping and the raw body of a post."""
        text = text.lstrip("\ufeff")
        if not self.handler.detect(text):
            raise MalformedFrontMatter(slug, "no front-matter block at top of file")

        try:
            fm, body = self.handler.split(text)
        except ValueError as e:
            raise MalformedFrontMatter(slug, "unterminated front-matter block") from e

        try:
            metadata = self.handler.load(fm)
        except yaml.YAMLError as e:
            raise MalformedFrontMatter(slug, f"invalid YAML: {e}") from e
        except ValueError as e:
            # SafeLoader raises ValueError for impossible dates like 2024-02-30
            raise MalformedFrontMatter(slug, f"invalid date: {e}") from e

        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise MalformedFrontMatter(slug, "front-matter is not a key-value mapping")

        return metadata, body.strip()


def _normalize_date(slug: str, value) -> str:
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()

    value = str(value).strip()
    if not DATE_RE.match(value):
        raise MalformedFrontMatter(slug, f"date '{value}' is not YYYY-MM-DD")
    try:
        datetime.date.fromisoformat(value)
    except ValueError as e:
        raise MalformedFrontMatter(slug, f"date '{value}' is not a calendar date") from e
    return value


def _normalize_tags(slug: str, value) -> List[str]:
    """
    Normalize tag metadata into a list of strings, keeping order and duplicates.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        tags = []
        for item in value:
            if item is None or (isinstance(item, str) and not item.strip()):
                continue
            if isinstance(item, (dict, list, tuple)):
                raise MalformedFrontMatter(slug, f"tag {item!r} is not a string")
            tags.append(str(item))
        return tags
    raise MalformedFrontMatter(slug, "tags must be a string or a list of strings")
