import logging
from pathlib import Path
from typing import List

from folio.errors import (
    DirectoryUnavailable,
    DuplicateSlug,
    MalformedFrontMatter,
    PostNotFound,
)

logger = logging.getLogger(__name__)

# Lookup order for a slug's backing file.
POST_EXTENSIONS = (".md", ".mdx")


class FilesystemPostsRepo:
    def __init__(self, content_dir):
        self.content_dir = Path(content_dir)

    def list_slugs(self) -> List[str]:
        """List the slugs of every markdown file in the content directory.

        Raises ``DuplicateSlug`` when two files share a stem (``a.md`` and
        ``a.mdx``), since only one of them could ever be loaded.
        """
        if not self.content_dir.exists():
            raise DirectoryUnavailable(self.content_dir)
        if not self.content_dir.is_dir():
            raise DirectoryUnavailable(self.content_dir, "is not a directory")

        try:
            entries = sorted(self.content_dir.iterdir())
        except OSError as e:
            raise DirectoryUnavailable(
                self.content_dir, f"cannot be listed: {e}"
            ) from e

        paths_by_slug = {}
        for entry in entries:
            if entry.name.startswith(".") or not entry.is_file():
                continue
            if entry.suffix not in POST_EXTENSIONS:
                continue
            if entry.stem in paths_by_slug:
                raise DuplicateSlug(entry.stem, [paths_by_slug[entry.stem], entry])
            paths_by_slug[entry.stem] = entry

        slugs = list(paths_by_slug)
        logger.debug(f"Found {len(slugs)} post files in {self.content_dir}")
        return slugs

    def resolve_path(self, slug: str) -> Path:
        if not self._is_safe(slug):
            raise PostNotFound(slug)

        for extension in POST_EXTENSIONS:
            path = self.content_dir / f"{slug}{extension}"
            if path.is_file():
                return path
        raise PostNotFound(slug)

    def read_post(self, slug: str) -> str:
        path = self.resolve_path(slug)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            # removed between lookup and read
            raise PostNotFound(slug) from e
        except UnicodeDecodeError as e:
            raise MalformedFrontMatter(slug, "not valid UTF-8") from e

    @staticmethod
    def _is_safe(slug: str) -> bool:
        return (
            bool(slug)
            and not slug.startswith(".")
            and "/" not in slug
            and "\\" not in slug
        )
