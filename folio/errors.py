"""Failures raised while reading blog content from disk."""

from pathlib import Path


class ContentError(Exception):
    """Base class for content pipeline failures."""


class DirectoryUnavailable(ContentError):
    """The content root is missing or cannot be listed."""

    def __init__(self, path: Path, reason: str = "does not exist"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Content directory {self.path} {reason}")


class PostNotFound(ContentError):
    """No file backs the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")


class MalformedFrontMatter(ContentError):
    """The front-matter block is missing, unterminated or invalid."""

    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Malformed front-matter in {slug}: {reason}")


class DuplicateSlug(ContentError):
    """Two content files share a slug."""

    def __init__(self, slug: str, paths):
        self.slug = slug
        self.paths = [Path(p) for p in paths]
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"Duplicate slug {slug}: {names}")
