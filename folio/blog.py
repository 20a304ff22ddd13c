"""Read API over the blog content directory.

Each call re-reads the directory: the files on disk are the only source of
truth and nothing is cached between calls.
"""

from pathlib import Path
from typing import List, Optional

from folio.repos.posts_repo import FilesystemPostsRepo
from folio.schemas.blog import PostRecord
from folio.services.content_parser import ContentParser
from folio.services.posts_service import PostsService
from folio.settings import settings


def get_posts_service(content_dir: Optional[Path] = None) -> PostsService:
    repo = FilesystemPostsRepo(content_dir or settings.content_path)
    return PostsService(repo=repo, parser=ContentParser())


def get_all_post_slugs() -> List[str]:
    return get_posts_service().list_slugs()


def get_post_by_slug(slug: str) -> PostRecord:
    """Load one post. Raises ``PostNotFound`` when no file backs *slug*."""
    return get_posts_service().get_post(slug)


def get_all_posts() -> List[PostRecord]:
    """All posts, newest first."""
    return get_posts_service().list_posts()


def get_latest_posts(limit: Optional[int] = None) -> List[PostRecord]:
    if limit is None:
        limit = settings.LATEST_POSTS_LIMIT
    return get_posts_service().latest_posts(limit)
