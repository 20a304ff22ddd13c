import textwrap

import pytest

from folio.errors import PostNotFound
from folio.repos.posts_repo import FilesystemPostsRepo
from folio.services.content_parser import ContentParser
from folio.services.posts_service import PostsService


def write_post(directory, filename: str, raw: str):
    """Write a post file with the indentation of an inline fixture removed."""
    path = directory / filename
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path):
    directory = tmp_path / "content" / "blog"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def sample_content(content_dir):
    write_post(
        content_dir,
        "first-post.md",
        """
        ---
        title: First Post
        date: 2024-01-01
        description: Where it all starts
        tags: [intro, meta]
        ---
        # Hello

        The very first post.
        """,
    )
    write_post(
        content_dir,
        "second-post.md",
        """
        ---
        title: Second Post
        date: 2024-06-15
        description: A follow-up
        ---
        More words.
        """,
    )
    return content_dir


@pytest.fixture
def service(sample_content):
    return PostsService(repo=FilesystemPostsRepo(sample_content), parser=ContentParser())


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.latest_calls = []

    def list_posts(self):
        return self._list_posts_return

    def latest_posts(self, limit: int):
        self.latest_calls.append(limit)
        return self._list_posts_return[:limit]

    def get_post(self, slug: str):
        if self._get_post_return is None:
            raise PostNotFound(slug)
        return self._get_post_return
