import pytest

from folio.errors import (
    DirectoryUnavailable,
    DuplicateSlug,
    MalformedFrontMatter,
    PostNotFound,
)
from folio.repos.posts_repo import FilesystemPostsRepo
from folio.schemas.blog import PostRecord
from folio.services.content_parser import ContentParser
from folio.services.posts_service import PostsService
from tests.conftest import write_post


def make_service(directory) -> PostsService:
    return PostsService(repo=FilesystemPostsRepo(directory), parser=ContentParser())


def test_list_posts_sorts_by_date_desc(service):
    result = service.list_posts()

    assert [post.slug for post in result] == ["second-post", "first-post"]
    assert isinstance(result[0], PostRecord)


def test_list_posts_adjacent_dates_are_non_increasing(content_dir):
    for slug, date in [
        ("b", "2023-03-01"),
        ("a", "2024-11-20"),
        ("d", "2022-12-31"),
        ("c", "2024-02-29"),
    ]:
        write_post(
            content_dir,
            f"{slug}.md",
            f"---\ntitle: {slug}\ndate: {date}\ndescription: d\n---\nbody\n",
        )

    result = make_service(content_dir).list_posts()

    dates = [post.date for post in result]
    assert all(dates[i] >= dates[i + 1] for i in range(len(dates) - 1))
    assert [post.slug for post in result] == ["a", "c", "b", "d"]


def test_list_posts_keeps_directory_order_for_equal_dates(content_dir):
    for slug in ["alpha", "beta", "gamma"]:
        write_post(
            content_dir,
            f"{slug}.md",
            f"---\ntitle: {slug}\ndate: 2024-05-05\ndescription: d\n---\nbody\n",
        )

    result = make_service(content_dir).list_posts()

    assert [post.slug for post in result] == ["alpha", "beta", "gamma"]


def test_list_posts_is_idempotent(service):
    assert service.list_posts() == service.list_posts()


def test_list_posts_rereads_directory(service, sample_content):
    assert len(service.list_posts()) == 2

    write_post(
        sample_content,
        "third-post.md",
        "---\ntitle: Third\ndate: 2025-01-01\ndescription: d\n---\nnew\n",
    )

    assert [post.slug for post in service.list_posts()][0] == "third-post"


def test_every_slug_loads_with_matching_slug(service):
    for slug in service.list_slugs():
        assert service.get_post(slug).slug == slug


def test_get_post_returns_parsed_record(service):
    post = service.get_post("first-post")

    assert post.title == "First Post"
    assert post.tags == ["intro", "meta"]
    assert post.content.startswith("# Hello")


def test_get_post_missing_raises_post_not_found(service):
    with pytest.raises(PostNotFound):
        service.get_post("missing")


def test_list_posts_fails_loudly_on_malformed_file(sample_content):
    write_post(sample_content, "broken.md", "---\ntitle: Broken\n\nno closing marker\n")

    with pytest.raises(MalformedFrontMatter):
        make_service(sample_content).list_posts()


def test_list_posts_raises_when_directory_missing(tmp_path):
    with pytest.raises(DirectoryUnavailable):
        make_service(tmp_path / "missing").list_posts()


def test_latest_posts_is_prefix_of_full_list(service):
    full = service.list_posts()

    assert service.latest_posts(1) == full[:1]
    assert service.latest_posts(10) == full


@pytest.mark.parametrize("limit", [0, -3])
def test_latest_posts_non_positive_limit_is_empty(service, limit):
    assert service.latest_posts(limit) == []


def test_mdx_posts_are_listed_and_loaded(content_dir):
    write_post(
        content_dir,
        "interactive.mdx",
        "---\ntitle: Interactive\ndate: 2024-02-02\ndescription: d\n---\n<Callout>hi</Callout>\n",
    )

    result = make_service(content_dir).list_posts()

    assert [post.slug for post in result] == ["interactive"]
    assert result[0].content == "<Callout>hi</Callout>"


def test_list_posts_never_returns_a_file_twice(content_dir):
    write_post(
        content_dir,
        "both.md",
        "---\ntitle: MD\ndate: 2024-01-01\ndescription: d\n---\nmd\n",
    )
    write_post(
        content_dir,
        "both.mdx",
        "---\ntitle: MDX\ndate: 2024-01-01\ndescription: d\n---\nmdx\n",
    )

    with pytest.raises(DuplicateSlug):
        make_service(content_dir).list_posts()


def test_get_post_with_invalid_utf8_raises_malformed(content_dir):
    (content_dir / "garbled.md").write_bytes(b"\xff\xfe not text")

    with pytest.raises(MalformedFrontMatter):
        make_service(content_dir).get_post("garbled")
