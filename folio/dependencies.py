from fastapi import Depends

from folio.repos.posts_repo import FilesystemPostsRepo
from folio.services.content_parser import ContentParser
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.content_path)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo, parser=ContentParser())


def get_renderer(current_settings: Settings = Depends(get_settings)):
    # Markdown instances keep per-document state; one per request
    return MarkdownRenderer(
        toc_depth=current_settings.TOC_DEPTH,
        highlight_style=current_settings.HIGHLIGHT_STYLE,
    )
