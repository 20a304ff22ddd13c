import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from folio import dependencies as deps
from folio.errors import PostNotFound
from folio.schemas.blog import PostSummary, RenderedPost
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.posts_service import PostsService
from folio.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/latest-posts", response_model=List[PostSummary])
def latest_posts(
    limit: Optional[int] = Query(None, ge=0),
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Get the most recent posts for the landing page."""
    if limit is None:
        limit = current_settings.LATEST_POSTS_LIMIT
    try:
        return service.latest_posts(limit)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing latest posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=RenderedPost)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: MarkdownRenderer = Depends(deps.get_renderer),
):
    """Get a single post by slug, with its body rendered to HTML."""
    try:
        post = service.get_post(slug)
        return renderer.render_post(post)
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/highlight.css")
def highlight_css(renderer: MarkdownRenderer = Depends(deps.get_renderer)):
    return Response(content=renderer.highlight_css(), media_type="text/css")
