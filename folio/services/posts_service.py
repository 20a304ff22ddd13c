import logging
from typing import List

from folio.errors import PostNotFound
from folio.schemas.blog import PostRecord

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser):
        self.repo = repo
        self.parser = parser

    def list_slugs(self) -> List[str]:
        return self.repo.list_slugs()

    def get_post(self, slug: str) -> PostRecord:
        try:
            text = self.repo.read_post(slug)
        except PostNotFound:
            logger.warning(f"No post file for slug {slug}")
            raise
        return self.parser.parse(slug, text)

    def list_posts(self) -> List[PostRecord]:
        posts = [self.get_post(slug) for slug in self.list_slugs()]
        # stable sort: equal dates keep directory order
        posts.sort(key=lambda post: post.date, reverse=True)
        logger.debug(f"Loaded {len(posts)} posts")
        return posts

    def latest_posts(self, limit: int) -> List[PostRecord]:
        if limit <= 0:
            return []
        return self.list_posts()[:limit]
