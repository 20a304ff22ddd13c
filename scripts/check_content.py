import logging
import sys

from folio.blog import get_posts_service
from folio.errors import ContentError
from folio.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    service = get_posts_service()
    try:
        posts = service.list_posts()
    except ContentError as e:
        logger.error(f"Content check failed: {e}", exc_info=True)
        return 1

    for post in posts:
        logger.info(f"{post.date}  {post.slug}")
    logger.info(f"Content check passed: {len(posts)} posts in {settings.content_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
