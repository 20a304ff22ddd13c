import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.blog import get_posts_service
from folio.routers import posts
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="folio API", description="Blog content for the portfolio site")


def check_content() -> int:
    """Load every post once; a broken content directory must stop startup."""
    return len(get_posts_service().list_posts())


@asynccontextmanager
async def lifespan(app: FastAPI):
    count = check_content()
    logger.info(f"Loaded {count} posts from {settings.content_path}")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "folio API is running"}
