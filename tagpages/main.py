import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from tagpages.dependencies import load_snapshot
from tagpages.routers import tags
from tagpages.security import get_api_key
from tagpages.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.posts = load_snapshot()
    logger.info(f"Post snapshot loaded with {len(app.state.posts)} posts")

    try:
        yield
    finally:
        app.state.posts = ()
        logger.info("Post snapshot released")


app = FastAPI(
    title="tagpages API",
    description="Tag routes and tag pages for the blog",
    lifespan=lifespan,
)

app.include_router(tags.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "tagpages API is running"}
