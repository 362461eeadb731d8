import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException

from tagpages import dependencies as deps
from tagpages.schemas.blog import Post, TagPageView, TagRoute
from tagpages.services.tag_index import build_tag_page, enumerate_routes

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags", response_model=List[TagRoute])
def list_tags(posts: Tuple[Post, ...] = Depends(deps.get_posts_snapshot)):
    """Every routable tag, sorted by slug."""
    try:
        routes = enumerate_routes(posts)
        return [routes[slug] for slug in sorted(routes)]
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{slug}", response_model=TagPageView)
def get_tag_page(
    slug: str,
    posts: Tuple[Post, ...] = Depends(deps.get_posts_snapshot),
):
    """Posts for a single tag, most recent first."""
    try:
        page = build_tag_page(slug, posts)
        if page is None:
            raise HTTPException(status_code=404, detail="Tag not found")
        return page
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error building tag page {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tag page")
