import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Sequence

from tagpages.schemas.blog import Post, PostSummary, TagPageView, TagRoute
from tagpages.services.tag_normalizer import format_tag_title, normalize_tag
from tagpages.utils import parse_published_at

logger = logging.getLogger(__name__)


def enumerate_routes(posts: Iterable[Post]) -> Dict[str, TagRoute]:
    """
    Build the route set for a post snapshot, keyed by normalized tag slug.

    Each distinct slug appears once, labelled with the first raw tag that
    produced it. Labels that normalize to the same slug ("Design", "design")
    share a single route.
    """
    routes: Dict[str, TagRoute] = {}
    for post in posts:
        for label in post.tags:
            slug = normalize_tag(label)
            if slug not in routes:
                routes[slug] = TagRoute(slug=slug, label=label)

    logger.debug(f"Enumerated {len(routes)} tag routes")
    return routes


def posts_for_route(slug: str, posts: Iterable[Post]) -> List[PostSummary]:
    """
    Posts tagged with `slug`, most recent first, trimmed to summary fields.

    Posts published at the same moment keep their collection order.
    """
    matching = [
        post for post in posts if any(normalize_tag(tag) == slug for tag in post.tags)
    ]
    matching = sorted(
        matching, key=lambda post: parse_published_at(post.publishedAt), reverse=True
    )
    return [PostSummary.from_post(post) for post in matching]


def build_tag_page(
    slug: str,
    posts: Sequence[Post],
    routes: Optional[Dict[str, TagRoute]] = None,
) -> Optional[TagPageView]:
    """Assemble the page for one route, or None if `slug` is not a route."""
    if routes is None:
        routes = enumerate_routes(posts)

    route = routes.get(slug)
    if route is None:
        return None

    title = format_tag_title(route.slug)
    return TagPageView(
        label=route.label,
        slug=route.slug,
        title=title,
        description=f"Posts & tutorials about {title}",
        posts=posts_for_route(route.slug, posts),
    )


def build_tag_pages(
    posts: Sequence[Post], max_workers: Optional[int] = None
) -> Dict[str, TagPageView]:
    """Build every tag page for the snapshot, one worker task per route."""
    routes = enumerate_routes(posts)
    if not routes:
        return {}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            slug: executor.submit(build_tag_page, slug, posts, routes)
            for slug in routes
        }
        return {slug: future.result() for slug, future in futures.items()}
