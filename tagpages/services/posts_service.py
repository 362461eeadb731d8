import datetime
import logging
import os
from typing import List, Optional, Tuple

import frontmatter

from tagpages.schemas.blog import Post
from tagpages.settings import settings
from tagpages.utils import calculate_reading_time

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser, prefix: Optional[str] = None):
        self.repo = repo
        self.parser = parser
        self.prefix = settings.BLOG_PREFIX if prefix is None else prefix

    def load_posts(self) -> Tuple[Post, ...]:
        """Load every blog document into an immutable snapshot of posts."""
        posts: List[Post] = []
        seen = set()
        for doc in self.repo.list_blog_docs():
            path = doc.get("path", doc.get("_id", ""))
            slug = _normalize_slug(path.removeprefix(self.prefix))
            post = parse_post(doc, slug, parser=self.parser)
            if post is None:
                continue
            if post.slug in seen:
                logger.warning(f"Duplicate post slug {post.slug}, skipping {path}")
                continue
            seen.add(post.slug)
            posts.append(post)

        logger.info(f"Loaded {len(posts)} posts")
        return tuple(posts)


def parse_post(doc: dict, slug: str, *, parser) -> Optional[Post]:
    """Parse frontmatter into a validated Post, or None if the doc is unusable."""
    try:
        markdown = parser.get_markdown_content(doc)
        if not markdown:
            logger.warning(f"No markdown content found for post {slug}")
            return None

        parsed = frontmatter.loads(markdown)
        metadata = parsed.metadata or {}

        return Post(
            slug=slug,
            title=_derive_title(metadata, slug),
            summary=metadata.get("summary"),
            publishedAt=_convert_date(metadata.get("publishedAt")),
            tags=_normalize_tags(metadata.get("tags")),
            image=metadata.get("image"),
            readingTime=calculate_reading_time(parsed.content),
        )
    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def _normalize_slug(slug: str) -> str:
    base, _ = os.path.splitext(slug)
    return base


def _derive_title(metadata: dict, slug: str) -> str:
    if metadata.get("title"):
        return str(metadata["title"])
    clean_slug = slug.rsplit("/", 1)[-1]
    clean_slug = clean_slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
