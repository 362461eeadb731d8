import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from tagpages.schemas.blog import Post
from tagpages.services.tag_index import build_tag_pages

logger = logging.getLogger(__name__)

TAG_PATH_PREFIX = "/blog/tag/"


def export_site(
    posts: Sequence[Post], out_dir: str | Path, max_workers: Optional[int] = None
) -> List[Path]:
    """
    Write the route index to `out_dir/tags.json` and one JSON page per route
    under `out_dir/tags`.

    Page files left over from slugs that are no longer routes are removed, so
    the directory holds exactly the current route set.
    """
    tags_dir = Path(out_dir) / "tags"
    tags_dir.mkdir(parents=True, exist_ok=True)

    pages = build_tag_pages(posts, max_workers=max_workers)

    written = []
    for slug in sorted(pages):
        page_file = tags_dir / f"{slug}.json"
        page_file.write_text(pages[slug].model_dump_json(indent=2), encoding="utf-8")
        written.append(page_file)

    index = [
        {"slug": slug, "label": pages[slug].label, "path": f"{TAG_PATH_PREFIX}{slug}"}
        for slug in sorted(pages)
    ]
    index_file = Path(out_dir) / "tags.json"
    index_file.write_text(json.dumps(index, indent=2), encoding="utf-8")

    current = {f"{slug}.json" for slug in pages}
    for stale in tags_dir.glob("*.json"):
        if stale.name not in current:
            logger.debug(f"Removing stale tag page {stale}")
            stale.unlink()

    logger.info(f"Exported {len(written)} tag pages to {tags_dir}")
    return [index_file, *written]
