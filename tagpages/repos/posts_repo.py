from pathlib import Path
from typing import List, Optional

from tagpages.settings import settings


class CouchPostsRepo:
    def __init__(self, couch_db, prefix: Optional[str] = None):
        self.db = couch_db
        self.prefix = settings.BLOG_PREFIX if prefix is None else prefix

    def list_blog_docs(self) -> List[dict]:
        all_docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        return [doc for doc in all_docs if self._is_valid(doc)]

    def _is_valid(self, doc: dict | None) -> bool:
        if not doc:
            return False
        path = doc.get("path", doc.get("_id", ""))
        return (
            doc.get("type") == "plain"
            and path.startswith(self.prefix)
            and not doc.get("deleted", False)
        )


class FilePostsRepo:
    """Markdown posts stored under `<root>/<prefix>` on disk."""

    def __init__(self, root: str | Path, prefix: Optional[str] = None):
        self.root = Path(root)
        self.prefix = settings.BLOG_PREFIX if prefix is None else prefix

    def list_blog_docs(self) -> List[dict]:
        blog_dir = self.root / self.prefix
        if not blog_dir.is_dir():
            return []

        docs = []
        for file in sorted(blog_dir.rglob("*.md")):
            path = file.relative_to(self.root).as_posix()
            docs.append(
                {
                    "_id": path,
                    "path": path,
                    "type": "plain",
                    "content": file.read_text(encoding="utf-8"),
                }
            )
        return docs
