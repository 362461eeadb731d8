from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from tagpages.services.tag_normalizer import normalize_tag
from tagpages.utils import parse_published_at

# Fields a tag page exposes for each post; everything else stays internal.
SUMMARY_FIELDS = ("slug", "title", "summary", "publishedAt", "image", "readingTime")


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    summary: Optional[str] = None
    publishedAt: str
    tags: Tuple[str, ...] = ()
    image: Optional[str] = None
    readingTime: Optional[str] = None

    @field_validator("publishedAt")
    @classmethod
    def _check_published_at(cls, value: str) -> str:
        parse_published_at(value)
        return value

    @field_validator("tags")
    @classmethod
    def _drop_blank_tags(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # Blank tags, or tags with nothing sluggable in them, never reach the index.
        stripped = (tag.strip() for tag in value)
        return tuple(tag for tag in stripped if tag and normalize_tag(tag))


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    summary: Optional[str] = None
    publishedAt: str
    image: Optional[str] = None
    readingTime: Optional[str] = None

    @classmethod
    def from_post(cls, post: Post) -> "PostSummary":
        return cls(**post.model_dump(include=set(SUMMARY_FIELDS)))


class TagRoute(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    label: str


class TagPageView(BaseModel):
    label: str
    slug: str
    title: str
    description: str
    posts: List[PostSummary]
