from typing import Tuple

from fastapi import Request

from tagpages.db.couchdb import get_couch
from tagpages.repos.posts_repo import CouchPostsRepo, FilePostsRepo
from tagpages.schemas.blog import Post
from tagpages.services.content_parser import ContentParser
from tagpages.services.posts_service import PostsService
from tagpages.settings import Settings, settings


def get_posts_service(current_settings: Settings = settings) -> PostsService:
    prefix = current_settings.BLOG_PREFIX
    if current_settings.CONTENT_SOURCE == "couchdb":
        couch_db, parser = get_couch()
        repo = CouchPostsRepo(couch_db, prefix=prefix)
    else:
        repo = FilePostsRepo(current_settings.CONTENT_DIR, prefix=prefix)
        parser = ContentParser()
    return PostsService(repo=repo, parser=parser, prefix=prefix)


def load_snapshot(current_settings: Settings = settings) -> Tuple[Post, ...]:
    """Load the post collection once; callers share the returned tuple."""
    return get_posts_service(current_settings).load_posts()


def get_posts_snapshot(request: Request) -> Tuple[Post, ...]:
    return request.app.state.posts
