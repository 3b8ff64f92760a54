from __future__ import annotations

from typing import List

from .logging_config import get_logger
from .models import BlogPostEntity
from .store import BlogPostStore

logger = get_logger(__name__)

SAMPLE_POSTS = (
    {
        "title": "Getting started",
        "content": "A first post to show the blog is up and running.",
        "author": "SS",
    },
    {
        "title": "Writing in small steps",
        "content": "Short posts, published often, are easier to write and to read.",
        "author": "Jane Doe",
    },
    {
        "title": "Notes on REST",
        "content": "Collections live under one path and each post under its id.",
        "author": "John Smith",
    },
)


# PUBLIC_INTERFACE
def seed_blog_posts(store: BlogPostStore) -> List[BlogPostEntity]:
    """Create the sample posts in `store` and return them."""
    created = [store.create(fields) for fields in SAMPLE_POSTS]
    logger.info("blog_posts_seeded", count=len(created))
    return created
