from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class BlogPostEntity(TypedDict):
    """
    The in-memory record of a blog post as held by the store.

    Fields:
    - id: Opaque unique string assigned at creation, never reassigned
    - title: Non-empty title
    - content: Body text
    - author: Author name
    - publish_date: Publication timestamp (creation time unless supplied);
      exposed on the wire as `publishDate`
    """

    id: str
    title: str
    content: str
    author: str
    publish_date: datetime
