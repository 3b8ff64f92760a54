from __future__ import annotations

import uuid
from datetime import datetime, timezone
from threading import RLock
from typing import Any, Dict, List, Mapping

from .errors import NotFoundError, ValidationError
from .models import BlogPostEntity

REQUIRED_FIELDS = ("title", "content", "author")
_MUTABLE_FIELDS = ("title", "content", "author", "publish_date")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# PUBLIC_INTERFACE
class BlogPostStore:
    """
    Thread-safe in-memory store of blog posts.

    Records live in an insertion-ordered dict keyed by id, so lookups are O(1)
    and `list()` returns posts in the order they were created. Every operation
    holds the same lock, and copies are handed out so callers never share a
    record with the store.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[str, BlogPostEntity] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _allocate_id(self) -> str:
        # ids stay unique among live records
        while True:
            candidate = str(uuid.uuid4())
            if candidate not in self._items:
                return candidate

    def list(self) -> List[BlogPostEntity]:
        """Return all posts in insertion order."""
        with self._lock:
            return [item.copy() for item in self._items.values()]  # type: ignore[misc]

    def get(self, post_id: str) -> BlogPostEntity:
        """Return the post with `post_id`, or raise NotFoundError."""
        with self._lock:
            item = self._items.get(post_id)
            if item is None:
                raise NotFoundError(post_id)
            return item.copy()  # type: ignore[return-value]

    def create(self, fields: Mapping[str, Any]) -> BlogPostEntity:
        """
        Create a post from `title`, `content`, `author` and an optional `publish_date`.

        Raises ValidationError naming every required field that is missing or empty.
        """
        missing = [name for name in REQUIRED_FIELDS if _is_blank(fields.get(name))]
        if missing:
            raise ValidationError.for_missing(missing)

        with self._lock:
            publish_date = fields.get("publish_date")
            entity: BlogPostEntity = {
                "id": self._allocate_id(),
                "title": fields["title"],
                "content": fields["content"],
                "author": fields["author"],
                "publish_date": publish_date if publish_date is not None else self._now(),
            }
            self._items[entity["id"]] = entity
            return entity.copy()  # type: ignore[return-value]

    def update(self, post_id: str, fields: Mapping[str, Any]) -> BlogPostEntity:
        """
        Overwrite the stored post with the supplied fields.

        `fields["id"]` must equal `post_id`; the id itself is never changed.
        Raises ValidationError on an id mismatch or an empty required field,
        and NotFoundError when no post has `post_id`. Nothing changes on failure.
        """
        body_id = fields.get("id")
        if body_id != post_id:
            raise ValidationError(
                f"Request path id ({post_id}) and request body id ({body_id}) must match"
            )
        blank = [name for name in REQUIRED_FIELDS if name in fields and _is_blank(fields[name])]
        if blank:
            raise ValidationError.for_missing(blank)

        with self._lock:
            existing = self._items.get(post_id)
            if existing is None:
                raise NotFoundError(post_id)

            updated = existing.copy()
            for name in _MUTABLE_FIELDS:
                if fields.get(name) is not None:
                    updated[name] = fields[name]  # type: ignore[literal-required]

            self._items[post_id] = updated  # type: ignore[assignment]
            return updated.copy()  # type: ignore[return-value]

    def remove(self, post_id: str) -> None:
        """Delete the post with `post_id`, or raise NotFoundError."""
        with self._lock:
            if self._items.pop(post_id, None) is None:
                raise NotFoundError(post_id)
