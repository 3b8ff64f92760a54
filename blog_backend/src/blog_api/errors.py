from __future__ import annotations

from typing import Iterable, Tuple


def missing_fields_message(fields: Iterable[str]) -> str:
    """Build the client-facing message for absent required fields."""
    names = ", ".join(f"`{f}`" for f in fields)
    return f"Missing {names} in request body"


class StoreError(Exception):
    """Base class for failures signalled by the blog post store."""


# PUBLIC_INTERFACE
class NotFoundError(StoreError):
    """Raised when an operation references an id absent from the store."""

    def __init__(self, post_id: str) -> None:
        super().__init__(f"Blog post {post_id!r} not found")
        self.post_id = post_id


# PUBLIC_INTERFACE
class ValidationError(StoreError):
    """
    Raised when input to the store is rejected.

    `missing` lists the required fields that were absent or empty, in the
    order they are checked; it is empty for other failures such as an id
    mismatch on update.
    """

    def __init__(self, message: str, missing: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.missing: Tuple[str, ...] = tuple(missing)

    @classmethod
    def for_missing(cls, fields: Iterable[str]) -> "ValidationError":
        fields = tuple(fields)
        return cls(missing_fields_message(fields), missing=fields)
