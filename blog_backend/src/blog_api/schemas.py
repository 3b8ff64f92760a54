from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Incoming publishDate can be a datetime, a date, an ISO8601 string or epoch milliseconds
PublishDateInput = Union[date, datetime, str, int, float]


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _parse_publish_date(value: Optional[PublishDateInput]) -> Optional[datetime]:
    """
    Internal helper to normalize publishDate input into a datetime.
    - Numbers are milliseconds since the Unix epoch (as sent by `Date.now()`), read as UTC.
    - If value is a string, attempt to parse via datetime.fromisoformat; if time is missing, set to 00:00.
    - If value is a date (not datetime), convert to datetime at 00:00.
    - If value is a datetime, return it; naive values are read as UTC.
    """
    if value is None:
        return None

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise ValueError("Invalid type for publishDate; expected ISO8601 string or epoch milliseconds.")

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError("publishDate is out of range") from e

    if isinstance(value, datetime):
        return _as_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, str):
        s = value.strip()
        try:
            return _as_utc(datetime.fromisoformat(s.replace("Z", "+00:00")))
        except ValueError:
            try:
                d = date.fromisoformat(s)
                return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
            except ValueError as e:
                raise ValueError(
                    "Invalid publishDate format. Use ISO8601 date or datetime string (e.g., '2025-01-31' or '2025-01-31T13:45:00')."
                ) from e

    raise ValueError("Invalid type for publishDate; expected ISO8601 string or epoch milliseconds.")


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


# PUBLIC_INTERFACE
class BlogPostCreate(BaseModel):
    """
    Schema for creating a new blog post. `publishDate` defaults to the creation time.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "next new blog post",
                "content": "This is my next blog",
                "author": "SS",
                "publishDate": "2025-02-01T09:30:00Z",
            }
        },
    )

    title: str = Field(..., description="Title of the post", min_length=1)
    content: str = Field(..., description="Body text of the post", min_length=1)
    author: str = Field(..., description="Author name", min_length=1)
    publish_date: Optional[datetime] = Field(
        default=None,
        alias="publishDate",
        description="Publication timestamp. Accepts ISO8601 date/datetime or epoch milliseconds",
    )

    @field_validator("title", "content", "author")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """
        Reject blank text; the value is kept exactly as sent.
        """
        return _require_text(v)

    @field_validator("publish_date", mode="before")
    @classmethod
    def parse_publish_date(cls, v: Optional[PublishDateInput]) -> Optional[datetime]:
        """
        Normalize publishDate from str/date/datetime/number to datetime.
        """
        return _parse_publish_date(v)


# PUBLIC_INTERFACE
class BlogPostUpdate(BaseModel):
    """
    Schema for replacing an existing blog post.
    The full record is required and `id` must match the id in the path.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "0b6d5f0e-5c59-4a43-9d0c-8f7e1c3b2a10",
                "title": "Updated blog post.",
                "content": "This is my updated blog post.",
                "author": "SS",
                "publishDate": 1738402200000,
            }
        },
    )

    id: str = Field(..., description="Identifier of the post; must equal the path id")
    title: str = Field(..., description="Title of the post", min_length=1)
    content: str = Field(..., description="Body text of the post", min_length=1)
    author: str = Field(..., description="Author name", min_length=1)
    publish_date: datetime = Field(
        ...,
        alias="publishDate",
        description="Publication timestamp. Accepts ISO8601 date/datetime or epoch milliseconds",
    )

    @field_validator("title", "content", "author")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("publish_date", mode="before")
    @classmethod
    def parse_publish_date(cls, v: Optional[PublishDateInput]) -> Optional[datetime]:
        return _parse_publish_date(v)


# PUBLIC_INTERFACE
class BlogPostOut(BaseModel):
    """
    Schema returned by the API for a blog post.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "0b6d5f0e-5c59-4a43-9d0c-8f7e1c3b2a10",
                "title": "next new blog post",
                "content": "This is my next blog",
                "author": "SS",
                "publishDate": "2025-02-01T09:30:00Z",
            }
        },
    )

    id: str = Field(..., description="Unique identifier of the post")
    title: str = Field(..., description="Title of the post")
    content: str = Field(..., description="Body text of the post")
    author: str = Field(..., description="Author name")
    publish_date: datetime = Field(..., alias="publishDate", description="Publication timestamp")
