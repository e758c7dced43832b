"""Data models for Blogger API v3.

Responses are usually requested with a field projection, so every field is
optional. Wire names are camelCase; attributes are snake_case.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BloggerModel(BaseModel):
    """Base model accepting both wire aliases and attribute names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Serialize for a request body, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Author(BloggerModel):
    """Post author."""

    id: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    url: Optional[str] = None


class Post(BloggerModel):
    """Blogger post model."""

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    published: Optional[datetime] = None
    updated: Optional[datetime] = None
    labels: Optional[list[str]] = None
    author: Optional[Author] = None


class PostList(BloggerModel):
    """One page of a posts.list response.

    `items` is None when the service omits it (no posts on this page).
    """

    items: Optional[list[Post]] = None
    next_page_token: Optional[str] = Field(default=None, alias="nextPageToken")
