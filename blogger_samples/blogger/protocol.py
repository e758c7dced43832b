"""Posts service protocol.

Both the HTTP client and the in-memory mock implement this, so the sample
tasks never depend on a concrete transport.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .models import Post, PostList


@runtime_checkable
class PostsService(Protocol):
    """Protocol for the subset of the posts collection the samples use."""

    async def insert_post(self, blog_id: str, post: Post) -> Post:
        """Create a post and return it as stored by the service."""
        ...

    async def get_post(
        self,
        blog_id: str,
        post_id: str,
        fields: Optional[str] = None,
    ) -> Post:
        """Fetch a single post, optionally restricted to `fields`."""
        ...

    async def list_posts(
        self,
        blog_id: str,
        fields: Optional[str] = None,
        page_token: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> PostList:
        """Fetch one page of posts.

        Pass the previous page's `next_page_token` as `page_token` to
        continue.
        """
        ...
