"""Mock Blogger client for running the samples without a real API.

Keeps posts in memory, pages them with opaque tokens and honors simple
field projections, so the tasks see the same shapes the real API returns.

No access token or API key is needed.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import structlog

from .client import BloggerAPIError
from .models import Author, Post, PostList

logger = structlog.get_logger()


MOCK_POSTS_DATA = [
    {
        "title": "Hello from the Blogger API",
        "content": "<p>This post was written through the posts.insert call.</p>",
    },
    {
        "title": "Paginating through posts",
        "content": "<p>posts.list returns a nextPageToken while more pages remain.</p>",
    },
    {
        "title": "Partial responses",
        "content": "<p>The fields parameter trims the response to what the UI needs.</p>",
    },
    {
        "title": "Drafts and publishing",
        "content": "<p>New posts are published immediately unless saved as drafts.</p>",
    },
    {
        "title": "Working with labels",
        "content": "<p>Labels group related posts on the blog.</p>",
    },
    {
        "title": "OAuth scopes",
        "content": "<p>Writing posts needs the blogger scope; reading public posts does not.</p>",
    },
]

_ITEMS_FIELDS = re.compile(r"items\(([^)]*)\)")


def _split_fields(fields: str) -> set[str]:
    return {f.strip() for f in fields.split(",") if f.strip()}


def _project(post: Post, fields: Optional[set[str]]) -> Post:
    """Keep only the requested top-level fields of a post."""
    if not fields:
        return post
    return Post.model_validate(post.model_dump(include=fields))


class MockBloggerClient:
    """Mock client that simulates the Blogger posts collection.

    Usage is the same as BloggerClient:
        async with MockBloggerClient() as client:
            page = await client.list_posts("blog")
    """

    def __init__(
        self,
        posts: Optional[list[Post]] = None,
        page_size: int = 10,
        fail_with: Optional[BloggerAPIError] = None,
    ):
        """Initialize mock client.

        Args:
            posts: Posts to serve. Defaults to a small generated set.
            page_size: Posts per list page.
            fail_with: If set, every call raises this error.
        """
        self.page_size = page_size
        self.fail_with = fail_with
        self._posts: list[Post] = list(posts) if posts is not None else self._seed_posts()
        self._posts_created: list[Post] = []

    @staticmethod
    def _seed_posts() -> list[Post]:
        now = datetime.now(timezone.utc)
        author = Author(id="mock_author", display_name="Mock Author")
        return [
            Post(
                id=f"mock_{i}",
                title=data["title"],
                content=data["content"],
                published=now - timedelta(days=i),
                author=author,
            )
            for i, data in enumerate(MOCK_POSTS_DATA, start=1)
        ]

    async def open(self) -> None:
        """Mock open - no-op."""
        logger.info("mock_client_opened")

    async def close(self) -> None:
        """Mock close - no-op."""
        logger.info("mock_client_closed")

    async def __aenter__(self) -> "MockBloggerClient":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    # =========================================================================
    # Posts
    # =========================================================================

    async def insert_post(self, blog_id: str, post: Post) -> Post:
        """Store the post and return a copy with a generated id."""
        self._check_failure()
        created = post.model_copy(
            update={
                "id": f"mock_created_{uuid4().hex[:8]}",
                "published": datetime.now(timezone.utc),
            }
        )
        # Newest first, like the real listing
        self._posts.insert(0, created)
        self._posts_created.append(created)
        logger.info("mock_post_created", blog_id=blog_id, post_id=created.id)
        return created

    async def get_post(
        self,
        blog_id: str,
        post_id: str,
        fields: Optional[str] = None,
    ) -> Post:
        """Return a stored post, or raise a 404 error."""
        self._check_failure()
        for post in self._posts:
            if post.id == post_id:
                return _project(post, _split_fields(fields) if fields else None)
        raise BloggerAPIError("Not Found", status_code=404, reason="notFound")

    async def list_posts(
        self,
        blog_id: str,
        fields: Optional[str] = None,
        page_token: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> PostList:
        """Return one page of stored posts with a "page-N" continuation token."""
        self._check_failure()
        size = max_results or self.page_size
        try:
            page = int(page_token.removeprefix("page-")) if page_token else 0
        except ValueError:
            raise BloggerAPIError("Invalid page token", status_code=400, reason="invalid") from None
        start = page * size
        chunk = self._posts[start:start + size]

        item_fields = None
        if fields:
            match = _ITEMS_FIELDS.search(fields)
            if match:
                item_fields = _split_fields(match.group(1))

        next_token = f"page-{page + 1}" if start + size < len(self._posts) else None
        logger.debug("mock_list_page", page=page, count=len(chunk), has_next=next_token is not None)
        return PostList(
            items=[_project(p, item_fields) for p in chunk] or None,
            next_page_token=next_token,
        )

    # =========================================================================
    # Mock-specific methods
    # =========================================================================

    def get_created_posts(self) -> list[Post]:
        """Get all posts created through this client."""
        return self._posts_created

    def clear_created(self) -> None:
        """Clear the record of created posts."""
        self._posts_created.clear()
