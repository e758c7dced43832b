"""Blogger API v3 client implementation.

Official Blogger API documentation:
https://developers.google.com/blogger/docs/3.0/reference

Only the posts collection is covered: insert, get and list.
"""

from typing import Optional

import httpx
import structlog

from .models import Post, PostList

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://www.googleapis.com/blogger/v3"


class BloggerAPIError(Exception):
    """Base exception for Blogger API errors.

    Raised for HTTP error responses and for transport failures (connection
    errors, timeouts). `status_code` is None for the latter.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.reason = reason
        super().__init__(self.message)


class AuthorizationError(BloggerAPIError):
    """The token is missing, expired or lacks the blogger scope."""

    pass


class BloggerClient:
    """Async client for Blogger API v3.

    Usage:
        async with BloggerClient(access_token="...") as client:
            page = await client.list_posts(blog_id)
            post = await client.get_post(blog_id, page.items[0].id)
    """

    def __init__(
        self,
        access_token: str = "",
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_token = access_token
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        """Initialize the underlying HTTP client if not already open."""
        if self._client is None:
            headers = {}
            if self.access_token:
                headers["Authorization"] = f"Bearer {self.access_token}"
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BloggerClient":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")
        return self._client

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> dict:
        """Make an API request with error handling."""
        url = f"{self.base_url}/{endpoint}"
        params = {k: v for k, v in (params or {}).items() if v is not None}
        if self.api_key:
            params["key"] = self.api_key

        logger.debug("blogger_api_request", method=method, endpoint=endpoint)

        try:
            response = await self.client.request(
                method=method,
                url=url,
                params=params,
                json=json,
            )
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            error_data = {}
            try:
                error_data = e.response.json() if e.response.content else {}
            except ValueError:
                error_data = {"raw": e.response.text}

            error = error_data.get("error")
            if not isinstance(error, dict):
                error = {}
            error_msg = error.get("message", str(e))
            errors = error.get("errors")
            first = errors[0] if isinstance(errors, list) and errors else None
            reason = first.get("reason") if isinstance(first, dict) else None
            status_code = e.response.status_code

            logger.warning(
                "api_error_details",
                status_code=status_code,
                reason=reason,
                error_msg=error_msg,
                endpoint=endpoint,
                method=method,
            )

            error_class = AuthorizationError if status_code in (401, 403) else BloggerAPIError
            raise error_class(
                message=error_msg,
                status_code=status_code,
                reason=reason,
            ) from e

        except httpx.RequestError as e:
            logger.warning("transport_error", endpoint=endpoint, method=method, error=str(e))
            raise BloggerAPIError(message=str(e) or type(e).__name__) from e

    # =========================================================================
    # Posts
    # =========================================================================

    async def insert_post(self, blog_id: str, post: Post) -> Post:
        """Create a new post on the blog.

        Returns the post as stored by the service, including its new id.
        """
        data = await self._request("POST", f"blogs/{blog_id}/posts/", json=post.to_wire())
        created = Post.model_validate(data)
        logger.info("post_created", blog_id=blog_id, post_id=created.id)
        return created

    async def get_post(
        self,
        blog_id: str,
        post_id: str,
        fields: Optional[str] = None,
    ) -> Post:
        """Get a specific post by ID.

        Args:
            blog_id: The blog the post belongs to.
            post_id: The post to fetch.
            fields: Optional partial-response projection, e.g. "title,content".
        """
        data = await self._request(
            "GET",
            f"blogs/{blog_id}/posts/{post_id}",
            params={"fields": fields},
        )
        return Post.model_validate(data)

    async def list_posts(
        self,
        blog_id: str,
        fields: Optional[str] = None,
        page_token: Optional[str] = None,
        max_results: Optional[int] = None,
    ) -> PostList:
        """Get one page of the blog's posts.

        Returns:
            PostList. `next_page_token` is None on the last page.
        """
        data = await self._request(
            "GET",
            f"blogs/{blog_id}/posts",
            params={
                "fields": fields,
                "pageToken": page_token,
                "maxResults": max_results,
            },
        )
        return PostList.model_validate(data)
