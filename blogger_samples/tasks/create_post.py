"""Create a post in the background."""

from typing import Callable, Optional

import structlog
from pydantic import BaseModel

from ..blogger.client import BloggerAPIError
from ..blogger.models import Post
from ..blogger.protocol import PostsService
from .base import BackgroundTask, TaskCallbacks

logger = structlog.get_logger()


class CreatePostResult(BaseModel):
    """What the result dialog shows after a create attempt."""

    post: Post
    title: str
    message: str


class CreatePostTask(BackgroundTask[CreatePostResult]):
    """Insert a post and report the outcome.

    On failure the original post comes back unchanged so the form can be
    resubmitted. `error_handler`, if given, sees the API error first (for
    example to re-authorize after a 401).
    """

    progress_message = "Creating post..."

    def __init__(
        self,
        service: PostsService,
        callbacks: TaskCallbacks,
        blog_id: str,
        error_handler: Optional[Callable[[BloggerAPIError], None]] = None,
    ):
        super().__init__(service, callbacks, blog_id)
        self.error_handler = error_handler

    async def run_in_background(self, post: Post) -> CreatePostResult:
        try:
            logger.debug("executing_posts_insert", blog_id=self.blog_id)
            created = await self.service.insert_post(self.blog_id, post)
            return CreatePostResult(
                post=created,
                title="Post Created",
                message=f"postId: {created.id}",
            )
        except BloggerAPIError as e:
            logger.error("create_post_failed", error=e.message, status_code=e.status_code)
            self._handle_error(e)
            return CreatePostResult(post=post, title="Create Failed", message="Please Retry")

    def _handle_error(self, error: BloggerAPIError) -> None:
        if self.error_handler is None:
            return
        try:
            self.error_handler(error)
        except Exception as e:
            logger.error("error_handler_failed", error=str(e))
