"""Load a single post in the background."""

import structlog

from ..blogger.client import BloggerAPIError
from ..blogger.models import Post
from .base import BackgroundTask

logger = structlog.get_logger()

POST_FIELDS = "title,content"


class LoadPostTask(BackgroundTask[Post]):
    """Fetch the title and content of one post.

    On failure the result is a placeholder post whose title is the error
    message.
    """

    progress_message = "Loading post..."

    async def run_in_background(self, post_id: str) -> Post:
        try:
            return await self.service.get_post(self.blog_id, post_id, fields=POST_FIELDS)
        except BloggerAPIError as e:
            logger.error("load_post_failed", post_id=post_id, error=e.message)
            return Post(title=e.message)
