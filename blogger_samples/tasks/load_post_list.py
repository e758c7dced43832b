"""Load the post list in the background."""

import structlog

from ..blogger.client import BloggerAPIError
from ..blogger.models import Post
from ..blogger.protocol import PostsService
from .base import BackgroundTask, TaskCallbacks

logger = structlog.get_logger()

LIST_FIELDS = "items(id,title),nextPageToken"
MAX_PAGES = 5


class LoadPostListTask(BackgroundTask[list[Post]]):
    """Fetch post summaries, following page tokens for up to `max_pages` pages.

    Pages past the cap are dropped without notice. A failure on any page
    discards what was gathered and yields an empty list.
    """

    progress_message = "Loading post list..."

    def __init__(
        self,
        service: PostsService,
        callbacks: TaskCallbacks,
        blog_id: str,
        max_pages: int = MAX_PAGES,
    ):
        super().__init__(service, callbacks, blog_id)
        self.max_pages = max_pages

    async def run_in_background(self) -> list[Post]:
        try:
            result: list[Post] = []
            posts = await self.service.list_posts(self.blog_id, fields=LIST_FIELDS)
            page = 1

            while posts.items:
                result.extend(posts.items)
                logger.info("fetched_posts_page", page=page, count=len(posts.items), total=len(result))

                page_token = posts.next_page_token
                if not page_token or page >= self.max_pages:
                    break

                posts = await self.service.list_posts(
                    self.blog_id,
                    fields=LIST_FIELDS,
                    page_token=page_token,
                )
                page += 1

            return result
        except BloggerAPIError as e:
            logger.error("load_post_list_failed", error=e.message)
            return []
