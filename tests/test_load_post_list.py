"""Tests for paging through the post list."""

from unittest.mock import AsyncMock, MagicMock, call

import pytest

from blogger_samples.blogger.client import BloggerAPIError
from blogger_samples.blogger.mock_client import MockBloggerClient
from blogger_samples.blogger.models import Post, PostList
from blogger_samples.tasks import MAX_PAGES, LoadPostListTask
from blogger_samples.tasks.load_post_list import LIST_FIELDS


class StubCallbacks:
    def __init__(self):
        self.started = []
        self.completed = []

    def on_start(self, message: str) -> None:
        self.started.append(message)

    def on_complete(self, result) -> None:
        self.completed.append(result)


def make_pages(count: int, per_page: int = 2, last_token: bool = False) -> list[PostList]:
    """Build `count` pages; every page but the last links to the next one."""
    pages = []
    for n in range(1, count + 1):
        items = [Post(id=f"{n}-{i}", title=f"Page {n} post {i}") for i in range(per_page)]
        has_next = n < count or last_token
        pages.append(PostList(items=items, next_page_token=f"token-{n + 1}" if has_next else None))
    return pages


def ids(posts: list[Post]) -> list[str]:
    return [p.id for p in posts]


@pytest.fixture
def callbacks():
    return StubCallbacks()


def service_with(side_effect) -> MagicMock:
    service = MagicMock()
    service.list_posts = AsyncMock(side_effect=side_effect)
    return service


class TestLoadPostListTask:
    @pytest.mark.asyncio
    async def test_stops_at_five_pages(self, callbacks):
        pages = make_pages(8)
        service = service_with(pages)

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        expected = [p for page in pages[:MAX_PAGES] for p in page.items]
        assert ids(result) == ids(expected)
        assert service.list_posts.await_count == MAX_PAGES

    @pytest.mark.asyncio
    async def test_follows_tokens_in_order(self, callbacks):
        service = service_with(make_pages(3))

        await LoadPostListTask(service, callbacks, "blog1").execute()

        assert service.list_posts.await_args_list == [
            call("blog1", fields=LIST_FIELDS),
            call("blog1", fields=LIST_FIELDS, page_token="token-2"),
            call("blog1", fields=LIST_FIELDS, page_token="token-3"),
        ]

    @pytest.mark.asyncio
    async def test_stops_when_third_page_has_no_token(self, callbacks):
        pages = make_pages(3) + make_pages(2)
        service = service_with(pages)

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert ids(result) == ids([p for page in pages[:3] for p in page.items])
        assert service.list_posts.await_count == 3

    @pytest.mark.asyncio
    async def test_single_page(self, callbacks):
        pages = make_pages(1)
        service = service_with(pages)

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert ids(result) == ids(pages[0].items)
        assert service.list_posts.await_count == 1

    @pytest.mark.asyncio
    async def test_missing_items_ends_the_list(self, callbacks):
        first = make_pages(1, last_token=True)[0]
        empty = PostList(items=None, next_page_token="token-3")
        service = service_with([first, empty, make_pages(1)[0]])

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert ids(result) == ids(first.items)
        assert service.list_posts.await_count == 2

    @pytest.mark.asyncio
    async def test_empty_blog(self, callbacks):
        service = service_with([PostList()])

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert result == []
        assert callbacks.completed == [[]]

    @pytest.mark.asyncio
    async def test_failure_on_later_page_loses_everything(self, callbacks):
        pages = make_pages(5)
        service = service_with([pages[0], pages[1], BloggerAPIError("connection reset")])

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert result == []
        assert callbacks.completed == [[]]

    @pytest.mark.asyncio
    async def test_failure_on_first_page(self, callbacks):
        service = service_with(BloggerAPIError("offline"))

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert result == []

    @pytest.mark.asyncio
    async def test_rejected_page_token_yields_empty_list(self, callbacks):
        class GarbageTokenClient(MockBloggerClient):
            async def list_posts(self, blog_id, fields=None, page_token=None, max_results=None):
                if page_token is None:
                    page = await super().list_posts(blog_id, fields=fields)
                    return page.model_copy(update={"next_page_token": "garbage"})
                return await super().list_posts(blog_id, fields=fields, page_token=page_token)

        client = GarbageTokenClient(posts=[Post(id=str(i), title="t") for i in range(3)], page_size=2)

        result = await LoadPostListTask(client, callbacks, "blog").execute()

        assert result == []
        assert callbacks.completed == [[]]

    @pytest.mark.asyncio
    async def test_custom_page_cap(self, callbacks):
        service = service_with(make_pages(4))

        result = await LoadPostListTask(service, callbacks, "blog", max_pages=2).execute()

        assert len(result) == 4
        assert service.list_posts.await_count == 2

    @pytest.mark.asyncio
    async def test_callbacks(self, callbacks):
        service = service_with(make_pages(1))

        result = await LoadPostListTask(service, callbacks, "blog").execute()

        assert callbacks.started == ["Loading post list..."]
        assert callbacks.completed == [result]

    @pytest.mark.asyncio
    async def test_with_mock_client(self, callbacks):
        posts = [Post(id=str(i), title=f"Post {i}", content="body") for i in range(13)]
        client = MockBloggerClient(posts=posts, page_size=2)

        result = await LoadPostListTask(client, callbacks, "blog").execute()

        # Five pages of two; the remaining three posts are dropped
        assert ids(result) == [str(i) for i in range(10)]
        assert all(p.content is None for p in result)
