"""Main entry point for the Blogger samples."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

import structlog
from pydantic import ValidationError

# Configure Python logging level (required for structlog)
logging.basicConfig(
    format="%(message)s",
    level=logging.INFO,
)

# Suppress noisy HTTP request logs
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

from .blogger import BloggerAPIError, BloggerClient, MockBloggerClient, Post
from .display import ConsoleDisplay
from .tasks import CreatePostTask, LoadPostListTask, LoadPostTask
from .utils import get_settings

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=True),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def report_api_error(error: BloggerAPIError) -> None:
    """Error hook for the create sample: point at credentials on auth failures."""
    if error.status_code in (401, 403):
        print("Authorization failed; check BLOGGER_ACCESS_TOKEN has the blogger scope.")


async def run_sample(service, args: argparse.Namespace, blog_id: str) -> int:
    """Run the sample selected by `args.mode` against `service`."""
    display = ConsoleDisplay()

    if args.mode == "create":
        if not args.title:
            print("--title is required for 'create'")
            return 2
        post = Post(title=args.title, content=args.content or "")
        task = CreatePostTask(service, display, blog_id, error_handler=report_api_error)
        result = await task.execute(post)
        return 0 if result.post.id else 1

    if args.mode == "show":
        if not args.post_id:
            print("--post-id is required for 'show'")
            return 2
        await LoadPostTask(service, display, blog_id).execute(args.post_id)
        return 0

    await LoadPostListTask(service, display, blog_id).execute()
    return 0


async def async_main(args: argparse.Namespace) -> int:
    """Async main function."""
    settings = get_settings()
    use_mock = args.mock or settings.use_mock_blogger
    blog_id = args.blog_id or settings.blogger_blog_id or ("mock_blog" if use_mock else "")

    if not blog_id:
        logger.error("configuration_error", error="No blog id; set BLOGGER_BLOG_ID or pass --blog-id")
        return 1

    try:
        if use_mock:
            service = MockBloggerClient()
        else:
            service = BloggerClient(
                access_token=settings.blogger_access_token,
                api_key=settings.blogger_api_key,
                base_url=settings.blogger_base_url,
                timeout=settings.request_timeout_seconds,
            )

        async with service:
            return await run_sample(service, args, blog_id)

    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Blogger samples - create, show and list posts with the Blogger API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  blogger-samples list                          # List up to five pages of posts
  blogger-samples show --post-id 123            # Show one post
  blogger-samples create --title "Hi" --content "<p>Hello</p>"
  blogger-samples list --mock                   # Use mock data (no credentials needed)
        """,
    )

    parser.add_argument(
        "mode",
        choices=["list", "show", "create"],
        default="list",
        nargs="?",
        help="Sample to run (default: list)",
    )

    parser.add_argument(
        "--blog-id",
        type=str,
        help="Blog ID (overrides BLOGGER_BLOG_ID env var)",
    )

    parser.add_argument(
        "--post-id",
        type=str,
        help="Post to show (only used with 'show' mode)",
    )

    parser.add_argument(
        "--title",
        type=str,
        help="Title of the new post (only used with 'create' mode)",
    )

    parser.add_argument(
        "--content",
        type=str,
        help="HTML content of the new post (only used with 'create' mode)",
    )

    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use mock Blogger client (no credentials needed)",
    )

    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("configuration_error", error=str(e))
        return 1

    logging.getLogger().setLevel(settings.log_level)

    return asyncio.run(async_main(args))


if __name__ == "__main__":
    sys.exit(main())
