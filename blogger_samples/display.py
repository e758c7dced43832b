"""Console display for the sample tasks.

Stands in for the activities of a GUI host: shows the progress message,
then renders whatever result the task hands back.
"""

import re
from typing import Any

from .blogger.models import Post
from .tasks.create_post import CreatePostResult

_TAGS = re.compile(r"<[^>]+>")


def strip_html(content: str) -> str:
    """Drop markup from post content for plain-text output."""
    return _TAGS.sub("", content).strip()


class ConsoleDisplay:
    """TaskCallbacks implementation that prints to stdout."""

    def __init__(self) -> None:
        self.busy = False
        self.results: list[Any] = []

    def on_start(self, message: str) -> None:
        self.busy = True
        print(message)

    def on_complete(self, result: Any) -> None:
        self.busy = False
        self.results.append(result)

        if isinstance(result, CreatePostResult):
            self.show_alert(result.title, result.message)
            self.show_post(result.post)
        elif isinstance(result, Post):
            self.show_post(result)
        elif isinstance(result, list):
            self.show_post_list(result)
        else:
            print(result)

    def show_alert(self, title: str, message: str) -> None:
        print(f"\n[{title}] {message}")

    def show_post(self, post: Post) -> None:
        print(f"\n{post.title or '(untitled)'}")
        if post.content:
            print(strip_html(post.content))

    def show_post_list(self, posts: list[Post]) -> None:
        if not posts:
            print("\nNo posts")
            return
        print()
        for i, post in enumerate(posts, start=1):
            print(f"{i:3}. {post.title or '(untitled)'}  [{post.id}]")
