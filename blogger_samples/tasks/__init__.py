"""Sample background tasks for the posts collection."""

from .base import BackgroundTask, TaskCallbacks, TaskStatus
from .create_post import CreatePostResult, CreatePostTask
from .load_post import LoadPostTask
from .load_post_list import MAX_PAGES, LoadPostListTask

__all__ = [
    "BackgroundTask",
    "TaskCallbacks",
    "TaskStatus",
    "CreatePostTask",
    "CreatePostResult",
    "LoadPostTask",
    "LoadPostListTask",
    "MAX_PAGES",
]
