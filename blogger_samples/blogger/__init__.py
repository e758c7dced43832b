"""Blogger API integration module."""

from .client import AuthorizationError, BloggerAPIError, BloggerClient
from .mock_client import MockBloggerClient
from .models import Author, Post, PostList
from .protocol import PostsService

__all__ = [
    "BloggerClient",
    "MockBloggerClient",
    "BloggerAPIError",
    "AuthorizationError",
    "PostsService",
    "Post",
    "PostList",
    "Author",
]
