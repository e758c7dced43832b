"""Blogger API samples: create a post, show a post, page through the post list."""

__version__ = "0.1.0"
