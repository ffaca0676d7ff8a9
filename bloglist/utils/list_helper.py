"""Aggregate helpers over lists of blogs."""

from collections.abc import Sequence
from typing import Any, Protocol


class HasLikes(Protocol):
    title: str
    author: str | None
    likes: int


def total_likes(blogs: Sequence[HasLikes]) -> int:
    """
    Sum the likes of every blog.

    Args:
        blogs: Blogs to aggregate

    Returns:
        int: Total likes, 0 for an empty list
    """
    return sum(blog.likes for blog in blogs)


def favourite_blog(blogs: Sequence[HasLikes]) -> dict[str, Any] | None:
    """
    Return the blog with the most likes.

    Ties go to the earliest blog in the sequence.

    Args:
        blogs: Blogs to search

    Returns:
        dict | None: ``title``, ``author`` and ``likes`` of the favourite, or None when empty
    """
    if not blogs:
        return None

    favourite = max(blogs, key=lambda blog: blog.likes)
    return {
        "title": favourite.title,
        "author": favourite.author,
        "likes": favourite.likes,
    }
