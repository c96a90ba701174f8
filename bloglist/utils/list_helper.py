"""
Summary statistics over a list of blog posts.

All helpers are pure: they never touch the database and accept either
model instances (``BlogDB``, ``BlogResponse``) or plain mappings with the
same field names.
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any, TypedDict

EMPTY_LIST = "the blog list is empty"


class FavoriteBlog(TypedDict):
    title: str
    author: str | None
    likes: int


class AuthorBlogs(TypedDict):
    author: str | None
    blogs: int


def _field(blog: Any, name: str) -> Any:  # noqa: ANN401
    if isinstance(blog, Mapping):
        return blog.get(name)
    return getattr(blog, name, None)


def _likes(blog: Any) -> int:  # noqa: ANN401
    return _field(blog, "likes") or 0


def dummy(blogs: Sequence[Any]) -> int:
    """Return 1 regardless of input."""
    return 1


def total_likes(blogs: Sequence[Any]) -> int:
    """
    Sum the likes of every blog.

    Args:
        blogs: Blog posts to aggregate.

    Returns:
        int: Total likes, 0 for an empty list.
    """
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[Any]) -> FavoriteBlog | str:
    """
    Find the blog with the most likes.

    Ties go to the blog that appears first.

    Args:
        blogs: Blog posts to search.

    Returns:
        FavoriteBlog | str: Title, author and likes of the favorite blog,
        or ``EMPTY_LIST`` when there are no blogs.
    """
    if not blogs:
        return EMPTY_LIST

    blog = max(blogs, key=_likes)
    return FavoriteBlog(
        title=_field(blog, "title"),
        author=_field(blog, "author"),
        likes=_likes(blog),
    )


def most_blogs(blogs: Sequence[Any]) -> AuthorBlogs | str:
    """
    Find the author with the largest number of blogs.

    Authors are counted in order of first appearance, so ties go to the
    author seen first.

    Args:
        blogs: Blog posts to group by author.

    Returns:
        AuthorBlogs | str: Author and blog count, or ``EMPTY_LIST`` when
        there are no blogs.
    """
    if not blogs:
        return EMPTY_LIST

    counts = Counter(_field(blog, "author") for blog in blogs)
    author, count = max(counts.items(), key=lambda item: item[1])
    return AuthorBlogs(author=author, blogs=count)
