"""Utility helper functions."""

from bloglist.utils.helpers import get_summary, host, time_taken, today_str
from bloglist.utils.list_helper import (
    EMPTY_LIST,
    dummy,
    favorite_blog,
    most_blogs,
    total_likes,
)

__all__ = [
    "EMPTY_LIST",
    "dummy",
    "favorite_blog",
    "get_summary",
    "host",
    "most_blogs",
    "time_taken",
    "today_str",
    "total_likes",
]
