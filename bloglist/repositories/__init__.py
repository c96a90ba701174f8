"""Repository layer for database operations."""

from bloglist.repositories.base import BaseRepository, parse_record_id
from bloglist.repositories.blog import BlogRepository
from bloglist.repositories.user import UserRepository

__all__ = ["BaseRepository", "BlogRepository", "UserRepository", "parse_record_id"]
