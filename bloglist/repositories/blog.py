"""Blog repository for database operations."""

from uuid import UUID

from sqlalchemy.orm import selectinload

from bloglist.errors import PostValidationError
from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Every blog returned from here has its ``user`` relationship loaded so it
    can be serialized with the owner's public fields.
    """

    model = BlogDB

    async def get_all(self) -> list[BlogDB]:  # type: ignore[override]
        """
        Get all blogs with their owners.

        Returns:
            list[BlogDB]: List of blogs
        """
        # pyrefly: ignore [bad-argument-type]
        return await super().get_all(selectinload(BlogDB.user))

    async def create(self, blog: BlogCreate, owner: UserDB) -> BlogDB:
        """
        Create a new blog owned by ``owner``.

        Args:
            blog: Blog creation body
            owner: Authenticated user creating the blog

        Returns:
            BlogDB: Created blog with its owner loaded

        Raises:
            PostValidationError: If title or url is missing
            DatabaseError: For database errors
        """
        if not blog.is_complete:
            raise PostValidationError

        db_blog = BlogDB(
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes or 0,
            user_id=owner.id,
        )
        saved = await self._save(db_blog, "user")
        logger.info(f"Blog {saved.id} created by {owner.username}")
        return saved

    async def update(self, blog_id: str | UUID, blog_update: BlogUpdate) -> BlogDB:
        """
        Replace the provided fields of a blog.

        Args:
            blog_id: Blog identifier
            blog_update: Fields to replace

        Returns:
            BlogDB: Updated blog with its owner loaded

        Raises:
            CastError: If the identifier is malformed
            RecordNotFoundError: If no blog has that identifier
        """
        db_blog = await self.get_or_raise(blog_id)

        for key, value in self._changes(blog_update).items():
            setattr(db_blog, key, value)

        return await self._save(db_blog, "user")
