"""
Blog CRUD operations.

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.models
System role: Blog persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.boundary.db.CRUD.base_crud import BaseCRUD
from chaseplus_backend.boundary.db.models.blog_model import BlogModel


class BlogCRUD(BaseCRUD[BlogModel]):
    """CRUD operations for BlogModel with publication filters."""

    def __init__(self) -> None:
        """Initialize BlogCRUD with BlogModel."""
        super().__init__(BlogModel)

    async def get_published(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[BlogModel]:
        """
        Retrieve published posts, newest first.

        Args:
            session: Async database session
            limit: Maximum number of posts
            offset: Posts to skip

        Returns:
            Sequence of BlogModels
        """
        return await self.find(
            session, BlogModel.is_published.is_(True), limit=limit, offset=offset
        )

    async def count_published(self, session: AsyncSession) -> int:
        """Count published posts."""
        return await self.count(session, BlogModel.is_published.is_(True))

    async def increment_views(self, session: AsyncSession, id: UUID) -> bool:
        """
        Atomically add one to a post's view counter.

        Args:
            session: Async database session
            id: Blog UUID

        Returns:
            True if the post exists
        """
        stmt = (
            update(BlogModel)
            .where(BlogModel.id == id)
            .values(views=BlogModel.views + 1)
        )
        result = await session.execute(stmt)
        return result.rowcount > 0


blog_crud = BlogCRUD()
