"""
Category CRUD operations.

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.models
System role: Category persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.boundary.db.CRUD.base_crud import BaseCRUD
from chaseplus_backend.boundary.db.CRUD.course_crud import course_crud
from chaseplus_backend.boundary.db.models.category_model import CategoryModel
from chaseplus_backend.boundary.db.models.course_model import CourseModel


class CategoryCRUD(BaseCRUD[CategoryModel]):
    """CRUD operations for CategoryModel with name lookups."""

    def __init__(self) -> None:
        """Initialize CategoryCRUD with CategoryModel."""
        super().__init__(CategoryModel)

    async def get_by_name(self, session: AsyncSession, name: str) -> CategoryModel | None:
        """
        Retrieve a category by exact (case-sensitive) name, active or not.

        Args:
            session: Async database session
            name: Category name

        Returns:
            CategoryModel if found, None otherwise
        """
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active(self, session: AsyncSession) -> Sequence[CategoryModel]:
        """Retrieve active categories, newest first."""
        return await self.find(session, CategoryModel.is_active.is_(True))

    async def count_courses(self, session: AsyncSession, category_id: UUID) -> int:
        """
        Count courses referencing a category.

        Args:
            session: Async database session
            category_id: Category UUID

        Returns:
            Number of courses filed under the category
        """
        return await course_crud.count(session, CourseModel.category_id == category_id)


category_crud = CategoryCRUD()
