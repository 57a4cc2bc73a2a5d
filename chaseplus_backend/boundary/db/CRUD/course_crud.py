"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific listing and search queries.

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence

from sqlalchemy import ColumnElement, or_
from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.boundary.db.CRUD.base_crud import BaseCRUD
from chaseplus_backend.boundary.db.models.category_model import CategoryModel
from chaseplus_backend.boundary.db.models.course_model import CourseModel


def _contains(term: str) -> str:
    """Build a LIKE pattern matching `term` as a literal substring."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with category-aware filters. Category matching goes
    through the category relationship, never through a copied name.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    def build_filters(
        self,
        search: str | None = None,
        active_only: bool = True,
    ) -> list[ColumnElement[bool]]:
        """
        Build listing filters.

        Args:
            search: Case-insensitive substring matched against title or category name
            active_only: Restrict to courses with is_active set

        Returns:
            list: SQLAlchemy boolean expressions
        """
        filters: list[ColumnElement[bool]] = []
        if active_only:
            filters.append(CourseModel.is_active.is_(True))
        if search:
            pattern = _contains(search)
            filters.append(
                or_(
                    CourseModel.title.ilike(pattern, escape="\\"),
                    CourseModel.category.has(CategoryModel.name.ilike(pattern, escape="\\")),
                )
            )
        return filters

    async def search(
        self,
        session: AsyncSession,
        search: str | None = None,
        active_only: bool = True,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[Sequence[CourseModel], int]:
        """
        Retrieve one page of courses plus the total match count.

        Args:
            session: Async database session
            search: Optional substring filter on title or category name
            active_only: Restrict to active courses
            limit: Page size
            offset: Rows to skip

        Returns:
            tuple: (courses newest first, total matching count)
        """
        filters = self.build_filters(search=search, active_only=active_only)
        total = await self.count(session, *filters)
        courses = await self.find(session, *filters, limit=limit, offset=offset)
        return courses, total

    async def get_by_category_name(
        self,
        session: AsyncSession,
        category_name: str,
        active_only: bool = True,
    ) -> Sequence[CourseModel]:
        """
        Retrieve courses filed under the category with this exact name.

        Args:
            session: Async database session
            category_name: Category name (case-sensitive)
            active_only: Restrict to active courses

        Returns:
            Sequence of CourseModels, newest first
        """
        filters = self.build_filters(active_only=active_only)
        filters.append(CourseModel.category.has(CategoryModel.name == category_name))
        return await self.find(session, *filters)


course_crud = CourseCRUD()
