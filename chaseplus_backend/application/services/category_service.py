"""
Category service orchestrator.

Coordinates category lifecycle operations and answers the course
category invariant check.

Dependencies: chaseplus_backend.boundary.db.CRUD, chaseplus_backend.core
System role: Category use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.application.validators import is_provided, optional_text, require_text
from chaseplus_backend.boundary.db.CRUD.category_crud import category_crud
from chaseplus_backend.boundary.db.models.category_model import CategoryModel
from chaseplus_backend.core.exceptions import (
    CategoryInUseError,
    ContentBackendException,
    DuplicateCategoryError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def category_to_dict(category: CategoryModel) -> dict[str, Any]:
    """Map a CategoryModel row to the service result shape."""
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        "is_active": category.is_active,
        "created_at": category.created_at,
        "updated_at": category.updated_at,
    }


class CategoryService:
    """Category service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize category service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def validate_course_category(self, name: str) -> CategoryModel | None:
        """
        Look up the category a course refers to.

        Exact, case-sensitive name match over all categories, active or not.

        Args:
            name: Category name supplied for a course

        Returns:
            CategoryModel if found, None otherwise
        """
        return await category_crud.get_by_name(self.db, name)

    async def _get_or_raise(self, category_id: UUID) -> CategoryModel:
        category = await category_crud.get_by_id(self.db, category_id)
        if category is None:
            raise NotFoundError("category", category_id)
        return category

    async def create_category(self, name: str, description: str | None = None) -> dict:
        """
        Create a new category.

        Args:
            name: Unique category name
            description: Optional description

        Returns:
            dict: Created category

        Raises:
            ValidationError: If name is blank
            DuplicateCategoryError: If the name is already taken
        """
        name = require_text(name, "name")
        try:
            if await category_crud.get_by_name(self.db, name) is not None:
                raise DuplicateCategoryError(name)

            category = await category_crud.create(
                self.db,
                name=name,
                description=optional_text(description),
                is_active=True,
            )
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateCategoryError(name)
        except ContentBackendException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error("Failed to create category", extra={"error": str(e), "category_name": name})
            raise

        logger.info("Category created", extra={"category_id": str(category.id), "category_name": name})
        return category_to_dict(category)

    async def get_category(self, category_id: UUID) -> dict:
        """
        Get category by ID.

        Raises:
            NotFoundError: If category not found
        """
        return category_to_dict(await self._get_or_raise(category_id))

    async def list_categories(self, active_only: bool = False) -> list[dict]:
        """
        List categories, newest first.

        Args:
            active_only: Restrict to active categories (public navigation)

        Returns:
            list[dict]: Category dicts
        """
        if active_only:
            categories = await category_crud.get_active(self.db)
        else:
            categories = await category_crud.get_all(self.db)
        return [category_to_dict(c) for c in categories]

    async def update_category(
        self,
        category_id: UUID,
        name: str | None = None,
        description: str | None = None,
    ) -> dict:
        """
        Rename and/or re-describe a category.

        Courses follow the category by reference, so a rename carries over
        to every course filed under it.

        Args:
            category_id: Category UUID
            name: New unique name (optional)
            description: New description (optional; blank clears it)

        Returns:
            dict: Updated category

        Raises:
            NotFoundError: If category not found
            DuplicateCategoryError: If the new name is already taken
        """
        try:
            category = await self._get_or_raise(category_id)

            updates: dict[str, Any] = {}
            if is_provided(name) and name.strip() != category.name:
                new_name = name.strip()
                if await category_crud.get_by_name(self.db, new_name) is not None:
                    raise DuplicateCategoryError(new_name)
                updates["name"] = new_name
            if description is not None:
                updates["description"] = optional_text(description)

            if not updates:
                return category_to_dict(category)

            updated = await category_crud.update_by_id(self.db, category_id, **updates)
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateCategoryError(name)
        except ContentBackendException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update category",
                extra={"error": str(e), "category_id": str(category_id)},
            )
            raise

        logger.info(
            "Category updated",
            extra={"category_id": str(category_id), "updates": list(updates.keys())},
        )
        return category_to_dict(updated)

    async def toggle_category_active(self, category_id: UUID) -> dict:
        """
        Flip a category's is_active flag.

        Raises:
            NotFoundError: If category not found
        """
        try:
            category = await self._get_or_raise(category_id)
            updated = await category_crud.update_by_id(
                self.db, category_id, is_active=not category.is_active
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Category status toggled",
            extra={"category_id": str(category_id), "is_active": updated.is_active},
        )
        return category_to_dict(updated)

    async def delete_category(self, category_id: UUID) -> bool:
        """
        Delete a category no course refers to.

        Args:
            category_id: Category UUID

        Returns:
            bool: True if deleted

        Raises:
            NotFoundError: If category not found
            CategoryInUseError: If courses are still filed under it
        """
        try:
            category = await self._get_or_raise(category_id)
            course_count = await category_crud.count_courses(self.db, category_id)
            if course_count:
                raise CategoryInUseError(category.name, course_count)

            await category_crud.delete_by_id(self.db, category_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info("Category deleted", extra={"category_id": str(category_id)})
        return True
