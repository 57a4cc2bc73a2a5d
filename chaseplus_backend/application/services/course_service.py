"""
Course service orchestrator.

Coordinates course lifecycle operations: create, partial update, status
toggle and delete, plus the public listing reads.

Every write runs as explicit ordered steps: structural validation, image
upload, category check, persist. Course images are never removed from
the asset store: neither on delete nor when an update replaces them.

Dependencies: chaseplus_backend.boundary, chaseplus_backend.core
System role: Course use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.application.services.category_service import CategoryService
from chaseplus_backend.application.validators import (
    is_provided,
    optional_price,
    optional_text,
    require_non_empty_list,
    require_price,
    require_text,
)
from chaseplus_backend.boundary.aws.s3_asset_store import ImageUpload, S3AssetStore
from chaseplus_backend.boundary.db.CRUD.course_crud import course_crud
from chaseplus_backend.boundary.db.models.category_model import CategoryModel
from chaseplus_backend.boundary.db.models.course_model import CourseModel
from chaseplus_backend.core.exceptions import (
    ContentBackendException,
    InvalidCategoryError,
    MissingImageError,
    NotFoundError,
)
from chaseplus_backend.core.pagination import paginate

logger = logging.getLogger(__name__)

PUBLIC_PAGE_SIZE = 9


def course_to_dict(course: CourseModel) -> dict[str, Any]:
    """Map a CourseModel row to the service result shape."""
    return {
        "id": course.id,
        "title": course.title,
        "description": course.description,
        "category": course.category_name,
        "category_id": course.category_id,
        "image": course.image,
        "duration": course.duration,
        "highlights": list(course.highlights),
        "what_youll_learn": list(course.what_youll_learn),
        "career_opportunities": list(course.career_opportunities),
        "why_choose_this_course": list(course.why_choose_this_course),
        "price": course.price,
        "offer_price": course.offer_price,
        "is_active": course.is_active,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession, asset_store: S3AssetStore) -> None:
        """
        Initialize course service.

        Args:
            db: Async SQLAlchemy session
            asset_store: Remote store for course images
        """
        self.db = db
        self.asset_store = asset_store
        self.categories = CategoryService(db)

    async def _get_or_raise(self, course_id: UUID) -> CourseModel:
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise NotFoundError("course", course_id)
        return course

    async def _resolve_category(self, name: str) -> CategoryModel:
        category = await self.categories.validate_course_category(name)
        if category is None:
            raise InvalidCategoryError(name)
        return category

    async def create_course(
        self,
        *,
        title: str | None,
        description: str | None,
        category: str | None,
        price: Any,
        highlights: list[str] | None,
        what_youll_learn: list[str] | None,
        career_opportunities: list[str] | None,
        why_choose_this_course: list[str] | None,
        duration: str | None = None,
        offer_price: Any = None,
        image: ImageUpload | None = None,
    ) -> dict:
        """
        Create a new active course.

        Args:
            title: Course title
            description: Course description
            category: Name of an existing category
            price: Non-negative list price
            highlights: Non-empty list of highlights
            what_youll_learn: Non-empty list of learning points
            career_opportunities: Non-empty list of career opportunities
            why_choose_this_course: Non-empty list of reasons
            duration: Optional duration label
            offer_price: Optional discounted price
            image: Course image (required)

        Returns:
            dict: Created course

        Raises:
            MissingImageError: If no image was supplied
            ValidationError: If a required field is missing or malformed
            AssetStoreError: If the image upload fails (nothing persisted)
            InvalidCategoryError: If the category does not exist; the
                uploaded image stays in the asset store
        """
        if image is None:
            raise MissingImageError("course")

        fields: dict[str, Any] = {
            "title": require_text(title, "title"),
            "description": require_text(description, "description"),
            "duration": optional_text(duration),
            "price": require_price(price, "price"),
            "offer_price": optional_price(offer_price, "offer_price"),
            "highlights": require_non_empty_list(highlights, "highlights"),
            "what_youll_learn": require_non_empty_list(what_youll_learn, "what_youll_learn"),
            "career_opportunities": require_non_empty_list(
                career_opportunities, "career_opportunities"
            ),
            "why_choose_this_course": require_non_empty_list(
                why_choose_this_course, "why_choose_this_course"
            ),
        }
        category_name = require_text(category, "category")

        asset = await self.asset_store.upload(image)

        try:
            category_row = await self._resolve_category(category_name)
            course = await course_crud.create(
                self.db,
                category=category_row,
                image=asset.public_url,
                image_asset_id=asset.asset_id,
                is_active=True,
                **fields,
            )
            await self.db.commit()
        except InvalidCategoryError:
            await self.db.rollback()
            logger.warning(
                "Course rejected after image upload, image left in asset store",
                extra={"category": category_name, "asset_id": asset.asset_id},
            )
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "course_title": fields["title"]},
            )
            raise

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "course_title": course.title},
        )
        return course_to_dict(course)

    async def get_course(self, course_id: UUID) -> dict:
        """
        Get course by ID.

        Raises:
            NotFoundError: If course not found
        """
        return course_to_dict(await self._get_or_raise(course_id))

    async def update_course(
        self,
        course_id: UUID,
        *,
        title: str | None = None,
        description: str | None = None,
        category: str | None = None,
        price: Any = None,
        highlights: list[str] | None = None,
        what_youll_learn: list[str] | None = None,
        career_opportunities: list[str] | None = None,
        why_choose_this_course: list[str] | None = None,
        duration: str | None = None,
        offer_price: Any = None,
        image: ImageUpload | None = None,
    ) -> dict:
        """
        Partially update a course.

        Omitted (None or blank) fields keep their stored values. A supplied
        list must still be non-empty. A new image replaces the stored URL;
        the superseded image is left in the asset store.

        Args:
            course_id: Course UUID
            (remaining arguments as for create_course, all optional)

        Returns:
            dict: Updated course

        Raises:
            NotFoundError: If course not found
            ValidationError: If a supplied field is malformed
            AssetStoreError: If the image upload fails (nothing persisted)
            InvalidCategoryError: If a changed category does not exist
        """
        try:
            course = await self._get_or_raise(course_id)

            updates: dict[str, Any] = {}
            if is_provided(title):
                updates["title"] = require_text(title, "title")
            if is_provided(description):
                updates["description"] = require_text(description, "description")
            if is_provided(duration):
                updates["duration"] = optional_text(duration)
            if is_provided(price):
                updates["price"] = require_price(price, "price")
            if is_provided(offer_price):
                updates["offer_price"] = optional_price(offer_price, "offer_price")

            supplied_lists = {
                "highlights": highlights,
                "what_youll_learn": what_youll_learn,
                "career_opportunities": career_opportunities,
                "why_choose_this_course": why_choose_this_course,
            }
            for field, items in supplied_lists.items():
                if items is not None:
                    updates[field] = require_non_empty_list(items, field)

            new_category = None
            if is_provided(category) and category.strip() != course.category_name:
                new_category = category.strip()

            if image is not None:
                asset = await self.asset_store.upload(image)
                if course.image_asset_id:
                    logger.info(
                        "Course image replaced, previous image retained",
                        extra={
                            "course_id": str(course_id),
                            "previous_asset_id": course.image_asset_id,
                        },
                    )
                updates["image"] = asset.public_url
                updates["image_asset_id"] = asset.asset_id

            if new_category is not None:
                updates["category"] = await self._resolve_category(new_category)

            if not updates:
                return course_to_dict(course)

            updated = await course_crud.update_by_id(self.db, course_id, **updates)
            await self.db.commit()
        except ContentBackendException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course updated",
            extra={"course_id": str(course_id), "updates": sorted(updates.keys())},
        )
        return course_to_dict(updated)

    async def toggle_course_active(self, course_id: UUID) -> dict:
        """
        Flip a course's is_active flag; nothing else changes.

        Raises:
            NotFoundError: If course not found
        """
        try:
            course = await self._get_or_raise(course_id)
            updated = await course_crud.update_by_id(
                self.db, course_id, is_active=not course.is_active
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Course status toggled",
            extra={"course_id": str(course_id), "is_active": updated.is_active},
        )
        return course_to_dict(updated)

    async def delete_course(self, course_id: UUID) -> bool:
        """
        Delete a course record. Its image stays in the asset store.

        Args:
            course_id: Course UUID

        Returns:
            bool: True if deleted

        Raises:
            NotFoundError: If course not found
        """
        try:
            course = await self._get_or_raise(course_id)
            asset_id = course.image_asset_id
            await course_crud.delete_by_id(self.db, course_id)
            await self.db.commit()
        except ContentBackendException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course deleted, image retained",
            extra={"course_id": str(course_id), "asset_id": asset_id},
        )
        return True

    async def list_courses_paged(
        self,
        page: int | None = 1,
        limit: int | None = PUBLIC_PAGE_SIZE,
        search: str | None = None,
        active_only: bool = True,
    ) -> dict:
        """
        List one page of courses, newest first.

        Args:
            page: 1-based page number
            limit: Page size
            search: Case-insensitive substring on title or category name
            active_only: Restrict to active courses (False for the admin dashboard)

        Returns:
            dict: items, page, limit, total, total_pages, search
        """
        window = paginate(page, limit, default_limit=PUBLIC_PAGE_SIZE)
        search = optional_text(search)

        courses, total = await course_crud.search(
            self.db,
            search=search,
            active_only=active_only,
            limit=window.limit,
            offset=window.skip,
        )
        return {
            "items": [course_to_dict(c) for c in courses],
            "page": window.page,
            "limit": window.limit,
            "total": total,
            "total_pages": window.total_pages(total),
            "search": search or "",
        }

    async def list_courses_by_category(self, category_name: str) -> list[dict]:
        """
        List active courses filed under a category.

        Args:
            category_name: Exact category name

        Returns:
            list[dict]: id and title of each course
        """
        courses = await course_crud.get_by_category_name(self.db, category_name)
        return [{"id": c.id, "title": c.title} for c in courses]

    async def list_active_courses(self) -> list[dict]:
        """List every active course, newest first (site navigation)."""
        courses = await course_crud.find(self.db, *course_crud.build_filters(active_only=True))
        return [course_to_dict(c) for c in courses]
