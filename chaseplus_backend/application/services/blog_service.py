"""
Blog service orchestrator.

Coordinates blog post lifecycle operations and the public reads.

Unlike courses, blog posts own their header image: replacing the image
or deleting the post removes the superseded asset from the store on a
best-effort basis.

Dependencies: chaseplus_backend.boundary, chaseplus_backend.core
System role: Blog use case orchestration
"""

import datetime as dt
import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.application.validators import require_date, require_text
from chaseplus_backend.boundary.aws.s3_asset_store import (
    ImageUpload,
    S3AssetStore,
    asset_id_from_url,
)
from chaseplus_backend.boundary.db.CRUD.blog_crud import blog_crud
from chaseplus_backend.boundary.db.models.blog_model import BlogModel
from chaseplus_backend.core.exceptions import (
    AssetStoreError,
    ContentBackendException,
    MissingImageError,
    NotFoundError,
)
from chaseplus_backend.core.pagination import paginate

logger = logging.getLogger(__name__)

PUBLIC_PAGE_SIZE = 9
RECENT_POSTS = 3
META_DESCRIPTION_LENGTH = 160


def blog_to_dict(blog: BlogModel) -> dict[str, Any]:
    """Map a BlogModel row to the service result shape."""
    return {
        "id": blog.id,
        "title": blog.title,
        "category": blog.category,
        "date": blog.date,
        "description": blog.description,
        "content": blog.content,
        "image_url": blog.image_url,
        "meta_title": blog.meta_title,
        "meta_description": blog.meta_description,
        "author": blog.author,
        "is_published": blog.is_published,
        "views": blog.views,
        "created_at": blog.created_at,
        "updated_at": blog.updated_at,
    }


class BlogService:
    """Blog service orchestrator."""

    def __init__(self, db: AsyncSession, asset_store: S3AssetStore) -> None:
        """
        Initialize blog service.

        Args:
            db: Async SQLAlchemy session
            asset_store: Remote store for blog header images
        """
        self.db = db
        self.asset_store = asset_store

    async def _get_or_raise(self, blog_id: UUID) -> BlogModel:
        blog = await blog_crud.get_by_id(self.db, blog_id)
        if blog is None:
            raise NotFoundError("blog", blog_id)
        return blog

    async def _discard_asset(self, blog: BlogModel | dict, reason: str) -> None:
        """
        Remove a blog's stored image, logging instead of raising on failure.

        The stored asset id is used when present, otherwise it is derived
        from the image URL.
        """
        if isinstance(blog, dict):
            asset_id, image_url = blog.get("image_asset_id"), blog.get("image_url")
        else:
            asset_id, image_url = blog.image_asset_id, blog.image_url
        asset_id = asset_id or asset_id_from_url(image_url)

        if not asset_id:
            logger.warning(
                "Cannot resolve image asset id, skipping delete",
                extra={"image_url": image_url, "reason": reason},
            )
            return

        try:
            await self.asset_store.delete(asset_id)
        except AssetStoreError as e:
            logger.warning(
                "Failed to delete blog image",
                extra={"asset_id": asset_id, "reason": reason, "error": str(e)},
            )

    async def create_blog(
        self,
        *,
        title: str | None,
        category: str | None,
        date: dt.date | str | None,
        description: str | None,
        content: str | None,
        author: str | None,
        meta_title: str | None = None,
        meta_description: str | None = None,
        is_published: bool = False,
        image: ImageUpload | None = None,
    ) -> dict:
        """
        Create a blog post.

        Missing meta fields default to the title and the first 160
        characters of the description.

        Args:
            title: Post title
            category: Free-text category label
            date: Publication date (date or ISO string)
            description: Short summary
            content: Post body
            author: Author display name
            meta_title: SEO title (optional)
            meta_description: SEO description (optional)
            is_published: Publish immediately
            image: Header image (required)

        Returns:
            dict: Created blog post

        Raises:
            ValidationError: For the first missing required field
            MissingImageError: If no image was supplied
            AssetStoreError: If the image upload fails (nothing persisted)
        """
        fields: dict[str, Any] = {
            "title": require_text(title, "title"),
            "category": require_text(category, "category"),
            "date": require_date(date, "date"),
            "description": require_text(description, "description"),
            "content": require_text(content, "content"),
            "author": require_text(author, "author"),
        }
        if image is None:
            raise MissingImageError("blog")

        fields["meta_title"] = (meta_title or "").strip() or fields["title"]
        fields["meta_description"] = (meta_description or "").strip() or fields[
            "description"
        ][:META_DESCRIPTION_LENGTH]

        asset = await self.asset_store.upload(image)

        try:
            blog = await blog_crud.create(
                self.db,
                image_url=asset.public_url,
                image_asset_id=asset.asset_id,
                is_published=bool(is_published),
                views=0,
                **fields,
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create blog",
                extra={"error": str(e), "blog_title": fields["title"]},
            )
            raise

        logger.info(
            "Blog created",
            extra={"blog_id": str(blog.id), "is_published": blog.is_published},
        )
        return blog_to_dict(blog)

    async def get_blog(self, blog_id: UUID) -> dict:
        """
        Get blog post by ID.

        Raises:
            NotFoundError: If blog not found
        """
        return blog_to_dict(await self._get_or_raise(blog_id))

    async def record_view(self, blog_id: UUID) -> dict:
        """
        Count one public view of a published post and return it.

        Raises:
            NotFoundError: If blog not found or not published
        """
        try:
            blog = await self._get_or_raise(blog_id)
            if not blog.is_published:
                raise NotFoundError("blog", blog_id)
            await blog_crud.increment_views(self.db, blog_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(blog)
        return blog_to_dict(blog)

    async def update_blog(
        self,
        blog_id: UUID,
        *,
        title: str | None,
        category: str | None,
        date: dt.date | str | None,
        description: str | None,
        content: str | None,
        author: str | None,
        meta_title: str | None,
        meta_description: str | None,
        is_published: bool | None = None,
        image: ImageUpload | None = None,
    ) -> dict:
        """
        Replace a blog post's fields, optionally swapping its image.

        Every text field is required, meta fields included; they are not
        re-derived from title or description. A new image is uploaded and
        stored first; the superseded image is then deleted best-effort.

        Args:
            blog_id: Blog UUID
            is_published: New publication flag (None keeps the current one)
            (remaining arguments as for create_blog)

        Returns:
            dict: Updated blog post

        Raises:
            NotFoundError: If blog not found
            ValidationError: If a field is missing
            AssetStoreError: If the new image upload fails (nothing persisted)
        """
        try:
            blog = await self._get_or_raise(blog_id)

            updates: dict[str, Any] = {
                "title": require_text(title, "title"),
                "category": require_text(category, "category"),
                "date": require_date(date, "date"),
                "description": require_text(description, "description"),
                "content": require_text(content, "content"),
                "author": require_text(author, "author"),
                "meta_title": require_text(meta_title, "meta_title"),
                "meta_description": require_text(meta_description, "meta_description"),
            }
            if is_published is not None:
                updates["is_published"] = bool(is_published)

            previous = None
            if image is not None:
                previous = {"image_asset_id": blog.image_asset_id, "image_url": blog.image_url}
                asset = await self.asset_store.upload(image)
                updates["image_url"] = asset.public_url
                updates["image_asset_id"] = asset.asset_id

            updated = await blog_crud.update_by_id(self.db, blog_id, **updates)
            await self.db.commit()
        except ContentBackendException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update blog",
                extra={"error": str(e), "blog_id": str(blog_id)},
            )
            raise

        if previous is not None:
            await self._discard_asset(previous, reason="replaced")

        logger.info(
            "Blog updated",
            extra={"blog_id": str(blog_id), "image_replaced": previous is not None},
        )
        return blog_to_dict(updated)

    async def toggle_blog_published(self, blog_id: UUID) -> dict:
        """
        Flip a post's is_published flag; nothing else changes.

        Raises:
            NotFoundError: If blog not found
        """
        try:
            blog = await self._get_or_raise(blog_id)
            updated = await blog_crud.update_by_id(
                self.db, blog_id, is_published=not blog.is_published
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            "Blog publication toggled",
            extra={"blog_id": str(blog_id), "is_published": updated.is_published},
        )
        return blog_to_dict(updated)

    async def delete_blog(self, blog_id: UUID) -> bool:
        """
        Delete a post and its header image.

        The image delete is attempted first; a failure there is logged and
        the record is removed regardless.

        Args:
            blog_id: Blog UUID

        Returns:
            bool: True if deleted

        Raises:
            NotFoundError: If blog not found
        """
        try:
            blog = await self._get_or_raise(blog_id)
            await self._discard_asset(blog, reason="deleted")
            await blog_crud.delete_by_id(self.db, blog_id)
            await self.db.commit()
        except ContentBackendException:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete blog",
                extra={"error": str(e), "blog_id": str(blog_id)},
            )
            raise

        logger.info("Blog deleted", extra={"blog_id": str(blog_id)})
        return True

    async def list_published_recent(self, limit: int = RECENT_POSTS) -> list[dict]:
        """List the newest published posts."""
        blogs = await blog_crud.get_published(self.db, limit=limit if limit > 0 else RECENT_POSTS)
        return [blog_to_dict(b) for b in blogs]

    async def list_blogs_paged(
        self,
        page: int | None = 1,
        limit: int | None = PUBLIC_PAGE_SIZE,
        published_only: bool = True,
    ) -> dict:
        """
        List one page of posts, newest first.

        Args:
            page: 1-based page number
            limit: Page size
            published_only: Restrict to published posts

        Returns:
            dict: items, page, limit, total, total_pages
        """
        window = paginate(page, limit, default_limit=PUBLIC_PAGE_SIZE)

        if published_only:
            blogs = await blog_crud.get_published(self.db, limit=window.limit, offset=window.skip)
            total = await blog_crud.count_published(self.db)
        else:
            blogs = await blog_crud.get_all(self.db, limit=window.limit, offset=window.skip)
            total = await blog_crud.count(self.db)

        return {
            "items": [blog_to_dict(b) for b in blogs],
            "page": window.page,
            "limit": window.limit,
            "total": total,
            "total_pages": window.total_pages(total),
        }

    async def list_all_blogs(self) -> list[dict]:
        """List every post, published or not, newest first (admin dashboard)."""
        blogs = await blog_crud.get_all(self.db)
        return [blog_to_dict(b) for b in blogs]
