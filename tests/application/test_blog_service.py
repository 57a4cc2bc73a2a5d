"""
Test suite for BlogService.

Covers meta field defaulting, full-field updates with image replacement,
best-effort asset cleanup on delete, publication toggling, view counting
and published-only listings.

System role: Verification of blog lifecycle orchestration
"""

import datetime as dt
import uuid

import pytest

from chaseplus_backend.application.services.blog_service import BlogService
from chaseplus_backend.boundary.db.CRUD.blog_crud import blog_crud
from chaseplus_backend.core.exceptions import (
    AssetStoreError,
    MissingImageError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def blog_service(test_async_db, blog_assets) -> BlogService:
    return BlogService(test_async_db, blog_assets)


def full_update(blog: dict, **overrides) -> dict:
    """Build an update payload carrying every editable field of `blog`."""
    payload = {
        field: blog[field]
        for field in (
            "title",
            "category",
            "date",
            "description",
            "content",
            "author",
            "meta_title",
            "meta_description",
        )
    }
    payload.update(overrides)
    return payload


class TestCreateBlog:
    """Test suite for BlogService.create_blog()."""

    @pytest.mark.asyncio
    async def test_meta_fields_default_from_title_and_description(
        self, blog_service, blog_fields, image
    ):
        blog = await blog_service.create_blog(**blog_fields, image=image)

        assert blog["meta_title"] == blog_fields["title"]
        assert blog["meta_description"] == blog_fields["description"][:160]
        assert len(blog["meta_description"]) == 160

    @pytest.mark.asyncio
    async def test_explicit_meta_fields_are_kept(self, blog_service, blog_fields, image):
        blog = await blog_service.create_blog(
            **blog_fields, meta_title="Custom", meta_description="Custom description", image=image
        )

        assert blog["meta_title"] == "Custom"
        assert blog["meta_description"] == "Custom description"

    @pytest.mark.asyncio
    async def test_defaults_to_unpublished_with_zero_views(self, blog_service, blog_fields, image):
        blog = await blog_service.create_blog(**blog_fields, image=image)

        assert blog["is_published"] is False
        assert blog["views"] == 0
        assert blog["date"] == dt.date(2024, 3, 1)

    @pytest.mark.asyncio
    async def test_publish_flag(self, blog_service, blog_fields, image):
        blog = await blog_service.create_blog(**blog_fields, is_published=True, image=image)

        assert blog["is_published"] is True

    @pytest.mark.asyncio
    async def test_first_missing_field_is_reported(self, blog_service, blog_fields, image):
        blog_fields["category"] = ""
        blog_fields["author"] = ""

        with pytest.raises(ValidationError) as exc_info:
            await blog_service.create_blog(**blog_fields, image=image)

        assert exc_info.value.field == "category"

    @pytest.mark.asyncio
    async def test_missing_image_is_rejected(self, test_async_db, blog_service, blog_fields):
        with pytest.raises(MissingImageError, match="Blog image is required"):
            await blog_service.create_blog(**blog_fields)

        assert await blog_crud.count(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_invalid_date_is_rejected(self, blog_service, blog_fields, image):
        blog_fields["date"] = "first of march"

        with pytest.raises(ValidationError) as exc_info:
            await blog_service.create_blog(**blog_fields, image=image)

        assert exc_info.value.field == "date"

    @pytest.mark.asyncio
    async def test_stores_asset_id_from_upload(
        self, test_async_db, blog_service, blog_assets, blog_fields, image
    ):
        blog = await blog_service.create_blog(**blog_fields, image=image)

        row = await blog_crud.get_by_id(test_async_db, blog["id"])
        assert row.image_asset_id == blog_assets.uploads[0].asset_id
        assert blog["image_url"] == blog_assets.uploads[0].public_url


class TestUpdateBlog:
    """Test suite for BlogService.update_blog()."""

    @pytest.mark.asyncio
    async def test_meta_title_is_required(self, blog_service, blog_fields, image):
        blog = await blog_service.create_blog(**blog_fields, image=image)

        with pytest.raises(ValidationError) as exc_info:
            await blog_service.update_blog(blog["id"], **full_update(blog, meta_title=None))

        assert exc_info.value.field == "meta_title"

    @pytest.mark.asyncio
    async def test_meta_fields_are_not_rederived(self, blog_service, blog_fields, image):
        blog = await blog_service.create_blog(**blog_fields, image=image)

        updated = await blog_service.update_blog(
            blog["id"], **full_update(blog, title="Renamed", description="New summary")
        )

        assert updated["title"] == "Renamed"
        assert updated["meta_title"] == blog_fields["title"]
        assert updated["meta_description"] == blog_fields["description"][:160]

    @pytest.mark.asyncio
    async def test_omitted_publish_flag_keeps_current_state(
        self, blog_service, blog_fields, image
    ):
        blog = await blog_service.create_blog(**blog_fields, is_published=True, image=image)

        kept = await blog_service.update_blog(blog["id"], **full_update(blog))
        unpublished = await blog_service.update_blog(
            blog["id"], **full_update(blog, is_published=False)
        )

        assert kept["is_published"] is True
        assert unpublished["is_published"] is False

    @pytest.mark.asyncio
    async def test_new_image_replaces_and_removes_old_asset(
        self, blog_service, blog_assets, blog_fields, image
    ):
        blog = await blog_service.create_blog(**blog_fields, image=image)
        old_asset = blog_assets.uploads[0]

        updated = await blog_service.update_blog(blog["id"], **full_update(blog), image=image)

        new_asset = blog_assets.uploads[1]
        assert updated["image_url"] == new_asset.public_url
        assert blog_assets.deleted == [old_asset.asset_id]
        assert new_asset.asset_id in blog_assets.objects

    @pytest.mark.asyncio
    async def test_old_asset_delete_failure_keeps_update(
        self, blog_service, blog_assets, blog_fields, image
    ):
        blog = await blog_service.create_blog(**blog_fields, image=image)
        blog_assets.fail_delete = True

        updated = await blog_service.update_blog(blog["id"], **full_update(blog), image=image)

        assert updated["image_url"] == blog_assets.uploads[1].public_url

    @pytest.mark.asyncio
    async def test_upload_failure_keeps_old_image(
        self, blog_service, blog_assets, blog_fields, image
    ):
        blog = await blog_service.create_blog(**blog_fields, image=image)
        blog_assets.fail_upload = True

        with pytest.raises(AssetStoreError):
            await blog_service.update_blog(blog["id"], **full_update(blog, title="X"), image=image)

        current = await blog_service.get_blog(blog["id"])
        assert current["image_url"] == blog["image_url"]
        assert current["title"] == blog["title"]
        assert blog_assets.deleted == []

    @pytest.mark.asyncio
    async def test_update_missing_blog(self, blog_service, blog_fields):
        with pytest.raises(NotFoundError):
            await blog_service.update_blog(
                uuid.uuid4(), **blog_fields, meta_title="m", meta_description="d"
            )


class TestDeleteBlog:
    """Test suite for BlogService.delete_blog()."""

    @pytest.mark.asyncio
    async def test_delete_derives_asset_id_from_url(self, blog_service, blog_assets, make_blog):
        blog = await make_blog(
            image_url="https://host/blog-images/abc123.jpg", image_asset_id=None
        )

        assert await blog_service.delete_blog(blog.id) is True

        assert blog_assets.deleted == ["abc123"]
        with pytest.raises(NotFoundError):
            await blog_service.get_blog(blog.id)

    @pytest.mark.asyncio
    async def test_delete_removes_record_when_asset_delete_fails(
        self, blog_service, blog_assets, make_blog
    ):
        blog = await make_blog(
            image_url="https://host/blog-images/abc123.jpg", image_asset_id=None
        )
        blog_assets.fail_delete = True

        assert await blog_service.delete_blog(blog.id) is True

        assert blog_assets.deleted == ["abc123"]
        with pytest.raises(NotFoundError):
            await blog_service.get_blog(blog.id)

    @pytest.mark.asyncio
    async def test_delete_prefers_stored_asset_id(self, blog_service, blog_assets, make_blog):
        blog = await make_blog(
            image_url="https://host/blog-images/abc123.jpg", image_asset_id="stored-id"
        )

        await blog_service.delete_blog(blog.id)

        assert blog_assets.deleted == ["stored-id"]

    @pytest.mark.asyncio
    async def test_unresolvable_asset_is_skipped(self, blog_service, blog_assets, make_blog):
        blog = await make_blog(image_url="https://host/", image_asset_id=None)

        assert await blog_service.delete_blog(blog.id) is True

        assert blog_assets.deleted == []

    @pytest.mark.asyncio
    async def test_delete_missing_blog(self, blog_service, blog_assets):
        with pytest.raises(NotFoundError):
            await blog_service.delete_blog(uuid.uuid4())

        assert blog_assets.deleted == []


class TestPublicationAndViews:
    """Test suite for toggling, view counting and listings."""

    @pytest.mark.asyncio
    async def test_double_toggle_restores_is_published(self, blog_service, make_blog):
        blog = await make_blog(is_published=False)

        first = await blog_service.toggle_blog_published(blog.id)
        second = await blog_service.toggle_blog_published(blog.id)

        assert first["is_published"] is True
        assert second["is_published"] is False

    @pytest.mark.asyncio
    async def test_record_view_increments(self, blog_service, make_blog):
        blog = await make_blog()

        await blog_service.record_view(blog.id)
        viewed = await blog_service.record_view(blog.id)

        assert viewed["views"] == 2

    @pytest.mark.asyncio
    async def test_record_view_hides_drafts(self, blog_service, make_blog):
        draft = await make_blog(is_published=False)

        with pytest.raises(NotFoundError):
            await blog_service.record_view(draft.id)

        assert (await blog_service.get_blog(draft.id))["views"] == 0

    @pytest.mark.asyncio
    async def test_paged_listing_counts_published_only(self, blog_service, make_blog):
        for _ in range(10):
            await make_blog()
        await make_blog(is_published=False)

        page = await blog_service.list_blogs_paged(page=2, limit=9)

        assert page["total"] == 10
        assert page["total_pages"] == 2
        assert [b["title"] for b in page["items"]] == ["Post 1"]

    @pytest.mark.asyncio
    async def test_recent_returns_newest_published(self, blog_service, make_blog):
        for _ in range(4):
            await make_blog()
        await make_blog(is_published=False)

        recent = await blog_service.list_published_recent()

        assert [b["title"] for b in recent] == ["Post 4", "Post 3", "Post 2"]

    @pytest.mark.asyncio
    async def test_admin_listing_includes_drafts(self, blog_service, make_blog):
        await make_blog()
        await make_blog(is_published=False)

        assert len(await blog_service.list_all_blogs()) == 2
