"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, fake asset stores, seed helpers, image uploads
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta, timezone
from pathlib import PurePosixPath
from unittest.mock import AsyncMock
import uuid

import pytest

from chaseplus_backend.boundary.aws.s3_asset_store import ImageUpload, StoredAsset
from chaseplus_backend.core.exceptions import AssetStoreError


class FakeAssetStore:
    """
    In-memory stand-in for S3AssetStore.

    Records uploads and deletes so tests can assert on asset consistency.
    Set fail_upload / fail_delete to simulate store outages.
    """

    def __init__(self, folder: str, base_url: str = "https://assets.test") -> None:
        self.folder = folder
        self.base_url = base_url
        self.objects: dict[str, str] = {}
        self.uploads: list[StoredAsset] = []
        self.deleted: list[str] = []
        self.fail_upload = False
        self.fail_delete = False

    async def upload(self, image: ImageUpload) -> StoredAsset:
        if self.fail_upload:
            raise AssetStoreError("upload unavailable", operation="upload")
        asset_id = uuid.uuid4().hex
        key = f"{self.folder}/{asset_id}{PurePosixPath(image.filename).suffix.lower()}"
        asset = StoredAsset(asset_id=asset_id, public_url=f"{self.base_url}/{key}", key=key)
        self.objects[asset_id] = key
        self.uploads.append(asset)
        return asset

    async def delete(self, asset_id: str) -> bool:
        self.deleted.append(asset_id)
        if self.fail_delete:
            raise AssetStoreError("delete unavailable", operation="delete")
        return self.objects.pop(asset_id, None) is not None


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from chaseplus_backend.boundary.db.base import Base
    from chaseplus_backend.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def course_assets() -> FakeAssetStore:
    """Fake store for course images."""
    return FakeAssetStore("course-images")


@pytest.fixture
def blog_assets() -> FakeAssetStore:
    """Fake store for blog images."""
    return FakeAssetStore("blog-images")


@pytest.fixture
def image() -> ImageUpload:
    """Small PNG-like upload."""
    return ImageUpload(filename="cover.png", content_type="image/png", data=b"\x89PNG\r\n\x1a\nfake")


@pytest.fixture
def course_fields() -> dict:
    """Valid course create arguments (without image)."""
    return {
        "title": "Full Stack Development",
        "description": "Build web apps end to end",
        "category": "Development",
        "price": 500,
        "offer_price": 399,
        "duration": "12 weeks",
        "highlights": ["Live projects", "Mentoring"],
        "what_youll_learn": ["React", "FastAPI"],
        "career_opportunities": ["Web developer"],
        "why_choose_this_course": ["Industry mentors"],
    }


@pytest.fixture
def blog_fields() -> dict:
    """Valid blog create arguments (without image)."""
    return {
        "title": "Why learn Python",
        "category": "Programming",
        "date": "2024-03-01",
        "description": "A short tour of what makes Python productive. " * 6,
        "content": "Python is a general purpose language...",
        "author": "Chaseplus Team",
    }


@pytest.fixture
def make_category(test_async_db):
    """Factory inserting a category row directly through the CRUD layer."""
    from chaseplus_backend.boundary.db.CRUD.category_crud import category_crud

    async def _make(name: str, is_active: bool = True):
        category = await category_crud.create(test_async_db, name=name, is_active=is_active)
        await test_async_db.commit()
        return category

    return _make


@pytest.fixture
def make_course(test_async_db):
    """
    Factory inserting course rows with controlled creation times.

    Rows created later get a later created_at so newest-first ordering is
    deterministic.
    """
    from chaseplus_backend.boundary.db.CRUD.course_crud import course_crud

    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def _make(category, title: str | None = None, is_active: bool = True, **overrides):
        counter["n"] += 1
        fields = {
            "title": title or f"Course {counter['n']}",
            "description": "Description",
            "category": category,
            "image": f"https://assets.test/course-images/seed{counter['n']}.png",
            "image_asset_id": f"seed{counter['n']}",
            "highlights": ["h"],
            "what_youll_learn": ["w"],
            "career_opportunities": ["c"],
            "why_choose_this_course": ["y"],
            "price": 100.0,
            "is_active": is_active,
            "created_at": base_time + timedelta(minutes=counter["n"]),
        }
        fields.update(overrides)
        course = await course_crud.create(test_async_db, **fields)
        await test_async_db.commit()
        return course

    return _make


@pytest.fixture
def make_blog(test_async_db):
    """Factory inserting blog rows with controlled creation times."""
    from datetime import date
    from chaseplus_backend.boundary.db.CRUD.blog_crud import blog_crud

    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def _make(is_published: bool = True, **overrides):
        counter["n"] += 1
        fields = {
            "title": f"Post {counter['n']}",
            "category": "News",
            "date": date(2024, 1, 1),
            "description": "Summary",
            "content": "Body",
            "image_url": f"https://assets.test/blog-images/post{counter['n']}.jpg",
            "image_asset_id": f"post{counter['n']}",
            "meta_title": "Meta",
            "meta_description": "Meta description",
            "author": "Author",
            "is_published": is_published,
            "views": 0,
            "created_at": base_time + timedelta(minutes=counter["n"]),
        }
        fields.update(overrides)
        blog = await blog_crud.create(test_async_db, **fields)
        await test_async_db.commit()
        return blog

    return _make


@pytest.fixture
def mock_course_service():
    """
    Create mock CourseService for router tests.

    Returns:
        AsyncMock: Mocked CourseService with async methods
    """
    return AsyncMock()


@pytest.fixture
def mock_blog_service():
    """Create mock BlogService for router tests."""
    return AsyncMock()


@pytest.fixture
def mock_category_service():
    """Create mock CategoryService for router tests."""
    return AsyncMock()
