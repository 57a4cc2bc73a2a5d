"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: chaseplus_backend.configs, chaseplus_backend.application, chaseplus_backend.boundary
System role: DI container for service injection and the admin auth gate
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from chaseplus_backend.application.services import BlogService, CategoryService, CourseService
from chaseplus_backend.boundary.aws.s3_asset_store import S3AssetStore
from chaseplus_backend.boundary.db import get_async_db
from chaseplus_backend.configs import get_settings

ADMIN_SESSION_KEY = "admin"


class ServiceCache:
    """Container for cached asset store clients."""

    def __init__(self):
        self._course_assets = None
        self._blog_assets = None

    def _build_store(self, folder: str) -> S3AssetStore:
        settings = get_settings().assets
        return S3AssetStore(
            bucket=settings.bucket,
            folder=folder,
            base_url=settings.base_url,
            region=settings.region,
        )

    @property
    def course_assets(self) -> S3AssetStore:
        """Get cached course image store."""
        if self._course_assets is None:
            self._course_assets = self._build_store(get_settings().assets.course_folder)
        return self._course_assets

    @property
    def blog_assets(self) -> S3AssetStore:
        """Get cached blog image store."""
        if self._blog_assets is None:
            self._blog_assets = self._build_store(get_settings().assets.blog_folder)
        return self._blog_assets

    def clear(self) -> None:
        """Clear all cached instances."""
        self._course_assets = None
        self._blog_assets = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_course_asset_store() -> S3AssetStore:
    """Get the S3 store for course images."""
    return get_service_cache().course_assets


def get_blog_asset_store() -> S3AssetStore:
    """Get the S3 store for blog images."""
    return get_service_cache().blog_assets


def get_category_service(db: AsyncSession = Depends(get_async_db)) -> CategoryService:
    """
    Get category service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CategoryService: Category service instance
    """
    return CategoryService(db=db)


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    asset_store: S3AssetStore = Depends(get_course_asset_store),
) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)
        asset_store: Course image store (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db, asset_store=asset_store)


def get_blog_service(
    db: AsyncSession = Depends(get_async_db),
    asset_store: S3AssetStore = Depends(get_blog_asset_store),
) -> BlogService:
    """
    Get blog service instance.

    Args:
        db: Async database session (injected via Depends)
        asset_store: Blog image store (injected via Depends)

    Returns:
        BlogService: Blog service instance
    """
    return BlogService(db=db, asset_store=asset_store)


def require_admin(request: Request) -> str:
    """
    Reject requests without an authenticated admin session.

    Args:
        request: Incoming request carrying the signed session cookie

    Returns:
        str: Authenticated admin username

    Raises:
        HTTPException(401): No admin session
    """
    username = request.session.get(ADMIN_SESSION_KEY)
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin login required",
        )
    return username
