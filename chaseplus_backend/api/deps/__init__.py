"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_blog_asset_store,
    get_blog_service,
    get_category_service,
    get_course_asset_store,
    get_course_service,
    get_service_cache,
    require_admin,
)

__all__ = [
    "get_blog_asset_store",
    "get_blog_service",
    "get_category_service",
    "get_course_asset_store",
    "get_course_service",
    "get_service_cache",
    "require_admin",
]
