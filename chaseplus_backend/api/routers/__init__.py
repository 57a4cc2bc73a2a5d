"""API routers."""

from .auth import router as auth_router
from .blogs import admin_router as admin_blogs_router
from .blogs import router as blogs_router
from .categories import admin_router as admin_categories_router
from .categories import router as categories_router
from .courses import admin_router as admin_courses_router
from .courses import router as courses_router
from .health import router as health_router

__all__ = [
    "admin_blogs_router",
    "admin_categories_router",
    "admin_courses_router",
    "auth_router",
    "blogs_router",
    "categories_router",
    "courses_router",
    "health_router",
]
