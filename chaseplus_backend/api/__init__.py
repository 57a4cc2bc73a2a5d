"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    admin_blogs_router,
    admin_categories_router,
    admin_courses_router,
    auth_router,
    blogs_router,
    categories_router,
    courses_router,
    health_router,
)

api_router = APIRouter()

# Public site
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(courses_router)
api_router.include_router(blogs_router)
api_router.include_router(categories_router)

# Admin dashboard
api_router.include_router(admin_courses_router)
api_router.include_router(admin_blogs_router)
api_router.include_router(admin_categories_router)

__all__ = ["api_router"]
