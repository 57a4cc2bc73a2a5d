"""Service orchestrators."""

from .blog_service import BlogService
from .category_service import CategoryService
from .course_service import CourseService

__all__ = [
    "BlogService",
    "CategoryService",
    "CourseService",
]
