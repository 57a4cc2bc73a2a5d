"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from chaseplus_backend.boundary.db.CRUD import course_crud, blog_crud

    # Use singleton instances
    course = await course_crud.get_by_id(db, course_id)

    # Or instantiate classes directly for custom behavior
    from chaseplus_backend.boundary.db.CRUD import CourseCRUD
    custom_crud = CourseCRUD()
"""

from chaseplus_backend.boundary.db.CRUD.base_crud import BaseCRUD
from chaseplus_backend.boundary.db.CRUD.category_crud import CategoryCRUD, category_crud
from chaseplus_backend.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from chaseplus_backend.boundary.db.CRUD.blog_crud import BlogCRUD, blog_crud

__all__ = [
    "BaseCRUD",
    "CategoryCRUD",
    "category_crud",
    "CourseCRUD",
    "course_crud",
    "BlogCRUD",
    "blog_crud",
]
