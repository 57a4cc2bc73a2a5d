"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - CategoryModel, CourseModel, BlogModel: Content entities
  - category_crud, course_crud, blog_crud: CRUD operation singletons

Dependencies: sqlalchemy, chaseplus_backend.configs
System role: Database adapter providing persistent storage for content.
"""

from chaseplus_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from chaseplus_backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from chaseplus_backend.boundary.db.models import BlogModel, CategoryModel, CourseModel
from chaseplus_backend.boundary.db.CRUD import (
    BaseCRUD,
    BlogCRUD,
    CategoryCRUD,
    CourseCRUD,
    blog_crud,
    category_crud,
    course_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "CategoryModel",
    "CourseModel",
    "BlogModel",
    # CRUD classes
    "BaseCRUD",
    "CategoryCRUD",
    "CourseCRUD",
    "BlogCRUD",
    # CRUD singletons
    "category_crud",
    "course_crud",
    "blog_crud",
]
