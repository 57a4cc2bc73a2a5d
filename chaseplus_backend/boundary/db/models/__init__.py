"""
Database models package.

Exports:
  - CategoryModel: Course category ORM model
  - CourseModel: Course ORM model
  - BlogModel: Blog post ORM model

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from chaseplus_backend.boundary.db.models.category_model import CategoryModel
from chaseplus_backend.boundary.db.models.course_model import CourseModel
from chaseplus_backend.boundary.db.models.blog_model import BlogModel

__all__ = [
    "CategoryModel",
    "CourseModel",
    "BlogModel",
]
