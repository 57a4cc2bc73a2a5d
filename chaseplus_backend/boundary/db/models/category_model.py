"""
Category ORM model.

Course categories shown in the site navigation and admin screens.

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.base
System role: Category persistence
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chaseplus_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class CategoryModel(Base, UUIDMixin, TimestampMixin):
    """
    Category ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Unique, case-sensitive display name
        description: Optional free text
        is_active: Whether the category is shown on the public site
        courses: Courses filed under this category

    Constraints:
        name: UNIQUE
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        doc="Category name",
    )

    description: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        default=None,
        doc="Category description",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        doc="Shown on the public site",
    )

    courses = relationship("CourseModel", back_populates="category")
