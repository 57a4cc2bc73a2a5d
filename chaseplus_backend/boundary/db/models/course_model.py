"""
Course ORM model.

Represents a course offered on the marketing site, with its hosted image
and the four bullet lists rendered on the course detail page.

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.base
System role: Course persistence
"""

import uuid

from sqlalchemy import JSON, Boolean, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chaseplus_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    A course belongs to exactly one category through category_id. The
    category is eagerly joined so its name is always available for
    responses and search.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Course title
        description: Course description
        category_id: Foreign key to CategoryModel
        image: Public URL of the course image
        image_asset_id: Asset store identifier recorded at upload time
        duration: Optional free-text duration ("6 weeks")
        highlights: Non-empty list of highlight strings
        what_youll_learn: Non-empty list of learning points
        career_opportunities: Non-empty list of career opportunities
        why_choose_this_course: Non-empty list of reasons
        price: List price (>= 0)
        offer_price: Optional discounted price
        is_active: Whether the course is shown on the public site

    Relationships:
        category: Many-to-one with CategoryModel (RESTRICT on category deletion)
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(String(255), nullable=False, doc="Course title")
    description: Mapped[str] = mapped_column(Text, nullable=False, doc="Course description")

    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        doc="Category this course is filed under",
    )

    image: Mapped[str] = mapped_column(String(1024), nullable=False, doc="Public image URL")
    image_asset_id: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        default=None,
        doc="Asset store identifier of the image",
    )

    duration: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    highlights: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    what_youll_learn: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    career_opportunities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    why_choose_this_course: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    price: Mapped[float] = mapped_column(Float, nullable=False, doc="List price")
    offer_price: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    category = relationship("CategoryModel", back_populates="courses", lazy="joined")

    @property
    def category_name(self) -> str | None:
        """Name of the linked category."""
        return self.category.name if self.category is not None else None
