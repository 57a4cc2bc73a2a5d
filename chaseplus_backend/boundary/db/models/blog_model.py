"""
Blog ORM model.

Represents a blog post with its hosted header image and SEO meta fields.

Dependencies: sqlalchemy, chaseplus_backend.boundary.db.base
System role: Blog persistence
"""

import datetime as dt

from sqlalchemy import Boolean, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chaseplus_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class BlogModel(Base, UUIDMixin, TimestampMixin):
    """
    Blog ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Post title
        category: Free-text category label (not linked to CategoryModel)
        date: Publication date shown on the post
        description: Short summary
        content: Post body
        image_url: Public URL of the header image
        image_asset_id: Asset store identifier recorded at upload time
        meta_title: SEO title (defaults to title at creation)
        meta_description: SEO description (defaults to description[:160] at creation)
        author: Author display name
        is_published: Whether the post is visible on the public site
        views: Public detail page view counter
    """

    __tablename__ = "blogs"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    image_asset_id: Mapped[str | None] = mapped_column(String(512), nullable=True, default=None)

    meta_title: Mapped[str] = mapped_column(String(255), nullable=False)
    meta_description: Mapped[str] = mapped_column(String(512), nullable=False)

    author: Mapped[str] = mapped_column(String(255), nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
