"""
Core domain module.

Contains the exception hierarchy and small domain helpers shared by the
lifecycle services.
"""

from chaseplus_backend.core.exceptions import (
    AssetStoreError,
    AuthenticationError,
    CategoryInUseError,
    ContentBackendException,
    DuplicateCategoryError,
    InvalidCategoryError,
    MissingImageError,
    NotFoundError,
    ValidationError,
)
from chaseplus_backend.core.pagination import PageWindow, paginate

__all__ = [
    # Exceptions
    "ContentBackendException",
    "ValidationError",
    "DuplicateCategoryError",
    "CategoryInUseError",
    "MissingImageError",
    "InvalidCategoryError",
    "NotFoundError",
    "AssetStoreError",
    "AuthenticationError",
    # Pagination
    "PageWindow",
    "paginate",
]
