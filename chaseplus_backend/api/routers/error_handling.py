"""
Content error handling utilities.

Provides a decorator that maps the content backend exception hierarchy
onto HTTP status codes across course, blog and category endpoints.

Dependencies: fastapi, chaseplus_backend.core.exceptions
System role: Domain error to HTTP response translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from chaseplus_backend.core.exceptions import (
    AssetStoreError,
    AuthenticationError,
    CategoryInUseError,
    DuplicateCategoryError,
    InvalidCategoryError,
    MissingImageError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_content_errors(func: F) -> F:
    """
    Decorator to handle content errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"entity": e.entity, "entity_id": str(e.entity_id)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (DuplicateCategoryError, CategoryInUseError) as e:
            logger.warning("Category conflict", extra={"error": e.message})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except (ValidationError, MissingImageError, InvalidCategoryError) as e:
            logger.warning(
                "Invalid content request",
                extra={"error": e.message, "details": e.details},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AssetStoreError as e:
            logger.error(
                "Asset store failure",
                extra={"operation": e.operation, "error": e.message},
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Image storage is unavailable, please retry",
            )

        except AuthenticationError as e:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

        except Exception as e:
            logger.exception(
                "Unexpected failure in content operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
