"""
Category API endpoints.

Public route: GET /categories (active only)
Admin routes: GET/POST /admin/categories, GET/PUT/DELETE /admin/categories/{id},
PATCH /admin/categories/{id}/toggle-status

Dependencies: chaseplus_backend.application.services, chaseplus_backend.models
System role: Category management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from chaseplus_backend.api.deps.dependencies import get_category_service, require_admin
from chaseplus_backend.api.routers.error_handling import handle_content_errors
from chaseplus_backend.application.services.category_service import CategoryService
from chaseplus_backend.models.category import (
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from chaseplus_backend.models.common import MessageResponse, ToggleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])
admin_router = APIRouter(
    prefix="/admin/categories",
    tags=["admin-categories"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[CategoryResponse])
@handle_content_errors
async def list_active_categories(
    category_service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    """List active categories for site navigation."""
    categories = await category_service.list_categories(active_only=True)
    return [CategoryResponse(**c) for c in categories]


@admin_router.get("", response_model=list[CategoryResponse])
@handle_content_errors
async def admin_list_categories(
    category_service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    """List every category, inactive ones included."""
    categories = await category_service.list_categories()
    return [CategoryResponse(**c) for c in categories]


@admin_router.post("", response_model=CategoryResponse, status_code=201)
@handle_content_errors
async def create_category(
    request: CreateCategoryRequest,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """
    Create a category.

    Raises:
        HTTPException(400): Blank name
        HTTPException(409): Name already taken
    """
    logger.info("Creating new category", extra={"category_name": request.name})
    category = await category_service.create_category(
        name=request.name, description=request.description
    )
    return CategoryResponse(**category)


@admin_router.get("/{category_id}", response_model=CategoryResponse)
@handle_content_errors
async def get_category(
    category_id: UUID,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Get single category by ID."""
    return CategoryResponse(**await category_service.get_category(category_id))


@admin_router.put("/{category_id}", response_model=CategoryResponse)
@handle_content_errors
async def update_category(
    category_id: UUID,
    request: UpdateCategoryRequest,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """
    Rename or re-describe a category.

    Raises:
        HTTPException(404): Category not found
        HTTPException(409): Name already taken
    """
    category = await category_service.update_category(
        category_id, name=request.name, description=request.description
    )
    return CategoryResponse(**category)


@admin_router.patch("/{category_id}/toggle-status", response_model=ToggleResponse)
@handle_content_errors
async def toggle_category_status(
    category_id: UUID,
    category_service: CategoryService = Depends(get_category_service),
) -> ToggleResponse:
    """Flip a category's is_active flag."""
    category = await category_service.toggle_category_active(category_id)
    return ToggleResponse(id=str(category_id), value=category["is_active"])


@admin_router.delete("/{category_id}", response_model=MessageResponse)
@handle_content_errors
async def delete_category(
    category_id: UUID,
    category_service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """
    Delete a category no course refers to.

    Raises:
        HTTPException(404): Category not found
        HTTPException(409): Courses still use the category
    """
    await category_service.delete_category(category_id)
    return MessageResponse(message="Category deleted successfully")
