"""
Course API endpoints.

Public routes:
- GET /courses - Paged active courses (page, limit, search)
- GET /courses/by-category - Active courses in one category
- GET /courses/active - All active courses
- GET /courses/{id} - Single course

Admin routes (session required):
- GET /admin/courses - Paged courses including inactive ones
- POST /admin/courses - Create course (multipart form with image)
- PUT /admin/courses/{id} - Partially update course
- PATCH /admin/courses/{id}/toggle-status - Flip is_active
- DELETE /admin/courses/{id} - Delete course

Dependencies: chaseplus_backend.application.services, chaseplus_backend.models
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile

from chaseplus_backend.api.deps.dependencies import get_course_service, require_admin
from chaseplus_backend.api.routers.error_handling import handle_content_errors
from chaseplus_backend.api.routers.router_utils import parse_list_field, read_image_upload
from chaseplus_backend.application.services.course_service import CourseService
from chaseplus_backend.configs import get_settings
from chaseplus_backend.models.common import MessageResponse, ToggleResponse
from chaseplus_backend.models.course import CoursePageResponse, CourseResponse, CourseSummary

from .course_responses import (
    map_course_page_to_response,
    map_course_summaries,
    map_course_to_response,
    map_courses_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])
admin_router = APIRouter(
    prefix="/admin/courses",
    tags=["admin-courses"],
    dependencies=[Depends(require_admin)],
)

ADMIN_PAGE_SIZE = 10


@router.get("", response_model=CoursePageResponse)
@handle_content_errors
async def list_courses(
    page: int = 1,
    limit: int = 9,
    search: str | None = None,
    course_service: CourseService = Depends(get_course_service),
) -> CoursePageResponse:
    """
    List active courses with pagination and optional search.

    Args:
        page: 1-based page number (default 1)
        limit: Page size (default 9)
        search: Case-insensitive match on title or category name
        course_service: Injected CourseService

    Returns:
        CoursePageResponse: One page of courses
    """
    page_data = await course_service.list_courses_paged(page=page, limit=limit, search=search)
    return map_course_page_to_response(page_data)


@router.get("/by-category", response_model=list[CourseSummary])
@handle_content_errors
async def list_courses_by_category(
    category: str,
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseSummary]:
    """List id and title of active courses in a category."""
    courses = await course_service.list_courses_by_category(category)
    return map_course_summaries(courses)


@router.get("/active", response_model=list[CourseResponse])
@handle_content_errors
async def list_active_courses(
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """List all active courses for site navigation."""
    courses = await course_service.list_active_courses()
    return map_courses_to_response(courses)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_content_errors
async def get_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Raises:
        HTTPException(404): Course not found
    """
    course_data = await course_service.get_course(course_id)
    return map_course_to_response(course_data)


@admin_router.get("", response_model=CoursePageResponse)
@handle_content_errors
async def admin_list_courses(
    page: int = 1,
    limit: int = ADMIN_PAGE_SIZE,
    search: str | None = None,
    course_service: CourseService = Depends(get_course_service),
) -> CoursePageResponse:
    """List courses for the admin dashboard, inactive ones included."""
    page_data = await course_service.list_courses_paged(
        page=page, limit=limit, search=search, active_only=False
    )
    return map_course_page_to_response(page_data)


@admin_router.post("", response_model=CourseResponse, status_code=201)
@handle_content_errors
async def create_course(
    title: str | None = Form(None),
    description: str | None = Form(None),
    category: str | None = Form(None),
    price: str | None = Form(None),
    offer_price: str | None = Form(None),
    duration: str | None = Form(None),
    highlights: str | None = Form(None),
    what_youll_learn: str | None = Form(None),
    career_opportunities: str | None = Form(None),
    why_choose_this_course: str | None = Form(None),
    image: UploadFile | None = File(None),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new course from a multipart form.

    List fields are JSON-encoded arrays of strings.

    Returns:
        CourseResponse: Created course

    Raises:
        HTTPException(400): Missing image, invalid field or unknown category
        HTTPException(502): Image upload failed
    """
    upload = await read_image_upload(image, get_settings().assets.max_image_size)

    logger.info(
        "Creating new course",
        extra={"course_title": title, "category": category, "has_image": upload is not None},
    )

    course_data = await course_service.create_course(
        title=title,
        description=description,
        category=category,
        price=price,
        offer_price=offer_price,
        duration=duration,
        highlights=parse_list_field(highlights, "highlights"),
        what_youll_learn=parse_list_field(what_youll_learn, "what_youll_learn"),
        career_opportunities=parse_list_field(career_opportunities, "career_opportunities"),
        why_choose_this_course=parse_list_field(why_choose_this_course, "why_choose_this_course"),
        image=upload,
    )
    return map_course_to_response(course_data)


@admin_router.put("/{course_id}", response_model=CourseResponse)
@handle_content_errors
async def update_course(
    course_id: UUID,
    title: str | None = Form(None),
    description: str | None = Form(None),
    category: str | None = Form(None),
    price: str | None = Form(None),
    offer_price: str | None = Form(None),
    duration: str | None = Form(None),
    highlights: str | None = Form(None),
    what_youll_learn: str | None = Form(None),
    career_opportunities: str | None = Form(None),
    why_choose_this_course: str | None = Form(None),
    image: UploadFile | None = File(None),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Partially update a course; omitted fields keep their values.

    Raises:
        HTTPException(404): Course not found
        HTTPException(400): Invalid field or unknown category
        HTTPException(502): Image upload failed
    """
    upload = await read_image_upload(image, get_settings().assets.max_image_size)

    logger.info(
        "Updating course",
        extra={"course_id": str(course_id), "has_image": upload is not None},
    )

    course_data = await course_service.update_course(
        course_id,
        title=title,
        description=description,
        category=category,
        price=price,
        offer_price=offer_price,
        duration=duration,
        highlights=parse_list_field(highlights, "highlights"),
        what_youll_learn=parse_list_field(what_youll_learn, "what_youll_learn"),
        career_opportunities=parse_list_field(career_opportunities, "career_opportunities"),
        why_choose_this_course=parse_list_field(why_choose_this_course, "why_choose_this_course"),
        image=upload,
    )
    return map_course_to_response(course_data)


@admin_router.patch("/{course_id}/toggle-status", response_model=ToggleResponse)
@handle_content_errors
async def toggle_course_status(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> ToggleResponse:
    """Flip a course's is_active flag."""
    course_data = await course_service.toggle_course_active(course_id)
    return ToggleResponse(id=str(course_id), value=course_data["is_active"])


@admin_router.delete("/{course_id}", response_model=MessageResponse)
@handle_content_errors
async def delete_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> MessageResponse:
    """
    Delete course by ID. The course image is kept in the asset store.

    Raises:
        HTTPException(404): Course not found
    """
    await course_service.delete_course(course_id)
    return MessageResponse(message="Course deleted successfully")
