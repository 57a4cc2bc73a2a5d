"""
Blog API endpoints.

Public routes: GET /blogs, GET /blogs/recent, GET /blogs/{id}
Admin routes: GET/POST /admin/blogs, PUT/DELETE /admin/blogs/{id},
PATCH /admin/blogs/{id}/toggle-status

Dependencies: chaseplus_backend.application.services, chaseplus_backend.models
System role: Blog management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile

from chaseplus_backend.api.deps.dependencies import get_blog_service, require_admin
from chaseplus_backend.api.routers.error_handling import handle_content_errors
from chaseplus_backend.api.routers.router_utils import parse_flag, read_image_upload
from chaseplus_backend.application.services.blog_service import BlogService
from chaseplus_backend.configs import get_settings
from chaseplus_backend.models.blog import BlogPageResponse, BlogResponse
from chaseplus_backend.models.common import MessageResponse, ToggleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blogs", tags=["blogs"])
admin_router = APIRouter(
    prefix="/admin/blogs",
    tags=["admin-blogs"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=BlogPageResponse)
@handle_content_errors
async def list_blogs(
    page: int = 1,
    limit: int = 9,
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogPageResponse:
    """List published posts with pagination, newest first."""
    page_data = await blog_service.list_blogs_paged(page=page, limit=limit)
    return BlogPageResponse(**page_data)


@router.get("/recent", response_model=list[BlogResponse])
@handle_content_errors
async def list_recent_blogs(
    limit: int = 3,
    blog_service: BlogService = Depends(get_blog_service),
) -> list[BlogResponse]:
    """List the newest published posts."""
    blogs = await blog_service.list_published_recent(limit=limit)
    return [BlogResponse(**blog) for blog in blogs]


@router.get("/{blog_id}", response_model=BlogResponse)
@handle_content_errors
async def get_blog(
    blog_id: UUID,
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    """
    Get a published post and count the view.

    Raises:
        HTTPException(404): Post not found or not published
    """
    return BlogResponse(**await blog_service.record_view(blog_id))


@admin_router.get("", response_model=list[BlogResponse])
@handle_content_errors
async def admin_list_blogs(
    blog_service: BlogService = Depends(get_blog_service),
) -> list[BlogResponse]:
    """List every post, drafts included."""
    blogs = await blog_service.list_all_blogs()
    return [BlogResponse(**blog) for blog in blogs]


@admin_router.get("/{blog_id}", response_model=BlogResponse)
@handle_content_errors
async def admin_get_blog(
    blog_id: UUID,
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    """Get any post for editing without counting a view."""
    return BlogResponse(**await blog_service.get_blog(blog_id))


@admin_router.post("", response_model=BlogResponse, status_code=201)
@handle_content_errors
async def create_blog(
    title: str | None = Form(None),
    category: str | None = Form(None),
    date: str | None = Form(None),
    description: str | None = Form(None),
    content: str | None = Form(None),
    author: str | None = Form(None),
    meta_title: str | None = Form(None),
    meta_description: str | None = Form(None),
    is_published: str | None = Form(None),
    image: UploadFile | None = File(None),
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    """
    Create a blog post from a multipart form.

    is_published is a checkbox flag ("on"/"true"); absent means draft.

    Raises:
        HTTPException(400): Missing field or image
        HTTPException(502): Image upload failed
    """
    upload = await read_image_upload(image, get_settings().assets.max_image_size)

    logger.info("Creating new blog", extra={"blog_title": title, "has_image": upload is not None})

    blog_data = await blog_service.create_blog(
        title=title,
        category=category,
        date=date,
        description=description,
        content=content,
        author=author,
        meta_title=meta_title,
        meta_description=meta_description,
        is_published=bool(parse_flag(is_published)),
        image=upload,
    )
    return BlogResponse(**blog_data)


@admin_router.put("/{blog_id}", response_model=BlogResponse)
@handle_content_errors
async def update_blog(
    blog_id: UUID,
    title: str | None = Form(None),
    category: str | None = Form(None),
    date: str | None = Form(None),
    description: str | None = Form(None),
    content: str | None = Form(None),
    author: str | None = Form(None),
    meta_title: str | None = Form(None),
    meta_description: str | None = Form(None),
    is_published: str | None = Form(None),
    image: UploadFile | None = File(None),
    blog_service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    """
    Replace a blog post's fields; meta fields are required.

    An omitted is_published field keeps the post's current published
    state; send "off" to unpublish.

    Raises:
        HTTPException(404): Post not found
        HTTPException(400): Missing field
        HTTPException(502): Image upload failed
    """
    upload = await read_image_upload(image, get_settings().assets.max_image_size)

    logger.info(
        "Updating blog",
        extra={"blog_id": str(blog_id), "has_image": upload is not None},
    )

    blog_data = await blog_service.update_blog(
        blog_id,
        title=title,
        category=category,
        date=date,
        description=description,
        content=content,
        author=author,
        meta_title=meta_title,
        meta_description=meta_description,
        is_published=parse_flag(is_published),
        image=upload,
    )
    return BlogResponse(**blog_data)


@admin_router.patch("/{blog_id}/toggle-status", response_model=ToggleResponse)
@handle_content_errors
async def toggle_blog_status(
    blog_id: UUID,
    blog_service: BlogService = Depends(get_blog_service),
) -> ToggleResponse:
    """Flip a post's is_published flag."""
    blog_data = await blog_service.toggle_blog_published(blog_id)
    return ToggleResponse(id=str(blog_id), value=blog_data["is_published"])


@admin_router.delete("/{blog_id}", response_model=MessageResponse)
@handle_content_errors
async def delete_blog(
    blog_id: UUID,
    blog_service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    """
    Delete a post and its header image.

    Raises:
        HTTPException(404): Post not found
    """
    await blog_service.delete_blog(blog_id)
    return MessageResponse(message="Blog deleted successfully")
