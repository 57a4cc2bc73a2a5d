"""
Multipart form utilities.

Parsing helpers for the admin course and blog forms: JSON-encoded list
fields, checkbox flags and image file parts.

Dependencies: fastapi, chaseplus_backend.boundary.aws, chaseplus_backend.core
System role: Admin form request parsing
"""

import json
import logging
from pathlib import PurePosixPath

from fastapi import UploadFile

from chaseplus_backend.boundary.aws.s3_asset_store import ImageUpload
from chaseplus_backend.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Allowed file extensions for image upload
ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

TRUTHY_FLAGS = {"on", "true", "1", "yes"}


def parse_list_field(raw: str | None, field: str) -> list[str] | None:
    """
    Decode a JSON-encoded list of strings sent as a form field.

    Args:
        raw: Form value, e.g. '["Live projects", "Mentoring"]'
        field: Field name reported on failure

    Returns:
        list[str] | None: Decoded list, or None when the field was omitted

    Raises:
        ValidationError: If the value is not a JSON list
    """
    if raw is None or not raw.strip():
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError(f"{field} must be a JSON array", field=field)
    if not isinstance(value, list):
        raise ValidationError(f"{field} must be a JSON array", field=field)
    return value


def parse_flag(raw: str | None) -> bool | None:
    """Interpret a checkbox-style form flag; None when the field was omitted."""
    if raw is None:
        return None
    return raw.strip().lower() in TRUTHY_FLAGS


async def read_image_upload(file: UploadFile | None, max_size: int) -> ImageUpload | None:
    """
    Read an uploaded image part into memory after validating it.

    An omitted or empty file part counts as no image.

    Args:
        file: Uploaded file (multipart form)
        max_size: Maximum accepted size in bytes

    Returns:
        ImageUpload | None: Image ready for the asset store

    Raises:
        ValidationError: If the extension is not allowed or the file is too large
    """
    if file is None or not file.filename:
        return None

    file_ext = PurePosixPath(file.filename).suffix.lower()
    if file_ext not in ALLOWED_IMAGE_EXTENSIONS:
        logger.warning(
            "Upload rejected: invalid image type",
            extra={"image_name": file.filename, "extension": file_ext},
        )
        raise ValidationError(
            f"File type '{file_ext}' not allowed. "
            f"Allowed: {', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}",
            field="image",
        )

    content = await file.read()
    if not content:
        return None
    if len(content) > max_size:
        raise ValidationError(
            f"Image too large. Maximum size: {max_size // (1024 * 1024)}MB",
            field="image",
        )

    return ImageUpload(
        filename=file.filename,
        content_type=file.content_type or "application/octet-stream",
        data=content,
    )
