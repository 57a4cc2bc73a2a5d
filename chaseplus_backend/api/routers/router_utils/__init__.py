"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from chaseplus_backend.api.routers.router_utils.form_utils import (
    ALLOWED_IMAGE_EXTENSIONS,
    parse_flag,
    parse_list_field,
    read_image_upload,
)

__all__ = [
    "ALLOWED_IMAGE_EXTENSIONS",
    "parse_flag",
    "parse_list_field",
    "read_image_upload",
]
