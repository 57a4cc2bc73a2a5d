"""
S3 image asset bucket configuration.

Settings for the public bucket holding course and blog images.

Dependencies: pydantic_settings
System role: Remote asset store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssetStorageSettings(BaseSettings):
    """Settings for S3 image asset operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_ASSETS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="chaseplus-dev-assets",
        description="S3 bucket for public image storage",
    )
    region: str = Field(
        default="ap-south-1",
        description="AWS region for S3 bucket",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Public URL prefix (CDN); defaults to the bucket's virtual-hosted URL",
    )
    course_folder: str = Field(default="course-images", description="Key prefix for course images")
    blog_folder: str = Field(default="blog-images", description="Key prefix for blog images")
    max_image_size: int = Field(
        default=5 * 1024 * 1024,
        description="Maximum accepted image upload size in bytes (default 5MB)",
    )

    @property
    def base_url(self) -> str:
        """
        Resolve the URL prefix public image URLs are built from.

        Returns:
            str: Base URL without trailing slash
        """
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com"
