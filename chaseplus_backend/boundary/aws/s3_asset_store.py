"""
S3 asset store for course and blog images.

Uploads image bytes to a public bucket folder and deletes them again by
asset identifier. The identifier is generated at upload time and stored
next to the public URL, so deletes never depend on URL parsing.

Dependencies: boto3, botocore
System role: Remote image asset store
"""

import asyncio
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import urlparse
from uuid import uuid4

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from chaseplus_backend.core.exceptions import AssetStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageUpload:
    """Image file received from a client, fully read into memory."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        """Size of the image in bytes."""
        return len(self.data)


@dataclass(frozen=True)
class StoredAsset:
    """Result of a successful upload."""

    asset_id: str
    public_url: str
    key: str


def asset_id_from_url(url: str | None) -> str:
    """
    Derive an asset identifier from a public image URL.

    The identifier is the last path segment with its extension removed,
    e.g. https://host/blog-images/abc123.jpg -> abc123. Returns an empty
    string when the URL has no usable path segment.

    Args:
        url: Public image URL

    Returns:
        str: Derived asset identifier, possibly empty
    """
    if not url:
        return ""
    path = PurePosixPath(urlparse(url).path)
    if not path.name:
        return ""
    return path.name.split(".")[0]


class S3AssetStore:
    """
    Image store backed by one S3 bucket folder.

    Objects are written to {folder}/{asset_id}{ext}; the public URL is
    {base_url}/{folder}/{asset_id}{ext}.
    """

    def __init__(
        self,
        bucket: str,
        folder: str,
        base_url: str,
        region: str = "ap-south-1",
        s3_client=None,
    ) -> None:
        """
        Initialize S3 asset store for one image folder.

        Args:
            bucket: S3 bucket name
            folder: Key prefix for this store's images (no slashes at the ends)
            base_url: Public URL prefix the bucket is served from
            region: AWS region for S3 bucket
            s3_client: Pre-built boto3 S3 client (created when omitted)
        """
        self._bucket = bucket
        self._folder = folder.strip("/")
        self._base_url = base_url.rstrip("/")
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    @property
    def folder(self) -> str:
        """Key prefix of this store."""
        return self._folder

    def _extension_for(self, image: ImageUpload) -> str:
        suffix = PurePosixPath(image.filename or "").suffix.lower()
        if suffix:
            return suffix
        return mimetypes.guess_extension(image.content_type or "") or ""

    async def upload(self, image: ImageUpload) -> StoredAsset:
        """
        Upload an image and return its identifier and public URL.

        Args:
            image: Image bytes with original filename and content type

        Returns:
            StoredAsset: asset_id, public_url and object key

        Raises:
            AssetStoreError: If the S3 put fails
        """
        asset_id = uuid4().hex
        key = f"{self._folder}/{asset_id}{self._extension_for(image)}"

        try:
            await asyncio.to_thread(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=image.data,
                ContentType=image.content_type or "application/octet-stream",
                Metadata={"original_filename": image.filename or ""},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Image upload failed",
                extra={"bucket": self._bucket, "key": key, "error": str(e)},
            )
            raise AssetStoreError(
                f"Failed to upload image: {e}",
                operation="upload",
                details={"key": key},
            ) from e

        logger.info(
            "Image uploaded",
            extra={"asset_id": asset_id, "key": key, "size": image.size},
        )
        return StoredAsset(asset_id=asset_id, public_url=f"{self._base_url}/{key}", key=key)

    async def delete(self, asset_id: str) -> bool:
        """
        Delete every object of this folder whose file stem equals asset_id.

        Args:
            asset_id: Identifier returned by upload (or derived from a URL)

        Returns:
            bool: True if at least one object was removed

        Raises:
            AssetStoreError: If listing or deleting fails
        """
        if not asset_id:
            return False

        prefix = f"{self._folder}/{asset_id}"
        try:
            listing = await asyncio.to_thread(
                self._s3_client.list_objects_v2,
                Bucket=self._bucket,
                Prefix=prefix,
            )
            keys = [
                obj["Key"]
                for obj in listing.get("Contents", [])
                if PurePosixPath(obj["Key"]).name.split(".")[0] == asset_id
            ]
            for key in keys:
                await asyncio.to_thread(
                    self._s3_client.delete_object,
                    Bucket=self._bucket,
                    Key=key,
                )
        except (ClientError, BotoCoreError) as e:
            raise AssetStoreError(
                f"Failed to delete image {asset_id}: {e}",
                operation="delete",
                details={"asset_id": asset_id},
            ) from e

        if not keys:
            logger.warning(
                "No stored image matched asset id",
                extra={"asset_id": asset_id, "folder": self._folder},
            )
            return False

        logger.info("Image deleted", extra={"asset_id": asset_id, "keys": keys})
        return True
