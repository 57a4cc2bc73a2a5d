"""
Test suite for S3AssetStore and asset id derivation.

Uses a MagicMock boto3 client so no AWS calls are made.

System role: Verification of the remote image asset boundary
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from chaseplus_backend.boundary.aws.s3_asset_store import (
    ImageUpload,
    S3AssetStore,
    asset_id_from_url,
)
from chaseplus_backend.core.exceptions import AssetStoreError


def client_error(operation: str) -> ClientError:
    return ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, operation)


@pytest.fixture
def s3_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def store(s3_client) -> S3AssetStore:
    return S3AssetStore(
        bucket="assets-bucket",
        folder="/blog-images/",
        base_url="https://cdn.example.com/",
        s3_client=s3_client,
    )


class TestAssetIdFromUrl:
    """Test suite for asset_id_from_url()."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://host/blog-images/abc123.jpg", "abc123"),
            ("https://host/blog-images/abc123", "abc123"),
            ("https://host/a/b/photo.final.png?v=2", "photo"),
            ("https://host/", ""),
            ("", ""),
            (None, ""),
        ],
    )
    def test_derivation(self, url, expected):
        assert asset_id_from_url(url) == expected


class TestUpload:
    """Test suite for S3AssetStore.upload()."""

    @pytest.mark.asyncio
    async def test_upload_puts_object_under_folder(self, store, s3_client):
        image = ImageUpload(filename="Cover.PNG", content_type="image/png", data=b"png-bytes")

        asset = await store.upload(image)

        assert store.folder == "blog-images"
        assert asset.key == f"blog-images/{asset.asset_id}.png"
        assert asset.public_url == f"https://cdn.example.com/{asset.key}"
        kwargs = s3_client.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "assets-bucket"
        assert kwargs["Key"] == asset.key
        assert kwargs["Body"] == b"png-bytes"
        assert kwargs["ContentType"] == "image/png"

    @pytest.mark.asyncio
    async def test_asset_ids_are_unique(self, store):
        image = ImageUpload(filename="a.jpg", content_type="image/jpeg", data=b"x")

        first = await store.upload(image)
        second = await store.upload(image)

        assert first.asset_id != second.asset_id

    @pytest.mark.asyncio
    async def test_extension_falls_back_to_content_type(self, store):
        image = ImageUpload(filename="", content_type="image/png", data=b"x")

        asset = await store.upload(image)

        assert asset.key.endswith(".png")

    @pytest.mark.asyncio
    async def test_upload_failure_raises_asset_store_error(self, store, s3_client):
        s3_client.put_object.side_effect = client_error("PutObject")
        image = ImageUpload(filename="a.jpg", content_type="image/jpeg", data=b"x")

        with pytest.raises(AssetStoreError) as exc_info:
            await store.upload(image)

        assert exc_info.value.operation == "upload"


class TestDelete:
    """Test suite for S3AssetStore.delete()."""

    @pytest.mark.asyncio
    async def test_delete_removes_matching_keys_only(self, store, s3_client):
        s3_client.list_objects_v2.return_value = {
            "Contents": [
                {"Key": "blog-images/abc123.jpg"},
                {"Key": "blog-images/abc1234.jpg"},
            ]
        }

        assert await store.delete("abc123") is True

        s3_client.list_objects_v2.assert_called_once_with(
            Bucket="assets-bucket", Prefix="blog-images/abc123"
        )
        s3_client.delete_object.assert_called_once_with(
            Bucket="assets-bucket", Key="blog-images/abc123.jpg"
        )

    @pytest.mark.asyncio
    async def test_delete_without_match_returns_false(self, store, s3_client):
        s3_client.list_objects_v2.return_value = {}

        assert await store.delete("missing") is False
        s3_client.delete_object.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_asset_id_is_skipped(self, store, s3_client):
        assert await store.delete("") is False
        s3_client.list_objects_v2.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_failure_raises_asset_store_error(self, store, s3_client):
        s3_client.list_objects_v2.return_value = {"Contents": [{"Key": "blog-images/abc.jpg"}]}
        s3_client.delete_object.side_effect = client_error("DeleteObject")

        with pytest.raises(AssetStoreError) as exc_info:
            await store.delete("abc")

        assert exc_info.value.operation == "delete"
