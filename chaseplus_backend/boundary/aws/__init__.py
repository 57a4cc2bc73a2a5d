"""
AWS boundary modules.

Exports: S3AssetStore, ImageUpload, StoredAsset, asset_id_from_url
"""

from .s3_asset_store import ImageUpload, S3AssetStore, StoredAsset, asset_id_from_url

__all__ = ["ImageUpload", "S3AssetStore", "StoredAsset", "asset_id_from_url"]
