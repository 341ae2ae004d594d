"""Cloudinary SDK adapters."""

from .client import CloudinaryAssetStore, configure_cloudinary

__all__ = ["CloudinaryAssetStore", "configure_cloudinary"]
