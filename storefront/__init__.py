"""Storefront catalog, upload signing, account and order service."""

__version__ = "1.0.0"
