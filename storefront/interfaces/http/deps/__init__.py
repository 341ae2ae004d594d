"""Reusable FastAPI dependencies."""

from .account import get_account_repository, get_account_service
from .catalog import get_catalog_service, get_upload_signer
from .container import get_app_container
from .database import get_db_session
from .order import get_order_repository, get_order_service

__all__ = [
    "get_account_repository",
    "get_account_service",
    "get_app_container",
    "get_catalog_service",
    "get_db_session",
    "get_order_repository",
    "get_order_service",
    "get_upload_signer",
]
