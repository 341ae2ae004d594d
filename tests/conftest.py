import os

os.environ["DATABASE__URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CLOUDINARY__CLOUD_NAME"] = "demo"
os.environ["CLOUDINARY__API_KEY"] = "123456789"
os.environ["CLOUDINARY__API_SECRET"] = "test-secret"
os.environ["CATALOG__ROOT_FOLDER"] = "Radha"
os.environ["ORDERS__BACKEND"] = "memory"
os.environ["SECURITY__BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import get_settings
from storefront.core.container import ApplicationContainer
from storefront.interfaces.http.deps import get_app_container
from storefront.main import create_app
from storefront.modules.catalog import CatalogService

from tests.fakes import FakeAssetStore, make_resource


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def fake_store():
    return FakeAssetStore(
        [
            make_resource("Radha/Krishna/flute", description="Bamboo flute", price="25"),
            make_resource("Radha/r1", price="10"),
            make_resource("Radha/r2"),
        ]
    )


@pytest.fixture
def catalog_service(fake_store, settings):
    return CatalogService(fake_store, settings.catalog)


@pytest.fixture
def container(fake_store, settings):
    return ApplicationContainer(settings=settings, asset_store=fake_store)


@pytest.fixture
def client(container):
    app = create_app()
    app.dependency_overrides[get_app_container] = lambda: container
    with TestClient(app) as test_client:
        yield test_client
