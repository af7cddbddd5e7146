"""Shared fixtures for catalog tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import affiliate_catalog.application.auth_service as auth_module
import affiliate_catalog.catalog.service as service_module
from affiliate_catalog.catalog.repository import JsonProductStore
from affiliate_catalog.catalog.service import CatalogService
from affiliate_catalog.infrastructure.config import settings


@pytest.fixture(autouse=True)
def reset_services():
    """Reset global service instances before each test."""
    service_module._catalog_service = None
    auth_module._authenticator = None
    yield
    service_module._catalog_service = None
    auth_module._authenticator = None


@pytest.fixture
def products_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application at a product file inside tmp_path."""
    path = tmp_path / "data" / "products.json"
    monkeypatch.setattr(settings, "products_file", str(path))
    return path


@pytest.fixture
def store(products_file: Path) -> JsonProductStore:
    """Create a store on the temporary product file."""
    return JsonProductStore(products_file)


@pytest.fixture
def clock():
    """Deterministic clock that advances one second per call."""
    state = {"now": datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)}

    def tick() -> datetime:
        current = state["now"]
        state["now"] = current + timedelta(seconds=1)
        return current

    return tick


@pytest.fixture
def service(store: JsonProductStore, clock) -> CatalogService:
    """Create a catalog service with a deterministic clock."""
    return CatalogService(store, clock=clock)


@pytest.fixture
def client(products_file: Path):
    """Create test client bound to the temporary product file."""
    from affiliate_catalog.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_token(client: TestClient) -> str:
    """Log in as the admin and return the session token."""
    response = client.post(
        "/api/auth/login",
        json={"username": settings.admin_username, "password": settings.admin_password},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(admin_token: str) -> dict[str, str]:
    """Get authentication headers."""
    return {"Authorization": f"Bearer {admin_token}"}
