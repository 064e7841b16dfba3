"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

import catalog_api.catalog.store as store_module
from catalog_api.catalog.store import SEED_PRODUCTS, CatalogStore
from catalog_api.infrastructure.config import settings

TEST_API_TOKEN = "test-api-token"


@pytest.fixture(autouse=True)
def reset_stores(monkeypatch):
    """Reset the global store and pin the API token for each test."""
    store_module.reset_catalog_store()
    monkeypatch.setattr(settings, "api_token", TEST_API_TOKEN)
    yield
    store_module.reset_catalog_store()


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    """Create a deterministic clock."""
    return FakeClock()


@pytest.fixture
def catalog_store(clock: FakeClock) -> CatalogStore:
    """Create a store preloaded with the seed products."""
    return CatalogStore(SEED_PRODUCTS, clock=clock)


@pytest.fixture
def client():
    """Create test client without authentication."""
    from catalog_api.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Get authentication headers."""
    return {"Authorization": f"Bearer {TEST_API_TOKEN}"}


@pytest.fixture
def auth_client(auth_headers):
    """Create test client with valid token authentication."""
    from catalog_api.main import app

    with TestClient(app, headers=auth_headers) as client:
        yield client
