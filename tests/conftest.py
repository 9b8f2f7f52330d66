"""
Shared pytest configuration.

No live database or storage: each service module's `database` is swapped
for a mock with AsyncMock query methods, and the admin dependency is
overridden for back-office routes. Redis is treated as unreachable unless a
test asks for the dict-backed `redis_store` client.
"""

from fnmatch import fnmatch
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from cueclub.auth import get_admin
from cueclub.main import app

# Modules holding their own reference to the shared `database`
DATABASE_MODULES = [
    "cueclub.services.crud",
    "cueclub.services.booking_service",
    "cueclub.services.tournament_service",
    "cueclub.services.pricing_service",
    "cueclub.services.media_service",
    "cueclub.services.club_service",
    "cueclub.services.admin_service",
]

TEST_ADMIN = {
    "email": "admin@example.com",
    "user_id": "5b0c1f9e-8a1d-4c55-9a47-3f2f1f7e2c10",
    "role": "admin",
}


@pytest.fixture(autouse=True)
def redis_unavailable():
    """Run without Redis by default: every cached read goes to the database."""
    with patch("cueclub.services.cache.get_redis_client", AsyncMock(return_value=None)):
        yield


@pytest.fixture
def redis_store():
    """
    Redis client mock backed by a dict, patched into the read cache.

    Yields (client, store) so tests can assert on calls and stored values.
    """
    store = {}
    client = MagicMock()
    client.get = AsyncMock(side_effect=lambda key: store.get(key))
    client.setex = AsyncMock(side_effect=lambda key, ttl, value: store.__setitem__(key, value))
    client.delete = AsyncMock(side_effect=lambda *keys: sum(store.pop(k, None) is not None for k in keys))

    async def scan_iter(match):
        for key in list(store):
            if fnmatch(key, match):
                yield key

    client.scan_iter = MagicMock(side_effect=scan_iter)

    with patch("cueclub.services.cache.get_redis_client", AsyncMock(return_value=client)):
        yield client, store


@pytest.fixture
def mock_db():
    """Mock database with async query methods, patched into every service."""
    db = MagicMock()
    db.fetch_one = AsyncMock(return_value=None)
    db.fetch_all = AsyncMock(return_value=[])
    db.fetch_val = AsyncMock(return_value=0)
    db.execute = AsyncMock(return_value=None)

    patchers = [patch(f"{module}.database", db) for module in DATABASE_MODULES]
    for patcher in patchers:
        patcher.start()
    yield db
    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def client():
    """TestClient without lifespan, so no database connection is opened."""
    return TestClient(app)


@pytest.fixture
def admin_client():
    """TestClient authenticated as an admin."""
    app.dependency_overrides[get_admin] = lambda: TEST_ADMIN
    yield TestClient(app)
    app.dependency_overrides.pop(get_admin, None)
