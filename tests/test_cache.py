"""
Tests for the Redis-backed, tag-invalidated query cache.
"""

import json
import uuid
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from cueclub.services.cache import QueryCache


@pytest.mark.asyncio
async def test_miss_then_hit(redis_store):
    cache = QueryCache(prefix="test:", ttl_seconds=60)

    assert await cache.get("pricing") == (False, None)
    await cache.set("pricing", [1, 2])
    assert await cache.get("pricing") == (True, [1, 2])


@pytest.mark.asyncio
async def test_entries_are_written_with_ttl(redis_store):
    client, store = redis_store
    cache = QueryCache(prefix="test:", ttl_seconds=60)

    await cache.set("booking-availability", {"slots": []}, key=date(2025, 6, 1))

    client.setex.assert_awaited_once_with(
        "test:booking-availability:2025-06-01", 60, json.dumps({"slots": []})
    )


@pytest.mark.asyncio
async def test_rows_are_json_encoded(redis_store):
    _, store = redis_store
    cache = QueryCache(prefix="test:")
    plan_id = uuid.uuid4()

    await cache.set("pricing", [{"id": plan_id, "price": Decimal("300.00"), "day": date(2025, 6, 1)}])

    hit, value = await cache.get("pricing")
    assert hit
    assert value == [{"id": str(plan_id), "price": 300.0, "day": "2025-06-01"}]


@pytest.mark.asyncio
async def test_none_is_a_cacheable_value(redis_store):
    cache = QueryCache(prefix="test:")
    await cache.set("settings", None)

    assert await cache.get("settings") == (True, None)


@pytest.mark.asyncio
async def test_invalidate_drops_only_named_tags(redis_store):
    _, store = redis_store
    cache = QueryCache(prefix="test:")
    await cache.set("pricing", "plans", key="active")
    await cache.set("gallery", "images")
    await cache.set("tournaments", "list", key="active")
    await cache.set("tournament-registrations", "regs")

    await cache.invalidate("pricing", "tournaments")

    assert sorted(store) == ["test:gallery:all", "test:tournament-registrations:all"]


@pytest.mark.asyncio
async def test_clear_single_tag_and_everything(redis_store):
    _, store = redis_store
    store["other-app:pricing:all"] = "1"
    cache = QueryCache(prefix="test:")
    await cache.set("pricing", 1)
    await cache.set("gallery", 2)

    await cache.clear("pricing")
    assert await cache.get("pricing") == (False, None)
    assert await cache.get("gallery") == (True, 2)

    await cache.clear()
    assert list(store) == ["other-app:pricing:all"]


@pytest.mark.asyncio
async def test_get_or_fetch_calls_fetch_once(redis_store):
    cache = QueryCache(prefix="test:")
    fetch = AsyncMock(return_value=["plan"])

    first = await cache.get_or_fetch("pricing", fetch)
    second = await cache.get_or_fetch("pricing", fetch)

    assert first == second == ["plan"]
    fetch.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_fetch_is_not_cached(redis_store):
    _, store = redis_store
    cache = QueryCache(prefix="test:")
    fetch = AsyncMock(side_effect=[RuntimeError("db down"), ["plan"]])

    with pytest.raises(RuntimeError):
        await cache.get_or_fetch("pricing", fetch)

    assert store == {}
    assert await cache.get_or_fetch("pricing", fetch) == ["plan"]


@pytest.mark.asyncio
async def test_without_redis_every_read_fetches():
    cache = QueryCache(prefix="test:")
    fetch = AsyncMock(return_value=["plan"])

    await cache.get_or_fetch("pricing", fetch)
    await cache.get_or_fetch("pricing", fetch)
    await cache.invalidate("pricing")

    assert fetch.await_count == 2


@pytest.mark.asyncio
async def test_redis_errors_fall_through_to_fetch(redis_store):
    client, _ = redis_store
    client.get.side_effect = RedisConnectionError("connection reset")
    client.setex.side_effect = RedisConnectionError("connection reset")
    cache = QueryCache(prefix="test:")
    fetch = AsyncMock(return_value=["plan"])

    assert await cache.get_or_fetch("pricing", fetch) == ["plan"]
    fetch.assert_awaited_once()
