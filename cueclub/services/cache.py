"""
Query Cache
Redis-backed cache for public list reads, invalidated by tag after writes
"""

import json
import logging
from typing import Any, Awaitable, Callable, Hashable, List, Optional, Tuple

from fastapi.encoders import jsonable_encoder
from redis.exceptions import RedisError

from cueclub.config import settings
from cueclub.services.redis_service import get_redis_client

logger = logging.getLogger(__name__)

# Tags used by the services
BOOKINGS = "bookings"
BOOKING_AVAILABILITY = "booking-availability"
BLOCKED_SLOTS = "blocked-slots"
TOURNAMENTS = "tournaments"
TOURNAMENT_REGISTRATIONS = "tournament-registrations"
PRICING = "pricing"
GALLERY = "gallery"
SLIDESHOW = "slideshow"
SETTINGS = "settings"
CONTACT_MESSAGES = "contact-messages"


class QueryCache:
    """
    Results stored in Redis under "<prefix><tag>:<key>" with a TTL

    Values go through jsonable_encoder, so dates, UUIDs and decimals come
    back as strings and floats. When Redis is unreachable every read is a
    miss and writes are skipped.
    """

    def __init__(self, prefix: str = "cueclub:", ttl_seconds: int = 60):
        self.prefix = prefix
        self.ttl_seconds = ttl_seconds

    def _key(self, tag: str, key: Hashable = None) -> str:
        return f"{self.prefix}{tag}:{'all' if key is None else key}"

    async def get(self, tag: str, key: Hashable = None) -> Tuple[bool, Any]:
        try:
            redis_client = await get_redis_client()
            if redis_client is None:
                return False, None
            raw = await redis_client.get(self._key(tag, key))
        except RedisError as e:
            logger.warning("Cache read failed for %s: %s", tag, e)
            return False, None

        if raw is None:
            return False, None
        return True, json.loads(raw)

    async def set(self, tag: str, value: Any, key: Hashable = None) -> None:
        try:
            redis_client = await get_redis_client()
            if redis_client is None:
                return
            await redis_client.setex(
                self._key(tag, key),
                self.ttl_seconds,
                json.dumps(jsonable_encoder(value))
            )
        except RedisError as e:
            logger.warning("Cache write failed for %s: %s", tag, e)

    async def get_or_fetch(
        self,
        tag: str,
        fetch: Callable[[], Awaitable[Any]],
        key: Hashable = None
    ) -> Any:
        """Return the cached value or await fetch() and cache its result"""
        hit, value = await self.get(tag, key)
        if hit:
            return value
        value = await fetch()
        await self.set(tag, value, key)
        return value

    async def _delete_matching(self, pattern: str) -> int:
        redis_client = await get_redis_client()
        if redis_client is None:
            return 0
        keys: List[str] = []
        async for cache_key in redis_client.scan_iter(match=pattern):
            keys.append(cache_key)
        if keys:
            await redis_client.delete(*keys)
        return len(keys)

    async def invalidate(self, *tags: str) -> None:
        """Drop every entry stored under the given tags"""
        try:
            removed = 0
            for tag in tags:
                removed += await self._delete_matching(f"{self.prefix}{tag}:*")
        except RedisError as e:
            logger.warning("Cache invalidation failed for %s: %s", ", ".join(tags), e)
            return
        if removed:
            logger.debug("Invalidated %d cached queries for %s", removed, ", ".join(tags))

    async def clear(self, tag: Optional[str] = None) -> None:
        if tag is not None:
            await self.invalidate(tag)
            return
        try:
            await self._delete_matching(f"{self.prefix}*")
        except RedisError as e:
            logger.warning("Cache clear failed: %s", e)


# Shared instance
query_cache = QueryCache(prefix=settings.CACHE_KEY_PREFIX, ttl_seconds=settings.CACHE_TTL_SECONDS)
