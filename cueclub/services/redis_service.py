"""
Redis Service
Shared async Redis client for the read cache
"""

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from cueclub.config import settings

logger = logging.getLogger(__name__)

# Global Redis client (created on first use)
_redis_client: Optional[Redis] = None


async def get_redis_client() -> Optional[Redis]:
    """
    Get or create the Redis client

    Returns:
        Redis client, or None when Redis cannot be reached (reads then go
        straight to the database)
    """
    global _redis_client

    if _redis_client is not None:
        return _redis_client

    client = Redis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
        socket_connect_timeout=2,
        socket_timeout=2,
        retry_on_timeout=True
    )
    try:
        await client.ping()
    except (RedisError, OSError) as e:
        logger.warning("Failed to connect to Redis at %s: %s", settings.REDIS_URL, e)
        await client.aclose()
        return None

    logger.info("Connected to Redis at %s", settings.REDIS_URL)
    _redis_client = client
    return _redis_client


async def close_redis_connection() -> None:
    """Close the Redis connection on shutdown"""
    global _redis_client

    if _redis_client is not None:
        try:
            await _redis_client.aclose()
            logger.info("Closed Redis connection")
        except RedisError as e:
            logger.warning("Error closing Redis connection: %s", e)
        finally:
            _redis_client = None
