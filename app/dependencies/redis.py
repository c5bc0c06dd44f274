import logging

from upstash_redis.asyncio import Redis

from app.config import get_settings

logger = logging.getLogger(__name__)

# All match storage lives under this key prefix
MATCH_KEY_PREFIX = "match"

_redis_client: Redis | None = None


def match_key(*parts: str) -> str:
    """Build a match storage key, e.g. match_key("abc", "events") -> "match:abc:events"."""
    return ":".join((MATCH_KEY_PREFIX, *parts))


def get_redis_client() -> Redis:
    """Get the singleton async Redis client backing match storage.

    Returns the existing client if initialized, otherwise creates a new one
    from UPSTASH_REDIS_REST_URL / UPSTASH_REDIS_REST_TOKEN.
    """
    global _redis_client
    if _redis_client is None:
        settings = get_settings()
        logger.info(
            "Initializing Upstash Redis client for match storage (prefix=%s:)", MATCH_KEY_PREFIX
        )
        _redis_client = Redis(
            url=settings.UPSTASH_REDIS_REST_URL,
            token=settings.UPSTASH_REDIS_REST_TOKEN,
        )
    return _redis_client


async def close_redis_client() -> None:
    """Close the Redis client connection, if one was opened."""
    global _redis_client
    if _redis_client is None:
        return
    logger.info("Closing Upstash Redis client")
    await _redis_client.close()
    _redis_client = None
