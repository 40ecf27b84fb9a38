"""Redis async client backing the per-client chat state."""

import redis.asyncio as redis

from gamehelp.config import settings

redis_client: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    """Get or create the Redis client singleton (lazy init)."""
    global redis_client
    if redis_client is None:
        redis_client = redis.from_url(settings.REDIS_URL, decode_responses=True)
    return redis_client


async def close_redis() -> None:
    """Close the Redis connection pool if one was opened."""
    global redis_client
    if redis_client is not None:
        await redis_client.aclose()
        redis_client = None


def client_namespace(client_id: str) -> str:
    """Key prefix under which one browser client's chats are stored."""
    return f"chat:{client_id}"


async def get_redis() -> redis.Redis:
    """FastAPI dependency that returns the Redis client."""
    return get_redis_client()
