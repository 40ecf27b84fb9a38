"""Persistent store - JSON values in a namespaced key-value store (Redis).

Mirrors browser local storage: values are plain strings holding JSON. A
missing or corrupt value reads back as ``None``; a failed write is reported
to the caller as :class:`StorageError`.
"""

import json
from typing import Any

import redis.asyncio as aioredis
from loguru import logger
from redis.exceptions import RedisError

from gamehelp.core.errors import StorageError


class PersistentStore:
    """Load/save JSON-serializable values under fixed keys."""

    def __init__(self, redis: aioredis.Redis, namespace: str):
        self.redis = redis
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def load(self, key: str) -> Any | None:
        """Return the decoded value, or None if absent or unreadable.

        Raises StorageError if the backend cannot be reached.
        """
        try:
            raw = await self.redis.get(self._key(key))
        except RedisError as e:
            raise StorageError(f"Could not load {self._key(key)}: {e}") from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring corrupt value stored at {self._key(key)}")
            return None

    async def save(self, key: str, value: Any) -> None:
        """Write a value. Raises StorageError if the backend rejects it."""
        data = json.dumps(value, ensure_ascii=False)
        try:
            await self.redis.set(self._key(key), data)
        except RedisError as e:
            raise StorageError(f"Could not save {self._key(key)}: {e}") from e

    async def delete(self, key: str) -> None:
        try:
            await self.redis.delete(self._key(key))
        except RedisError as e:
            raise StorageError(f"Could not delete {self._key(key)}: {e}") from e
