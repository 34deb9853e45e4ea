"""Redis-backed session store."""

import json
import logging
from typing import Any, Dict, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ...core.exceptions import SessionStoreError

logger = logging.getLogger(__name__)


class RedisSessionStore:
    """Redis session store following the koa-style external store contract.

    Handles ONLY Redis storage of session and ticket binding entries.
    Values are JSON documents; lifetimes map to Redis key expiry.
    """

    def __init__(self, redis_client, key_prefix: str = "cas_session"):
        """Initialize Redis session store.

        Args:
            redis_client: ``redis.asyncio`` client instance
            key_prefix: Prefix for all keys written by this store
        """
        if not redis_client:
            raise ValueError("Redis client is required")
        self.redis = redis_client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "cas_session") -> "RedisSessionStore":
        """Create a store with a new client for a Redis URL."""
        return cls(redis.from_url(url, decode_responses=True), key_prefix=key_prefix)

    def _make_key(self, key: str) -> str:
        return f"{self.key_prefix}:{key}"

    async def get(
        self,
        key: str,
        max_age: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load an entry, None if absent or expired."""
        try:
            raw = await self.redis.get(self._make_key(key))
        except RedisError as e:
            logger.error(f"Failed to read {key} from Redis: {e}")
            raise SessionStoreError(
                "Session store read failed", key=key, operation="get", cause=e
            ) from e

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error(f"Corrupt session entry {key}: {e}")
            raise SessionStoreError(
                "Session entry could not be decoded", key=key, operation="get", cause=e
            ) from e

    async def set(
        self,
        key: str,
        value: Dict[str, Any],
        max_age: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> None:
        """Store an entry with an optional lifetime in seconds."""
        try:
            payload = json.dumps(value, default=str)
            if max_age and max_age > 0:
                await self.redis.set(self._make_key(key), payload, ex=int(max_age))
            else:
                await self.redis.set(self._make_key(key), payload)
        except RedisError as e:
            logger.error(f"Failed to write {key} to Redis: {e}")
            raise SessionStoreError(
                "Session store write failed", key=key, operation="set", cause=e
            ) from e

    async def destroy(self, key: str) -> None:
        """Delete an entry."""
        try:
            await self.redis.delete(self._make_key(key))
        except RedisError as e:
            logger.error(f"Failed to delete {key} from Redis: {e}")
            raise SessionStoreError(
                "Session store delete failed", key=key, operation="destroy", cause=e
            ) from e

    async def close(self) -> None:
        """Close the underlying Redis connection pool."""
        await self.redis.aclose()
