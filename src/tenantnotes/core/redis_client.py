"""Redis client for the access-token denylist."""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..config import get_settings

logger = logging.getLogger(__name__)

BLACKLIST_PREFIX = "blacklist:"


class RedisClient:
    """Redis client used to revoke access tokens on logout.

    Redis is optional for the service: every operation is a no-op while the
    client is not connected, and a revoked token then simply lives until it
    expires.
    """

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    @property
    def is_connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        if self.redis is not None:
            return
        client = redis.from_url(
            self.settings.redis_url,
            max_connections=self.settings.redis_max_connections,
            decode_responses=True,
        )
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            logger.error(f"Failed to connect to Redis: {e}")
            await client.aclose()
            raise
        self.redis = client
        logger.info("Connected to Redis successfully")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def add_to_blacklist(self, token_jti: str, expire: int) -> bool:
        """Record a revoked token id until the token would have expired."""
        if not self.redis:
            return False
        try:
            return bool(await self.redis.setex(f"{BLACKLIST_PREFIX}{token_jti}", expire, "1"))
        except RedisError as e:
            logger.error(f"Failed to blacklist token: {e}")
            return False

    async def is_token_blacklisted(self, token_jti: str) -> bool:
        """Check if token is blacklisted."""
        if not self.redis:
            return False
        try:
            return await self.redis.exists(f"{BLACKLIST_PREFIX}{token_jti}") > 0
        except RedisError as e:
            logger.error(f"Redis EXISTS error for token {token_jti}: {e}")
            return False


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
