"""
Key-value store access for profile records.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import redis
from redis.exceptions import RedisError

from profile_lookup.config import Config

logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    """
    Point-lookup capability the fetcher talks to.
    """

    def get(self, key: str) -> Optional[bytes]:
        ...

    def close(self) -> None:
        ...


class RedisProfileStore:
    """
    One synchronous Redis connection, opened for a single lookup.
    """

    def __init__(self, redis_client: redis.Redis):
        self.redis_client = redis_client

    @classmethod
    def connect(cls, redis_url: str,
                socket_connect_timeout: Optional[float] = None,
                socket_timeout: Optional[float] = None) -> "RedisProfileStore":
        """
        Open a client for ``redis_url`` and PING it so an unreachable server
        fails here rather than on the first GET.
        """
        connection_params = {
            'decode_responses': False,
            'socket_connect_timeout': socket_connect_timeout,
            'socket_timeout': socket_timeout,
        }

        client = redis.from_url(redis_url, **connection_params)
        try:
            client.ping()
        except RedisError:
            client.close()
            raise
        logger.debug(f"Opened profile store connection to {redis_url}")
        return cls(client)

    def get(self, key: str) -> Optional[bytes]:
        return self.redis_client.get(key)

    def close(self) -> None:
        self.redis_client.close()
        logger.debug("Closed profile store connection")


def redis_store_factory(config: Config):
    """
    Build a store factory that connects with the timeouts from ``config``.
    """

    def factory(address: str) -> RedisProfileStore:
        return RedisProfileStore.connect(
            address,
            socket_connect_timeout=config.REDIS_SOCKET_CONNECT_TIMEOUT,
            socket_timeout=config.REDIS_SOCKET_TIMEOUT,
        )

    return factory
