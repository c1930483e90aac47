"""Base service - cached reads and invalidating writes over the backend handle."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from loguru import logger

from app.cache import QueryCache, Subscription, prefixes_for
from app.cache.keys import QueryKey
from app.connection import Connection

T = TypeVar("T")


class BaseService:
    """Common read/write plumbing for domain services."""

    def __init__(self, connection: Connection, cache: QueryCache):
        self._connection = connection
        self._cache = cache
        logger.debug("{} initialized", self.__class__.__name__)

    async def _query(self, key: QueryKey, call: Callable[[Any], Awaitable[T]], default: T) -> T:
        """Cached read. Degrades to `default` while the backend is unavailable or on error."""
        if not self._connection.is_ready:
            logger.debug("Query {} skipped: backend {}", key, self._connection.state)
            return default

        handle = self._connection.handle
        try:
            return await self._cache.fetch(key, lambda: call(handle))
        except asyncio.CancelledError:
            # Shared request cancelled by cache.clear(); only our own cancellation propagates.
            if asyncio.current_task().cancelling():
                raise
            logger.debug("Query {} cancelled: cache cleared", key)
            return default
        except Exception as e:
            logger.warning("Query {} failed: {}", key, e)
            return default

    async def _mutate(self, name: str, call: Callable[[Any], Awaitable[T]]) -> T:
        """Write once, then invalidate every query the write could have changed."""
        prefixes = prefixes_for(name)
        handle = self._connection.handle

        result = await call(handle)
        logger.debug("Mutation {} succeeded", name)

        if prefixes:
            await self._cache.invalidate_many(prefixes)
        return result

    def watch(self, key: QueryKey, listener: Callable[[Any], None]) -> Subscription:
        """Subscribe to a query key; listener receives data after every fetch."""
        return self._cache.subscribe(key, listener)
