"""Query cache - shared async results keyed by query key.

One entry per key. Concurrent fetches of a key share a single in-flight task;
waiters are shielded so a cancelled caller never cancels the shared request.
Invalidation bumps the entry generation: results of requests started before
the invalidation never clear the stale flag and never overwrite newer data.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from loguru import logger

from app.cache.keys import QueryKey, matches

Fetcher = Callable[[], Awaitable[Any]]
Listener = Callable[[Any], None]


class QueryStatus(StrEnum):
    """Entry status as seen by subscribers."""

    IDLE = "idle"
    LOADING = "loading"
    FETCHING = "fetching"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class CacheEntry:
    """Cached result of one query key."""

    key: QueryKey
    data: Any = None
    has_data: bool = False
    error: Exception | None = None
    updated_at: float = 0.0
    invalidated: bool = False
    generation: int = 0
    data_generation: int = -1
    fetcher: Fetcher | None = None
    task: asyncio.Task | None = None
    task_generation: int = -1
    listeners: list[Listener] = field(default_factory=list)
    last_used: float = 0.0

    @property
    def is_fetching(self) -> bool:
        return self.task is not None and not self.task.done()

    @property
    def status(self) -> QueryStatus:
        if self.is_fetching:
            return QueryStatus.FETCHING if self.has_data else QueryStatus.LOADING
        if self.error is not None:
            return QueryStatus.ERROR
        if self.has_data:
            return QueryStatus.SUCCESS
        return QueryStatus.IDLE

    def is_stale(self, now: float, stale_time: float) -> bool:
        return not self.has_data or self.invalidated or now - self.updated_at >= stale_time


class Subscription:
    """Handle returned by QueryCache.subscribe."""

    def __init__(self, cache: "QueryCache", entry: CacheEntry, listener: Listener):
        self._cache = cache
        self._entry = entry
        self._listener = listener
        self.active = True

    @property
    def entry(self) -> CacheEntry:
        return self._entry

    def unsubscribe(self) -> None:
        """Stop notifications. An in-flight request keeps running for other waiters."""
        if self.active:
            self._cache._unsubscribe(self._entry, self._listener)
            self.active = False


def _consume_result(task: asyncio.Task) -> None:
    # Errors reach awaiting callers; background refetches only log them.
    if not task.cancelled():
        task.exception()


class QueryCache:
    """In-memory query cache with request coalescing and prefix invalidation."""

    def __init__(
        self,
        stale_time: float = 30.0,
        gc_time: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.stale_time = stale_time
        self.gc_time = gc_time
        self._clock = clock
        self._entries: dict[QueryKey, CacheEntry] = {}
        logger.debug("QueryCache: stale_time={}s, gc_time={}s", stale_time, gc_time)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def _entry(self, key: QueryKey) -> CacheEntry:
        entry = self._entries.get(key)
        if entry is None:
            entry = CacheEntry(key=key, last_used=self._clock())
            self._entries[key] = entry
        return entry

    def get_entry(self, key: QueryKey) -> CacheEntry | None:
        return self._entries.get(key)

    def get_data(self, key: QueryKey) -> Any:
        entry = self._entries.get(key)
        return entry.data if entry else None

    def set_data(self, key: QueryKey, data: Any) -> None:
        """Store data directly, as if freshly fetched."""
        entry = self._entry(key)
        self._store(entry, data, entry.generation)

    # ========== Fetching ==========

    async def fetch(self, key: QueryKey, fetcher: Fetcher) -> Any:
        """Cached data if fresh, otherwise the result of a (shared) request."""
        self.collect_garbage()
        entry = self._entry(key)
        entry.fetcher = fetcher
        entry.last_used = self._clock()

        if not entry.is_stale(entry.last_used, self.stale_time):
            logger.debug("Cache hit: {}", key)
            return entry.data

        return await asyncio.shield(self._start(entry))

    def _start(self, entry: CacheEntry) -> asyncio.Task:
        """Join the current request for this generation or start a new one."""
        if entry.is_fetching and entry.task_generation == entry.generation:
            logger.debug("Joining in-flight request: {}", entry.key)
            return entry.task

        logger.debug("Cache miss: {}", entry.key)
        task = asyncio.get_running_loop().create_task(self._run(entry, entry.fetcher, entry.generation))
        task.add_done_callback(_consume_result)
        entry.task = task
        entry.task_generation = entry.generation
        return task

    async def _run(self, entry: CacheEntry, fetcher: Fetcher, generation: int) -> Any:
        try:
            data = await fetcher()
        except Exception as e:
            if generation == entry.generation:
                entry.error = e
            logger.debug("Fetch failed: {} ({})", entry.key, e)
            raise
        finally:
            if entry.task is asyncio.current_task():
                entry.task = None

        if generation < entry.data_generation:
            logger.debug("Discarding outdated result: {}", entry.key)
            return data

        self._store(entry, data, generation)
        return data

    def _store(self, entry: CacheEntry, data: Any, generation: int) -> None:
        entry.data = data
        entry.has_data = True
        entry.error = None
        entry.updated_at = self._clock()
        entry.data_generation = generation
        if generation == entry.generation:
            entry.invalidated = False
        self._notify(entry)

    def _notify(self, entry: CacheEntry) -> None:
        for listener in list(entry.listeners):
            try:
                listener(entry.data)
            except Exception:
                logger.exception("Listener failed for {}", entry.key)

    # ========== Subscriptions ==========

    def subscribe(self, key: QueryKey, listener: Listener) -> Subscription:
        """Observe a key; refetch now if stale and the fetcher is known."""
        entry = self._entry(key)
        entry.listeners.append(listener)
        entry.last_used = self._clock()

        if entry.fetcher is not None and entry.is_stale(entry.last_used, self.stale_time):
            self._start(entry)

        return Subscription(self, entry, listener)

    def _unsubscribe(self, entry: CacheEntry, listener: Listener) -> None:
        if listener in entry.listeners:
            entry.listeners.remove(listener)
        entry.last_used = self._clock()

    # ========== Invalidation ==========

    async def invalidate(self, prefix: QueryKey) -> int:
        """Mark entries under prefix stale; refetch the observed ones."""
        return await self.invalidate_many((prefix,))

    async def invalidate_many(self, prefixes: Iterable[QueryKey]) -> int:
        prefixes = tuple(prefixes)
        refetches = []
        count = 0

        for entry in list(self._entries.values()):
            if not any(matches(entry.key, p) for p in prefixes):
                continue
            entry.invalidated = True
            entry.generation += 1
            count += 1
            if entry.listeners and entry.fetcher is not None:
                refetches.append(asyncio.shield(self._start(entry)))

        logger.debug("Invalidated {} entries ({} refetching) for {}", count, len(refetches), prefixes)

        for result in await asyncio.gather(*refetches, return_exceptions=True):
            if isinstance(result, Exception):
                logger.warning("Refetch after invalidation failed: {}", result)
        return count

    # ========== Lifecycle ==========

    def collect_garbage(self) -> int:
        """Drop unobserved, idle entries unused for longer than gc_time."""
        now = self._clock()
        dead = [
            key
            for key, entry in self._entries.items()
            if not entry.listeners and not entry.is_fetching and now - entry.last_used > self.gc_time
        ]
        for key in dead:
            del self._entries[key]
        if dead:
            logger.debug("Cache GC: {} entries dropped", len(dead))
        return len(dead)

    def clear(self) -> None:
        """Cancel in-flight requests and drop every entry."""
        for entry in self._entries.values():
            if entry.is_fetching:
                entry.task.cancel()
        count = len(self._entries)
        self._entries.clear()
        logger.info("Query cache cleared ({} entries)", count)
