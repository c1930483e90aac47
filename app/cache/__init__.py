"""Query cache package - keys, cache, invalidation table."""

from app.cache import keys
from app.cache.invalidation import INVALIDATIONS, prefixes_for
from app.cache.query_cache import CacheEntry, QueryCache, QueryStatus, Subscription

__all__ = [
    "keys",
    "QueryCache",
    "CacheEntry",
    "QueryStatus",
    "Subscription",
    "INVALIDATIONS",
    "prefixes_for",
]
