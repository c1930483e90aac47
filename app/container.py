"""Dependency container - one per session, created at app start."""

from pathlib import Path

import httpx
from loguru import logger

from app.cache import QueryCache
from app.connection import Connection, ConnectionState
from app.services.analytics import AnalyticsService
from app.services.blog import BlogService
from app.services.links import LinkService
from app.services.livestreams import LivestreamService
from app.services.media import MediaService
from app.services.meetings import MeetingService
from app.services.pages import PageService
from app.services.store import StoreService
from app.services.users import UserService
from app.visitors import DailyVisitorTracker, FileStorage, Storage
from settings import API_TOKEN, GC_TIME, MAX_CONCURRENT, STALE_TIME, STORAGE_PATH
from site_client import SiteClient


class Container:
    """Application container - connection, query cache, services, visitor tracker."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = API_TOKEN,
        storage: Storage | None = None,
        storage_path: Path | str = STORAGE_PATH,
        transport: httpx.AsyncBaseTransport | None = None,
        stale_time: float = STALE_TIME,
        gc_time: float = GC_TIME,
    ):
        self.connection = Connection(
            lambda: SiteClient(
                max_concurrent=MAX_CONCURRENT,
                token=token,
                transport=transport,
                base_url=base_url,
            )
        )
        self.cache = QueryCache(stale_time=stale_time, gc_time=gc_time)
        self.storage = storage if storage is not None else FileStorage(storage_path)

        # Services (sharing connection and cache)
        self.blog = BlogService(self.connection, self.cache)
        self.store = StoreService(self.connection, self.cache)
        self.meetings = MeetingService(self.connection, self.cache)
        self.pages = PageService(self.connection, self.cache)
        self.links = LinkService(self.connection, self.cache)
        self.livestreams = LivestreamService(self.connection, self.cache)
        self.media = MediaService(self.connection, self.cache)
        self.analytics = AnalyticsService(self.connection, self.cache)
        self.users = UserService(self.connection, self.cache)

        self.visitors = DailyVisitorTracker(
            analytics=self.analytics,
            users=self.users,
            storage=self.storage,
        )

    async def start(self) -> ConnectionState:
        """Open the backend connection."""
        state = await self.connection.connect()
        logger.info("Container started: backend {}", state)
        return state

    async def logout(self) -> None:
        """Drop all cached data and close the connection."""
        self.cache.clear()
        await self.connection.close()
        logger.info("Logged out")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, *_):
        await self.logout()
