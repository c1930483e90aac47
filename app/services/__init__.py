"""Services package - service class exports."""

from app.services.analytics import AnalyticsService
from app.services.base import BaseService
from app.services.blog import BlogService
from app.services.links import LinkService
from app.services.livestreams import LivestreamService
from app.services.media import MediaService
from app.services.meetings import MeetingService
from app.services.pages import PageService
from app.services.store import StoreService
from app.services.users import UserService

__all__ = [
    "BaseService",
    "AnalyticsService",
    "BlogService",
    "LinkService",
    "LivestreamService",
    "MediaService",
    "MeetingService",
    "PageService",
    "StoreService",
    "UserService",
]
