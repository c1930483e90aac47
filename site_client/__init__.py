"""Site backend API client package."""

from site_client.analytics import AnalyticsClient
from site_client.base import BaseClient, set_api_config
from site_client.blog import BlogClient
from site_client.client import SiteClient
from site_client.errors import BackendError
from site_client.media import MediaClient
from site_client.meetings import MeetingsClient
from site_client.pages import PagesClient
from site_client.schemas import ExternalBlob, Time
from site_client.store import StoreClient
from site_client.users import UsersClient

__all__ = [
    # Base
    "BaseClient",
    "BackendError",
    "ExternalBlob",
    "Time",
    "set_api_config",
    # Clients
    "BlogClient",
    "StoreClient",
    "MeetingsClient",
    "PagesClient",
    "MediaClient",
    "AnalyticsClient",
    "UsersClient",
    "SiteClient",
]
