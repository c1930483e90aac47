"""Combined backend handle."""

from site_client.analytics import AnalyticsClient
from site_client.blog import BlogClient
from site_client.media import MediaClient
from site_client.meetings import MeetingsClient
from site_client.pages import PagesClient
from site_client.store import StoreClient
from site_client.users import UsersClient


class SiteClient(
    BlogClient,
    StoreClient,
    MeetingsClient,
    PagesClient,
    MediaClient,
    AnalyticsClient,
    UsersClient,
):
    """Single authenticated handle exposing every backend operation."""
