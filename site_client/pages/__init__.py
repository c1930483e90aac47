"""Page content API client."""

from site_client.pages.client import PagesClient
from site_client.pages.schemas import (
    HomepageSection,
    LinkItem,
    Livestream,
    SectionKind,
    SectionType,
    SiteContent,
)

__all__ = [
    "PagesClient",
    "SiteContent",
    "SectionKind",
    "SectionType",
    "HomepageSection",
    "LinkItem",
    "Livestream",
]
