"""Analytics API client."""

from site_client.analytics.client import AnalyticsClient
from site_client.analytics.schemas import AnalyticsData, VisitorAck

__all__ = [
    "AnalyticsClient",
    "AnalyticsData",
    "VisitorAck",
]
