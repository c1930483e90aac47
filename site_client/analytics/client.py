"""Analytics API client - counters and tracking events."""

from site_client.analytics.schemas import AnalyticsData, VisitorAck
from site_client.base import BaseClient


class AnalyticsClient(BaseClient):
    """Client for analytics endpoints."""

    async def analytics_data(self) -> AnalyticsData:
        """GET /analytics - aggregated counters."""
        return AnalyticsData.model_validate(await self._get("analytics"))

    async def track_page_visit(self, page: str) -> None:
        """POST /analytics/pages."""
        await self._post("analytics/pages", {"page": page})

    async def track_element_click(self, element: str) -> None:
        """POST /analytics/clicks."""
        await self._post("analytics/clicks", {"element": element})

    async def track_section_view(self, section_id: str) -> None:
        """POST /analytics/sections."""
        await self._post("analytics/sections", {"sectionId": section_id})

    async def track_unique_visitor(self, session_id: str) -> VisitorAck:
        """POST /analytics/visitors - returns the backend day bucket."""
        return VisitorAck.model_validate(await self._post("analytics/visitors", {"sessionId": session_id}))
