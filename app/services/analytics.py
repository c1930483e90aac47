"""Analytics service - dashboard counters and tracking events."""

from loguru import logger

from app.cache import keys
from app.services.base import BaseService
from site_client.analytics import AnalyticsData, VisitorAck


class AnalyticsService(BaseService):
    """Visitor analytics queries and tracking events."""

    async def data(self) -> AnalyticsData | None:
        return await self._query(keys.ANALYTICS, lambda c: c.analytics_data(), None)

    async def _event(self, name: str, value: str) -> None:
        # Telemetry is dropped, not raised, while the backend is unavailable.
        if not self._connection.is_ready:
            logger.debug("Event {}({}) dropped: backend {}", name, value, self._connection.state)
            return
        await self._mutate(name, lambda c: getattr(c, name)(value))

    async def track_page_visit(self, page: str) -> None:
        await self._event("track_page_visit", page)

    async def track_element_click(self, element: str) -> None:
        await self._event("track_element_click", element)

    async def track_section_view(self, section_id: str) -> None:
        await self._event("track_section_view", section_id)

    async def track_unique_visitor(self, session_id: str) -> VisitorAck:
        """Report one unique visit for today; raises when the backend is unavailable."""
        return await self._mutate("track_unique_visitor", lambda c: c.track_unique_visitor(session_id))
