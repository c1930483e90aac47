"""Daily unique visitor tracking.

A visitor is reported at most once per local calendar day per storage profile,
and only once the caller is known not to be an admin. The last-tracked date is
persisted only after the backend acknowledged the visit, so failed reports are
retried on the next page load.
"""

import secrets
import string
import time
from collections.abc import Callable
from datetime import date

from loguru import logger

from app.services.analytics import AnalyticsService
from app.services.users import UserService
from app.visitors.storage import Storage, safe_get, safe_set
from site_client.analytics import VisitorAck

SESSION_ID_KEY = "visitor_session_id"
LAST_TRACKED_KEY = "last_tracked_date"

_ALPHABET = string.ascii_lowercase + string.digits


def current_local_date(today: Callable[[], date] = date.today) -> str:
    """Local calendar date as YYYY-MM-DD."""
    return today().isoformat()


def new_session_id() -> str:
    """Random visitor id: visitor_<epoch ms>_<13 base36 chars>."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(13))
    return f"visitor_{int(time.time() * 1000)}_{suffix}"


class DailyVisitorTracker:
    """Reports one unique visit per local day for non-admin sessions."""

    def __init__(
        self,
        analytics: AnalyticsService,
        users: UserService,
        storage: Storage,
        today: Callable[[], date] = date.today,
    ):
        self._analytics = analytics
        self._users = users
        self._storage = storage
        self._today = today

    def last_tracked_date(self) -> str | None:
        return safe_get(self._storage, LAST_TRACKED_KEY)

    def should_track_today(self) -> bool:
        return self.last_tracked_date() != current_local_date(self._today)

    def session_id(self) -> str:
        """Persisted visitor id, created on first use."""
        session_id = safe_get(self._storage, SESSION_ID_KEY)
        if not session_id:
            session_id = new_session_id()
            safe_set(self._storage, SESSION_ID_KEY, session_id)
            logger.debug("New visitor session: {}", session_id)
        return session_id

    async def track(self, is_admin: bool | None) -> VisitorAck | None:
        """Report today's visit if needed. Never raises."""
        if is_admin is not False:
            logger.debug("Visitor tracking skipped: admin status {}", is_admin)
            return None
        if not self.should_track_today():
            logger.debug("Visitor already tracked today")
            return None

        today = current_local_date(self._today)
        try:
            ack = await self._analytics.track_unique_visitor(self.session_id())
        except Exception as e:
            logger.warning("Unique visitor tracking failed: {}", e)
            return None

        safe_set(self._storage, LAST_TRACKED_KEY, today)
        if ack.day_key != today:
            logger.debug("Backend day {} differs from local day {}", ack.day_key, today)
        logger.info("Unique visitor tracked for {} (count={})", ack.day_key, ack.count)
        return ack

    async def on_page_load(self, page: str = "home") -> VisitorAck | None:
        """Report the page visit, then the daily visit for non-admin callers."""
        try:
            await self._analytics.track_page_visit(page)
        except Exception as e:
            logger.warning("Page visit tracking failed: {}", e)

        return await self.track(await self._users.is_admin())
