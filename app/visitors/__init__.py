"""Visitor tracking package."""

from app.visitors.storage import FileStorage, MemoryStorage, Storage, safe_get, safe_set
from app.visitors.tracker import (
    LAST_TRACKED_KEY,
    SESSION_ID_KEY,
    DailyVisitorTracker,
    current_local_date,
    new_session_id,
)

__all__ = [
    "Storage",
    "FileStorage",
    "MemoryStorage",
    "safe_get",
    "safe_set",
    "DailyVisitorTracker",
    "current_local_date",
    "new_session_id",
    "SESSION_ID_KEY",
    "LAST_TRACKED_KEY",
]
