"""Tests for daily unique visitor tracking."""

import re
from datetime import date

import pytest

from app.cache import keys
from app.visitors import (
    LAST_TRACKED_KEY,
    SESSION_ID_KEY,
    DailyVisitorTracker,
    FileStorage,
    MemoryStorage,
    current_local_date,
    new_session_id,
)
from site_client import BackendError


class BrokenStorage:
    """Storage where every access fails (disabled / private mode)."""

    def get_item(self, key):
        raise OSError("storage disabled")

    def set_item(self, key, value):
        raise OSError("quota exceeded")


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def tracker(container, storage, today):
    return DailyVisitorTracker(container.analytics, container.users, storage, today=today)


class TestHelpers:
    def test_local_date_format(self):
        assert current_local_date(lambda: date(2026, 1, 5)) == "2026-01-05"

    def test_session_id_format(self):
        assert re.fullmatch(r"visitor_\d+_[a-z0-9]{13}", new_session_id())

    def test_session_ids_are_random(self):
        assert new_session_id() != new_session_id()


class TestTracking:
    @pytest.mark.asyncio
    async def test_first_visit_is_reported_and_marked(self, tracker, storage, backend):
        ack = await tracker.track(is_admin=False)

        assert ack.count == 1
        assert backend.calls["track_unique_visitor"] == 1
        assert storage.get_item(LAST_TRACKED_KEY) == "2026-10-17"

    @pytest.mark.asyncio
    async def test_second_visit_same_day_is_not_reported(self, tracker, backend):
        await tracker.track(is_admin=False)
        assert await tracker.track(is_admin=False) is None
        assert backend.calls["track_unique_visitor"] == 1

    @pytest.mark.asyncio
    async def test_next_day_is_reported_with_same_session(self, tracker, storage, today, backend):
        await tracker.track(is_admin=False)
        session_id = storage.get_item(SESSION_ID_KEY)

        today.day = date(2026, 10, 18)
        backend.day_key = "2026-10-18"
        ack = await tracker.track(is_admin=False)

        assert ack.day_key == "2026-10-18"
        assert backend.calls["track_unique_visitor"] == 2
        assert storage.get_item(SESSION_ID_KEY) == session_id
        assert storage.get_item(LAST_TRACKED_KEY) == "2026-10-18"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("is_admin", [True, None])
    async def test_admin_or_unknown_status_is_not_reported(self, tracker, storage, backend, is_admin):
        assert await tracker.track(is_admin=is_admin) is None
        assert backend.calls["track_unique_visitor"] == 0
        assert storage.get_item(LAST_TRACKED_KEY) is None

    @pytest.mark.asyncio
    async def test_failed_report_is_retried_next_load(self, tracker, storage, backend):
        backend.fail["track_unique_visitor"] = BackendError(503, "unavailable")
        assert await tracker.track(is_admin=False) is None
        assert storage.get_item(LAST_TRACKED_KEY) is None

        del backend.fail["track_unique_visitor"]
        assert (await tracker.track(is_admin=False)).count == 1

    @pytest.mark.asyncio
    async def test_report_refreshes_observed_analytics(self, container, tracker, backend):
        seen = []
        await container.analytics.data()
        container.analytics.watch(keys.ANALYTICS, seen.append)

        await tracker.track(is_admin=False)

        assert seen[-1].daily_visitors == [("2026-10-17", 1)]


class TestPageLoad:
    @pytest.mark.asyncio
    async def test_non_admin_page_load(self, tracker, backend):
        ack = await tracker.on_page_load()
        assert ack is not None
        assert backend.calls["track_page_visit"] == 1
        assert backend.calls["is_caller_admin"] == 1

    @pytest.mark.asyncio
    async def test_admin_page_load_is_not_counted(self, tracker, backend):
        backend.admin = True
        assert await tracker.on_page_load() is None
        assert backend.calls["track_unique_visitor"] == 0

    @pytest.mark.asyncio
    async def test_admin_check_failure_is_not_counted(self, tracker, backend):
        backend.fail["is_caller_admin"] = BackendError(500, "boom")
        assert await tracker.on_page_load() is None
        assert backend.calls["track_unique_visitor"] == 0


class TestStorageUnavailable:
    @pytest.mark.asyncio
    async def test_broken_storage_tracks_every_load(self, container, today, backend):
        tracker = DailyVisitorTracker(container.analytics, container.users, BrokenStorage(), today=today)

        assert await tracker.track(is_admin=False) is not None
        assert await tracker.track(is_admin=False) is not None
        assert backend.calls["track_unique_visitor"] == 2

    @pytest.mark.asyncio
    async def test_file_storage_persists_markers(self, container, today, tmp_path, backend):
        path = tmp_path / "profile" / "storage.json"
        first = DailyVisitorTracker(container.analytics, container.users, FileStorage(path), today=today)
        await first.track(is_admin=False)

        second = DailyVisitorTracker(container.analytics, container.users, FileStorage(path), today=today)
        assert not second.should_track_today()
        assert second.session_id() == first.session_id()

    @pytest.mark.asyncio
    async def test_corrupted_file_degrades(self, container, today, tmp_path, backend):
        path = tmp_path / "storage.json"
        path.write_text("[not json", encoding="utf-8")
        tracker = DailyVisitorTracker(container.analytics, container.users, FileStorage(path), today=today)

        assert tracker.should_track_today()
        assert await tracker.track(is_admin=False) is not None
