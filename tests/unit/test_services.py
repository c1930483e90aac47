"""Tests for domain services against the in-memory backend."""

import asyncio

import pytest

from app.cache import keys
from app.connection import Connection, ConnectionState
from app.errors import BackendUnavailableError, ValidationError
from site_client import BackendError, ExternalBlob
from site_client.blog import BlogPost
from site_client.meetings import MeetingSlot
from site_client.store import ProductKind, ProductType
from site_client.users import UserProfile


class TestBlog:
    @pytest.mark.asyncio
    async def test_create_read_delete(self, container, backend):
        post_id = await container.blog.create_post("A", "B", "C")
        assert isinstance(post_id, str)

        posts = await container.blog.all_posts()
        assert [(p.id, p.title, p.content, p.excerpt) for p in posts] == [(post_id, "A", "B", "C")]

        await container.blog.delete_post(post_id)
        assert await container.blog.all_posts() == []

    @pytest.mark.asyncio
    async def test_reads_are_cached_until_a_mutation(self, container, backend):
        await container.blog.all_posts()
        await container.blog.all_posts()
        assert backend.calls["blog_posts"] == 1

        await container.blog.create_post("A", "B", "C")
        await container.blog.all_posts()
        assert backend.calls["blog_posts"] == 2

    @pytest.mark.asyncio
    async def test_update_refreshes_single_post_query(self, container, backend):
        post_id = await container.blog.create_post("A", "B", "C")
        post = await container.blog.post(post_id)

        await container.blog.update_post(post.model_copy(update={"title": "A2"}))
        assert (await container.blog.post(post_id)).title == "A2"

    @pytest.mark.asyncio
    async def test_missing_post_is_none(self, container):
        assert await container.blog.post("nope") is None
        assert await container.blog.post("") is None

    @pytest.mark.asyncio
    async def test_empty_title_is_rejected_before_backend(self, container, backend):
        with pytest.raises(ValidationError):
            await container.blog.create_post("  ", "B", "C")
        assert backend.calls["create_blog_post"] == 0

    @pytest.mark.asyncio
    async def test_backend_rejection_propagates_without_invalidation(self, container, backend):
        await container.blog.all_posts()

        with pytest.raises(BackendError) as exc:
            await container.blog.update_post(BlogPost(id="missing", title="T", content=""))
        assert exc.value.status_code == 404
        assert not container.cache.get_entry(keys.BLOG_POSTS).invalidated


class TestStore:
    @pytest.mark.asyncio
    async def test_concurrent_reads_issue_one_call(self, container, backend):
        backend.gate = asyncio.Event()
        first = asyncio.create_task(container.store.all_items())
        second = asyncio.create_task(container.store.all_items())
        await asyncio.sleep(0)
        backend.gate.set()

        a, b = await asyncio.gather(first, second)
        assert backend.calls["store_items"] == 1
        assert a == b

    @pytest.mark.asyncio
    async def test_add_item_refreshes_list(self, container):
        assert await container.store.all_items() == []
        await container.store.add_item(
            "Shirt",
            "Cotton",
            2500,
            ExternalBlob(url="https://blobs.example.com/shirt.png"),
            ProductType(kind=ProductKind.CLOTHING),
        )
        items = await container.store.all_items()
        assert [(i.title, i.price) for i in items] == [("Shirt", 2500)]

    @pytest.mark.asyncio
    async def test_negative_price_is_rejected(self, container, backend):
        with pytest.raises(ValidationError):
            await container.store.add_item(
                "Shirt",
                "",
                -1,
                ExternalBlob(url="https://blobs.example.com/shirt.png"),
                ProductType(kind=ProductKind.OTHER, other="misc"),
            )
        assert backend.calls["add_store_item"] == 0

    @pytest.mark.asyncio
    async def test_empty_checkout_is_rejected(self, container):
        with pytest.raises(ValidationError):
            await container.store.create_checkout_session([], "https://shop/ok", "https://shop/cancel")


class TestMeetings:
    @pytest.mark.asyncio
    async def test_booking_refreshes_available_slots_and_appointments(self, container, backend):
        backend.slots["s1"] = MeetingSlot(id="s1", start_time=1_700_000_000_000_000_000, duration_minutes=30)
        assert len(await container.meetings.available_slots()) == 1
        assert await container.meetings.my_appointments() == []

        await container.meetings.book("Ada", "s1")

        assert await container.meetings.available_slots() == []
        assert [a.customer_name for a in await container.meetings.my_appointments()] == ["Ada"]
        assert backend.calls["available_meeting_slots"] == 2

    @pytest.mark.asyncio
    async def test_conflict_propagates(self, container, backend):
        backend.slots["s1"] = MeetingSlot(id="s1", start_time=0, duration_minutes=30, is_booked=True)
        with pytest.raises(BackendError):
            await container.meetings.book("Ada", "s1")


class TestLinks:
    @pytest.mark.asyncio
    async def test_malformed_url_is_rejected(self, container, backend):
        with pytest.raises(ValidationError):
            await container.links.add_link("Docs", "not a url")
        assert backend.calls["add_link"] == 0

    @pytest.mark.asyncio
    async def test_add_link(self, container):
        await container.links.add_link("Docs", "https://example.com/docs", order=1)
        assert [link.url for link in await container.links.all_links()] == ["https://example.com/docs"]


class TestMedia:
    @pytest.mark.asyncio
    async def test_reorder_refreshes_both_track_lists(self, container, backend):
        backend.add_track("t1", "p1", 0)
        backend.add_track("t2", "p1", 1)
        seen_all, seen_playlist = [], []

        await container.media.all_tracks()
        await container.media.tracks_by_playlist("p1")
        container.media.watch(keys.TRACKS, seen_all.append)
        container.media.watch(keys.with_params(keys.TRACKS_BY_PLAYLIST, "p1"), seen_playlist.append)

        await container.media.reorder_tracks("p1", ["t2", "t1"])

        assert backend.calls["mp3_tracks"] == 2
        assert backend.calls["mp3_tracks_by_playlist"] == 2
        assert [t.id for t in seen_all[-1]] == ["t2", "t1"]
        assert [t.id for t in seen_playlist[-1]] == ["t2", "t1"]

    @pytest.mark.asyncio
    async def test_playlists_do_not_share_cache_entries(self, container, backend):
        backend.add_track("t1", "p1", 0)
        backend.add_track("t2", "p2", 0)

        assert [t.id for t in await container.media.tracks_by_playlist("p1")] == ["t1"]
        assert [t.id for t in await container.media.tracks_by_playlist("p2")] == ["t2"]


class TestUsers:
    @pytest.mark.asyncio
    async def test_saving_profile_only_invalidates_own_profile(self, container, backend):
        await container.users.caller_profile()
        await container.blog.all_posts()

        await container.users.save_caller_profile(UserProfile(name="Ada", email="ada@example.com"))

        assert container.cache.get_entry(keys.CURRENT_USER_PROFILE).invalidated
        assert not container.cache.get_entry(keys.BLOG_POSTS).invalidated
        assert (await container.users.caller_profile()).name == "Ada"


class TestUnavailableBackend:
    @pytest.fixture
    def offline(self, container):
        container.connection.state = ConnectionState.FAILED
        return container

    @pytest.mark.asyncio
    async def test_reads_degrade_to_defaults(self, offline, backend):
        assert await offline.blog.all_posts() == []
        assert await offline.blog.post("p1") is None
        assert await offline.users.is_admin() is None
        assert await offline.pages.site_content() is None
        assert sum(backend.calls.values()) == 0

    @pytest.mark.asyncio
    async def test_writes_raise(self, offline, backend):
        with pytest.raises(BackendUnavailableError):
            await offline.blog.create_post("A", "B", "C")
        assert backend.calls["create_blog_post"] == 0

    @pytest.mark.asyncio
    async def test_telemetry_is_dropped(self, offline, backend):
        await offline.analytics.track_page_visit("home")
        assert backend.calls["track_page_visit"] == 0

    @pytest.mark.asyncio
    async def test_read_errors_degrade_to_defaults(self, container, backend):
        backend.fail["blog_posts"] = BackendError(500, "internal")
        assert await container.blog.all_posts() == []

    @pytest.mark.asyncio
    async def test_failed_connection_is_reported(self):
        def broken_factory():
            raise OSError("connection refused")

        connection = Connection(broken_factory)
        assert await connection.connect() == ConnectionState.FAILED
        assert isinstance(connection.error, OSError)
        with pytest.raises(BackendUnavailableError):
            connection.handle


class TestLogout:
    @pytest.mark.asyncio
    async def test_read_pending_at_logout_degrades(self, container, backend):
        backend.gate = asyncio.Event()
        read = asyncio.create_task(container.blog.all_posts())
        await asyncio.sleep(0)

        await container.logout()

        assert await read == []
        assert len(container.cache) == 0

    @pytest.mark.asyncio
    async def test_cancelled_reader_is_still_cancelled(self, container, backend):
        backend.gate = asyncio.Event()
        read = asyncio.create_task(container.blog.all_posts())
        await asyncio.sleep(0)

        read.cancel()

        with pytest.raises(asyncio.CancelledError):
            await read
        assert read.cancelled()
        backend.gate.set()
        assert await container.blog.all_posts() == []
