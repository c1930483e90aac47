"""Shared fixtures - in-memory backend standing in for SiteClient."""

import asyncio
from collections import Counter
from datetime import date

import pytest

from app.container import Container
from app.visitors import MemoryStorage
from site_client import BackendError, ExternalBlob
from site_client.analytics import AnalyticsData, VisitorAck
from site_client.blog import BlogPost
from site_client.media import Mp3Track
from site_client.meetings import Appointment, MeetingSlot
from site_client.pages import LinkItem
from site_client.store import StoreItem
from site_client.users import UserProfile


class FakeBackend:
    """In-memory backend with call counting, a read gate and failure injection."""

    def __init__(self):
        self.calls: Counter[str] = Counter()
        self.gate: asyncio.Event | None = None
        self.fail: dict[str, Exception] = {}
        self.admin = False
        self.posts: dict[str, BlogPost] = {}
        self.items: dict[str, StoreItem] = {}
        self.tracks: dict[str, Mp3Track] = {}
        self.slots: dict[str, MeetingSlot] = {}
        self.appointments: dict[str, Appointment] = {}
        self.links_: dict[str, LinkItem] = {}
        self.profile: UserProfile | None = None
        self.visitors: dict[str, set[str]] = {}
        self.day_key = "2026-10-17"
        self._next_id = 0

    async def _call(self, name: str) -> None:
        self.calls[name] += 1
        if self.gate is not None:
            await self.gate.wait()
        if name in self.fail:
            raise self.fail[name]

    def _id(self, prefix: str) -> str:
        self._next_id += 1
        return f"{prefix}-{self._next_id}"

    # Blog
    async def blog_posts(self):
        await self._call("blog_posts")
        return list(self.posts.values())

    async def blog_post(self, post_id):
        await self._call("blog_post")
        return self.posts.get(post_id)

    async def create_blog_post(self, title, content, excerpt):
        await self._call("create_blog_post")
        post_id = self._id("post")
        self.posts[post_id] = BlogPost(id=post_id, title=title, content=content, excerpt=excerpt)
        return post_id

    async def update_blog_post(self, post_id, title, content, excerpt):
        await self._call("update_blog_post")
        if post_id not in self.posts:
            raise BackendError(404, "Blog post not found")
        self.posts[post_id] = self.posts[post_id].model_copy(
            update={"title": title, "content": content, "excerpt": excerpt}
        )

    async def delete_blog_post(self, post_id):
        await self._call("delete_blog_post")
        self.posts.pop(post_id, None)

    # Store
    async def store_items(self):
        await self._call("store_items")
        return list(self.items.values())

    async def add_store_item(self, title, description, price, cover_image, product_type, preview_images):
        await self._call("add_store_item")
        item_id = self._id("item")
        self.items[item_id] = StoreItem(
            id=item_id,
            title=title,
            description=description,
            price=price,
            cover_image=cover_image,
            product_type=product_type,
            preview_images=preview_images,
        )
        return item_id

    # Meetings
    async def available_meeting_slots(self):
        await self._call("available_meeting_slots")
        return [s for s in self.slots.values() if not s.is_booked]

    async def meeting_slots(self):
        await self._call("meeting_slots")
        return list(self.slots.values())

    async def my_appointments(self):
        await self._call("my_appointments")
        return list(self.appointments.values())

    async def book_appointment(self, customer_name, time_slot_id):
        await self._call("book_appointment")
        slot = self.slots[time_slot_id]
        if slot.is_booked:
            raise BackendError(409, "Slot already booked")
        self.slots[time_slot_id] = slot.model_copy(update={"is_booked": True})
        appointment_id = self._id("appt")
        self.appointments[appointment_id] = Appointment(
            id=appointment_id, customer_name=customer_name, time_slot_id=time_slot_id, booked_by="caller"
        )
        return appointment_id

    # Links
    async def links(self):
        await self._call("links")
        return sorted(self.links_.values(), key=lambda link: link.order)

    async def add_link(self, text_label, url, order):
        await self._call("add_link")
        link_id = self._id("link")
        self.links_[link_id] = LinkItem(id=link_id, text_label=text_label, url=url, order=order)
        return link_id

    # Media
    async def mp3_tracks(self):
        await self._call("mp3_tracks")
        return sorted(self.tracks.values(), key=lambda t: (t.playlist_id, t.order))

    async def mp3_tracks_by_playlist(self, playlist_id):
        await self._call("mp3_tracks_by_playlist")
        tracks = [t for t in self.tracks.values() if t.playlist_id == playlist_id]
        return sorted(tracks, key=lambda t: t.order)

    async def upload_mp3_track(self, title, artist, duration, file, playlist_id, order):
        await self._call("upload_mp3_track")
        track_id = self._id("track")
        self.tracks[track_id] = Mp3Track(
            id=track_id,
            title=title,
            artist=artist,
            duration=duration,
            file=file,
            playlist_id=playlist_id,
            order=order,
        )
        return track_id

    async def reorder_mp3_tracks(self, playlist_id, new_order):
        await self._call("reorder_mp3_tracks")
        for position, track_id in enumerate(new_order):
            self.tracks[track_id] = self.tracks[track_id].model_copy(update={"order": position})

    # Analytics
    async def analytics_data(self):
        await self._call("analytics_data")
        return AnalyticsData(daily_visitors=[(day, len(ids)) for day, ids in self.visitors.items()])

    async def track_page_visit(self, page):
        await self._call("track_page_visit")

    async def track_unique_visitor(self, session_id):
        await self._call("track_unique_visitor")
        day = self.visitors.setdefault(self.day_key, set())
        day.add(session_id)
        return VisitorAck(day_key=self.day_key, count=len(day))

    # Users
    async def is_caller_admin(self):
        await self._call("is_caller_admin")
        return self.admin

    async def caller_profile(self):
        await self._call("caller_profile")
        return self.profile

    async def save_caller_profile(self, profile):
        await self._call("save_caller_profile")
        self.profile = profile

    # Seeding
    def add_track(self, track_id: str, playlist_id: str, order: int) -> Mp3Track:
        track = Mp3Track(
            id=track_id,
            title=f"Track {track_id}",
            file=ExternalBlob(url=f"https://blobs.example.com/{track_id}.mp3"),
            playlist_id=playlist_id,
            order=order,
        )
        self.tracks[track_id] = track
        return track


class FixedDay:
    """Controllable `today` callable."""

    def __init__(self, day: date):
        self.day = day

    def __call__(self) -> date:
        return self.day


@pytest.fixture
def today() -> FixedDay:
    return FixedDay(date(2026, 10, 17))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def container(backend: FakeBackend) -> Container:
    """Container wired to the fake backend, with in-memory storage."""
    c = Container(storage=MemoryStorage(), stale_time=60.0, gc_time=300.0)
    c.connection.attach(backend)
    return c
