"""Tests for the mutation invalidation table."""

import inspect
import re

import pytest

from app import services
from app.cache import INVALIDATIONS, keys, prefixes_for

_MUTATION_NAME = re.compile(r'_(?:mutate|event)\(\s*"([a-z_]+)"')


def declared_mutations() -> set[str]:
    """Every mutation name passed to BaseService._mutate by a service module."""
    names = set()
    for module in (
        services.blog,
        services.store,
        services.meetings,
        services.pages,
        services.links,
        services.livestreams,
        services.media,
        services.analytics,
        services.users,
    ):
        names.update(_MUTATION_NAME.findall(inspect.getsource(module)))
    return names


class TestTable:
    def test_every_prefix_is_a_known_query(self):
        for name, prefixes in INVALIDATIONS.items():
            for prefix in prefixes:
                assert prefix in keys.ALL_PREFIXES, f"{name} invalidates unknown {prefix}"

    def test_every_service_mutation_is_declared(self):
        names = declared_mutations()
        assert "create_blog_post" in names
        assert names <= set(INVALIDATIONS)

    def test_undeclared_mutation_raises(self):
        with pytest.raises(KeyError):
            prefixes_for("drop_everything")

    def test_reorder_tracks_covers_both_track_lists(self):
        assert set(prefixes_for("reorder_mp3_tracks")) >= {keys.TRACKS, keys.TRACKS_BY_PLAYLIST}

    def test_booking_covers_slots_and_appointments(self):
        prefixes = set(prefixes_for("book_appointment"))
        assert {keys.AVAILABLE_SLOTS, keys.MY_APPOINTMENTS} <= prefixes

    def test_saving_profile_touches_only_own_profile(self):
        assert prefixes_for("save_caller_profile") == (keys.CURRENT_USER_PROFILE,)

    def test_checkout_invalidates_nothing(self):
        assert prefixes_for("create_checkout_session") == ()


class TestKeys:
    def test_prefix_matching_is_element_wise(self):
        assert keys.matches(("tracks_by_playlist", "p1"), keys.TRACKS_BY_PLAYLIST)
        assert not keys.matches(("tracks_by_playlist", "p1"), keys.TRACKS)
        assert not keys.matches(keys.TRACKS, keys.with_params(keys.TRACKS_BY_PLAYLIST, "p1"))
