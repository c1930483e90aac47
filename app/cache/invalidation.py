"""Invalidation table - which query prefixes each mutation makes stale."""

from app.cache import keys

_BLOG = (keys.BLOG_POSTS, keys.BLOG_POST)
_STORE = (keys.STORE_ITEMS, keys.STORE_ITEM)
_SLOTS = (keys.AVAILABLE_SLOTS, keys.ALL_SLOTS, keys.MEETING_SLOT)
_APPOINTMENTS = _SLOTS + (keys.MY_APPOINTMENTS, keys.ALL_APPOINTMENTS)
_LIVESTREAMS = (keys.LIVESTREAMS, keys.LIVESTREAM)
_TRACKS = (keys.TRACKS, keys.TRACKS_BY_PLAYLIST)
_PLAY_COUNTS = _TRACKS + (keys.TRACK_PLAY_COUNTS, keys.TRACK_PLAY_COUNT)
_PLAYLISTS = (keys.PLAYLISTS, keys.PUBLIC_PLAYLISTS)

INVALIDATIONS: dict[str, tuple[keys.QueryKey, ...]] = {
    # Blog
    "create_blog_post": _BLOG,
    "update_blog_post": _BLOG,
    "update_excerpt": _BLOG,
    "delete_blog_post": _BLOG,
    "add_blog_file": _BLOG,
    "delete_blog_file": _BLOG,
    "add_blog_image": _BLOG,
    "update_blog_image": _BLOG,
    "delete_blog_image": _BLOG,
    "update_blog_title": (keys.SITE_CONTENT,),
    "update_blog_description": (keys.SITE_CONTENT,),
    # Store
    "add_store_item": _STORE,
    "update_store_item": _STORE,
    "create_checkout_session": (),
    "set_stripe_configuration": (keys.STRIPE_CONFIGURED,),
    # Meetings
    "add_meeting_slot": _SLOTS,
    "update_meeting_slot": _SLOTS,
    "book_appointment": _APPOINTMENTS,
    "cancel_appointment": _APPOINTMENTS,
    # Pages
    "update_site_content": (keys.SITE_CONTENT,),
    "update_business_title": (keys.SITE_CONTENT,),
    "add_homepage_section": (keys.HOMEPAGE_SECTIONS,),
    "update_homepage_section": (keys.HOMEPAGE_SECTIONS,),
    "delete_homepage_section": (keys.HOMEPAGE_SECTIONS,),
    "reorder_homepage_sections": (keys.HOMEPAGE_SECTIONS,),
    "toggle_section_visibility": (keys.HOMEPAGE_SECTIONS,),
    # Links
    "add_link": (keys.LINKS,),
    "update_link": (keys.LINKS,),
    "delete_link": (keys.LINKS,),
    "reorder_links": (keys.LINKS,),
    # Livestreams
    "add_livestream": _LIVESTREAMS,
    "update_livestream": _LIVESTREAMS,
    "delete_livestream": _LIVESTREAMS,
    # Media
    "upload_mp3_track": _TRACKS,
    "update_mp3_track": _TRACKS,
    "delete_mp3_track": _PLAY_COUNTS,
    "reorder_mp3_tracks": _TRACKS,
    "toggle_mp3_track_visibility": _TRACKS,
    "increment_play_count": _PLAY_COUNTS,
    "reset_track_play_count": _PLAY_COUNTS,
    "reset_all_track_play_counts": _PLAY_COUNTS,
    "create_playlist": _PLAYLISTS,
    "update_playlist": _PLAYLISTS,
    "toggle_playlist_visibility": _PLAYLISTS,
    # Analytics
    "track_unique_visitor": (keys.ANALYTICS,),
    "track_page_visit": (keys.ANALYTICS,),
    "track_element_click": (keys.ANALYTICS,),
    "track_section_view": (keys.ANALYTICS,),
    # Users - own profile only, never data visible to other callers
    "save_caller_profile": (keys.CURRENT_USER_PROFILE,),
    "assign_user_role": (keys.IS_ADMIN, keys.CALLER_ROLE),
}


def prefixes_for(mutation: str) -> tuple[keys.QueryKey, ...]:
    """Prefixes to invalidate after `mutation` succeeds. KeyError if undeclared."""
    return INVALIDATIONS[mutation]
