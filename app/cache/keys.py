"""Query keys - (operation, *params) tuples addressing cache entries."""

QueryKey = tuple

# Blog
BLOG_POSTS: QueryKey = ("blog_posts",)
BLOG_POST: QueryKey = ("blog_post",)

# Store
STORE_ITEMS: QueryKey = ("store_items",)
STORE_ITEM: QueryKey = ("store_item",)
STRIPE_CONFIGURED: QueryKey = ("stripe_configured",)
STRIPE_SESSION: QueryKey = ("stripe_session",)

# Meetings
AVAILABLE_SLOTS: QueryKey = ("available_slots",)
ALL_SLOTS: QueryKey = ("all_slots",)
MEETING_SLOT: QueryKey = ("meeting_slot",)
MY_APPOINTMENTS: QueryKey = ("my_appointments",)
ALL_APPOINTMENTS: QueryKey = ("all_appointments",)

# Pages
SITE_CONTENT: QueryKey = ("site_content",)
HOMEPAGE_SECTIONS: QueryKey = ("homepage_sections",)
LINKS: QueryKey = ("links",)
LIVESTREAMS: QueryKey = ("livestreams",)
LIVESTREAM: QueryKey = ("livestream",)

# Media
TRACKS: QueryKey = ("tracks",)
TRACKS_BY_PLAYLIST: QueryKey = ("tracks_by_playlist",)
PLAYLISTS: QueryKey = ("playlists",)
PUBLIC_PLAYLISTS: QueryKey = ("public_playlists",)
TRACK_PLAY_COUNTS: QueryKey = ("track_play_counts",)
TRACK_PLAY_COUNT: QueryKey = ("track_play_count",)

# Analytics
ANALYTICS: QueryKey = ("analytics",)

# Users
CURRENT_USER_PROFILE: QueryKey = ("current_user_profile",)
USER_PROFILE: QueryKey = ("user_profile",)
IS_ADMIN: QueryKey = ("is_admin",)
CALLER_ROLE: QueryKey = ("caller_role",)


def with_params(prefix: QueryKey, *params) -> QueryKey:
    """Key for a parameterised query, e.g. with_params(BLOG_POST, post_id)."""
    return prefix + params


def matches(key: QueryKey, prefix: QueryKey) -> bool:
    """True if key starts with prefix (element-wise)."""
    return key[: len(prefix)] == prefix


ALL_PREFIXES: frozenset[QueryKey] = frozenset(
    v for k, v in list(globals().items()) if k.isupper() and isinstance(v, tuple)
)
