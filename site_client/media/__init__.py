"""MP3 player API client."""

from site_client.media.client import MediaClient
from site_client.media.schemas import Mp3Track, Playlist

__all__ = [
    "MediaClient",
    "Mp3Track",
    "Playlist",
]
