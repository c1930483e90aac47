"""Media service - MP3 tracks, playlists and play counts."""

from app.cache import keys
from app.errors import require_text, validate_non_negative
from app.services.base import BaseService
from site_client.media import Mp3Track, Playlist
from site_client.schemas import ExternalBlob


class MediaService(BaseService):
    """MP3 player queries and mutations."""

    async def all_tracks(self) -> list[Mp3Track]:
        return await self._query(keys.TRACKS, lambda c: c.mp3_tracks(), [])

    async def tracks_by_playlist(self, playlist_id: str) -> list[Mp3Track]:
        if not playlist_id:
            return []
        return await self._query(
            keys.with_params(keys.TRACKS_BY_PLAYLIST, playlist_id),
            lambda c: c.mp3_tracks_by_playlist(playlist_id),
            [],
        )

    async def upload_track(
        self,
        title: str,
        artist: str,
        duration: int,
        file: ExternalBlob,
        playlist_id: str,
        order: int = 0,
    ) -> str:
        """Register an uploaded audio blob as a track, returns the track id."""
        require_text(title, "title")
        require_text(playlist_id, "playlist")
        validate_non_negative(duration, "duration")
        return await self._mutate(
            "upload_mp3_track",
            lambda c: c.upload_mp3_track(title, artist, duration, file, playlist_id, order),
        )

    async def update_track(self, track: Mp3Track) -> None:
        require_text(track.title, "title")
        validate_non_negative(track.duration, "duration")
        await self._mutate("update_mp3_track", lambda c: c.update_mp3_track(track))

    async def delete_track(self, track_id: str) -> None:
        await self._mutate("delete_mp3_track", lambda c: c.delete_mp3_track(track_id))

    async def reorder_tracks(self, playlist_id: str, new_order: list[str]) -> None:
        await self._mutate("reorder_mp3_tracks", lambda c: c.reorder_mp3_tracks(playlist_id, new_order))

    async def toggle_track(self, track_id: str, visible: bool) -> None:
        await self._mutate(
            "toggle_mp3_track_visibility",
            lambda c: c.toggle_mp3_track_visibility(track_id, visible),
        )

    # ========== Playlists ==========

    async def all_playlists(self) -> list[Playlist]:
        return await self._query(keys.PLAYLISTS, lambda c: c.playlists(), [])

    async def public_playlists(self) -> list[Playlist]:
        return await self._query(keys.PUBLIC_PLAYLISTS, lambda c: c.public_playlists(), [])

    async def create_playlist(self, name: str) -> str:
        require_text(name, "playlist name")
        return await self._mutate("create_playlist", lambda c: c.create_playlist(name.strip()))

    async def update_playlist(self, playlist: Playlist) -> None:
        require_text(playlist.name, "playlist name")
        await self._mutate("update_playlist", lambda c: c.update_playlist(playlist))

    async def toggle_playlist(self, playlist_id: str, visible: bool) -> None:
        await self._mutate(
            "toggle_playlist_visibility",
            lambda c: c.toggle_playlist_visibility(playlist_id, visible),
        )

    # ========== Play counts ==========

    async def play_counts(self) -> list[tuple[str, int]]:
        return await self._query(keys.TRACK_PLAY_COUNTS, lambda c: c.track_play_counts(), [])

    async def play_count(self, track_id: str) -> int:
        if not track_id:
            return 0
        return await self._query(
            keys.with_params(keys.TRACK_PLAY_COUNT, track_id),
            lambda c: c.track_play_count(track_id),
            0,
        )

    async def increment_play_count(self, track_id: str) -> None:
        await self._mutate("increment_play_count", lambda c: c.increment_play_count(track_id))

    async def reset_play_count(self, track_id: str) -> None:
        await self._mutate("reset_track_play_count", lambda c: c.reset_track_play_count(track_id))

    async def reset_all_play_counts(self) -> None:
        await self._mutate("reset_all_track_play_counts", lambda c: c.reset_all_track_play_counts())
