"""MP3 player API client - tracks, playlists, play counts."""

from site_client.base import BaseClient
from site_client.media.schemas import Mp3Track, Playlist
from site_client.schemas import ExternalBlob


class MediaClient(BaseClient):
    """Client for MP3 track and playlist endpoints."""

    async def mp3_tracks(self) -> list[Mp3Track]:
        """GET /media/tracks - all tracks."""
        return [Mp3Track.model_validate(t) for t in await self._get("media/tracks")]

    async def mp3_tracks_by_playlist(self, playlist_id: str) -> list[Mp3Track]:
        """GET /media/playlists/{id}/tracks - tracks of one playlist."""
        return [Mp3Track.model_validate(t) for t in await self._get(f"media/playlists/{playlist_id}/tracks")]

    async def upload_mp3_track(
        self,
        title: str,
        artist: str,
        duration: int,
        file: ExternalBlob,
        playlist_id: str,
        order: int,
    ) -> str:
        """POST /media/tracks - returns new track id."""
        return await self._post(
            "media/tracks",
            {
                "title": title,
                "artist": artist,
                "duration": duration,
                "file": file.model_dump(),
                "playlistId": playlist_id,
                "order": order,
            },
        )

    async def update_mp3_track(self, track: Mp3Track) -> None:
        """PUT /media/tracks/{id} - metadata only, the audio file is immutable."""
        await self._put(
            f"media/tracks/{track.id}",
            {
                "title": track.title,
                "artist": track.artist,
                "duration": track.duration,
                "playlistId": track.playlist_id,
                "visible": track.visible,
                "order": track.order,
            },
        )

    async def delete_mp3_track(self, track_id: str) -> None:
        """DELETE /media/tracks/{id}."""
        await self._delete(f"media/tracks/{track_id}")

    async def reorder_mp3_tracks(self, playlist_id: str, new_order: list[str]) -> None:
        """PUT /media/playlists/{id}/order - track ids in play order."""
        await self._put(f"media/playlists/{playlist_id}/order", {"order": new_order})

    async def toggle_mp3_track_visibility(self, track_id: str, visible: bool) -> None:
        """PUT /media/tracks/{id}/visibility."""
        await self._put(f"media/tracks/{track_id}/visibility", {"visible": visible})

    # ========== Playlists ==========

    async def playlists(self) -> list[Playlist]:
        """GET /media/playlists - all playlists (admin)."""
        return [Playlist.model_validate(p) for p in await self._get("media/playlists")]

    async def public_playlists(self) -> list[Playlist]:
        """GET /media/playlists/public - visible playlists."""
        return [Playlist.model_validate(p) for p in await self._get("media/playlists/public")]

    async def create_playlist(self, name: str) -> str:
        """POST /media/playlists - returns new playlist id."""
        return await self._post("media/playlists", {"name": name})

    async def update_playlist(self, playlist: Playlist) -> None:
        """PUT /media/playlists/{id}."""
        await self._put(f"media/playlists/{playlist.id}", playlist.model_dump())

    async def toggle_playlist_visibility(self, playlist_id: str, visible: bool) -> None:
        """PUT /media/playlists/{id}/visibility."""
        await self._put(f"media/playlists/{playlist_id}/visibility", {"visible": visible})

    # ========== Play counts ==========

    async def increment_play_count(self, track_id: str) -> None:
        """POST /media/tracks/{id}/plays."""
        await self._post(f"media/tracks/{track_id}/plays")

    async def track_play_count(self, track_id: str) -> int:
        """GET /media/tracks/{id}/plays."""
        return int(await self._get(f"media/tracks/{track_id}/plays"))

    async def track_play_counts(self) -> list[tuple[str, int]]:
        """GET /media/plays - (track id, count) pairs."""
        return [(track_id, int(count)) for track_id, count in await self._get("media/plays")]

    async def reset_track_play_count(self, track_id: str) -> None:
        """DELETE /media/tracks/{id}/plays."""
        await self._delete(f"media/tracks/{track_id}/plays")

    async def reset_all_track_play_counts(self) -> None:
        """DELETE /media/plays."""
        await self._delete("media/plays")
