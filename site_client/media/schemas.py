"""MP3 player API schemas."""

from pydantic import BaseModel, Field

from site_client.schemas import ExternalBlob


class Mp3Track(BaseModel):
    """Audio track within a playlist. Duration in seconds."""

    id: str
    title: str
    artist: str = ""
    duration: int = 0
    order: int = 0
    file: ExternalBlob
    playlist_id: str = Field(alias="playlistId")
    play_count: int = Field(alias="playCount", default=0)
    visible: bool = True

    class Config:
        populate_by_name = True


class Playlist(BaseModel):
    """Ordered playlist."""

    id: str
    name: str
    order: int = 0
    visible: bool = True
