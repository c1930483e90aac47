"""Shared API schemas."""

from pydantic import BaseModel

# Nanoseconds since epoch (signed 64-bit on the backend)
Time = int


class ExternalBlob(BaseModel):
    """Externally stored binary payload (image, audio file)."""

    url: str

    @property
    def direct_url(self) -> str:
        return self.url
