"""Livestream service - livestream announcements."""

from app.cache import keys
from app.errors import require_text, validate_url
from app.services.base import BaseService
from site_client.pages import Livestream
from site_client.schemas import Time


class LivestreamService(BaseService):
    """Livestream queries and mutations."""

    async def all_livestreams(self) -> list[Livestream]:
        return await self._query(keys.LIVESTREAMS, lambda c: c.livestreams(), [])

    async def livestream(self, stream_id: str) -> Livestream | None:
        if not stream_id:
            return None
        return await self._query(
            keys.with_params(keys.LIVESTREAM, stream_id),
            lambda c: c.livestream(stream_id),
            None,
        )

    async def add_livestream(
        self,
        title: str,
        start_time: Time,
        external_link: str,
        button_label: str = "",
        description: str = "",
    ) -> str:
        require_text(title, "title")
        validate_url(external_link, "external link")
        return await self._mutate(
            "add_livestream",
            lambda c: c.add_livestream(title, start_time, external_link, button_label, description),
        )

    async def update_livestream(self, stream: Livestream) -> None:
        require_text(stream.title, "title")
        validate_url(stream.external_link, "external link")
        await self._mutate("update_livestream", lambda c: c.update_livestream(stream))

    async def delete_livestream(self, stream_id: str) -> None:
        await self._mutate("delete_livestream", lambda c: c.delete_livestream(stream_id))
