"""Link service - link list entries."""

from app.cache import keys
from app.errors import require_text, validate_url
from app.services.base import BaseService
from site_client.pages import LinkItem


class LinkService(BaseService):
    """Link list queries and mutations."""

    async def all_links(self) -> list[LinkItem]:
        return await self._query(keys.LINKS, lambda c: c.links(), [])

    async def add_link(self, text_label: str, url: str, order: int = 0) -> str:
        require_text(text_label, "label")
        validate_url(url)
        return await self._mutate("add_link", lambda c: c.add_link(text_label.strip(), url.strip(), order))

    async def update_link(self, link: LinkItem) -> None:
        require_text(link.text_label, "label")
        validate_url(link.url)
        await self._mutate("update_link", lambda c: c.update_link(link))

    async def delete_link(self, link_id: str) -> None:
        await self._mutate("delete_link", lambda c: c.delete_link(link_id))

    async def reorder_links(self, new_order: list[str]) -> None:
        await self._mutate("reorder_links", lambda c: c.reorder_links(new_order))
