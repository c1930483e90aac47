"""Page service - site-wide texts and homepage sections."""

from app.cache import keys
from app.errors import require_text
from app.services.base import BaseService
from site_client.pages import HomepageSection, SiteContent


class PageService(BaseService):
    """Site content and homepage section queries and mutations."""

    async def site_content(self) -> SiteContent | None:
        return await self._query(keys.SITE_CONTENT, lambda c: c.site_content(), None)

    async def update_site_content(self, content: SiteContent) -> None:
        """Replace the full content record."""
        await self._mutate("update_site_content", lambda c: c.update_site_content(content))

    async def update_business_title(self, title: str) -> None:
        require_text(title, "business title")
        await self._mutate("update_business_title", lambda c: c.update_business_title(title.strip()))

    # ========== Homepage sections ==========

    async def sections(self) -> list[HomepageSection]:
        return await self._query(keys.HOMEPAGE_SECTIONS, lambda c: c.homepage_sections(), [])

    async def add_section(self, section: HomepageSection) -> None:
        require_text(section.title, "section title")
        await self._mutate("add_homepage_section", lambda c: c.add_homepage_section(section))

    async def update_section(self, section: HomepageSection) -> None:
        require_text(section.title, "section title")
        await self._mutate("update_homepage_section", lambda c: c.update_homepage_section(section))

    async def delete_section(self, section_id: str) -> None:
        await self._mutate("delete_homepage_section", lambda c: c.delete_homepage_section(section_id))

    async def reorder_sections(self, new_order: list[str]) -> None:
        await self._mutate("reorder_homepage_sections", lambda c: c.reorder_homepage_sections(new_order))

    async def toggle_section(self, section_id: str, visible: bool) -> None:
        await self._mutate(
            "toggle_section_visibility",
            lambda c: c.toggle_section_visibility(section_id, visible),
        )
