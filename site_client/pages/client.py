"""Page content API client - site texts, homepage sections, links, livestreams."""

from site_client.base import BaseClient
from site_client.pages.schemas import HomepageSection, LinkItem, Livestream, SiteContent
from site_client.schemas import Time


class PagesClient(BaseClient):
    """Client for site content endpoints."""

    # ========== Site content ==========

    async def site_content(self) -> SiteContent:
        """GET /content - site-wide texts."""
        return SiteContent.model_validate(await self._get("content"))

    async def update_site_content(self, content: SiteContent) -> None:
        """PUT /content - full content record."""
        await self._put("content", content.model_dump(by_alias=True))

    async def update_business_title(self, title: str) -> None:
        """PUT /content/business-title."""
        await self._put("content/business-title", {"title": title})

    # ========== Homepage sections ==========

    async def homepage_sections(self) -> list[HomepageSection]:
        """GET /sections - ordered homepage sections."""
        return [HomepageSection.model_validate(s) for s in await self._get("sections")]

    async def add_homepage_section(self, section: HomepageSection) -> None:
        """POST /sections."""
        await self._post("sections", section.model_dump(by_alias=True, mode="json"))

    async def update_homepage_section(self, section: HomepageSection) -> None:
        """PUT /sections/{id}."""
        await self._put(f"sections/{section.id}", section.model_dump(by_alias=True, mode="json"))

    async def delete_homepage_section(self, section_id: str) -> None:
        """DELETE /sections/{id}."""
        await self._delete(f"sections/{section_id}")

    async def reorder_homepage_sections(self, new_order: list[str]) -> None:
        """PUT /sections/order - ids in display order."""
        await self._put("sections/order", {"order": new_order})

    async def toggle_section_visibility(self, section_id: str, visible: bool) -> None:
        """PUT /sections/{id}/visibility."""
        await self._put(f"sections/{section_id}/visibility", {"visible": visible})

    # ========== Links ==========

    async def links(self) -> list[LinkItem]:
        """GET /links - all links."""
        return [LinkItem.model_validate(link) for link in await self._get("links")]

    async def add_link(self, text_label: str, url: str, order: int) -> str:
        """POST /links - returns new link id."""
        return await self._post("links", {"textLabel": text_label, "url": url, "order": order})

    async def update_link(self, link: LinkItem) -> None:
        """PUT /links/{id}."""
        await self._put(f"links/{link.id}", link.model_dump(by_alias=True))

    async def delete_link(self, link_id: str) -> None:
        """DELETE /links/{id}."""
        await self._delete(f"links/{link_id}")

    async def reorder_links(self, new_order: list[str]) -> None:
        """PUT /links/order - ids in display order."""
        await self._put("links/order", {"order": new_order})

    # ========== Livestreams ==========

    async def livestreams(self) -> list[Livestream]:
        """GET /livestreams - all announcements."""
        return [Livestream.model_validate(s) for s in await self._get("livestreams")]

    async def livestream(self, stream_id: str) -> Livestream | None:
        """GET /livestreams/{id} - single announcement or None."""
        data = await self._get(f"livestreams/{stream_id}")
        return Livestream.model_validate(data) if data is not None else None

    async def add_livestream(
        self,
        title: str,
        start_time: Time,
        external_link: str,
        button_label: str,
        description: str,
    ) -> str:
        """POST /livestreams - returns new livestream id."""
        return await self._post(
            "livestreams",
            {
                "title": title,
                "startTime": start_time,
                "externalLink": external_link,
                "buttonLabel": button_label,
                "description": description,
            },
        )

    async def update_livestream(self, stream: Livestream) -> None:
        """PUT /livestreams/{id}."""
        await self._put(f"livestreams/{stream.id}", stream.model_dump(by_alias=True))

    async def delete_livestream(self, stream_id: str) -> None:
        """DELETE /livestreams/{id}."""
        await self._delete(f"livestreams/{stream_id}")
