"""Page content API schemas - site texts, homepage sections, links, livestreams."""

from enum import StrEnum

from pydantic import BaseModel, Field

from site_client.schemas import Time


class SiteContent(BaseModel):
    """Editable site-wide texts and section switches."""

    business_title: str = Field(alias="businessTitle", default="")
    footer_content: str = Field(alias="footerContent", default="")
    blog_title: str = Field(alias="blogTitle", default="")
    blog_description: str = Field(alias="blogDescription", default="")
    store_items_title: str = Field(alias="storeItemsTitle", default="")
    store_items_description: str = Field(alias="storeItemsDescription", default="")
    meeting_title: str = Field(alias="meetingTitle", default="")
    meeting_description: str = Field(alias="meetingDescription", default="")
    links_title: str = Field(alias="linksTitle", default="")
    links_description: str = Field(alias="linksDescription", default="")
    livestream_title: str = Field(alias="livestreamTitle", default="")
    livestream_description: str = Field(alias="livestreamDescription", default="")
    mp3_player_title: str = Field(alias="mp3PlayerTitle", default="")
    mp3_player_description: str = Field(alias="mp3PlayerDescription", default="")
    show_links_section: bool = Field(alias="showLinksSection", default=True)
    show_livestream_section: bool = Field(alias="showLivestreamSection", default=True)
    show_mp3_player_section: bool = Field(alias="showMp3PlayerSection", default=True)
    show_new_section: bool = Field(alias="showNewSection", default=False)

    class Config:
        populate_by_name = True


class SectionKind(StrEnum):
    """Homepage section kinds."""

    BLOG = "blog"
    STORE_ITEMS = "storeItems"
    MEETINGS = "meetings"
    LINKS = "links"
    LIVESTREAM = "livestream"
    MP3_PLAYER = "mp3Player"
    CUSTOM = "custom"


class SectionType(BaseModel):
    """Section kind; `custom` carries the custom section body."""

    kind: SectionKind
    custom: str | None = None


class HomepageSection(BaseModel):
    """Ordered homepage section."""

    id: str
    title: str
    description: str = ""
    order: int = 0
    section_type: SectionType = Field(alias="sectionType")
    visible: bool = True

    class Config:
        populate_by_name = True


class LinkItem(BaseModel):
    """Link list entry."""

    id: str
    text_label: str = Field(alias="textLabel")
    url: str
    order: int = 0
    visible: bool = True

    class Config:
        populate_by_name = True


class Livestream(BaseModel):
    """Livestream announcement."""

    id: str
    title: str
    description: str = ""
    start_time: Time = Field(alias="startTime")
    external_link: str = Field(alias="externalLink")
    button_label: str = Field(alias="buttonLabel", default="")
    visible: bool = True
    creation_timestamp: Time = Field(alias="creationTimestamp", default=0)

    class Config:
        populate_by_name = True
