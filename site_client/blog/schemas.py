"""Blog API schemas."""

from pydantic import BaseModel, Field

from site_client.schemas import ExternalBlob, Time


class EmbeddedImage(BaseModel):
    """Image embedded into a blog post body."""

    id: str
    url: ExternalBlob
    size: str = "medium"
    position: int = 0
    alt_text: str = Field(alias="altText", default="")

    class Config:
        populate_by_name = True


class EditRecord(BaseModel):
    """Previous version of a post, recorded on every edit."""

    previous_title: str = Field(alias="previousTitle")
    previous_content: str = Field(alias="previousContent")
    previous_excerpt: str = Field(alias="previousExcerpt")
    editor: str
    timestamp: Time

    class Config:
        populate_by_name = True


class BlogPost(BaseModel):
    """Blog post with attachments."""

    id: str
    title: str
    content: str
    excerpt: str = ""
    publication_date: Time = Field(alias="publicationDate", default=0)
    embedded_images: list[EmbeddedImage] = Field(alias="embeddedImages", default=[])
    associated_files: list[ExternalBlob] = Field(alias="associatedFiles", default=[])
    edit_history: list[EditRecord] = Field(alias="editHistory", default=[])

    class Config:
        populate_by_name = True
